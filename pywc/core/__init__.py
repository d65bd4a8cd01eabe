# ============================================================================
# pywc/core/__init__.py
# ============================================================================
"""Core counting components."""
from pywc.core.counter import WordCounter
from pywc.core.engine import CountEngine, TOTAL_MODES
from pywc.core.formatter import ReportFormatter, export_report
from pywc.core.inputs import InputSource, open_source, read_files0, resolve_operands

__all__ = [
    'WordCounter',
    'CountEngine',
    'TOTAL_MODES',
    'ReportFormatter',
    'export_report',
    'InputSource',
    'open_source',
    'read_files0',
    'resolve_operands',
]
