# ============================================================================
# pywc/utils/__init__.py
# ============================================================================
"""Utility modules."""
from pywc.utils.logger import setup_logger, get_logger

__all__ = [
    'setup_logger',
    'get_logger',
]
