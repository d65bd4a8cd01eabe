# ============================================================================
# pywc/models/__init__.py
# ============================================================================
"""Data models."""
from pywc.models.counts import (
    FIELDS,
    Counts,
    CountSelection,
    CountReport,
    InputFailure
)

__all__ = [
    'FIELDS',
    'Counts',
    'CountSelection',
    'CountReport',
    'InputFailure',
]
