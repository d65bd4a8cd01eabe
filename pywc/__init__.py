"""
pywc: line, word, character and byte counting in the manner of wc.

Main exports for easy access.
"""

# Version
__version__ = "0.1.0"

# Core components
from pywc.core.counter import WordCounter
from pywc.core.engine import CountEngine
from pywc.core.formatter import ReportFormatter, export_report
from pywc.core.inputs import InputSource, resolve_operands
from pywc.config_manager import WcSettings, load_config

# Models
from pywc.models.counts import (
    Counts,
    CountSelection,
    CountReport,
    InputFailure,
)

# Errors
from pywc.errors import WcError, InputError, UsageError, ConfigError

# Utilities
from pywc.utils.logger import setup_logger

__all__ = [
    # Core
    "WordCounter",
    "CountEngine",
    "ReportFormatter",
    "export_report",
    "InputSource",
    "resolve_operands",

    # Config
    "WcSettings",
    "load_config",

    # Models
    "Counts",
    "CountSelection",
    "CountReport",
    "InputFailure",

    # Errors
    "WcError",
    "InputError",
    "UsageError",
    "ConfigError",

    # Utils
    "setup_logger",

    # Version
    "__version__",
]
