"""
Exceptions raised by pywc.

Errors that derive from WcError are expected failures the user can fix
(a missing file, an invalid option combination, a broken settings file).
The command line prints them as one-line messages. Anything else is a bug
and propagates with its traceback.
"""
from typing import Optional


class WcError(Exception):
    """Base class for user-facing errors."""
    pass


class InputError(WcError):
    """An input operand could not be opened or read."""

    def __init__(self, name: Optional[str], reason: str):
        self.name = name
        self.reason = reason
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """Message in the conventional `NAME: REASON` shape."""
        if self.name:
            return f"{self.name}: {self.reason}"
        return self.reason


class UsageError(WcError):
    """Options that cannot be used together."""
    pass


class ConfigError(WcError):
    """Settings file missing or invalid."""
    pass


__all__ = ["WcError", "InputError", "UsageError", "ConfigError"]
