"""
Resolution of input operands into readable sources.
"""
import os
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator, List, Optional
from pydantic import BaseModel, Field

from pywc.errors import InputError, UsageError
from pywc.utils.logger import get_logger

logger = get_logger("inputs")

STDIN_NAME = "-"

ZERO_LENGTH_NAME = "invalid zero-length file name"
DASH_FROM_STDIN = "when reading file names from standard input, no file name of '-' allowed"


class InputSource(BaseModel):
    """One input to count."""

    name: Optional[str] = Field(None, description="Name printed after the counts; None hides it")
    path: Optional[str] = Field(None, description="Path to open; None reads standard input")
    error: Optional[str] = Field(None, description="Known failure reported instead of reading")

    @property
    def is_stdin(self) -> bool:
        return self.path is None

    @classmethod
    def stdin(cls, name: Optional[str] = None) -> "InputSource":
        return cls(name=name, path=None)

    @classmethod
    def from_operand(cls, operand: str) -> "InputSource":
        """Source for a command line operand; `-` means standard input."""
        if operand == STDIN_NAME:
            return cls.stdin(name=STDIN_NAME)
        return cls(name=operand, path=operand)


def read_files0(files0_from: str, stdin: Optional[BinaryIO] = None) -> List[str]:
    """
    Read NUL-terminated file names.

    Args:
        files0_from: File holding the names, or `-` for standard input
        stdin: Binary stream used for `-` (defaults to sys.stdin)

    Returns:
        File names in order; a trailing NUL does not add an empty name
    """
    if files0_from == STDIN_NAME:
        stream = stdin if stdin is not None else sys.stdin.buffer
        data = stream.read()
    else:
        try:
            with open(files0_from, "rb") as f:
                data = f.read()
        except OSError as e:
            raise InputError(
                files0_from, f"cannot open for reading: {e.strerror or e}"
            ) from e

    if not data:
        return []

    names = data.split(b"\0")
    if data.endswith(b"\0"):
        names.pop()
    return [os.fsdecode(name) for name in names]


def resolve_operands(
    files: Optional[List[str]] = None,
    files0_from: Optional[str] = None,
    stdin: Optional[BinaryIO] = None
) -> List[InputSource]:
    """
    Turn command line operands into input sources.

    Args:
        files: File operands as given on the command line
        files0_from: Read operands from this file instead (`-` for stdin)
        stdin: Binary stream used when the list comes from standard input

    Returns:
        List of InputSource objects, in order
    """
    files = list(files or [])

    if files0_from is not None:
        if files:
            raise UsageError(
                f"extra operand '{files[0]}'; "
                "file operands cannot be combined with --files0-from"
            )
        names = read_files0(files0_from, stdin=stdin)
        logger.debug(f"Read {len(names)} names from {files0_from}")

        sources = []
        for name in names:
            if not name:
                sources.append(InputSource(name=None, path=name, error=ZERO_LENGTH_NAME))
            elif name == STDIN_NAME and files0_from == STDIN_NAME:
                sources.append(InputSource(name=name, path=name, error=DASH_FROM_STDIN))
            else:
                sources.append(InputSource.from_operand(name))
        return sources

    if not files:
        return [InputSource.stdin()]

    return [InputSource.from_operand(operand) for operand in files]


@contextmanager
def open_source(source: InputSource, stdin: Optional[BinaryIO] = None) -> Iterator[BinaryIO]:
    """
    Open a source for binary reading.

    Standard input is yielded as is and never closed.

    Raises:
        InputError: The source cannot be opened
    """
    if source.error:
        raise InputError(source.name, source.error)

    if source.is_stdin:
        yield stdin if stdin is not None else sys.stdin.buffer
        return

    try:
        handle = open(source.path, "rb")
    except OSError as e:
        raise InputError(source.name, e.strerror or str(e)) from e

    with handle:
        yield handle
