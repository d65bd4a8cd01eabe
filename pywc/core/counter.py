"""
Single-pass counting of lines, words, characters, bytes and line width.
"""
import codecs
import io
from typing import BinaryIO, Optional

from pywc.config_manager import lookup_text_encoding
from pywc.core.width import char_width, next_tab_stop
from pywc.models.counts import Counts
from pywc.utils.logger import get_logger

logger = get_logger("counter")

# Characters that end the current display line
LINE_BREAKS = "\n\r\f"

# Decoding error handler: one lone surrogate U+DC00..U+DCFF per bad byte
ESCAPE_ERRORS = "pywc-escape"


def _escape_bad_bytes(exc):
    if not isinstance(exc, UnicodeDecodeError):
        raise exc
    bad = exc.object[exc.start:exc.end]
    return "".join(chr(0xDC00 + b) for b in bad), exc.end


codecs.register_error(ESCAPE_ERRORS, _escape_bad_bytes)


def _is_escaped_byte(ch: str) -> bool:
    """True for a byte the decoder could not decode."""
    return "\udc00" <= ch <= "\udcff"


class _ScanState:
    """Counters carried from one decoded chunk to the next."""

    __slots__ = ("lines", "words", "chars", "column", "widest", "in_word")

    def __init__(self):
        self.lines = 0
        self.words = 0
        self.chars = 0
        self.column = 0
        self.widest = 0
        self.in_word = False


class WordCounter:
    """
    Count the five `wc` counters of a byte stream in one pass.

    Bytes are decoded incrementally, so a multibyte character split across
    two reads is still a single character. Bytes that cannot be decoded
    are not characters; each one is part of whatever word surrounds it and
    takes no columns.
    """

    def __init__(
        self,
        encoding: str = "utf-8",
        tab_width: int = 8,
        chunk_size: int = 65536
    ):
        """
        Initialize the counter.

        Args:
            encoding: Character encoding of the input
            tab_width: Columns between tab stops
            chunk_size: Bytes read per call
        """
        if tab_width < 1:
            raise ValueError("tab_width must be at least 1")
        if chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")

        self.encoding = lookup_text_encoding(encoding)
        self.tab_width = tab_width
        self.chunk_size = chunk_size

    def count_stream(self, stream: BinaryIO, name: Optional[str] = None) -> Counts:
        """
        Count a binary stream, reading it exactly once.

        Args:
            stream: Readable binary stream
            name: Name printed after the counts

        Returns:
            Counts for the stream
        """
        decoder = codecs.getincrementaldecoder(self.encoding)(errors=ESCAPE_ERRORS)
        state = _ScanState()
        total_bytes = 0

        while True:
            chunk = stream.read(self.chunk_size)
            if not chunk:
                break
            total_bytes += len(chunk)
            self._scan(decoder.decode(chunk), state)

        self._scan(decoder.decode(b"", final=True), state)

        # A last line without a newline still has a width
        widest = max(state.widest, state.column)

        logger.debug(
            f"Counted {name or '<stdin>'}: {state.lines} lines, "
            f"{state.words} words, {total_bytes} bytes"
        )

        return Counts(
            lines=state.lines,
            words=state.words,
            chars=state.chars,
            bytes=total_bytes,
            max_line_length=widest,
            name=name
        )

    def count_bytes(self, data: bytes, name: Optional[str] = None) -> Counts:
        """Count an in-memory buffer."""
        return self.count_stream(io.BytesIO(data), name=name)

    def count_text(self, text: str, name: Optional[str] = None) -> Counts:
        """Count a string as it would be stored in the configured encoding."""
        return self.count_bytes(text.encode(self.encoding), name=name)

    def _scan(self, text: str, state: _ScanState):
        tab_width = self.tab_width

        for ch in text:
            if _is_escaped_byte(ch):
                if not state.in_word:
                    state.words += 1
                    state.in_word = True
                continue

            state.chars += 1

            if ch in LINE_BREAKS:
                if ch == "\n":
                    state.lines += 1
                if state.column > state.widest:
                    state.widest = state.column
                state.column = 0
                state.in_word = False
            elif ch == "\t":
                state.column = next_tab_stop(state.column, tab_width)
                state.in_word = False
            elif ch.isspace():
                state.column += char_width(ch)
                state.in_word = False
            else:
                state.column += char_width(ch)
                if not state.in_word:
                    state.words += 1
                    state.in_word = True
