"""
Data models for counts and count reports.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

# Fixed output order of the counters
FIELDS = ("lines", "words", "chars", "bytes", "max_line_length")

TOTAL_LABEL = "total"


class Counts(BaseModel):
    """Counters for one input, or the sum over several inputs."""

    lines: int = Field(default=0, ge=0, description="Newline count")
    words: int = Field(default=0, ge=0, description="Whitespace-delimited token count")
    chars: int = Field(default=0, ge=0, description="Decoded character count")
    bytes: int = Field(default=0, ge=0, description="Byte count")
    max_line_length: int = Field(default=0, ge=0, description="Display width of the widest line")
    name: Optional[str] = Field(None, description="Name printed after the counts")

    def __add__(self, other: "Counts") -> "Counts":
        if not isinstance(other, Counts):
            return NotImplemented
        return Counts(
            lines=self.lines + other.lines,
            words=self.words + other.words,
            chars=self.chars + other.chars,
            bytes=self.bytes + other.bytes,
            max_line_length=max(self.max_line_length, other.max_line_length),
        )

    def value(self, field: str) -> int:
        """Return one counter by name."""
        if field not in FIELDS:
            raise KeyError(field)
        return getattr(self, field)

    @classmethod
    def sum(cls, items: List["Counts"], name: Optional[str] = None) -> "Counts":
        """Sum counters; the widest line is the maximum over items."""
        total = cls()
        for item in items:
            total = total + item
        total.name = name
        return total

    class Config:
        json_schema_extra = {
            "example": {
                "lines": 2,
                "words": 5,
                "chars": 24,
                "bytes": 24,
                "max_line_length": 11,
                "name": "notes.txt"
            }
        }


class CountSelection(BaseModel):
    """Which counters get printed."""

    lines: bool = False
    words: bool = False
    chars: bool = False
    bytes: bool = False
    max_line_length: bool = False

    @classmethod
    def from_flags(
        cls,
        lines: bool = False,
        words: bool = False,
        chars: bool = False,
        bytes: bool = False,
        max_line_length: bool = False
    ) -> "CountSelection":
        """
        Build a selection from command line flags.

        With no flag set, the selection is lines, words and bytes.
        """
        if not (lines or words or chars or bytes or max_line_length):
            return cls(lines=True, words=True, bytes=True)
        return cls(
            lines=lines,
            words=words,
            chars=chars,
            bytes=bytes,
            max_line_length=max_line_length
        )

    def fields(self) -> List[str]:
        """Selected counter names, in output order."""
        return [field for field in FIELDS if getattr(self, field)]

    def is_single(self) -> bool:
        return len(self.fields()) == 1


class InputFailure(BaseModel):
    """An operand that could not be counted."""

    name: Optional[str] = None
    reason: str


class CountReport(BaseModel):
    """Result of counting a list of inputs."""

    selection: CountSelection = Field(default_factory=CountSelection.from_flags)
    rows: List[Counts] = Field(default_factory=list)
    total: Optional[Counts] = Field(None, description="Total row, when one is printed")
    total_only: bool = Field(default=False, description="Print the total without per-input rows")
    failures: List[InputFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def printed_rows(self) -> List[Counts]:
        """Rows in print order, the total last."""
        rows = [] if self.total_only else list(self.rows)
        if self.total is not None:
            rows.append(self.total)
        return rows

    def to_records(self) -> List[Dict[str, Any]]:
        """
        Convert printed rows to records.

        Returns:
            One dict per row with a `name` key and the selected counters
        """
        records = []
        for row in self.printed_rows():
            record: Dict[str, Any] = {"name": row.name}
            for field in self.selection.fields():
                record[field] = row.value(field)
            records.append(record)
        return records

    def to_dataframe(self):
        """Convert printed rows to a pandas DataFrame."""
        import pandas as pd

        columns = ["name"] + self.selection.fields()
        return pd.DataFrame(self.to_records(), columns=columns)
