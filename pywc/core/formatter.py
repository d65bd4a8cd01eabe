"""
Column layout of count reports, and report export.
"""
from pathlib import Path
from typing import List

from pywc.models.counts import Counts, CountReport, CountSelection
from pywc.utils.logger import get_logger

logger = get_logger("formatter")


class ReportFormatter:
    """
    Lay out counts in right-justified columns.

    All fields share one width, the number of digits of the largest value
    printed. When exactly one counter is selected it is printed without
    padding.
    """

    def __init__(self, selection: CountSelection):
        self.selection = selection
        self.fields = selection.fields()

    def number_width(self, report: CountReport) -> int:
        """Width shared by every printed field."""
        if self.selection.is_single():
            return 1

        largest = 0
        for row in report.printed_rows():
            for field in self.fields:
                largest = max(largest, row.value(field))
        return len(str(largest))

    def format_row(self, counts: Counts, width: int) -> str:
        line = " ".join(str(counts.value(field)).rjust(width) for field in self.fields)
        if counts.name is not None:
            line = f"{line} {counts.name}"
        return line

    def format_report(self, report: CountReport) -> List[str]:
        """
        Format every printed row.

        Args:
            report: Report to format

        Returns:
            Output lines without trailing newlines
        """
        width = self.number_width(report)
        return [self.format_row(row, width) for row in report.printed_rows()]


def export_report(report: CountReport, output_path: str) -> Path:
    """
    Save a report as JSON (for a .json suffix) or CSV (anything else).

    Args:
        report: Report to save
        output_path: Destination file

    Returns:
        Path written
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = report.to_dataframe()
    if path.suffix.lower() == ".json":
        df.to_json(path, orient="records", indent=2)
    else:
        df.to_csv(path, index=False)

    logger.info(f"Report saved to: {path}")
    return path
