import json

import pandas as pd

from pywc.core.formatter import ReportFormatter, export_report
from pywc.models.counts import Counts, CountReport, CountSelection

A = Counts(lines=2, words=5, chars=24, bytes=24, max_line_length=11, name="a.txt")
B = Counts(lines=0, words=2, chars=7, bytes=7, max_line_length=7, name="b.txt")


def _format(selection, rows, total=True, total_only=False):
    report = CountReport(
        selection=selection,
        rows=rows,
        total=Counts.sum(rows, name=None if total_only else "total") if total else None,
        total_only=total_only,
    )
    return ReportFormatter(selection).format_report(report)


def test_default_columns_share_the_widest_value():
    lines = _format(CountSelection.from_flags(), [A, B])
    assert lines == [
        " 2  5 24 a.txt",
        " 0  2  7 b.txt",
        " 2  7 31 total",
    ]


def test_single_count_has_no_padding():
    assert _format(CountSelection.from_flags(lines=True), [A, B]) == [
        "2 a.txt",
        "0 b.txt",
        "2 total",
    ]
    assert _format(CountSelection.from_flags(bytes=True), [A, B]) == [
        "24 a.txt",
        "7 b.txt",
        "31 total",
    ]


def test_all_counts_in_fixed_order():
    selection = CountSelection.from_flags(
        lines=True, words=True, chars=True, bytes=True, max_line_length=True
    )
    assert _format(selection, [A, B]) == [
        " 2  5 24 24 11 a.txt",
        " 0  2  7  7  7 b.txt",
        " 2  7 31 31 11 total",
    ]


def test_unnamed_row_has_no_trailing_name():
    stdin_row = Counts(lines=2, words=5, bytes=24)
    assert _format(CountSelection.from_flags(), [stdin_row], total=False) == [" 2  5 24"]


def test_total_only_prints_bare_numbers():
    assert _format(CountSelection.from_flags(), [A, B], total_only=True) == [" 2  7 31"]


def test_width_follows_largest_printed_value():
    big = Counts(lines=1, words=1, bytes=123456, name="big")
    report = CountReport(rows=[big])
    formatter = ReportFormatter(report.selection)
    assert formatter.number_width(report) == 6
    assert formatter.format_report(report) == ["     1      1 123456 big"]


def test_zero_counts_have_width_one():
    report = CountReport(rows=[Counts(name="empty")])
    assert ReportFormatter(report.selection).format_report(report) == ["0 0 0 empty"]


def _report():
    return CountReport(
        selection=CountSelection.from_flags(words=True),
        rows=[A, B],
        total=Counts.sum([A, B], name="total"),
    )


def test_export_csv(tmp_path):
    path = export_report(_report(), str(tmp_path / "out" / "report.csv"))
    df = pd.read_csv(path)
    assert list(df.columns) == ["name", "words"]
    assert df["name"].tolist() == ["a.txt", "b.txt", "total"]
    assert df["words"].tolist() == [5, 2, 7]


def test_export_json(tmp_path):
    path = export_report(_report(), str(tmp_path / "report.json"))
    data = json.loads(path.read_text())
    assert data[-1] == {"name": "total", "words": 7}
