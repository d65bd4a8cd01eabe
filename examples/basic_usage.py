"""
Basic usage examples for pywc.
"""
import io
import tempfile
from pathlib import Path

from pywc import (
    CountEngine,
    CountSelection,
    ReportFormatter,
    WcSettings,
    WordCounter,
    resolve_operands,
)


def example_1_single_stream():
    """Example 1: Count an in-memory stream."""
    print("=" * 60)
    print("Example 1: Counting a Stream")
    print("=" * 60)

    counter = WordCounter()
    counts = counter.count_stream(io.BytesIO("héllo wörld\n日本語\n".encode("utf-8")))

    print(f"\nLines:           {counts.lines}")
    print(f"Words:           {counts.words}")
    print(f"Characters:      {counts.chars}")
    print(f"Bytes:           {counts.bytes}")
    print(f"Max line length: {counts.max_line_length}")
    print()


def example_2_several_files():
    """Example 2: Count files and print a report like wc."""
    print("=" * 60)
    print("Example 2: Several Files")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        first = Path(tmp) / "first.txt"
        second = Path(tmp) / "second.txt"
        first.write_text("one two three\nfour\n", encoding="utf-8")
        second.write_text("a\tb\n" * 100, encoding="utf-8")

        engine = CountEngine(WcSettings(tab_width=4))
        selection = CountSelection.from_flags(lines=True, words=True, max_line_length=True)
        report = engine.run(resolve_operands([str(first), str(second)]), selection)

        print()
        for line in ReportFormatter(selection).format_report(report):
            print(line)

        print("\nAs a DataFrame:")
        print(report.to_dataframe())
    print()


if __name__ == "__main__":
    example_1_single_stream()
    example_2_several_files()
