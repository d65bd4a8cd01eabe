"""
Command line interface: pywc [OPTION]... [FILE]...
"""
import argparse
import sys
from typing import List, Optional

from pywc import __version__
from pywc.config_manager import LOG_LEVELS, load_config
from pywc.core.engine import TOTAL_MODES, CountEngine
from pywc.core.formatter import ReportFormatter, export_report
from pywc.core.inputs import resolve_operands
from pywc.errors import UsageError, WcError
from pywc.models.counts import CountSelection
from pywc.utils.logger import get_logger, setup_logger

PROG = "pywc"

logger = get_logger("cli")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Print newline, word, and byte counts for each FILE, and a total line "
            "if more than one FILE is specified. With no FILE, or when FILE is -, "
            "read standard input."
        ),
    )
    p.add_argument("files", nargs="*", metavar="FILE", help="a file to count (default: stdin)")
    p.add_argument("-c", "--bytes", action="store_true", help="print the byte counts")
    p.add_argument("-m", "--chars", action="store_true", help="print the character counts")
    p.add_argument("-l", "--lines", action="store_true", help="print the newline counts")
    p.add_argument("-w", "--words", action="store_true", help="print the word counts")
    p.add_argument(
        "-L", "--max-line-length",
        action="store_true",
        help="print the maximum display width",
    )
    p.add_argument(
        "--files0-from",
        metavar="F",
        help="read input from the files specified by NUL-terminated names in file F; "
             "if F is - then read names from standard input",
    )
    p.add_argument(
        "--total",
        choices=TOTAL_MODES,
        default="auto",
        metavar="WHEN",
        help="when to print a line with total counts: auto, always, only, never",
    )
    p.add_argument("--export", metavar="PATH", help="also save the report as CSV or JSON (.json)")
    p.add_argument("--config", metavar="PATH", help="YAML settings file")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        metavar="LEVEL",
        help="diagnostics level written to stderr (default: WARNING)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _selection(ns: argparse.Namespace) -> CountSelection:
    return CountSelection.from_flags(
        lines=ns.lines,
        words=ns.words,
        chars=ns.chars,
        bytes=ns.bytes,
        max_line_length=ns.max_line_length,
    )


def _error(message: str) -> None:
    sys.stderr.write(f"{PROG}: {message}\n")


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    ns = parser.parse_args(argv)

    try:
        settings = load_config(ns.config)
    except WcError as e:
        _error(str(e))
        return 1

    setup_logger(ns.log_level or settings.log_level, settings.log_file)
    logger.debug(f"Settings: {settings}")

    try:
        sources = resolve_operands(ns.files, ns.files0_from)
    except UsageError as e:
        parser.error(str(e))
    except WcError as e:
        _error(str(e))
        return 1

    engine = CountEngine(settings)
    report = engine.run(sources, _selection(ns), total_mode=ns.total)

    for failure in report.failures:
        _error(f"{failure.name}: {failure.reason}" if failure.name else failure.reason)

    out = sys.stdout
    for line in ReportFormatter(report.selection).format_report(report):
        out.write(line + "\n")
    out.flush()

    if ns.export:
        export_report(report, ns.export)

    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
