"""
Counting engine that runs the counter over every input and builds the report.
"""
from typing import BinaryIO, List, Optional

from pywc.config_manager import WcSettings
from pywc.core.counter import WordCounter
from pywc.core.inputs import InputSource, open_source
from pywc.errors import InputError
from pywc.models.counts import TOTAL_LABEL, Counts, CountReport, CountSelection, InputFailure
from pywc.utils.logger import get_logger

logger = get_logger("engine")

# When the total line is printed
TOTAL_MODES = ("auto", "always", "only", "never")


class CountEngine:
    """
    Count a list of inputs in order.

    Inputs that fail are recorded in the report and skipped; they do not
    stop the remaining inputs from being counted.
    """

    def __init__(self, settings: Optional[WcSettings] = None, stdin: Optional[BinaryIO] = None):
        """
        Initialize the engine.

        Args:
            settings: Counting settings (defaults when omitted)
            stdin: Binary stream read for standard input sources
        """
        self.settings = settings or WcSettings()
        self.stdin = stdin
        self.counter = WordCounter(
            encoding=self.settings.encoding,
            tab_width=self.settings.tab_width,
            chunk_size=self.settings.chunk_size
        )

    def count_source(self, source: InputSource) -> Counts:
        """
        Count one source.

        Raises:
            InputError: The source cannot be opened or read
        """
        with open_source(source, stdin=self.stdin) as stream:
            try:
                return self.counter.count_stream(stream, name=source.name)
            except OSError as e:
                raise InputError(source.name, e.strerror or str(e)) from e
            except UnicodeDecodeError as e:
                raise InputError(source.name, str(e)) from e

    def run(
        self,
        sources: List[InputSource],
        selection: Optional[CountSelection] = None,
        total_mode: str = "auto"
    ) -> CountReport:
        """
        Count every source and build the report.

        Args:
            sources: Inputs in print order
            selection: Counters to report (the `wc` default when omitted)
            total_mode: auto, always, only or never

        Returns:
            CountReport with one row per counted source
        """
        if total_mode not in TOTAL_MODES:
            raise ValueError(f"Unknown total mode: {total_mode}")

        report = CountReport(
            selection=selection or CountSelection.from_flags(),
            total_only=(total_mode == "only")
        )

        for source in sources:
            try:
                report.rows.append(self.count_source(source))
            except InputError as e:
                logger.debug(f"Skipping input: {e.message}")
                report.failures.append(InputFailure(name=e.name, reason=e.reason))

        if self._wants_total(total_mode, len(sources)):
            # Failed inputs contribute nothing to the total
            name = None if total_mode == "only" else TOTAL_LABEL
            report.total = Counts.sum(report.rows, name=name)

        logger.debug(
            f"Counted {len(report.rows)} of {len(sources)} inputs, "
            f"{len(report.failures)} failed"
        )
        return report

    @staticmethod
    def _wants_total(total_mode: str, operand_count: int) -> bool:
        if total_mode == "auto":
            return operand_count > 1
        return total_mode in ("always", "only")
