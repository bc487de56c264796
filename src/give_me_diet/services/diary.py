"""Diary service tying parsing, merging and summarizing together."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from give_me_diet.domain.log import GMDLog
from give_me_diet.domain.summary import GMDSummary
from give_me_diet.errors import GrammarError, LogSourceError
from give_me_diet.parser.grammar import parse_log
from give_me_diet.services.calculator import SummaryCalculator

_logger = logging.getLogger(__name__)


@dataclass
class DiaryService:
    """Service that turns GMD documents into summaries."""

    calculator: SummaryCalculator
    strict_separators: bool = False

    def parse_document(self, text: str, source: str) -> GMDLog:
        """Parse one document, naming its source on failure."""
        try:
            return parse_log(text, strict=self.strict_separators)
        except GrammarError as exc:
            raise LogSourceError(source, exc) from exc

    def summarize_documents(
        self, documents: Iterable[tuple[str, str]]
    ) -> GMDSummary:
        """Parse (source, text) pairs and summarize them as one merged log."""
        logs = [self.parse_document(text, source) for source, text in documents]
        return self.summarize_logs(logs)

    def summarize_logs(self, logs: Iterable[GMDLog]) -> GMDSummary:
        """Merge logs by earliest start day and summarize the result."""
        logs = list(logs)
        merged = GMDLog.merged(logs)
        _logger.debug(
            "Summarizing %s logs with %s entries", len(logs), len(merged.entries)
        )
        return self.calculator.summarize(merged)
