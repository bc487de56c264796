"""Reading GMD documents from the filesystem."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from give_me_diet.errors import LogSourceError

_logger = logging.getLogger(__name__)


@dataclass
class LogFileReader:
    """Reads log files as text."""

    encoding: str = "utf-8"

    def read(self, path: Path) -> str:
        """Return the contents of a log file."""
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise LogSourceError(str(path), exc) from exc

    def read_all(self, paths: Iterable[Path]) -> list[tuple[str, str]]:
        """Read several log files as (path, text) pairs in the given order.

        A file listed twice is read twice. Any failure fails the batch.
        """
        documents: list[tuple[str, str]] = []
        for path in paths:
            documents.append((str(path), self.read(path)))
            _logger.debug("Read log file %s", path)
        return documents
