"""Dependency container wiring for the application."""

from dataclasses import dataclass

from give_me_diet.adapters.log_files import LogFileReader
from give_me_diet.config import Settings
from give_me_diet.services.calculator import SummaryCalculator
from give_me_diet.services.diary import DiaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    calculator: SummaryCalculator
    diary_service: DiaryService
    log_file_reader: LogFileReader


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    calculator = SummaryCalculator()
    diary_service = DiaryService(
        calculator=calculator,
        strict_separators=resolved_settings.strict_separators,
    )
    return AppContainer(
        settings=resolved_settings,
        calculator=calculator,
        diary_service=diary_service,
        log_file_reader=LogFileReader(),
    )
