"""
Command line entry point.

Usage:
    give-me-diet diary.gmd [more.gmd ...]
    give-me-diet --format json diary.gmd
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from give_me_diet.api.summary_models import SummaryResponse
from give_me_diet.app_logging import configure_logging
from give_me_diet.config import Settings
from give_me_diet.containers import build_container
from give_me_diet.errors import GmdError
from give_me_diet.services.report import build_table, render_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="give-me-diet",
        description="Summarize primitive products eaten per day in GMD logs",
    )
    parser.add_argument("files", nargs="+", type=Path, help="GMD log files")
    parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Require line breaks between entries",
    )
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    if args.strict is not None:
        settings = settings.model_copy(update={"strict_separators": args.strict})
    configure_logging(args.log_level or settings.log_level)

    container = build_container(settings)
    try:
        documents = container.log_file_reader.read_all(args.files)
        summary = container.diary_service.summarize_documents(documents)
    except GmdError as exc:
        print(f"Error: file(s) corrupted: {exc}", file=sys.stderr)
        return 1

    if args.format == "json":
        response = SummaryResponse.from_summary(summary, settings.empty_cell)
        print(response.model_dump_json(indent=2))
    else:
        print(render_table(build_table(summary, settings.empty_cell)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
