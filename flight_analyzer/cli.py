from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .analysis import FlightAnalyzer
from .config import Settings, load_settings
from .report import get_messages
from .sources import TicketSourceNotFound, load_ticket_collection, write_report

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="flight-analyzer command-line interface")
    parser.add_argument("--tickets-file", type=Path, default=None, help="JSON file with a 'tickets' list")
    parser.add_argument("--origin", default=None, help="Origin airport code (default: VVO)")
    parser.add_argument("--destination", default=None, help="Destination airport code (default: TLV)")
    parser.add_argument("--language", default=None, help="Report language (en, ru)")
    parser.add_argument("--log-level", default=None, help="Logging level (INFO, DEBUG, ...)")
    subparsers = parser.add_subparsers(dest="command", required=True)
    analyze_parser = subparsers.add_parser("analyze", help="Write the route report to a file")
    analyze_parser.add_argument("--output", type=Path, default=None, help="Report file (default: output.txt)")
    subparsers.add_parser("show", help="Print the route report to stdout")
    return parser


def build_report(settings: Settings) -> str | None:
    """Run the analysis for the configured route, or return None when there is no ticket data."""

    try:
        collection = load_ticket_collection(settings.tickets_file)
    except TicketSourceNotFound as exc:
        LOGGER.error("%s", exc)
        print(get_messages(settings.language)["resource_missing"].format(source=settings.ticket_source_label))
        return None
    analyzer = FlightAnalyzer(language=settings.language)
    return analyzer.analyze(collection, settings.origin, settings.destination)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(
        origin=args.origin,
        destination=args.destination,
        tickets_file=args.tickets_file,
        output_file=getattr(args, "output", None),
        language=args.language,
        log_level=args.log_level,
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    report = build_report(settings)
    if report is None:
        return 0

    if args.command == "analyze":
        write_report(settings.output_file, report)
    elif args.command == "show":
        print(report)
    else:  # pragma: no cover - argparse enforces valid commands
        parser.error("Unknown command")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
