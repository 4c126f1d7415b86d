from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv

from ..report.formatter import DEFAULT_LANGUAGE, MESSAGES

load_dotenv()

DEFAULT_ORIGIN = "VVO"
DEFAULT_DESTINATION = "TLV"
DEFAULT_OUTPUT_FILE = "output.txt"
DEFAULT_LOG_LEVEL = "INFO"


def _first_set(*values: str | None) -> str | None:
    for value in values:
        if value is not None and value.strip() != "":
            return value
    return None


def _resolve_path(path_str: str | Path | None) -> Path | None:
    if not path_str:
        return None
    return Path(path_str).expanduser().resolve()


@dataclass(slots=True)
class Settings:
    """Aggregated runtime configuration."""

    origin: str
    destination: str
    tickets_file: Path | None
    output_file: Path
    language: str = DEFAULT_LANGUAGE
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def ticket_source_label(self) -> str:
        return str(self.tickets_file) if self.tickets_file else "tickets.json"


def load_settings(
    *,
    origin: str | None = None,
    destination: str | None = None,
    tickets_file: str | Path | None = None,
    output_file: str | Path | None = None,
    language: str | None = None,
    log_level: str | None = None,
) -> Settings:
    """Load configuration from keyword overrides, then environment variables, then defaults."""

    resolved_origin = _first_set(origin, os.getenv("FLIGHT_ORIGIN"))
    resolved_destination = _first_set(destination, os.getenv("FLIGHT_DESTINATION"))
    if origin is not None and not origin.strip():
        raise ValueError("Origin must not be empty")
    if destination is not None and not destination.strip():
        raise ValueError("Destination must not be empty")

    resolved_language = (_first_set(language, os.getenv("REPORT_LANGUAGE")) or DEFAULT_LANGUAGE).lower()
    if resolved_language not in MESSAGES:
        raise ValueError(
            f"REPORT_LANGUAGE must be one of {', '.join(sorted(MESSAGES))}, got '{resolved_language}'"
        )

    resolved_tickets = _resolve_path(tickets_file) or _resolve_path(os.getenv("TICKETS_FILE"))
    resolved_output = _resolve_path(output_file) or _resolve_path(
        os.getenv("OUTPUT_FILE", DEFAULT_OUTPUT_FILE) or DEFAULT_OUTPUT_FILE
    )

    return Settings(
        origin=resolved_origin or DEFAULT_ORIGIN,
        destination=resolved_destination or DEFAULT_DESTINATION,
        tickets_file=resolved_tickets,
        output_file=resolved_output,
        language=resolved_language,
        log_level=(_first_set(log_level, os.getenv("LOG_LEVEL")) or DEFAULT_LOG_LEVEL).upper(),
    )
