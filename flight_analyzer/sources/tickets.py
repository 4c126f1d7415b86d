from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from ..models.ticket import TicketCollection, TicketDataError

LOGGER = logging.getLogger(__name__)

BUNDLED_PACKAGE = "flight_analyzer.resources"
BUNDLED_TICKETS = "tickets.json"


class TicketSourceNotFound(FileNotFoundError):
    """Raised when neither the configured file nor the bundled resource exists."""


def _read_bundled() -> str:
    resource = resources.files(BUNDLED_PACKAGE).joinpath(BUNDLED_TICKETS)
    if not resource.is_file():
        raise TicketSourceNotFound(f"Bundled resource {BUNDLED_TICKETS} is missing")
    return resource.read_text(encoding="utf-8")


def _read_file(path: Path) -> str:
    if not path.is_file():
        raise TicketSourceNotFound(f"Tickets file {path} does not exist")
    return path.read_text(encoding="utf-8")


def parse_ticket_collection(raw: str) -> TicketCollection:
    try:
        payload: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TicketDataError(f"Tickets JSON is malformed: {exc}") from exc
    return TicketCollection.from_dict(payload)


def load_ticket_collection(path: str | Path | None = None) -> TicketCollection:
    """Read tickets from ``path``, or from the packaged sample when no path is given."""

    if path is None:
        raw = _read_bundled()
        label = BUNDLED_TICKETS
    else:
        resolved = Path(path)
        raw = _read_file(resolved)
        label = str(resolved)
    collection = parse_ticket_collection(raw)
    LOGGER.info("Loaded %d tickets from %s", len(collection), label)
    return collection


def write_report(path: str | Path, content: str) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        handle.write(content)
    LOGGER.info("Report written to %s", target)
    return target
