from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Tuple

SCHEDULE_FIELDS = ("departure_date", "departure_time", "arrival_date", "arrival_time")


class TicketDataError(ValueError):
    """Raised when ticket JSON does not have the expected shape."""


def _parse_str(payload: dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TicketDataError(f"Ticket field '{key}' must be a string, got {type(value).__name__}")
    return value


def _parse_price(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise TicketDataError(f"Ticket price must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise TicketDataError(f"Ticket price must be an integer, got {value!r}") from exc
    raise TicketDataError(f"Ticket price must be an integer, got {value!r}")


@dataclass(slots=True, frozen=True)
class Ticket:
    """Single flight offer as it appears in the tickets JSON."""

    origin: str | None = None
    destination: str | None = None
    carrier: str | None = None
    departure_date: str | None = None
    departure_time: str | None = None
    arrival_date: str | None = None
    arrival_time: str | None = None
    price: int | None = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Ticket":
        if not isinstance(payload, dict):
            raise TicketDataError("Each ticket must be a JSON object")
        return cls(
            origin=_parse_str(payload, "origin"),
            destination=_parse_str(payload, "destination"),
            carrier=_parse_str(payload, "carrier"),
            departure_date=_parse_str(payload, "departure_date"),
            departure_time=_parse_str(payload, "departure_time"),
            arrival_date=_parse_str(payload, "arrival_date"),
            arrival_time=_parse_str(payload, "arrival_time"),
            price=_parse_price(payload.get("price")),
        )

    def has_schedule(self) -> bool:
        return all(getattr(self, name) for name in SCHEDULE_FIELDS)

    def departure_label(self) -> str:
        return f"{self.departure_date} {self.departure_time}"


@dataclass(slots=True, frozen=True)
class TicketCollection:
    """Ordered, read-only list of tickets loaded from one JSON document."""

    tickets: Tuple[Ticket, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, payload: Any) -> "TicketCollection":
        if not isinstance(payload, dict):
            raise TicketDataError("Tickets JSON must be an object with a 'tickets' list")
        items = payload.get("tickets")
        if not isinstance(items, list):
            raise TicketDataError("Tickets JSON must contain a 'tickets' list")
        return cls(tickets=tuple(Ticket.from_dict(item) for item in items))

    @classmethod
    def of(cls, tickets: Iterable[Ticket]) -> "TicketCollection":
        return cls(tickets=tuple(tickets))

    def __iter__(self) -> Iterator[Ticket]:
        return iter(self.tickets)

    def __len__(self) -> int:
        return len(self.tickets)
