from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Sequence

from ..models.ticket import Ticket, TicketDataError
from ..report.formatter import DEFAULT_LANGUAGE, format_report, get_messages
from ..utils import truncating_divmod
from .datetimes import parse_local_datetime, to_epoch_millis

LOGGER = logging.getLogger(__name__)

_MILLIS_PER_MINUTE = 60_000


def filter_tickets(tickets: Iterable[Ticket], origin: str, destination: str) -> List[Ticket]:
    """Keep tickets on the exact route that carry all four schedule fields."""

    source = list(tickets)
    filtered = [
        ticket
        for ticket in source
        if ticket.origin == origin and ticket.destination == destination and ticket.has_schedule()
    ]
    LOGGER.debug("Kept %d of %d tickets for %s -> %s", len(filtered), len(source), origin, destination)
    return filtered


def calculate_flight_minutes(ticket: Ticket) -> int:
    """Whole minutes between departure and arrival; negative when arrival is earlier."""

    departure = to_epoch_millis(parse_local_datetime(ticket.departure_date, ticket.departure_time))
    arrival = to_epoch_millis(parse_local_datetime(ticket.arrival_date, ticket.arrival_time))
    return truncating_divmod(arrival - departure, _MILLIS_PER_MINUTE)[0]


def min_flight_time_by_carrier(tickets: Iterable[Ticket]) -> Dict[str, int]:
    """Shortest flight per carrier, carriers in order of first appearance.

    On equal durations the earliest ticket wins, which only matters to callers
    that track the ticket itself; the reported minutes are the same.
    A ticket without a carrier cannot be grouped and raises :class:`TicketDataError`.
    """

    shortest: Dict[str, int] = {}
    for ticket in tickets:
        if ticket.carrier is None:
            raise TicketDataError(
                f"Ticket {ticket.origin} -> {ticket.destination} departing {ticket.departure_label()} has no carrier"
            )
        minutes = calculate_flight_minutes(ticket)
        current = shortest.get(ticket.carrier)
        if current is None or minutes < current:
            shortest[ticket.carrier] = minutes
    return shortest


def calculate_median(prices: Sequence[int]) -> float:
    """Median with the even-count midpoint rounded toward zero before widening.

    ``[100, 101]`` gives ``100.0``, not ``100.5``. Reports downstream depend on
    this value, so keep it until the change is agreed.
    """

    if not prices:
        raise ValueError("Cannot compute the median of an empty price list")
    ordered = sorted(prices)
    size = len(ordered)
    middle = size // 2
    if size % 2 == 0:
        return float(truncating_divmod(ordered[middle - 1] + ordered[middle], 2)[0])
    return float(ordered[middle])


def calculate_price_difference(tickets: Iterable[Ticket]) -> float | None:
    prices: List[int] = []
    for ticket in tickets:
        if ticket.price is None:
            LOGGER.warning(
                "Skipping %s ticket %s -> %s departing %s: no price",
                ticket.carrier,
                ticket.origin,
                ticket.destination,
                ticket.departure_label(),
            )
            continue
        prices.append(ticket.price)
    if not prices:
        return None
    mean = sum(prices) / len(prices)
    return mean - calculate_median(prices)


@dataclass(slots=True)
class FlightAnalyzer:
    """Builds the per-route report: shortest flight per carrier and mean/median gap."""

    language: str = DEFAULT_LANGUAGE
    messages: Mapping[str, str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.messages = get_messages(self.language)

    def analyze(self, tickets: Iterable[Ticket], origin: str, destination: str) -> str:
        relevant = filter_tickets(tickets, origin, destination)
        if not relevant:
            LOGGER.info("No tickets match %s -> %s", origin, destination)
            return self.messages["no_tickets"]

        carrier_minutes = min_flight_time_by_carrier(relevant)
        price_difference = calculate_price_difference(relevant)
        LOGGER.info(
            "Analyzed %d tickets across %d carriers for %s -> %s",
            len(relevant),
            len(carrier_minutes),
            origin,
            destination,
        )
        return format_report(
            origin,
            destination,
            carrier_minutes,
            price_difference,
            messages=self.messages,
        )


def analyze_flights(
    tickets: Iterable[Ticket],
    origin: str,
    destination: str,
    *,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    return FlightAnalyzer(language=language).analyze(tickets, origin, destination)
