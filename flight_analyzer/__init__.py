"""Per-route flight ticket statistics: shortest flight per carrier and mean/median price gap."""

from .analysis import DateTimeParseError, FlightAnalyzer, analyze_flights
from .models import Ticket, TicketCollection, TicketDataError

__version__ = "1.0.0"

__all__ = [
    "DateTimeParseError",
    "FlightAnalyzer",
    "Ticket",
    "TicketCollection",
    "TicketDataError",
    "analyze_flights",
]
