"""Ticket analysis: filtering, flight durations and price statistics."""

from .datetimes import DateTimeParseError, parse_local_datetime, to_epoch_millis
from .service import (
    FlightAnalyzer,
    analyze_flights,
    calculate_flight_minutes,
    calculate_median,
    calculate_price_difference,
    filter_tickets,
    min_flight_time_by_carrier,
)

__all__ = [
    "DateTimeParseError",
    "FlightAnalyzer",
    "analyze_flights",
    "calculate_flight_minutes",
    "calculate_median",
    "calculate_price_difference",
    "filter_tickets",
    "min_flight_time_by_carrier",
    "parse_local_datetime",
    "to_epoch_millis",
]
