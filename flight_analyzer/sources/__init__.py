"""Ticket input and report output."""

from .tickets import TicketSourceNotFound, load_ticket_collection, parse_ticket_collection, write_report

__all__ = ["TicketSourceNotFound", "load_ticket_collection", "parse_ticket_collection", "write_report"]
