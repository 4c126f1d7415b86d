"""Data models."""

from .ticket import Ticket, TicketCollection, TicketDataError

__all__ = ["Ticket", "TicketCollection", "TicketDataError"]
