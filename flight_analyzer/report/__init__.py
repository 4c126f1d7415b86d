"""Report rendering helpers."""

from .formatter import MESSAGES, format_duration, format_report, get_messages

__all__ = ["MESSAGES", "format_duration", "format_report", "get_messages"]
