from __future__ import annotations

from typing import List, Mapping

from ..utils import truncating_divmod


MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "min_time_header": "Minimum flight time between {origin} and {destination} for each carrier:",
        "price_header": "Difference between average price and median for flights between {origin} and {destination}:",
        "duration": "{hours} hours {minutes} minutes",
        "no_tickets": "No matching tickets found.",
        "no_prices": "Unable to calculate the difference between average price and median.",
        "resource_missing": "Ticket source {source} not found.",
    },
    "ru": {
        "min_time_header": "Минимальное время полета между {origin} и {destination} для каждого авиаперевозчика:",
        "price_header": "Разница между средней ценой и медианой для полета между {origin} и {destination}:",
        "duration": "{hours} часов {minutes} минут",
        "no_tickets": "Не найдены подходящие билеты.",
        "no_prices": "Не удалось рассчитать разницу между средней ценой и медианой.",
        "resource_missing": "Ресурс {source} не найден.",
    },
}

DEFAULT_LANGUAGE = "en"


def get_messages(language: str = DEFAULT_LANGUAGE) -> Mapping[str, str]:
    try:
        return MESSAGES[language]
    except KeyError:
        raise ValueError(
            f"Unsupported report language '{language}' (expected one of: {', '.join(sorted(MESSAGES))})"
        ) from None


def format_duration(total_minutes: int, messages: Mapping[str, str] | None = None) -> str:
    catalogue = messages or get_messages()
    hours, minutes = truncating_divmod(total_minutes, 60)
    return catalogue["duration"].format(hours=hours, minutes=minutes)


def format_report(
    origin: str,
    destination: str,
    carrier_minutes: Mapping[str, int],
    price_difference: float | None,
    *,
    messages: Mapping[str, str] | None = None,
) -> str:
    """Render both report sections; the caller handles the empty-result case."""

    catalogue = messages or get_messages()
    lines: List[str] = [catalogue["min_time_header"].format(origin=origin, destination=destination)]
    for carrier, minutes in carrier_minutes.items():
        lines.append(f"{carrier}: {format_duration(minutes, catalogue)}")

    # carrier block ends with a newline, then the blank-line separator
    lines.append("")
    lines.append("")
    lines.append(catalogue["price_header"].format(origin=origin, destination=destination))
    if price_difference is None:
        lines.append(catalogue["no_prices"])
    else:
        lines.append(str(price_difference))
    return "\n".join(lines)
