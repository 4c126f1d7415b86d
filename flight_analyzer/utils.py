"""Small arithmetic helpers shared by the analysis and report code."""

from __future__ import annotations


def truncating_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """Quotient rounded toward zero and a remainder that keeps the numerator's sign.

    ``truncating_divmod(-90, 60)`` is ``(-1, -30)`` where ``divmod`` gives ``(-2, 30)``.
    """

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient, numerator - quotient * denominator
