"""Formatting helpers for cost and schedule output.

Amounts are Brazilian reais in pt-BR notation ('R$ 12.437,89'), the way the
price sheets this tool replaces were written.
"""

from __future__ import annotations

_PT_BR_SEPARATORS = str.maketrans(",.", ".,")


def _pt_br_number(value: float, decimals: int) -> str:
    return f"{value:,.{decimals}f}".translate(_PT_BR_SEPARATORS)


def format_currency(amount: float) -> str:
    """Format a BRL amount as a human-readable string.

    - Amounts >= R$ 10.000: no cents (e.g., 'R$ 1.234.567')
    - Amounts < R$ 10.000: with cents (e.g., 'R$ 9.876,54')
    """
    sign = "-" if amount < 0 else ""
    value = abs(amount)
    if value >= 10_000:
        return f"{sign}R$ {_pt_br_number(value, 0)}"
    return f"{sign}R$ {_pt_br_number(value, 2)}"


def format_percent(value: float) -> str:
    """Format a percentage with one decimal place ('12,5%')."""
    return f"{_pt_br_number(value, 1)}%"


def format_days(days: int) -> str:
    if days == 1:
        return "1 day"
    return f"{days} days"
