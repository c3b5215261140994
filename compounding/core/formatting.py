"""Display helpers for projection figures (Indonesian rupiah, id-ID grouping)."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional, Union

from compounding.core.projection import Summary

Number = Union[int, float, Decimal]

COMPACT_UNITS = (
    (Decimal(10) ** 12, "Triliun"),
    (Decimal(10) ** 9, "Miliar"),
    (Decimal(10) ** 6, "Juta"),
    (Decimal(10) ** 3, "Ribu"),
)


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def _format_id(value: Decimal, max_fraction_digits: int) -> str:
    """Group thousands with '.' and use ',' for decimals; trailing zeros dropped."""
    quantum = Decimal(1).scaleb(-max_fraction_digits)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    whole, _, fraction = f"{abs(rounded):f}".partition(".")
    fraction = fraction.rstrip("0")
    grouped = f"{int(whole):,}".replace(",", ".")
    return sign + grouped + ("," + fraction if fraction else "")


def format_currency(value: Optional[Number]) -> str:
    if value is None:
        return "Rp 0"
    amount = _to_decimal(value)
    text = _format_id(amount, 0)
    if text.startswith("-"):
        return "-Rp " + text[1:]
    return "Rp " + text


def format_compact_number(value: Optional[Number]) -> str:
    """'23,95 Juta' style label; empty below one thousand."""
    if not value:
        return ""
    amount = _to_decimal(value)
    if not amount.is_finite():
        return ""
    for threshold, unit in COMPACT_UNITS:
        if amount >= threshold:
            return f"{_format_id(amount / threshold, 2)} {unit}"
    return ""


def format_number_input(value: Optional[Number]) -> str:
    """Echo a form value with thousands grouping."""
    if value is None:
        return ""
    return _format_id(_to_decimal(value), 3)


def format_axis_tick(value: Number) -> str:
    """Y-axis label; halves round up (2.500.000 -> '3jt')."""
    amount = _to_decimal(value)
    if amount >= 1_000_000_000:
        scaled = (amount / 1_000_000_000).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return f"{scaled:f}M"
    if amount >= 1_000_000:
        scaled = (amount / 1_000_000).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return f"{scaled:f}jt"
    if amount == amount.to_integral_value():
        return f"{amount.to_integral_value():f}"
    return f"{amount.normalize():f}"


def summary_labels(summary: Summary) -> Dict[str, Dict[str, str]]:
    figures = {
        "totalValue": summary.totalValue,
        "totalInvested": summary.totalInvested,
        "totalInterest": summary.totalInterest,
    }
    return {
        name: {
            "currency": format_currency(amount),
            "compact": format_compact_number(amount),
        }
        for name, amount in figures.items()
    }
