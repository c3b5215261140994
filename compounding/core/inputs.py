"""Parsing of raw form strings into projection inputs."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Optional

_NON_DIGITS = re.compile(r"\D")
_INTEGER = re.compile(r"^\d*$")
_DECIMAL = re.compile(r"^\d*\.?\d*$")


def parse_money_input(raw: str) -> Optional[int]:
    """
    Keep only the digits of a money field, so grouped or prefixed input
    ("Rp 10.000.000") reads as 10000000. Returns None for an empty field
    (or a bare "Rp") and raises ValueError for signed or digitless text.
    """
    text = raw.strip()
    if text[:2].lower() == "rp":
        text = text[2:].strip()
    if text == "":
        return None
    if "-" in text:
        raise ValueError(f"amount must not be negative: {raw!r}")

    digits = _NON_DIGITS.sub("", text)
    if digits == "":
        raise ValueError(f"not a valid amount: {raw!r}")
    return int(digits)


def parse_number_input(raw: str, decimal: bool = False) -> Optional[Decimal]:
    """
    Parse a years or rate field. With decimal=True a single decimal separator
    is allowed and a comma counts as one ("7,5" -> 7.5).

    Returns None for an empty field and raises ValueError for anything else
    that is not a plain non-negative number.
    """
    value = raw.strip()
    if decimal:
        value = value.replace(",", ".", 1)
    if value == "":
        return None

    pattern = _DECIMAL if decimal else _INTEGER
    if not pattern.match(value) or value == ".":
        raise ValueError(f"not a valid number: {raw!r}")
    return Decimal(value)
