from __future__ import annotations

from decimal import Decimal

from compounding.core.formatting import (
    format_axis_tick,
    format_compact_number,
    format_currency,
    format_number_input,
    summary_labels,
)
from compounding.core.projection import Summary


def test_format_currency():
    assert format_currency(None) == "Rp 0"
    assert format_currency(0) == "Rp 0"
    assert format_currency(10000000) == "Rp 10.000.000"
    assert format_currency(Decimal("1234.5")) == "Rp 1.235"
    assert format_currency(999.4) == "Rp 999"
    assert format_currency(-1000) == "-Rp 1.000"


def test_format_compact_number():
    assert format_compact_number(None) == ""
    assert format_compact_number(0) == ""
    assert format_compact_number(999) == ""
    assert format_compact_number(1000) == "1 Ribu"
    assert format_compact_number(1500) == "1,5 Ribu"
    assert format_compact_number(1234567) == "1,23 Juta"
    assert format_compact_number(Decimal("23950753.31")) == "23,95 Juta"
    assert format_compact_number(2500000000) == "2,5 Miliar"
    assert format_compact_number(3 * 10**12) == "3 Triliun"
    assert format_compact_number(-5000) == ""
    assert format_compact_number(float("nan")) == ""


def test_format_number_input():
    assert format_number_input(None) == ""
    assert format_number_input(10000000) == "10.000.000"
    assert format_number_input(Decimal("7.5")) == "7,5"


def test_format_axis_tick():
    assert format_axis_tick(1500000000) == "1.5M"
    assert format_axis_tick(25000000) == "25jt"
    assert format_axis_tick(5000) == "5000"
    assert format_axis_tick(0) == "0"


def test_format_axis_tick_rounds_halves_up():
    assert format_axis_tick(2500000) == "3jt"
    assert format_axis_tick(1250000000) == "1.3M"
    assert format_axis_tick(Decimal("1499999")) == "1jt"


def test_summary_labels():
    summary = Summary(totalValue=12500000, totalInvested=10000000, totalInterest=2500000)

    labels = summary_labels(summary)

    assert labels == {
        "totalValue": {"currency": "Rp 12.500.000", "compact": "12,5 Juta"},
        "totalInvested": {"currency": "Rp 10.000.000", "compact": "10 Juta"},
        "totalInterest": {"currency": "Rp 2.500.000", "compact": "2,5 Juta"},
    }
