from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, localcontext
from enum import Enum
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from compounding.core.inputs import parse_money_input, parse_number_input

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12

# fixed so results never depend on the caller's decimal context
ENGINE_CONTEXT = Context(prec=28, rounding=ROUND_HALF_EVEN)

ZERO = Decimal("0")


class CompoundingFrequency(int, Enum):
    ANNUAL = 1
    QUARTERLY = 4
    MONTHLY = 12

    @property
    def months_per_period(self) -> int:
        return MONTHS_PER_YEAR // self.value


# -----------------------------
# Inputs
# -----------------------------


class ProjectionInputs(BaseModel):
    """
    The five inputs of a projection.

    Unset or empty values count as zero, except compoundingFrequency which
    falls back to monthly. Strings are parsed the way the input form does
    ("10.000.000" for money, "7,5" for the rate).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    initialAmount: Decimal = Field(default=ZERO, ge=0, allow_inf_nan=False)
    monthlyContribution: Decimal = Field(default=ZERO, ge=0, allow_inf_nan=False)
    years: int = Field(default=0, ge=0)
    annualRatePercent: Decimal = Field(default=ZERO, ge=0, allow_inf_nan=False)
    compoundingFrequency: CompoundingFrequency = CompoundingFrequency.MONTHLY

    @field_validator("initialAmount", "monthlyContribution", mode="before")
    @classmethod
    def parse_money(cls, value: Any) -> Any:
        if value is None:
            return ZERO
        if isinstance(value, str):
            parsed = parse_money_input(value)
            return ZERO if parsed is None else parsed
        return value

    @field_validator("years", mode="before")
    @classmethod
    def parse_years(cls, value: Any) -> Any:
        if value is None:
            return 0
        if isinstance(value, str):
            parsed = parse_number_input(value)
            return 0 if parsed is None else int(parsed)
        return value

    @field_validator("annualRatePercent", mode="before")
    @classmethod
    def parse_rate(cls, value: Any) -> Any:
        if value is None:
            return ZERO
        if isinstance(value, str):
            parsed = parse_number_input(value, decimal=True)
            return ZERO if parsed is None else parsed
        return value

    @field_validator("compoundingFrequency", mode="before")
    @classmethod
    def parse_frequency(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("compoundingFrequency must be 1, 4 or 12")
        if value is None or value == "":
            return CompoundingFrequency.MONTHLY
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        return value


# -----------------------------
# Outputs
# -----------------------------


@dataclass(frozen=True)
class MonthStep:
    month: int
    contribution: Decimal
    interest: Decimal  # capitalized this month, zero between boundaries
    balance: Decimal
    contributed: Decimal


class YearlyPoint(BaseModel):
    year: int
    invested: Decimal
    interest: Decimal
    total: Decimal


class Summary(BaseModel):
    totalValue: Decimal
    totalInvested: Decimal
    totalInterest: Decimal


class ProjectionResult(BaseModel):
    series: List[YearlyPoint]
    summary: Summary


# -----------------------------
# Engine
# -----------------------------


def simulate_months(inputs: ProjectionInputs) -> List[MonthStep]:
    """
    Step the account one month at a time.

    Order of operations (per month):
      1) Add the monthly contribution to balance and contributed total.
      2) On a capitalization boundary, accrue interest on the balance minus
         this month's contribution, then add it to the balance.
    """
    frequency = inputs.compoundingFrequency
    contribution = inputs.monthlyContribution
    total_months = inputs.years * MONTHS_PER_YEAR

    steps: List[MonthStep] = []
    with localcontext(ENGINE_CONTEXT):
        rate_per_period = inputs.annualRatePercent / 100 / frequency.value

        balance = inputs.initialAmount
        contributed = inputs.initialAmount

        for month in range(1, total_months + 1):
            balance += contribution
            contributed += contribution

            interest = ZERO
            if month % frequency.months_per_period == 0:
                # the contribution made this month does not earn this period's interest
                interest = (balance - contribution) * rate_per_period
                balance += interest

            steps.append(
                MonthStep(
                    month=month,
                    contribution=contribution,
                    interest=interest,
                    balance=balance,
                    contributed=contributed,
                )
            )

    return steps


def project_compound_growth(inputs: ProjectionInputs) -> ProjectionResult:
    """Yearly snapshots (year 0 first) plus the final-state summary."""
    start = inputs.initialAmount
    series = [YearlyPoint(year=0, invested=start, interest=ZERO, total=start)]

    balance = start
    contributed = start
    with localcontext(ENGINE_CONTEXT):
        for step in simulate_months(inputs):
            balance, contributed = step.balance, step.contributed
            if step.month % MONTHS_PER_YEAR == 0:
                series.append(
                    YearlyPoint(
                        year=step.month // MONTHS_PER_YEAR,
                        invested=contributed,
                        interest=balance - contributed,
                        total=balance,
                    )
                )

        summary = Summary(
            totalValue=balance,
            totalInvested=contributed,
            totalInterest=balance - contributed,
        )

    logger.debug(
        "projected %d years at %s%% (x%d/yr): total=%s",
        inputs.years,
        inputs.annualRatePercent,
        inputs.compoundingFrequency.value,
        summary.totalValue,
    )
    return ProjectionResult(series=series, summary=summary)


def run_projection(payload: Optional[Mapping[str, Any]]) -> ProjectionResult:
    """Validate a loose mapping of inputs and project it.

    Raises pydantic.ValidationError before any simulation work if an input
    is out of range.
    """
    inputs = ProjectionInputs.model_validate(dict(payload or {}))
    return project_compound_growth(inputs)


__all__ = [
    "CompoundingFrequency",
    "ProjectionInputs",
    "MonthStep",
    "YearlyPoint",
    "Summary",
    "ProjectionResult",
    "simulate_months",
    "project_compound_growth",
    "run_projection",
]
