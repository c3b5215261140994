"""Data contracts of the HTTP API."""

from typing import Dict, List

from pydantic import BaseModel, Field


class PingResponse(BaseModel):
    message: str


class SeriesPoint(BaseModel):
    """Single yearly row of the projection chart."""

    year: int = Field(..., ge=0)
    invested: float
    interest: float
    total: float


class SummaryFigures(BaseModel):
    totalValue: float
    totalInvested: float
    totalInterest: float


class DisplayValue(BaseModel):
    """Pre-rendered labels for one summary figure."""

    currency: str = Field(..., description="Full rupiah amount, e.g. 'Rp 10.000.000'.")
    compact: str = Field(..., description="Magnitude label, e.g. '10 Juta'. Empty below a thousand.")


class ProjectionResponse(BaseModel):
    """Projected series, final summary and its display labels."""

    series: List[SeriesPoint]
    summary: SummaryFigures
    display: Dict[str, DisplayValue]
