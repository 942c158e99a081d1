"""
Prediction request payloads.

Uses Pydantic for validation; omitted fields fall back to the configured
forecasting defaults.
"""

from typing import Literal

from pydantic import BaseModel, Field


class HistoryRequest(BaseModel):
    """Where the monthly history comes from and how long it is."""

    months: int | None = Field(default=None, gt=0)
    source: Literal["demo", "sales"] = "demo"  # demo = synthetic series
    metric: Literal["units", "revenue"] = "units"  # only used with source="sales"
    seed: int | None = Field(default=None, ge=0)  # seeds the demo generator


class ProphetRequest(HistoryRequest):
    periods: int | None = Field(default=None, gt=0)


class ArimaRequest(ProphetRequest):
    # p and q are accepted for the UI controls but do not change the output
    p: int | None = Field(default=None, ge=0)
    d: int | None = Field(default=None, ge=0)
    q: int | None = Field(default=None, ge=0)


class CompareRequest(ArimaRequest):
    """Runs both simulators over the same history."""

    # metric (inherited) selects units or revenue history; compare_by picks the winner
    compare_by: Literal["accuracy", "growth", "confidence"] = "accuracy"
