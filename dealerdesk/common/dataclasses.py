"""
Forecast Value Records - Transient data structures passed between the
series generator, the simulators and the chart formatter.

None of these are persisted; each forecast request builds fresh instances.
"""

from dataclasses import dataclass, asdict
from typing import Any, Generic, TypeVar


@dataclass(frozen=True)
class TimePoint:
    """One observed or forecast scalar on a calendar date ("YYYY-MM-DD")."""

    date: str
    value: float

    def as_dict(self) -> dict[str, Any]:
        return {"date": self.date, "value": self.value}


T = TypeVar("T", float, TimePoint)


@dataclass(frozen=True)
class ForecastResult(Generic[T]):
    """
    Point forecasts with their lower/upper envelopes.

    The three sequences always have the same length (the horizon). Elements
    are plain floats for the ARIMA-like simulator and TimePoints for the
    Prophet-like one.

    confidence_interval is 1.96 * std of the raw history. It is not a real
    multi-step prediction interval; it is kept as-is for display.
    """

    predictions: tuple[T, ...]
    lower_bounds: tuple[T, ...]
    upper_bounds: tuple[T, ...]
    confidence_interval: float

    @property
    def horizon(self) -> int:
        return len(self.predictions)

    def as_dict(self) -> dict[str, Any]:
        def _dump(items):
            return [i.as_dict() if isinstance(i, TimePoint) else i for i in items]

        return {
            "predictions": _dump(self.predictions),
            "lowerBounds": _dump(self.lower_bounds),
            "upperBounds": _dump(self.upper_bounds),
            "confidenceInterval": self.confidence_interval,
        }


@dataclass(frozen=True)
class ChartRow:
    """A single x-axis entry for the prediction chart."""

    date: str
    actual: float | None = None
    predicted: float | None = None
    lower_bound: float | None = None
    upper_bound: float | None = None

    def as_dict(self) -> dict[str, Any]:
        """Chart-ready dict: camelCase keys, absent series omitted."""
        keys = {
            "actual": "actual",
            "predicted": "predicted",
            "lower_bound": "lowerBound",
            "upper_bound": "upperBound",
        }
        data: dict[str, Any] = {"date": self.date}
        for field_name, key in keys.items():
            value = getattr(self, field_name)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class ArimaParams:
    """
    ARIMA order parameters as bound to the UI controls.

    Only d (differencing order) changes the simulated output. p and q are
    accepted and carried along so callers can round-trip them.
    """

    p: int = 1
    d: int = 1
    q: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class ForecastSummary:
    """Headline figures shown next to a forecast chart."""

    model_name: str
    confidence_interval: float
    mean_prediction: int
    growth: float
    last_value: float

    def as_dict(self) -> dict[str, Any]:
        return {
            "modelName": self.model_name,
            "confidenceInterval": self.confidence_interval,
            "meanPrediction": self.mean_prediction,
            "growth": self.growth,
            "lastValue": self.last_value,
        }


@dataclass(frozen=True)
class ModelComparison:
    """Side-by-side summary of both simulators over the same history."""

    summary: ForecastSummary
    accuracy: float
    mean_error: float

    def as_dict(self) -> dict[str, Any]:
        data = self.summary.as_dict()
        data["accuracy"] = self.accuracy
        data["meanError"] = self.mean_error
        return data
