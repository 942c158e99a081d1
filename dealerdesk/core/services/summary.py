"""
Forecast summaries shown beside each chart, and the two-model comparison.
"""

import math
from typing import Sequence

import numpy as np

from dealerdesk.common.dataclasses import ForecastSummary, ModelComparison, TimePoint
from dealerdesk.common.exceptions import InvalidInputError

# Display-only figures; nothing is back-tested against held-out data.
ACCURACY_BASE = {"arima": 85.0, "prophet": 83.0}
ACCURACY_JITTER = 5.0
MEAN_ERROR = {"arima": 12.4, "prophet": 13.1}
MODEL_NAMES = {"arima": "ARIMA", "prophet": "Prophet"}


def _value(item: float | TimePoint) -> float:
    return item.value if isinstance(item, TimePoint) else float(item)


def summarize_forecast(
    model_name: str,
    history: Sequence[float | TimePoint],
    predictions: Sequence[float | TimePoint],
    confidence_interval: float,
) -> ForecastSummary:
    """
    Mean prediction (rounded half up), growth % from the last actual to the
    last prediction, and the model's confidence interval.
    """
    if not history or not predictions:
        raise InvalidInputError("Cannot summarize an empty history or forecast")

    values = [_value(p) for p in predictions]
    last_actual = _value(history[-1])
    last_prediction = values[-1]

    mean_prediction = math.floor(sum(values) / len(values) + 0.5)
    growth = 0.0 if last_actual == 0 else (last_prediction - last_actual) / last_actual * 100

    return ForecastSummary(
        model_name=model_name,
        confidence_interval=confidence_interval,
        mean_prediction=int(mean_prediction),
        growth=round(growth, 1),
        last_value=last_prediction,
    )


def compare_models(
    summaries: dict[str, ForecastSummary],
    rng: np.random.Generator | None = None,
) -> dict[str, ModelComparison]:
    """
    Attach the simulated accuracy and fixed mean-error figures to each summary.

    `summaries` is keyed by "arima" / "prophet".
    """
    rng = rng if rng is not None else np.random.default_rng()
    comparison = {}
    for key, summary in summaries.items():
        if key not in ACCURACY_BASE:
            raise InvalidInputError(f"Unknown model '{key}'")
        accuracy = ACCURACY_BASE[key] + rng.uniform(0, ACCURACY_JITTER)
        comparison[key] = ModelComparison(
            summary=summary,
            accuracy=round(float(accuracy), 1),
            mean_error=MEAN_ERROR[key],
        )
    return comparison


def recommend_model(comparison: dict[str, ModelComparison], metric: str = "accuracy") -> str:
    """
    Key of the model that wins on `metric`.

    Higher accuracy and higher growth win; for "confidence" the narrower
    interval wins. Ties go to Prophet.
    """
    if set(comparison) != {"arima", "prophet"}:
        raise InvalidInputError("Comparison needs exactly the 'arima' and 'prophet' models")

    arima, prophet = comparison["arima"], comparison["prophet"]
    if metric == "accuracy":
        arima_wins = arima.accuracy > prophet.accuracy
    elif metric == "growth":
        arima_wins = arima.summary.growth > prophet.summary.growth
    elif metric == "confidence":
        arima_wins = arima.summary.confidence_interval < prophet.summary.confidence_interval
    else:
        raise InvalidInputError(f"Unknown comparison metric '{metric}'")
    return "arima" if arima_wins else "prophet"
