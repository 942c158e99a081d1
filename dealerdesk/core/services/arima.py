"""
ARIMA-like Simulator - produces chart-ready point forecasts with widening bands.

This is deterministic arithmetic, not a fitted ARIMA model: an AR-style pull
toward the mean, a decaying carry-forward of the last differenced value, and a
fixed 12-step sine seasonal term. Only the differencing order `d` changes the
result; `p` and `q` are accepted for interface compatibility.
"""

import logging
import math
from typing import Sequence

import numpy as np

from dealerdesk.common.dataclasses import ArimaParams, ForecastResult
from dealerdesk.common.exceptions import InvalidInputError
from dealerdesk.core.services.stats import require_horizon, require_series, series_mean_std

logger = logging.getLogger(__name__)

AR_WEIGHT = 0.7
MEAN_WEIGHT = 0.3
TREND_DECAY = 0.1
SEASONAL_AMPLITUDE = 0.15
SEASONAL_PERIOD = 6  # sin(pi * i / 6) repeats every 12 steps
Z_95 = 1.96
ERROR_MARGIN_FACTOR = 1.5


def simulate_arima_like(
    series: Sequence[float],
    periods: int,
    params: ArimaParams | None = None,
) -> ForecastResult[float]:
    """
    Forecast `periods` steps past the end of `series`.

    Args:
        series: Historical values, oldest first (at least one point)
        periods: Forecast horizon (> 0)
        params: ARIMA order; defaults to (1, 1, 0)

    Returns:
        ForecastResult of plain floats rounded to 2 decimals. Bands grow with
        sqrt(step + 1).
    """
    params = params or ArimaParams()
    periods = require_horizon(periods)
    for name in ("p", "d", "q"):
        if getattr(params, name) < 0:
            raise InvalidInputError(f"ARIMA order '{name}' must be non-negative")

    values = require_series(series, minimum=1, label="ARIMA-like simulation")
    mean, std = series_mean_std(values)
    if std == 0:
        logger.warning("Series has zero variance; forecast bands will have zero width")

    d = params.d
    differenced = np.diff(values, n=d) if d > 0 else values

    last_value = float(values[-1])
    last_diff = float(differenced[-1]) if d > 0 and differenced.size else 0.0

    confidence_interval = Z_95 * std
    error_margin = ERROR_MARGIN_FACTOR * std

    predictions, lower_bounds, upper_bounds = [], [], []
    for i in range(periods):
        ar_component = AR_WEIGHT * last_value + MEAN_WEIGHT * mean
        trend_component = last_diff * (1 - TREND_DECAY * i / periods) if d > 0 else 0.0
        seasonal_component = SEASONAL_AMPLITUDE * mean * math.sin(math.pi * i / SEASONAL_PERIOD)

        prediction = ar_component + trend_component + seasonal_component
        spread = error_margin * math.sqrt(i + 1)

        predictions.append(round(prediction, 2))
        lower_bounds.append(round(prediction - spread, 2))
        upper_bounds.append(round(prediction + spread, 2))

        last_value = prediction

    return ForecastResult(
        predictions=tuple(predictions),
        lower_bounds=tuple(lower_bounds),
        upper_bounds=tuple(upper_bounds),
        confidence_interval=round(confidence_interval, 2),
    )
