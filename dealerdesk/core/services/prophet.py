"""
Prophet-like Simulator - linear trend plus yearly sine and a December bump.

One OLS line is fitted over the history index; there is no changepoint
detection or parameter estimation beyond that.
"""

import logging
from typing import Sequence

import numpy as np

from dealerdesk.common.dataclasses import ForecastResult, TimePoint
from dealerdesk.common.exceptions import InvalidInputError
from dealerdesk.core.services.months import future_month_dates, month_index, parse_date
from dealerdesk.core.services.stats import (
    linear_trend,
    require_horizon,
    require_series,
    series_mean_std,
)

logger = logging.getLogger(__name__)

SEASONAL_AMPLITUDE = 0.25
HOLIDAY_MONTH = 11  # December
HOLIDAY_LIFT = 0.2
Z_95 = 1.96
ERROR_MARGIN_FACTOR = 1.5
MIN_POINTS = 2


def simulate_prophet_like(series: Sequence[TimePoint], periods: int) -> ForecastResult[TimePoint]:
    """
    Forecast `periods` monthly steps after the last dated point of `series`.

    Raises:
        InvalidInputError: fewer than two points, a non-positive horizon,
            non-finite values or an unparsable date.
    """
    periods = require_horizon(periods)
    if len(series) < MIN_POINTS:
        raise InvalidInputError(
            f"Prophet-like simulation needs at least {MIN_POINTS} points, got {len(series)}"
        )
    for point in series:
        parse_date(point.date)

    values = require_series((p.value for p in series), minimum=MIN_POINTS, label="Prophet-like simulation")
    n = values.size

    slope, intercept = linear_trend(values)
    mean, std = series_mean_std(values)
    if std == 0:
        logger.warning("Series has zero variance; forecast bands will have zero width")

    confidence_interval = Z_95 * std
    error_margin = ERROR_MARGIN_FACTOR * std

    dates = future_month_dates(series[-1].date, periods)
    months = np.array([month_index(d) for d in dates])
    steps = np.arange(periods)

    trend = intercept + slope * (n + steps)
    seasonal = SEASONAL_AMPLITUDE * mean * np.sin(np.pi * months / 6)
    holiday = np.where(months == HOLIDAY_MONTH, HOLIDAY_LIFT * mean, 0.0)

    prediction = trend + seasonal + holiday
    spread = error_margin * np.sqrt(steps + 1)
    lower = prediction - spread
    upper = prediction + spread

    labels = [d.isoformat() for d in dates]

    def _points(arr: np.ndarray) -> tuple[TimePoint, ...]:
        return tuple(TimePoint(date=label, value=round(float(v), 2)) for label, v in zip(labels, arr))

    return ForecastResult(
        predictions=_points(prediction),
        lower_bounds=_points(lower),
        upper_bounds=_points(upper),
        confidence_interval=round(confidence_interval, 2),
    )
