"""
Numeric helpers shared by the forecast simulators.
"""

from typing import Iterable

import numpy as np

from dealerdesk.common.exceptions import InvalidInputError


def require_horizon(periods: int) -> int:
    """Reject horizons the simulators cannot divide by or iterate over."""
    if isinstance(periods, bool) or not isinstance(periods, (int, np.integer)):
        raise InvalidInputError(f"Forecast horizon must be an integer, got {periods!r}")
    if periods <= 0:
        raise InvalidInputError(f"Forecast horizon must be positive, got {periods}")
    return int(periods)


def require_series(values: Iterable[float], minimum: int, label: str) -> np.ndarray:
    """
    Convert a series to a float array, enforcing a minimum length and finite values.
    """
    try:
        arr = np.asarray(list(values), dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{label}: series must be numeric ({e})") from e

    if arr.ndim != 1:
        raise InvalidInputError(f"{label}: series must be one-dimensional")
    if arr.size == 0:
        raise InvalidInputError(f"{label}: series is empty")
    if arr.size < minimum:
        raise InvalidInputError(
            f"{label}: needs at least {minimum} points, got {arr.size}"
        )
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{label}: series contains NaN or infinite values")
    return arr


def series_mean_std(values: np.ndarray) -> tuple[float, float]:
    """Mean and population standard deviation (ddof=0)."""
    return float(values.mean()), float(values.std())


def linear_trend(values: np.ndarray) -> tuple[float, float]:
    """
    Closed-form OLS of value against index 0..n-1.

    Returns (slope, intercept). Caller guarantees n >= 2, otherwise the
    denominator is zero.
    """
    n = values.size
    x = np.arange(n, dtype=float)
    sum_x = x.sum()
    sum_y = values.sum()
    sum_xy = (x * values).sum()
    sum_x2 = (x * x).sum()

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    return float(slope), float(intercept)
