"""
Historical Series Generator - synthesizes a plausible monthly sales series
for demo charts when no real sales history is available.

value(i) = base + trend(i) + seasonal(month) + noise, clamped at zero.
"""

import logging
from datetime import date

import numpy as np

from dealerdesk.common.dataclasses import TimePoint
from dealerdesk.common.exceptions import InvalidInputError
from dealerdesk.core.services.months import add_months, month_index

logger = logging.getLogger(__name__)

BASE_VALUE = 120
TREND_PER_MONTH = 2
SUMMER_MONTHS = (5, 6, 7)  # June, July, August (0-indexed)
SUMMER_BUMP = 25
DECEMBER = 11
DECEMBER_BUMP = 40
NOISE_LOW, NOISE_HIGH = -10, 10  # integers in [-10, 9]


def seasonal_bump(month0: int) -> int:
    if month0 in SUMMER_MONTHS:
        return SUMMER_BUMP
    if month0 == DECEMBER:
        return DECEMBER_BUMP
    return 0


def generate_historical_series(
    month_count: int,
    rng: np.random.Generator | None = None,
    today: date | None = None,
) -> list[TimePoint]:
    """
    Generate `month_count` monthly points ending in the month of `today`.

    Args:
        month_count: Number of months to generate (> 0)
        rng: Source of noise. Pass a seeded generator for reproducible output;
            defaults to an unseeded one.
        today: Anchor date, defaults to the current date.

    Returns:
        TimePoints dated on the first of each month, oldest first.
    """
    if isinstance(month_count, bool) or not isinstance(month_count, (int, np.integer)):
        raise InvalidInputError(f"Month count must be an integer, got {month_count!r}")
    if month_count <= 0:
        raise InvalidInputError(f"Month count must be positive, got {month_count}")

    rng = rng if rng is not None else np.random.default_rng()
    anchor = (today or date.today()).replace(day=1)
    start = add_months(anchor, -(month_count - 1))

    noise = rng.integers(NOISE_LOW, NOISE_HIGH, size=month_count)

    points = []
    for i in range(month_count):
        current = add_months(start, i)
        value = (
            BASE_VALUE
            + TREND_PER_MONTH * i
            + seasonal_bump(month_index(current))
            + int(noise[i])
        )
        points.append(TimePoint(date=current.isoformat(), value=float(max(0, value))))

    logger.debug(f"Generated {month_count} months of demo history ending {points[-1].date}")
    return points
