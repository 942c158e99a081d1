"""
Tests for the demo historical series generator.
"""
from datetime import date

import numpy as np
import pytest

from dealerdesk.common.exceptions import InvalidInputError
from dealerdesk.core.services.history import generate_historical_series, seasonal_bump


def test_generates_requested_number_of_months(rng, today):
    points = generate_historical_series(24, rng=rng, today=today)
    assert len(points) == 24


def test_dates_are_consecutive_month_starts_ending_this_month(rng, today):
    points = generate_historical_series(18, rng=rng, today=today)

    assert points[-1].date == "2024-06-01"
    assert points[0].date == "2023-01-01"
    assert all(p.date.endswith("-01") for p in points)
    assert [p.date for p in points] == sorted(p.date for p in points)


def test_values_are_never_negative(today):
    for seed in range(20):
        points = generate_historical_series(36, rng=np.random.default_rng(seed), today=today)
        assert all(p.value >= 0 for p in points)


def test_values_stay_within_model_envelope(rng, today):
    points = generate_historical_series(24, rng=rng, today=today)
    for i, point in enumerate(points):
        month0 = date.fromisoformat(point.date).month - 1
        expected = 120 + 2 * i + seasonal_bump(month0)
        assert expected - 10 <= point.value <= expected + 9


def test_same_seed_reproduces_series(today):
    first = generate_historical_series(12, rng=np.random.default_rng(7), today=today)
    second = generate_historical_series(12, rng=np.random.default_rng(7), today=today)
    assert first == second


def test_seasonal_bumps():
    assert seasonal_bump(0) == 0
    assert seasonal_bump(5) == 25
    assert seasonal_bump(7) == 25
    assert seasonal_bump(8) == 0
    assert seasonal_bump(11) == 40


def test_single_month(rng, today):
    points = generate_historical_series(1, rng=rng, today=today)
    assert [p.date for p in points] == ["2024-06-01"]


@pytest.mark.parametrize("month_count", [0, -3, 2.5, "12", True])
def test_rejects_invalid_month_count(month_count):
    with pytest.raises(InvalidInputError):
        generate_historical_series(month_count)
