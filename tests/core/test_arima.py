"""
Tests for the ARIMA-like forecast simulator.
"""
import numpy as np
import pytest

from dealerdesk.common.dataclasses import ArimaParams
from dealerdesk.common.exceptions import InvalidInputError
from dealerdesk.core.services.arima import simulate_arima_like

SERIES = [100, 102, 98, 105, 110, 108]


def test_short_series_forecast():
    result = simulate_arima_like(SERIES, 3, ArimaParams(p=1, d=1, q=0))

    assert result.horizon == 3
    assert result.confidence_interval == round(1.96 * float(np.std(SERIES)), 2)
    # 0.7 * 108 + 0.3 * mean(series) + last difference (-2), no seasonal term at step 0
    assert result.predictions[0] == pytest.approx(104.75)


@pytest.mark.parametrize("periods", [1, 6, 12, 24])
def test_output_lengths_match_horizon(periods):
    result = simulate_arima_like(SERIES, periods)
    assert len(result.predictions) == len(result.lower_bounds) == len(result.upper_bounds) == periods


def test_bands_enclose_predictions_and_widen():
    result = simulate_arima_like(SERIES, 12)

    for lower, prediction, upper in zip(result.lower_bounds, result.predictions, result.upper_bounds):
        assert lower <= prediction <= upper

    widths = [u - l for l, u in zip(result.lower_bounds, result.upper_bounds)]
    assert all(b >= a - 0.011 for a, b in zip(widths, widths[1:]))


def test_repeated_calls_are_identical():
    assert simulate_arima_like(SERIES, 6) == simulate_arima_like(SERIES, 6)


def test_outputs_rounded_to_two_decimals():
    result = simulate_arima_like([101.333, 99.777, 103.1], 4)
    for value in result.predictions + result.lower_bounds + result.upper_bounds:
        assert round(value, 2) == value


def test_p_and_q_do_not_change_output():
    base = simulate_arima_like(SERIES, 6, ArimaParams(p=1, d=1, q=0))
    other = simulate_arima_like(SERIES, 6, ArimaParams(p=5, d=1, q=3))
    assert base == other


def test_without_differencing_there_is_no_trend_carry():
    result = simulate_arima_like(SERIES, 1, ArimaParams(d=0))
    mean = sum(SERIES) / len(SERIES)
    assert result.predictions[0] == pytest.approx(round(0.7 * 108 + 0.3 * mean, 2))


def test_single_point_series_has_zero_width_bands():
    result = simulate_arima_like([50], 3)

    assert result.confidence_interval == 0
    assert result.lower_bounds == result.predictions == result.upper_bounds


def test_empty_series_rejected():
    with pytest.raises(InvalidInputError):
        simulate_arima_like([], 3)


@pytest.mark.parametrize("periods", [0, -1])
def test_non_positive_horizon_rejected(periods):
    with pytest.raises(InvalidInputError):
        simulate_arima_like(SERIES, periods)


def test_non_finite_values_rejected():
    with pytest.raises(InvalidInputError):
        simulate_arima_like([1.0, float("nan"), 3.0], 2)


def test_negative_order_rejected():
    with pytest.raises(InvalidInputError):
        simulate_arima_like(SERIES, 2, ArimaParams(d=-1))
