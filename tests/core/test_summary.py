"""
Tests for forecast summaries and the model comparison.
"""
import numpy as np
import pytest

from dealerdesk.common.dataclasses import ForecastSummary, ModelComparison, TimePoint
from dealerdesk.common.exceptions import InvalidInputError
from dealerdesk.core.services.summary import compare_models, recommend_model, summarize_forecast


def test_summary_figures():
    history = [TimePoint("2024-01-01", 90.0), TimePoint("2024-02-01", 100.0)]
    predictions = [TimePoint("2024-03-01", 105.0), TimePoint("2024-04-01", 110.0)]

    summary = summarize_forecast("Prophet", history, predictions, 9.8)

    assert summary.mean_prediction == 108  # 107.5 rounds half up
    assert summary.growth == 10.0
    assert summary.last_value == 110.0
    assert summary.as_dict() == {
        "modelName": "Prophet",
        "confidenceInterval": 9.8,
        "meanPrediction": 108,
        "growth": 10.0,
        "lastValue": 110.0,
    }


def test_summary_accepts_plain_numbers():
    summary = summarize_forecast("ARIMA", [50.0, 40.0], [38.0, 35.0], 1.0)
    assert summary.growth == -12.5
    assert summary.mean_prediction == 37  # 36.5 rounds half up


def test_zero_last_actual_reports_no_growth():
    summary = summarize_forecast("ARIMA", [0.0], [12.0], 0.0)
    assert summary.growth == 0.0


def test_empty_forecast_rejected():
    with pytest.raises(InvalidInputError):
        summarize_forecast("ARIMA", [1.0], [], 0.0)


def test_comparison_adds_accuracy_and_error():
    summaries = {
        "arima": summarize_forecast("ARIMA", [100.0], [110.0], 5.0),
        "prophet": summarize_forecast("Prophet", [100.0], [120.0], 5.0),
    }

    comparison = compare_models(summaries, rng=np.random.default_rng(3))

    assert 85.0 <= comparison["arima"].accuracy <= 90.0
    assert 83.0 <= comparison["prophet"].accuracy <= 88.0
    assert comparison["arima"].mean_error == 12.4
    assert comparison["prophet"].as_dict()["meanError"] == 13.1
    assert comparison["prophet"].as_dict()["modelName"] == "Prophet"


def test_comparison_rejects_unknown_model():
    with pytest.raises(InvalidInputError):
        compare_models({"lstm": summarize_forecast("LSTM", [1.0], [1.0], 0.0)})


def _comparison(accuracy, growth, interval, name):
    summary = ForecastSummary(
        model_name=name, confidence_interval=interval, mean_prediction=100, growth=growth, last_value=100.0,
    )
    return ModelComparison(summary=summary, accuracy=accuracy, mean_error=12.4)


@pytest.fixture
def comparison():
    return {
        "arima": _comparison(accuracy=88.0, growth=2.0, interval=9.0, name="ARIMA"),
        "prophet": _comparison(accuracy=86.5, growth=4.5, interval=7.5, name="Prophet"),
    }


@pytest.mark.parametrize("metric, winner", [
    ("accuracy", "arima"),
    ("growth", "prophet"),
    ("confidence", "prophet"),
])
def test_recommendation_per_metric(comparison, metric, winner):
    assert recommend_model(comparison, metric) == winner


def test_narrower_interval_wins():
    comparison = {
        "arima": _comparison(accuracy=80.0, growth=1.0, interval=5.0, name="ARIMA"),
        "prophet": _comparison(accuracy=90.0, growth=9.0, interval=6.0, name="Prophet"),
    }
    assert recommend_model(comparison, "confidence") == "arima"
    assert recommend_model(comparison) == "prophet"


@pytest.mark.parametrize("metric", ["accuracy", "growth", "confidence"])
def test_ties_go_to_prophet(metric):
    tied = {
        "arima": _comparison(accuracy=86.0, growth=3.0, interval=8.0, name="ARIMA"),
        "prophet": _comparison(accuracy=86.0, growth=3.0, interval=8.0, name="Prophet"),
    }
    assert recommend_model(tied, metric) == "prophet"


def test_recommendation_rejects_unknown_metric(comparison):
    with pytest.raises(InvalidInputError):
        recommend_model(comparison, "mape")


def test_recommendation_needs_both_models(comparison):
    with pytest.raises(InvalidInputError):
        recommend_model({"arima": comparison["arima"]})
