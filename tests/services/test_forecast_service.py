"""
Tests for ForecastService.
"""
from datetime import datetime, timezone as dt_timezone

import pytest

from dealerdesk.common.exceptions import InvalidInputError
from dealerdesk.config.schema import ForecastingSettings
from dealerdesk.predictions.schemas import ArimaRequest, CompareRequest, HistoryRequest, ProphetRequest
from dealerdesk.predictions.service import ForecastService
from dealerdesk.sales.models import Sale


@pytest.fixture
def service(today):
    return ForecastService(ForecastingSettings(history_months=12, horizon=4, max_history_months=60, max_horizon=12), today=today)


def test_demo_history_uses_configured_length(service):
    history = service.load_history(HistoryRequest(seed=1))
    assert len(history) == 12
    assert history[-1].date == "2024-06-01"


def test_seeded_history_is_reproducible(service):
    assert service.load_history(HistoryRequest(seed=5)) == service.load_history(HistoryRequest(seed=5))


def test_configured_seed_used_when_request_has_none(today):
    service = ForecastService(ForecastingSettings(seed=11), today=today)
    assert service.load_history(HistoryRequest()) == service.load_history(HistoryRequest())


def test_history_limit_enforced(service):
    with pytest.raises(InvalidInputError):
        service.load_history(HistoryRequest(months=61))


def test_horizon_limit_enforced(service):
    with pytest.raises(InvalidInputError):
        service.run_prophet(ProphetRequest(periods=13, seed=1))


def test_arima_payload(service):
    payload = service.run_arima(ArimaRequest(seed=3, periods=3, d=2))

    assert payload["model"] == "arima"
    assert payload["params"] == {"p": 1, "d": 2, "q": 0}
    assert len(payload["history"]) == 12
    assert len(payload["forecast"]["predictions"]) == 3
    assert payload["forecast"]["predictions"][0]["date"] == "2024-07-01"
    assert len(payload["chart"]) == 15
    assert payload["stats"]["modelName"] == "ARIMA"
    assert payload["stats"]["confidenceInterval"] == payload["forecast"]["confidenceInterval"]


def test_prophet_payload_uses_default_horizon(service):
    payload = service.run_prophet(ProphetRequest(seed=3))

    assert payload["model"] == "prophet"
    assert len(payload["forecast"]["predictions"]) == 4
    chart_dates = [row["date"] for row in payload["chart"]]
    assert chart_dates == sorted(chart_dates)
    assert payload["stats"]["modelName"] == "Prophet"


def test_comparison_shares_history(service):
    payload = service.run_comparison(CompareRequest(seed=8, periods=2))

    assert set(payload["models"]) == {"arima", "prophet"}
    for model in payload["models"].values():
        assert len(model["forecast"]["predictions"]) == 2
        assert len(model["chart"]) == len(payload["history"]) + 2
        assert "accuracy" in model["stats"]
        assert "meanError" in model["stats"]


def test_comparison_is_reproducible_with_seed(service):
    request = CompareRequest(seed=8, periods=2)
    assert service.run_comparison(request) == service.run_comparison(request)


def test_sales_history_from_recorded_sales(service, motorcycle, customer, sales_rep):
    for day, price in [(3, 8000.0), (20, 8100.0)]:
        Sale.objects.create(
            motorcycle=motorcycle, customer=customer, seller=sales_rep,
            sale_date=datetime(2024, 5, day, 12, tzinfo=dt_timezone.utc),
            sale_price=price, payment_method=Sale.PaymentMethod.CASH,
        )

    units = service.load_history(HistoryRequest(source="sales", months=3))
    revenue = service.load_history(HistoryRequest(source="sales", months=3, metric="revenue"))

    assert [p.date for p in units] == ["2024-04-01", "2024-05-01", "2024-06-01"]
    assert [p.value for p in units] == [0.0, 2.0, 0.0]
    assert revenue[1].value == 16100.0


def test_single_month_of_sales_rejected_by_prophet(service):
    with pytest.raises(InvalidInputError):
        service.run_prophet(ProphetRequest(source="sales", months=1))


def test_comparison_recommends_by_growth(service):
    payload = service.run_comparison(CompareRequest(seed=8, periods=3, compare_by="growth"))

    growth = {key: model["stats"]["growth"] for key, model in payload["models"].items()}
    expected = "arima" if growth["arima"] > growth["prophet"] else "prophet"
    assert payload["compareBy"] == "growth"
    assert payload["recommended"] == expected
