"""
Forecast Service - orchestrates a single forecast request:
1. Build the monthly history (synthetic demo series or recorded sales)
2. Run the ARIMA-like and/or Prophet-like simulator
3. Format chart rows and headline statistics
"""

import logging
from datetime import date
from typing import Any

import numpy as np

from dealerdesk.common.dataclasses import ArimaParams, ForecastResult, TimePoint
from dealerdesk.common.exceptions import InvalidInputError
from dealerdesk.config.schema import ForecastingSettings
from dealerdesk.core.services.arima import simulate_arima_like
from dealerdesk.core.services.chart import date_forecast, format_for_chart
from dealerdesk.core.services.history import generate_historical_series
from dealerdesk.core.services.prophet import simulate_prophet_like
from dealerdesk.core.services.summary import MODEL_NAMES, compare_models, recommend_model, summarize_forecast
from dealerdesk.predictions.schemas import ArimaRequest, CompareRequest, HistoryRequest, ProphetRequest
from dealerdesk.sales.reports import monthly_sales_series

logger = logging.getLogger(__name__)


class ForecastService:
    """
    Stateless per request: every call builds fresh history and results.
    """

    def __init__(self, settings: ForecastingSettings, today: date | None = None):
        """
        Args:
            settings: Forecasting defaults and limits
            today: Anchor for the history window, defaults to the current date
        """
        self.settings = settings
        self.today = today

    # --- History ---

    def _rng(self, seed: int | None) -> np.random.Generator:
        return np.random.default_rng(seed if seed is not None else self.settings.seed)

    def _months(self, request: HistoryRequest) -> int:
        months = request.months or self.settings.history_months
        if months > self.settings.max_history_months:
            raise InvalidInputError(
                f"History is limited to {self.settings.max_history_months} months, got {months}"
            )
        return months

    def _periods(self, request: ProphetRequest) -> int:
        periods = request.periods or self.settings.horizon
        if periods > self.settings.max_horizon:
            raise InvalidInputError(
                f"Horizon is limited to {self.settings.max_horizon} months, got {periods}"
            )
        return periods

    def _arima_params(self, request: ArimaRequest) -> ArimaParams:
        defaults = self.settings.arima
        return ArimaParams(
            p=request.p if request.p is not None else defaults.p,
            d=request.d if request.d is not None else defaults.d,
            q=request.q if request.q is not None else defaults.q,
        )

    def load_history(self, request: HistoryRequest, rng: np.random.Generator | None = None) -> list[TimePoint]:
        months = self._months(request)
        if request.source == "sales":
            logger.info(f"Loading {months} months of recorded {request.metric} history")
            return monthly_sales_series(months, metric=request.metric, today=self.today)

        return generate_historical_series(months, rng=rng or self._rng(request.seed), today=self.today)

    # --- Forecasts ---

    def _arima(self, history: list[TimePoint], periods: int, params: ArimaParams) -> ForecastResult[TimePoint]:
        result = simulate_arima_like([p.value for p in history], periods, params)
        return date_forecast(result, history[-1].date)

    def _summary(self, key: str, history: list[TimePoint], result: ForecastResult[TimePoint]):
        return summarize_forecast(MODEL_NAMES[key], history, result.predictions, result.confidence_interval)

    def _payload(self, history: list[TimePoint], result: ForecastResult[TimePoint], stats: dict) -> dict[str, Any]:
        chart = format_for_chart(history, result.predictions, result.lower_bounds, result.upper_bounds)
        return {
            "forecast": result.as_dict(),
            "chart": [row.as_dict() for row in chart],
            "stats": stats,
        }

    def run_arima(self, request: ArimaRequest) -> dict[str, Any]:
        periods = self._periods(request)
        params = self._arima_params(request)
        history = self.load_history(request)

        logger.info(f"Running ARIMA-like forecast: {len(history)} months -> {periods} periods, order={params}")
        result = self._arima(history, periods, params)

        return {
            "model": "arima",
            "params": params.as_dict(),
            "history": [p.as_dict() for p in history],
            **self._payload(history, result, self._summary("arima", history, result).as_dict()),
        }

    def run_prophet(self, request: ProphetRequest) -> dict[str, Any]:
        periods = self._periods(request)
        history = self.load_history(request)

        logger.info(f"Running Prophet-like forecast: {len(history)} months -> {periods} periods")
        result = simulate_prophet_like(history, periods)

        return {
            "model": "prophet",
            "history": [p.as_dict() for p in history],
            **self._payload(history, result, self._summary("prophet", history, result).as_dict()),
        }

    def run_comparison(self, request: CompareRequest) -> dict[str, Any]:
        """
        Both simulators over one shared history, plus the comparison figures.
        """
        periods = self._periods(request)
        params = self._arima_params(request)
        rng = self._rng(request.seed)
        history = self.load_history(request, rng=rng)

        logger.info(f"Comparing models: {len(history)} months -> {periods} periods, order={params}")
        results = {
            "arima": self._arima(history, periods, params),
            "prophet": simulate_prophet_like(history, periods),
        }
        summaries = {key: self._summary(key, history, result) for key, result in results.items()}
        comparison = compare_models(summaries, rng=rng)
        recommended = recommend_model(comparison, request.compare_by)
        logger.info(f"Recommended {recommended} by {request.compare_by}")

        return {
            "params": params.as_dict(),
            "history": [p.as_dict() for p in history],
            "models": {
                key: self._payload(history, result, comparison[key].as_dict())
                for key, result in results.items()
            },
            "compareBy": request.compare_by,
            "recommended": recommended,
        }
