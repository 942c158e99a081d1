import logging

from django.conf import settings
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from pydantic import BaseModel, ValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from dealerdesk.common.exceptions import InvalidInputError
from dealerdesk.predictions.schemas import ArimaRequest, CompareRequest, HistoryRequest, ProphetRequest
from dealerdesk.predictions.service import ForecastService

logger = logging.getLogger(__name__)

FORECAST_RESPONSES = {
    200: {"type": "object", "properties": {
        "history": {"type": "array"},
        "forecast": {"type": "object"},
        "chart": {"type": "array"},
        "stats": {"type": "object"},
    }},
    400: {"type": "object", "properties": {"error": {"type": "string"}}},
    500: {"type": "object", "properties": {"status": {"type": "string"}, "message": {"type": "string"}}},
}


def get_forecast_service() -> ForecastService:
    return ForecastService(settings.FORECASTING)


class ForecastView(APIView):
    """
    Base for the prediction endpoints: validate the payload, run the
    service, map input errors to 400.
    """
    request_model: type[BaseModel]

    def get_payload(self, request) -> dict:
        data = request.data
        return data.dict() if hasattr(data, "dict") else data

    def run(self, service: ForecastService, payload):
        raise NotImplementedError

    def handle_forecast(self, request):
        try:
            payload = self.request_model.model_validate(self.get_payload(request))
        except ValidationError as e:
            return Response({"error": f"Invalid payload: {e}"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            return Response(self.run(get_forecast_service(), payload))
        except InvalidInputError as e:
            logger.warning(f"Rejected forecast request: {e}")
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except Exception as e:
            logger.exception("Forecast failed")
            return Response({"status": "error", "message": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class HistoryView(ForecastView):
    """Monthly history as it would be fed to the simulators."""
    request_model = HistoryRequest

    def get_payload(self, request):
        return request.query_params.dict()

    def run(self, service, payload):
        return [point.as_dict() for point in service.load_history(payload)]

    @extend_schema(
        summary="Sales history",
        description="Synthetic demo history, or monthly aggregates of recorded sales",
        parameters=[
            OpenApiParameter('months', OpenApiTypes.INT),
            OpenApiParameter('source', OpenApiTypes.STR, enum=["demo", "sales"]),
            OpenApiParameter('metric', OpenApiTypes.STR, enum=["units", "revenue"]),
            OpenApiParameter('seed', OpenApiTypes.INT),
        ],
        responses={200: {"type": "array", "items": {"type": "object"}}},
    )
    def get(self, request):
        return self.handle_forecast(request)


class ArimaForecastView(ForecastView):
    request_model = ArimaRequest

    def run(self, service, payload):
        return service.run_arima(payload)

    @extend_schema(
        summary="ARIMA-like forecast",
        description="Simulated ARIMA forecast with widening bands. Only d changes the output.",
        request={"type": "object", "description": "months, periods, p, d, q, source, metric, seed"},
        responses=FORECAST_RESPONSES,
    )
    def post(self, request):
        return self.handle_forecast(request)


class ProphetForecastView(ForecastView):
    request_model = ProphetRequest

    def run(self, service, payload):
        return service.run_prophet(payload)

    @extend_schema(
        summary="Prophet-like forecast",
        description="Linear trend with yearly seasonality and a December bump",
        request={"type": "object", "description": "months, periods, source, metric, seed"},
        responses=FORECAST_RESPONSES,
    )
    def post(self, request):
        return self.handle_forecast(request)


class CompareForecastView(ForecastView):
    request_model = CompareRequest

    def run(self, service, payload):
        return service.run_comparison(payload)

    @extend_schema(
        summary="Compare forecasting models",
        description="Runs both simulators over one shared history",
        request={"type": "object", "description": "months, periods, p, d, q, source, metric, seed, compare_by"},
        responses={200: {"type": "object", "properties": {"history": {"type": "array"}, "models": {"type": "object"}, "compareBy": {"type": "string"}, "recommended": {"type": "string"}}}},
    )
    def post(self, request):
        return self.handle_forecast(request)
