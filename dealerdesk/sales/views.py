import logging
from datetime import datetime, time, timedelta

from django.db.models import ProtectedError
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from dealerdesk.accounts.permissions import AdminRoleCanDelete
from dealerdesk.common.exceptions import InvalidInputError
from dealerdesk.sales.models import Customer, Sale
from dealerdesk.sales.reports import monthly_sales_series, top_selling_models
from dealerdesk.sales.serializers import CustomerSerializer, SaleSerializer

logger = logging.getLogger(__name__)


def _parse_bound(value: str, end: bool = False) -> datetime | None:
    """
    Parse a date or datetime query value. A bare end date covers the whole day.
    """
    moment = parse_datetime(value)
    if moment is None:
        day = parse_date(value)
        if day is None:
            return None
        moment = datetime.combine(day, time.min)
        if end:
            moment += timedelta(days=1) - timedelta(microseconds=1)
    if timezone.is_naive(moment):
        moment = timezone.make_aware(moment)
    return moment


class CustomerViewSet(viewsets.ModelViewSet):
    """
    CRM contacts. Full CRUD; delete requires the admin role and fails with
    409 while the customer still has recorded sales.
    """
    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer
    permission_classes = [AdminRoleCanDelete]

    def destroy(self, request, *args, **kwargs):
        customer = self.get_object()
        try:
            customer.delete()
        except ProtectedError:
            logger.warning(f"Refusing to delete customer {customer.pk} with recorded sales")
            return Response(
                {"message": "Customer has recorded sales and cannot be deleted"},
                status=status.HTTP_409_CONFLICT,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)


class SaleViewSet(mixins.ListModelMixin,
                  mixins.RetrieveModelMixin,
                  mixins.CreateModelMixin,
                  viewsets.GenericViewSet):
    """
    Sales ledger.

    Custom actions:
    - GET /sales/range?start_date=&end_date= - Sales inside a date range
    """
    queryset = Sale.objects.select_related('motorcycle', 'customer', 'seller')
    serializer_class = SaleSerializer

    def perform_create(self, serializer):
        sale = serializer.save(seller=self.request.user)
        logger.info(f"Recorded sale {sale.pk}: {sale}")

    @extend_schema(
        summary="Sales in a date range",
        parameters=[
            OpenApiParameter('start_date', OpenApiTypes.DATE, required=True),
            OpenApiParameter('end_date', OpenApiTypes.DATE, required=True),
        ],
        responses={200: SaleSerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path='range')
    def date_range(self, request):
        raw_start = request.query_params.get('start_date')
        raw_end = request.query_params.get('end_date')
        if not raw_start or not raw_end:
            return Response(
                {"message": "Both start_date and end_date are required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        start = _parse_bound(raw_start)
        end = _parse_bound(raw_end, end=True)
        if start is None or end is None:
            return Response({"message": "Dates must be ISO formatted"}, status=status.HTTP_400_BAD_REQUEST)

        sales = self.get_queryset().filter(sale_date__gte=start, sale_date__lte=end)
        return Response(self.get_serializer(sales, many=True).data)


class TopSellingView(APIView):
    """Dashboard: models ranked by units sold."""

    @extend_schema(
        summary="Top selling models",
        parameters=[OpenApiParameter('limit', OpenApiTypes.INT)],
        responses={200: {"type": "array", "items": {"type": "object"}}},
    )
    def get(self, request):
        limit = request.query_params.get('limit')
        limit = int(limit) if limit and limit.isdigit() else None
        return Response(top_selling_models(limit=limit))


class MonthlySalesView(APIView):
    """Dashboard: monthly unit or revenue totals."""

    @extend_schema(
        summary="Monthly sales",
        parameters=[
            OpenApiParameter('months', OpenApiTypes.INT, description="Defaults to 12"),
            OpenApiParameter('metric', OpenApiTypes.STR, enum=["units", "revenue"]),
        ],
        responses={200: {"type": "array", "items": {"type": "object"}}},
    )
    def get(self, request):
        months = request.query_params.get('months', '12')
        metric = request.query_params.get('metric', 'units')
        if not months.isdigit():
            return Response({"error": "months must be a positive integer"}, status=status.HTTP_400_BAD_REQUEST)
        try:
            series = monthly_sales_series(int(months), metric=metric)
        except InvalidInputError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response([point.as_dict() for point in series])
