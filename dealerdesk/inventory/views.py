import logging

from django.db.models import ProtectedError
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from dealerdesk.accounts.permissions import AdminRoleCanDelete, PublicReadAdminDelete
from dealerdesk.inventory.models import (
    InventoryTransaction,
    Motorcycle,
    MotorcycleImage,
    PurchaseOrder,
    Supplier,
)
from dealerdesk.inventory.serializers import (
    InventoryTransactionSerializer,
    MotorcycleDetailSerializer,
    MotorcycleImageSerializer,
    MotorcycleSerializer,
    PurchaseOrderSerializer,
    SupplierSerializer,
)

logger = logging.getLogger(__name__)


class MotorcycleViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Motorcycle CRUD operations.

    Provides:
    - GET /motorcycles - List inventory (public)
    - GET /motorcycles/{id} - Motorcycle with its images (public)
    - POST /motorcycles - Add a motorcycle
    - PUT/PATCH /motorcycles/{id} - Update a motorcycle
    - DELETE /motorcycles/{id} - Remove a motorcycle (admin only, 409 once sold or ordered)

    Custom actions:
    - GET/POST /motorcycles/{id}/images - List or attach images
    """
    queryset = Motorcycle.objects.all()
    permission_classes = [PublicReadAdminDelete]

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return MotorcycleDetailSerializer
        return MotorcycleSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'retrieve':
            queryset = queryset.prefetch_related('images')
        return queryset

    def perform_create(self, serializer):
        motorcycle = serializer.save(created_by=self.request.user)
        logger.info(f"Added motorcycle {motorcycle} (VIN {motorcycle.vin})")

    def destroy(self, request, *args, **kwargs):
        motorcycle = self.get_object()
        try:
            motorcycle.delete()
        except ProtectedError:
            logger.warning(f"Refusing to delete motorcycle {motorcycle.pk} referenced by sales or orders")
            return Response(
                {"message": "Motorcycle has recorded sales or purchase orders and cannot be deleted"},
                status=status.HTTP_409_CONFLICT,
            )
        logger.info(f"Deleted motorcycle {motorcycle} (VIN {motorcycle.vin})")
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        summary="Motorcycle images",
        description="List the images of a motorcycle, or attach a new image URL",
        request=MotorcycleImageSerializer,
        responses={200: MotorcycleImageSerializer(many=True), 201: MotorcycleImageSerializer},
    )
    @action(detail=True, methods=['get', 'post'])
    def images(self, request, pk=None):
        motorcycle = self.get_object()
        if request.method == 'GET':
            serializer = MotorcycleImageSerializer(motorcycle.images.all(), many=True)
            return Response(serializer.data)

        serializer = MotorcycleImageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save(motorcycle=motorcycle)
        return Response(serializer.data, status=status.HTTP_201_CREATED)


class MotorcycleImageViewSet(mixins.DestroyModelMixin, viewsets.GenericViewSet):
    """DELETE /motorcycle-images/{id} - Detach an image."""
    queryset = MotorcycleImage.objects.all()
    serializer_class = MotorcycleImageSerializer
    permission_classes = [IsAuthenticated]


class SupplierViewSet(mixins.ListModelMixin,
                      mixins.RetrieveModelMixin,
                      mixins.CreateModelMixin,
                      mixins.UpdateModelMixin,
                      viewsets.GenericViewSet):
    queryset = Supplier.objects.all()
    serializer_class = SupplierSerializer


class PurchaseOrderViewSet(mixins.ListModelMixin,
                           mixins.RetrieveModelMixin,
                           mixins.CreateModelMixin,
                           viewsets.GenericViewSet):
    queryset = PurchaseOrder.objects.select_related('supplier').prefetch_related('items')
    serializer_class = PurchaseOrderSerializer

    def perform_create(self, serializer):
        order = serializer.save(created_by=self.request.user)
        logger.info(f"Created purchase order {order.order_number} with {order.items.count()} items")


class InventoryTransactionViewSet(mixins.ListModelMixin,
                                  mixins.CreateModelMixin,
                                  viewsets.GenericViewSet):
    """
    Stock movements. Creating one updates the motorcycle's stock and status.
    """
    queryset = InventoryTransaction.objects.select_related('motorcycle')
    serializer_class = InventoryTransactionSerializer
    permission_classes = [AdminRoleCanDelete]

    @extend_schema(
        parameters=[OpenApiParameter('motorcycle_id', OpenApiTypes.INT, description="Only this motorcycle's transactions")]
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def get_queryset(self):
        queryset = super().get_queryset()
        motorcycle_id = self.request.query_params.get('motorcycle_id')
        if motorcycle_id:
            if not motorcycle_id.isdigit():
                return queryset.none()
            queryset = queryset.filter(motorcycle_id=int(motorcycle_id))
        return queryset

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)
