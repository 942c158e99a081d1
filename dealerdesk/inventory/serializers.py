from django.db import transaction
from rest_framework import serializers

from dealerdesk.inventory.models import (
    InventoryTransaction,
    Motorcycle,
    MotorcycleImage,
    PurchaseOrder,
    PurchaseOrderItem,
    Supplier,
)


class MotorcycleImageSerializer(serializers.ModelSerializer):
    class Meta:
        model = MotorcycleImage
        fields = '__all__'
        read_only_fields = ('motorcycle', 'created_at')


class MotorcycleSerializer(serializers.ModelSerializer):
    """Motorcycle with its derived margin."""
    margin = serializers.ReadOnlyField()

    class Meta:
        model = Motorcycle
        fields = '__all__'
        read_only_fields = ('created_by', 'created_at', 'updated_at')


class MotorcycleDetailSerializer(MotorcycleSerializer):
    images = MotorcycleImageSerializer(many=True, read_only=True)


class SupplierSerializer(serializers.ModelSerializer):
    class Meta:
        model = Supplier
        fields = '__all__'
        read_only_fields = ('created_at', 'updated_at')


class PurchaseOrderItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = PurchaseOrderItem
        fields = ('id', 'motorcycle', 'quantity', 'unit_cost')


class PurchaseOrderSerializer(serializers.ModelSerializer):
    """Purchase order created together with its line items."""
    items = PurchaseOrderItemSerializer(many=True)
    total_amount = serializers.ReadOnlyField()

    class Meta:
        model = PurchaseOrder
        fields = '__all__'
        read_only_fields = ('order_date', 'created_by')

    def validate_items(self, items):
        if not items:
            raise serializers.ValidationError("A purchase order needs at least one item")
        return items

    @transaction.atomic
    def create(self, validated_data):
        items = validated_data.pop('items')
        order = PurchaseOrder.objects.create(**validated_data)
        PurchaseOrderItem.objects.bulk_create(
            PurchaseOrderItem(purchase_order=order, **item) for item in items
        )
        return order


class InventoryTransactionSerializer(serializers.ModelSerializer):
    class Meta:
        model = InventoryTransaction
        fields = '__all__'
        read_only_fields = ('transaction_date', 'created_by')

    def validate_quantity(self, value):
        if value == 0:
            raise serializers.ValidationError("Quantity must be non-zero")
        return value
