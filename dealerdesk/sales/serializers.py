from rest_framework import serializers

from dealerdesk.sales.models import Customer, Sale


class CustomerSerializer(serializers.ModelSerializer):
    full_name = serializers.ReadOnlyField()

    class Meta:
        model = Customer
        fields = '__all__'
        read_only_fields = ('created_at',)


class SaleSerializer(serializers.ModelSerializer):
    """
    Sale record. The seller is always the requesting user; the sale date
    defaults to now but may be back-dated.
    """
    seller = serializers.PrimaryKeyRelatedField(read_only=True)
    motorcycle_name = serializers.StringRelatedField(source='motorcycle', read_only=True)
    customer_name = serializers.ReadOnlyField(source='customer.full_name')

    class Meta:
        model = Sale
        fields = '__all__'

    def validate_sale_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Sale price must be positive")
        return value
