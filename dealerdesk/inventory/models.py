from django.db import models
from django.conf import settings
from django.utils.translation import gettext_lazy as _


class Motorcycle(models.Model):
    """
    A motorcycle model held in dealership stock.

    `stock` is the unit count on hand; `status` is derived from it and the
    reorder point whenever an inventory transaction is recorded.
    """

    class Status(models.TextChoices):
        IN_STOCK = "in_stock", _("In Stock")
        LOW_STOCK = "low_stock", _("Low Stock")
        OUT_OF_STOCK = "out_of_stock", _("Out of Stock")
        DISCONTINUED = "discontinued", _("Discontinued")

    # ===== Identity =====
    make = models.CharField(max_length=100)
    model = models.CharField(max_length=100)
    year = models.PositiveIntegerField()
    category = models.CharField(
        max_length=50,
        help_text="e.g. Sport, Cruiser, Touring, Adventure"
    )
    color = models.CharField(max_length=50)
    vin = models.CharField(max_length=17, unique=True, verbose_name="VIN")
    description = models.TextField(blank=True)
    image_url = models.CharField(max_length=500, blank=True)

    # ===== Pricing =====
    price = models.FloatField(help_text="Retail price")
    cost = models.FloatField(help_text="Dealer acquisition cost")

    # ===== Stock =====
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.IN_STOCK)
    stock = models.IntegerField(default=0)
    reorder_point = models.PositiveIntegerField(
        default=5,
        help_text="Stock at or below this level is flagged as low"
    )

    # ===== Metadata =====
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True,
        on_delete=models.SET_NULL, related_name='+'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['make', 'model', '-year']
        verbose_name = 'Motorcycle'
        verbose_name_plural = 'Motorcycles'

    def __str__(self):
        return f"{self.year} {self.make} {self.model}"

    @property
    def margin(self):
        return self.price - self.cost

    def status_for_stock(self, stock: int) -> str:
        """Stock status implied by a unit count against this model's reorder point."""
        if stock <= 0:
            return self.Status.OUT_OF_STOCK
        if stock <= self.reorder_point:
            return self.Status.LOW_STOCK
        return self.Status.IN_STOCK


class MotorcycleImage(models.Model):
    motorcycle = models.ForeignKey(Motorcycle, on_delete=models.CASCADE, related_name='images')
    image_url = models.CharField(max_length=500)
    caption = models.CharField(max_length=255, blank=True)
    is_primary = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-is_primary', 'id']

    def __str__(self):
        return self.image_url


class Supplier(models.Model):
    name = models.CharField(max_length=255, unique=True)
    contact_name = models.CharField(max_length=255, blank=True)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=32, blank=True)
    address = models.TextField(blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class PurchaseOrder(models.Model):
    """An order of motorcycles from a supplier."""

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        ORDERED = "ordered", _("Ordered")
        RECEIVED = "received", _("Received")
        CANCELLED = "cancelled", _("Cancelled")

    supplier = models.ForeignKey(Supplier, on_delete=models.PROTECT, related_name='purchase_orders')
    order_number = models.CharField(max_length=50, unique=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    order_date = models.DateTimeField(auto_now_add=True)
    expected_delivery = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True,
        on_delete=models.SET_NULL, related_name='+'
    )

    class Meta:
        ordering = ['-order_date']

    def __str__(self):
        return self.order_number

    @property
    def total_amount(self):
        return sum(item.quantity * item.unit_cost for item in self.items.all())


class PurchaseOrderItem(models.Model):
    purchase_order = models.ForeignKey(PurchaseOrder, on_delete=models.CASCADE, related_name='items')
    motorcycle = models.ForeignKey(Motorcycle, on_delete=models.PROTECT, related_name='+')
    quantity = models.PositiveIntegerField()
    unit_cost = models.FloatField()

    def __str__(self):
        return f"{self.quantity} x {self.motorcycle}"


class InventoryTransaction(models.Model):
    """
    A signed stock movement. Positive quantities add units, negative remove them.
    Saving a new transaction adjusts the motorcycle's stock (see signals).
    """

    class Type(models.TextChoices):
        PURCHASE = "purchase", _("Purchase")
        SALE = "sale", _("Sale")
        ADJUSTMENT = "adjustment", _("Adjustment")
        RETURN = "return", _("Return")

    motorcycle = models.ForeignKey(Motorcycle, on_delete=models.CASCADE, related_name='transactions')
    transaction_type = models.CharField(max_length=20, choices=Type.choices)
    quantity = models.IntegerField(help_text="Signed unit change")
    transaction_date = models.DateTimeField(auto_now_add=True)
    purchase_order = models.ForeignKey(
        PurchaseOrder, null=True, blank=True,
        on_delete=models.SET_NULL, related_name='transactions'
    )
    notes = models.TextField(blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True,
        on_delete=models.SET_NULL, related_name='+'
    )

    class Meta:
        ordering = ['-transaction_date', '-id']

    def __str__(self):
        return f"{self.get_transaction_type_display()} {self.quantity:+d} {self.motorcycle}"
