from django.contrib import admin
from .models import (
    InventoryTransaction,
    Motorcycle,
    MotorcycleImage,
    PurchaseOrder,
    PurchaseOrderItem,
    Supplier,
)


class MotorcycleImageInline(admin.TabularInline):
    model = MotorcycleImage
    extra = 0


@admin.register(Motorcycle)
class MotorcycleAdmin(admin.ModelAdmin):
    """
    Admin interface for the inventory with organized fieldsets.
    """

    # List view configuration
    list_display = ['__str__', 'vin', 'category', 'price', 'stock', 'stock_status', 'updated_at']
    list_filter = ['status', 'category', 'make', 'year']
    search_fields = ['make', 'model', 'vin', 'description']
    ordering = ['make', 'model', '-year']
    inlines = [MotorcycleImageInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('make', 'model', 'year', 'category', 'color', 'vin'),
        }),
        ('Pricing', {
            'fields': ('price', 'cost'),
        }),
        ('Stock', {
            'fields': ('stock', 'reorder_point', 'status'),
            'description': 'Stock normally changes through inventory transactions',
        }),
        ('Presentation', {
            'fields': ('description', 'image_url'),
            'classes': ('collapse',)
        }),
    )

    def stock_status(self, obj):
        marks = {
            Motorcycle.Status.IN_STOCK: '✓',
            Motorcycle.Status.LOW_STOCK: '!',
            Motorcycle.Status.OUT_OF_STOCK: '✗',
        }
        return f"{marks.get(obj.status, '-')} {obj.get_status_display()}"
    stock_status.short_description = 'Status'


@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    list_display = ['name', 'contact_name', 'email', 'phone']
    search_fields = ['name', 'contact_name', 'email']


class PurchaseOrderItemInline(admin.TabularInline):
    model = PurchaseOrderItem
    extra = 1


@admin.register(PurchaseOrder)
class PurchaseOrderAdmin(admin.ModelAdmin):
    list_display = ['order_number', 'supplier', 'status', 'order_date', 'expected_delivery', 'total_amount']
    list_filter = ['status', 'supplier']
    search_fields = ['order_number', 'supplier__name']
    inlines = [PurchaseOrderItemInline]


@admin.register(InventoryTransaction)
class InventoryTransactionAdmin(admin.ModelAdmin):
    list_display = ['motorcycle', 'transaction_type', 'quantity', 'transaction_date', 'created_by']
    list_filter = ['transaction_type']
    search_fields = ['motorcycle__make', 'motorcycle__model', 'motorcycle__vin', 'notes']

    def save_model(self, request, obj, form, change):
        if not change:
            obj.created_by = request.user
        super().save_model(request, obj, form, change)
