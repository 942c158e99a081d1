from django.contrib import admin
from .models import Customer, Sale


class SaleInline(admin.TabularInline):
    model = Sale
    extra = 0
    fields = ['motorcycle', 'sale_date', 'sale_price', 'payment_method', 'status']
    readonly_fields = fields
    can_delete = False
    show_change_link = True


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'email', 'phone', 'city', 'state', 'created_at']
    list_filter = ['state']
    search_fields = ['first_name', 'last_name', 'email', 'phone']
    inlines = [SaleInline]

    fieldsets = (
        ('Contact', {
            'fields': ('first_name', 'last_name', 'email', 'phone', 'date_of_birth'),
        }),
        ('Address', {
            'fields': ('address', 'city', 'state', 'zip_code'),
            'classes': ('collapse',)
        }),
        ('Notes', {
            'fields': ('notes',),
        }),
    )


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    list_display = ['sale_date', 'motorcycle', 'customer', 'seller', 'sale_price', 'payment_method', 'status']
    list_filter = ['status', 'payment_method', 'sale_date']
    search_fields = ['customer__first_name', 'customer__last_name', 'motorcycle__make', 'motorcycle__model']
    date_hierarchy = 'sale_date'
    autocomplete_fields = ['customer']