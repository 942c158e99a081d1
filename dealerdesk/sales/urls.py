from django.urls import path
from rest_framework.routers import SimpleRouter
from . import views

router = SimpleRouter(trailing_slash=False)
router.register('customers', views.CustomerViewSet, basename='customer')
router.register('sales', views.SaleViewSet, basename='sale')

urlpatterns = [
    path('dashboard/top-selling', views.TopSellingView.as_view(), name='top_selling'),
    path('dashboard/monthly-sales', views.MonthlySalesView.as_view(), name='monthly_sales'),
] + router.urls
