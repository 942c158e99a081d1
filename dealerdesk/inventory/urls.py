from rest_framework.routers import SimpleRouter
from . import views

router = SimpleRouter(trailing_slash=False)
router.register('motorcycles', views.MotorcycleViewSet, basename='motorcycle')
router.register('motorcycle-images', views.MotorcycleImageViewSet, basename='motorcycle-image')
router.register('suppliers', views.SupplierViewSet, basename='supplier')
router.register('purchase-orders', views.PurchaseOrderViewSet, basename='purchase-order')
router.register('inventory-transactions', views.InventoryTransactionViewSet, basename='inventory-transaction')

urlpatterns = router.urls
