from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from dealerdesk.common import health

urlpatterns = [
    path('admin/', admin.site.urls),
    # Container health check endpoints
    path('healthz', health.healthz, name='healthz'),
    path('health', health.healthz, name='health'),
    path('readiness', health.readiness, name='readiness'),
    path('ready', health.readiness, name='ready'),
    path('startup', health.startup, name='startup'),
    # API
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='docs'),
    path('api/', include('dealerdesk.accounts.urls')),
    path('api/', include('dealerdesk.inventory.urls')),
    path('api/', include('dealerdesk.sales.urls')),
    path('api/', include('dealerdesk.predictions.urls')),
]
