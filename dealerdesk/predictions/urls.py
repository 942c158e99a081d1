from django.urls import path
from . import views

urlpatterns = [
    path('predictions/history', views.HistoryView.as_view(), name='prediction_history'),
    path('predictions/arima', views.ArimaForecastView.as_view(), name='prediction_arima'),
    path('predictions/prophet', views.ProphetForecastView.as_view(), name='prediction_prophet'),
    path('predictions/compare', views.CompareForecastView.as_view(), name='prediction_compare'),
]
