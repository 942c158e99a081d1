import os
import sys
import django
from pathlib import Path

# Add project root to sys.path
BASE_DIR = Path(__file__).resolve().parent.parent
sys.path.append(str(BASE_DIR))

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'dealerdesk.config.settings')
os.environ.setdefault('DEALERDESK_CONFIG_FILE', 'config.yaml')

try:
    django.setup()
    from django.conf import settings
    forecasting = settings.FORECASTING
    print(f"DEBUG: {settings.DEBUG}")
    print(f"DB_TYPE: {settings.DB_TYPE}")
    print(f"HISTORY: {forecasting.history_months} months (max {forecasting.max_history_months})")
    print(f"HORIZON: {forecasting.horizon} months (max {forecasting.max_horizon})")
    print(f"ARIMA ORDER: ({forecasting.arima.p}, {forecasting.arima.d}, {forecasting.arima.q})")
    print(f"SEED: {forecasting.seed if forecasting.seed is not None else 'random'}")
    print("Configuration loaded successfully!")
except Exception as e:
    print(f"Configuration failed: {e}")
    sys.exit(1)
