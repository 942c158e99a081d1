import os
import yaml
from pathlib import Path
from dealerdesk.config.schema import AppConfig

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# --- Configuration Loading ---
CONFIG_FILE = os.environ.get('DEALERDESK_CONFIG_FILE', 'config.yaml')
config_path = BASE_DIR / CONFIG_FILE

if not config_path.exists():
    print(f"Warning: Config file {config_path} not found. Using defaults.")
    config_data = {}
else:
    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        print(f"Error loading config file {config_path}: {e}")
        config_data = {}

# Crash early on an invalid config rather than run with half-applied values
try:
    app_config = AppConfig(**config_data)
except Exception as e:
    print(f"Configuration Validation Error: {e}")
    raise

# --- Django Settings ---
DEBUG = app_config.django.debug
SECRET_KEY = app_config.django.secret_key
ALLOWED_HOSTS = app_config.django.allowed_hosts

# Application definition
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'drf_spectacular',
    'dealerdesk.accounts',
    'dealerdesk.inventory',
    'dealerdesk.sales',
    'dealerdesk.predictions',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'dealerdesk.config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'dealerdesk.config.wsgi.application'
ASGI_APPLICATION = 'dealerdesk.config.asgi.application'

# Database Setup
DB_TYPE = app_config.django.database_type

if DB_TYPE == 'sqlite':
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }
else:
    pg = app_config.postgres
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': pg.name,
            'USER': pg.user,
            'PASSWORD': pg.password,
            'HOST': pg.host,
            'PORT': pg.port,
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Session auth only; the browser client shares the Django session cookie
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.SessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
}

SPECTACULAR_SETTINGS = {
    'TITLE': 'DealerDesk API',
    'DESCRIPTION': 'Inventory, sales, CRM and demo sales forecasts for a motorcycle dealership',
    'VERSION': '0.1.0',
}

# --- Custom DealerDesk Settings ---
DATABASE_TYPE = DB_TYPE
FORECASTING = app_config.forecasting

USE_TZ = True
TIME_ZONE = 'UTC'

# Static files configuration
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
}
