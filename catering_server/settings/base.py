"""
Django settings for catering_server project.
Base settings shared across all environments.
"""

from pathlib import Path
from decouple import config

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = config('SECRET_KEY', default='django-insecure-change-me-in-production')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = config('DEBUG', default=True, cast=bool)

# Application definition
DJANGO_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
]

THIRD_PARTY_APPS = [
    'rest_framework',
]

LOCAL_APPS = [
    'apps.common',
    'apps.products',
    'apps.orders',
    'apps.capacity',
    'apps.discounts',
    'apps.packaging',
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

# The engine works on in-memory snapshots only
DATABASES = {}

# Internationalization
LANGUAGE_CODE = 'cs'
TIME_ZONE = config('TIME_ZONE', default='Europe/Prague')
USE_I18N = True
USE_TZ = True

# Capacity engine
CAPACITY_LOAD_WARNING_PERCENT = config('CAPACITY_LOAD_WARNING_PERCENT', default=80, cast=int)

# Pricing
CURRENCY_LABEL = config('CURRENCY_LABEL', default='Kč')

# Logging
LOG_DIR = Path(config('LOG_DIR', default=str(BASE_DIR / 'logs')))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '[{levelname}] {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '[{levelname}] {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'apps': {
            'handlers': ['console'],
            'level': config('LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
    },
}

if config('LOG_TO_FILE', default=False, cast=bool):
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    LOGGING['handlers']['file'] = {
        'level': 'INFO',
        'class': 'logging.FileHandler',
        'filename': LOG_DIR / 'engine.log',
        'formatter': 'verbose',
    }
    LOGGING['root']['handlers'].append('file')
    LOGGING['loggers']['apps']['handlers'].append('file')
