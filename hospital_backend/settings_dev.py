"""
Development settings (SQLite).

Usage:
    export DJANGO_SETTINGS_MODULE=hospital_backend.settings_dev
    python manage.py migrate
    python manage.py migrate --database records
    python manage.py seed_records
    python manage.py runserver
"""

from .settings import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '[::1]', '*']

# ---------------------------------------------------------
# DATABASES: one SQLite file per alias
# ---------------------------------------------------------

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'dev.sqlite3',
        'OPTIONS': {
            'timeout': 20,
        },
    },
    'records': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'dev_records.sqlite3',
        'OPTIONS': {
            'timeout': 20,
        },
    },
}

# ---------------------------------------------------------
# LOGGING: verbose output for the project loggers
# ---------------------------------------------------------

LOGGING['loggers']['hospital_backend']['level'] = 'DEBUG'
LOGGING['loggers']['django.db.backends'] = {
    'handlers': ['console'],
    'level': 'WARNING',  # DEBUG to see SQL queries
    'propagate': False,
}

# ---------------------------------------------------------
# SECURITY: relaxed for local development only
# ---------------------------------------------------------

SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
SECURE_HSTS_SECONDS = 0

EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'
