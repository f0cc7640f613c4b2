"""
Django settings for the hospital daily report backend.

Important: this setup uses PostgreSQL for both database aliases and never runs
migrations automatically.
"""

import os
from datetime import timedelta
from pathlib import Path

import dj_database_url
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(dotenv_path=BASE_DIR / '.env', override=False)


def _env(key: str, default: str | None = None) -> str | None:
    return os.getenv(key, default)


def _env_bool(key: str, default: bool = False) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() in {'1', 'true', 'yes', 'on'}


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


SECRET_KEY = _env(
    'DJANGO_SECRET_KEY',
    'django-insecure-7m$2ql0v!c9z@r3k#hx8w^e1p5y&b4n6d_s-t+u*fa0o=ij',
)

DEBUG = _env_bool('DJANGO_DEBUG', default=False)

ALLOWED_HOSTS = [
    host.strip()
    for host in _env('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,[::1]').split(',')
    if host.strip()
]


INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'rest_framework',

    'hospital_backend.core',
    'hospital_backend.records',
    'hospital_backend.reports',
]


MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]


ROOT_URLCONF = 'hospital_backend.urls'


TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
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


WSGI_APPLICATION = 'hospital_backend.wsgi.application'


def _database(url_env: str, prefix: str, default_name: str) -> dict:
    """Build one DATABASES entry, preferring a URL over discrete variables."""
    conn_max_age = _env_int(f'{prefix}_CONN_MAX_AGE', 0)
    if _env(url_env):
        cfg = dj_database_url.config(env=url_env, conn_max_age=conn_max_age)
    else:
        cfg = {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': _env(f'{prefix}_NAME', default_name),
            'USER': _env(f'{prefix}_USER', 'postgres'),
            'PASSWORD': _env(f'{prefix}_PASSWORD') or _env('PGPASSWORD', ''),
            'HOST': _env(f'{prefix}_HOST', 'localhost'),
            'PORT': _env(f'{prefix}_PORT', '5432'),
            'CONN_MAX_AGE': conn_max_age,
        }
    if cfg.get('ENGINE') == 'django.db.backends.postgresql':
        cfg.setdefault('OPTIONS', {})
        cfg['OPTIONS'].setdefault('connect_timeout', _env_int(f'{prefix}_CONNECT_TIMEOUT', 10))
    return cfg


DATABASES = {
    # System database: auth, sessions, admin, audit log
    'default': _database('DATABASE_URL', 'SYS_DB', 'hospital_system'),

    # Hospital records: patients, consultations, clinic appointments, daily reports
    'records': _database('RECORDS_DATABASE_URL', 'REC_DB', 'hospital_records'),
}


# Database routing:
# - system apps + core live on "default"
# - the records app lives on "records" only
DATABASE_ROUTERS = ['hospital_backend.db_router.HospitalRouter']


TEST_RUNNER = 'hospital_backend.test_runner.HospitalTestRunner'


AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]


# Custom user model (must be set before running any migrations)
AUTH_USER_MODEL = 'core.User'


REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework_simplejwt.authentication.JWTAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ),
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),
}


JWT_SIGNING_KEY = _env('JWT_SIGNING_KEY', SECRET_KEY)

SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': timedelta(minutes=_env_int('JWT_ACCESS_MINUTES', 30)),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=_env_int('JWT_REFRESH_DAYS', 7)),
    'ALGORITHM': 'HS256',
    'SIGNING_KEY': JWT_SIGNING_KEY,
}


LANGUAGE_CODE = 'en-us'
TIME_ZONE = _env('DJANGO_TIME_ZONE', 'UTC')
USE_I18N = True
USE_TZ = True


STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGIN_URL = '/admin/login/'


# Daily report screen
# Optional comma separated override of the specialty selector.
DAILY_REPORT_SPECIALTIES = [
    s.strip()
    for s in (_env('DAILY_REPORT_SPECIALTIES', '') or '').split(',')
    if s.strip()
]


LOG_LEVEL = _env('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'hospital_backend': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
