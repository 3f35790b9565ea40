"""
Django settings for the checkout backend.

This is the single settings file for all environments. Configuration is driven
by environment variables using django-environ, following the 12-factor app
methodology. Nothing here is required at import time: a missing Stripe key is
reported by the `payments.E001` system check instead.

Environment files:
    - .env at the repository root (override the path with ENV_FILE)

For more information on this file, see:
https://docs.djangoproject.com/en/5.2/topics/settings/

For the full list of settings and their values, see:
https://docs.djangoproject.com/en/5.2/ref/settings/
"""

import os
from pathlib import Path

import environ
from django.core.management.utils import get_random_secret_key

# =============================================================================
# Path Configuration
# =============================================================================
# Build paths inside the project: BASE_DIR / 'subdir'
BASE_DIR = Path(__file__).resolve().parent.parent

# =============================================================================
# Environment Configuration
# =============================================================================
# Initialize django-environ
env = environ.Env(
    # Set default values and casting for common settings
    DEBUG=(bool, False),  # Default to False for safety
    ALLOWED_HOSTS=(list, ["*"]),
    LOG_LEVEL=(str, "INFO"),
    PORT=(int, 4242),
    HOST=(str, "0.0.0.0"),
    WEBHOOK_ALLOW_UNVERIFIED=(bool, False),
)

# Note: In containers, env vars are passed directly; .env is for local dev
env_file = os.environ.get("ENV_FILE", BASE_DIR.parent / ".env")
if Path(env_file).exists():
    environ.Env.read_env(env_file)

# =============================================================================
# Core Settings
# =============================================================================
# SECURITY WARNING: keep the secret key used in production secret!
# No sessions or signed cookies are used, so a per-process key is acceptable
SECRET_KEY = env("SECRET_KEY", default=get_random_secret_key())

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env("DEBUG")

ALLOWED_HOSTS = env("ALLOWED_HOSTS")

# =============================================================================
# Application Definition
# =============================================================================
INSTALLED_APPS = [
    # Django core apps
    "django.contrib.contenttypes",
    "django.contrib.auth",
    # Third-party apps
    "rest_framework",
    "corsheaders",
    # Local apps
    "core",
    "payments",
]

MIDDLEWARE = [
    # Security middleware (should be first)
    "django.middleware.security.SecurityMiddleware",
    # CORS headers (must be before CommonMiddleware)
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"

# Paths are matched exactly ("/webhook", not "/webhook/")
APPEND_SLASH = False

# =============================================================================
# Database Configuration
# =============================================================================
# Nothing is persisted; all state lives in Stripe
DATABASES = {}

# =============================================================================
# Django REST Framework Configuration
# =============================================================================
# Serializers are used for request validation only
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
}

# =============================================================================
# Internationalization
# =============================================================================
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# =============================================================================
# CORS Configuration
# =============================================================================
# The checkout API is called directly from browser clients on any origin
CORS_ALLOW_ALL_ORIGINS = True

# =============================================================================
# Server Configuration
# =============================================================================
PORT = env("PORT")
HOST = env("HOST")

# =============================================================================
# Stripe Configuration
# =============================================================================
# Get your API keys from: https://dashboard.stripe.com/apikeys
# Use test keys (sk_test_...) for development, live keys (sk_live_...) for production
PAYMENT_PROVIDER_SECRET_KEY = env("PAYMENT_PROVIDER_SECRET_KEY", default="")

# Invoices expose `payment_intent` on this API version; subscription
# client secrets are read from latest_invoice.payment_intent
PAYMENT_PROVIDER_API_VERSION = env(
    "PAYMENT_PROVIDER_API_VERSION", default="2022-11-15"
)

# Recurring price ids; setting either enables the subscription flow
MONTHLY_PRICE_ID = env("MONTHLY_PRICE_ID", default="")
ANNUAL_PRICE_ID = env("ANNUAL_PRICE_ID", default="")

# Webhook signing secret from: https://dashboard.stripe.com/webhooks
# Each webhook endpoint has its own signing secret
WEBHOOK_SIGNING_SECRET = env("WEBHOOK_SIGNING_SECRET", default="")

# Accept unsigned webhook payloads when no signing secret is set.
# Anyone who can reach /webhook can then forge events.
WEBHOOK_ALLOW_UNVERIFIED = env("WEBHOOK_ALLOW_UNVERIFIED")

# =============================================================================
# Logging Configuration
# =============================================================================
LOG_LEVEL = env("LOG_LEVEL")

# Log file name, set via LOG_FILE_NAME when several processes share LOG_DIR
LOG_FILE_NAME = env("LOG_FILE_NAME", default="django.log")
LOG_DIR = BASE_DIR / "logs"

# Ensure log directory exists (handles local development without Docker)
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {process:d} {thread:d} {message}",
            "style": "{",
        },
        "simple": {
            "format": "{levelname} {message}",
            "style": "{",
        },
        "file": {
            # Detailed format for persistent logs with timestamp, level, logger name, and location
            "format": "[{asctime}] {levelname} {name} {module}:{lineno} - {message}",
            "style": "{",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
        "file": {
            # Max 10MB per file, keeps 5 backups
            "level": "DEBUG",
            "class": "logging.handlers.RotatingFileHandler",
            "filename": LOG_DIR / LOG_FILE_NAME,
            "maxBytes": 10 * 1024 * 1024,  # 10MB
            "backupCount": 5,
            "formatter": "file",
            "encoding": "utf-8",
        },
    },
    "root": {
        "handlers": ["console", "file"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console", "file"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "django.request": {
            "handlers": ["console", "file"],
            "level": "ERROR",
            "propagate": False,
        },
        "uvicorn": {
            "handlers": ["console", "file"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "stripe": {
            "handlers": ["console", "file"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}

# =============================================================================
# Security Settings (Production Only)
# =============================================================================
# These settings are enforced only when DEBUG=False
if not DEBUG:
    # TLS is usually terminated by the load balancer in front of uvicorn
    SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=False)
    SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

    # HSTS (HTTP Strict Transport Security)
    SECURE_HSTS_SECONDS = env.int("SECURE_HSTS_SECONDS", default=0)

    # Additional security headers
    SECURE_CONTENT_TYPE_NOSNIFF = True
