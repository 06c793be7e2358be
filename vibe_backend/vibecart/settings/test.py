# vibecart/settings/test.py
"""
PATH: vibecart/settings/test.py

TEST SETTINGS

- Always SQLite, regardless of DATABASE_URL in the environment.
- The test database is a FILE (not :memory:) so threads in the concurrency
  tests open real, separate connections that contend on the same lock.
- Checkout throttling is effectively off.
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import BASE_DIR, REST_FRAMEWORK  # explicit for Ruff (F405)

DEBUG = False

SECRET_KEY = "test-only-secret-key"

ALLOWED_HOSTS = ["testserver", "localhost", "127.0.0.1"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": str(BASE_DIR / "test_vibe.sqlite3"),
        "OPTIONS": {
            "timeout": 20,
            "transaction_mode": "IMMEDIATE",
        },
        "TEST": {
            "NAME": str(BASE_DIR / "test_vibe_run.sqlite3"),
        },
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_THROTTLE_RATES": {"checkout": "10000/min"},
}

SENTRY_DSN = ""
