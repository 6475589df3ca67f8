"""
This configuration file overrides some necessary configs
to allow running unittests.
"""

from .base import *  # noqa
from .base.drf import REST_FRAMEWORK

import warnings


warnings.simplefilter("ignore", category=RuntimeWarning)

ENVIRONMENT = "test"

ALLOWED_HOSTS = ["*"]

INTERNAL_IPS = ["127.0.0.1"]

# Use in-memory SQLite database for tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "test-cache",
    },
}

# Disable throttling in tests
REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []
REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {}

LANGUAGE_CODE = "en"

# Pin the zone so "today" in tests does not depend on the machine running them
TIME_ZONE = "UTC"

QUOTA_POLICY = "current_only"

DEBUG = False

# Use fast password hasher in tests
# WARNING: MD5PasswordHasher is ONLY for testing! Never use in production.
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

SENTRY_DSN = ""

# Disable logging in tests to improve performance
LOGGING = {
    "version": 1,
    "disable_existing_loggers": True,
    "handlers": {
        "null": {
            "class": "logging.NullHandler",
        },
    },
    "root": {
        "handlers": ["null"],
    },
}
