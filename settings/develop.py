"""
This configuration file overrides some necessary configs
to deploy the app to the shared develop environment.
"""

from decouple import Csv

from .base import *  # noqa
from .base import INSTALLED_APPS, config

INSTALLED_APPS = INSTALLED_APPS + [
    "django.contrib.staticfiles",  # for API docs in local & develop
]

ALLOWED_HOSTS = config("ALLOWED_HOSTS", cast=Csv())

STATIC_ROOT = "staticfiles"

# CSRF / CORS settings
CSRF_TRUSTED_ORIGINS = config("CSRF_TRUSTED_ORIGINS", default="", cast=Csv())
CORS_ALLOWED_ORIGINS = config("CORS_ALLOWED_ORIGINS", default="", cast=Csv())
