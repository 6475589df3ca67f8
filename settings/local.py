"""
This configuration file overrides some necessary configs
to easily develop the app.
"""

from .base import *  # noqa
from .base import INSTALLED_APPS, REST_FRAMEWORK

INSTALLED_APPS = INSTALLED_APPS + [
    "django.contrib.staticfiles",  # for API docs in local & develop
]

DEBUG = True

ALLOWED_HOSTS = ["*"]

INTERNAL_IPS = ["127.0.0.1"]

CORS_ALLOW_ALL_ORIGINS = True

STATIC_ROOT = "staticfiles"

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
        "rest_framework.renderers.BrowsableAPIRenderer",
    ],
}
