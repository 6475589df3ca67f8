from pathlib import Path

from decouple import AutoConfig

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Read values from environment first, then from the .env file next to manage.py
config = AutoConfig(search_path=str(BASE_DIR))

ENVIRONMENT = config("ENVIRONMENT", default="local")

SECRET_KEY = config("SECRET_KEY", default="django-insecure-agency-ops-local-key")
DEBUG = config("DEBUG", default=False, cast=bool)
ALLOWED_HOSTS = config("ALLOWED_HOSTS", default="localhost,127.0.0.1", cast=lambda v: [h.strip() for h in v.split(",")])

LOG_LEVEL = config("LOG_LEVEL", default="INFO")

ROOT_URLCONF = "urls"
WSGI_APPLICATION = "wsgi.application"

AUTH_USER_MODEL = "core.User"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Quota configuration policy used when the caller does not pick one.
# "current_only": the single current quota row applies to every month queried.
# "versioned": rows whose effective_from is after the queried month are ignored.
QUOTA_POLICY = config("QUOTA_POLICY", default="current_only")
