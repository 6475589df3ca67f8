"""Internationalization settings.
https://docs.djangoproject.com/en/5.1/topics/i18n/
"""

from .base import config

LANGUAGE_CODE = "en-us"
# "Today" for pacing is the calendar date in this zone (timezone.localdate())
TIME_ZONE = config("TIME_ZONE", default="America/New_York")
USE_I18N = True
USE_TZ = True
