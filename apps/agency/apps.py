from django.apps import AppConfig


class AgencyConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.agency"
    verbose_name = "Clients & Time Entries"
