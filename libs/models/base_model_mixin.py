from django.db import models


class BaseModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["created_at"]


class ActiveQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)


class ActiveFlagMixin(models.Model):
    """Mixin for rows that can be switched off without being deleted.

    Inactive rows stay in the database for history but are ignored by every
    calculation that reads them through ``objects.active()``.
    """

    is_active = models.BooleanField(default=True, db_index=True, verbose_name="Active")

    objects = ActiveQuerySet.as_manager()

    class Meta:
        abstract = True
