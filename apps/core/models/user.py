from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models
from django.utils import timezone

from apps.core.constants import EmploymentType
from apps.core.querysets import UserManager
from libs.models import BaseModel


class User(BaseModel, AbstractBaseUser, PermissionsMixin):
    """Team member account. Time entries, time off and resource quotas hang off it."""

    username = models.CharField(max_length=100, unique=True, verbose_name="Username")
    email = models.EmailField(unique=True, verbose_name="Email")
    first_name = models.CharField(max_length=30, blank=True, verbose_name="First name")
    last_name = models.CharField(max_length=30, blank=True, verbose_name="Last name")
    employment_type = models.CharField(
        max_length=20,
        choices=EmploymentType.choices,
        default=EmploymentType.FULL_TIME,
        verbose_name="Employment type",
    )

    is_active = models.BooleanField(default=True, verbose_name="Active")
    is_staff = models.BooleanField(default=False, verbose_name="Staff")
    date_joined = models.DateTimeField(default=timezone.now, verbose_name="Date joined")

    objects = UserManager()

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS = ["email"]

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"
        db_table = "core_user"

    def __str__(self):
        return f"{self.username} - {self.get_full_name()}"

    def get_full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def get_short_name(self):
        return self.first_name

    @property
    def display_name(self) -> str:
        return self.get_full_name() or self.username
