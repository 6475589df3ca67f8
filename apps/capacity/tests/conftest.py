"""Shared pytest fixtures for capacity tests."""

import random
import string
from datetime import date
from decimal import Decimal

import pytest

from apps.agency.constants import BillingType
from apps.agency.models import Client, ClientQuotaConfig, SubAccount, SubAccountQuotaConfig, TimeEntry
from apps.capacity.models import Holiday, ResourceQuota, TimeOff
from apps.core.constants import EmploymentType
from apps.core.models import User


def random_code(prefix: str = "", length: int = 6):
    """Generate a random code."""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=length))
    return f"{prefix}{suffix}"


@pytest.fixture
def make_person(db):
    """Factory creating a team member, with a resource quota unless ``quota`` is None."""

    def _make(
        first_name="Jane",
        last_name="Doe",
        quota=Decimal("160"),
        is_active=True,
        quota_active=True,
        employment_type=EmploymentType.FULL_TIME,
        **quota_kwargs,
    ):
        username = random_code("user_")
        person = User.objects.create_user(
            username=username,
            email=f"{username}@example.com",
            password="password",
            first_name=first_name,
            last_name=last_name,
            is_active=is_active,
            employment_type=employment_type,
        )
        if quota is not None:
            ResourceQuota.objects.create(person=person, monthly_target=quota, is_active=quota_active, **quota_kwargs)
        return person

    return _make


@pytest.fixture
def make_client(db):
    """Factory creating a client, with a quota config unless ``quota`` is None."""

    def _make(name="Acme", quota=Decimal("160"), is_active=True, **config_kwargs):
        client = Client.objects.create(name=name, is_active=is_active)
        if quota is not None:
            ClientQuotaConfig.objects.create(client=client, monthly_target=quota, **config_kwargs)
        return client

    return _make


@pytest.fixture
def make_sub_account(db):
    """Factory creating a sub-account, with a quota config unless ``quota`` is None."""

    def _make(client, name="Main account", quota=Decimal("80"), is_active=True, config_active=True, **config_kwargs):
        sub_account = SubAccount.objects.create(client=client, name=name, is_active=is_active)
        if quota is not None:
            SubAccountQuotaConfig.objects.create(
                sub_account=sub_account,
                monthly_target=quota,
                is_active=config_active,
                **config_kwargs,
            )
        return sub_account

    return _make


@pytest.fixture
def log_hours(db):
    """Factory creating a time entry; actual hours default to the billed hours."""

    def _log(person, client, day, billed, billing_type=BillingType.BILLED, actual=None, sub_account=None):
        return TimeEntry.objects.create(
            person=person,
            client=client,
            sub_account=sub_account,
            date=day,
            billed_hours=Decimal(str(billed)),
            actual_hours=Decimal(str(actual if actual is not None else billed)),
            billing_type=billing_type,
        )

    return _log


@pytest.fixture
def presidents_day(db):
    """Monday 2024-02-19, a single-day holiday without end date."""
    return Holiday.objects.create(name="Presidents' Day", start_date=date(2024, 2, 19))


@pytest.fixture
def make_time_off(db):
    def _make(person, start_date, end_date, is_active=True):
        return TimeOff.objects.create(person=person, start_date=start_date, end_date=end_date, is_active=is_active)

    return _make
