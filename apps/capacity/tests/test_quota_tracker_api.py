"""Tests for the quota tracker and quota period APIs."""

import json
from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.utils import timezone
from rest_framework import status

from apps.agency.constants import BillingType
from apps.capacity.constants import MONTH_FORMAT_ERROR
from apps.capacity.models import IndividualQuotaBonusSetting, PartnerBonusPolicy, QuotaPeriod
from apps.core.constants import EmploymentType

BASE_URL = "/api/capacity/quota-trackers"


def get_response_data(response):
    """Helper to extract data from JSON response."""
    return json.loads(response.content)


@pytest.fixture
def frozen_today():
    """Pin the local date to Tuesday 2024-02-20."""
    with patch("django.utils.timezone.localdate", return_value=date(2024, 2, 20)):
        yield


@pytest.mark.django_db
class TestQuotaTrackerAPI:
    def test_resource_tracker(self, api_client, frozen_today, presidents_day, make_person, make_client, log_hours):
        person = make_person("Jane", "Doe")
        client = make_client()
        log_hours(person, client, date(2024, 2, 5), 8)
        log_hours(person, client, date(2024, 2, 6), 4, billing_type=BillingType.PREBILLED)

        response = api_client.get(f"{BASE_URL}/resources/", {"month": "2024-02"})

        assert response.status_code == status.HTTP_200_OK
        response_data = get_response_data(response)
        assert response_data["success"] is True
        assert response_data["error"] is None
        row = response_data["data"][0]
        assert row["subject_id"] == person.id
        assert row["subject_name"] == "Jane Doe"
        assert row["monthly_target"] == 160.0
        assert row["adjusted_target"] == 152.4
        assert row["expected_hours_to_date"] == 91.4
        assert row["billed_hours"] == 8.0
        assert row["prebilled_hours"] == 4.0
        assert row["client_id"] is None

    def test_client_tracker(self, api_client, make_client):
        make_client("Acme")

        response = api_client.get(f"{BASE_URL}/clients/", {"month": "2024-02"})

        assert response.status_code == status.HTTP_200_OK
        assert [row["subject_name"] for row in get_response_data(response)["data"]] == ["Acme"]

    def test_account_tracker_filtered_by_client(self, api_client, make_client, make_sub_account):
        acme = make_client("Acme")
        globex = make_client("Globex")
        make_sub_account(acme, "Retail")
        make_sub_account(globex, "Wholesale")

        response = api_client.get(f"{BASE_URL}/accounts/", {"month": "2024-02", "client_id": acme.id})

        assert response.status_code == status.HTTP_200_OK
        data = get_response_data(response)["data"]
        assert [row["subject_name"] for row in data] == ["Retail"]
        assert data[0]["client_name"] == "Acme"

    def test_versioned_policy_parameter(self, api_client, make_person):
        make_person(effective_from=date(2024, 3, 1))

        current = api_client.get(f"{BASE_URL}/resources/", {"month": "2024-02"})
        versioned = api_client.get(f"{BASE_URL}/resources/", {"month": "2024-02", "policy": "versioned"})

        assert len(get_response_data(current)["data"]) == 1
        assert get_response_data(versioned)["data"] == []

    @pytest.mark.parametrize("month", ["2024-13", "02-2024", "2024/02", "february", ""])
    def test_malformed_month_is_rejected(self, api_client, month):
        response = api_client.get(f"{BASE_URL}/resources/", {"month": month})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        response_data = get_response_data(response)
        assert response_data["success"] is False
        assert response_data["data"] is None
        assert response_data["error"]["errors"][0]["detail"] == MONTH_FORMAT_ERROR

    def test_missing_month_is_rejected(self, api_client):
        response = api_client.get(f"{BASE_URL}/clients/")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert get_response_data(response)["error"]["errors"][0]["attr"] == "month"

    def test_unknown_policy_is_rejected(self, api_client):
        response = api_client.get(f"{BASE_URL}/clients/", {"month": "2024-02", "policy": "historical"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_bonus_eligibility(self, api_client, make_person, make_client, log_hours):
        person = make_person()
        acme = make_client("Acme", quota=Decimal("320"))
        for monday in [date(2021, 2, 1), date(2021, 2, 8), date(2021, 2, 15), date(2021, 2, 22)]:
            log_hours(person, acme, monday, 80)

        with patch("django.utils.timezone.localdate", return_value=date(2021, 2, 26)):
            response = api_client.get(f"{BASE_URL}/bonus-eligibility/")

        assert response.status_code == status.HTTP_200_OK
        row = get_response_data(response)["data"][0]
        assert row["client_name"] == "Acme"
        assert row["eligible_for_bonus"] is True
        assert row["weeks_hit"] == 4
        assert row["weeks"][0]["start_date"] == "2021-02-01"
        assert row["weeks"][0]["weekly_target"] == 80.0

    def test_target_progress(self, api_client, frozen_today, make_client):
        make_client("Acme")

        response = api_client.get(f"{BASE_URL}/target-progress/")

        assert response.status_code == status.HTTP_200_OK
        row = get_response_data(response)["data"][0]
        assert row["week_start"] == "2024-02-19"
        assert row["week_end"] == "2024-02-25"
        # 160 * 7 / 29 = 38.6
        assert row["weekly_target"] == 39.0

    def test_efficiency_by_account_scope(self, api_client, make_person, make_client, make_sub_account, log_hours):
        person = make_person()
        acme = make_client("Acme")
        retail = make_sub_account(acme, "Retail")
        log_hours(person, acme, date(2024, 2, 5), 9, actual=12, sub_account=retail)

        response = api_client.get(f"{BASE_URL}/efficiency/", {"scope": "account", "month": "2024-02"})

        assert response.status_code == status.HTTP_200_OK
        data = get_response_data(response)["data"]
        assert data[0]["subject_name"] == "Retail"
        assert data[0]["efficiency"] == 75.0

    def test_efficiency_rejects_bad_month(self, api_client):
        response = api_client.get(f"{BASE_URL}/efficiency/", {"month": "2024-2x"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_bonus_eligibility_policy_parameter(self, api_client, frozen_today, make_client):
        make_client("Current")
        make_client("Later", effective_from=date(2024, 3, 1))

        current_only = api_client.get(f"{BASE_URL}/bonus-eligibility/", {"policy": "current_only"})
        versioned = api_client.get(f"{BASE_URL}/bonus-eligibility/", {"policy": "versioned"})

        assert [row["client_name"] for row in get_response_data(current_only)["data"]] == ["Current", "Later"]
        assert [row["client_name"] for row in get_response_data(versioned)["data"]] == ["Current"]

    def test_bonus_payouts(self, api_client, frozen_today, make_person, make_client, log_hours):
        person = make_person("Jane", "Doe", quota=Decimal("100"))
        partner = make_client("Domestique", quota=Decimal("100"))
        PartnerBonusPolicy.objects.create(client=partner)
        IndividualQuotaBonusSetting.objects.create(
            employment_type=EmploymentType.FULL_TIME, quota_bonus=Decimal("300"), overage_rate=Decimal("5")
        )
        log_hours(person, partner, date(2024, 2, 5), 102)

        response = api_client.get(f"{BASE_URL}/bonus-payouts/", {"month": "2024-02"})

        assert response.status_code == status.HTTP_200_OK
        data = get_response_data(response)["data"]
        assert data["month"] == "2024-02"
        assert data["partner_results"][0]["client_name"] == "Domestique"
        assert data["partner_results"][0]["quota_met"] is True
        individual = data["individual_results"][0]
        assert individual["person_name"] == "Jane Doe"
        assert individual["partner_bonus"] == 150.0
        assert individual["quota_bonus"] == 300.0
        assert individual["overage_bonus"] == 10.0
        assert data["grand_total"] == 460.0

    def test_bonus_payouts_requires_month(self, api_client):
        response = api_client.get(f"{BASE_URL}/bonus-payouts/")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_hours_summary(self, api_client, make_person, make_client, log_hours):
        person = make_person()
        acme = make_client("Acme")
        log_hours(person, acme, date(2024, 1, 10), 5, actual=6)
        log_hours(person, acme, date(2024, 2, 12), 3)

        response = api_client.get(
            f"{BASE_URL}/hours-summary/", {"start": "2024-01-01", "end": "2024-02-29", "granularity": "month"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = get_response_data(response)["data"]
        assert [row["label"] for row in data] == ["Jan 2024", "Feb 2024"]
        assert data[0]["actual_hours"] == 6.0
        assert data[0]["billed_hours"] == 5.0
        assert data[1]["period_start"] == "2024-02-01"

    def test_hours_summary_defaults_to_weeks(self, api_client):
        response = api_client.get(f"{BASE_URL}/hours-summary/", {"start": "2024-02-01", "end": "2024-02-14"})

        assert response.status_code == status.HTTP_200_OK
        assert [row["label"] for row in get_response_data(response)["data"]] == ["2024-02-01", "2024-02-08"]

    def test_hours_summary_rejects_end_before_start(self, api_client):
        response = api_client.get(f"{BASE_URL}/hours-summary/", {"start": "2024-02-10", "end": "2024-02-01"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert get_response_data(response)["success"] is False

    def test_hours_by_account(self, api_client, frozen_today, make_person, make_client, make_sub_account, log_hours):
        person = make_person()
        acme = make_client("Acme")
        retail = make_sub_account(acme, "Retail")
        log_hours(person, acme, date(2024, 2, 5), 4, sub_account=retail)
        log_hours(person, acme, date(2024, 2, 20), 2, actual=3, sub_account=retail)

        response = api_client.get(f"{BASE_URL}/hours-by-account/")

        assert response.status_code == status.HTTP_200_OK
        row = get_response_data(response)["data"][0]
        assert row["sub_account_name"] == "Retail"
        assert row["week_start"] == "2024-02-19"
        assert row["weekly_actual"] == 3.0
        assert row["monthly_billed"] == 6.0

    @pytest.mark.anonymous
    def test_requires_authentication(self, api_client):
        response = api_client.get(f"{BASE_URL}/clients/", {"month": "2024-02"})

        assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)
        assert get_response_data(response)["success"] is False


@pytest.mark.django_db
class TestQuotaPeriodAPI:
    def test_list_and_retrieve(self, api_client):
        QuotaPeriod.objects.create(
            year_month="2024-01",
            calculated_at=timezone.now(),
            client_results=[{"subject_name": "Acme", "billed_hours": 120.0}],
        )

        list_response = api_client.get("/api/capacity/quota-periods/")
        detail_response = api_client.get("/api/capacity/quota-periods/2024-01/")

        assert list_response.status_code == status.HTTP_200_OK
        assert get_response_data(list_response)["data"]["results"][0]["year_month"] == "2024-01"
        assert detail_response.status_code == status.HTTP_200_OK
        detail = get_response_data(detail_response)["data"]
        assert detail["client_results"] == [{"subject_name": "Acme", "billed_hours": 120.0}]

    def test_retrieve_unknown_period(self, api_client):
        response = api_client.get("/api/capacity/quota-periods/1999-01/")

        assert response.status_code == status.HTTP_404_NOT_FOUND
