"""
Tests for provider profile (job posting) save and retrieval.

Tests cover:
- Upsert semantics (one row per provider)
- customHours normalization
- Input validation
- Not-found handling
"""

import json
from contextlib import contextmanager

import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import event
from sqlalchemy.exc import OperationalError

from dailywage.core.exceptions import NotFoundError, PersistenceError
from dailywage.models.profile import ProviderProfile
from dailywage.models.user import UserRole
from dailywage.schemas.common import MAX_AMOUNT
from dailywage.schemas.profile import ProviderProfileRequest


def provider_request(**overrides):
    fields = dict(
        work_type="Construction",
        budget_per_day=750.5,
        workers_needed=2,
        working_hours="Full Day",
        location="Nashik",
    )
    fields.update(overrides)
    return ProviderProfileRequest(**fields)


class TestProviderProfileRepository:
    """Repository-level upsert behaviour"""

    def test_create_profile(self, profiles, make_user):
        owner = make_user(UserRole.PROVIDER, name="Anil")

        profile = profiles.save_provider_profile(owner.id, provider_request())

        assert profile.user_id.id == owner.id
        assert profile.user_id.name == "Anil"
        assert profile.user_id.phone == owner.phone
        assert profile.work_type == "Construction"
        assert profile.budget_per_day == 750.5
        assert isinstance(profile.budget_per_day, float)
        assert profile.workers_needed == 2
        assert profile.custom_hours is None
        assert profile.work_start_time is None
        assert profile.created_at is not None

    def test_save_twice_updates_in_place(self, profiles, make_user, session_factory):
        """Saving again replaces the fields on the same row"""
        owner = make_user(UserRole.PROVIDER)

        first = profiles.save_provider_profile(owner.id, provider_request(workers_needed=2))
        second = profiles.save_provider_profile(owner.id, provider_request(workers_needed=5, location="Pune"))

        assert second.id == first.id
        assert second.workers_needed == 5
        assert second.location == "Pune"
        assert profiles.get_provider_profile(owner.id).workers_needed == 5
        with session_factory() as db:
            assert db.query(ProviderProfile).filter(ProviderProfile.user_id == owner.id).count() == 1

    def test_profiles_are_per_user(self, profiles, make_user, session_factory):
        alice = make_user(UserRole.PROVIDER)
        bob = make_user(UserRole.PROVIDER)

        profiles.save_provider_profile(alice.id, provider_request(workers_needed=1))
        profiles.save_provider_profile(bob.id, provider_request(workers_needed=9))

        assert profiles.get_provider_profile(alice.id).workers_needed == 1
        assert profiles.get_provider_profile(bob.id).workers_needed == 9
        with session_factory() as db:
            assert db.query(ProviderProfile).count() == 2

    def test_custom_hours_kept_only_for_custom(self, profiles, make_user):
        owner = make_user(UserRole.PROVIDER)

        custom = profiles.save_provider_profile(
            owner.id, provider_request(working_hours="Custom", custom_hours="6am - 11am")
        )
        assert custom.custom_hours == "6am - 11am"

        # Switching away from Custom clears the stored value even if one is sent
        regular = profiles.save_provider_profile(
            owner.id, provider_request(working_hours="Half Day", custom_hours="6am - 11am")
        )
        assert regular.custom_hours is None

    def test_get_missing_profile(self, profiles, make_user):
        owner = make_user(UserRole.PROVIDER)

        with pytest.raises(NotFoundError):
            profiles.get_provider_profile(owner.id)


class TestProviderProfileRequest:
    """Input schema validation"""

    def test_custom_hours_required_for_custom(self):
        with pytest.raises(ValueError, match="customHours is required"):
            provider_request(working_hours="Custom")

    def test_blank_optional_fields_become_none(self):
        request = provider_request(work_start_time="  ", custom_hours="")
        assert request.work_start_time is None
        assert request.custom_hours is None

    def test_accepts_camel_case(self):
        request = ProviderProfileRequest.model_validate({
            "workType": "Farming",
            "budgetPerDay": "500",
            "workersNeeded": "4",
            "workingHours": "Full Day",
            "location": "Satara",
        })
        assert request.budget_per_day == 500.0
        assert request.workers_needed == 4


class TestProviderProfileEndpoints:
    """HTTP surface for /api/provider/profile"""

    def test_save_and_get_profile(self, client, provider_user, provider_payload):
        response = client.post("/api/provider/profile", json=provider_payload, headers=provider_user["headers"])

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Profile saved successfully"
        profile = data["profile"]
        assert profile["userId"] == {
            "id": provider_user["user"]["id"],
            "name": "Ravi Kumar",
            "phone": "9000000001",
        }
        assert profile["workType"] == "Construction"
        assert profile["budgetPerDay"] == 800.0
        assert profile["workersNeeded"] == 3
        assert profile["workStartTime"] == "08:00"
        assert profile["customHours"] is None

        fetched = client.get("/api/provider/profile", headers=provider_user["headers"])
        assert fetched.status_code == 200
        assert fetched.json()["id"] == profile["id"]
        assert fetched.json()["location"] == "Pune, Maharashtra"

    def test_resave_updates_workers_needed(self, client, provider_user, provider_payload):
        client.post("/api/provider/profile", json=provider_payload, headers=provider_user["headers"])
        response = client.post(
            "/api/provider/profile",
            json={**provider_payload, "workersNeeded": 10},
            headers=provider_user["headers"]
        )

        assert response.status_code == 200
        assert response.json()["profile"]["workersNeeded"] == 10
        assert client.get("/api/provider/profile", headers=provider_user["headers"]).json()["workersNeeded"] == 10

    def test_get_profile_not_found(self, client, provider_user):
        response = client.get("/api/provider/profile", headers=provider_user["headers"])

        assert response.status_code == 404
        assert response.json()["detail"] == "Profile not found"

    @pytest.mark.parametrize("field", ["workType", "budgetPerDay", "workersNeeded", "workingHours", "location"])
    def test_missing_required_field(self, client, provider_user, provider_payload, field):
        payload = {k: v for k, v in provider_payload.items() if k != field}

        response = client.post("/api/provider/profile", json=payload, headers=provider_user["headers"])

        assert response.status_code == 400
        assert response.json()["detail"] == f"{field} is required"

    def test_workers_needed_at_least_one(self, client, provider_user, provider_payload):
        response = client.post(
            "/api/provider/profile",
            json={**provider_payload, "workersNeeded": 0},
            headers=provider_user["headers"]
        )

        assert response.status_code == 400
        assert response.json()["detail"].startswith("workersNeeded:")

    def test_custom_hours_missing_for_custom(self, client, provider_user, provider_payload):
        response = client.post(
            "/api/provider/profile",
            json={**provider_payload, "workingHours": "Custom"},
            headers=provider_user["headers"]
        )

        assert response.status_code == 400
        assert "customHours is required" in response.json()["detail"]


@contextmanager
def failing_flush(session_factory):
    """Make every flush on sessions from this factory fail like a dropped connection."""
    def fail(session, flush_context, instances):
        raise OperationalError("UPDATE providers", {}, Exception("simulated failure"))

    event.listen(session_factory, "before_flush", fail)
    try:
        yield
    finally:
        event.remove(session_factory, "before_flush", fail)


class TestProviderProfileStoreFailure:
    """Store failures during the provider save"""

    def test_failed_create_raises_persistence_error(self, profiles, make_user, session_factory):
        owner = make_user(UserRole.PROVIDER)

        with failing_flush(session_factory):
            with pytest.raises(PersistenceError):
                profiles.save_provider_profile(owner.id, provider_request())

        with pytest.raises(NotFoundError):
            profiles.get_provider_profile(owner.id)

    def test_failed_update_keeps_previous_values(self, profiles, make_user, session_factory):
        owner = make_user(UserRole.PROVIDER)
        profiles.save_provider_profile(owner.id, provider_request(workers_needed=2, location="Nashik"))

        with failing_flush(session_factory):
            with pytest.raises(PersistenceError):
                profiles.save_provider_profile(owner.id, provider_request(workers_needed=8, location="Pune"))

        profile = profiles.get_provider_profile(owner.id)
        assert profile.workers_needed == 2
        assert profile.location == "Nashik"

    def test_store_failure_returns_500(self, client, provider_user, provider_payload, session_factory):
        """The response carries no internal detail"""
        with failing_flush(session_factory):
            response = client.post("/api/provider/profile", json=provider_payload, headers=provider_user["headers"])

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}


class TestProviderProfileLimits:
    """Values must fit the providers table"""

    @pytest.mark.parametrize("budget", [float("inf"), float("nan"), MAX_AMOUNT + 1])
    def test_budget_must_fit_the_column(self, budget):
        with pytest.raises(PydanticValidationError):
            provider_request(budget_per_day=budget)

    def test_largest_budget_accepted(self):
        assert provider_request(budget_per_day=MAX_AMOUNT).budget_per_day == MAX_AMOUNT

    @pytest.mark.parametrize("field,value", [
        ("work_type", "W" * 101),
        ("working_hours", "H" * 51),
        ("location", "L" * 256),
        ("work_start_time", "T" * 51),
    ])
    def test_text_must_fit_the_column(self, field, value):
        with pytest.raises(PydanticValidationError):
            provider_request(**{field: value})

    def test_custom_hours_must_fit_the_column(self):
        with pytest.raises(PydanticValidationError):
            provider_request(working_hours="Custom", custom_hours="C" * 101)

    def test_infinite_budget_rejected(self, client, provider_user, provider_payload):
        # json.dumps writes the bare Infinity literal, which the JSON parser accepts
        body = json.dumps({**provider_payload, "budgetPerDay": float("inf")})

        response = client.post(
            "/api/provider/profile",
            content=body,
            headers={**provider_user["headers"], "Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["detail"].startswith("budgetPerDay:")
        assert client.get("/api/provider/profile", headers=provider_user["headers"]).status_code == 404

    def test_budget_above_column_precision_rejected(self, client, provider_user, provider_payload):
        response = client.post(
            "/api/provider/profile",
            json={**provider_payload, "budgetPerDay": 100_000_000},
            headers=provider_user["headers"]
        )

        assert response.status_code == 400
        assert response.json()["detail"].startswith("budgetPerDay:")

    def test_location_too_long_rejected(self, client, provider_user, provider_payload):
        response = client.post(
            "/api/provider/profile",
            json={**provider_payload, "location": "L" * 256},
            headers=provider_user["headers"]
        )

        assert response.status_code == 400
        assert response.json()["detail"].startswith("location:")
