"""Tests for the profile record service."""
import pytest
from google.api_core.exceptions import PermissionDenied, RetryError

import config
from models.profile import ProfileUpdate


def _update(**overrides) -> ProfileUpdate:
    fields = dict(
        username="alice",
        location="Sydney, NSW, Australia",
        email="alice@wastenot.app",
        notification_lead_time=12,
    )
    fields.update(overrides)
    return ProfileUpdate(**fields)


@pytest.mark.asyncio
async def test_fetch_missing_profile_returns_none(profile_service):
    result = await profile_service.fetch_profile("user-alice")

    assert result.success
    assert result.data is None


@pytest.mark.asyncio
async def test_upsert_creates_profile(db, profile_service):
    result = await profile_service.upsert_profile("user-alice", _update())

    assert result.success
    assert db.data[config.USERS_COLLECTION]["user-alice"] == {
        "username": "alice",
        "location": "Sydney, NSW, Australia",
        "email": "alice@wastenot.app",
        "notificationLeadTime": 12,
    }


@pytest.mark.asyncio
async def test_upsert_merges_and_keeps_avatar(db, profile_service):
    await profile_service.set_avatar_url("user-alice", "https://cdn.example/avatars-user-alice.png")

    await profile_service.upsert_profile("user-alice", _update(username="ally"))

    stored = db.data[config.USERS_COLLECTION]["user-alice"]
    assert stored["username"] == "ally"
    assert stored["avatarURL"] == "https://cdn.example/avatars-user-alice.png"
    assert all(merge for _, _, _, merge in db.writes)


@pytest.mark.asyncio
async def test_fetch_profile_reads_stored_fields(profile_service):
    await profile_service.upsert_profile("user-alice", _update())
    await profile_service.set_avatar_url("user-alice", "https://cdn.example/a.png")

    profile = (await profile_service.fetch_profile("user-alice")).data

    assert profile.username == "alice"
    assert profile.notification_lead_time == 12
    assert profile.avatar_url == "https://cdn.example/a.png"


@pytest.mark.asyncio
async def test_fetch_profile_defaults_lead_time(db, profile_service):
    db.data[config.USERS_COLLECTION] = {"user-alice": {"username": "alice"}}

    profile = (await profile_service.fetch_profile("user-alice")).data

    assert profile.notification_lead_time == config.DEFAULT_NOTIFICATION_LEAD_TIME
    assert profile.avatar_url is None


@pytest.mark.asyncio
async def test_fetch_profile_clamps_out_of_range_lead_time(db, profile_service):
    db.data[config.USERS_COLLECTION] = {"user-alice": {"notificationLeadTime": 500}}

    result = await profile_service.fetch_profile("user-alice")

    assert result.success
    assert result.data.notification_lead_time == config.MAX_NOTIFICATION_LEAD_TIME


@pytest.mark.asyncio
async def test_fetch_profile_falls_back_per_field(db, profile_service):
    db.data[config.USERS_COLLECTION] = {
        "user-alice": {
            "username": None,
            "location": "Perth",
            "notificationLeadTime": "soon",
            "avatarURL": 42,
        }
    }

    result = await profile_service.fetch_profile("user-alice")

    assert result.success
    profile = result.data
    assert profile.username == ""
    assert profile.location == "Perth"
    assert profile.notification_lead_time == config.DEFAULT_NOTIFICATION_LEAD_TIME
    assert profile.avatar_url is None


@pytest.mark.asyncio
async def test_retry_deadline_becomes_failed_result(db, profile_service):
    db.fail_reads = RetryError("Deadline of 60.0s exceeded", cause=None)

    result = await profile_service.fetch_profile("user-alice")

    assert not result.success
    assert "Deadline" in result.error


@pytest.mark.asyncio
async def test_store_failures_become_failed_results(db, profile_service):
    db.fail_writes = PermissionDenied("Missing or insufficient permissions.")

    upsert = await profile_service.upsert_profile("user-alice", _update())
    avatar = await profile_service.set_avatar_url("user-alice", "https://cdn.example/a.png")

    assert not upsert.success
    assert "insufficient permissions" in upsert.error
    assert not avatar.success
    assert db.data[config.USERS_COLLECTION] == {}
