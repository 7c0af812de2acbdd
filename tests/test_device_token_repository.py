"""Tests for the push device token registry."""

from __future__ import annotations

from app.infrastructure.models import DeviceTokenModel
from app.infrastructure.repositories import DeviceTokenRepository

from tests.factories import add_device, add_user, expo_token


def test_token_moves_to_the_latest_user(session):
    add_user(session, "x")
    add_user(session, "y")
    repository = DeviceTokenRepository(session)
    token = expo_token("shared")

    repository.upsert_token("x", token, "android")
    reassigned = repository.upsert_token("y", token, "ios")

    assert repository.active_tokens_for(["x"]) == []
    assert repository.active_tokens_for(["y"]) == [token]
    assert reassigned.user_id == "y"
    assert reassigned.platform == "ios"
    assert session.query(DeviceTokenModel).count() == 1


def test_upsert_reactivates_and_normalises_platform(session):
    add_user(session, "x")
    repository = DeviceTokenRepository(session)
    token = expo_token("phone")
    add_device(session, "x", token, active=False)

    device = repository.upsert_token("x", token, "Symbian")

    assert device.active is True
    assert device.platform == "android"
    assert device.updated_at.tzinfo is not None


def test_deactivate_many_is_idempotent_and_ignores_unknown_tokens(session):
    add_user(session, "x")
    first, second = expo_token("a"), expo_token("b")
    add_device(session, "x", first)
    add_device(session, "x", second)
    repository = DeviceTokenRepository(session)

    assert repository.deactivate_many([first, expo_token("unknown")]) is True
    assert repository.deactivate_many([first]) is True
    assert repository.deactivate(expo_token("never-registered")) is True

    assert repository.active_tokens_for(["x"]) == [second]
    assert session.query(DeviceTokenModel).filter_by(token=first).one().active is False


def test_active_tokens_for_multiple_users(session):
    add_user(session, "x")
    add_user(session, "y")
    add_user(session, "z")
    add_device(session, "x", expo_token("x1"))
    add_device(session, "y", expo_token("y1"))
    add_device(session, "y", expo_token("y2"), active=False)
    add_device(session, "z", expo_token("z1"))
    repository = DeviceTokenRepository(session)

    assert repository.active_tokens_for(["x", "y"]) == [expo_token("x1"), expo_token("y1")]
    assert repository.active_tokens_for([]) == []
