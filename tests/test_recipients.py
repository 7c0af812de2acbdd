"""Tests for radius and district based recipient resolution."""

from __future__ import annotations

import logging

import pytest

from app.application.use_cases.notifications import (
    CATEGORY_RADIUS_KM,
    RecipientResolver,
    radius_for_category,
)
from app.domain.geo import distance_km
from app.infrastructure.repositories import UserRepository

from tests.factories import PEMERINTAH, add_user

ORIGIN = (-6.900, 107.600)


@pytest.fixture()
def resolver(session):
    return RecipientResolver(UserRepository(session), default_radius_km=2.0)


def test_flood_report_reaches_nearby_and_same_district_users(session, resolver):
    add_user(session, "reporter", latitude=ORIGIN[0], longitude=ORIGIN[1], district="Coblong")
    add_user(session, "user-a", latitude=-6.905, longitude=107.605)
    add_user(session, "user-b", district="Coblong")
    add_user(session, "far-away", latitude=-6.2, longitude=106.8, district="Menteng")

    recipients = resolver.resolve_radius_recipients(
        *ORIGIN, "Banjir", "Coblong", exclude_user_id="reporter"
    )

    assert recipients == {"user-a", "user-b"}


def test_litter_report_falls_back_to_district(session, resolver):
    add_user(session, "neighbour", latitude=-6.920, longitude=107.620)
    add_user(session, "resident", district="coblong")

    recipients = resolver.resolve_radius_recipients(*ORIGIN, "Sampah", "Coblong")

    assert recipients == {"resident"}


def test_user_with_coordinates_outside_radius_is_not_matched_by_district(session, resolver):
    add_user(session, "outside", latitude=-6.950, longitude=107.650, district="Coblong")

    assert resolver.resolve_radius_recipients(*ORIGIN, "Sampah", "Coblong") == set()


def test_radius_boundary_is_inclusive(session):
    user_lat, user_lng = -6.910, 107.600
    add_user(session, "edge", latitude=user_lat, longitude=user_lng)
    exact = distance_km(ORIGIN[0], ORIGIN[1], user_lat, user_lng)
    resolver = RecipientResolver(UserRepository(session), default_radius_km=exact)

    assert resolver.resolve_radius_recipients(*ORIGIN, "Lainnya", None) == {"edge"}


def test_user_matching_radius_and_district_is_returned_once(session, resolver):
    add_user(session, "both", latitude=-6.901, longitude=107.601, district="Coblong")

    recipients = resolver.resolve_radius_recipients(*ORIGIN, "Banjir", "Coblong")

    assert recipients == {"both"}


def test_excluded_user_is_never_returned(session, resolver):
    add_user(session, "author", latitude=ORIGIN[0], longitude=ORIGIN[1], district="Coblong")

    recipients = resolver.resolve_radius_recipients(
        *ORIGIN, "Banjir", "Coblong", exclude_user_id="author"
    )

    assert recipients == set()


def test_missing_origin_only_matches_district_users(session, resolver):
    add_user(session, "located", latitude=ORIGIN[0], longitude=ORIGIN[1], district="Coblong")
    add_user(session, "district-only", district="Coblong")

    recipients = resolver.resolve_radius_recipients(None, None, "Banjir", "Coblong")

    assert recipients == {"district-only"}


def test_repository_failure_returns_empty_set(caplog):
    class BrokenUsers:
        def list_with_location(self):
            raise RuntimeError("database unavailable")

    resolver = RecipientResolver(BrokenUsers())

    with caplog.at_level(logging.ERROR):
        recipients = resolver.resolve_radius_recipients(*ORIGIN, "Banjir", "Coblong")

    assert recipients == set()
    assert "Failed to load users" in caplog.text


def test_government_recipients_match_role_alias(session):
    add_user(session, "official-1", role=PEMERINTAH)
    add_user(session, "official-2", role=PEMERINTAH, district="Coblong")
    add_user(session, "resident", district="Coblong")
    resolver = RecipientResolver(UserRepository(session), government_role_alias="PEMERINTAH")

    assert resolver.resolve_government_recipients() == {"official-1", "official-2"}


def test_government_recipients_failure_returns_empty_set():
    class BrokenUsers:
        def list_ids_by_role_alias(self, alias):
            raise RuntimeError("database unavailable")

    assert RecipientResolver(BrokenUsers()).resolve_government_recipients() == set()


@pytest.mark.parametrize(
    ("category", "expected"),
    [
        ("Banjir", 5.0),
        ("Bencana Alam", 5.0),
        ("banjir", 2.0),
        ("Kebakaran", 1.0),
        ("Sampah", 0.5),
        ("Lainnya", 2.0),
        (None, 2.0),
    ],
)
def test_radius_for_category(category, expected):
    assert radius_for_category(category) == expected


def test_category_radius_table_is_read_only():
    with pytest.raises(TypeError):
        CATEGORY_RADIUS_KM["Banjir"] = 10.0  # type: ignore[index]
