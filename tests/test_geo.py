"""Tests for the haversine distance helper."""

from __future__ import annotations

import math

import pytest

from app.domain.geo import EARTH_RADIUS_KM, distance_km


def test_same_point_is_zero():
    assert distance_km(-6.9, 107.6, -6.9, 107.6) == 0.0


def test_distance_is_symmetric():
    forward = distance_km(-6.900, 107.600, -6.905, 107.605)
    backward = distance_km(-6.905, 107.605, -6.900, 107.600)

    assert forward == pytest.approx(backward)


def test_one_degree_of_latitude_is_about_111_km():
    assert distance_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.19, rel=0.01)


def test_nearby_points_in_bandung():
    assert distance_km(-6.900, 107.600, -6.905, 107.605) == pytest.approx(0.78, abs=0.02)


def test_antipodal_points_are_half_the_circumference():
    assert distance_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_KM)


@pytest.mark.parametrize(
    "coordinates",
    [
        (math.nan, 107.6, -6.9, 107.6),
        (-6.9, math.inf, -6.9, 107.6),
        (-6.9, 107.6, -math.inf, 107.6),
    ],
)
def test_non_finite_coordinates_yield_nan(coordinates):
    assert math.isnan(distance_km(*coordinates))
