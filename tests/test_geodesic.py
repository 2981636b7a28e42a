"""Tests for the spherical geodesy helpers."""

from __future__ import annotations

import math

import pytest

from route_export.geometry.geodesic import (
    EARTH_RADIUS_M,
    distance,
    heading,
    interpolate,
    is_coincident,
    interpolate_many,
    normalize_turn,
    offset,
    path_length,
    turn_angle,
)
from route_export.models import GeoPoint

PAIRS = [
    (GeoPoint(24.7136, 46.6753), GeoPoint(21.4858, 39.1925)),
    (GeoPoint(0.0, 0.0), GeoPoint(0.0, 180.0)),
    (GeoPoint(51.5, -0.12), GeoPoint(51.5, -0.12)),
    (GeoPoint(-33.8688, 151.2093), GeoPoint(-33.868801, 151.209301)),
    (GeoPoint(0.0, 179.9), GeoPoint(0.0, -179.9)),
]


def test_distance_of_one_degree_on_equator() -> None:
    expected = EARTH_RADIUS_M * math.pi / 180.0
    assert distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0)) == pytest.approx(expected)


def test_distance_is_symmetric_and_zero_for_identical_points() -> None:
    a, b = PAIRS[0]
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, a) == 0.0


@pytest.mark.parametrize(
    "target, expected",
    [
        (GeoPoint(1.0, 0.0), 0.0),
        (GeoPoint(0.0, 1.0), 90.0),
        (GeoPoint(-1.0, 0.0), 180.0),
        (GeoPoint(0.0, -1.0), 270.0),
    ],
)
def test_heading_cardinal_directions(target: GeoPoint, expected: float) -> None:
    assert heading(GeoPoint(0.0, 0.0), target) == pytest.approx(expected)


def test_heading_range_and_coincident_points() -> None:
    for a, b in PAIRS:
        value = heading(a, b)
        assert 0.0 <= value < 360.0
        assert not math.isnan(value)
    point = GeoPoint(10.0, 10.0)
    assert heading(point, point) == 0.0


def test_is_coincident() -> None:
    point = GeoPoint(10.0, 10.0)
    assert is_coincident(point, GeoPoint(10.0, 10.0))
    assert not is_coincident(point, offset(point, 0.01, 45.0))


@pytest.mark.parametrize("a, b", PAIRS)
def test_interpolate_endpoints_are_exact(a: GeoPoint, b: GeoPoint) -> None:
    assert interpolate(a, b, 0) == a
    assert interpolate(a, b, 1) == b
    assert interpolate_many(a, b, [0.0, 1.0]) == [a, b]


def test_interpolate_midpoint_on_equator() -> None:
    mid = interpolate(GeoPoint(0.0, 0.0), GeoPoint(0.0, 10.0), 0.5)
    assert mid.lat == pytest.approx(0.0, abs=1e-9)
    assert mid.lng == pytest.approx(5.0)


def test_interpolate_antipodal_and_antimeridian_are_defined() -> None:
    antipodal = interpolate(GeoPoint(0.0, 0.0), GeoPoint(0.0, 180.0), 0.5)
    assert not math.isnan(antipodal.lat)
    assert not math.isnan(antipodal.lng)

    mid = interpolate(GeoPoint(0.0, 179.99999), GeoPoint(0.0, -179.99999), 0.5)
    assert abs(mid.lng) == pytest.approx(180.0)


def test_interpolated_points_lie_on_the_segment() -> None:
    a, b = PAIRS[0]
    total = distance(a, b)
    for fraction, point in zip([0.25, 0.5, 0.75], interpolate_many(a, b, [0.25, 0.5, 0.75])):
        assert distance(a, point) == pytest.approx(total * fraction, rel=1e-6)
        assert distance(point, b) == pytest.approx(total * (1 - fraction), rel=1e-6)


@pytest.mark.parametrize(
    "angle", [-1000.0, -540.0, -180.0, -0.5, 0.0, 180.0, 359.0, 720.5, 1e6]
)
def test_normalize_turn_range(angle: float) -> None:
    value = normalize_turn(angle)
    assert -180.0 <= value <= 180.0
    assert math.isclose(math.cos(math.radians(value)), math.cos(math.radians(angle)), abs_tol=1e-9)


def test_turn_angle_sign_follows_direction_of_turn() -> None:
    start = GeoPoint(0.0, 0.0)
    corner = offset(start, 500.0, 90.0)
    left = offset(corner, 500.0, 0.0)
    right = offset(corner, 500.0, 180.0)
    assert turn_angle(start, corner, left) == pytest.approx(-90.0, abs=0.1)
    assert turn_angle(start, corner, right) == pytest.approx(90.0, abs=0.1)


def test_offset_round_trips_with_distance_and_heading() -> None:
    origin = GeoPoint(24.7136, 46.6753)
    target = offset(origin, 1234.5, 45.0)
    assert distance(origin, target) == pytest.approx(1234.5, rel=1e-9)
    assert heading(origin, target) == pytest.approx(45.0, abs=1e-3)


def test_path_length_sums_segments() -> None:
    a, b = PAIRS[0]
    mid = interpolate(a, b, 0.5)
    assert path_length([a, mid, b]) == pytest.approx(distance(a, b), rel=1e-9)
    assert path_length([a]) == 0.0
    assert path_length([]) == 0.0
