"""Global pytest fixtures & helpers.

Adds project root to path and provides reusable route geometry fixtures to
avoid duplication across files.
"""
from __future__ import annotations

import os
import sys
from typing import Iterator, List

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from route_export.geometry.decoding import clear_polyline_cache
from route_export.geometry.geodesic import offset
from route_export.models import DirectionsResult, GeoPoint, Leg, Route, Step


# --- Factory helpers -------------------------------------------------
ORIGIN = GeoPoint(lat=24.7136, lng=46.6753)


def make_straight_path(count: int, step_m: float, heading_deg: float = 90.0) -> List[GeoPoint]:
    points = [ORIGIN]
    for _ in range(count - 1):
        points.append(offset(points[-1], step_m, heading_deg))
    return points


def make_arc_path(count: int, radius_m: float, sweep_deg: float) -> List[GeoPoint]:
    """Points on a circle around ORIGIN, ``sweep_deg / (count - 1)`` apart."""

    increment = sweep_deg / (count - 1)
    return [offset(ORIGIN, radius_m, i * increment) for i in range(count)]


def make_directions(*step_paths: List[GeoPoint], **leg_fields) -> DirectionsResult:
    steps = [Step(path=list(path)) for path in step_paths]
    return DirectionsResult(routes=[Route(legs=[Leg(steps=steps, **leg_fields)])])


# --- Fixtures --------------------------------------------------------
@pytest.fixture(autouse=True)
def clear_decoded_polylines() -> Iterator[None]:
    clear_polyline_cache()
    yield
    clear_polyline_cache()


@pytest.fixture
def straight_directions() -> DirectionsResult:
    return make_directions(make_straight_path(5, 250.0), make_straight_path(3, 80.0, 0.0))


@pytest.fixture
def empty_directions() -> DirectionsResult:
    return DirectionsResult(routes=[], status="ZERO_RESULTS")
