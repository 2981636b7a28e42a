"""Curvature classification of step paths.

Two signals are evaluated: the sharpest single interior turn, and the
cumulative signed turning across the whole path. A path whose cumulative
turning is close to a full revolution is a roundabout, even when it also
contains sharp turns.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Sequence

from ..config import (
    ROUTE_ROUNDABOUT_MAX_TURN_DEG,
    ROUTE_ROUNDABOUT_MIN_TURN_DEG,
    ROUTE_SHARP_TURN_THRESHOLD_DEG,
)
from ..models import GeoPoint
from .geodesic import is_coincident, turn_angle


class SegmentShape(Enum):
    STRAIGHT = "straight"
    SHARP_TURN = "sharp_turn"
    ROUNDABOUT = "roundabout"


def _drop_repeated_points(path: Sequence[GeoPoint]) -> List[GeoPoint]:
    """Collapse runs of coincident consecutive points into their first point."""

    compact: List[GeoPoint] = []
    for point in path:
        if compact and is_coincident(compact[-1], point):
            continue
        compact.append(point)
    return compact


def turn_angles(path: Sequence[GeoPoint]) -> List[float]:
    """Signed turn angle (degrees) at every interior vertex of ``path``.

    Repeated points are collapsed first; a zero-length segment contributes
    no turn.
    """

    compact = _drop_repeated_points(path)
    return [
        turn_angle(compact[i - 1], compact[i], compact[i + 1])
        for i in range(1, len(compact) - 1)
    ]


def has_sharp_turn(
    path: Sequence[GeoPoint],
    threshold_deg: float = ROUTE_SHARP_TURN_THRESHOLD_DEG,
) -> bool:
    """Return True when any interior turn is sharper than ``threshold_deg``."""

    if len(path) < 3:
        return False
    return any(abs(angle) > threshold_deg for angle in turn_angles(path))


def is_roundabout(
    path: Sequence[GeoPoint],
    min_turn_deg: float = ROUTE_ROUNDABOUT_MIN_TURN_DEG,
    max_turn_deg: float = ROUTE_ROUNDABOUT_MAX_TURN_DEG,
) -> bool:
    """Return True when the cumulative signed turn lies in ``(min, max)`` degrees."""

    if len(path) < 4:
        return False
    total = abs(sum(turn_angles(path)))
    return min_turn_deg < total < max_turn_deg


def classify(
    path: Sequence[GeoPoint],
    *,
    sharp_turn_threshold_deg: float = ROUTE_SHARP_TURN_THRESHOLD_DEG,
    roundabout_min_turn_deg: float = ROUTE_ROUNDABOUT_MIN_TURN_DEG,
    roundabout_max_turn_deg: float = ROUTE_ROUNDABOUT_MAX_TURN_DEG,
) -> SegmentShape:
    """Return the sampling class of ``path``."""

    if is_roundabout(path, roundabout_min_turn_deg, roundabout_max_turn_deg):
        return SegmentShape.ROUNDABOUT
    if has_sharp_turn(path, sharp_turn_threshold_deg):
        return SegmentShape.SHARP_TURN
    return SegmentShape.STRAIGHT
