"""Spherical geodesy helpers: headings, distances and interpolation.

All functions use a spherical Earth with the WGS84 equatorial radius, which
matches the model used by common web mapping SDKs. They are pure and defined
for every finite input, including coincident and antipodal point pairs.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence

import numpy as np
from numpy.typing import NDArray

from ..models import GeoPoint

EARTH_RADIUS_M = 6_378_137.0

# Below this angular separation (radians) two points are treated as coincident.
_COINCIDENT_RAD = 1e-12

# Below this sine of the angular separation, slerp is replaced by linear
# interpolation of the coordinates.
_SLERP_MIN_SIN = 1e-6

FloatArray = NDArray[np.float64]


def _wrap_longitude(lng: float) -> float:
    """Return ``lng`` wrapped into ``[-180, 180)``."""

    wrapped = (lng + 180.0) % 360.0 - 180.0
    return -180.0 if wrapped >= 180.0 else wrapped


def _angular_distance(a: GeoPoint, b: GeoPoint) -> float:
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlng = math.radians(b.lng - a.lng)
    h = math.sin(dlat / 2.0) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(
        dlng / 2.0
    ) ** 2
    h = min(max(h, 0.0), 1.0)
    return 2.0 * math.atan2(math.sqrt(h), math.sqrt(1.0 - h))


def distance(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between ``a`` and ``b`` in metres."""

    return _angular_distance(a, b) * EARTH_RADIUS_M


def is_coincident(a: GeoPoint, b: GeoPoint) -> bool:
    """Return True when ``a`` and ``b`` are too close to have a heading."""

    return _angular_distance(a, b) < _COINCIDENT_RAD


def heading(a: GeoPoint, b: GeoPoint) -> float:
    """Initial great-circle bearing from ``a`` to ``b`` in ``[0, 360)`` degrees.

    Coincident points have no direction; ``0.0`` is returned for them.
    """

    if is_coincident(a, b):
        return 0.0
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlng = math.radians(b.lng - a.lng)
    y = math.sin(dlng) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(
        dlng
    )
    bearing = math.degrees(math.atan2(y, x)) % 360.0
    return 0.0 if bearing >= 360.0 else bearing


def normalize_turn(angle: float) -> float:
    """Fold an angle difference (degrees) into ``[-180, 180]``."""

    return (angle + 180.0) % 360.0 - 180.0


def turn_angle(p1: GeoPoint, p2: GeoPoint, p3: GeoPoint) -> float:
    """Signed change of heading at ``p2`` when travelling ``p1 -> p2 -> p3``."""

    return normalize_turn(heading(p2, p3) - heading(p1, p2))


def interpolate(a: GeoPoint, b: GeoPoint, fraction: float) -> GeoPoint:
    """Return the point ``fraction`` of the way from ``a`` to ``b``.

    Endpoints are returned unchanged for fractions 0 and 1.
    """

    if fraction == 0:
        return a
    if fraction == 1:
        return b
    return interpolate_many(a, b, [fraction])[0]


def interpolate_many(
    a: GeoPoint, b: GeoPoint, fractions: Iterable[float]
) -> List[GeoPoint]:
    """Vectorised :func:`interpolate` over several fractions of the same pair."""

    f = np.asarray(list(fractions), dtype=float)
    if f.size == 0:
        return []
    angle = _angular_distance(a, b)
    sin_angle = math.sin(angle)
    if sin_angle < _SLERP_MIN_SIN:
        # Nearly coincident or antipodal: slerp is ill-conditioned.
        dlng = _wrap_longitude(b.lng - a.lng)
        lats = a.lat + f * (b.lat - a.lat)
        lngs = a.lng + f * dlng
    else:
        lat1, lng1 = math.radians(a.lat), math.radians(a.lng)
        lat2, lng2 = math.radians(b.lat), math.radians(b.lng)
        wa = np.sin((1.0 - f) * angle) / sin_angle
        wb = np.sin(f * angle) / sin_angle
        x = wa * math.cos(lat1) * math.cos(lng1) + wb * math.cos(lat2) * math.cos(lng2)
        y = wa * math.cos(lat1) * math.sin(lng1) + wb * math.cos(lat2) * math.sin(lng2)
        z = wa * math.sin(lat1) + wb * math.sin(lat2)
        lats = np.degrees(np.arctan2(z, np.sqrt(x * x + y * y)))
        lngs = np.degrees(np.arctan2(y, x))

    points: List[GeoPoint] = []
    for frac, lat, lng in zip(f.tolist(), lats.tolist(), lngs.tolist()):
        if frac == 0:
            points.append(a)
        elif frac == 1:
            points.append(b)
        else:
            points.append(GeoPoint(lat=float(lat), lng=_wrap_longitude(float(lng))))
    return points


def offset(origin: GeoPoint, distance_m: float, heading_deg: float) -> GeoPoint:
    """Return the point reached travelling ``distance_m`` from ``origin`` on ``heading_deg``."""

    angle = distance_m / EARTH_RADIUS_M
    bearing = math.radians(heading_deg)
    lat1 = math.radians(origin.lat)
    lng1 = math.radians(origin.lng)
    sin_lat2 = math.sin(lat1) * math.cos(angle) + math.cos(lat1) * math.sin(
        angle
    ) * math.cos(bearing)
    sin_lat2 = min(max(sin_lat2, -1.0), 1.0)
    lat2 = math.asin(sin_lat2)
    lng2 = lng1 + math.atan2(
        math.sin(bearing) * math.sin(angle) * math.cos(lat1),
        math.cos(angle) - math.sin(lat1) * sin_lat2,
    )
    return GeoPoint(lat=math.degrees(lat2), lng=_wrap_longitude(math.degrees(lng2)))


def segment_distances(path: Sequence[GeoPoint]) -> FloatArray:
    """Great-circle length (metres) of each consecutive pair in ``path``."""

    if len(path) < 2:
        return np.zeros(0, dtype=float)
    lats = np.radians(np.asarray([p.lat for p in path], dtype=float))
    lngs = np.radians(np.asarray([p.lng for p in path], dtype=float))
    dlat = np.diff(lats)
    dlng = np.diff(lngs)
    h = np.sin(dlat / 2.0) ** 2 + np.cos(lats[:-1]) * np.cos(lats[1:]) * np.sin(
        dlng / 2.0
    ) ** 2
    h = np.clip(h, 0.0, 1.0)
    return 2.0 * np.arctan2(np.sqrt(h), np.sqrt(1.0 - h)) * EARTH_RADIUS_M


def path_length(path: Sequence[GeoPoint]) -> float:
    """Total great-circle length of ``path`` in metres."""

    return float(np.sum(segment_distances(path)))
