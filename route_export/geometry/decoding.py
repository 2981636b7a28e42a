"""Decoding of encoded step polylines into point paths."""

from __future__ import annotations

from threading import RLock
from typing import List

from cachetools import LRUCache
from polyline import decode as polyline_decode

from ..config import POLYLINE_CACHE_SIZE
from ..errors import RouteFormatError
from ..models import GeoPoint, Path, Step

# Decoded step polylines keyed by their encoded string.
_polyline_cache: LRUCache[str, tuple[GeoPoint, ...]] = LRUCache(
    maxsize=max(1, POLYLINE_CACHE_SIZE)
)
_polyline_cache_lock = RLock()


def decode_polyline(encoded: str) -> List[GeoPoint]:
    """Decode an encoded polyline string into a list of points."""

    if not encoded:
        return []
    with _polyline_cache_lock:
        cached = _polyline_cache.get(encoded)
    if cached is not None:
        return list(cached)
    try:
        decoded = polyline_decode(encoded)
    except (ValueError, TypeError, IndexError) as exc:
        raise RouteFormatError("Unable to decode polyline") from exc
    points = tuple(GeoPoint(lat=float(lat), lng=float(lng)) for lat, lng in decoded)
    with _polyline_cache_lock:
        _polyline_cache[encoded] = points
    return list(points)


def resolve_step_path(step: Step) -> Path:
    """Return the explicit path of ``step``, decoding its polyline when needed."""

    if step.path:
        return list(step.path)
    if step.polyline:
        return decode_polyline(step.polyline)
    return []


def clear_polyline_cache() -> None:
    with _polyline_cache_lock:
        _polyline_cache.clear()
