"""Removal of near-identical consecutive points and coordinate formatting."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..config import ROUTE_DEDUP_TOLERANCE_DEG
from ..models import GeoPoint

_MICRO = 1_000_000


def deduplicate(
    points: Iterable[GeoPoint],
    tolerance_deg: float = ROUTE_DEDUP_TOLERANCE_DEG,
) -> List[GeoPoint]:
    """Drop points that sit within ``tolerance_deg`` of the last kept point.

    A point is dropped only when both its latitude and longitude differ from
    the previously retained point by less than the tolerance. Comparison runs
    on the six-decimal values that end up in the exported text, so exact
    duplicates are always removed.
    """

    tolerance = max(1, round(tolerance_deg * _MICRO))
    kept: List[GeoPoint] = []
    last = None
    for point in points:
        current = point.micro_degrees()
        if last is not None and (
            abs(current[0] - last[0]) < tolerance
            and abs(current[1] - last[1]) < tolerance
        ):
            continue
        kept.append(point)
        last = current
    return kept


def format_coordinate(point: GeoPoint) -> str:
    """Render ``point`` as ``"<lng>,<lat>"`` with six decimals."""

    lat, lng = point.micro_degrees()
    return f"{lng / _MICRO:.6f},{lat / _MICRO:.6f}"


def format_coordinates(points: Sequence[GeoPoint]) -> List[str]:
    return [format_coordinate(point) for point in points]
