"""Dataclasses describing directions input and export results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A WGS84 latitude/longitude pair in degrees."""

    lat: float
    lng: float

    def micro_degrees(self) -> Tuple[int, int]:
        """Return ``(lat, lng)`` rounded to integer millionths of a degree."""

        return round(self.lat * 1_000_000), round(self.lng * 1_000_000)


Path = List[GeoPoint]


@dataclass(slots=True)
class Step:
    """A drivable piece of a leg, given as a point list or an encoded polyline."""

    path: Optional[Path] = None
    polyline: Optional[str] = None
    instructions: Optional[str] = None


@dataclass(slots=True)
class Leg:
    steps: List[Step] = field(default_factory=list)
    start: Optional[GeoPoint] = None
    end: Optional[GeoPoint] = None
    distance_text: Optional[str] = None
    duration_text: Optional[str] = None


@dataclass(slots=True)
class Route:
    legs: List[Leg] = field(default_factory=list)
    overview_path: Optional[Path] = None
    overview_polyline: Optional[str] = None


@dataclass(slots=True)
class DirectionsResult:
    """Response from the routing collaborator; only ``routes[0]`` is exported."""

    routes: List[Route] = field(default_factory=list)
    status: str = "OK"

    @property
    def primary_route(self) -> Optional[Route]:
        return self.routes[0] if self.routes else None


@dataclass(slots=True)
class ExportResult:
    """Outcome of a single export call."""

    archive: Optional[bytes]
    part_count: int
    point_count: int
    status: str
    filename: str

    @property
    def exported(self) -> bool:
        return self.archive is not None
