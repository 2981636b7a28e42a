"""Build :class:`DirectionsResult` objects from routing service JSON payloads."""

from __future__ import annotations

import json
from pathlib import Path as FilePath
from typing import Any, List, Mapping, Optional, Union

from .errors import RouteFormatError
from .models import DirectionsResult, GeoPoint, Leg, Path, Route, Step

PathLike = Union[str, FilePath]


def _parse_point(raw: Any) -> GeoPoint:
    """Accept ``{"lat": .., "lng": ..}`` objects or ``[lat, lng]`` pairs."""

    try:
        if isinstance(raw, Mapping):
            lng = raw["lng"] if "lng" in raw else raw["lon"]
            return GeoPoint(lat=float(raw["lat"]), lng=float(lng))
        lat, lng = raw
        return GeoPoint(lat=float(lat), lng=float(lng))
    except (KeyError, TypeError, ValueError) as exc:
        raise RouteFormatError(f"Invalid coordinate: {raw!r}") from exc


def _parse_path(raw: Any) -> Optional[Path]:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise RouteFormatError("Path must be a list of coordinates")
    return [_parse_point(item) for item in raw]


def _encoded(raw: Any) -> Optional[str]:
    """Return the ``points`` string of a polyline object (or a bare string)."""

    if raw is None:
        return None
    if isinstance(raw, str):
        return raw
    if isinstance(raw, Mapping):
        points = raw.get("points")
        if points is None or isinstance(points, str):
            return points
    raise RouteFormatError("Polyline must be a string or an object with 'points'")


def _text(raw: Any) -> Optional[str]:
    if isinstance(raw, Mapping):
        value = raw.get("text")
        return None if value is None else str(value)
    return None if raw is None else str(raw)


def _parse_step(raw: Any) -> Step:
    if not isinstance(raw, Mapping):
        raise RouteFormatError("Step must be an object")
    return Step(
        path=_parse_path(raw.get("path")),
        polyline=_encoded(raw.get("polyline")),
        instructions=raw.get("html_instructions") or raw.get("instructions"),
    )


def _parse_leg(raw: Any) -> Leg:
    if not isinstance(raw, Mapping):
        raise RouteFormatError("Leg must be an object")
    steps = raw.get("steps") or []
    if not isinstance(steps, list):
        raise RouteFormatError("Leg steps must be a list")
    start = raw.get("start_location")
    end = raw.get("end_location")
    return Leg(
        steps=[_parse_step(step) for step in steps],
        start=_parse_point(start) if start is not None else None,
        end=_parse_point(end) if end is not None else None,
        distance_text=_text(raw.get("distance")),
        duration_text=_text(raw.get("duration")),
    )


def _parse_route(raw: Any) -> Route:
    if not isinstance(raw, Mapping):
        raise RouteFormatError("Route must be an object")
    legs = raw.get("legs") or []
    if not isinstance(legs, list):
        raise RouteFormatError("Route legs must be a list")
    return Route(
        legs=[_parse_leg(leg) for leg in legs],
        overview_path=_parse_path(raw.get("overview_path")),
        overview_polyline=_encoded(raw.get("overview_polyline")),
    )


def directions_from_payload(payload: Any) -> DirectionsResult:
    """Convert a decoded directions JSON document into a :class:`DirectionsResult`.

    Raises:
        RouteFormatError: If the payload does not follow the directions shape.
    """

    if not isinstance(payload, Mapping):
        raise RouteFormatError("Directions payload must be a JSON object")
    routes = payload.get("routes") or []
    if not isinstance(routes, list):
        raise RouteFormatError("'routes' must be a list")
    parsed: List[Route] = [_parse_route(route) for route in routes]
    status = str(payload.get("status", "OK" if parsed else "ZERO_RESULTS"))
    return DirectionsResult(routes=parsed, status=status)


def load_directions(path: PathLike) -> DirectionsResult:
    """Read a directions JSON file from disk.

    Raises:
        OSError: If ``path`` cannot be read, e.g. ``FileNotFoundError``.
        RouteFormatError: If the file is not UTF-8 encoded directions JSON.
    """

    try:
        text = FilePath(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise RouteFormatError(f"{path} is not valid UTF-8: {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RouteFormatError(f"Invalid JSON in {path}: {exc}") from exc
    return directions_from_payload(payload)
