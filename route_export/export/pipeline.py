"""Route export pipeline: resample, deduplicate, chunk and package a route."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..config import ExportConfig
from ..geometry.decoding import decode_polyline
from ..geometry.resampling import resample_route
from ..models import DirectionsResult, ExportResult, GeoPoint
from .chunking import Chunk, chunk_coordinates
from .dedup import deduplicate, format_coordinates
from .packaging import build_archive, build_archive_async

LOGGER = logging.getLogger(__name__)

NO_ROUTE_MESSAGE = "No route to export"
EXPORTED_MESSAGE = "Route exported in {parts} parts"


def collect_coordinates(
    result: Optional[DirectionsResult], config: Optional[ExportConfig] = None
) -> List[str]:
    """Return the formatted, deduplicated coordinates of the primary route."""

    cfg = config or ExportConfig()
    route = result.primary_route if result is not None else None
    if route is None:
        return []
    points = resample_route(route, cfg.point_spacing_m, config=cfg)
    unique = deduplicate(points, cfg.dedup_tolerance_deg)
    LOGGER.debug("Collected %d points (%d after dedup)", len(points), len(unique))
    return format_coordinates(unique)


def _plan(
    result: Optional[DirectionsResult], cfg: ExportConfig
) -> tuple[List[str], List[Chunk]]:
    coordinates = collect_coordinates(result, cfg)
    return coordinates, chunk_coordinates(coordinates, cfg.chunk_char_budget)


def _no_route(cfg: ExportConfig) -> ExportResult:
    LOGGER.info(NO_ROUTE_MESSAGE)
    return ExportResult(
        archive=None,
        part_count=0,
        point_count=0,
        status=NO_ROUTE_MESSAGE,
        filename=cfg.archive_name,
    )


def _exported(
    archive: bytes, coordinates: List[str], chunks: List[Chunk], cfg: ExportConfig
) -> ExportResult:
    status = EXPORTED_MESSAGE.format(parts=len(chunks))
    LOGGER.info("%s (%d points, %d bytes)", status, len(coordinates), len(archive))
    return ExportResult(
        archive=archive,
        part_count=len(chunks),
        point_count=len(coordinates),
        status=status,
        filename=cfg.archive_name,
    )


def export_route(
    result: Optional[DirectionsResult], config: Optional[ExportConfig] = None
) -> ExportResult:
    """Export the primary route of ``result`` as a zip of coordinate files.

    A missing route, or one with no usable geometry, is not an error: the
    returned :class:`ExportResult` carries no archive and a "No route to
    export" status.

    Raises:
        ArchiveAssemblyError: If the archive cannot be assembled.
    """

    cfg = config or ExportConfig()
    coordinates, chunks = _plan(result, cfg)
    if not chunks:
        return _no_route(cfg)
    archive = build_archive(chunks)
    return _exported(archive, coordinates, chunks, cfg)


async def export_route_async(
    result: Optional[DirectionsResult], config: Optional[ExportConfig] = None
) -> ExportResult:
    """Awaitable :func:`export_route`; only archive compression leaves the loop."""

    cfg = config or ExportConfig()
    coordinates, chunks = _plan(result, cfg)
    if not chunks:
        return _no_route(cfg)
    archive = await build_archive_async(chunks)
    return _exported(archive, coordinates, chunks, cfg)


def overview_coordinates(result: Optional[DirectionsResult]) -> Optional[List[GeoPoint]]:
    """Return the primary route's overview path, or None when there is no route."""

    route = result.primary_route if result is not None else None
    if route is None:
        return None
    if route.overview_path:
        return list(route.overview_path)
    if route.overview_polyline:
        return decode_polyline(route.overview_polyline)
    return []


def route_summary(result: Optional[DirectionsResult]) -> Optional[str]:
    """Describe the first leg as ``"Distance: <d> (Time: <t>)"``."""

    route = result.primary_route if result is not None else None
    if route is None or not route.legs:
        return None
    leg = route.legs[0]
    if leg.distance_text is None or leg.duration_text is None:
        return None
    return f"Distance: {leg.distance_text} (Time: {leg.duration_text})"
