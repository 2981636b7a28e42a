"""Turning resampled routes into chunked coordinate archives."""

from .chunking import chunk_coordinates, estimate_part_count, serialized_length
from .dedup import deduplicate, format_coordinate, format_coordinates
from .packaging import build_archive, build_archive_async, part_filename, render_chunk
from .pipeline import (
    NO_ROUTE_MESSAGE,
    collect_coordinates,
    export_route,
    export_route_async,
    overview_coordinates,
    route_summary,
)

__all__ = [
    "chunk_coordinates",
    "estimate_part_count",
    "serialized_length",
    "deduplicate",
    "format_coordinate",
    "format_coordinates",
    "build_archive",
    "build_archive_async",
    "part_filename",
    "render_chunk",
    "NO_ROUTE_MESSAGE",
    "collect_coordinates",
    "export_route",
    "export_route_async",
    "overview_coordinates",
    "route_summary",
]
