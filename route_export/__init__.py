"""Adaptive route resampling and chunked coordinate export."""

from .config import ExportConfig
from .errors import (
    ArchiveAssemblyError,
    ExportInProgressError,
    RouteExportError,
    RouteFormatError,
)
from .export import export_route, export_route_async
from .models import DirectionsResult, ExportResult, GeoPoint, Leg, Route, Step
from .session import RouteSession, SessionState

__all__ = [
    "ExportConfig",
    "ArchiveAssemblyError",
    "ExportInProgressError",
    "RouteExportError",
    "RouteFormatError",
    "export_route",
    "export_route_async",
    "DirectionsResult",
    "ExportResult",
    "GeoPoint",
    "Leg",
    "Route",
    "Step",
    "RouteSession",
    "SessionState",
]
