"""Central error types used across the application."""

from __future__ import annotations


class RouteExportError(RuntimeError):
    """Base error for route export failures."""


class RouteFormatError(RouteExportError):
    """Raised when directions input is malformed or a polyline cannot be decoded."""


class ArchiveAssemblyError(RouteExportError):
    """Raised when the zip archive cannot be assembled."""


class ExportInProgressError(RouteExportError):
    """Raised when an export is requested while another one is still running."""


__all__ = [
    "RouteExportError",
    "RouteFormatError",
    "ArchiveAssemblyError",
    "ExportInProgressError",
]
