"""Marker and route lifecycle for point-and-click routing.

The session is backend agnostic: a rendering layer forwards marker clicks,
drags and route edits here and displays :attr:`RouteSession.status`.
"""

from __future__ import annotations

import logging
from enum import Enum
from threading import Lock
from typing import Callable, List, Optional, Tuple

from .config import ExportConfig
from .errors import ExportInProgressError
from .export.pipeline import export_route, route_summary
from .models import DirectionsResult, ExportResult, GeoPoint

Router = Callable[[GeoPoint, GeoPoint], DirectionsResult]

ROUTE_CLEARED_MESSAGE = "Route cleared"
ROUTE_FAILED_MESSAGE = "Could not calculate route: {status}"
PICK_POINTS_MESSAGE = "Click the map to choose start and end points"


class SessionState(Enum):
    IDLE = "idle"
    AWAITING_SECOND_POINT = "awaiting_second_point"
    ROUTE_ACTIVE = "route_active"


class RouteSession:
    """Track up to two markers and the route computed between them."""

    def __init__(self, router: Router, config: Optional[ExportConfig] = None) -> None:
        self._router = router
        self.config = config or ExportConfig()
        self._log = logging.getLogger(self.__class__.__name__)
        self._state = SessionState.IDLE
        self._markers: List[GeoPoint] = []
        self._route: Optional[DirectionsResult] = None
        self._status = PICK_POINTS_MESSAGE
        self._export_lock = Lock()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def markers(self) -> Tuple[GeoPoint, ...]:
        return tuple(self._markers)

    @property
    def route(self) -> Optional[DirectionsResult]:
        return self._route

    @property
    def status(self) -> str:
        return self._status

    def place_marker(self, point: GeoPoint) -> SessionState:
        """Handle a map click while routing."""

        if self._state is SessionState.ROUTE_ACTIVE:
            self._reset(ROUTE_CLEARED_MESSAGE)
        self._markers.append(point)
        if len(self._markers) == 1:
            self._state = SessionState.AWAITING_SECOND_POINT
        else:
            self._calculate()
        return self._state

    def move_marker(self, index: int, point: GeoPoint) -> SessionState:
        """Handle a marker drag; an active route is recomputed."""

        if not 0 <= index < len(self._markers):
            raise IndexError(f"No marker at index {index}")
        self._markers[index] = point
        if self._state is SessionState.ROUTE_ACTIVE:
            self._calculate()
        return self._state

    def update_route(self, result: DirectionsResult) -> None:
        """Adopt a route edited in the rendering layer."""

        if self._state is not SessionState.ROUTE_ACTIVE:
            self._log.debug("Ignoring route update in state %s", self._state.value)
            return
        if result.primary_route is None:
            self._log.warning("Route update has no routes; clearing session")
            self._reset(ROUTE_CLEARED_MESSAGE)
            return
        self._route = result
        summary = route_summary(result)
        if summary:
            self._status = summary

    def clear(self) -> None:
        self._reset(ROUTE_CLEARED_MESSAGE)

    def export(self) -> ExportResult:
        """Export the active route.

        Raises:
            ExportInProgressError: If another export on this session is running.
            ArchiveAssemblyError: If the archive cannot be assembled.
        """

        if not self._export_lock.acquire(blocking=False):
            raise ExportInProgressError("An export is already in progress")
        try:
            outcome = export_route(self._route, self.config)
        finally:
            self._export_lock.release()
        self._status = outcome.status
        return outcome

    def _calculate(self) -> None:
        origin, destination = self._markers[0], self._markers[1]
        result = self._router(origin, destination)
        if result.status != "OK" or result.primary_route is None:
            self._log.warning("Routing failed with status %s", result.status)
            self._reset(ROUTE_FAILED_MESSAGE.format(status=result.status))
            return
        self._route = result
        self._state = SessionState.ROUTE_ACTIVE
        self._status = route_summary(result) or self._status

    def _reset(self, status: str) -> None:
        self._markers = []
        self._route = None
        self._state = SessionState.IDLE
        self._status = status
