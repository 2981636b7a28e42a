"""Adaptive resampling of step paths."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from ..config import ExportConfig, ROUTE_ROUNDABOUT_DENSITY_FACTOR
from ..models import GeoPoint, Route
from .curvature import SegmentShape, classify
from .decoding import resolve_step_path
from .geodesic import interpolate_many, segment_distances

LOGGER = logging.getLogger(__name__)

# Absorbs float noise so a gap of exactly k spacings gets k - 1 insertions.
_SPACING_EPSILON = 1e-9


def effective_spacing(
    shape: SegmentShape,
    base_spacing_m: float,
    density_factor: float = ROUTE_ROUNDABOUT_DENSITY_FACTOR,
) -> float:
    """Return the sampling interval (metres) for a path of the given shape."""

    if shape is SegmentShape.ROUNDABOUT:
        return base_spacing_m / density_factor
    return base_spacing_m


def resample_path(
    path: Sequence[GeoPoint],
    base_spacing_m: float,
    shape: Optional[SegmentShape] = None,
    *,
    config: Optional[ExportConfig] = None,
) -> List[GeoPoint]:
    """Densify ``path`` so no gap exceeds the spacing chosen for its shape.

    Original vertices are always kept. Each pair farther apart than the
    spacing gets ``ceil(distance / spacing) - 1`` evenly spaced great-circle
    points inserted between them. Paths with fewer than two points carry no
    drivable geometry and produce no output.
    """

    if base_spacing_m <= 0:
        raise ValueError("base_spacing_m must be greater than zero")
    if len(path) < 2:
        return []
    cfg = config or ExportConfig()
    if shape is None:
        shape = classify(
            path,
            sharp_turn_threshold_deg=cfg.sharp_turn_threshold_deg,
            roundabout_min_turn_deg=cfg.roundabout_min_turn_deg,
            roundabout_max_turn_deg=cfg.roundabout_max_turn_deg,
        )
    spacing = effective_spacing(shape, base_spacing_m, cfg.roundabout_density_factor)

    sampled: List[GeoPoint] = []
    for start, end, gap in zip(path[:-1], path[1:], segment_distances(path).tolist()):
        sampled.append(start)
        if gap > spacing:
            pieces = math.ceil(gap / spacing - _SPACING_EPSILON)
            fractions = [j / pieces for j in range(1, pieces)]
            sampled.extend(interpolate_many(start, end, fractions))
    sampled.append(path[-1])

    LOGGER.debug(
        "Resampled %s path: %d -> %d points (spacing %.2f m)",
        shape.value,
        len(path),
        len(sampled),
        spacing,
    )
    return sampled


def resample_route(
    route: Route,
    base_spacing_m: float,
    *,
    config: Optional[ExportConfig] = None,
) -> List[GeoPoint]:
    """Resample every step independently and concatenate in leg/step order."""

    points: List[GeoPoint] = []
    for leg in route.legs:
        for step in leg.steps:
            points.extend(
                resample_path(resolve_step_path(step), base_spacing_m, config=config)
            )
    return points
