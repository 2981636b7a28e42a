"""Geometry processing for route export: geodesy, classification, resampling."""

from .curvature import SegmentShape, classify, has_sharp_turn, is_roundabout
from .decoding import decode_polyline, resolve_step_path
from .geodesic import (
    distance,
    heading,
    interpolate,
    normalize_turn,
    offset,
    path_length,
    turn_angle,
)
from .resampling import effective_spacing, resample_path, resample_route

__all__ = [
    "SegmentShape",
    "classify",
    "has_sharp_turn",
    "is_roundabout",
    "decode_polyline",
    "resolve_step_path",
    "distance",
    "heading",
    "interpolate",
    "normalize_turn",
    "offset",
    "path_length",
    "turn_angle",
    "effective_spacing",
    "resample_path",
    "resample_route",
]
