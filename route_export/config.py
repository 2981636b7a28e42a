"""Central configuration for the route export pipeline.

All values are constants imported by the rest of the package. Adjust as needed
for your environment. Every value can be overridden through environment
variables (optionally via a local `.env`).
"""

from __future__ import annotations

import importlib
import os
from dataclasses import dataclass


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Load .env variables when python-dotenv is available.
_load_dotenv = None
try:
    _dotenv_mod = importlib.import_module("dotenv")
    _load_dotenv = getattr(_dotenv_mod, "load_dotenv", None)
except Exception:
    _load_dotenv = None

if callable(_load_dotenv):
    # Load .env from the current directory or any parent folder.
    _load_dotenv()


# ---------------------------------------------------------------------------
# Sampling
# ---------------------------------------------------------------------------
# Base spacing (metres) between exported points on ordinary segments.
ROUTE_POINT_SPACING_M = _env_float("ROUTE_POINT_SPACING_M", 100.0)

# Roundabouts are sampled at ROUTE_POINT_SPACING_M / this factor.
ROUTE_ROUNDABOUT_DENSITY_FACTOR = _env_float("ROUTE_ROUNDABOUT_DENSITY_FACTOR", 3.0)


# ---------------------------------------------------------------------------
# Curvature classification
# ---------------------------------------------------------------------------
# A single interior turn sharper than this (degrees) marks a step as a sharp turn.
ROUTE_SHARP_TURN_THRESHOLD_DEG = _env_float("ROUTE_SHARP_TURN_THRESHOLD_DEG", 30.0)

# Cumulative signed turning (degrees) strictly inside this window marks a
# roundabout.
ROUTE_ROUNDABOUT_MIN_TURN_DEG = _env_float("ROUTE_ROUNDABOUT_MIN_TURN_DEG", 250.0)
ROUTE_ROUNDABOUT_MAX_TURN_DEG = _env_float("ROUTE_ROUNDABOUT_MAX_TURN_DEG", 370.0)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------
# Consecutive points closer than this (degrees, both axes) are dropped. 1e-5
# is roughly one metre.
ROUTE_DEDUP_TOLERANCE_DEG = _env_float("ROUTE_DEDUP_TOLERANCE_DEG", 1e-5)

# Character budget for each comma-joined route-part file.
ROUTE_CHUNK_CHAR_BUDGET = _env_int("ROUTE_CHUNK_CHAR_BUDGET", 9000)

# Suggested download name for the archive.
ROUTE_ARCHIVE_NAME = os.getenv("ROUTE_ARCHIVE_NAME", "route-export.zip")


# ---------------------------------------------------------------------------
# Performance tuning
# ---------------------------------------------------------------------------
# Maximum number of decoded step polylines kept in memory.
POLYLINE_CACHE_SIZE = _env_int("POLYLINE_CACHE_SIZE", 256)


@dataclass(frozen=True, slots=True)
class ExportConfig:
    """Explicit bundle of tunables passed through a single export call."""

    point_spacing_m: float = ROUTE_POINT_SPACING_M
    chunk_char_budget: int = ROUTE_CHUNK_CHAR_BUDGET
    dedup_tolerance_deg: float = ROUTE_DEDUP_TOLERANCE_DEG
    sharp_turn_threshold_deg: float = ROUTE_SHARP_TURN_THRESHOLD_DEG
    roundabout_min_turn_deg: float = ROUTE_ROUNDABOUT_MIN_TURN_DEG
    roundabout_max_turn_deg: float = ROUTE_ROUNDABOUT_MAX_TURN_DEG
    roundabout_density_factor: float = ROUTE_ROUNDABOUT_DENSITY_FACTOR
    archive_name: str = ROUTE_ARCHIVE_NAME
