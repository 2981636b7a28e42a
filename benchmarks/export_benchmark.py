"""Benchmark the route export pipeline with long multi-step routes."""

from __future__ import annotations

import argparse
import statistics
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Late imports rely on the adjusted sys.path above.
from route_export.config import ExportConfig  # noqa: E402
from route_export.export.chunking import chunk_coordinates  # noqa: E402
from route_export.export.dedup import deduplicate, format_coordinates  # noqa: E402
from route_export.export.packaging import build_archive  # noqa: E402
from route_export.geometry.resampling import resample_route  # noqa: E402
from route_export.models import GeoPoint, Leg, Route, Step  # noqa: E402


@dataclass(slots=True)
class StageDurations:
    """Timing measurements (in seconds) for the export pipeline."""

    resample: float
    dedup: float
    chunk: float
    package: float

    @property
    def total(self) -> float:
        """Return the aggregate duration for this benchmark iteration."""

        return self.resample + self.dedup + self.chunk + self.package


@dataclass(slots=True)
class BenchmarkSummary:
    """Aggregated statistics for multiple benchmark iterations."""

    step_count: int
    output_points: int
    iterations: int
    mean_resample_ms: float
    mean_dedup_ms: float
    mean_chunk_ms: float
    mean_package_ms: float
    mean_total_ms: float
    worst_total_ms: float


def _build_route(step_count: int) -> Route:
    """Generate a zig-zag route whose steps alternate between east and north."""

    steps: List[Step] = []
    lat, lng = 24.0, 46.0
    step_deg = 5e-3
    for idx in range(step_count):
        start = GeoPoint(lat, lng)
        if idx % 2:
            lat += step_deg
        else:
            lng += step_deg
        middle = GeoPoint((start.lat + lat) / 2, (start.lng + lng) / 2)
        steps.append(Step(path=[start, middle, GeoPoint(lat, lng)]))
    return Route(legs=[Leg(steps=steps)])


def _run_iteration(route: Route, config: ExportConfig) -> tuple[StageDurations, int]:
    """Execute one benchmark iteration and capture per-stage timings."""

    start = time.perf_counter()
    points = resample_route(route, config.point_spacing_m, config=config)
    resample = time.perf_counter() - start

    start = time.perf_counter()
    coordinates = format_coordinates(deduplicate(points, config.dedup_tolerance_deg))
    dedup = time.perf_counter() - start

    start = time.perf_counter()
    chunks = chunk_coordinates(coordinates, config.chunk_char_budget)
    chunk = time.perf_counter() - start

    start = time.perf_counter()
    archive = build_archive(chunks)
    _ = archive  # guard against optimisation stripping the call
    package = time.perf_counter() - start

    return StageDurations(resample, dedup, chunk, package), len(coordinates)


def run_benchmark(step_count: int, iterations: int, spacing_m: float) -> BenchmarkSummary:
    """Benchmark the export pipeline and return aggregated timings."""

    if step_count <= 0:
        raise ValueError("step_count must be positive")
    if iterations <= 0:
        raise ValueError("iterations must be positive")

    route = _build_route(step_count)
    config = ExportConfig(point_spacing_m=spacing_m)
    durations: List[StageDurations] = []
    output_points = 0
    for _ in range(iterations):
        timing, output_points = _run_iteration(route, config)
        durations.append(timing)

    return BenchmarkSummary(
        step_count=step_count,
        output_points=output_points,
        iterations=iterations,
        mean_resample_ms=statistics.fmean(d.resample for d in durations) * 1000.0,
        mean_dedup_ms=statistics.fmean(d.dedup for d in durations) * 1000.0,
        mean_chunk_ms=statistics.fmean(d.chunk for d in durations) * 1000.0,
        mean_package_ms=statistics.fmean(d.package for d in durations) * 1000.0,
        mean_total_ms=statistics.fmean(d.total for d in durations) * 1000.0,
        worst_total_ms=max(d.total for d in durations) * 1000.0,
    )


def _format_summary(summary: BenchmarkSummary) -> Dict[str, float]:
    """Return a JSON-friendly representation of the benchmark summary."""

    return {
        "step_count": summary.step_count,
        "output_points": summary.output_points,
        "iterations": summary.iterations,
        "mean_resample_ms": summary.mean_resample_ms,
        "mean_dedup_ms": summary.mean_dedup_ms,
        "mean_chunk_ms": summary.mean_chunk_ms,
        "mean_package_ms": summary.mean_package_ms,
        "mean_total_ms": summary.mean_total_ms,
        "worst_total_ms": summary.worst_total_ms,
    }


def _parse_args() -> argparse.Namespace:
    """Parse command-line arguments for the benchmark utility."""

    parser = argparse.ArgumentParser(
        description="Benchmark the route export pipeline with long routes",
    )
    parser.add_argument("--steps", type=int, default=2000, help="Number of route steps")
    parser.add_argument(
        "--iterations",
        type=int,
        default=5,
        help="Number of repetitions for averaging",
    )
    parser.add_argument(
        "--spacing",
        type=float,
        default=50.0,
        help="Point spacing in metres",
    )
    return parser.parse_args()


def main() -> None:
    """Entry point when running the module as a script."""

    args = _parse_args()
    summary = run_benchmark(args.steps, args.iterations, args.spacing)
    for key, value in _format_summary(summary).items():
        if key in {"step_count", "output_points", "iterations"}:
            print(f"{key}: {value}")
        else:
            print(f"{key}: {value:.3f}")


if __name__ == "__main__":
    main()
