"""End-to-end tests for the route export pipeline."""

from __future__ import annotations

import asyncio
import copy
import io
import zipfile

import pytest

from route_export.config import ExportConfig
from route_export.errors import ArchiveAssemblyError
from route_export.export import pipeline
from route_export.export.dedup import format_coordinate
from route_export.export.pipeline import (
    NO_ROUTE_MESSAGE,
    collect_coordinates,
    export_route,
    export_route_async,
    overview_coordinates,
    route_summary,
)
from route_export.models import DirectionsResult, GeoPoint, Leg, Route, Step

from conftest import ORIGIN, make_directions, make_straight_path


def _entries(archive: bytes) -> dict[str, str]:
    with zipfile.ZipFile(io.BytesIO(archive)) as bundle:
        return {name: bundle.read(name).decode("utf-8") for name in bundle.namelist()}


def test_empty_route_produces_no_archive(empty_directions: DirectionsResult) -> None:
    outcome = export_route(empty_directions)

    assert outcome.archive is None
    assert not outcome.exported
    assert outcome.part_count == 0
    assert outcome.status == NO_ROUTE_MESSAGE == "No route to export"


def test_missing_result_produces_no_archive() -> None:
    assert export_route(None).status == NO_ROUTE_MESSAGE


def test_route_without_drivable_geometry_produces_no_archive() -> None:
    result = make_directions([ORIGIN], [])
    outcome = export_route(result)
    assert outcome.archive is None
    assert outcome.status == NO_ROUTE_MESSAGE


def test_single_part_export(straight_directions: DirectionsResult) -> None:
    config = ExportConfig(point_spacing_m=100.0)

    outcome = export_route(straight_directions, config)

    assert outcome.exported
    assert outcome.part_count == 1
    assert outcome.status == "Route exported in 1 parts"
    assert outcome.filename == "route-export.zip"
    entries = _entries(outcome.archive)
    assert list(entries) == ["route-part-1.txt"]
    tokens = entries["route-part-1.txt"].split(",")
    assert len(tokens) == 2 * outcome.point_count
    assert ",".join(tokens[:2]) == format_coordinate(ORIGIN)


def test_multi_part_export_reassembles_to_collected_coordinates() -> None:
    result = make_directions(make_straight_path(2, 20_000.0))
    config = ExportConfig(point_spacing_m=10.0, chunk_char_budget=9000)

    coordinates = collect_coordinates(result, config)
    outcome = export_route(result, config)

    assert outcome.part_count == len(_entries(outcome.archive)) > 1
    assert outcome.point_count == len(coordinates)
    entries = _entries(outcome.archive)
    names = [f"route-part-{n}.txt" for n in range(1, outcome.part_count + 1)]
    assert list(entries) == names
    assert ",".join(entries[name] for name in names) == ",".join(coordinates)
    assert all(len(entries[name]) <= 9000 for name in names)


def test_shared_step_boundary_point_is_exported_once() -> None:
    first = make_straight_path(3, 50.0)
    second = make_straight_path(3, 50.0, 0.0)
    second[0] = first[-1]
    result = make_directions(first, second)

    coordinates = collect_coordinates(result, ExportConfig(point_spacing_m=1000.0))

    assert coordinates.count(format_coordinate(first[-1])) == 1
    assert len(coordinates) == 5


def test_only_primary_route_is_exported() -> None:
    primary = make_directions(make_straight_path(2, 10.0)).routes[0]
    alternate = make_directions(make_straight_path(6, 10.0, 180.0)).routes[0]
    result = DirectionsResult(routes=[primary, alternate])

    assert len(collect_coordinates(result)) == 2


def test_export_does_not_mutate_input(straight_directions: DirectionsResult) -> None:
    snapshot = copy.deepcopy(straight_directions)
    export_route(straight_directions)
    assert straight_directions == snapshot


def test_archive_failure_propagates(
    monkeypatch: pytest.MonkeyPatch, straight_directions: DirectionsResult
) -> None:
    snapshot = copy.deepcopy(straight_directions)

    def failing_build(_chunks):
        raise ArchiveAssemblyError("boom")

    monkeypatch.setattr(pipeline, "build_archive", failing_build)

    with pytest.raises(ArchiveAssemblyError):
        export_route(straight_directions)
    assert straight_directions == snapshot


def test_async_export_matches_sync_export(straight_directions: DirectionsResult) -> None:
    sync_outcome = export_route(straight_directions)
    async_outcome = asyncio.run(export_route_async(straight_directions))

    assert async_outcome.status == sync_outcome.status
    assert _entries(async_outcome.archive) == _entries(sync_outcome.archive)


def test_async_export_without_route(empty_directions: DirectionsResult) -> None:
    outcome = asyncio.run(export_route_async(empty_directions))
    assert outcome.archive is None
    assert outcome.status == NO_ROUTE_MESSAGE


def test_route_summary_uses_first_leg() -> None:
    result = make_directions(
        make_straight_path(2, 10.0), distance_text="12 km", duration_text="15 mins"
    )
    assert route_summary(result) == "Distance: 12 km (Time: 15 mins)"
    assert route_summary(make_directions(make_straight_path(2, 10.0))) is None
    assert route_summary(DirectionsResult()) is None


def test_overview_coordinates() -> None:
    path = [GeoPoint(38.5, -120.2), GeoPoint(40.7, -120.95)]
    assert overview_coordinates(DirectionsResult(routes=[Route(overview_path=path)])) == path

    encoded = DirectionsResult(routes=[Route(overview_polyline="_p~iF~ps|U_ulLnnqC")])
    decoded = overview_coordinates(encoded)
    assert decoded[0].lat == pytest.approx(38.5)
    assert decoded[1].lng == pytest.approx(-120.95)

    assert overview_coordinates(DirectionsResult(routes=[Route(legs=[Leg(steps=[Step()])])])) == []
    assert overview_coordinates(None) is None
