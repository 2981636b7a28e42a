"""Command line entry point: export a saved directions response as a zip."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from .config import ExportConfig
from .directions import load_directions
from .errors import ArchiveAssemblyError, RouteFormatError
from .export.pipeline import export_route

EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_NO_ROUTE = 2
EXIT_ARCHIVE_FAILED = 3


def _setup_logging() -> None:
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=logging.INFO,
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )


def _build_parser() -> argparse.ArgumentParser:
    """Return the CLI argument parser for the route export tool."""

    defaults = ExportConfig()
    parser = argparse.ArgumentParser(
        description=(
            "Resample a driving route from a directions JSON file and write it"
            " as a zip of comma-separated coordinate files."
        )
    )
    parser.add_argument("directions", type=Path, help="Directions JSON file")
    parser.add_argument(
        "--spacing",
        type=float,
        default=defaults.point_spacing_m,
        help=f"Point spacing in metres (default: {defaults.point_spacing_m:g})",
    )
    parser.add_argument(
        "--budget",
        type=int,
        default=defaults.chunk_char_budget,
        help=f"Maximum characters per part file (default: {defaults.chunk_char_budget})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help=f"Output zip path; defaults to {defaults.archive_name}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point used via ``route-export`` or ``python -m route_export``."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging()

    if args.spacing <= 0 or args.budget <= 0:
        parser.error("--spacing and --budget must be greater than zero")
    config = replace(
        ExportConfig(), point_spacing_m=args.spacing, chunk_char_budget=args.budget
    )

    try:
        result = load_directions(args.directions)
    except (RouteFormatError, OSError) as exc:
        logging.error("Failed to load directions '%s': %s", args.directions, exc)
        return EXIT_LOAD_FAILED

    try:
        outcome = export_route(result, config)
    except RouteFormatError as exc:
        logging.error("Route geometry is invalid: %s", exc)
        return EXIT_LOAD_FAILED
    except ArchiveAssemblyError as exc:
        logging.error("%s", exc)
        return EXIT_ARCHIVE_FAILED

    if outcome.archive is None:
        logging.warning("%s", outcome.status)
        return EXIT_NO_ROUTE

    output_path = args.output or Path(outcome.filename)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(outcome.archive)
    logging.info("%s -> %s", outcome.status, output_path)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
