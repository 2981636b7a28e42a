"""Partitioning of formatted coordinates into size-bounded chunks."""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

from ..config import ROUTE_CHUNK_CHAR_BUDGET

LOGGER = logging.getLogger(__name__)

Chunk = List[str]


def serialized_length(coordinates: Sequence[str]) -> int:
    """Length of the comma-joined representation of ``coordinates``."""

    if not coordinates:
        return 0
    return sum(len(coord) for coord in coordinates) + len(coordinates) - 1


def estimate_part_count(
    coordinates: Sequence[str], budget: int = ROUTE_CHUNK_CHAR_BUDGET
) -> int:
    """Number of files needed if the joined text were cut every ``budget`` characters."""

    if budget <= 0:
        raise ValueError("budget must be greater than zero")
    return math.ceil(serialized_length(coordinates) / budget)


def chunk_coordinates(
    coordinates: Sequence[str], budget: int = ROUTE_CHUNK_CHAR_BUDGET
) -> List[Chunk]:
    """Split ``coordinates`` into contiguous, equally sized chunks.

    The chunk size is derived from the total serialized length, so a chunk
    only stays within ``budget`` when coordinate strings are of similar
    length. Overshooting chunks are logged, not rejected.
    """

    parts = estimate_part_count(coordinates, budget)
    if parts == 0:
        return []
    chunk_size = math.ceil(len(coordinates) / parts)
    chunks = [
        list(coordinates[i : i + chunk_size])
        for i in range(0, len(coordinates), chunk_size)
    ]
    for index, chunk in enumerate(chunks):
        length = serialized_length(chunk)
        if length > budget:
            LOGGER.warning(
                "Route part %d is %d characters, over the %d character budget",
                index + 1,
                length,
                budget,
            )
    return chunks
