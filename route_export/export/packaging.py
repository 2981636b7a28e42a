"""Zip packaging of route chunks."""

from __future__ import annotations

import asyncio
import io
import zipfile
from typing import Sequence

from ..errors import ArchiveAssemblyError

ENTRY_TEMPLATE = "route-part-{number}.txt"


def render_chunk(chunk: Sequence[str]) -> str:
    """Return the file body for ``chunk``: coordinates joined by commas."""

    return ",".join(chunk)


def part_filename(index: int) -> str:
    """Archive entry name for the zero-based chunk ``index``."""

    return ENTRY_TEMPLATE.format(number=index + 1)


def build_archive(chunks: Sequence[Sequence[str]]) -> bytes:
    """Return deflated zip bytes holding one text entry per chunk.

    Raises:
        ValueError: If ``chunks`` is empty.
        ArchiveAssemblyError: If the archive cannot be written.
    """

    if not chunks:
        raise ValueError("No route chunks to package")
    buffer = io.BytesIO()
    try:
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for index, chunk in enumerate(chunks):
                archive.writestr(part_filename(index), render_chunk(chunk))
    except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile, RuntimeError) as exc:
        raise ArchiveAssemblyError(f"Failed to assemble route archive: {exc}") from exc
    return buffer.getvalue()


async def build_archive_async(chunks: Sequence[Sequence[str]]) -> bytes:
    """Assemble the archive in a worker thread so the event loop stays free."""

    return await asyncio.to_thread(build_archive, chunks)
