"""Persistence of rendered bytes."""
from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path

from docx_composer.utils.logger import get_logger

LOGGER = get_logger(__name__)


def write_bytes_atomic(path: Path, data: bytes) -> None:
    """Write through a temporary sibling so a failed write leaves no partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.replace(tmp_name, path)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    LOGGER.debug("Wrote %d bytes to %s", len(data), path)


async def write_bytes(path: Path, data: bytes) -> None:
    await asyncio.to_thread(write_bytes_atomic, Path(path), data)
