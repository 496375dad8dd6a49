"""Save collaborators: take an encoded payload and deliver it somewhere.

The editor hands over (payload, filename, mime type) and does not wait for
or track anything afterwards.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class Saver(Protocol):
    def save(self, data: bytes, filename: str, mime_type: str) -> None: ...


class DirectorySaver:
    """Writes payloads into a directory, replacing files of the same name."""

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def save(self, data: bytes, filename: str, mime_type: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        # Only the base name, never a path the payload chose
        path = self.directory / Path(filename).name
        temp = path.with_suffix(path.suffix + ".tmp")
        temp.write_bytes(data)
        temp.replace(path)
        logger.info("Saved %s (%s, %d bytes)", path, mime_type, len(data))


class MemorySaver:
    """Keeps every saved payload in a list. Useful for embedding and tests."""

    def __init__(self):
        self.saved: list[tuple[bytes, str, str]] = []

    def save(self, data: bytes, filename: str, mime_type: str) -> None:
        self.saved.append((data, filename, mime_type))

    @property
    def last(self) -> tuple[bytes, str, str] | None:
        return self.saved[-1] if self.saved else None
