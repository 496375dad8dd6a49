"""Shared export types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Edge length of one grid cell in exported images
CELL_SCALE = 10


class ExportVariant(str, Enum):
    RASTER = "raster"
    VECTOR = "vector"


class ExportError(Exception):
    """A host collaborator (surface, encoder, saver) failed during export."""


@dataclass(frozen=True)
class ExportPayload:
    """Encoded image ready to hand to a saver."""
    data: bytes
    filename: str
    mime_type: str

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class ExportResult:
    """Outcome of an export command. Exactly one of payload/error is set."""
    variant: ExportVariant
    payload: Optional[ExportPayload] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.payload is not None and self.error is None

    def to_dict(self) -> dict:
        d = {"variant": self.variant.value, "ok": self.ok}
        if self.payload is not None:
            d["filename"] = self.payload.filename
            d["mime_type"] = self.payload.mime_type
            d["size"] = len(self.payload)
        if self.error is not None:
            d["error"] = self.error
        return d


def canvas_size(width: int, height: int, scale: int = CELL_SCALE) -> tuple[int, int]:
    """Exported image size in pixels for a grid of ``width`` x ``height`` cells."""
    return width * scale, height * scale
