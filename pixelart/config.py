"""Editor configuration with clean, readable structure."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path

from .core.colors import DEFAULT_COLOR
from .core.history import HISTORY_LIMIT
from .export.base import CELL_SCALE
from .export.raster import PNG_FILENAME
from .export.vector import SVG_FILENAME

logger = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / ".config" / "pixelart" / "config.json"


@dataclass
class GridConfig:
    """Grid size presets, picked by viewport width."""
    mobile_size: int = 16
    desktop_size: int = 32
    # Viewports narrower than this get the mobile preset
    breakpoint: int = 768


@dataclass
class PaletteConfig:
    """Color picker settings."""
    initial_color: str = DEFAULT_COLOR
    history_limit: int = HISTORY_LIMIT


@dataclass
class ExportConfig:
    """Export scale and suggested filenames."""
    cell_scale: int = CELL_SCALE
    png_filename: str = PNG_FILENAME
    svg_filename: str = SVG_FILENAME


# Fields that must be at least 1
_POSITIVE = {"mobile_size", "desktop_size", "history_limit", "cell_scale"}


def _valid(name: str, value, default) -> bool:
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return value >= 1 if name in _POSITIVE else value >= 0
    if isinstance(default, str):
        return isinstance(value, str) and bool(value)
    return True


def _section(section_cls, d):
    """Build a section from ``d``, keeping defaults for unknown or bad values."""
    if not isinstance(d, dict):
        logger.warning("Ignoring %s: expected an object, got %r", section_cls.__name__, d)
        return section_cls()
    values = {}
    for f in fields(section_cls):
        if f.name not in d:
            continue
        value = d[f.name]
        if _valid(f.name, value, f.default):
            values[f.name] = value
        else:
            logger.warning("Invalid %s.%s=%r, using default %r",
                           section_cls.__name__, f.name, value, f.default)
    return section_cls(**values)


@dataclass
class EditorConfig:
    """Main configuration combining all sections."""
    grid: GridConfig = field(default_factory=GridConfig)
    palette: PaletteConfig = field(default_factory=PaletteConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    def to_dict(self) -> dict:
        return {
            "grid": asdict(self.grid),
            "palette": asdict(self.palette),
            "export": asdict(self.export),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "EditorConfig":
        return cls(
            grid=_section(GridConfig, d.get("grid", {})),
            palette=_section(PaletteConfig, d.get("palette", {})),
            export=_section(ExportConfig, d.get("export", {})),
        )

    def save(self, path: Path = CONFIG_PATH):
        path.parent.mkdir(parents=True, exist_ok=True)
        temp = path.with_suffix(".tmp")
        temp.write_text(json.dumps(self.to_dict(), indent=2))
        temp.replace(path)

    @classmethod
    def load(cls, path: Path = CONFIG_PATH) -> "EditorConfig":
        try:
            if path.exists():
                raw = json.loads(path.read_text())
                if isinstance(raw, dict):
                    return cls.from_dict(raw)
                logger.warning("Ignoring config %s: expected a JSON object", path)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Failed to read config %s: %s", path, e)
        return cls()


def grid_size_for_viewport(viewport_width: int, config: EditorConfig | None = None) -> tuple[int, int]:
    """Square grid preset for a viewport width."""
    grid = (config or EditorConfig()).grid
    size = grid.mobile_size if viewport_width < grid.breakpoint else grid.desktop_size
    return size, size
