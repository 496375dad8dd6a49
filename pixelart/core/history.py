"""Recently used colors, most recent first."""

from __future__ import annotations

from typing import Iterator

HISTORY_LIMIT = 10


class ColorHistory:
    """Bounded, deduplicated most-recently-used list of colors.

    The most recently used color is always at index 0. Reusing a color
    moves it to the front instead of adding a second entry.
    """

    def __init__(self, seed: str, limit: int = HISTORY_LIMIT):
        if limit < 1:
            raise ValueError(f"History limit must be at least 1, got {limit}")
        self.limit = limit
        self._colors: list[str] = [seed]

    def use(self, color: str) -> None:
        """Move (or insert) ``color`` to the front and cap the length."""
        colors = [c for c in self._colors if c != color]
        colors.insert(0, color)
        self._colors = colors[:self.limit]

    @property
    def colors(self) -> list[str]:
        return list(self._colors)

    @property
    def most_recent(self) -> str:
        return self._colors[0]

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._colors))

    def __getitem__(self, index: int) -> str:
        return self._colors[index]

    def __contains__(self, color: object) -> bool:
        return color in self._colors

    def __repr__(self) -> str:
        return f"ColorHistory({self._colors!r})"
