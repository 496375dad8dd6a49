"""Host-side collaborators."""

from .savers import DirectorySaver, MemorySaver, Saver

__all__ = ["DirectorySaver", "MemorySaver", "Saver"]
