"""Shared test fixtures."""

import io

import numpy as np
import pytest
from PIL import Image

from pixelart.config import EditorConfig
from pixelart.editor import PixelEditor
from pixelart.host.savers import MemorySaver


@pytest.fixture
def saver():
    """In-memory save collaborator."""
    return MemorySaver()


@pytest.fixture
def editor(saver):
    """4x4 editor writing exports to memory."""
    return PixelEditor(EditorConfig(), saver=saver, width=4, height=4)


@pytest.fixture
def config_file(tmp_path):
    """Path for a temp config file."""
    return tmp_path / "pixelart" / "config.json"


@pytest.fixture
def decode_png():
    """Decode PNG bytes into an (h, w, 4) uint8 array."""
    def _decode(data: bytes) -> np.ndarray:
        with Image.open(io.BytesIO(data)) as image:
            return np.asarray(image.convert("RGBA"))
    return _decode
