import numpy as np
import pytest

from imgcatr.errors import TerminalSizeUnavailable
from imgcatr.geometry import Dimensions


class FakeTerminal:
    """Terminal of a fixed size, or none at all when size is None."""

    def __init__(self, size=None):
        self.size = size

    def query(self):
        if self.size is None:
            raise TerminalSizeUnavailable("No terminal")
        return Dimensions(*self.size)


class FakeDecoder:
    """Hands out the same in-memory image for every path, counting calls."""

    def __init__(self, pixels):
        self.pixels = pixels
        self.calls = []

    def decode(self, path):
        self.calls.append(path)
        return self.pixels


def _make_pixels(width, height, colour=(0, 0, 0), alpha=255):
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:, :, :3] = colour
    pixels[:, :, 3] = alpha
    pixels.flags.writeable = False
    return pixels


@pytest.fixture
def make_pixels():
    return _make_pixels


@pytest.fixture
def quad_pixels():
    """2x2 image: red, green on top; blue, white below."""
    pixels = np.array(
        [
            [[255, 0, 0, 255], [0, 255, 0, 255]],
            [[0, 0, 255, 255], [255, 255, 255, 255]],
        ],
        dtype=np.uint8,
    )
    pixels.flags.writeable = False
    return pixels


@pytest.fixture
def fake_terminal():
    return FakeTerminal


@pytest.fixture
def fake_decoder():
    return FakeDecoder
