import numpy as np
import pytest

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def _solid(width, height, colour, channels=3):
    pixels = np.zeros((height, width, channels), dtype=np.uint8)
    pixels[:, :, :3] = colour
    return pixels


@pytest.fixture
def solid():
    """Factory for a uniform (height, width, channels) uint8 pixel array."""
    return _solid


@pytest.fixture
def checkerboard():
    """2x2 image: black, white / white, black."""
    return np.array([[BLACK, WHITE], [WHITE, BLACK]], dtype=np.uint8)
