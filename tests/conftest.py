import numpy as np
import pytest
from PIL import Image


def solid_image(width, height, colour=(128, 128, 128)):
    return Image.new("RGB", (width, height), colour)


def gradient_image(width, height):
    """Horizontal black-to-white ramp with a red tint in the top half."""
    xs = np.linspace(0, 255, width, dtype=np.float64)
    arr = np.repeat(np.repeat(xs[None, :, None], height, axis=0), 3, axis=2).astype(np.uint8)
    arr[: height // 2, :, 0] = 255
    return Image.fromarray(arr, "RGB")


@pytest.fixture
def gradient():
    return gradient_image(120, 80)


@pytest.fixture
def grey_square():
    return solid_image(100, 100)
