"""
Pytest configuration and fixtures for imfconv tests
"""

import numpy as np
import pytest
from PIL import Image

from imfconv.raw_image import RawImage


@pytest.fixture
def rgb_array():
    """Create a small RGB test image with distinct colors"""
    image = np.zeros((6, 8, 3), dtype=np.uint8)
    image[:3, :4] = (255, 0, 0)
    image[:3, 4:] = (0, 255, 0)
    image[3:, :4] = (0, 0, 255)
    image[3:, 4:] = (200, 120, 40)
    return image


@pytest.fixture
def raw_image(rgb_array):
    """RawImage built from rgb_array"""
    return RawImage.from_array(rgb_array)


@pytest.fixture
def red_green_image():
    """2x1 image: one red pixel, one green pixel"""
    return RawImage(width=2, height=1, pixels=bytes([255, 0, 0, 0, 255, 0]))


@pytest.fixture
def source_png(tmp_path, rgb_array):
    """Write rgb_array to a PNG source file"""
    path = tmp_path / "source.png"
    Image.fromarray(rgb_array).save(path, format="PNG")
    return path


@pytest.fixture
def red_green_png(tmp_path, red_green_image):
    """Write the 2x1 red/green image to a PNG source file"""
    path = tmp_path / "red_green.png"
    Image.frombytes("RGB", (2, 1), red_green_image.pixels).save(path, format="PNG")
    return path


@pytest.fixture
def output_dir(tmp_path):
    """Directory for conversion outputs"""
    out = tmp_path / "out"
    out.mkdir()
    return out
