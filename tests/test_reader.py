"""
Tests for source image decoding
"""

import numpy as np
import pytest
from PIL import Image

from imfconv.enums import ConversionStage
from imfconv.exceptions import DecodeError
from imfconv.reader import read_image


class TestReadImage:
    """Test read_image decoding"""

    def test_read_png(self, source_png, rgb_array):
        """Test decoding a PNG returns dimensions and RGB pixels"""
        image = read_image(source_png)

        assert image.width == 8
        assert image.height == 6
        assert image.pixels == rgb_array.tobytes()

    def test_accepts_string_path(self, source_png):
        """Test str paths are accepted"""
        image = read_image(str(source_png))
        assert image.is_well_formed

    def test_format_detected_from_content(self, tmp_path, rgb_array):
        """Test a PNG with a misleading extension is still decoded"""
        path = tmp_path / "actually_png.jpg"
        Image.fromarray(rgb_array).save(path, format="PNG")

        image = read_image(path)
        assert image.pixels == rgb_array.tobytes()

    def test_grayscale_source_expanded_to_rgb(self, tmp_path):
        """Test single-channel sources decode to a 3-byte stride"""
        gray = np.array([[10, 20], [30, 40]], dtype=np.uint8)
        path = tmp_path / "gray.png"
        Image.fromarray(gray).save(path)

        image = read_image(path)
        assert image.is_well_formed
        assert image.pixels[:6] == bytes([10, 10, 10, 20, 20, 20])

    def test_rgba_source_drops_alpha(self, tmp_path):
        """Test RGBA sources decode to RGB"""
        rgba = np.full((2, 3, 4), 128, dtype=np.uint8)
        path = tmp_path / "rgba.png"
        Image.fromarray(rgba).save(path)

        image = read_image(path)
        assert len(image.pixels) == 2 * 3 * 3

    def test_missing_file(self, tmp_path):
        """Test missing source raises DecodeError"""
        with pytest.raises(DecodeError) as exc_info:
            read_image(tmp_path / "missing.png")

        assert exc_info.value.stage == ConversionStage.DECODE

    def test_directory_is_not_an_image(self, tmp_path):
        """Test a directory path raises DecodeError"""
        with pytest.raises(DecodeError):
            read_image(tmp_path)

    def test_unrecognized_content(self, tmp_path):
        """Test non-image bytes raise DecodeError"""
        path = tmp_path / "notes.png"
        path.write_bytes(b"this is not an image")

        with pytest.raises(DecodeError) as exc_info:
            read_image(path)

        assert exc_info.value.original_error is not None

    def test_truncated_file(self, source_png, tmp_path):
        """Test a truncated PNG raises DecodeError"""
        data = source_png.read_bytes()
        path = tmp_path / "truncated.png"
        path.write_bytes(data[: len(data) // 2])

        with pytest.raises(DecodeError):
            read_image(path)
