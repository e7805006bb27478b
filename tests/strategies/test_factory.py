"""
Tests for StrategyFactory
"""

import pytest

from imfconv.enums import ColorProfile, ImageType
from imfconv.settings import LuminanceWeights
from imfconv.strategies import (
    Grayscale,
    JpegHandler,
    PngHandler,
    RgbColor,
    StrategyFactory,
    TiffHandler,
)


class TestStrategyFactory:
    """Test selector to strategy resolution"""

    @pytest.mark.parametrize(
        "image_type,expected",
        [
            (ImageType.JPEG, JpegHandler),
            (ImageType.PNG, PngHandler),
            (ImageType.TIFF, TiffHandler),
            ("jpeg", JpegHandler),
            ("PNG", PngHandler),
            ("Tiff", TiffHandler),
        ],
    )
    def test_create_format_handler(self, image_type, expected):
        """Test every image type maps to its handler"""
        assert type(StrategyFactory.create_format_handler(image_type)) is expected

    @pytest.mark.parametrize(
        "color_profile,expected",
        [
            (ColorProfile.RGB, RgbColor),
            (ColorProfile.GRAYSCALE, Grayscale),
            ("rgb", RgbColor),
            ("GRAYSCALE", Grayscale),
        ],
    )
    def test_create_color_strategy(self, color_profile, expected):
        """Test every color profile maps to its strategy"""
        assert type(StrategyFactory.create_color_strategy(color_profile)) is expected

    def test_grayscale_weights_forwarded(self):
        """Test custom weights reach the grayscale strategy"""
        weights = LuminanceWeights(red=0.5, green=0.5, blue=0.0)
        strategy = StrategyFactory.create_color_strategy(ColorProfile.GRAYSCALE, weights)
        assert strategy.weights == weights

    def test_unknown_image_type(self):
        """Test unknown formats raise ValueError"""
        with pytest.raises(ValueError, match="ImageType"):
            StrategyFactory.create_format_handler("webp")

    def test_unknown_color_profile(self):
        """Test unknown profiles raise ValueError"""
        with pytest.raises(ValueError, match="ColorProfile"):
            StrategyFactory.create_color_strategy("sepia")

    def test_non_string_selector(self):
        """Test non-string selectors raise ValueError"""
        with pytest.raises(ValueError):
            StrategyFactory.create_format_handler(3)

    def test_weights_rejected_for_rgb(self):
        """Test luminance weights cannot be combined with the RGB profile"""
        with pytest.raises(ValueError, match="GRAYSCALE"):
            StrategyFactory.create_color_strategy(ColorProfile.RGB, LuminanceWeights())
