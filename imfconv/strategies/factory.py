"""
Strategy Factory

Maps selector enums to strategy objects. Each ImageType has exactly one
FormatHandler and each ColorProfile exactly one ColorProfileStrategy, so
any format can be combined with any profile.
"""

import logging
from typing import Optional, Union

from imfconv.enums import ColorProfile, ImageType
from imfconv.settings import LuminanceWeights
from imfconv.utils.enum_converter import parse_enum

from .color_profiles import ColorProfileStrategy, Grayscale, RgbColor
from .formats import FormatHandler, JpegHandler, PngHandler, TiffHandler

logger = logging.getLogger(__name__)


class StrategyFactory:
    """Factory for creating color profile strategies and format handlers."""

    @staticmethod
    def create_format_handler(image_type: Union[ImageType, str]) -> FormatHandler:
        """
        Create the format handler for an image type.

        Args:
            image_type: ImageType member or its name ("png", "JPEG", ...)

        Returns:
            FormatHandler instance

        Raises:
            ValueError: If image_type is not recognized
        """
        image_type = parse_enum(image_type, ImageType)
        if image_type == ImageType.JPEG:
            handler = JpegHandler()
        elif image_type == ImageType.PNG:
            handler = PngHandler()
        elif image_type == ImageType.TIFF:
            handler = TiffHandler()
        else:
            raise ValueError(f"Unknown image type: {image_type}")

        logger.debug(f"Format handler: {handler.get_format_name()}")
        return handler

    @staticmethod
    def create_color_strategy(
        color_profile: Union[ColorProfile, str],
        weights: Optional[LuminanceWeights] = None,
    ) -> ColorProfileStrategy:
        """
        Create the color profile strategy for a profile selector.

        Args:
            color_profile: ColorProfile member or its name ("rgb", "GRAYSCALE")
            weights: Luminance weights for GRAYSCALE (defaults to BT.601)

        Returns:
            ColorProfileStrategy instance

        Raises:
            ValueError: If color_profile is not recognized, or weights are
                given for a profile that does not use them
        """
        color_profile = parse_enum(color_profile, ColorProfile)
        if color_profile == ColorProfile.RGB:
            if weights is not None:
                raise ValueError("Luminance weights only apply to the GRAYSCALE profile")
            strategy = RgbColor()
        elif color_profile == ColorProfile.GRAYSCALE:
            strategy = Grayscale(weights) if weights is not None else Grayscale()
        else:
            raise ValueError(f"Unknown color profile: {color_profile}")

        logger.debug(f"Color profile: {strategy.get_profile_name()}")
        return strategy
