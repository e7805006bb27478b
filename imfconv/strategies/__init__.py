"""
imfconv - Conversion Strategies

Two independent strategy axes:
- ColorProfileStrategy: transforms the raw RGB-8 buffer
- FormatHandler: serializes the buffer into a container file
- StrategyFactory: resolves selector enums into strategy objects
"""

from .color_profiles import ColorProfileStrategy, Grayscale, RgbColor
from .factory import StrategyFactory
from .formats import FormatHandler, JpegHandler, PngHandler, TiffHandler

__all__ = [
    # Color Profile Strategies
    "ColorProfileStrategy",
    "RgbColor",
    "Grayscale",
    # Format Handlers
    "FormatHandler",
    "JpegHandler",
    "PngHandler",
    "TiffHandler",
    # Factory
    "StrategyFactory",
]
