"""
imfconv - raster image format and color profile conversion.

Public API:
- ConversionPipeline: open -> set_image_format -> set_color_profile -> convert
- convert_image: one-call conversion
- ImageType / ColorProfile: selectors
- RawImage / read_image: decoded RGB-8 buffers
"""

from .enums import ColorProfile, ConversionStage, ImageType
from .exceptions import (
    CodecFailureError,
    ColorError,
    DecodeError,
    EncodeError,
    ImfconvError,
    InvalidBufferSizeError,
    IoFailureError,
    UnsupportedDimensionsError,
)
from .pipeline import ConversionPipeline, convert_image
from .raw_image import RawImage
from .reader import read_image
from .settings import LuminanceWeights

__version__ = "0.1.0"

__all__ = [
    "ConversionPipeline",
    "convert_image",
    "ImageType",
    "ColorProfile",
    "ConversionStage",
    "RawImage",
    "read_image",
    "LuminanceWeights",
    # Errors
    "ImfconvError",
    "DecodeError",
    "ColorError",
    "InvalidBufferSizeError",
    "EncodeError",
    "UnsupportedDimensionsError",
    "IoFailureError",
    "CodecFailureError",
]
