"""
Selector enums for imfconv.

Each member maps 1:1 to a strategy object built by StrategyFactory.
"""

from enum import Enum
from pathlib import Path
from typing import Union

from imfconv.constants import ErrorMessages, FormatConstants


class ImageType(str, Enum):
    """Output container formats"""

    JPEG = "jpeg"
    PNG = "png"
    TIFF = "tiff"

    @property
    def is_lossy(self) -> bool:
        """JPEG discards detail; PNG and TIFF are lossless."""
        return self is ImageType.JPEG

    @property
    def extension(self) -> str:
        """Canonical file suffix for this format."""
        return {
            ImageType.JPEG: ".jpg",
            ImageType.PNG: ".png",
            ImageType.TIFF: ".tiff",
        }[self]

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ImageType":
        """
        Infer the image type from a file suffix.

        Args:
            path: Destination path such as ``out/photo.JPG``

        Returns:
            Matching ImageType

        Raises:
            ValueError: If the suffix is not a known image extension
        """
        suffix = Path(path).suffix.lower()
        if suffix not in FormatConstants.SUFFIX_MAP:
            raise ValueError(ErrorMessages.UNKNOWN_SUFFIX.format(path=path))
        return cls(FormatConstants.SUFFIX_MAP[suffix])


class ColorProfile(str, Enum):
    """Color profiles applied before encoding"""

    RGB = "rgb"
    GRAYSCALE = "grayscale"


class ConversionStage(str, Enum):
    """Pipeline stage that produced a failure"""

    DECODE = "decode"
    COLOR = "color"
    ENCODE = "encode"
