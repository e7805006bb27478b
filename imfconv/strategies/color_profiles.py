"""
Color Profile Strategies

Each strategy transforms a raw RGB-8 buffer without changing its layout:
- RgbColor: identity, no color reduction
- Grayscale: weighted luminance written back into all three channels

Both sides of the seam keep a stride of 3 bytes per pixel, so every
format handler accepts the output of every color profile.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np

from imfconv.constants import ErrorMessages, ImageConstants
from imfconv.exceptions import InvalidBufferSizeError
from imfconv.raw_image import RawImage
from imfconv.settings import LuminanceWeights

logger = logging.getLogger(__name__)


class ColorProfileStrategy(ABC):
    """
    Abstract base class for color profile strategies.

    Implementations must be pure: the input buffer is never mutated and a
    new RawImage is returned.
    """

    @abstractmethod
    def edit(self, width: int, height: int, buffer: bytes) -> RawImage:
        """
        Apply the color profile to a raw buffer.

        Args:
            width: Image width in pixels
            height: Image height in pixels
            buffer: Row-major RGB-8 pixels

        Returns:
            New RawImage with the same dimensions and stride

        Raises:
            InvalidBufferSizeError: If the buffer does not match the dimensions
        """
        pass

    @abstractmethod
    def get_profile_name(self) -> str:
        """Return the display name of this color profile."""
        pass

    @staticmethod
    def check_buffer(width: int, height: int, buffer: bytes) -> None:
        """Raise InvalidBufferSizeError unless len(buffer) == width*height*stride."""
        stride = ImageConstants.CHANNEL_STRIDE
        size = len(buffer)
        if size % stride != 0 or size != width * height * stride:
            raise InvalidBufferSizeError(
                ErrorMessages.INVALID_BUFFER_SIZE.format(
                    size=size, width=width, height=height, stride=stride
                )
            )


@dataclass(frozen=True)
class RgbColor(ColorProfileStrategy):
    """Full-color profile: pixels pass through unchanged."""

    def edit(self, width: int, height: int, buffer: bytes) -> RawImage:
        self.check_buffer(width, height, buffer)
        return RawImage(width=width, height=height, pixels=bytes(buffer))

    def get_profile_name(self) -> str:
        return "RGB"


@dataclass(frozen=True)
class Grayscale(ColorProfileStrategy):
    """
    Grayscale profile.

    For every pixel computes ``Y = wr*R + wg*G + wb*B`` in float64,
    truncates it to an integer in [0, 255] and writes Y to R, G and B.
    Sums within LUMINANCE_SNAP_EPSILON of an integer are snapped first so
    that gray input maps to itself and the transform is idempotent.
    """

    weights: LuminanceWeights = field(default_factory=LuminanceWeights)

    def edit(self, width: int, height: int, buffer: bytes) -> RawImage:
        self.check_buffer(width, height, buffer)

        stride = ImageConstants.CHANNEL_STRIDE
        source = RawImage(width=width, height=height, pixels=buffer)
        rgb = source.to_array().reshape(-1, stride).astype(np.float64)
        wr, wg, wb = self.weights.as_tuple()

        # Fixed summation order keeps results identical to a per-pixel loop
        luma = rgb[:, 0] * wr + rgb[:, 1] * wg + rgb[:, 2] * wb
        nearest = np.round(luma)
        luma = np.where(
            np.abs(luma - nearest) < ImageConstants.LUMINANCE_SNAP_EPSILON, nearest, luma
        )
        gray = np.clip(np.floor(luma), 0, ImageConstants.MAX_CHANNEL_VALUE).astype(np.uint8)

        expanded = np.repeat(gray[:, np.newaxis], stride, axis=1)
        logger.debug(f"Grayscale applied to {width}x{height} buffer")
        return RawImage.from_array(expanded.reshape(height, width, stride))

    def get_profile_name(self) -> str:
        return "Grayscale"
