"""
Container encoders.

Thin wrappers over OpenCV's in-memory encoder. Each function takes an
RGB-8 buffer and returns the complete encoded file as bytes; nothing is
written to disk here.
"""

import logging

import cv2
import numpy as np

from imfconv.constants import FormatConstants, ImageConstants
from imfconv.raw_image import RawImage

logger = logging.getLogger(__name__)


def _to_bgr(width: int, height: int, pixels: bytes) -> np.ndarray:
    """
    Reshape an RGB buffer into an OpenCV BGR array.

    Raises:
        ValueError: If the buffer length does not match the dimensions
    """
    expected = width * height * ImageConstants.CHANNEL_STRIDE
    if len(pixels) != expected:
        raise ValueError(f"Expected {expected} bytes for {width}x{height}, got {len(pixels)}")

    rgb = RawImage(width=width, height=height, pixels=pixels).to_array()
    return cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)


def _encode(ext: str, width: int, height: int, pixels: bytes) -> bytes:
    ok, buffer = cv2.imencode(ext, _to_bgr(width, height, pixels))
    if not ok:
        raise ValueError(f"cv2.imencode returned failure for {ext}")
    return buffer.tobytes()


def encode_jpeg(width: int, height: int, pixels: bytes) -> bytes:
    """Encode RGB pixels as baseline JPEG (lossy, OpenCV default quality)."""
    return _encode(FormatConstants.JPEG_ENCODE_EXT, width, height, pixels)


def encode_png(width: int, height: int, pixels: bytes) -> bytes:
    """Encode RGB pixels as 8-bit PNG."""
    return _encode(FormatConstants.PNG_ENCODE_EXT, width, height, pixels)


def encode_tiff(width: int, height: int, pixels: bytes) -> bytes:
    """Encode RGB pixels as 8-bit TIFF."""
    return _encode(FormatConstants.TIFF_ENCODE_EXT, width, height, pixels)
