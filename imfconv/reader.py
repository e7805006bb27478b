"""
Source image decoding.

Opens an encoded image with Pillow and returns its pixels as an RGB-8
RawImage. The container is detected from file content, not the extension.
"""

import logging
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from imfconv.constants import ErrorMessages, ImageConstants
from imfconv.exceptions import DecodeError
from imfconv.raw_image import RawImage

logger = logging.getLogger(__name__)


def read_image(source_path: Union[str, Path]) -> RawImage:
    """
    Decode an image file into a raw RGB buffer.

    Only the first frame of multi-frame containers is read.

    Args:
        source_path: Path to the encoded source image

    Returns:
        RawImage with the decoded width, height and RGB pixels

    Raises:
        DecodeError: If the file is missing, unreadable, or not a
            recognized image container
    """
    path = Path(source_path)
    if not path.is_file():
        logger.error(f"Source image not found: {path}")
        raise DecodeError(ErrorMessages.SOURCE_NOT_FOUND.format(path=path))

    try:
        with Image.open(path) as image:
            image.load()
            source_format = image.format
            rgb = image.convert(ImageConstants.DECODE_MODE)
    except (UnidentifiedImageError, SyntaxError, ValueError, EOFError) as e:
        logger.error(f"Failed to decode image {path}: {e}")
        raise DecodeError(
            ErrorMessages.SOURCE_UNRECOGNIZED.format(path=path, error=e), original_error=e
        ) from e
    except OSError as e:
        logger.error(f"Failed to read image {path}: {e}")
        raise DecodeError(
            ErrorMessages.SOURCE_UNREADABLE.format(path=path, error=e), original_error=e
        ) from e

    raw = RawImage(width=rgb.width, height=rgb.height, pixels=rgb.tobytes())
    logger.debug(f"Decoded {source_format} image {path}: {raw.width}x{raw.height}")
    return raw
