"""
Format Handler Strategies

Each handler serializes an RGB-8 buffer into one container and writes it:
- JpegHandler: JPEG (lossy)
- PngHandler: PNG (lossless)
- TiffHandler: TIFF (lossless)

The file is encoded completely in memory and then moved into place in a
single rename, so a failure never leaves a partial destination file.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, ClassVar, Union

from imfconv import codecs
from imfconv.constants import ErrorMessages, ImageConstants
from imfconv.exceptions import CodecFailureError, IoFailureError, UnsupportedDimensionsError
from imfconv.utils.file_writer import write_atomically

logger = logging.getLogger(__name__)


class FormatHandler(ABC):
    """
    Abstract base class for format handlers.

    Subclasses only choose the encoder; validation, error mapping and the
    atomic write are shared.
    """

    lossy: ClassVar[bool] = False

    @abstractmethod
    def get_encoder(self) -> Callable[[int, int, bytes], bytes]:
        """Return the encode function for this container."""
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Return the display name of this format."""
        pass

    def exec(self, width: int, height: int, buffer: bytes, dest_path: Union[str, Path]) -> None:
        """
        Encode the buffer and write it to dest_path.

        Args:
            width: Image width in pixels
            height: Image height in pixels
            buffer: Row-major RGB-8 pixels
            dest_path: File to create or overwrite

        Raises:
            UnsupportedDimensionsError: If width or height is zero
            CodecFailureError: If the encoder rejects the buffer
            IoFailureError: If the destination cannot be written
        """
        if width <= 0 or height <= 0:
            raise UnsupportedDimensionsError(
                ErrorMessages.UNSUPPORTED_DIMENSIONS.format(width=width, height=height)
            )

        name = self.get_format_name()
        expected = width * height * ImageConstants.CHANNEL_STRIDE
        if len(buffer) != expected:
            raise CodecFailureError(
                ErrorMessages.CODEC_REJECTED.format(
                    format=name, error=f"expected {expected} bytes, got {len(buffer)}"
                )
            )

        try:
            encoded = self.get_encoder()(width, height, buffer)
        except Exception as e:
            logger.error(f"{name} encoding failed: {e}")
            raise CodecFailureError(
                ErrorMessages.CODEC_REJECTED.format(format=name, error=e), original_error=e
            ) from e

        try:
            write_atomically(dest_path, encoded)
        except OSError as e:
            logger.error(f"Failed to write {dest_path}: {e}")
            raise IoFailureError(
                ErrorMessages.DESTINATION_UNWRITABLE.format(path=dest_path, error=e),
                original_error=e,
            ) from e

        logger.debug(f"{name} written to {dest_path} ({len(encoded)} bytes)")


@dataclass(frozen=True)
class JpegHandler(FormatHandler):
    """JPEG output. Lossy; quality is the encoder default."""

    lossy: ClassVar[bool] = True

    def get_encoder(self) -> Callable[[int, int, bytes], bytes]:
        return codecs.encode_jpeg

    def get_format_name(self) -> str:
        return "JPEG"


@dataclass(frozen=True)
class PngHandler(FormatHandler):
    """PNG output. Lossless."""

    def get_encoder(self) -> Callable[[int, int, bytes], bytes]:
        return codecs.encode_png

    def get_format_name(self) -> str:
        return "PNG"


@dataclass(frozen=True)
class TiffHandler(FormatHandler):
    """TIFF output. Lossless."""

    def get_encoder(self) -> Callable[[int, int, bytes], bytes]:
        return codecs.encode_tiff

    def get_format_name(self) -> str:
        return "TIFF"
