"""
Exception hierarchy for imfconv.

Every failure is raised at the stage that detects it and carries that
stage as ``error.stage``:

- DecodeError: bad or missing source file, unrecognized container
- ColorError: buffer/size mismatch during a color profile transform
- EncodeError: unsupported dimensions, I/O failure, codec rejection
"""

from typing import Optional

from imfconv.enums import ConversionStage


class ImfconvError(Exception):
    """Base class for all conversion failures"""

    stage: Optional[ConversionStage] = None

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class DecodeError(ImfconvError):
    """Source image could not be read or decoded"""

    stage = ConversionStage.DECODE


class ColorError(ImfconvError):
    """Color profile transform failed"""

    stage = ConversionStage.COLOR


class InvalidBufferSizeError(ColorError):
    """Buffer length does not match width x height x channel stride"""


class EncodeError(ImfconvError):
    """Format handler failed to produce the destination file"""

    stage = ConversionStage.ENCODE


class UnsupportedDimensionsError(EncodeError):
    """Width or height is zero"""


class IoFailureError(EncodeError):
    """Destination path could not be created or written"""


class CodecFailureError(EncodeError):
    """Underlying encoder rejected the buffer"""
