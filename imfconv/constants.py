"""
Constants and configuration values for imfconv.
Centralizes all magic numbers and message templates.
"""


# Image Constants
class ImageConstants:
    """Constants related to the raw pixel buffer layout."""

    # Decoded buffers are always RGB, 8 bits per channel
    DECODE_MODE = "RGB"
    CHANNEL_STRIDE = 3
    MAX_CHANNEL_VALUE = 255

    # ITU-R BT.601 luma weights (R, G, B)
    DEFAULT_LUMINANCE_WEIGHTS = (0.299, 0.587, 0.114)
    WEIGHT_SUM_TOLERANCE = 1e-6

    # Float sums this close to an integer are snapped before truncation
    LUMINANCE_SNAP_EPSILON = 1e-9


# Format Constants
class FormatConstants:
    """Constants related to output containers."""

    # Extensions passed to cv2.imencode
    JPEG_ENCODE_EXT = ".jpg"
    PNG_ENCODE_EXT = ".png"
    TIFF_ENCODE_EXT = ".tiff"

    # Destination suffixes recognised when inferring the output type
    SUFFIX_MAP = {
        ".jpg": "jpeg",
        ".jpeg": "jpeg",
        ".png": "png",
        ".tif": "tiff",
        ".tiff": "tiff",
    }

    TEMP_FILE_PREFIX = ".imfconv-"
    TEMP_FILE_SUFFIX = ".part"


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    # Decode errors
    SOURCE_NOT_FOUND = "Source image {path} not found"
    SOURCE_UNREADABLE = "Failed to read source image {path}: {error}"
    SOURCE_UNRECOGNIZED = "Unrecognized or corrupt image {path}: {error}"

    # Color errors
    INVALID_BUFFER_SIZE = (
        "Buffer of {size} bytes does not match {width}x{height} with stride {stride}"
    )

    # Encode errors
    UNSUPPORTED_DIMENSIONS = "Unsupported dimensions: {width}x{height}"
    CODEC_REJECTED = "{format} encoder rejected the buffer: {error}"
    DESTINATION_UNWRITABLE = "Cannot write destination {path}: {error}"

    # Selector errors
    UNKNOWN_SELECTOR = "Unknown {kind}: {value}"
    UNKNOWN_SUFFIX = "Cannot infer image type from suffix of {path}"
