"""
In-memory raw pixel buffer shared by color profiles and format handlers.
"""

from dataclasses import dataclass

import numpy as np

from imfconv.constants import ImageConstants


@dataclass(frozen=True)
class RawImage:
    """
    Decoded image: row-major RGB-8 pixels.

    ``pixels`` is immutable bytes; transforms return a new RawImage.
    """

    width: int
    height: int
    pixels: bytes

    @property
    def channel_stride(self) -> int:
        return ImageConstants.CHANNEL_STRIDE

    @property
    def expected_size(self) -> int:
        """Byte length implied by width x height x stride."""
        return self.width * self.height * self.channel_stride

    @property
    def is_well_formed(self) -> bool:
        return len(self.pixels) == self.expected_size

    def to_array(self) -> np.ndarray:
        """
        View pixels as an (H, W, 3) uint8 array.

        Returns:
            Read-only NumPy array backed by ``pixels``

        Raises:
            ValueError: If the buffer does not match the dimensions
        """
        array = np.frombuffer(self.pixels, dtype=np.uint8)
        return array.reshape(self.height, self.width, self.channel_stride)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "RawImage":
        """Build a RawImage from an (H, W, 3) uint8 array."""
        height, width = array.shape[:2]
        return cls(width=width, height=height, pixels=np.ascontiguousarray(array).tobytes())
