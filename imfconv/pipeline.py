"""
Conversion Pipeline - builder that decodes once, then applies a color
profile and a format handler.

Every ``set_*`` call returns a new pipeline; the receiver is never
modified, so each configuration step is an immutable snapshot.

    pipeline = (
        ConversionPipeline.open("photo.jpg", "photo.png")
        .set_image_format(ImageType.PNG)
        .set_color_profile(ColorProfile.GRAYSCALE)
    )
    pipeline.convert()
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Union

from imfconv.enums import ColorProfile, ImageType
from imfconv.raw_image import RawImage
from imfconv.reader import read_image
from imfconv.settings import LuminanceWeights
from imfconv.strategies import (
    ColorProfileStrategy,
    FormatHandler,
    PngHandler,
    RgbColor,
    StrategyFactory,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ConversionPipeline:
    """Decoded image plus one active color profile and one format handler"""

    image: RawImage
    dest_path: Path
    color: ColorProfileStrategy = field(default_factory=RgbColor)
    handler: FormatHandler = field(default_factory=PngHandler)

    @classmethod
    def open(cls, source_path: PathLike, dest_path: PathLike) -> "ConversionPipeline":
        """
        Decode source_path and create a pipeline targeting dest_path.

        Defaults to the RGB profile and PNG output.

        Args:
            source_path: Encoded source image
            dest_path: File to create or overwrite on convert()

        Returns:
            New ConversionPipeline

        Raises:
            DecodeError: If the source cannot be decoded
        """
        image = read_image(source_path)
        pipeline = cls(image=image, dest_path=Path(dest_path))
        logger.info(
            f"Pipeline created for {source_path} ({image.width}x{image.height}) -> {dest_path}"
        )
        return pipeline

    def set_image_format(self, image_type: Union[ImageType, str]) -> "ConversionPipeline":
        """Return a copy using the format handler for image_type."""
        return replace(self, handler=StrategyFactory.create_format_handler(image_type))

    def set_color_profile(
        self,
        color_profile: Union[ColorProfile, str],
        weights: Optional[LuminanceWeights] = None,
    ) -> "ConversionPipeline":
        """
        Return a copy using the strategy for color_profile.

        Raises:
            ValueError: If color_profile is an unrecognized name, or weights
                are given with the RGB profile
        """
        return replace(self, color=StrategyFactory.create_color_strategy(color_profile, weights))

    def convert(self) -> None:
        """
        Apply the color profile, then encode and write the destination.

        The destination is written once, and only if both stages succeed.
        Failures carry ``error.stage`` naming the stage that raised.

        Raises:
            ColorError: If the color profile rejects the buffer
            EncodeError: If encoding or writing the destination fails
        """
        image = self.image
        profiled = self.color.edit(image.width, image.height, image.pixels)
        self.handler.exec(profiled.width, profiled.height, profiled.pixels, self.dest_path)

        logger.info(
            f"Converted {image.width}x{image.height} image to "
            f"{self.handler.get_format_name()}/{self.color.get_profile_name()}: {self.dest_path}"
        )


def convert_image(
    source_path: PathLike,
    dest_path: PathLike,
    image_type: Optional[Union[ImageType, str]] = None,
    color_profile: Union[ColorProfile, str] = ColorProfile.RGB,
) -> Path:
    """
    Convert one image file in a single call.

    Args:
        source_path: Encoded source image
        dest_path: Output file
        image_type: Output format; inferred from dest_path suffix when None
        color_profile: Color profile to apply

    Returns:
        Destination path

    Raises:
        ValueError: If image_type is None and dest_path has no known suffix
        ImfconvError: If any pipeline stage fails
    """
    if image_type is None:
        image_type = ImageType.from_path(dest_path)

    pipeline = (
        ConversionPipeline.open(source_path, dest_path)
        .set_image_format(image_type)
        .set_color_profile(color_profile)
    )
    pipeline.convert()
    return pipeline.dest_path
