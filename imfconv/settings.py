"""
Validated tuning parameters for imfconv.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from imfconv.constants import ImageConstants


class LuminanceWeights(BaseModel):
    """
    Per-channel weights used to collapse RGB into luminance.

    Weights must be non-negative and sum to 1.0 so that a gray pixel
    keeps its value after the transform.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    red: float = Field(default=ImageConstants.DEFAULT_LUMINANCE_WEIGHTS[0], ge=0.0, le=1.0)
    green: float = Field(default=ImageConstants.DEFAULT_LUMINANCE_WEIGHTS[1], ge=0.0, le=1.0)
    blue: float = Field(default=ImageConstants.DEFAULT_LUMINANCE_WEIGHTS[2], ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_sum(self):
        """Validate weights sum to 1.0."""
        total = self.red + self.green + self.blue
        if abs(total - 1.0) > ImageConstants.WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"Luminance weights must sum to 1.0, got {total}")
        return self

    def as_tuple(self) -> Tuple[float, float, float]:
        """
        Return weights in (R, G, B) order, rescaled to sum to exactly 1.0.

        The validator accepts sums within WEIGHT_SUM_TOLERANCE of 1.0;
        rescaling keeps gray pixels as fixed points for every accepted set.
        """
        total = self.red + self.green + self.blue
        return (self.red / total, self.green / total, self.blue / total)
