"""
Tests for LuminanceWeights validation
"""

import pytest
from pydantic import ValidationError

from imfconv.settings import LuminanceWeights


class TestLuminanceWeights:
    """Test weight validation"""

    def test_defaults(self):
        """Test defaults are the BT.601 weights"""
        assert LuminanceWeights().as_tuple() == pytest.approx((0.299, 0.587, 0.114))

    def test_custom_weights(self):
        weights = LuminanceWeights(red=0.2126, green=0.7152, blue=0.0722)
        assert weights.green == 0.7152

    def test_sum_must_be_one(self):
        with pytest.raises(ValidationError, match="sum to 1.0"):
            LuminanceWeights(red=0.5, green=0.5, blue=0.5)

    def test_negative_weight(self):
        with pytest.raises(ValidationError):
            LuminanceWeights(red=-0.1, green=0.6, blue=0.5)

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            LuminanceWeights(alpha=0.0)

    def test_frozen(self):
        weights = LuminanceWeights()
        with pytest.raises(ValidationError):
            weights.red = 1.0

    def test_hashable_and_equal(self):
        assert LuminanceWeights() == LuminanceWeights()
        assert hash(LuminanceWeights()) == hash(LuminanceWeights())

    def test_as_tuple_sums_to_one(self):
        """Test weights near the tolerance edge are rescaled to sum to 1.0"""
        weights = LuminanceWeights(red=0.2989995, green=0.587, blue=0.114)
        assert sum(weights.as_tuple()) == pytest.approx(1.0, abs=1e-12)

    def test_model_config(self):
        """Test the model is configured with the v2 ConfigDict"""
        assert LuminanceWeights.model_config["extra"] == "forbid"
        assert LuminanceWeights.model_config["frozen"] is True
