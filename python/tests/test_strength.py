"""
Unit tests for the strength estimate.
"""

import pytest

from passforge.utils.strength import estimate_bits, estimate_strength


class TestEstimateBits:
    """Test the entropy estimate."""

    def test_bits_per_class_count(self):
        """Test per-character bits grow with the number of classes."""
        assert estimate_bits(10, 1) == 47
        assert estimate_bits(10, 2) == 50
        assert estimate_bits(10, 3) == 60
        assert estimate_bits(10, 4) == 65
        assert estimate_bits(10, 7) == 65

    def test_halves_round_up(self):
        """Test rounding of half bits."""
        assert estimate_bits(1, 4) == 7
        assert estimate_bits(3, 4) == 20

    def test_degenerate_input(self):
        """Test zero and negative input."""
        assert estimate_bits(0, 4) == 0
        assert estimate_bits(16, 0) == 0
        assert estimate_bits(-5, 2) == 0


class TestEstimateStrength:
    """Test the strength labels."""

    def test_thresholds(self):
        """Test each bucket at its lower threshold."""
        assert estimate_strength(18, 2) == "Very strong (~90 bits)"
        assert estimate_strength(14, 2) == "Strong (~70 bits)"
        assert estimate_strength(10, 2) == "Okay (~50 bits)"
        assert estimate_strength(9, 2) == "Weak (< 45 bits)"

    def test_weak_floor(self):
        """Test weak labels never mention fewer than 40 bits."""
        assert estimate_strength(8, 1) == "Weak (< 40 bits)"
        assert estimate_strength(0, 4) == "Weak (< 40 bits)"
        assert estimate_strength(12, 0) == "Weak (< 40 bits)"

    def test_typical_configurations(self):
        """Test common length and class combinations."""
        assert estimate_strength(16, 4) == "Very strong (~104 bits)"
        assert estimate_strength(12, 4) == "Strong (~78 bits)"
        assert estimate_strength(20, 1) == "Very strong (~94 bits)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
