"""
Tests for deriving oscillator partials from a sequence.

Run with: pytest tests/test_partials.py -v
"""

import math

import numpy as np
import pytest

from harmonator.core.partials import MAX_PARTIALS, MIN_PARTIALS, PartialSet, synthesize_partials
from harmonator.core.sequence import generate_sequence


class TestSynthesizePartials:

    def test_example_two_mod_nine(self):
        partials = synthesize_partials((2, 4, 8, 7, 5, 1))
        assert len(partials) == 6
        np.testing.assert_allclose(
            partials.amplitude, [1.0, 0.5556, 0.3846, 0.2941, 0.2381, 0.2], atol=1e-4
        )

    def test_formulas(self):
        partials = synthesize_partials((2, 4, 8, 7, 5, 1))
        assert partials.frequency[0] == pytest.approx(0.5 + 0.12 * 3)
        assert partials.angular_velocity[0] == pytest.approx(0.6 + 0.07 * 5)
        assert partials.phase[2] == pytest.approx(8 * math.pi / 180)

    def test_deterministic(self):
        seq = generate_sequence(3, 1009)
        assert synthesize_partials(seq) == synthesize_partials(seq)

    def test_amplitude_strictly_decreasing(self):
        partials = synthesize_partials(generate_sequence(3, 1009))
        assert np.all(np.diff(partials.amplitude) < 0)

    def test_capped(self):
        partials = synthesize_partials(generate_sequence(3, 1009))
        assert len(partials) == MAX_PARTIALS
        assert len(synthesize_partials(generate_sequence(3, 1009), max_partials=10)) == 10

    def test_short_sequence_padded_to_minimum(self):
        """A single-term orbit still yields three partials."""
        partials = synthesize_partials((1,))
        assert len(partials) == MIN_PARTIALS
        assert np.all(partials.frequency == partials.frequency[0])
        assert np.all(np.diff(partials.amplitude) < 0)

    def test_ranges(self):
        partials = synthesize_partials(generate_sequence(7, 2**61 - 1, max_length=200))
        assert np.all((partials.frequency >= 0.62 - 1e-9) & (partials.frequency <= 2.54 + 1e-9))
        assert np.all((partials.angular_velocity >= 0.81 - 1e-9) & (partials.angular_velocity <= 2.77 + 1e-9))
        assert np.all((partials.phase >= 0) & (partials.phase < 2 * math.pi))

    def test_large_u64_values(self):
        partials = synthesize_partials((2**64 - 1,))
        assert partials.frequency[0] == pytest.approx(0.5 + 0.12 * ((2**64 - 1) % 17 + 1))

    def test_empty_sequence(self):
        assert len(synthesize_partials(())) == 0
        assert synthesize_partials(()) == PartialSet.empty()


class TestPartialSetImmutability:

    def test_arrays_read_only(self):
        partials = synthesize_partials((2, 4, 8))
        with pytest.raises(ValueError):
            partials.amplitude[0] = 5.0

    def test_fields_frozen(self):
        partials = synthesize_partials((2, 4, 8))
        with pytest.raises(AttributeError):
            partials.amplitude = np.zeros(3)
