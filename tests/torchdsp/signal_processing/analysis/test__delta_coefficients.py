"""Tests for delta_coefficients."""

import hypothesis
import hypothesis.strategies
import pytest
import torch

from torchdsp import InvalidLengthError, InvalidParameterError
from torchdsp.signal_processing.analysis import delta_coefficients
from torchdsp.testing.strategies import signals


def _reference_delta(values, half_width):
    n = len(values)
    normalization = 2 * sum(k * k for k in range(1, half_width + 1))
    return [
        sum(
            k * values[min(max(i + k, 0), n - 1)]
            for k in range(-half_width, half_width + 1)
        )
        / normalization
        for i in range(n)
    ]


class TestDeltaCoefficients:
    def test_ramp(self):
        torch.testing.assert_close(
            delta_coefficients(torch.arange(6.0), 1),
            torch.tensor([0.5, 1.0, 1.0, 1.0, 1.0, 0.5]),
        )

    def test_ramp_interior_slope_for_wider_window(self):
        x = 2.0 * torch.arange(20, dtype=torch.float64)
        result = delta_coefficients(x, 3)
        torch.testing.assert_close(
            result[3:-3], torch.full((14,), 2.0, dtype=torch.float64)
        )

    def test_constant_signal_has_zero_delta(self):
        torch.testing.assert_close(
            delta_coefficients(torch.full((8,), 4.0), 2), torch.zeros(8)
        )

    def test_single_sample(self):
        torch.testing.assert_close(
            delta_coefficients(torch.tensor([3.0]), 2), torch.tensor([0.0])
        )

    @hypothesis.given(
        x=signals(max_length=32),
        half_width=hypothesis.strategies.integers(1, 4),
    )
    def test_matches_reference(self, x, half_width):
        expected = torch.tensor(
            _reference_delta(x.tolist(), half_width), dtype=torch.float64
        )
        torch.testing.assert_close(delta_coefficients(x, half_width), expected)

    @pytest.mark.parametrize("half_width", [0, -1])
    def test_invalid_half_width(self, half_width):
        with pytest.raises(InvalidParameterError, match="half_width"):
            delta_coefficients(torch.zeros(5), half_width)

    def test_empty_input(self):
        with pytest.raises(InvalidLengthError):
            delta_coefficients(torch.zeros(0), 1)
