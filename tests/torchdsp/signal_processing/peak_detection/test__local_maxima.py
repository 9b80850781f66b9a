"""Tests for plateau-aware local maxima."""

import hypothesis
import hypothesis.strategies
import pytest
import scipy.signal
import torch

from torchdsp.signal_processing.peak_detection import local_maxima
from torchdsp.testing.strategies import signals


class TestLocalMaxima:
    def test_isolated_peaks(self):
        x = torch.tensor([0.0, 2.0, 1.0, 3.0, 0.0])
        torch.testing.assert_close(local_maxima(x), torch.tensor([1, 3]))

    def test_plateau_reports_first_index(self):
        x = torch.tensor([0.0, 2.0, 2.0, 2.0, 1.0, 3.0, 3.0])
        torch.testing.assert_close(local_maxima(x), torch.tensor([1]))

    def test_shoulder_rejected(self):
        """A plateau followed by a rise is not a peak."""
        x = torch.tensor([0.0, 1.0, 1.0, 2.0, 0.0])
        torch.testing.assert_close(local_maxima(x), torch.tensor([3]))

    def test_plateau_at_start_rejected(self):
        x = torch.tensor([2.0, 2.0, 1.0, 3.0, 0.0])
        torch.testing.assert_close(local_maxima(x), torch.tensor([3]))

    def test_endpoints_never_reported(self):
        x = torch.tensor([5.0, 0.0, 1.0, 0.0, 5.0])
        torch.testing.assert_close(local_maxima(x), torch.tensor([2]))

    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_short_signal(self, n):
        result = local_maxima(torch.ones(n))
        assert result.shape == (0,)
        assert result.dtype == torch.int64

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_scipy_without_plateaus(self, seed):
        generator = torch.Generator().manual_seed(seed)
        x = torch.randn(200, generator=generator, dtype=torch.float64)
        expected, _ = scipy.signal.find_peaks(x.numpy())
        torch.testing.assert_close(
            local_maxima(x), torch.from_numpy(expected).to(torch.int64)
        )

    @hypothesis.given(
        x=signals(
            elements=hypothesis.strategies.integers(-3, 3).map(float),
            max_length=32,
        )
    )
    def test_every_maximum_rises_then_falls(self, x):
        """Each reported index starts a plateau bounded by lower samples."""
        values = x.tolist()
        peaks = local_maxima(x).tolist()

        assert peaks == sorted(set(peaks))

        for peak in peaks:
            assert values[peak - 1] < values[peak]
            j = peak
            while values[j] == values[peak]:
                j += 1
            assert values[j] < values[peak]
