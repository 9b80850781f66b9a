"""Tests for StreamingIIRFilter."""

import warnings

import hypothesis
import hypothesis.strategies
import pytest
import scipy.signal
import torch

from torchdsp import (
    InvalidLengthError,
    InvalidParameterError,
    LengthMismatchError,
)
from torchdsp.signal_processing.filter import StreamingIIRFilter
from torchdsp.testing.strategies import (
    filter_coefficients,
    signals,
    split_points,
)


def _filter_in_blocks(streaming_filter, x, cuts):
    bounds = [0] + list(cuts) + [x.shape[0]]
    return torch.cat(
        [
            streaming_filter.apply(x[start:stop])
            for start, stop in zip(bounds[:-1], bounds[1:])
        ]
    )


class TestStreamingIIRFilterBasic:
    """Tests for basic filtering."""

    def test_running_sum(self):
        """b = [1, 0], a = [1, -1] accumulates the input."""
        f = StreamingIIRFilter([1.0, 0.0], [1.0, -1.0])
        x = torch.tensor([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0])
        y = f.apply(x)
        expected = torch.tensor([1.0, 3.0, 6.0, 10.0, 15.0, 21.0, 28.0])
        torch.testing.assert_close(y, expected.to(y.dtype))

    def test_fir_moving_average(self):
        f = StreamingIIRFilter([0.5, 0.5], [1.0])
        y = f.apply(torch.tensor([2.0, 4.0, 6.0, 8.0]))
        torch.testing.assert_close(y, torch.tensor([1.0, 3.0, 5.0, 7.0]))

    def test_pure_gain_has_no_history(self):
        f = StreamingIIRFilter([3.0], [1.0])
        assert f.order == 0
        y = f.apply(torch.tensor([1.0, -2.0]))
        torch.testing.assert_close(y, torch.tensor([3.0, -6.0]))
        assert f.x_history.shape == (0,)
        assert f.y_history.shape == (0,)

    def test_coefficients_zero_padded(self):
        f = StreamingIIRFilter([1.0], [1.0, -0.5, 0.25])
        assert f.order == 2
        torch.testing.assert_close(f.b, torch.tensor([1.0, 0.0, 0.0]))
        torch.testing.assert_close(f.a, torch.tensor([1.0, -0.5, 0.25]))

    def test_integer_coefficients_promote_to_float64(self):
        f = StreamingIIRFilter([1, 0], [1, -1])
        assert f.dtype == torch.float64
        assert f.apply([1, 2, 3]).dtype == torch.float64

    def test_explicit_dtype(self):
        f = StreamingIIRFilter([0.5, 0.5], [1.0], dtype=torch.float32)
        y = f.apply(torch.ones(4, dtype=torch.float64))
        assert y.dtype == torch.float32


class TestStreamingIIRFilterScipyReference:
    """Compare against scipy.signal.lfilter."""

    @pytest.mark.parametrize(
        "design",
        [
            lambda: scipy.signal.butter(4, 0.2),
            lambda: scipy.signal.cheby1(3, 0.5, 0.3),
            lambda: scipy.signal.ellip(2, 0.5, 40, 0.25),
            lambda: ([0.2, 0.3, 0.3, 0.2], [1.0]),
        ],
    )
    def test_matches_lfilter(self, design):
        b_np, a_np = design()
        x = torch.randn(300, dtype=torch.float64)
        y = StreamingIIRFilter(
            torch.tensor(b_np, dtype=torch.float64),
            torch.tensor(a_np, dtype=torch.float64),
        ).apply(x)
        y_scipy = scipy.signal.lfilter(b_np, a_np, x.numpy())
        torch.testing.assert_close(
            y, torch.from_numpy(y_scipy), rtol=1e-10, atol=1e-10
        )


class TestStreamingIIRFilterContinuity:
    """Filtering block by block equals filtering at once."""

    def test_two_blocks(self):
        b_np, a_np = scipy.signal.butter(3, 0.3)
        b = torch.tensor(b_np)
        a = torch.tensor(a_np)
        x = torch.randn(100, dtype=torch.float64)

        whole = StreamingIIRFilter(b, a).apply(x)

        f = StreamingIIRFilter(b, a)
        split = torch.cat([f.apply(x[:37]), f.apply(x[37:])])

        torch.testing.assert_close(split, whole, rtol=1e-10, atol=1e-10)

    def test_blocks_shorter_than_order(self):
        """Blocks of one and two samples on an order-5 filter."""
        b_np, a_np = scipy.signal.butter(5, 0.25)
        b = torch.tensor(b_np)
        a = torch.tensor(a_np)
        x = torch.randn(40, dtype=torch.float64)

        whole = StreamingIIRFilter(b, a).apply(x)

        f = StreamingIIRFilter(b, a)
        cuts = list(range(1, 10)) + list(range(10, 40, 2))
        blocks = _filter_in_blocks(f, x, cuts)

        torch.testing.assert_close(blocks, whole, rtol=1e-10, atol=1e-10)

    def test_history_holds_trailing_samples(self):
        f = StreamingIIRFilter([1.0, 0.0, 0.0], [1.0, -1.0])
        y = f.apply(torch.tensor([1.0, 2.0, 3.0, 4.0]))
        torch.testing.assert_close(f.x_history, torch.tensor([3.0, 4.0]))
        torch.testing.assert_close(f.y_history, y[-2:])

    def test_short_call_shifts_history(self):
        f = StreamingIIRFilter([1.0, 0.0, 0.0, 0.0], [1.0, -1.0])
        f.apply(torch.tensor([1.0, 2.0, 3.0, 4.0]))
        f.apply(torch.tensor([5.0]))
        torch.testing.assert_close(
            f.x_history, torch.tensor([3.0, 4.0, 5.0])
        )
        torch.testing.assert_close(
            f.y_history, torch.tensor([6.0, 10.0, 15.0])
        )

    @hypothesis.settings(deadline=None)
    @hypothesis.given(
        coefficients=filter_coefficients(),
        data=hypothesis.strategies.data(),
    )
    def test_any_split_matches_single_call(self, coefficients, data):
        b, a = coefficients
        x = data.draw(signals(min_length=1, max_length=48))
        cuts = data.draw(split_points(x.shape[0]))

        whole = StreamingIIRFilter(b, a).apply(x)
        blocks = _filter_in_blocks(StreamingIIRFilter(b, a), x, cuts)

        torch.testing.assert_close(blocks, whole, rtol=1e-9, atol=1e-9)


class TestStreamingIIRFilterState:
    """Tests for the idle/running state machine."""

    def test_initially_idle(self):
        f = StreamingIIRFilter([1.0, 0.5], [1.0, -0.5])
        assert not f.is_running
        torch.testing.assert_close(f.x_history, torch.zeros(1))
        torch.testing.assert_close(f.y_history, torch.zeros(1))

    def test_apply_enters_running(self):
        f = StreamingIIRFilter([1.0, 0.5], [1.0, -0.5])
        f.apply(torch.ones(3))
        assert f.is_running

    def test_reset_returns_to_idle(self):
        f = StreamingIIRFilter([1.0, 0.5], [1.0, -0.5])
        f.apply(torch.ones(3))
        f.reset()
        assert not f.is_running
        torch.testing.assert_close(f.x_history, torch.zeros(1))
        torch.testing.assert_close(f.y_history, torch.zeros(1))

    def test_reset_matches_fresh_filter(self):
        b_np, a_np = scipy.signal.butter(4, 0.3)
        b = torch.tensor(b_np)
        a = torch.tensor(a_np)
        s = torch.randn(50, dtype=torch.float64)

        f = StreamingIIRFilter(b, a)
        f.apply(torch.randn(23, dtype=torch.float64))
        f.reset()

        torch.testing.assert_close(
            f.apply(s), StreamingIIRFilter(b, a).apply(s)
        )

    def test_history_properties_are_copies(self):
        f = StreamingIIRFilter([1.0, 0.0], [1.0, -1.0])
        f.apply(torch.tensor([1.0]))
        f.x_history.fill_(100.0)
        torch.testing.assert_close(f.x_history, torch.tensor([1.0]))

    def test_filters_are_independent(self):
        f = StreamingIIRFilter([1.0, 0.0], [1.0, -1.0])
        g = StreamingIIRFilter([1.0, 0.0], [1.0, -1.0])
        f.apply(torch.tensor([5.0]))
        torch.testing.assert_close(
            g.apply(torch.tensor([1.0])), torch.tensor([1.0])
        )


class TestStreamingIIRFilterOut:
    """Tests for the buffer-reuse variant."""

    def test_out_is_filled_and_returned(self):
        f = StreamingIIRFilter([1.0, 0.0], [1.0, -1.0])
        out = torch.empty(3)
        result = f.apply(torch.tensor([1.0, 1.0, 1.0]), out=out)
        assert result is out
        torch.testing.assert_close(out, torch.tensor([1.0, 2.0, 3.0]))

    def test_out_length_mismatch(self):
        f = StreamingIIRFilter([1.0, 0.0], [1.0, -1.0])
        with pytest.raises(LengthMismatchError):
            f.apply(torch.ones(3), out=torch.empty(4))
        assert not f.is_running

    def test_out_aliasing_input(self):
        f = StreamingIIRFilter([1.0, 0.0], [1.0, -1.0])
        x = torch.ones(3)
        with pytest.raises(InvalidParameterError):
            f.apply(x, out=x)


class TestStreamingIIRFilterErrors:
    """Tests for error handling."""

    def test_empty_numerator(self):
        with pytest.raises(InvalidLengthError, match="b must be non-empty"):
            StreamingIIRFilter([], [1.0])

    def test_empty_denominator(self):
        with pytest.raises(InvalidLengthError, match="a must be non-empty"):
            StreamingIIRFilter([1.0], [])

    def test_empty_input_block(self):
        f = StreamingIIRFilter([1.0], [1.0])
        with pytest.raises(InvalidLengthError):
            f.apply(torch.zeros(0))

    def test_unnormalized_denominator_warns(self):
        with pytest.warns(UserWarning, match="a\\[0\\]"):
            StreamingIIRFilter([1.0], [2.0, 0.5])

    def test_normalized_denominator_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            StreamingIIRFilter([1.0], [1.0, 0.5])


class TestStreamingIIRFilterAutograd:
    """Tests for differentiability of a single call."""

    def test_output_tracks_input_gradient(self):
        x = torch.randn(8, dtype=torch.float64, requires_grad=True)
        y = StreamingIIRFilter([0.5, 0.5], [1.0, -0.2]).apply(x)
        assert y.requires_grad
        assert y.grad_fn is not None

    def test_gradcheck_input(self):
        b = torch.tensor([0.5, 0.25, 0.1], dtype=torch.float64)
        a = torch.tensor([1.0, -0.3, 0.1], dtype=torch.float64)
        x = torch.randn(12, dtype=torch.float64, requires_grad=True)

        assert torch.autograd.gradcheck(
            lambda x: StreamingIIRFilter(b, a).apply(x), (x,)
        )

    def test_gradcheck_coefficients(self):
        b = torch.tensor([0.5, 0.25], dtype=torch.float64, requires_grad=True)
        a = torch.tensor([1.0, -0.3], dtype=torch.float64, requires_grad=True)
        x = torch.randn(10, dtype=torch.float64)

        assert torch.autograd.gradcheck(
            lambda b, a: StreamingIIRFilter(b, a).apply(x), (b, a)
        )

    def test_gradcheck_with_history(self):
        """Warm-up samples from a previous call are constants."""
        b = torch.tensor([0.5, 0.25, 0.1], dtype=torch.float64)
        a = torch.tensor([1.0, -0.3, 0.1], dtype=torch.float64)
        warm_up = torch.randn(5, dtype=torch.float64)
        x = torch.randn(6, dtype=torch.float64, requires_grad=True)

        def filter_after_warm_up(x):
            f = StreamingIIRFilter(b, a)
            f.apply(warm_up)
            return f.apply(x)

        assert torch.autograd.gradcheck(filter_after_warm_up, (x,))

    def test_history_is_detached(self):
        f = StreamingIIRFilter([0.5, 0.5], [1.0, -0.2])
        f.apply(torch.randn(4, dtype=torch.float64, requires_grad=True))
        assert not f.x_history.requires_grad
        assert not f.y_history.requires_grad

    def test_order_zero_gradient(self):
        x = torch.randn(5, dtype=torch.float64, requires_grad=True)
        StreamingIIRFilter([3.0], [1.0], dtype=torch.float64).apply(
            x
        ).sum().backward()
        torch.testing.assert_close(
            x.grad, torch.full((5,), 3.0, dtype=torch.float64)
        )


class TestStreamingIIRFilterDevice:
    """Tests for device placement."""

    def test_default_device_is_cpu(self):
        assert StreamingIIRFilter([1.0], [1.0]).device == torch.device("cpu")

    def test_meta_input(self):
        f = StreamingIIRFilter([1.0, 0.0], [1.0, -1.0])
        x = torch.zeros(4, dtype=torch.float64, device="meta")

        y = f.apply(x)

        assert y.device.type == "meta"
        assert y.shape == (4,)
        assert f.device.type == "meta"
        assert f.x_history.device.type == "meta"
        assert f.y_history.device.type == "meta"

    def test_device_argument(self):
        f = StreamingIIRFilter([1.0, 0.0], [1.0, -1.0], device="meta")
        assert f.b.device.type == "meta"
        assert f.x_history.device.type == "meta"

    @pytest.mark.skipif(
        not torch.cuda.is_available(), reason="CUDA not available"
    )
    def test_cuda_matches_cpu(self):
        b_np, a_np = scipy.signal.butter(3, 0.3)
        b = torch.tensor(b_np)
        a = torch.tensor(a_np)
        x = torch.randn(64, dtype=torch.float64)

        f = StreamingIIRFilter(b, a)
        y_cuda = torch.cat(
            [f.apply(x[:20].cuda()), f.apply(x[20:].cuda())]
        )

        assert y_cuda.is_cuda
        torch.testing.assert_close(
            y_cuda.cpu(), StreamingIIRFilter(b, a).apply(x)
        )
