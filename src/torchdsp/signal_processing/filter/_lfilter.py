"""One-shot IIR/FIR filtering."""

from __future__ import annotations

from torch import Tensor

from torchdsp._signal import SignalLike, as_signal
from torchdsp.signal_processing.filter._streaming_iir_filter import (
    StreamingIIRFilter,
)


def lfilter(b: SignalLike, a: SignalLike, x: SignalLike) -> Tensor:
    r"""
    Filter a complete signal with zero initial conditions.

    Equivalent to ``StreamingIIRFilter(b, a).apply(x)``, and to
    ``scipy.signal.lfilter(b, a, x)`` when ``a[0] == 1``.

    Parameters
    ----------
    b : Tensor
        Numerator coefficients, shape (M,).
    a : Tensor
        Denominator coefficients, shape (N,). ``a[0]`` is not divided out.
    x : Tensor
        Input signal, shape (n,).

    Returns
    -------
    y : Tensor
        Filtered signal, shape (n,), on the device of ``x``. An empty ``x``
        gives an empty ``y``.

    Notes
    -----
    Fully differentiable with respect to ``b``, ``a`` and ``x``.

    Examples
    --------
    >>> b = torch.tensor([0.25, 0.5, 0.25])
    >>> a = torch.tensor([1.0])
    >>> lfilter(b, a, torch.tensor([0.0, 4.0, 0.0, 0.0]))
    tensor([0., 1., 2., 1.])
    """
    streaming_filter = StreamingIIRFilter(b, a)

    x = as_signal(x, "x", dtype=streaming_filter.dtype)

    if x.shape[0] == 0:
        return x.clone()

    return streaming_filter.apply(x)
