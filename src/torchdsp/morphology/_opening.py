"""Mathematical morphology opening operation."""

from typing import Optional

import torch
from torch import Tensor

from torchdsp._signal import SignalLike, as_signal, prepare_out, write_out
from torchdsp.morphology._dilation import dilation
from torchdsp.morphology._erosion import erosion
from torchdsp.morphology._structuring_window import structuring_window_reach


def replicate_pad(x: Tensor, width: int) -> Tensor:
    """Pad ``x`` with ``width`` copies of its first and last samples."""
    return torch.cat([x[:1].expand(width), x, x[-1:].expand(width)])


def opening(
    input: SignalLike,
    window_length: int,
    *,
    out: Optional[Tensor] = None,
) -> Tensor:
    r"""Compute 1-D grayscale opening.

    Opening is erosion followed by dilation with the same structuring window.
    It removes positive spikes narrower than the window while preserving the
    overall shape, which makes it a simple baseline estimator.

    Mathematical Definition
    -----------------------
    .. math::
        \gamma_m(x) = \delta_m(\varepsilon_m(x))

    Before the two passes the signal is padded with ``window_length``
    replicated edge samples on each side, and the padding is stripped from the
    result, so that boundary artifacts stay inside the padding.

    Parameters
    ----------
    input : Tensor, shape (n,)
        Input signal.
    window_length : int
        Length :math:`m \geq 1` of the structuring window.
    out : Tensor, optional
        Pre-allocated output of shape ``(n,)``.

    Returns
    -------
    Tensor
        Opened signal with the same length as ``input``.

    Examples
    --------
    Remove a one-sample spike:

    >>> opening(torch.tensor([0.0, 0.0, 5.0, 0.0, 0.0]), 3)
    tensor([0., 0., 0., 0., 0.])

    Notes
    -----
    - Opening is anti-extensive: ``opening(x, m) <= x``.

    See Also
    --------
    closing : Dual operation (dilation followed by erosion).
    """
    x = as_signal(input)

    # Rejects invalid window lengths before padding
    structuring_window_reach(window_length)

    out = prepare_out(out, x, "opening")

    n = x.shape[0]

    if n == 0:
        return write_out(x.clone(), out)

    padded = replicate_pad(x, window_length)

    opened = dilation(erosion(padded, window_length), window_length)

    return write_out(opened[window_length : window_length + n], out)
