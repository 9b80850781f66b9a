"""Mathematical morphology closing operation."""

from typing import Optional

from torch import Tensor

from torchdsp._signal import SignalLike, as_signal, prepare_out, write_out
from torchdsp.morphology._dilation import dilation
from torchdsp.morphology._erosion import erosion
from torchdsp.morphology._opening import replicate_pad
from torchdsp.morphology._structuring_window import structuring_window_reach


def closing(
    input: SignalLike,
    window_length: int,
    *,
    out: Optional[Tensor] = None,
) -> Tensor:
    r"""Compute 1-D grayscale closing.

    Closing is dilation followed by erosion with the same structuring window.
    It fills negative spikes narrower than the window.

    .. math::
        \phi_m(x) = \varepsilon_m(\delta_m(x))

    Padding follows :func:`opening`.

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
        Closed signal with the same length as ``input``.

    Notes
    -----
    Closing is extensive, ``closing(x, m) >= x``, so it never lies below
    ``opening(x, m)``.
    """
    x = as_signal(input)

    # Rejects invalid window lengths before padding
    structuring_window_reach(window_length)

    out = prepare_out(out, x, "closing")

    n = x.shape[0]

    if n == 0:
        return write_out(x.clone(), out)

    padded = replicate_pad(x, window_length)

    closed = erosion(dilation(padded, window_length), window_length)

    return write_out(closed[window_length : window_length + n], out)
