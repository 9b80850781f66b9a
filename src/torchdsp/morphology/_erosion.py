"""Mathematical morphology erosion operation."""

from typing import Optional

from torch import Tensor

from torchdsp._signal import SignalLike, as_signal, prepare_out, write_out
from torchdsp.morphology._structuring_window import (
    sliding_window_indices,
    structuring_window_reach,
)


def erosion(
    input: SignalLike,
    window_length: int,
    *,
    shift: bool = False,
    out: Optional[Tensor] = None,
) -> Tensor:
    r"""Compute 1-D grayscale erosion with a flat structuring window.

    Erosion replaces every sample by the minimum over its neighbourhood. It
    removes peaks narrower than the window and widens valleys.

    Mathematical Definition
    -----------------------
    .. math::
        \varepsilon_m(x)[i] = \min_{k \in [i - n_l,\, i + n_r]} x[k]

    For even :math:`m` the window is the mirror image of the dilation
    window, see :func:`structuring_window_reach`.

    Parameters
    ----------
    input : Tensor, shape (n,)
        Input signal.
    window_length : int
        Length :math:`m \geq 1` of the structuring window.
    shift : bool, optional
        Shift the window one sample to the right. Default: ``False``.
    out : Tensor, optional
        Pre-allocated output of shape ``(n,)``.

    Returns
    -------
    Tensor
        Eroded signal with the same length as ``input``.

    Examples
    --------
    >>> erosion(torch.tensor([1.0, 1.0, 0.0, 1.0, 1.0]), 3)
    tensor([1., 0., 0., 0., 1.])

    See Also
    --------
    dilation : Dual operation (maximum over the window).
    opening : Erosion followed by dilation.
    """
    x = as_signal(input)

    nl, nr = structuring_window_reach(window_length, shift, "erosion")

    out = prepare_out(out, x, "erosion")

    if x.shape[0] == 0:
        return write_out(x.clone(), out)

    windows = x[sliding_window_indices(x.shape[0], nl, nr)]

    return write_out(windows.amin(dim=-1), out)
