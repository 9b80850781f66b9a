"""Mathematical morphology dilation operation."""

from typing import Optional

from torch import Tensor

from torchdsp._signal import SignalLike, as_signal, prepare_out, write_out
from torchdsp.morphology._structuring_window import (
    sliding_window_indices,
    structuring_window_reach,
)


def dilation(
    input: SignalLike,
    window_length: int,
    *,
    shift: bool = False,
    out: Optional[Tensor] = None,
) -> Tensor:
    r"""Compute 1-D grayscale dilation with a flat structuring window.

    Dilation replaces every sample by the maximum over its neighbourhood. It
    widens peaks and fills narrow valleys.

    Mathematical Definition
    -----------------------
    .. math::
        \delta_m(x)[i] = \max_{k \in [i - n_l,\, i + n_r]} x[k]

    where :math:`(n_l, n_r)` is the reach returned by
    :func:`structuring_window_reach` and the window is clamped to
    :math:`[0, n - 1]` at the boundaries.

    Parameters
    ----------
    input : Tensor, shape (n,)
        Input signal. Sequences are converted with ``torch.as_tensor``.
    window_length : int
        Length :math:`m \geq 1` of the structuring window.
    shift : bool, optional
        Shift the window one sample to the right. Default: ``False``.
    out : Tensor, optional
        Pre-allocated output of shape ``(n,)``. It is filled and returned.
        Must not share memory with ``input``.

    Returns
    -------
    Tensor
        Dilated signal with the same length as ``input``.

    Examples
    --------
    >>> dilation(torch.tensor([0.0, 0.0, 1.0, 0.0, 0.0]), 3)
    tensor([0., 1., 1., 1., 0.])

    Notes
    -----
    - Runs in :math:`O(n m)` time and memory.
    - Gradients are shared evenly between tied maxima of a window.

    See Also
    --------
    erosion : Dual operation (minimum over the window).
    closing : Dilation followed by erosion.
    """
    x = as_signal(input)

    nl, nr = structuring_window_reach(window_length, shift, "dilation")

    out = prepare_out(out, x, "dilation")

    if x.shape[0] == 0:
        return write_out(x.clone(), out)

    windows = x[sliding_window_indices(x.shape[0], nl, nr)]

    return write_out(windows.amax(dim=-1), out)
