"""Plateau-aware local maxima."""

import torch
from torch import Tensor

from torchdsp._signal import SignalLike, as_signal


def local_maxima(input: SignalLike) -> Tensor:
    r"""Find local maxima, reporting each flat-topped peak once.

    A position :math:`i` starts a candidate when :math:`x[i] > x[i-1]`. The
    scan then walks over the plateau of values equal to :math:`x[i]` up to
    the first index :math:`j` with :math:`x[j] \neq x[i]`, and accepts the
    candidate at its first index :math:`i` only if :math:`x[j] < x[i]`.
    Plateaus that end in a rise (shoulders) or run into the end of the
    signal are rejected.

    Parameters
    ----------
    input : Tensor, shape (n,)
        Input signal.

    Returns
    -------
    Tensor
        ``int64`` indices of the maxima in ascending order. Signals shorter
        than 3 samples have no maxima.

    Examples
    --------
    >>> local_maxima(torch.tensor([0.0, 2.0, 2.0, 2.0, 1.0, 3.0, 3.0]))
    tensor([1])
    """
    values = as_signal(input).tolist()
    n = len(values)

    peaks = []

    i = 1
    while i < n - 1:
        if values[i] > values[i - 1]:
            j = i + 1
            while j < n and values[j] == values[i]:
                j += 1

            if j < n and values[j] < values[i]:
                peaks.append(i)

            i = j
        else:
            i += 1

    return torch.tensor(peaks, dtype=torch.int64)
