import torch
from torch import Tensor

from torchdsp._signal import SignalLike, as_signal


def gradient(input: SignalLike) -> Tensor:
    r"""Numerical gradient of a 1-D signal with unit spacing.

    Central differences :math:`(x[i+1] - x[i-1]) / 2` in the interior and
    one-sided differences at the two ends, as MATLAB's ``gradient(x)``.

    Examples
    --------
    >>> gradient(torch.tensor([1.0, 2.0, 4.0, 7.0]))
    tensor([1.0000, 1.5000, 2.5000, 3.0000])
    """
    x = as_signal(input)

    n = x.shape[0]

    if n < 2:
        return torch.zeros_like(x)

    y = torch.empty_like(x)

    y[0] = x[1] - x[0]
    y[1:-1] = (x[2:] - x[:-2]) / 2
    y[-1] = x[-1] - x[-2]

    return y
