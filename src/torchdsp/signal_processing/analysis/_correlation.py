"""Auto-correlation and Pearson correlation of 1-D signals."""

import torch
from torch import Tensor

from torchdsp._exceptions import InvalidParameterError
from torchdsp._signal import SignalLike, as_signal
from torchdsp.vector import check_equal_length, check_min_length


def autocorrelation(input: SignalLike, max_lag: int) -> Tensor:
    r"""Sample auto-correlation for lags :math:`0, 1, \ldots, m`.

    .. math::
        r[l] = \frac{\sum_{i=0}^{n-l-1} (x[i] - \bar{x})(x[i+l] - \bar{x})}
                    {\sum_{i=0}^{n-1} (x[i] - \bar{x})^2}

    Lags of :math:`n` or more have no overlapping samples and are zero.

    Parameters
    ----------
    input : Tensor, shape (n,)
        Input signal, ``n >= 1``.
    max_lag : int
        Largest lag :math:`m \geq 0`.

    Returns
    -------
    Tensor
        Auto-correlation, shape ``(max_lag + 1,)``, with ``r[0] == 1`` for a
        non-constant signal.
    """
    x = as_signal(input)

    check_min_length(x, 1)

    if max_lag < 0:
        raise InvalidParameterError(
            f"autocorrelation: max_lag must be >= 0, got {max_lag}"
        )

    n = x.shape[0]
    centered = x - x.mean()

    r = torch.zeros(max_lag + 1, dtype=x.dtype)

    for lag in range(min(max_lag, n - 1) + 1):
        r[lag] = torch.dot(centered[: n - lag], centered[lag:])

    return r / r[0]


def correlation_coefficient(x: SignalLike, y: SignalLike) -> Tensor:
    r"""Pearson's correlation coefficient of two equal-length signals.

    Examples
    --------
    >>> x = torch.tensor([1.0, 2.0, 3.0])
    >>> correlation_coefficient(x, 2 * x + 1)
    tensor(1.)
    """
    x = as_signal(x, "x")
    y = as_signal(y, "y")

    check_equal_length(x, y)

    x0 = x - x.mean()
    y0 = y - y.mean()

    return torch.dot(x0, y0) / (
        torch.linalg.vector_norm(x0) * torch.linalg.vector_norm(y0)
    )
