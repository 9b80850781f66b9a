from typing import Optional

import torch
from torch import Tensor

from torchdsp._constants import DEFAULT_FLOATING_DTYPE
from torchdsp._exceptions import InvalidLengthError


def fft_frequencies(
    n: int,
    sampling_frequency: float,
    *,
    dtype: Optional[torch.dtype] = None,
) -> Tensor:
    r"""Frequency of each bin of an ``n``-point FFT, folded to be
    non-negative.

    Bins :math:`0, \ldots, \lfloor n/2 \rfloor` carry :math:`k\,\Delta f`
    and the remaining bins mirror them, so bin :math:`k` carries
    :math:`\min(k, n - k)\,\Delta f` with
    :math:`\Delta f = f_s / 2 / \lfloor n/2 \rfloor`.

    Parameters
    ----------
    n : int
        Number of FFT points, ``n >= 2``.
    sampling_frequency : float
        Sampling frequency :math:`f_s`.
    dtype : torch.dtype, optional
        Output dtype. Default: ``float64``.

    Returns
    -------
    Tensor
        Frequencies, shape ``(n,)``.

    Examples
    --------
    >>> fft_frequencies(4, 8.0)
    tensor([0., 2., 4., 2.], dtype=torch.float64)
    """
    if n < 2:
        raise InvalidLengthError(
            f"fft_frequencies: n must be >= 2, got {n}"
        )

    if dtype is None:
        dtype = DEFAULT_FLOATING_DTYPE

    bins = torch.arange(n)
    folded = torch.minimum(bins, n - bins)

    resolution = sampling_frequency / 2 / (n // 2)

    return folded.to(dtype=dtype) * resolution
