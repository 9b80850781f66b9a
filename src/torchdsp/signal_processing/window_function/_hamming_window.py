import math
from typing import Optional

import torch
from torch import Tensor

from torchdsp._exceptions import InvalidParameterError


def hamming_window(
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
    requires_grad: bool = False,
) -> Tensor:
    """
    Hamming window function (symmetric).

    Computes a symmetric Hamming window of length n, equivalent to MATLAB's
    ``hamming(n)`` and ``scipy.signal.windows.hamming(n, sym=True)``.

    Mathematical Definition
    -----------------------
    The symmetric Hamming window is defined as:

        w[k] = 0.54 - 0.46 * cos(2 * pi * k / (n - 1)),  for k = 0, 1, ..., n-1

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be non-negative.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Defaults to
        ``torch.get_default_dtype()``.
    device : torch.device, optional
        The desired device of the returned tensor.
    requires_grad : bool, optional
        If True, the returned tensor will require gradients.

    Returns
    -------
    Tensor
        A 1-D tensor of size (n,) containing the window values. A
        single-point window is ``[1.0]``.

    Raises
    ------
    InvalidParameterError
        If ``n`` is negative.

    Examples
    --------
    >>> hamming_window(5, dtype=torch.float64)
    tensor([0.0800, 0.5400, 1.0000, 0.5400, 0.0800], dtype=torch.float64)
    """
    if n < 0:
        raise InvalidParameterError(
            f"hamming_window: n must be non-negative, got {n}"
        )

    if dtype is None:
        dtype = torch.get_default_dtype()

    if n == 1:
        window = torch.ones(1, dtype=dtype, device=device)
    else:
        k = torch.arange(n, dtype=dtype, device=device)
        window = 0.54 - 0.46 * torch.cos(2 * math.pi * k / (n - 1))

    return window.requires_grad_(requires_grad)
