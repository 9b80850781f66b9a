"""MATLAB-style boolean selectors."""

from __future__ import annotations

import torch
from torch import Tensor

from torchdsp._constants import END
from torchdsp._exceptions import InvalidParameterError
from torchdsp.vector._length_checks import check_equal_length


def create_selector(start: int, step: int, stop: int, n: int) -> Tensor:
    r"""Create a boolean mask equivalent to MATLAB's ``start:step:stop``.

    Parameters
    ----------
    start : int
        Index of the first selected item, or :data:`END`.
    step : int
        Stride between selected items. Negative strides walk backwards.
    stop : int
        Index of the last selectable item (inclusive), or :data:`END`.
    n : int
        Length of the array the mask will be applied to.

    Returns
    -------
    Tensor
        Boolean tensor of shape ``(n,)``.

    Examples
    --------
    >>> create_selector(1, 2, END, 10).nonzero().flatten()
    tensor([1, 3, 5, 7, 9])
    >>> create_selector(5, -2, 3, 6)
    tensor([False, False, False,  True, False,  True])
    """
    if step == 0:
        raise InvalidParameterError("create_selector: step must be non-zero")

    if n < 0:
        raise InvalidParameterError(
            f"create_selector: n must be non-negative, got {n}"
        )

    if start == END:
        start = n - 1

    if stop == END:
        stop = n - 1

    mask = torch.zeros(n, dtype=torch.bool)

    direction = 1 if step > 0 else -1

    # Nothing lies between start and stop in the direction of the step
    if (stop - start) * direction < 0:
        return mask

    indices = torch.arange(start, stop + direction, step)

    if indices.numel() > 0 and (indices.min() < 0 or indices.max() >= n):
        raise InvalidParameterError(
            f"create_selector: {start}:{step}:{stop} exceeds the bounds of an "
            f"array of length {n}"
        )

    mask[indices] = True

    return mask


def find(mask: Tensor) -> Tensor:
    """Indices of the true entries of a boolean mask (MATLAB ``find``)."""
    return torch.nonzero(mask, as_tuple=False).flatten()


def select(input: Tensor, mask: Tensor) -> Tensor:
    """Compact ``input`` to the entries where ``mask`` is true.

    Unlike ``input[mask]`` the lengths are required to match exactly.
    """
    check_equal_length(input, mask)

    return input[mask.to(dtype=torch.bool)]
