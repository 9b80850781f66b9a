"""Reach of a flat 1-D structuring window."""

from typing import Literal, Tuple

import torch
from torch import Tensor

from torchdsp._exceptions import (
    InvalidParameterError,
    UnsupportedParameterError,
)

Operation = Literal["dilation", "erosion"]


def structuring_window_reach(
    window_length: int,
    shift: bool = False,
    operation: Operation = "dilation",
) -> Tuple[int, int]:
    r"""Left and right reach ``(nl, nr)`` of a flat structuring window.

    The window around position :math:`i` covers :math:`[i - n_l, i + n_r]`.

    For odd ``window_length`` :math:`m` the window is centred,
    :math:`n_l = n_r = (m - 1) / 2`. For even :math:`m` it is one sample
    longer on one side: dilation reaches :math:`m/2` to the left and
    :math:`m/2 - 1` to the right, and erosion uses the mirrored window so
    that the two compose into a proper opening and closing.

    Parameters
    ----------
    window_length : int
        Structuring window length :math:`m \geq 1`.
    shift : bool, optional
        Move the window one sample to the right (``nl - 1``, ``nr + 1``).
        Default: ``False``.
    operation : {"dilation", "erosion"}, optional
        Operation the window is used for. Default: ``"dilation"``.

    Returns
    -------
    tuple of int
        ``(nl, nr)``. With ``shift=True`` and small windows ``nl`` may be
        negative, in which case the window lies entirely to the right of
        ``i``.

    Examples
    --------
    >>> structuring_window_reach(5)
    (2, 2)
    >>> structuring_window_reach(4, operation="dilation")
    (2, 1)
    >>> structuring_window_reach(4, operation="erosion")
    (1, 2)
    >>> structuring_window_reach(3, shift=True)
    (0, 2)
    """
    if isinstance(window_length, bool) or int(window_length) != window_length:
        raise InvalidParameterError(
            f"window_length must be an integer, got {window_length!r}"
        )

    window_length = int(window_length)

    if window_length < 1:
        raise InvalidParameterError(
            f"window_length must be >= 1, got {window_length}"
        )

    if operation not in ("dilation", "erosion"):
        raise UnsupportedParameterError(
            f"operation must be one of ['dilation', 'erosion'], got "
            f"'{operation}'"
        )

    if window_length % 2 == 1:
        nl = nr = (window_length - 1) // 2
    elif operation == "dilation":
        nl, nr = window_length // 2, window_length // 2 - 1
    else:
        nl, nr = window_length // 2 - 1, window_length // 2

    if shift:
        nl -= 1
        nr += 1

    return nl, nr


def sliding_window_indices(n: int, nl: int, nr: int) -> Tensor:
    """``(n, nl + nr + 1)`` gather indices of every window, clamped to
    ``[0, n - 1]`` so that edge windows repeat the boundary sample."""
    offsets = torch.arange(-nl, nr + 1)
    indices = torch.arange(n).unsqueeze(-1) + offsets.unsqueeze(0)

    return indices.clamp(0, n - 1)
