"""Input coercion shared by the 1-D operators."""

from __future__ import annotations

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchdsp._constants import DEFAULT_FLOATING_DTYPE
from torchdsp._exceptions import (
    InvalidParameterError,
    InvalidShapeError,
    LengthMismatchError,
)

SignalLike = Union[Tensor, Sequence[float]]


def as_signal(
    input: SignalLike,
    name: str = "input",
    *,
    dtype: Optional[torch.dtype] = None,
) -> Tensor:
    """Convert ``input`` to a one-dimensional floating-point tensor.

    Integer and boolean inputs are promoted to ``float64``. When ``dtype`` is
    given the result is cast to it.
    """
    tensor = torch.as_tensor(input)

    if tensor.dim() != 1:
        raise InvalidShapeError(
            f"{name} must be one-dimensional, got shape {tuple(tensor.shape)}"
        )

    if dtype is None:
        dtype = tensor.dtype
        if not dtype.is_floating_point:
            dtype = DEFAULT_FLOATING_DTYPE

    return tensor.to(dtype=dtype)


def prepare_out(
    out: Optional[Tensor],
    input: Tensor,
    caller: str,
) -> Optional[Tensor]:
    """Validate a caller-supplied output buffer against ``input``."""
    if out is None:
        return None

    if out.dim() != 1:
        raise InvalidShapeError(
            f"{caller}: out must be one-dimensional, got shape "
            f"{tuple(out.shape)}"
        )

    if out.shape[0] != input.shape[0]:
        raise LengthMismatchError(
            f"{caller}: out has length {out.shape[0]}, expected "
            f"{input.shape[0]}"
        )

    if out.numel() > 0 and out.data_ptr() == input.data_ptr():
        raise InvalidParameterError(
            f"{caller}: out must not share memory with the input"
        )

    return out


def write_out(result: Tensor, out: Optional[Tensor]) -> Tensor:
    if out is None:
        return result

    out.copy_(result)

    return out
