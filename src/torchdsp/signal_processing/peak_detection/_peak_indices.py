"""Validation of peak index arguments."""

import torch
from torch import Tensor

from torchdsp._exceptions import InvalidParameterError, InvalidShapeError
from torchdsp._signal import SignalLike


def as_peak_indices(peaks: SignalLike, n: int) -> Tensor:
    """Convert ``peaks`` to ``int64`` indices valid for a signal of length
    ``n``."""
    peaks = torch.as_tensor(peaks, dtype=torch.int64)

    if peaks.dim() != 1:
        raise InvalidShapeError(
            f"peaks must be one-dimensional, got shape {tuple(peaks.shape)}"
        )

    if peaks.numel() > 0 and (peaks.min() < 0 or peaks.max() >= n):
        raise InvalidParameterError(
            f"peaks must index a signal of length {n}"
        )

    return peaks
