"""Minimum-distance peak suppression."""

import torch
from torch import Tensor

from torchdsp._signal import SignalLike, as_signal
from torchdsp.signal_processing.peak_detection._peak_indices import (
    as_peak_indices,
)


def select_by_distance(
    input: SignalLike,
    peaks: SignalLike,
    min_distance: int,
) -> Tensor:
    r"""Suppress peaks that lie within ``min_distance`` of a taller peak.

    Peaks are visited from tallest to shortest (ties in left-to-right
    order). A peak is kept only if its distance to every peak kept so far is
    strictly greater than ``min_distance``, so taller peaks win over earlier
    ones.

    Parameters
    ----------
    input : Tensor, shape (n,)
        Input signal.
    peaks : Tensor, shape (k,)
        Candidate peak indices into ``input``.
    min_distance : int
        Minimum index distance. Zero or less disables the filter.

    Returns
    -------
    Tensor
        Surviving ``int64`` peak indices in ascending order.

    Examples
    --------
    >>> x = torch.tensor([0.0, 1.0, 0.0, 3.0, 0.0, 2.0, 0.0])
    >>> select_by_distance(x, torch.tensor([1, 3, 5]), 2)
    tensor([3])
    """
    x = as_signal(input)
    peaks = as_peak_indices(peaks, x.shape[0])

    if min_distance <= 0 or peaks.numel() == 0:
        return torch.sort(peaks).values

    values = x.tolist()
    candidates = sorted(peaks.tolist())

    # sorted() is stable, so equal heights keep their left-to-right order
    by_height = sorted(candidates, key=lambda peak: -values[peak])

    kept = []

    for peak in by_height:
        if all(abs(peak - other) > min_distance for other in kept):
            kept.append(peak)

    return torch.tensor(sorted(kept), dtype=torch.int64)
