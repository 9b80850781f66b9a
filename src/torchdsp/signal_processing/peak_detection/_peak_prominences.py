"""Candidate-relative peak prominence."""

from __future__ import annotations

from typing import List, Optional

import torch
from torch import Tensor

from torchdsp._signal import SignalLike, as_signal
from torchdsp.signal_processing.peak_detection._peak_indices import (
    as_peak_indices,
)
from torchdsp.vector import range_min


def _nearest_taller(
    values: List[float], peaks: List[int]
) -> List[Optional[int]]:
    """For each peak, the nearest earlier peak with a strictly greater value.

    A stack of peaks with strictly decreasing values is kept; everything not
    taller than the current peak is popped since it can never be the answer
    for a later peak either.
    """
    taller: List[Optional[int]] = []
    stack: List[int] = []

    for peak in peaks:
        while stack and values[stack[-1]] <= values[peak]:
            stack.pop()

        taller.append(stack[-1] if stack else None)

        stack.append(peak)

    return taller


def _segment_min(x: Tensor, start: int, stop: int, fallback: float) -> float:
    if start > stop:
        return fallback

    value, _ = range_min(x, start, stop)

    return value.item()


def peak_prominences(input: SignalLike, peaks: SignalLike) -> Tensor:
    r"""Prominence of each peak relative to the other peaks in ``peaks``.

    For a peak :math:`p` the *left edge* :math:`L` is the nearest peak to
    its left with a strictly greater value, or the start of the signal, and
    the *right edge* :math:`R` the nearest such peak to its right, or the
    end of the signal. Then

    .. math::
        \operatorname{prom}(p) = x[p] - \max\left(
            \min_{L < k < p} x[k],\ \min_{p < k \leq R} x[k]
        \right)

    where the left minimum includes :math:`x[0]` when :math:`L` is the
    signal start.

    Only the supplied peaks are considered as taller neighbours, not every
    sample, so this is an approximation of topographic prominence that is
    exact when ``peaks`` holds every local maximum.

    Parameters
    ----------
    input : Tensor, shape (n,)
        Input signal.
    peaks : Tensor, shape (k,)
        Peak indices into ``input``.

    Returns
    -------
    Tensor
        Prominences, shape ``(k,)``, aligned with ``peaks``. A side with no
        samples between the peak and its edge contributes :math:`x[p]`,
        i.e. zero prominence.

    Examples
    --------
    >>> x = torch.tensor([0.0, 3.0, 1.0, 2.0, 0.0])
    >>> peak_prominences(x, torch.tensor([1, 3]))
    tensor([3., 1.])
    """
    x = as_signal(input)
    n = x.shape[0]

    peaks = as_peak_indices(peaks, n)

    prominences = torch.zeros(peaks.shape[0], dtype=x.dtype)

    if peaks.numel() == 0:
        return prominences

    order = torch.argsort(peaks, stable=True)
    ordered = peaks[order].tolist()
    values = x.tolist()

    left_edges = _nearest_taller(values, ordered)
    right_edges = _nearest_taller(values, ordered[::-1])[::-1]

    ordered_prominences = []

    for peak, left, right in zip(ordered, left_edges, right_edges):
        height = values[peak]

        left_start = 0 if left is None else left + 1
        right_stop = n - 1 if right is None else right

        left_min = _segment_min(x, left_start, peak - 1, height)
        right_min = _segment_min(x, peak + 1, right_stop, height)

        ordered_prominences.append(height - max(left_min, right_min))

    prominences[order] = torch.tensor(ordered_prominences, dtype=x.dtype)

    return prominences


def select_by_prominence(
    input: SignalLike,
    peaks: SignalLike,
    min_prominence: float,
) -> Tensor:
    """Keep the peaks whose prominence strictly exceeds ``min_prominence``.

    A threshold of zero or less disables the filter and returns ``peaks``
    unchanged.
    """
    x = as_signal(input)
    peaks = as_peak_indices(peaks, x.shape[0])

    if min_prominence <= 0 or peaks.numel() == 0:
        return peaks

    return peaks[peak_prominences(x, peaks) > min_prominence]
