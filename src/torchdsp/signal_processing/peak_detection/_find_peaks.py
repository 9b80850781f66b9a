"""Peak detection pipeline."""

import torch
from torch import Tensor

from torchdsp._signal import SignalLike, as_signal
from torchdsp.signal_processing.peak_detection._local_maxima import (
    local_maxima,
)
from torchdsp.signal_processing.peak_detection._peak_prominences import (
    select_by_prominence,
)
from torchdsp.signal_processing.peak_detection._select_by_distance import (
    select_by_distance,
)


def find_peaks(
    input: SignalLike,
    min_peak_distance: int = 0,
    min_peak_prominence: float = 0.0,
) -> Tensor:
    r"""Find peaks of a 1-D signal.

    Equivalent in intent to MATLAB's
    ``[~, i] = findpeaks(x, 'MinPeakDistance', d, 'MinPeakProminence', p)``.

    The pipeline has three stages:

    1. :func:`local_maxima` extracts plateau-aware local maxima, one index
       per flat-topped peak.
    2. :func:`select_by_prominence` drops candidates whose prominence,
       measured against the nearest taller candidate on each side, is not
       greater than ``min_peak_prominence``. Skipped when the threshold is
       zero.
    3. :func:`select_by_distance` keeps the tallest peaks such that kept
       peaks are more than ``min_peak_distance`` samples apart. Skipped when
       the distance is zero.

    Parameters
    ----------
    input : Tensor, shape (n,)
        Input signal.
    min_peak_distance : int, optional
        Minimum index distance between reported peaks. Default: 0.
    min_peak_prominence : float, optional
        Minimum prominence of reported peaks. Default: 0.

    Returns
    -------
    Tensor
        ``int64`` peak indices in ascending order. Signals shorter than 3
        samples yield an empty tensor.

    Examples
    --------
    >>> x = torch.tensor([0.0, 1.0, 0.0, 3.0, 2.5, 2.6, 0.0])
    >>> find_peaks(x)
    tensor([1, 3, 5])
    >>> find_peaks(x, min_peak_prominence=0.5)
    tensor([1, 3])
    >>> find_peaks(x, min_peak_distance=2)
    tensor([3])

    See Also
    --------
    local_maxima, peak_prominences, select_by_distance
    """
    x = as_signal(input)

    if x.shape[0] < 3:
        return torch.zeros(0, dtype=torch.int64)

    peaks = local_maxima(x)

    if min_peak_prominence > 0:
        peaks = select_by_prominence(x, peaks, min_peak_prominence)

    if min_peak_distance > 0:
        peaks = select_by_distance(x, peaks, min_peak_distance)

    return peaks
