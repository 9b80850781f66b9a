"""Sampling frequency estimation from timestamps."""

from __future__ import annotations

import math
import warnings

from torch import Tensor

from torchdsp._exceptions import UnsupportedParameterError
from torchdsp._signal import SignalLike, as_signal
from torchdsp.signal_processing._constants import (
    TIME_UNIT_DEFAULT,
    TIME_UNIT_FACTORS,
)
from torchdsp.vector import check_min_length, create_selector, select


def time_unit_factor(time_unit: str) -> float:
    """Number of seconds in one ``time_unit``.

    Parameters
    ----------
    time_unit : str
        One of ``"ns"``, ``"us"``, ``"ms"``, ``"s"``, ``"min"``, ``"h"``,
        ``"d"``.

    Raises
    ------
    UnsupportedParameterError
        If the unit is not recognised.
    """
    try:
        return TIME_UNIT_FACTORS[time_unit]
    except KeyError:
        raise UnsupportedParameterError(
            f"time_unit must be one of {list(TIME_UNIT_FACTORS)}, got "
            f"'{time_unit}'"
        ) from None


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def estimate_sampling_frequency(
    t: SignalLike,
    time_unit: str = TIME_UNIT_DEFAULT,
) -> Tensor:
    r"""Estimate the sampling frequency in Hz from a vector of timestamps.

    The sampling intervals are sorted and the lowest and highest 10% are
    discarded before averaging, which makes the estimate robust to dropped
    samples and jitter.

    Parameters
    ----------
    t : Tensor, shape (n,)
        Timestamps, ``n >= 2``.
    time_unit : str, optional
        Unit of ``t``, see :func:`time_unit_factor`. Default: ``"s"``.

    Returns
    -------
    Tensor
        Scalar estimate of the sampling frequency in Hz.

    Raises
    ------
    InvalidLengthError
        If fewer than two timestamps are given.
    UnsupportedParameterError
        If ``time_unit`` is not recognised.

    Warns
    -----
    UserWarning
        If the timestamps are not strictly increasing.

    Examples
    --------
    >>> t = torch.tensor([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0])
    >>> estimate_sampling_frequency(t, "ms")
    tensor(1000.)
    """
    t = as_signal(t, "t")

    check_min_length(t, 2, "t")

    factor = time_unit_factor(time_unit)

    intervals = t.diff()

    if (intervals <= 0).any():
        warnings.warn(
            "estimate_sampling_frequency: timestamps are not strictly "
            "increasing",
            UserWarning,
            stacklevel=2,
        )

    intervals = intervals.sort().values

    n = intervals.shape[0]

    first = max(0, _round_half_up(0.1 * n) - 1)
    last = min(n - 1, _round_half_up(0.9 * n) - 1)

    trimmed = select(intervals, create_selector(first, 1, last, n))

    return 1 / factor / trimmed.mean()
