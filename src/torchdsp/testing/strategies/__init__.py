"""Hypothesis strategies for torchdsp operator testing."""

from ._filter_coefficients import filter_coefficients
from ._real_numbers import real_numbers
from ._signals import signals
from ._split_points import split_points

__all__ = [
    # Numeric strategies
    "real_numbers",
    # Tensor strategies
    "signals",
    "split_points",
    # Filter strategies
    "filter_coefficients",
]
