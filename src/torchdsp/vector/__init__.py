"""Array helpers used by the signal-processing operators.

Elementwise arithmetic and whole-array reductions are plain ``torch``
operations. This module adds the pieces ``torch`` does not spell directly:

Functions
---------
create_selector
    Boolean mask for a MATLAB-style ``start:step:stop`` range.
select, find
    Boolean compaction and mask-to-index conversion.
range_max, range_min
    Extremum value and index over an inclusive sub-range.
range_sum, range_mean, range_var, range_std
    Reductions over an inclusive sub-range.
check_equal_length, check_min_length
    Length preconditions.
"""

from torchdsp._constants import END

from ._length_checks import check_equal_length, check_min_length
from ._range_reductions import (
    range_max,
    range_mean,
    range_min,
    range_std,
    range_sum,
    range_var,
)
from ._selector import create_selector, find, select

__all__ = [
    "END",
    "check_equal_length",
    "check_min_length",
    "create_selector",
    "find",
    "range_max",
    "range_mean",
    "range_min",
    "range_std",
    "range_sum",
    "range_var",
    "select",
]
