"""Peak detection for 1-D signals.

Functions
---------
find_peaks
    Local maxima filtered by prominence and minimum distance.
local_maxima
    Plateau-aware local maxima.
peak_prominences
    Prominence of each peak relative to the nearest taller peaks.
select_by_prominence
    Keep peaks above a prominence threshold.
select_by_distance
    Keep the tallest peaks subject to a minimum separation.
"""

from ._find_peaks import find_peaks
from ._local_maxima import local_maxima
from ._peak_prominences import peak_prominences, select_by_prominence
from ._select_by_distance import select_by_distance

__all__ = [
    "find_peaks",
    "local_maxima",
    "peak_prominences",
    "select_by_distance",
    "select_by_prominence",
]
