from torchdsp.signal_processing import (
    analysis,
    filter,
    peak_detection,
    window_function,
)
from torchdsp.signal_processing._constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MICROSECOND,
    SECONDS_PER_MILLISECOND,
    SECONDS_PER_MINUTE,
    SECONDS_PER_NANOSECOND,
    SECONDS_PER_SECOND,
    TIME_UNIT_DEFAULT,
    TIME_UNIT_FACTORS,
)

__all__ = [
    # Submodules
    "analysis",
    "filter",
    "peak_detection",
    "window_function",
    # Constants
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MICROSECOND",
    "SECONDS_PER_MILLISECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_NANOSECOND",
    "SECONDS_PER_SECOND",
    "TIME_UNIT_DEFAULT",
    "TIME_UNIT_FACTORS",
]
