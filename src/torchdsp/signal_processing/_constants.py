"""Constants for signal processing module."""

# Seconds per time unit
SECONDS_PER_NANOSECOND: float = 1e-9
SECONDS_PER_MICROSECOND: float = 1e-6
SECONDS_PER_MILLISECOND: float = 1e-3
SECONDS_PER_SECOND: float = 1.0
SECONDS_PER_MINUTE: float = 60.0
SECONDS_PER_HOUR: float = 3600.0
SECONDS_PER_DAY: float = 86400.0

TIME_UNIT_FACTORS: dict[str, float] = {
    "ns": SECONDS_PER_NANOSECOND,
    "us": SECONDS_PER_MICROSECOND,
    "ms": SECONDS_PER_MILLISECOND,
    "s": SECONDS_PER_SECOND,
    "min": SECONDS_PER_MINUTE,
    "h": SECONDS_PER_HOUR,
    "d": SECONDS_PER_DAY,
}

# Default unit of timestamps
TIME_UNIT_DEFAULT: str = "s"
