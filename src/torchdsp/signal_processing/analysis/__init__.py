"""Time- and frequency-axis utilities for 1-D signals.

Functions
---------
fft_frequencies
    Folded frequency axis of an FFT.
estimate_sampling_frequency
    Robust sampling frequency estimate from timestamps.
time_unit_factor
    Seconds per named time unit.
gradient
    Central-difference gradient.
delta_coefficients
    Regression (delta) coefficients over a symmetric window.
autocorrelation
    Normalised sample auto-correlation.
correlation_coefficient
    Pearson's correlation coefficient.
"""

from ._correlation import autocorrelation, correlation_coefficient
from ._delta_coefficients import delta_coefficients
from ._fft_frequencies import fft_frequencies
from ._gradient import gradient
from ._sampling_frequency import estimate_sampling_frequency, time_unit_factor

__all__ = [
    "autocorrelation",
    "correlation_coefficient",
    "delta_coefficients",
    "estimate_sampling_frequency",
    "fft_frequencies",
    "gradient",
    "time_unit_factor",
]
