"""torchdsp: PyTorch operators for streaming filtering, morphology and peak
detection on 1-D signals."""

from . import (
    morphology,
    signal_processing,
    vector,
)
from ._exceptions import (
    InvalidLengthError,
    InvalidParameterError,
    InvalidShapeError,
    LengthMismatchError,
    SignalProcessingError,
    UnsupportedParameterError,
)

__all__ = [
    "InvalidLengthError",
    "InvalidParameterError",
    "InvalidShapeError",
    "LengthMismatchError",
    "SignalProcessingError",
    "UnsupportedParameterError",
    "morphology",
    "signal_processing",
    "vector",
]

__version__ = "0.1.0"
