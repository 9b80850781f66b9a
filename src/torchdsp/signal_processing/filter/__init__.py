"""Signal processing filter functions.

This module provides filter application for signal processing. Filter
design is out of scope; coefficients are supplied by the caller.
"""

from ._lfilter import lfilter
from ._streaming_iir_filter import StreamingIIRFilter

__all__ = [
    "StreamingIIRFilter",
    "lfilter",
]
