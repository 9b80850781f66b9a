"""Window functions for spectral analysis.

Functions
---------
hamming_window
    Symmetric Hamming window.
"""

from ._hamming_window import hamming_window

__all__ = [
    "hamming_window",
]
