"""One-dimensional mathematical morphology.

Flat structuring windows over 1-D signals, with clamped (edge-replicating)
boundaries.

Operations
----------
erosion : Morphological erosion (minimum over the window).
dilation : Morphological dilation (maximum over the window).
opening : Erosion followed by dilation.
closing : Dilation followed by erosion.
structuring_window_reach : Left/right reach of a window of given length.
"""

from torchdsp.morphology._closing import closing
from torchdsp.morphology._dilation import dilation
from torchdsp.morphology._erosion import erosion
from torchdsp.morphology._opening import opening
from torchdsp.morphology._structuring_window import structuring_window_reach

__all__ = [
    "closing",
    "dilation",
    "erosion",
    "opening",
    "structuring_window_reach",
]
