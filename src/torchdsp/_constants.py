"""Constants shared across torchdsp."""

import torch

# Integer and boolean inputs are promoted to this dtype
DEFAULT_FLOATING_DTYPE: torch.dtype = torch.float64

# MATLAB's ``end``: the last valid index of the array being indexed
END: int = -1
