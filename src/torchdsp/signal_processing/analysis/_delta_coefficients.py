import torch
from torch import Tensor

from torchdsp._exceptions import InvalidParameterError
from torchdsp._signal import SignalLike, as_signal
from torchdsp.morphology._opening import replicate_pad
from torchdsp.vector import check_min_length


def delta_coefficients(input: SignalLike, half_width: int) -> Tensor:
    r"""Delta (regression) coefficients of a 1-D feature trajectory.

    .. math::
        d[i] = \frac{\sum_{k=-D}^{D} k\, x[i + k]}{2 \sum_{k=1}^{D} k^2}

    with :math:`D` = ``half_width``. The signal is extended by replicating
    its first and last samples :math:`D` times.

    Parameters
    ----------
    input : Tensor, shape (n,)
        Input trajectory, ``n >= 1``.
    half_width : int
        :math:`D \geq 1`; the regression window spans :math:`2D + 1`
        samples.

    Returns
    -------
    Tensor
        Delta coefficients, shape ``(n,)``.

    Examples
    --------
    A linear ramp has a constant slope away from the edges:

    >>> delta_coefficients(torch.arange(6.0), 1)
    tensor([0.5000, 1.0000, 1.0000, 1.0000, 1.0000, 0.5000])
    """
    x = as_signal(input)

    check_min_length(x, 1)

    if half_width < 1:
        raise InvalidParameterError(
            f"delta_coefficients: half_width must be >= 1, got {half_width}"
        )

    weights = torch.arange(-half_width, half_width + 1, dtype=x.dtype)

    frames = replicate_pad(x, half_width).unfold(0, 2 * half_width + 1, 1)

    normalization = 2 * sum(k * k for k in range(1, half_width + 1))

    return frames @ weights / normalization
