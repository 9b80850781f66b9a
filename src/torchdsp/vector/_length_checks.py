from torch import Tensor

from torchdsp._exceptions import InvalidLengthError, LengthMismatchError


def check_equal_length(*tensors: Tensor) -> None:
    """Raise :class:`LengthMismatchError` unless all tensors share a length.

    Parameters
    ----------
    *tensors : Tensor
        Tensors compared along their first dimension.

    Examples
    --------
    >>> check_equal_length(torch.zeros(3), torch.ones(3))
    >>> check_equal_length(torch.zeros(3), torch.ones(4))
    Traceback (most recent call last):
        ...
    torchdsp._exceptions.LengthMismatchError: lengths differ: [3, 4]
    """
    lengths = [tensor.shape[0] for tensor in tensors]

    if len(set(lengths)) > 1:
        raise LengthMismatchError(f"lengths differ: {lengths}")


def check_min_length(
    tensor: Tensor, minimum: int, name: str = "input"
) -> None:
    """Raise :class:`InvalidLengthError` if ``tensor`` has fewer than
    ``minimum`` elements along its first dimension."""
    if tensor.shape[0] < minimum:
        raise InvalidLengthError(
            f"{name} must have length >= {minimum}, got {tensor.shape[0]}"
        )
