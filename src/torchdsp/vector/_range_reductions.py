"""Reductions over an inclusive index range of a 1-D tensor."""

from __future__ import annotations

from typing import Tuple

import torch
from torch import Tensor

from torchdsp._constants import END
from torchdsp._exceptions import InvalidLengthError


def _resolve_range(
    input: Tensor, start: int, stop: int, caller: str
) -> slice:
    n = input.shape[0]

    if stop == END:
        stop = n - 1

    if not 0 <= start <= stop < n:
        raise InvalidLengthError(
            f"{caller}: range [{start}, {stop}] is empty or outside an array "
            f"of length {n}"
        )

    return slice(start, stop + 1)


def range_max(
    input: Tensor, start: int = 0, stop: int = END
) -> Tuple[Tensor, Tensor]:
    """Maximum of ``input[start..stop]`` and the index where it first occurs.

    The returned index refers to ``input``, not to the sub-range.
    """
    segment = input[_resolve_range(input, start, stop, "range_max")]
    index = torch.argmax(segment)

    return segment[index], index + start


def range_min(
    input: Tensor, start: int = 0, stop: int = END
) -> Tuple[Tensor, Tensor]:
    """Minimum of ``input[start..stop]`` and the index of its first match."""
    segment = input[_resolve_range(input, start, stop, "range_min")]
    index = torch.argmin(segment)

    return segment[index], index + start


def range_sum(input: Tensor, start: int = 0, stop: int = END) -> Tensor:
    return input[_resolve_range(input, start, stop, "range_sum")].sum()


def range_mean(input: Tensor, start: int = 0, stop: int = END) -> Tensor:
    return input[_resolve_range(input, start, stop, "range_mean")].mean()


def range_var(
    input: Tensor,
    start: int = 0,
    stop: int = END,
    *,
    unbiased: bool = True,
) -> Tensor:
    r"""Variance of ``input[start..stop]``.

    Parameters
    ----------
    unbiased : bool, optional
        Use the :math:`N - 1` denominator when ``True`` (default), otherwise
        :math:`N`. A single-sample range with ``unbiased=True`` yields
        ``nan``.
    """
    segment = input[_resolve_range(input, start, stop, "range_var")]

    return torch.var(segment, correction=1 if unbiased else 0)


def range_std(
    input: Tensor,
    start: int = 0,
    stop: int = END,
    *,
    unbiased: bool = True,
) -> Tensor:
    """Standard deviation of ``input[start..stop]``; see :func:`range_var`."""
    return torch.sqrt(range_var(input, start, stop, unbiased=unbiased))
