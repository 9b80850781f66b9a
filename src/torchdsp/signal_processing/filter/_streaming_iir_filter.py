"""IIR filter with state carried across successive calls."""

from __future__ import annotations

import warnings
from typing import Optional, Union

import torch
from torch import Tensor

from torchdsp._constants import DEFAULT_FLOATING_DTYPE
from torchdsp._exceptions import InvalidLengthError, InvalidShapeError
from torchdsp._signal import SignalLike, as_signal, prepare_out, write_out


def _as_coefficients(coefficients: SignalLike, name: str) -> Tensor:
    coefficients = torch.as_tensor(coefficients)

    if coefficients.dim() != 1:
        raise InvalidShapeError(
            f"StreamingIIRFilter: {name} must be one-dimensional, got shape "
            f"{tuple(coefficients.shape)}"
        )

    if coefficients.shape[0] < 1:
        raise InvalidLengthError(
            f"StreamingIIRFilter: {name} must be non-empty, got length "
            f"{coefficients.shape[0]}"
        )

    return coefficients


class StreamingIIRFilter:
    r"""Direct-form IIR filter whose history persists between calls.

    Filtering a stream block by block with :meth:`apply` gives the same
    output as filtering the concatenated stream in one call. The filter
    implements the difference equation

    .. math::
        y[i] = \sum_{j=0}^{N} b[j]\, x[i-j] - \sum_{j=1}^{N} a[j]\, y[i-j]

    where :math:`N = \max(\operatorname{len}(b), \operatorname{len}(a)) - 1`
    is the filter order and the shorter coefficient array is zero-padded.
    ``a[0]`` does not appear in the recursion: coefficients are expected to
    be normalized so that ``a[0] == 1``.

    The filter holds the last :math:`N` input and output samples. They are
    zero after construction and after :meth:`reset` (the *idle* state) and
    populated by every :meth:`apply` (the *running* state). The first
    :math:`N` outputs of a call draw their negative-lag terms from this
    history.

    Parameters
    ----------
    b : Tensor
        Numerator (feed-forward) coefficients, shape ``(M,)``, ``M >= 1``.
    a : Tensor
        Denominator (feedback) coefficients, shape ``(K,)``, ``K >= 1``.
    dtype : torch.dtype, optional
        Dtype of the coefficients, history and output. Defaults to the
        promoted dtype of ``b`` and ``a``, or ``float64`` for integer
        coefficients.
    device : torch.device, optional
        Device of the coefficients and history. Defaults to the device of
        ``b``. The state follows the input to its device on :meth:`apply`.

    Raises
    ------
    InvalidLengthError
        If ``b`` or ``a`` is empty.

    Warns
    -----
    UserWarning
        If ``a[0] != 1``.

    Notes
    -----
    Each call is differentiable with respect to ``x``, ``b`` and ``a``. The
    stored history is detached, so gradients do not flow from one call into
    the next.

    Instances are not thread safe. :meth:`apply` and :meth:`reset` mutate the
    history in place without locking, so use one filter per stream or
    serialize access externally.

    An order-0 filter (``len(b) == len(a) == 1``) is a pure gain with empty
    history.

    Examples
    --------
    Running sum:

    >>> f = StreamingIIRFilter([1.0, 0.0], [1.0, -1.0])
    >>> f.apply(torch.tensor([1.0, 2.0, 3.0]))
    tensor([1., 3., 6.])
    >>> f.apply(torch.tensor([4.0, 5.0, 6.0, 7.0]))
    tensor([10., 15., 21., 28.])
    """

    def __init__(
        self,
        b: SignalLike,
        a: SignalLike,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[str, torch.device]] = None,
    ):
        b = _as_coefficients(b, "b")
        a = _as_coefficients(a, "a")

        if dtype is None:
            dtype = torch.promote_types(b.dtype, a.dtype)
            if not dtype.is_floating_point:
                dtype = DEFAULT_FLOATING_DTYPE

        if device is None:
            device = b.device

        if a[0].item() != 1:
            warnings.warn(
                f"StreamingIIRFilter: a[0] = {a[0].item()} is not 1; the "
                f"recursion does not divide by a[0], normalize b and a first",
                UserWarning,
                stacklevel=2,
            )

        n_coef = max(b.shape[0], a.shape[0])

        self._dtype = dtype
        self._device = torch.device(device)

        b = b.to(dtype=dtype, device=self._device)
        a = a.to(dtype=dtype, device=self._device)

        self._b = torch.nn.functional.pad(b, (0, n_coef - b.shape[0]))
        self._a = torch.nn.functional.pad(a, (0, n_coef - a.shape[0]))

        self._order = n_coef - 1

        self._x_history = torch.zeros(
            self._order, dtype=dtype, device=self._device
        )
        self._y_history = torch.zeros(
            self._order, dtype=dtype, device=self._device
        )

        self._running = False

    @property
    def order(self) -> int:
        """Filter order, the length of each history buffer."""
        return self._order

    @property
    def dtype(self) -> torch.dtype:
        return self._dtype

    @property
    def device(self) -> torch.device:
        """Device currently holding the coefficients and history."""
        return self._device

    @property
    def b(self) -> Tensor:
        """Zero-padded numerator coefficients, shape ``(order + 1,)``."""
        return self._b.clone()

    @property
    def a(self) -> Tensor:
        """Zero-padded denominator coefficients, shape ``(order + 1,)``."""
        return self._a.clone()

    @property
    def x_history(self) -> Tensor:
        """Last ``order`` input samples, oldest first."""
        return self._x_history.clone()

    @property
    def y_history(self) -> Tensor:
        """Last ``order`` output samples, oldest first."""
        return self._y_history.clone()

    @property
    def is_running(self) -> bool:
        """``True`` once :meth:`apply` has run since construction or reset."""
        return self._running

    def reset(self) -> None:
        """Clear the history, returning the filter to the idle state."""
        self._x_history.zero_()
        self._y_history.zero_()

        self._running = False

    def _move_to(self, device: torch.device) -> None:
        self._b = self._b.to(device=device)
        self._a = self._a.to(device=device)

        self._x_history = self._x_history.to(device=device)
        self._y_history = self._y_history.to(device=device)

        self._device = device

    def apply(
        self,
        x: SignalLike,
        *,
        out: Optional[Tensor] = None,
    ) -> Tensor:
        """Filter the next block of the stream.

        Parameters
        ----------
        x : Tensor, shape (n,)
            Next input block, ``n >= 1``. Blocks shorter than the filter
            order are accepted; the history is shifted by ``n`` samples.
        out : Tensor, optional
            Pre-allocated output of shape ``(n,)``, filled and returned. Must
            not share memory with ``x``.

        Returns
        -------
        Tensor
            Output block, shape ``(n,)``, on the device of ``x``.

        Raises
        ------
        InvalidLengthError
            If ``x`` is empty.
        LengthMismatchError
            If ``out`` does not have the length of ``x``.
        """
        x = as_signal(x, "x", dtype=self._dtype)

        n = x.shape[0]

        if n < 1:
            raise InvalidLengthError(
                "StreamingIIRFilter.apply: x must have length >= 1, got 0"
            )

        out = prepare_out(out, x, "StreamingIIRFilter.apply")

        if x.device != self._device:
            self._move_to(x.device)

        order = self._order

        # The history followed by the block, so lag j of sample i is i - j
        xs = torch.cat([self._x_history, x])

        # Row k holds xs[k .. k + order], the inputs of output order + k
        feedforward = xs.unfold(0, order + 1, 1) @ self._b.flip(0)

        if order == 0:
            y = feedforward
        else:
            a = self._a

            ys = list(self._y_history.unbind(0))

            for i in range(n):
                acc = feedforward[i]

                for j in range(1, order + 1):
                    acc = acc - a[j] * ys[order + i - j]

                ys.append(acc)

            y = torch.stack(ys[order:])

        ys = torch.cat([self._y_history, y])

        self._x_history = xs[n:].detach().clone()
        self._y_history = ys[n:].detach().clone()

        assert self._x_history.shape[0] == order
        assert self._y_history.shape[0] == order

        self._running = True

        return write_out(y, out)
