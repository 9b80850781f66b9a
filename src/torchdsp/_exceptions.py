"""Exceptions raised by torchdsp operators."""


class SignalProcessingError(Exception):
    """Base exception for all torchdsp errors."""

    pass


class LengthMismatchError(SignalProcessingError, ValueError):
    """Raised when two arrays that must have equal length do not.

    This occurs when:
    - An ``out`` buffer does not match the length of the input
    - A boolean selector does not match the array it selects from
    - Paired inputs (e.g. ``x`` and ``y`` of a correlation) differ in length
    """

    pass


class InvalidLengthError(SignalProcessingError, ValueError):
    """Raised when an array is shorter than the operation requires.

    This occurs when:
    - Filter coefficient arrays are empty
    - A streaming filter is applied to an empty block
    - A reduction is asked for an empty sub-range
    """

    pass


class InvalidShapeError(SignalProcessingError, ValueError):
    """Raised when an input is not a one-dimensional signal."""

    pass


class InvalidParameterError(SignalProcessingError, ValueError):
    """Raised when a scalar parameter is outside its valid range.

    This occurs when:
    - A structuring window length is smaller than 1
    - A selector step is zero
    - A delta-coefficient half-width is smaller than 1
    """

    pass


class UnsupportedParameterError(SignalProcessingError, ValueError):
    """Raised when a named option is not recognised, e.g. a time unit."""

    pass
