"""Testing helpers for torchdsp operators."""

from . import strategies

__all__ = [
    "strategies",
]
