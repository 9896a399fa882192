"""Sliceable value variants.

Filters never inspect types themselves: `classify` wraps a value into one
of a closed set of variants and the filters `match` on the result.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TextValue:
    """A character sequence."""

    value: str

    def __len__(self) -> int:
        return len(self.value)

    def take(self, start: int, end: int) -> str:
        return self.value[start:end]


@dataclass(frozen=True)
class ListValue:
    """An ordered sequence (list or tuple). Slicing keeps the sequence type."""

    value: Sequence[Any]

    def __len__(self) -> int:
        return len(self.value)

    def take(self, start: int, end: int) -> Sequence[Any]:
        return self.value[start:end]


@dataclass(frozen=True)
class OtherValue:
    """Anything else. Filters return it unchanged."""

    value: Any


Sliceable = TextValue | ListValue | OtherValue


def classify(value: Any) -> Sliceable:
    """Wrap a template value in its sliceable variant."""
    if isinstance(value, str):
        return TextValue(value)
    if isinstance(value, (list, tuple)):
        return ListValue(value)
    return OtherValue(value)


def clamp(index: int, length: int) -> int:
    """Clamp an index into the closed range [0, length]."""
    return max(0, min(index, length))


def resolve_bounds(start: int, end: int | None, length: int) -> tuple[int, int]:
    """Resolve Python-style slice bounds against a concrete length.

    A missing end means "to the end"; negative bounds count from the end.
    Bounds that remain out of range after wraparound are clamped rather
    than re-wrapped, so `resolve_bounds(-10, None, 3)` is `(0, 3)`.

    Args:
        start: Start index, possibly negative.
        end: End index, possibly negative, or None.
        length: Length of the target value.

    Returns:
        Non-negative `(start, end)` suitable for a native slice.
    """
    if end is None:
        end = length
    if start < 0:
        start = length + start
    if end < 0:
        end = length + end
    return clamp(start, length), clamp(end, length)
