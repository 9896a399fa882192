"""Index-aware slicing filters.

`slice` follows Python slicing (negative indices count from the end).
`substring` follows JavaScript's `String.prototype.substring` so that
template authors can compare the two side by side.
"""

from typing import Any

from template_preview.strategies.filters.sliceable import (
    ListValue,
    TextValue,
    clamp,
    classify,
    resolve_bounds,
)


def slice_filter(value: Any, start: int = 0, end: int | None = None) -> Any:
    """Return `value[start:end]` with Python negative-index semantics.

    Args:
        value: A string, list or tuple. Anything else is returned unchanged.
        start: Start index, may be negative.
        end: End index, may be negative. None means the length of `value`.

    Returns:
        A new string or sequence of the same type, or `value` itself.
    """
    match classify(value):
        case TextValue() | ListValue() as target:
            lo, hi = resolve_bounds(start, end, len(target))
            return target.take(lo, hi)
        case _:
            return value


def substring_filter(value: Any, start: int = 0, end: int | None = None) -> Any:
    """Return a substring with JavaScript `substring` semantics.

    With no end and a negative start the last `-start` characters are
    returned. Otherwise negative bounds are treated as 0 and the bounds are
    swapped when start exceeds end.

    Args:
        value: A string. Anything else, including lists, is returned unchanged.
        start: Start index.
        end: End index, or None for the end of the string.
    """
    match classify(value):
        case TextValue() as target:
            if end is None and start < 0:
                return slice_filter(target.value, start)
            length = len(target)
            lo = clamp(start, length)
            hi = length if end is None else clamp(end, length)
            if lo > hi:
                lo, hi = hi, lo
            return target.take(lo, hi)
        case _:
            return value
