"""JSON dump filter."""

import json
from typing import Any


def dump_filter(value: Any, indent: int | None = None) -> str:
    """Serialize a value to JSON text.

    Without `indent` the output is compact (`["c","d"]`), matching
    `JSON.stringify`. Values JSON cannot represent, such as dates parsed
    from YAML, are written as their string form.

    Args:
        value: The value to serialize.
        indent: Pretty-print indentation width.

    Returns:
        The JSON text.
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        value,
        indent=indent,
        separators=separators,
        ensure_ascii=False,
        default=str,
    )
