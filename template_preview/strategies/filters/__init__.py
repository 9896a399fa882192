"""Index-aware filter library and its registration helper."""

from collections.abc import Callable
from typing import Any

from jinja2 import Environment

from template_preview.strategies.filters.indexing import slice_filter, substring_filter
from template_preview.strategies.filters.serialization import dump_filter

FILTERS: dict[str, Callable[..., Any]] = {
    "slice": slice_filter,
    "substring": substring_filter,
    "dump": dump_filter,
}


def register_filters(environment: Environment) -> Environment:
    """Install the preview filters on an environment.

    The built-in Jinja2 `slice` filter (column batching) is replaced.

    Args:
        environment: The environment to configure.

    Returns:
        The same environment, for chaining.
    """
    environment.filters.update(FILTERS)
    return environment


__all__ = [
    "FILTERS",
    "dump_filter",
    "register_filters",
    "slice_filter",
    "substring_filter",
]
