"""Concrete strategy implementations."""

from template_preview.strategies.data_loaders import (
    JsonDataLoader,
    YamlDataLoader,
)
from template_preview.strategies.filters import (
    FILTERS,
    register_filters,
)
from template_preview.strategies.preprocessors import (
    SliceSyntaxPreprocessor,
)
from template_preview.strategies.renderers import (
    JinjaPreviewRenderer,
)

__all__ = [
    "FILTERS",
    "JinjaPreviewRenderer",
    "JsonDataLoader",
    "SliceSyntaxPreprocessor",
    "YamlDataLoader",
    "register_filters",
]
