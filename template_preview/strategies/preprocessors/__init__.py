"""Concrete template preprocessor implementations."""

from template_preview.strategies.preprocessors.slice_syntax import (
    DEFAULT_RULES,
    SliceSyntaxPreprocessor,
)

__all__ = [
    "DEFAULT_RULES",
    "SliceSyntaxPreprocessor",
]
