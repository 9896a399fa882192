"""Abstract base classes for template preview strategies."""

from template_preview.interfaces.data_loader import (
    BaseDataLoader,
    DataParseError,
    UnsupportedFormatError,
)
from template_preview.interfaces.preprocessor import BaseTemplatePreprocessor, RewriteRule
from template_preview.interfaces.renderer import BaseRenderer, RenderResult, TemplateRenderError

__all__ = [
    "BaseDataLoader",
    "BaseRenderer",
    "BaseTemplatePreprocessor",
    "DataParseError",
    "RenderResult",
    "RewriteRule",
    "TemplateRenderError",
    "UnsupportedFormatError",
]
