"""Concrete renderer implementations."""

from template_preview.strategies.renderers.jinja import JinjaPreviewRenderer

__all__ = [
    "JinjaPreviewRenderer",
]
