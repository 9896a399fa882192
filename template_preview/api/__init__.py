"""API routes."""

from template_preview.api.preview import router as preview_router

__all__ = [
    "preview_router",
]
