"""FastAPI dependencies for dependency injection.

The component factory lives on `app.state` and is created by
`create_app`, so every app instance (and every test client) gets its own.
"""

from fastapi import Request

from template_preview.core.factory import ComponentFactory
from template_preview.strategies.renderers import JinjaPreviewRenderer


def get_factory(request: Request) -> ComponentFactory:
    """Dependency returning the application's component factory."""
    return request.app.state.factory


def get_renderer(request: Request) -> JinjaPreviewRenderer:
    """Dependency returning the application's preview renderer."""
    return request.app.state.renderer
