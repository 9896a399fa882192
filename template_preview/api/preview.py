"""Template preview API routes.

Handles rendering, slice-syntax rewriting and data-format conversion.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from template_preview.api.deps import get_factory, get_renderer
from template_preview.api.schemas import (
    ConvertRequest,
    ConvertResponse,
    PreprocessRequest,
    PreprocessResponse,
    RenderRequest,
    RenderResponse,
)
from template_preview.core.factory import ComponentFactory
from template_preview.interfaces.data_loader import DataParseError
from template_preview.strategies.renderers import JinjaPreviewRenderer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/preview", tags=["preview"])


# =============================================================================
# Endpoints
# =============================================================================


@router.post(
    "/render",
    response_model=RenderResponse,
    status_code=status.HTTP_200_OK,
)
async def render_preview(
    request: RenderRequest,
    factory: ComponentFactory = Depends(get_factory),
    renderer: JinjaPreviewRenderer = Depends(get_renderer),
) -> RenderResponse:
    """Render a template against a JSON or YAML data block.

    Slice syntax such as `{{ name[1:-1] }}` is rewritten into the
    index-aware `slice` filter before compilation.

    Args:
        request: Template, data block and data format.
        factory: Component factory (supplies the default format).
        renderer: The preview renderer.

    Returns:
        RenderResponse with the output, or an error message and empty output.
    """
    data_format = request.data_format or factory.settings.default_data_format
    logger.info(
        f"Render request: template_chars={len(request.template)}, "
        f"data_chars={len(request.data)}, format={data_format}"
    )

    result = renderer.render(request.template, request.data, data_format)

    return RenderResponse(
        output=result.output,
        error=result.error,
        rewritten_template=result.rewritten_template,
        ok=result.ok,
    )


@router.post(
    "/preprocess",
    response_model=PreprocessResponse,
    status_code=status.HTTP_200_OK,
)
async def preprocess_template(
    request: PreprocessRequest,
    factory: ComponentFactory = Depends(get_factory),
) -> PreprocessResponse:
    """Show how slice syntax in a template is rewritten.

    Args:
        request: The template source.
        factory: Component factory.

    Returns:
        PreprocessResponse with the rewritten template.
    """
    preprocessor = factory.get_preprocessor()
    return PreprocessResponse(
        template=request.template,
        rewritten=preprocessor.preprocess(request.template),
        rewrites=preprocessor.rewrite_count(request.template),
    )


@router.post(
    "/convert",
    response_model=ConvertResponse,
    status_code=status.HTTP_200_OK,
)
async def convert_data(
    request: ConvertRequest,
    factory: ComponentFactory = Depends(get_factory),
) -> ConvertResponse:
    """Convert a data block between JSON and YAML.

    Args:
        request: Data block with source and target formats.
        factory: Component factory.

    Returns:
        ConvertResponse with the converted data block.

    Raises:
        HTTPException: If the data block cannot be parsed.
    """
    try:
        converted = factory.convert_data(
            request.data,
            request.source_format,
            request.target_format,
        )
    except DataParseError as e:
        logger.warning(f"Conversion {request.source_format} -> {request.target_format} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return ConvertResponse(data=converted, format=request.target_format)
