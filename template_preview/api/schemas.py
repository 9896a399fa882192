"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.
"""

from typing import Literal

from pydantic import BaseModel, Field

DataFormat = Literal["json", "yaml"]


# =============================================================================
# Render Schemas
# =============================================================================


class RenderRequest(BaseModel):
    """Request schema for rendering a template preview."""

    template: str = Field(description="Template source, slice syntax allowed")
    data: str = Field(default="", description="Data block in `data_format`")
    data_format: DataFormat | None = Field(
        default=None,
        description="Format of the data block. Defaults to the server setting.",
    )


class RenderResponse(BaseModel):
    """Response for a render request.

    Data and template failures are reported in `error` with an empty
    `output`, not as HTTP errors.
    """

    output: str = Field(description="Rendered text, empty on error")
    error: str | None = Field(default=None, description="Display message on failure")
    rewritten_template: str | None = Field(
        default=None, description="Template after slice-syntax rewriting"
    )
    ok: bool = Field(description="True when rendering succeeded")


# =============================================================================
# Preprocess Schemas
# =============================================================================


class PreprocessRequest(BaseModel):
    """Request schema for slice-syntax rewriting."""

    template: str = Field(description="Template source to rewrite")


class PreprocessResponse(BaseModel):
    """Response for slice-syntax rewriting."""

    template: str = Field(description="The original template source")
    rewritten: str = Field(description="The rewritten template source")
    rewrites: int = Field(ge=0, description="Number of slice expressions rewritten")


# =============================================================================
# Convert Schemas
# =============================================================================


class ConvertRequest(BaseModel):
    """Request schema for converting a data block between formats."""

    data: str = Field(description="Data block in `source_format`")
    source_format: DataFormat = Field(description="Current format of the data block")
    target_format: DataFormat = Field(description="Format to convert to")


class ConvertResponse(BaseModel):
    """Response for a data conversion."""

    data: str = Field(description="Data block in the target format")
    format: DataFormat = Field(description="Format of `data`")


# =============================================================================
# Error Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(description="Error message")
    error_code: str | None = Field(default=None, description="Machine-readable error code")
