"""Pydantic models for the conversion API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from server.server_config import MAX_INPUT_CHARS


def _require_content(value: str, field_name: str) -> str:
    if not value.strip():
        err = f"{field_name} cannot be empty"
        raise ValueError(err)
    return value


class ConvertRequest(BaseModel):
    """Request model for the /convert endpoint.

    Attributes
    ----------
    text : str
        The HTML to convert.

    """

    text: str = Field(..., max_length=MAX_INPUT_CHARS, description="HTML to convert")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate that ``text`` is not blank."""
        return _require_content(v, "text")


class MarkdownConvertRequest(BaseModel):
    """Request model for the /convert-markdown endpoint.

    Attributes
    ----------
    markdown : str
        The Markdown source to convert.

    """

    markdown: str = Field(..., max_length=MAX_INPUT_CHARS, description="Markdown to convert")

    @field_validator("markdown")
    @classmethod
    def validate_markdown(cls, v: str) -> str:
        """Validate that ``markdown`` is not blank."""
        return _require_content(v, "markdown")


class ConvertSuccessResponse(BaseModel):
    """Success response for both conversion endpoints.

    Attributes
    ----------
    success : bool
        Always ``True``.
    dumbdown : str
        The converted text.
    estimated_tokens : int | None
        Token count of ``dumbdown`` when tiktoken is installed.

    """

    success: bool = Field(default=True, description="Conversion succeeded")
    dumbdown: str = Field(..., description="Converted Dumbdown text")
    estimated_tokens: int | None = Field(default=None, description="Token count of the converted text")


class ErrorResponse(BaseModel):
    """Error response for the API.

    Attributes
    ----------
    error : str
        Short error category.
    message : str
        Human-readable detail.

    """

    error: str = Field(..., description="Error category")
    message: str = Field(..., description="Error detail")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
