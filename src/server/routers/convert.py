"""Conversion and health endpoints."""

from __future__ import annotations

import asyncio
from typing import Callable

from fastapi import APIRouter

from dumbdown.converter import convert
from dumbdown.exceptions import ConversionError
from dumbdown.markdown_converter import convert_markdown
from dumbdown.token_count import count_tokens
from dumbdown.utils.logging_config import get_logger
from server.models import (
    ConvertRequest,
    ConvertSuccessResponse,
    ErrorResponse,
    HealthResponse,
    MarkdownConvertRequest,
)
from server.server_config import CONVERT_TIMEOUT_S

logger = get_logger(__name__)

router = APIRouter()

COMMON_CONVERT_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    500: {"model": ErrorResponse, "description": "Conversion failed"},
}


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report that the service is up."""
    return HealthResponse()


@router.post("/convert", response_model=ConvertSuccessResponse, responses=COMMON_CONVERT_RESPONSES)
async def api_convert(convert_request: ConvertRequest) -> ConvertSuccessResponse:
    """Convert HTML to Dumbdown.

    **Parameters**

    - **convert_request** (`ConvertRequest`): body of the form ``{"text": "..."}``

    **Returns**

    - **ConvertSuccessResponse**: ``{"success": true, "dumbdown": "..."}``

    """
    return await _perform_conversion(convert, convert_request.text)


@router.post("/convert-markdown", response_model=ConvertSuccessResponse, responses=COMMON_CONVERT_RESPONSES)
async def api_convert_markdown(convert_request: MarkdownConvertRequest) -> ConvertSuccessResponse:
    """Convert Markdown to Dumbdown.

    **Parameters**

    - **convert_request** (`MarkdownConvertRequest`): body of the form ``{"markdown": "..."}``

    **Returns**

    - **ConvertSuccessResponse**: ``{"success": true, "dumbdown": "..."}``

    """
    return await _perform_conversion(convert_markdown, convert_request.markdown)


async def _perform_conversion(converter: Callable[[str], str], source: str) -> ConvertSuccessResponse:
    """Run ``converter`` off the event loop under the configured wall-clock bound."""
    try:
        dumbdown = await asyncio.wait_for(
            asyncio.to_thread(converter, source),
            timeout=CONVERT_TIMEOUT_S,
        )
    except asyncio.TimeoutError as exc:
        logger.error(
            "Conversion timed out",
            extra={"input_chars": len(source), "timeout_s": CONVERT_TIMEOUT_S},
        )
        raise ConversionError("Conversion timed out") from exc

    return ConvertSuccessResponse(
        dumbdown=dumbdown,
        estimated_tokens=count_tokens(dumbdown),
    )
