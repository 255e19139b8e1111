"""Generation proxy endpoint.

Forwards a topic to Gemini and returns the raw text. The browser client
and ``GenerationClient`` parse the result into slides.
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from presenter_hub.config.settings import get_settings
from presenter_hub.models.generation import ErrorResponse, GenerationResult, PresentationRequest
from presenter_hub.services.llm_generator import PresentationGenerator
from presenter_hub.utils.error_handling import (
    ConfigurationError,
    LLMError,
    format_exception_for_logging,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["presentation"])

SOURCE_NAME = "gemini-api"

_generator: Optional[PresentationGenerator] = None


def get_generator() -> PresentationGenerator:
    """Get the global PresentationGenerator instance."""
    global _generator
    if _generator is None:
        _generator = PresentationGenerator.from_settings(get_settings())
    return _generator


@router.post(
    "/presentation",
    response_model=GenerationResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_presentation(
    request: PresentationRequest,
    generator: PresentationGenerator = Depends(get_generator),
):
    """Generate presentation text for a topic.

    Args:
        request: Title, content, format option and API key

    Returns:
        Raw generated text with its source and the echoed title

    Raises:
        Nothing; failures are reported as 400/500 JSON error bodies
    """
    try:
        text = await asyncio.to_thread(generator.generate, request)
    except ConfigurationError as e:
        logger.warning(f"Generation request rejected: {e}")
        return JSONResponse(status_code=400, content={"error": str(e)})
    except LLMError as e:
        logger.error("Gemini API error", extra=format_exception_for_logging(e))
        return JSONResponse(status_code=500, content={"error": "Failed to generate presentation"})

    logger.info(
        "Generated presentation",
        extra={"title": request.title, "result_length": len(text)},
    )
    return GenerationResult(result=text, source=SOURCE_NAME, title=request.title)
