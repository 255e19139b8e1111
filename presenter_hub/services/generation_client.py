"""HTTP client for the generation proxy."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from presenter_hub.models.generation import GenerationResult, PresentationRequest
from presenter_hub.utils.error_handling import GenerationError

logger = logging.getLogger(__name__)

PRESENTATION_PATH = "/api/presentation"


class GenerationClient:
    """Calls ``POST /api/presentation`` on the generation proxy.

    Attributes:
        base_url: Proxy root URL, e.g. http://localhost:5000
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 120.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Proxy root URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def generate(self, request: PresentationRequest) -> GenerationResult:
        """Request generated presentation text.

        Args:
            request: Topic, content and options for the generator

        Returns:
            GenerationResult with the raw text

        Raises:
            GenerationError: On network failure, non-2xx status or a
                response body that is not the expected JSON shape
        """
        url = f"{self.base_url}{PRESENTATION_PATH}"
        logger.info(
            "Requesting presentation",
            extra={"title": request.title, "slide_by_slide": request.slide_by_slide},
        )

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(url, json=request.to_wire())
        except httpx.HTTPError as e:
            logger.error(f"Generation proxy unreachable: {e}")
            raise GenerationError(f"Failed to reach generation proxy: {e}") from e

        if not response.is_success:
            logger.error(
                "Backend error response",
                extra={"status_code": response.status_code, "body": response.text[:500]},
            )
            raise GenerationError(
                "Failed to generate presentation",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            result = GenerationResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise GenerationError(
                f"Unexpected response from generation proxy: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

        logger.info(
            "Received presentation text",
            extra={"title": result.title, "result_length": len(result.result)},
        )
        return result
