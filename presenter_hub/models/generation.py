"""Request and response models for the generation proxy endpoint.

Field names on the wire are camelCase (``slideBySlide``, ``apiKey``) to
match the browser client; Python code uses snake_case.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PresentationRequest(BaseModel):
    """Body of ``POST /api/presentation``.

    Attributes:
        title: Presentation topic
        content: Extra guidance for the model, may be empty
        slide_by_slide: Ask for the strict "Slide X: Title" format
        api_key: Gemini API key supplied by the user
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, description="Presentation topic")
    content: str = Field("", description="Additional content or instructions")
    slide_by_slide: bool = Field(False, alias="slideBySlide")
    api_key: Optional[str] = Field(None, alias="apiKey")

    def to_wire(self) -> dict:
        """Dump with camelCase field names."""
        return self.model_dump(by_alias=True)


class GenerationResult(BaseModel):
    """Successful response of ``POST /api/presentation``."""

    result: str = Field(..., description="Raw generated presentation text")
    source: str = Field("gemini-api", description="Which backend produced the text")
    title: str = Field("", description="Title echoed back from the request")


class ErrorResponse(BaseModel):
    """Error body returned by the proxy."""

    error: str
