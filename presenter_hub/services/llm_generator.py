"""
Gemini-backed presentation text generation for the proxy.

The proxy builds a prompt from ``prompts.yaml`` and sends it to Gemini
through LangChain. The returned text is passed through unparsed; parsing
happens on the client side.
"""

import logging
from typing import Any, Optional

from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from presenter_hub.models.generation import PresentationRequest
from presenter_hub.utils.error_handling import ConfigurationError, LLMError

logger = logging.getLogger(__name__)


def build_prompt(request: PresentationRequest, prompts: dict[str, Any]) -> str:
    """
    Fill the prompt template matching the request's format option.

    Args:
        request: Incoming generation request
        prompts: Prompt templates with ``slide_by_slide`` and ``outline`` keys

    Returns:
        The prompt text

    Raises:
        ConfigurationError: If the needed template is missing
    """
    key = "slide_by_slide" if request.slide_by_slide else "outline"
    template = prompts.get(key)
    if not template:
        raise ConfigurationError(f"Prompt template '{key}' is not configured")
    return template.format(title=request.title, content=request.content)


def _message_text(content: Any) -> str:
    """Flatten message content, which may be a string or a list of parts."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class PresentationGenerator:
    """
    Sends presentation prompts to a Gemini chat model.

    Attributes:
        model_name: Gemini model name
        temperature: Sampling temperature
        max_output_tokens: Response length limit
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        prompts: dict[str, Any],
        model_name: str = "gemini-1.5-flash",
        temperature: float = 0.7,
        max_output_tokens: int = 2048,
        timeout: int = 60,
        default_api_key: Optional[str] = None,
    ):
        self.prompts = prompts
        self.model_name = model_name
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.timeout = timeout
        self.default_api_key = default_api_key

    @classmethod
    def from_settings(cls, settings) -> "PresentationGenerator":
        """Create a generator from AppSettings."""
        return cls(
            prompts=settings.prompts,
            model_name=settings.llm.model,
            temperature=settings.llm.temperature,
            max_output_tokens=settings.llm.max_output_tokens,
            timeout=settings.llm.timeout,
            default_api_key=settings.gemini_api_key,
        )

    def resolve_api_key(self, request: PresentationRequest) -> str:
        """
        Use the key sent with the request, else the configured default.

        Raises:
            ConfigurationError: If neither is available
        """
        api_key = request.api_key or self.default_api_key
        if not api_key:
            raise ConfigurationError("No Gemini API key supplied with the request or configured")
        return api_key

    def _create_model(self, api_key: str) -> ChatGoogleGenerativeAI:
        return ChatGoogleGenerativeAI(
            model=self.model_name,
            google_api_key=api_key,
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
            timeout=self.timeout,
        )

    def generate(self, request: PresentationRequest) -> str:
        """
        Generate raw presentation text.

        Args:
            request: Topic, content and options

        Returns:
            Model output text

        Raises:
            ConfigurationError: If no API key or prompt template is available
            LLMError: If the model call fails
        """
        api_key = self.resolve_api_key(request)
        prompt = build_prompt(request, self.prompts)
        model = self._create_model(api_key)

        logger.info(
            "Calling Gemini",
            extra={
                "model": self.model_name,
                "slide_by_slide": request.slide_by_slide,
                "prompt_length": len(prompt),
            },
        )
        try:
            response = model.invoke([HumanMessage(content=prompt)])
        except Exception as e:
            raise LLMError(f"Gemini API error: {e}") from e

        text = _message_text(response.content)
        logger.info("Gemini response received", extra={"result_length": len(text)})
        return text
