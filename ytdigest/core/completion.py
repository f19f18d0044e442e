"""
Module for sending prompts to the hosted chat-completion endpoint.
"""

from typing import Optional

from langchain.chat_models import init_chat_model
from langchain_core.messages import HumanMessage, SystemMessage

from ytdigest.config import config
from ytdigest.models.schemas import PromptRequest
from ytdigest.utils.error_handling import (
    MODEL_UNAVAILABLE_MESSAGE,
    ConfigurationError,
    ModelUnavailableError,
)
from ytdigest.utils.logger import logging

RATE_LIMIT_STATUS = 429


def _is_rate_limited(error: Exception) -> bool:
    """Check whether an upstream error is a 429 style rate limit."""
    status = getattr(error, "status_code", None)
    if status is None:
        status = getattr(getattr(error, "response", None), "status_code", None)
    return status == RATE_LIMIT_STATUS


class CompletionRequester:
    """Class to handle chat-completion requests."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model_provider: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ):
        """
        Initialize the requester.

        Args:
            api_key: Bearer credential for the endpoint (defaults to OPENROUTER_API_KEY)
            base_url: Endpoint base URL (defaults to OPENROUTER_BASE_URL)
            model_provider: langchain model provider name
            max_tokens: Output token ceiling
        """
        self.api_key = api_key if api_key is not None else config.OPENROUTER_API_KEY
        self.base_url = base_url or config.OPENROUTER_BASE_URL
        self.model_provider = model_provider or config.MODEL_PROVIDER
        self.max_tokens = max_tokens or config.MAX_OUTPUT_TOKENS

    def complete(self, request: PromptRequest, fallback: str) -> str:
        """
        Send a prompt and return the first choice's text.

        Args:
            request: Prompt pair and model identifier
            fallback: Text returned when the model sends back no content

        Returns:
            Generated text
        """
        if not self.api_key:
            raise ConfigurationError("API key not configured")

        llm = init_chat_model(
            model=request.model,
            model_provider=self.model_provider,
            api_key=self.api_key,
            base_url=self.base_url,
            max_tokens=min(request.max_tokens, self.max_tokens),
        )
        messages = [
            SystemMessage(content=request.system_prompt),
            HumanMessage(content=request.user_prompt),
        ]

        logging.info(f"Requesting completion from {request.model} "
                     f"(system={len(request.system_prompt)} chars, user={len(request.user_prompt)} chars)")
        try:
            response = llm.invoke(messages)
        except Exception as e:
            if _is_rate_limited(e):
                logging.warning(f"Model {request.model} is rate limited: {e}")
                raise ModelUnavailableError(MODEL_UNAVAILABLE_MESSAGE) from e
            raise

        content = response.content if response is not None else None
        if not content:
            logging.warning(f"Model {request.model} returned no content")
            return fallback
        return content
