"""OpenAI LLM provider implementation."""

import logging
from typing import Any

from openai import OpenAI

from github_issue_report.core.config import LLMConfig
from github_issue_report.errors import CompletionError
from github_issue_report.llm.provider import LLMProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """OpenAI API provider implementation."""

    def __init__(self, config: LLMConfig, client: OpenAI | None = None) -> None:
        """Initialize the OpenAI provider.

        Args:
            config: LLM configuration.
            client: Pre-built client, mainly for tests.

        Raises:
            ValueError: If API key is not provided.
        """
        if not config.api_key:
            raise ValueError("OpenAI API key is required")

        self.config = config
        self.client = client or OpenAI(api_key=config.api_key, base_url=config.base_url)
        self.model = config.model
        self.temperature = config.temperature
        self.max_tokens = config.max_tokens

        logger.info(f"OpenAI provider initialized with model: {self.model}")

    def chat(
        self,
        messages: list[dict[str, str]],
        max_tokens: int | None = None,
        temperature: float | None = None,
        **kwargs: Any,
    ) -> str:
        """Generate chat completion using OpenAI API.

        Args:
            messages: List of message dicts with 'role' and 'content'.
            max_tokens: Maximum tokens to generate.
            temperature: Sampling temperature.
            **kwargs: Additional OpenAI-specific parameters.

        Returns:
            Generated chat response.

        Raises:
            CompletionError: If the model refused the request.
        """
        temp = temperature if temperature is not None else self.temperature

        logger.debug(f"Generating chat completion with {len(messages)} messages")

        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,  # type: ignore
            max_tokens=max_tokens or self.max_tokens,
            temperature=temp,
            **kwargs,
        )

        message = response.choices[0].message
        if getattr(message, "refusal", None):
            raise CompletionError(f"Model refused the request: {message.refusal}")

        content = message.content or ""
        logger.debug(f"Generated {len(content)} characters")

        return content

    def structured_chat(
        self,
        messages: list[dict[str, str]],
        json_schema: dict[str, Any],
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> str:
        """Generate a chat completion constrained to a JSON schema.

        Args:
            messages: List of message dicts with 'role' and 'content'.
            json_schema: Named schema envelope passed as ``response_format``.
            max_tokens: Maximum tokens to generate.
            temperature: Sampling temperature.

        Returns:
            The JSON document produced by the model.

        Raises:
            CompletionError: If the model refused or returned nothing.
        """
        content = self.chat(
            messages,
            max_tokens=max_tokens,
            temperature=temperature,
            response_format={"type": "json_schema", "json_schema": json_schema},
        )
        if not content.strip():
            raise CompletionError(
                f"Empty structured response for schema {json_schema.get('name')!r}"
            )
        return content
