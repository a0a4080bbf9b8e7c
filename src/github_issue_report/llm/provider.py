"""Abstract base class for LLM providers."""

from abc import ABC, abstractmethod
from typing import Any


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Classification only needs schema-constrained chat completions, but plain
    chat is kept on the interface so providers stay usable on their own.
    """

    @abstractmethod
    def chat(
        self,
        messages: list[dict[str, str]],
        max_tokens: int | None = None,
        temperature: float | None = None,
        **kwargs: Any,
    ) -> str:
        """Generate chat completion from messages.

        Args:
            messages: List of message dicts with 'role' and 'content'.
            max_tokens: Maximum tokens to generate.
            temperature: Sampling temperature.
            **kwargs: Additional provider-specific parameters.

        Returns:
            Generated chat response.
        """
        pass

    @abstractmethod
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
            json_schema: Named schema envelope ({"name", "schema", ...}).
            max_tokens: Maximum tokens to generate.
            temperature: Sampling temperature.

        Returns:
            The raw JSON text produced by the model.

        Raises:
            CompletionError: If the model refused or returned no content.
        """
        pass
