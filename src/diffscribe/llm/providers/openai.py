import os
from typing import Any

from openai import AsyncOpenAI, OpenAIError

from ...errors import EmptyResponseError, GenerationFailedError
from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse

DEFAULT_MODEL = "gpt-3.5-turbo"


class OpenAIProvider(LLMProvider):
    """OpenAI chat-completion provider.

    Hidden design decisions:
    - OpenAI API client initialization (deferred until the first request)
    - Message format conversion
    - Mapping SDK errors onto GenerationFailedError
    - Authentication mechanism (bearer key, read from OPENAI_API_KEY at call time)
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int = 0,
        **client_kwargs: Any
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key (None reads OPENAI_API_KEY when the client is created)
            model: Default model to use
            base_url: Optional custom API base URL
            timeout: Request timeout in seconds (None keeps the SDK default)
            max_retries: SDK retry count; 0 disables retries
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._api_key = api_key
        self._model = model
        self._base_url = base_url
        self._timeout = timeout
        self._max_retries = max_retries
        self._client_kwargs = client_kwargs
        self._client: AsyncOpenAI | None = None

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            api_key = self._api_key
            if api_key is None:
                api_key = os.environ.get("OPENAI_API_KEY")

            client_options: dict[str, Any] = {
                "api_key": api_key,
                "base_url": self._base_url,
                "max_retries": self._max_retries,
                **self._client_kwargs,
            }
            if self._timeout is not None:
                client_options["timeout"] = self._timeout

            # Raises OpenAIError when no key is available
            self._client = AsyncOpenAI(**client_options)
        return self._client

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion using OpenAI.

        Args:
            messages: Ordered role-tagged messages
            model: Model to use (overrides default)
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            **kwargs: Additional OpenAI-specific parameters

        Returns:
            LLMResponse with the content of the first choice

        Raises:
            GenerationFailedError: On connection, timeout, authentication,
                rate-limit or request validation errors
            EmptyResponseError: If the response carries no choices
        """
        model_to_use = model or self._model

        request_params: dict[str, Any] = {
            "model": model_to_use,
            "messages": [
                {"role": msg.role, "content": msg.content}
                for msg in messages
            ],
            **kwargs
        }
        if temperature is not None:
            request_params["temperature"] = temperature
        if max_tokens is not None:
            request_params["max_tokens"] = max_tokens

        try:
            client = self._get_client()
            completion = await client.chat.completions.create(**request_params)
        except OpenAIError as e:
            raise GenerationFailedError(str(e)) from e

        if not completion.choices:
            raise EmptyResponseError(f"{model_to_use} returned no completion choices")

        usage = None
        if completion.usage:
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens
            }

        return LLMResponse(
            content=completion.choices[0].message.content or "",
            model=completion.model or model_to_use,
            usage=usage
        )

    async def close(self) -> None:
        """Close the OpenAI client if one was created."""
        if self._client is not None:
            client, self._client = self._client, None
            await client.close()
