from typing import Any

from .base import LLMProvider
from .providers import OpenAIProvider

SUPPORTED_PROVIDERS = ("openai",)


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create an LLM provider instance.

    Args:
        provider: Provider type (only 'openai' is supported)
        **config: Provider-specific configuration
            For OpenAI:
                - api_key: str | None (default: read OPENAI_API_KEY at call time)
                - model: str (default: 'gpt-3.5-turbo')
                - base_url: str | None
                - timeout: float | None
                - max_retries: int (default: 0)

    Returns:
        Initialized LLM provider instance

    Raises:
        ValueError: If provider type is not supported

    Examples:
        >>> provider = create_llm_provider("openai", model="gpt-4o-mini")
    """
    if provider.lower() == "openai":
        return OpenAIProvider(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: {', '.join(repr(p) for p in SUPPORTED_PROVIDERS)}"
    )
