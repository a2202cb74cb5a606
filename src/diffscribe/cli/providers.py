"""Provider factory functions for CLI.

Centralizes creation of the LLM provider and generator from options and
environment variables.
"""

from ..generator import CommitMessageGenerator
from ..llm import DEFAULT_MODEL, LLMProvider, create_llm_provider


def get_llm(model: str = DEFAULT_MODEL, timeout: float | None = None) -> LLMProvider:
    """Create the OpenAI provider.

    The key is not checked here: OPENAI_API_KEY (and OPENAI_BASE_URL) are
    read by the client on the first request, so a missing key shows up as
    a generation error inside the TUI.

    Args:
        model: Chat model identifier
        timeout: Request timeout in seconds, None for the SDK default
    """
    return create_llm_provider("openai", model=model, timeout=timeout)


def get_generator(model: str = DEFAULT_MODEL, timeout: float | None = None) -> CommitMessageGenerator:
    """Create a generator reading the staged diff of the working directory."""
    return CommitMessageGenerator(get_llm(model=model, timeout=timeout))
