"""Commit message generation.

Composes the two steps behind a single ``generate()`` call:
read the staged diff, then ask the completion service for a message.
"""

import asyncio
from collections.abc import Callable

from .errors import GenerationFailedError
from .git import fetch_staged_diff
from .llm import ChatMessage, LLMProvider
from .prompts import get_system_prompt, render_commit_prompt

# Callable(level, component, message); level is 'debug', 'info', 'warning' or 'error'
DebugCallback = Callable[[str, str, str], None]


def build_messages(diff: str) -> list[ChatMessage]:
    """Build the fixed two-message prompt for a diff."""
    return [
        ChatMessage(role="system", content=get_system_prompt()),
        ChatMessage(role="user", content=render_commit_prompt(diff)),
    ]


class CommitMessageGenerator:
    """Produces commit-message text from the repository's staged changes."""

    def __init__(
        self,
        llm: LLMProvider,
        model: str | None = None,
        diff_source: Callable[[], str] = fetch_staged_diff,
    ) -> None:
        """Initialize the generator.

        Args:
            llm: Provider used for the completion call
            model: Model override (None uses the provider's default)
            diff_source: Callable returning the staged diff text
        """
        self._llm = llm
        self._model = model
        self._diff_source = diff_source
        self._debug_callback: DebugCallback | None = None

    @property
    def llm(self) -> LLMProvider:
        return self._llm

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the callback receiving (level, component, message) log entries."""
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    async def fetch_staged_diff(self) -> str:
        """Read the staged diff without blocking the event loop.

        Raises:
            DiffUnavailableError: If git cannot produce the diff
        """
        self._debug("debug", "Git", "Running git diff --cached")
        diff = await asyncio.to_thread(self._diff_source)
        if diff:
            self._debug("info", "Git", f"Staged diff: {len(diff.splitlines())} lines")
        else:
            self._debug("warning", "Git", "Nothing is staged; sending an empty diff")
        return diff

    async def generate_commit_message(self, diff: str) -> str:
        """Ask the completion service for a commit message describing ``diff``.

        An empty diff is sent as-is.

        Returns:
            Text of the first completion choice

        Raises:
            GenerationFailedError: If the service call fails
            EmptyResponseError: If the service returns no choices
        """
        messages = build_messages(diff)
        self._debug("debug", "LLM", f"Requesting completion ({len(messages)} messages)")

        try:
            response = await self._llm.chat_completion(messages, model=self._model)
        except GenerationFailedError as e:
            self._debug("error", "LLM", str(e))
            raise
        except Exception as e:
            self._debug("error", "LLM", f"{type(e).__name__}: {e}")
            raise GenerationFailedError(f"{type(e).__name__}: {e}") from e

        if response.usage:
            self._debug(
                "info",
                "LLM",
                f"{response.model}: {response.usage.get('total_tokens', 0)} tokens",
            )
        return response.content

    async def generate(self) -> str:
        """Fetch the staged diff and generate a commit message for it.

        The completion call is skipped when the diff cannot be read.

        Raises:
            DiffUnavailableError: If the staged diff cannot be read
            GenerationFailedError: If the completion call fails
        """
        diff = await self.fetch_staged_diff()
        return await self.generate_commit_message(diff)
