"""Error hierarchy for commit message generation.

Both failure kinds are recovered by the interaction controller and shown
to the user as ``Error: <description>``.
"""


class CommitMessageError(Exception):
    """Base class for errors raised while producing a commit message."""


class DiffUnavailableError(CommitMessageError):
    """The staged diff could not be read from the local repository."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class GenerationFailedError(CommitMessageError):
    """The chat-completion service call failed."""


class EmptyResponseError(GenerationFailedError):
    """The chat-completion service returned zero choices."""
