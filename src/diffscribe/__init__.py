"""
Diffscribe: an interactive terminal tool that drafts git commit messages.

The staged diff of the current repository is sent to an LLM chat-completion
endpoint and the first generated choice is shown in a Textual UI.
"""

__version__ = "0.1.0"

from .errors import (
    CommitMessageError,
    DiffUnavailableError,
    EmptyResponseError,
    GenerationFailedError,
)
from .generator import CommitMessageGenerator
from .git import fetch_staged_diff

__all__ = [
    "CommitMessageError",
    "CommitMessageGenerator",
    "DiffUnavailableError",
    "EmptyResponseError",
    "GenerationFailedError",
    "fetch_staged_diff",
]
