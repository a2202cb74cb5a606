"""Session state for the TUI.

The state is a single tagged variant; the displayed message is a total
function of which variant is current.
"""

from dataclasses import dataclass

from .config import GENERATING_PLACEHOLDER


@dataclass(frozen=True)
class Idle:
    """Nothing generated yet."""


@dataclass(frozen=True)
class Generating:
    """A generation request is in flight."""


@dataclass(frozen=True)
class Success:
    """A commit message was generated."""

    text: str


@dataclass(frozen=True)
class Failure:
    """Generation failed; ``description`` is the error text."""

    description: str
    error_type: str = "Error"


SessionState = Idle | Generating | Success | Failure


def displayed_message(state: SessionState) -> str:
    """Return the text shown in the commit message panel for ``state``."""
    if isinstance(state, Success):
        return state.text
    if isinstance(state, Failure):
        return f"Error: {state.description}"
    if isinstance(state, Generating):
        return GENERATING_PLACEHOLDER
    return ""
