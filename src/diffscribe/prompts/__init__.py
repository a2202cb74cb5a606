"""Prompt management module.

Prompts are shipped as text files inside the package and never
overridden at runtime, so every run sends the same instruction.
"""

from functools import lru_cache
from pathlib import Path

_PROMPTS_DIR = Path(__file__).parent


@lru_cache(maxsize=8)
def load_prompt(name: str) -> str:
    """Load a prompt from the package prompts directory.

    Args:
        name: Prompt name (without .txt extension)

    Returns:
        Prompt text without the trailing newline

    Raises:
        FileNotFoundError: If the prompt file does not exist
    """
    path = _PROMPTS_DIR / f"{name}.txt"
    if not path.exists():
        raise FileNotFoundError(f"Prompt '{name}' not found at {path}")
    return path.read_text(encoding="utf-8").rstrip("\n")


def get_system_prompt() -> str:
    """Get the system instruction fixing the assistant's persona."""
    return load_prompt("system")


def render_commit_prompt(diff: str) -> str:
    """Embed a diff into the commit request template."""
    return load_prompt("commit").format(diff=diff)


__all__ = [
    "get_system_prompt",
    "load_prompt",
    "render_commit_prompt",
]
