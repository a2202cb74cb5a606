import subprocess
from pathlib import Path

from ..errors import DiffUnavailableError

# Diff of the index against HEAD
GIT_DIFF_COMMAND = ["git", "diff", "--cached"]

# Outside a work tree `git diff` falls back to --no-index mode and
# rejects --cached with a usage dump, so the repository is checked first
GIT_WORK_TREE_COMMAND = ["git", "rev-parse", "--is-inside-work-tree"]


def _run_git(command: list[str], cwd: str | Path | None) -> str:
    label = " ".join(GIT_DIFF_COMMAND)
    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        detail = stderr.splitlines()[0] if stderr else f"exit status {e.returncode}"
        raise DiffUnavailableError(
            f"{label} failed: {detail}",
            command=command,
            returncode=e.returncode,
            stderr=stderr,
        ) from e
    except OSError as e:
        raise DiffUnavailableError(
            f"could not run {label}: {e}",
            command=command,
        ) from e

    return result.stdout


def fetch_staged_diff(cwd: str | Path | None = None) -> str:
    """Return the textual diff of the currently staged changes.

    Args:
        cwd: Directory to run git in (defaults to the process working directory)

    Returns:
        The output of ``git diff --cached``; empty string if nothing is staged

    Raises:
        DiffUnavailableError: If git cannot be started, ``cwd`` is not inside a
            work tree, or the diff exits with a non-zero status. The message
            carries the first line of git's stderr; ``stderr`` keeps all of it.
    """
    _run_git(list(GIT_WORK_TREE_COMMAND), cwd)
    return _run_git(list(GIT_DIFF_COMMAND), cwd)
