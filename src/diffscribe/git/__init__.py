"""Local repository access.

Hides how the staged diff is obtained (a ``git`` subprocess).
"""

from .diff import GIT_DIFF_COMMAND, GIT_WORK_TREE_COMMAND, fetch_staged_diff

__all__ = ["GIT_DIFF_COMMAND", "GIT_WORK_TREE_COMMAND", "fetch_staged_diff"]
