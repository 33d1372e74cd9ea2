"""Repository discovery functionality.

Discovers the git repository root from a given path without requiring the full
WtsContext.
"""

from dataclasses import dataclass
from pathlib import Path

from wtswitch.core.git.abc import Git


@dataclass(frozen=True)
class RepoContext:
    """Represents a git repo root and its managed worktrees directory."""

    root: Path
    worktrees_dir: Path  # <root>/.worktrees


@dataclass(frozen=True)
class NoRepoSentinel:
    """Sentinel value indicating execution outside a git repository.

    Commands that require repo context check for this sentinel and fail fast.
    """

    message: str = "Not inside a git repository"


def discover_repo_or_sentinel(
    cwd: Path, git: Git, *, worktrees_dir_name: str
) -> RepoContext | NoRepoSentinel:
    """Resolve the repository root for `cwd`.

    Uses `git rev-parse --show-toplevel`, so when invoked from inside a linked
    worktree the root is that worktree's top level, matching where git itself
    would place paths.

    Args:
        cwd: Current working directory to start from
        git: Git operations interface
        worktrees_dir_name: Directory under the root holding worktrees

    Returns:
        RepoContext if inside a git repository, NoRepoSentinel otherwise
    """
    if not git.path_exists(cwd):
        return NoRepoSentinel(message=f"Start path '{cwd}' does not exist")

    root = git.get_repo_root(cwd)
    if root is None:
        return NoRepoSentinel()

    return RepoContext(root=root, worktrees_dir=root / worktrees_dir_name)
