"""Existence probes that classify a switch/create request."""

import logging
from dataclasses import dataclass
from pathlib import Path

from wtswitch.core.git.abc import Git, WorktreeInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExistenceFacts:
    """Snapshot of what exists for a branch, taken once per invocation."""

    worktree_exists: bool
    local_branch_exists: bool
    # None when the remote was not queried because the branch exists locally
    remote_branch_exists: bool | None

    @property
    def branch_exists(self) -> bool:
        return self.local_branch_exists or bool(self.remote_branch_exists)


def probe_existence(
    git: Git,
    repo_root: Path,
    branch: str,
    path: Path,
    *,
    remote: str,
    timeout: float | None,
) -> ExistenceFacts:
    """Compute the three existence facts for a branch.

    A directory at `path` counts as an existing worktree; whether git has it
    registered is not checked here (see is_registered_worktree).

    The remote is only queried when no local branch exists.

    Args:
        git: Git operations interface
        repo_root: Repository root
        branch: Git-facing branch name (remote prefix already stripped)
        path: Mapped worktree path for branch
        remote: Remote to query
        timeout: Seconds to wait for the remote, or None

    Returns:
        ExistenceFacts for the request
    """
    worktree_exists = git.is_dir(path)
    local_exists = git.local_branch_exists(repo_root, branch)
    remote_exists: bool | None = None
    if not local_exists:
        remote_exists = git.remote_branch_exists(repo_root, remote, branch, timeout=timeout)

    facts = ExistenceFacts(
        worktree_exists=worktree_exists,
        local_branch_exists=local_exists,
        remote_branch_exists=remote_exists,
    )
    logger.debug("Existence facts for %s at %s: %s", branch, path, facts)
    return facts


def is_registered_worktree(worktrees: list[WorktreeInfo], path: Path) -> bool:
    """Check whether git's worktree registry contains path."""
    resolved = path.resolve()
    return any(wt.path.resolve() == resolved for wt in worktrees)
