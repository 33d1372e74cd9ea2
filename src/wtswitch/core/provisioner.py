"""Worktree creation through `git worktree add`."""

import logging
from enum import Enum
from pathlib import Path

from wtswitch.core.errors import ProvisioningError
from wtswitch.core.git.abc import Git
from wtswitch.core.ignore_guard import ensure_worktrees_ignored

logger = logging.getLogger(__name__)


class ProvisionMode(Enum):
    """How the new worktree gets its branch."""

    ATTACH_EXISTING = "attach-existing"
    CREATE_NEW = "create-new"


def provision_worktree(
    git: Git,
    repo_root: Path,
    branch: str,
    path: Path,
    mode: ProvisionMode,
    *,
    remote: str,
    worktrees_dir_name: str,
    timeout: float | None,
) -> Path:
    """Materialize a worktree for branch at path.

    ATTACH_EXISTING fetches the remote first so a branch that only exists there
    can be checked out, then binds path to the existing branch.
    CREATE_NEW creates branch from the current HEAD together with the worktree.

    Failures are surfaced, never retried. The .gitignore edit made beforehand is
    not rolled back.

    Returns:
        path, once git has created the worktree

    Raises:
        ProvisioningError: If preparing the worktrees directory, the fetch or the
            worktree creation fails
    """
    logger.debug("Provisioning %s at %s (mode=%s)", branch, path, mode.value)
    try:
        ensure_worktrees_ignored(git, repo_root, worktrees_dir_name=worktrees_dir_name)
        if mode is ProvisionMode.ATTACH_EXISTING:
            git.fetch_remote(repo_root, remote, timeout=timeout)
            git.add_worktree(repo_root, path, branch=branch, create_branch=False)
        else:
            git.add_worktree(repo_root, path, branch=branch, create_branch=True)
    except RuntimeError as e:
        raise ProvisioningError(str(e)) from e
    except OSError as e:
        raise ProvisioningError(f"Could not prepare worktree at {path}: {e}") from e

    return path
