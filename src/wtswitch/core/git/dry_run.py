"""Dry-run Git wrapper.

This module provides a Git wrapper that prevents execution of mutating
operations while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

import click

from wtswitch.cli.output import user_output
from wtswitch.core.git.abc import Git, WorktreeInfo

DRY_RUN_PREFIX = click.style("[DRY RUN]", fg="yellow", bold=True)


class DryRunGit(Git):
    """Wrapper that prints mutating operations instead of executing them.

    Usage:
        real_ops = RealGit()
        dry_run_ops = DryRunGit(real_ops)

        # Prints "[DRY RUN] Would run: git fetch origin" instead of fetching
        dry_run_ops.fetch_remote(repo_root, "origin", timeout=None)
    """

    def __init__(self, wrapped: Git) -> None:
        """Create a dry-run wrapper around a Git implementation.

        Args:
            wrapped: The Git implementation to wrap (usually RealGit or FakeGit)
        """
        self._wrapped = wrapped

    # Read-only operations: delegate to wrapped implementation

    def get_repo_root(self, cwd: Path) -> Path | None:
        """Get repository root (read-only, delegates to wrapped)."""
        return self._wrapped.get_repo_root(cwd)

    def list_worktrees(self, repo_root: Path) -> list[WorktreeInfo]:
        """List all worktrees (read-only, delegates to wrapped)."""
        return self._wrapped.list_worktrees(repo_root)

    def local_branch_exists(self, repo_root: Path, branch: str) -> bool:
        """Check local branch (read-only, delegates to wrapped)."""
        return self._wrapped.local_branch_exists(repo_root, branch)

    def remote_branch_exists(
        self, repo_root: Path, remote: str, branch: str, *, timeout: float | None
    ) -> bool:
        """Check remote branch (read-only, delegates to wrapped)."""
        return self._wrapped.remote_branch_exists(repo_root, remote, branch, timeout=timeout)

    def path_exists(self, path: Path) -> bool:
        """Check if path exists (read-only, delegates to wrapped)."""
        return self._wrapped.path_exists(path)

    def is_dir(self, path: Path) -> bool:
        """Check if path is directory (read-only, delegates to wrapped)."""
        return self._wrapped.is_dir(path)

    def read_text(self, path: Path) -> str:
        """Read file (read-only, delegates to wrapped)."""
        return self._wrapped.read_text(path)

    # Mutating operations: print instead of executing

    def fetch_remote(self, repo_root: Path, remote: str, *, timeout: float | None) -> None:
        """Print the fetch that would run."""
        user_output(f"{DRY_RUN_PREFIX} Would run: git fetch {remote}")

    def add_worktree(
        self,
        repo_root: Path,
        path: Path,
        *,
        branch: str,
        create_branch: bool,
    ) -> None:
        """Print the worktree creation that would run."""
        if create_branch:
            cmd = f"git worktree add -b {branch} {path}"
        else:
            cmd = f"git worktree add {path} {branch}"
        user_output(f"{DRY_RUN_PREFIX} Would run: {cmd}")

    def ensure_dir(self, path: Path) -> None:
        """Print the directory that would be created."""
        if not self._wrapped.is_dir(path):
            user_output(f"{DRY_RUN_PREFIX} Would create directory: {path}")

    def append_text(self, path: Path, content: str) -> None:
        """Print the file that would be appended to."""
        user_output(f"{DRY_RUN_PREFIX} Would append to {path}: {content.strip()!r}")
