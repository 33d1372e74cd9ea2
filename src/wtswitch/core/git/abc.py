"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
codebase more testable and maintainable.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- DryRunGit: Wrapper that prints mutating operations instead of running them
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class WorktreeInfo:
    """Information about a single git worktree."""

    path: Path
    branch: str | None
    is_root: bool = False


# ============================================================================
# Abstract Interface
# ============================================================================


class Git(ABC):
    """Abstract interface for git and worktree-directory operations.

    All implementations (real, dry-run and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def get_repo_root(self, cwd: Path) -> Path | None:
        """Get the top-level directory of the repository containing cwd.

        Returns:
            Repository root, or None if cwd is not inside a git repository
        """
        ...

    @abstractmethod
    def list_worktrees(self, repo_root: Path) -> list[WorktreeInfo]:
        """List all worktrees in the repository, in the order git reports them."""
        ...

    @abstractmethod
    def local_branch_exists(self, repo_root: Path, branch: str) -> bool:
        """Check whether refs/heads/<branch> resolves."""
        ...

    @abstractmethod
    def remote_branch_exists(
        self, repo_root: Path, remote: str, branch: str, *, timeout: float | None
    ) -> bool:
        """Check whether the remote advertises a head named branch.

        Performs a network round-trip. Any failure (network error, timeout,
        missing remote) is reported as False rather than raised.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., "origin")
            branch: Branch name without remote prefix
            timeout: Seconds to wait for the remote, or None to wait forever
        """
        ...

    @abstractmethod
    def fetch_remote(self, repo_root: Path, remote: str, *, timeout: float | None) -> None:
        """Fetch all refs from a remote.

        Raises:
            RuntimeError: If the fetch fails or times out
        """
        ...

    @abstractmethod
    def add_worktree(
        self,
        repo_root: Path,
        path: Path,
        *,
        branch: str,
        create_branch: bool,
    ) -> None:
        """Add a new git worktree.

        Args:
            repo_root: Path to the git repository root
            path: Path where the worktree should be created
            branch: Branch to check out (or create) in the new worktree
            create_branch: True to create branch from HEAD, False to check out
                an existing branch

        Raises:
            RuntimeError: If git refuses to create the worktree
        """
        ...

    @abstractmethod
    def path_exists(self, path: Path) -> bool:
        """Check if a path exists on the filesystem.

        In production (RealGit), this delegates to Path.exists(). In tests
        (FakeGit), this checks an in-memory set of existing paths to avoid
        filesystem I/O.
        """
        ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    @abstractmethod
    def ensure_dir(self, path: Path) -> None:
        """Create a directory (and parents) if it does not exist."""
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read a text file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        ...

    @abstractmethod
    def append_text(self, path: Path, content: str) -> None:
        """Append content to an existing text file."""
        ...
