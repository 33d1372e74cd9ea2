"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import logging
import subprocess
from pathlib import Path

from wtswitch.core.git.abc import Git, WorktreeInfo
from wtswitch.core.git.parsing import parse_worktree_porcelain
from wtswitch.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def get_repo_root(self, cwd: Path) -> Path | None:
        """Get the top-level directory of the repository containing cwd."""
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--show-toplevel"],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            logger.debug("git binary not found or cwd missing: %s", cwd)
            return None

        if result.returncode != 0:
            return None

        root = result.stdout.strip()
        if not root:
            return None
        return Path(root)

    def list_worktrees(self, repo_root: Path) -> list[WorktreeInfo]:
        """List all worktrees in the repository."""
        result = run_subprocess_with_context(
            ["git", "worktree", "list", "--porcelain"],
            operation_context="list worktrees",
            cwd=repo_root,
        )
        return parse_worktree_porcelain(result.stdout)

    def local_branch_exists(self, repo_root: Path, branch: str) -> bool:
        """Check whether refs/heads/<branch> resolves."""
        result = subprocess.run(
            ["git", "show-ref", "--verify", "--quiet", f"refs/heads/{branch}"],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        return result.returncode == 0

    def remote_branch_exists(
        self, repo_root: Path, remote: str, branch: str, *, timeout: float | None
    ) -> bool:
        """Check whether the remote advertises a head named branch.

        Note: failures are folded into False. `--exit-code` makes git exit 2
        when no matching ref exists; network and auth errors exit 128. Neither
        is distinguishable from the caller's point of view.
        """
        try:
            result = subprocess.run(
                ["git", "ls-remote", "--exit-code", "--heads", remote, branch],
                cwd=repo_root,
                capture_output=True,
                text=True,
                check=False,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            logger.debug("ls-remote %s %s timed out after %ss", remote, branch, timeout)
            return False
        except FileNotFoundError:
            logger.debug("git binary not found, treating %s as absent on %s", branch, remote)
            return False

        if result.returncode != 0:
            logger.debug(
                "ls-remote %s %s exited %d: %s",
                remote,
                branch,
                result.returncode,
                result.stderr.strip(),
            )
            return False
        return True

    def fetch_remote(self, repo_root: Path, remote: str, *, timeout: float | None) -> None:
        """Fetch all refs from a remote."""
        run_subprocess_with_context(
            ["git", "fetch", remote],
            operation_context=f"fetch remote '{remote}'",
            cwd=repo_root,
            timeout=timeout,
        )

    def add_worktree(
        self,
        repo_root: Path,
        path: Path,
        *,
        branch: str,
        create_branch: bool,
    ) -> None:
        """Add a new git worktree."""
        if create_branch:
            cmd = ["git", "worktree", "add", "-b", branch, str(path)]
            context = f"add worktree with new branch '{branch}' at {path}"
        else:
            cmd = ["git", "worktree", "add", str(path), branch]
            context = f"add worktree for branch '{branch}' at {path}"

        run_subprocess_with_context(cmd, operation_context=context, cwd=repo_root)

    def path_exists(self, path: Path) -> bool:
        """Check if a path exists on the filesystem."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def ensure_dir(self, path: Path) -> None:
        """Create a directory (and parents) if it does not exist."""
        path.mkdir(parents=True, exist_ok=True)

    def read_text(self, path: Path) -> str:
        """Read a text file."""
        return path.read_text(encoding="utf-8")

    def append_text(self, path: Path, content: str) -> None:
        """Append content to an existing text file."""
        with path.open("a", encoding="utf-8") as f:
            f.write(content)
