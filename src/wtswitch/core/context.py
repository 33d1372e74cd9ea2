"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from wtswitch.core.config import WtsConfig, load_config
from wtswitch.core.git.abc import Git
from wtswitch.core.git.dry_run import DryRunGit
from wtswitch.core.git.real import RealGit
from wtswitch.core.repo_discovery import (
    NoRepoSentinel,
    RepoContext,
    discover_repo_or_sentinel,
)


@dataclass(frozen=True)
class WtsContext:
    """Immutable context holding all dependencies for wtswitch operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    cwd: Path  # Current working directory at CLI invocation
    config: WtsConfig
    repo: RepoContext | NoRepoSentinel
    dry_run: bool

    @staticmethod
    def for_test(
        git: Git | None = None,
        cwd: Path | None = None,
        config: WtsConfig | None = None,
        repo: RepoContext | NoRepoSentinel | None = None,
        dry_run: bool = False,
    ) -> "WtsContext":
        """Create test context with sensible defaults for unspecified values.

        Args:
            git: Optional Git implementation. If None, creates empty FakeGit.
            cwd: Optional current working directory. If None, uses
                Path("/test/default/cwd") to prevent accidental use of the real cwd.
            config: Optional WtsConfig. If None, uses defaults.
            repo: Optional RepoContext or NoRepoSentinel. If None, discovers the
                repo through `git` (an empty FakeGit yields NoRepoSentinel).
            dry_run: Whether to wrap git in DryRunGit.

        Returns:
            WtsContext configured with provided values and test defaults
        """
        from wtswitch.core.git.fake import FakeGit

        resolved_git: Git = git if git is not None else FakeGit()
        resolved_cwd = cwd if cwd is not None else Path("/test/default/cwd")
        resolved_config = config if config is not None else WtsConfig()

        if dry_run:
            resolved_git = DryRunGit(resolved_git)

        if repo is None:
            repo = discover_repo_or_sentinel(
                resolved_cwd,
                resolved_git,
                worktrees_dir_name=resolved_config.worktrees_dir_name,
            )

        return WtsContext(
            git=resolved_git,
            cwd=resolved_cwd,
            config=resolved_config,
            repo=repo,
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool, config: WtsConfig | None = None) -> WtsContext:
    """Create production context with real implementations.

    Called once at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap git with DryRunGit to print mutations
        config: Pre-loaded config; loaded from disk when None

    Returns:
        WtsContext with real implementations, wrapped in dry-run
        wrappers if dry_run=True

    Raises:
        ValueError: If the config file is malformed
    """
    resolved_config = config if config is not None else load_config()

    git: Git = RealGit()
    if dry_run:
        git = DryRunGit(git)

    cwd = Path.cwd()
    repo = discover_repo_or_sentinel(
        cwd, git, worktrees_dir_name=resolved_config.worktrees_dir_name
    )

    return WtsContext(
        git=git,
        cwd=cwd,
        config=resolved_config,
        repo=repo,
        dry_run=dry_run,
    )
