"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes and dry-run via wrappers.
"""

from wtswitch.core.git.abc import Git, WorktreeInfo
from wtswitch.core.git.dry_run import DryRunGit
from wtswitch.core.git.parsing import parse_worktree_porcelain
from wtswitch.core.git.real import RealGit

__all__ = [
    "Git",
    "WorktreeInfo",
    "RealGit",
    "DryRunGit",
    "parse_worktree_porcelain",
]
