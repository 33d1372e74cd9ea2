"""Keep the worktrees directory out of version control."""

import logging
from pathlib import Path

from wtswitch.cli.output import user_output
from wtswitch.core.constants import GITIGNORE_FILE_NAME
from wtswitch.core.git.abc import Git

logger = logging.getLogger(__name__)


def gitignore_entry(worktrees_dir_name: str) -> str:
    """Text appended to the ignore file: blank line, comment, then the rule."""
    return f"\n# Git worktrees\n{worktrees_dir_name}/\n"


def ensure_worktrees_ignored(git: Git, repo_root: Path, *, worktrees_dir_name: str) -> bool:
    """Create the worktrees directory and make sure .gitignore covers it.

    Idempotent. An existing .gitignore that does not mention the worktrees
    directory receives one entry; a missing .gitignore is left missing.

    Not safe against concurrent invocations: the file is read then appended
    without locking.

    Args:
        git: Git operations interface (filesystem access goes through it)
        repo_root: Repository root
        worktrees_dir_name: Directory under repo_root holding worktrees

    Returns:
        True if .gitignore was modified, False otherwise
    """
    git.ensure_dir(repo_root / worktrees_dir_name)

    gitignore = repo_root / GITIGNORE_FILE_NAME
    if not git.path_exists(gitignore):
        logger.debug("No %s at %s, leaving it absent", GITIGNORE_FILE_NAME, repo_root)
        return False

    content = git.read_text(gitignore)
    if worktrees_dir_name in content:
        return False

    git.append_text(gitignore, gitignore_entry(worktrees_dir_name))
    user_output(f"Added {worktrees_dir_name}/ to {GITIGNORE_FILE_NAME}")
    return True
