"""Branch name to worktree path mapping.

Every component derives worktree locations through worktree_path() so that the
same branch always lands in the same directory.
"""

from pathlib import Path

from wtswitch.core.errors import InvalidBranchName

# Hierarchical separator in branch names and its flat replacement on disk
BRANCH_SEPARATOR = "/"
FLAT_SEPARATOR = "-"


def strip_remote_prefix(branch: str, remote: str) -> str:
    """Strip a leading '<remote>/' qualifier from a branch name.

    Example:
        >>> strip_remote_prefix("origin/feature/foo", "origin")
        'feature/foo'
    """
    prefix = f"{remote}/"
    if branch.startswith(prefix):
        return branch[len(prefix) :]
    return branch


def sanitize_branch_name(branch: str) -> str:
    """Replace every hierarchical separator with the flat separator.

    No other normalization (case, whitespace) is performed.
    """
    return branch.replace(BRANCH_SEPARATOR, FLAT_SEPARATOR)


def normalize_branch_name(branch: str, remote: str) -> str:
    """Return the git-facing branch name: remote prefix removed, '/' kept.

    Raises:
        InvalidBranchName: If the name is empty before or after prefix removal
    """
    if not branch:
        raise InvalidBranchName("Branch name must not be empty")

    name = strip_remote_prefix(branch, remote)
    if not name:
        raise InvalidBranchName(f"Branch name '{branch}' is empty after removing '{remote}/'")
    return name


def worktree_path(
    branch: str,
    repo_root: Path,
    *,
    worktrees_dir_name: str,
    remote: str,
) -> Path:
    """Map a branch name to its worktree directory.

    Args:
        branch: Branch name, optionally remote-qualified or hierarchical
        repo_root: Repository root directory
        worktrees_dir_name: Directory under repo_root holding all worktrees
        remote: Remote name whose '<remote>/' prefix is stripped first

    Returns:
        <repo_root>/<worktrees_dir_name>/<sanitized branch name>

    Raises:
        InvalidBranchName: If branch is empty
    """
    name = normalize_branch_name(branch, remote)
    return repo_root / worktrees_dir_name / sanitize_branch_name(name)
