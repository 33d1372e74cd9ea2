"""Parsing of `git worktree list --porcelain` output."""

from pathlib import Path

from wtswitch.core.git.abc import WorktreeInfo

WORKTREE_PREFIX = "worktree "
BRANCH_PREFIX = "branch "
LOCAL_BRANCH_REF_PREFIX = "refs/heads/"


def parse_worktree_porcelain(output: str) -> list[WorktreeInfo]:
    """Parse the porcelain worktree report into WorktreeInfo records.

    The report is a sequence of blank-line separated blocks. Each block has a
    `worktree <path>` line and, unless HEAD is detached, a
    `branch refs/heads/<name>` line. Blocks without a worktree line are dropped.
    The first record is marked as the root worktree (git guarantees this ordering).

    Example:
        >>> parse_worktree_porcelain(
        ...     "worktree /r\\nHEAD abc\\nbranch refs/heads/main\\n\\n"
        ...     "worktree /r/.worktrees/x\\nHEAD def\\ndetached\\n"
        ... )
        [WorktreeInfo(path=PosixPath('/r'), branch='main', is_root=True),
         WorktreeInfo(path=PosixPath('/r/.worktrees/x'), branch=None, is_root=False)]
    """
    if not output.strip():
        return []

    worktrees: list[WorktreeInfo] = []
    for block in output.strip().split("\n\n"):
        path: Path | None = None
        branch: str | None = None

        for raw_line in block.splitlines():
            line = raw_line.strip()
            if line.startswith(WORKTREE_PREFIX):
                path = Path(line[len(WORKTREE_PREFIX) :])
            elif line.startswith(BRANCH_PREFIX):
                branch_ref = line[len(BRANCH_PREFIX) :]
                branch = branch_ref.removeprefix(LOCAL_BRANCH_REF_PREFIX)

        if path is None:
            continue

        worktrees.append(WorktreeInfo(path=path, branch=branch, is_root=not worktrees))

    return worktrees
