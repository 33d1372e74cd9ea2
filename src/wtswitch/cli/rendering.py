"""Render dispatcher Actions as CLI output.

The shell wrapper evaluates stdout only when it starts with `cd `; everything
else on stdout is displayed as-is, and diagnostics go to stderr.
"""

import shlex
from pathlib import Path

import click

from wtswitch.cli.output import machine_output, user_output
from wtswitch.core.actions import Action, ChangeDirectory, PrintListing, ReportError
from wtswitch.core.git.abc import WorktreeInfo

CD_PREFIX = "cd "


def format_cd_command(path: Path, editor: str) -> str:
    """Build the line the shell wrapper evaluates.

    The path is shell-quoted; the editor is a command string and is emitted verbatim.

    Example:
        >>> format_cd_command(Path("/r/.worktrees/feature-foo"), "cursor")
        'cd /r/.worktrees/feature-foo && cursor .'
    """
    return f"{CD_PREFIX}{shlex.quote(str(path))} && {editor} ."


def format_worktree_line(wt: WorktreeInfo) -> str:
    if wt.branch is None:
        branch_label = click.style("(detached HEAD)", fg="white", dim=True)
    else:
        branch_label = click.style(f"[{wt.branch}]", fg="yellow")
    return f"{wt.path}  {branch_label}"


def render_action(action: Action, *, editor: str, dry_run: bool = False) -> int:
    """Write an Action to stdout/stderr.

    Under dry run no `cd` line is emitted, since the directory was never
    created; the target path is reported on stderr instead.

    Args:
        action: Terminal action from the dispatcher
        editor: Editor command used in the `cd` line
        dry_run: Whether mutating git commands were only printed

    Returns:
        Process exit code: 0 for ChangeDirectory and PrintListing, 1 for ReportError
    """
    if isinstance(action, ChangeDirectory):
        if dry_run:
            user_output(f"[DRY RUN] Would change directory to {action.path}")
            return 0
        machine_output(format_cd_command(action.path, editor))
        return 0

    if isinstance(action, PrintListing):
        if not action.worktrees:
            user_output("No worktrees found.")
        for wt in action.worktrees:
            machine_output(format_worktree_line(wt))
        return 0

    if isinstance(action, ReportError):
        user_output(click.style("Error: ", fg="red") + action.message)
        if action.path is not None:
            machine_output(format_cd_command(action.path, editor))
        return 1

    raise TypeError(f"Unknown action: {action!r}")
