"""Switch-or-create command - go to a branch's worktree, creating it if needed."""

import click

from wtswitch.cli.rendering import render_action
from wtswitch.core.context import WtsContext
from wtswitch.core.dispatcher import switch_or_create


@click.command("switch-or-create")
@click.argument("branch", required=False)
@click.pass_obj
def switch_or_create_cmd(ctx: WtsContext, branch: str | None) -> None:
    """Open the worktree for BRANCH, creating it from an existing branch if needed.

    Without BRANCH, lists all worktrees.

    The worktree lives at <repo>/.worktrees/<branch> with '/' replaced by '-'.
    If it does not exist yet but BRANCH exists locally or on the remote, the
    remote is fetched and the worktree is created for it.

    On success prints `cd <path> && <editor> .` for the shell wrapper to eval.

    Example:
      switch-or-create feature/login    # -> .worktrees/feature-login
    """
    action = switch_or_create(ctx, branch)
    raise SystemExit(render_action(action, editor=ctx.config.editor, dry_run=ctx.dry_run))
