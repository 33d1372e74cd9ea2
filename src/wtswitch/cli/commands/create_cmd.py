"""Create-new command - create a branch and its worktree."""

import click

from wtswitch.cli.rendering import render_action
from wtswitch.core.context import WtsContext
from wtswitch.core.dispatcher import create_new


@click.command("create-new")
@click.argument("branch", required=False)
@click.pass_obj
def create_new_cmd(ctx: WtsContext, branch: str | None) -> None:
    """Create BRANCH from the current HEAD in a new worktree.

    Fails if BRANCH already exists locally or on the remote, or if its
    worktree directory already exists (the path is still printed).

    Example:
      create-new feature/signup    # -> .worktrees/feature-signup
    """
    action = create_new(ctx, branch)
    raise SystemExit(render_action(action, editor=ctx.config.editor, dry_run=ctx.dry_run))
