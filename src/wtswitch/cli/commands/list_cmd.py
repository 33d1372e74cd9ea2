"""List command - show all worktrees of the repository."""

import click

from wtswitch.cli.rendering import render_action
from wtswitch.core.context import WtsContext
from wtswitch.core.dispatcher import list_worktrees


@click.command("list")
@click.pass_obj
def list_cmd(ctx: WtsContext) -> None:
    """List worktrees with their branches."""
    raise SystemExit(render_action(list_worktrees(ctx), editor=ctx.config.editor))
