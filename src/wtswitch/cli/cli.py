import click

from wtswitch.cli.commands.config_cmd import config_group
from wtswitch.cli.commands.create_cmd import create_new_cmd
from wtswitch.cli.commands.list_cmd import list_cmd
from wtswitch.cli.commands.switch_cmd import switch_or_create_cmd
from wtswitch.cli.debug import configure_logging
from wtswitch.cli.output import user_output
from wtswitch.core.context import WtsContext, create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# Subcommands that manage config themselves and must run even if it is malformed
_NO_CONTEXT_COMMANDS = {"config"}


def _create_context_or_exit(*, dry_run: bool) -> WtsContext:
    try:
        return create_context(dry_run=dry_run)
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="wtswitch")
@click.option("--dry-run", is_flag=True, help="Print git commands instead of running them.")
@click.option("--debug", is_flag=True, help="Enable debug logging (also WTS_DEBUG=1).")
@click.pass_context
def cli(ctx: click.Context, dry_run: bool, debug: bool) -> None:
    """Give every branch its own worktree under <repo>/.worktrees."""
    configure_logging(debug)
    if ctx.invoked_subcommand in _NO_CONTEXT_COMMANDS:
        return
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = _create_context_or_exit(dry_run=dry_run)


cli.add_command(switch_or_create_cmd)
cli.add_command(switch_or_create_cmd, name="switch")
cli.add_command(create_new_cmd)
cli.add_command(create_new_cmd, name="new")
cli.add_command(list_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `wts` console script."""
    cli()


def switch_or_create_main() -> None:
    """Entry point for the standalone `switch-or-create` console script."""
    configure_logging(debug=False)
    switch_or_create_cmd.main(
        prog_name="switch-or-create", obj=_create_context_or_exit(dry_run=False)
    )


def create_new_main() -> None:
    """Entry point for the standalone `create-new` console script."""
    configure_logging(debug=False)
    create_new_cmd.main(prog_name="create-new", obj=_create_context_or_exit(dry_run=False))
