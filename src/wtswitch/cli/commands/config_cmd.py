"""Config commands - read and write ~/.wtswitch/config.toml."""

import click

from wtswitch.cli.output import user_output
from wtswitch.core.config import (
    CONFIG_KEYS,
    WtsConfig,
    config_path,
    load_config,
    update_config_value,
)


def _load_or_exit() -> WtsConfig:
    try:
        return load_config()
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e


@click.group("config")
def config_group() -> None:
    """Manage wtswitch configuration."""
    pass


@config_group.command("list")
def config_list() -> None:
    """Print all configuration keys and values."""
    cfg = _load_or_exit()
    click.echo(click.style(f"# {config_path()}", dim=True))
    for key in CONFIG_KEYS:
        click.echo(f"{key}={getattr(cfg, key)}")


@config_group.command("get")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
def config_get(key: str) -> None:
    """Print the value of KEY."""
    cfg = _load_or_exit()
    click.echo(getattr(cfg, key))


@config_group.command("set")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
@click.argument("value")
def config_set(key: str, value: str) -> None:
    """Set KEY to VALUE."""
    try:
        update_config_value(key, value)
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
    user_output(f"Set {key}={value}")
