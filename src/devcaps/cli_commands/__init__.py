"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from devcaps.cli_commands.enhance import enhance
    from devcaps.cli_commands.fields import fields

    cli.add_command(enhance)
    cli.add_command(fields)
