"""devcaps CLI entrypoint."""

from __future__ import annotations

import logging

import click

from devcaps import __version__


@click.group()
@click.version_option(version=__version__, prog_name="devcaps")
@click.option("-v", "--verbose", is_flag=True, help="Log rule decisions to stderr.")
def main(verbose: bool) -> None:
    """devcaps — device capability profiles from detection results."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register subcommands
from devcaps.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
