"""pdx-explorer CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

from pathlib import Path

import click

from pdx_explorer import __version__
from pdx_explorer.utils.logging import configure_file_logging


@click.group()
@click.version_option(version=__version__, prog_name="pdx")
@click.help_option("-h", "--help")
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Also write a rotating debug log to this directory",
)
def cli(log_dir):
    """pdx-explorer - Browse game/mod directories and their localization

    \b
    QUICK START:
      pdx index PATH            # Index a game or mod directory
      pdx tree PATH             # Show the directory tree
      pdx loc --key canal       # Look up resolved localization keys

    \b
    For detailed options: pdx <command> --help"""
    if log_dir is not None:
        configure_file_logging(log_dir)


from pdx_explorer.commands.index import index
from pdx_explorer.commands.loc import loc
from pdx_explorer.commands.tree import tree

cli.add_command(index)
cli.add_command(tree)
cli.add_command(loc)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
