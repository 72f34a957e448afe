"""Command line entry point for torrentctl."""

from __future__ import annotations

import click

from torrentctl import __version__
from torrentctl.cli.clientctl_commands import clientctl as clientctl_cmd
from torrentctl.cli.findalone_commands import findalone as findalone_cmd
from torrentctl.cli.partialdownload_commands import (
    partialdownload as partialdownload_cmd,
)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Configuration file path",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (-v: info, -vv: debug)",
)
@click.version_option(__version__, prog_name="torrentctl")
@click.pass_context
def cli(ctx, config, verbose):
    """Torrentctl - manage BitTorrent client state from the command line."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["verbosity"] = verbose


cli.add_command(clientctl_cmd)
cli.add_command(findalone_cmd)
cli.add_command(partialdownload_cmd)


def main():
    """Main CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
