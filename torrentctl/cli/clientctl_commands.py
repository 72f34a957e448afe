"""CLI command to get or set client config."""

from __future__ import annotations

import click
from rich.table import Table

from torrentctl.cli.common import (
    close_client,
    get_config_from_context,
    open_client,
    run_async,
)
from torrentctl.cli.console import create_console
from torrentctl.clientctl.control import control_client
from torrentctl.clientctl.options import ALL_OPTIONS


def _print_parameters() -> None:
    table = Table(box=None, show_edge=False)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Type")
    table.add_column("Auto", justify="center")
    table.add_column("Description")
    for option in ALL_OPTIONS:
        table.add_row(
            option.name,
            option.permission,
            "✓" if option.auto else "",
            option.description,
        )
    create_console().print(table)


@click.command("clientctl")
@click.argument("client_name", required=False)
@click.argument("variables", nargs=-1)
@click.option("--parameters", is_flag=True, help="Print all parameters list and exit")
@click.option("--raw", "show_raw", is_flag=True, help="Display config value data in raw format")
@click.option(
    "--show-values-only",
    is_flag=True,
    help="Show config value data only",
)
@click.pass_context
def clientctl(
    ctx,
    client_name: str | None,
    variables: tuple[str, ...],
    parameters: bool,
    show_raw: bool,
    show_values_only: bool,
) -> None:
    """Get or set client config.

    If '=VALUE' is present, set the config, otherwise get current config.
    VARIABLE is a snake_case config key, e.g. global_download_speed_limit.
    For boolean items use literal "false" or "true"; for size or speed items
    use unit chars (B/K/M/G/T/P/E), e.g. "10M" means 10MiB or 10MiB/s.

    \b
    torrentctl clientctl local save_path
    torrentctl clientctl local global_upload_speed_limit=10M

    For the list of all supported variables, run 'torrentctl clientctl --parameters'.
    """
    if parameters:
        _print_parameters()
        return
    if not client_name:
        raise click.UsageError("CLIENT not provided")
    if show_raw and show_values_only:
        raise click.UsageError("--raw and --show-values-only flags are NOT compatible")

    config_manager = get_config_from_context(ctx)

    async def _clientctl() -> int:
        """Async helper for clientctl."""
        client = open_client(config_manager, client_name)
        try:
            return await control_client(
                client,
                variables,
                click.echo,
                show_raw=show_raw,
                show_values_only=show_values_only,
            )
        finally:
            await close_client(client)

    error_count = run_async(_clientctl)
    if error_count > 0:
        raise click.ClickException(f"{error_count} errors")
