"""Reading and writing client configuration values."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Sequence

from torrentctl.clientctl.options import (
    auto_option_names,
    find_option,
    format_option,
    is_passthrough,
    parse_assignment,
    to_client_value,
)
from torrentctl.utils.exceptions import ValidationError

if TYPE_CHECKING:
    from torrentctl.client.base import ClientAdapter

logger = logging.getLogger(__name__)


async def _passthrough(
    client: ClientAdapter,
    name: str,
    value: str | None,
    echo: Callable[[str], None],
    show_values_only: bool,
) -> bool:
    try:
        if value is None:
            value = await client.get_config(name)
        else:
            await client.set_config(name, value)
    except Exception as e:
        action = "get" if value is None else "set"
        logger.error("Error %s %s: %s", action, name, e)
        return False
    echo(value if show_values_only else f"{name}={value}")
    return True


async def control_client(
    client: ClientAdapter,
    variables: Sequence[str],
    echo: Callable[[str], None],
    show_raw: bool = False,
    show_values_only: bool = False,
) -> int:
    """Get or set client config values, echoing one line per variable.

    Args:
        client: Client to query
        variables: ``name`` to get, ``name=value`` to set; empty queries
            every auto option
        echo: Output sink for result lines
        show_raw: Show speed and size values as raw byte counts
        show_values_only: Show only the values

    Returns:
        Number of variables that failed

    Raises:
        ValidationError: on incompatible flags or an unrecognized parameter

    """
    if show_raw and show_values_only:
        msg = "--raw and --show-values-only flags are NOT compatible"
        raise ValidationError(msg)

    if not variables:
        variables = auto_option_names()

    error_count = 0
    for variable in variables:
        name, value = parse_assignment(variable)

        if is_passthrough(client.client_type, name):
            if not await _passthrough(client, name, value, echo, show_values_only):
                error_count += 1
            continue

        option = find_option(name)
        if value is None:
            try:
                value = await client.get_config(name)
            except Exception as e:
                logger.error("Error get client %s config %s: %s", client.name, name, e)
                error_count += 1
                value = ""
        else:
            if option.readonly:
                logger.error(
                    "Error set client %s config %s: read-only", client.name, name
                )
                error_count += 1
                continue
            try:
                await client.set_config(name, to_client_value(option, value))
            except Exception as e:
                logger.error(
                    "Error set client %s config %s=%s: %s", client.name, name, value, e
                )
                value = ""
                error_count += 1

        if show_values_only:
            echo(value)
        else:
            echo(format_option(name, value, option, show_raw))

    return error_count
