"""Config file commands."""

from __future__ import annotations

import typer

from fitvoice.commands.common import get_state, print_json_payload
from fitvoice.core.config import DEFAULT_CONFIG, save_config


def init_config_command(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Write the default configuration to the config path."""
    state = get_state(ctx)
    path = state.config_path

    if path.exists() and not force:
        message = f"Config file already exists: {path} (use --force to overwrite)"
        if state.json_output:
            print_json_payload(state, {"status": "error", "message": message})
        else:
            typer.echo(message)
        raise typer.Exit(code=1)

    written = save_config(DEFAULT_CONFIG, path)

    if state.json_output:
        print_json_payload(state, {"status": "success", "path": str(written)})
        return
    if state.plain_output:
        typer.echo("status\tsuccess")
        typer.echo(f"path\t{written}")
        return
    state.console.print(f"Wrote default config to {written}")
