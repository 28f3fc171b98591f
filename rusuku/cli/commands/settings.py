# rusuku/cli/commands/settings.py
# Settings command: show the effective (read-only) dashboard settings & where they come from

from __future__ import annotations

from dataclasses import asdict

import typer

from ...config.settings import get_settings, settings_manager
from ...rusuku_io.console import console
from ...ui.core.rich_components import themed_table
from ..app import app


@app.command(name="settings", help="Show effective settings & the config file path")
def show_settings(ctx: typer.Context) -> None:
    settings = get_settings(ctx)
    table = themed_table(title="Settings")
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value")
    for key, value in asdict(settings).items():
        table.add_row(key, repr(value))
    console.print(table)

    path = settings_manager.config_path
    status = "" if path.exists() else " [dim](not found, using defaults)[/]"
    console.print(f"Config file: {path}{status}", highlight=False, soft_wrap=True)
