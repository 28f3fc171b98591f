# rusuku/cli/commands/keys.py
# Keys command: list the dashboard key bindings

from __future__ import annotations

from ...rusuku_io.console import console
from ...ui.core.rich_components import themed_table
from ...ui.dashboard.dashboard_input import KEY_BINDINGS
from ..app import app


@app.command(help="Show dashboard key bindings")
def keys() -> None:
    table = themed_table(title="Key bindings")
    table.add_column("Key", no_wrap=True)
    table.add_column("Action")
    table.add_column("Description")
    for k, (action, description) in KEY_BINDINGS.items():
        table.add_row(k, action, description)
    console.print(table)
