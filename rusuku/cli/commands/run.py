# rusuku/cli/commands/run.py
# Run command: full-screen dashboard until the user quits

from __future__ import annotations

from typing import Optional

import typer

from ...config.settings import DashboardSettings, get_settings
from ...core.render_model import format_elapsed
from ...rusuku_io.console import console
from ...ui.dashboard.dashboard_display import DashboardSession
from ..app import app
from ..decorators import handle_rusuku_error


# * Run the interactive session; Ctrl-C ends it like 'q'
@handle_rusuku_error
def launch_dashboard(settings: DashboardSettings) -> None:
    session = DashboardSession(settings=settings)
    try:
        elapsed = session.run()
    except KeyboardInterrupt:
        elapsed = session.state.timer.elapsed()
    console.print(f"[rusuku.title]Elapsed:[/] [rusuku.timer]{format_elapsed(elapsed)}[/]")


@app.command(help="Open the full-screen dashboard (q quit, i start, p pause, c resume)")
@handle_rusuku_error
def run(
    ctx: typer.Context,
    rows: Optional[int] = typer.Option(None, "--rows", help="Grid rows"),
    cols: Optional[int] = typer.Option(None, "--cols", help="Grid columns"),
    cell_width: Optional[int] = typer.Option(
        None, "--cell-width", help="Maximum cell width in columns"
    ),
    cell_height: Optional[int] = typer.Option(
        None, "--cell-height", help="Maximum cell height in rows"
    ),
) -> None:
    settings = get_settings(ctx).with_overrides(
        grid_rows=rows,
        grid_cols=cols,
        max_cell_width=cell_width,
        max_cell_height=cell_height,
    )
    launch_dashboard(settings)
