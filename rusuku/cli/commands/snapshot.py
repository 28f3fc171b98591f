# rusuku/cli/commands/snapshot.py
# Snapshot command: print one dashboard frame as plain text & exit (no terminal modes touched)

from __future__ import annotations

from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.exceptions import ConfigurationError
from ...ui.dashboard.dashboard_display import render_snapshot
from ...ui.dashboard.screen_buffer import GLYPH_SETS
from ..app import app
from ..decorators import handle_rusuku_error


@app.command(help="Print a single frame of the dashboard as plain text")
@handle_rusuku_error
def snapshot(
    ctx: typer.Context,
    width: int = typer.Option(55, "--width", min=1, help="Frame width in columns"),
    height: int = typer.Option(18, "--height", min=1, help="Frame height in rows"),
    elapsed: float = typer.Option(
        0.0, "--elapsed", min=0.0, help="Seconds to show on the timer"
    ),
    rows: Optional[int] = typer.Option(None, "--rows", help="Grid rows"),
    cols: Optional[int] = typer.Option(None, "--cols", help="Grid columns"),
    glyphs: str = typer.Option(
        "heavy", "--glyphs", help=f"Border glyph set ({', '.join(GLYPH_SETS)})"
    ),
) -> None:
    if glyphs not in GLYPH_SETS:
        raise ConfigurationError(
            f"Unknown glyph set '{glyphs}'. Choose one of: {', '.join(GLYPH_SETS)}"
        )
    settings = get_settings(ctx).with_overrides(grid_rows=rows, grid_cols=cols)
    lines = render_snapshot(
        settings, width=width, height=height, elapsed=elapsed, glyphs=GLYPH_SETS[glyphs]
    )
    typer.echo("\n".join(lines))
