# rusuku/ui/core/rich_components.py
# Centralized Rich component imports & configuration

from __future__ import annotations

from typing import Any

# Core Rich components
from rich.console import Console, RenderableType
from rich.text import Text
from rich.theme import Theme

# Layout & display components
from rich.table import Table
from rich.live import Live
from rich import box


# * Table builder w/ consistent styling for info listings (key bindings, settings)
def themed_table(
    title: str | None = None,
    show_header: bool = True,
    **kwargs: Any,
) -> Table:
    return Table(
        title=title,
        show_header=show_header,
        header_style=kwargs.pop("header_style", "rusuku.title"),
        border_style=kwargs.pop("border_style", "rusuku.border"),
        box=kwargs.pop("box", box.HEAVY_HEAD),
        **kwargs,
    )


__all__ = [
    # Core
    "Console",
    "RenderableType",
    "Text",
    "Theme",
    # Layout & display
    "Table",
    "Live",
    "box",
    # Themed builders
    "themed_table",
]
