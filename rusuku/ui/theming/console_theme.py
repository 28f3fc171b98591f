# rusuku/ui/theming/console_theme.py
# Console theme initialization & management for Rich styling

from __future__ import annotations

from ...rusuku_io.console import console
from .theme_definitions import DEFAULT_THEME, get_rusuku_theme


# * Swap the active palette (pops the previously pushed theme if any)
def refresh_theme(name: str = DEFAULT_THEME) -> None:
    from rich.theme import ThemeStackError

    try:
        console.pop_theme()
    except ThemeStackError:
        pass  # nothing pushed yet
    console.push_theme(get_rusuku_theme(name))


# * Apply the named palette, or the configured one when no name is given
def auto_initialize_theme(name: str | None = None) -> None:
    if name is None:
        from ...config.settings import settings_manager

        name = settings_manager.load().theme
    refresh_theme(name)
