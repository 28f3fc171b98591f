# rusuku/ui/theming/theme_definitions.py
# Style palettes for the dashboard header, timer & borders

from __future__ import annotations

from ..core.rich_components import Theme

DEFAULT_THEME = "classic"

# style name -> rich style per palette; keys match the render model's style names
THEMES: dict[str, dict[str, str]] = {
    "classic": {
        "rusuku.title": "bold",
        "rusuku.timer": "bold yellow",
        "rusuku.border": "none",
    },
    "ocean": {
        "rusuku.title": "bold #4a90e2",
        "rusuku.timer": "bold #0891b2",
        "rusuku.border": "#357abd",
    },
    "mono": {
        "rusuku.title": "bold",
        "rusuku.timer": "bold",
        "rusuku.border": "dim",
    },
}


# * Build a rich Theme for the named palette (unknown names fall back to the default)
def get_rusuku_theme(name: str = DEFAULT_THEME) -> Theme:
    styles = THEMES.get(name, THEMES[DEFAULT_THEME])
    return Theme(styles)
