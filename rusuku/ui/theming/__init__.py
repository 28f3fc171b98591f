# rusuku/ui/theming/__init__.py
# Style palettes & console theme management

from .theme_definitions import THEMES, DEFAULT_THEME, get_rusuku_theme
from .console_theme import refresh_theme, auto_initialize_theme

__all__ = [
    "THEMES",
    "DEFAULT_THEME",
    "get_rusuku_theme",
    "refresh_theme",
    "auto_initialize_theme",
]
