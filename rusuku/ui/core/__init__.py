# rusuku/ui/core/__init__.py
# Core UI building blocks (centralized Rich imports)

from .rich_components import *

__all__ = [
    "Console",
    "RenderableType",
    "Text",
    "Theme",
    "Table",
    "Live",
    "box",
    "themed_table",
]
