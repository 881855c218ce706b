"""Widget support utilities: signals, colours, theme state, animations, image filters and Windows helpers."""

__version__ = "0.1.0"

__all__ = [
    "signals",
    "colors",
    "mouse_colors",
    "theme",
    "animation",
    "imageutils",
    "windowmanager",
]