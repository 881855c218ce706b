"""Brushes and pens for the mouse-interaction states of a widget."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class MouseEventColorManagement:
    """Brush and pen for normal, hover, pressed-inside and pressed-outside states.

    The brushes may be given alone, the pens alone (by keyword), or all eight.
    Unset entries are None.
    """

    normal_brush: Any = None
    hover_brush: Any = None
    press_hover_brush: Any = None
    press_leave_brush: Any = None
    normal_pen: Any = None
    hover_pen: Any = None
    press_hover_pen: Any = None
    press_leave_pen: Any = None