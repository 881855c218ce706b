"""Colours, control palette and widget state decoding."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .signals import Signal


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be in 0..255, got {value}")


TRANSPARENT = Color(0, 0, 0, 0)
BLACK = Color(0, 0, 0)


def is_color_light(color: Color) -> bool:
    """Return True when the weighted brightness of ``color`` is above the midpoint."""
    return (5 * color.green + 2 * color.red + color.blue) > 8 * 128


class ControlColors:
    """Shared palette of control colours; each change is announced by a signal."""

    _FIELDS = ("dis_enabled", "normal_border", "prominence", "background", "text")

    def __init__(self) -> None:
        self.dis_enabled_color_change = Signal()
        self.normal_border_color_change = Signal()
        self.prominence_color_change = Signal()
        self.background_color_change = Signal()
        self.text_color_change = Signal()
        self._dis_enabled = Color(180, 180, 180)
        self._normal_border = Color(131, 131, 131)
        self._prominence = Color(212, 78, 125)
        self._background = TRANSPARENT
        self._text = BLACK
        self.expand_colors: dict[str, Color] = {}

    def _assign(self, name: str, value: Color, signal: Signal) -> None:
        attr = "_" + name
        if getattr(self, attr) == value:
            return
        setattr(self, attr, value)
        signal.emit(value)

    @property
    def dis_enabled(self) -> Color:
        return self._dis_enabled

    @dis_enabled.setter
    def dis_enabled(self, value: Color) -> None:
        self._assign("dis_enabled", value, self.dis_enabled_color_change)

    @property
    def normal_border(self) -> Color:
        return self._normal_border

    @normal_border.setter
    def normal_border(self, value: Color) -> None:
        self._assign("normal_border", value, self.normal_border_color_change)

    @property
    def prominence(self) -> Color:
        return self._prominence

    @prominence.setter
    def prominence(self, value: Color) -> None:
        self._assign("prominence", value, self.prominence_color_change)

    @property
    def background(self) -> Color:
        return self._background

    @background.setter
    def background(self, value: Color) -> None:
        self._assign("background", value, self.background_color_change)

    @property
    def text(self) -> Color:
        return self._text

    @text.setter
    def text(self, value: Color) -> None:
        self._assign("text", value, self.text_color_change)


_CONTROL_COLORS: ControlColors | None = None


def control_colors() -> ControlColors:
    """Return the process-wide ControlColors instance."""
    global _CONTROL_COLORS
    if _CONTROL_COLORS is None:
        _CONTROL_COLORS = ControlColors()
    return _CONTROL_COLORS


class StateFlag(enum.IntFlag):
    """Style state bits of a drawn control."""

    NONE = 0x00000000
    ENABLED = 0x00000001
    RAISED = 0x00000002
    SUNKEN = 0x00000004
    OFF = 0x00000008
    NO_CHANGE = 0x00000010
    ON = 0x00000020
    DOWN_ARROW = 0x00000040
    HORIZONTAL = 0x00000080
    HAS_FOCUS = 0x00000100
    TOP = 0x00000200
    BOTTOM = 0x00000400
    FOCUS_AT_BORDER = 0x00000800
    AUTO_RAISE = 0x00001000
    MOUSE_OVER = 0x00002000


class ControlState:
    """The basic booleans decoded from a style state."""

    def __init__(self, state: StateFlag | int) -> None:
        state = StateFlag(state)
        self.enable = bool(state & StateFlag.ENABLED)
        self.on = bool(state & StateFlag.ON)
        self.off = bool(state & StateFlag.OFF)
        self.over = bool(state & StateFlag.MOUSE_OVER)
        self.sunken = bool(state & StateFlag.SUNKEN)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"


class CheckableControlState(ControlState):
    """State of a control that can be checked, such as a check box."""

    def __init__(self, state: StateFlag | int) -> None:
        super().__init__(state)
        enable, on, off, over, sunken = self.enable, self.on, self.off, self.over, self.sunken
        self.normal = enable and off and not over and not sunken
        self.normal_over = enable and off and over and not sunken
        self.normal_sunken = enable and off and over and sunken
        self.selected = enable and on and not over and not sunken
        self.select_sunken = enable and on and over and sunken
        self.select_over = enable and on and over and not sunken
        self.unenable = not enable and off
        self.unenable_select = not enable and on


class UnCheckableControlState(ControlState):
    """State of a control that cannot be checked, such as a push button."""

    def __init__(self, state: StateFlag | int) -> None:
        super().__init__(state)
        self.normal = self.enable and not self.over and not self.sunken
        self.normal_over = self.enable and self.over and not self.sunken
        self.normal_sunken = self.enable and self.over and self.sunken
        self.unenable = not self.enable