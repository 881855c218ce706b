"""Application light/dark theme state, optionally following the system setting."""

from __future__ import annotations

import enum
from typing import Callable, Optional

from .signals import Signal

_PERSONALIZE_KEY = r"SOFTWARE\Microsoft\Windows\CurrentVersion\Themes\Personalize"

SystemReader = Callable[[], Optional[int]]


class ThemeType(enum.Enum):
    LIGHT = enum.auto()
    DARK = enum.auto()


def read_apps_use_light_theme() -> int | None:
    """Read the system's AppsUseLightTheme value, or None where it is unavailable."""
    try:
        import winreg
    except ImportError:
        return None
    try:
        with winreg.OpenKey(winreg.HKEY_CURRENT_USER, _PERSONALIZE_KEY) as key:
            value, _ = winreg.QueryValueEx(key, "AppsUseLightTheme")
    except OSError:
        return None
    return value


class Theme:
    """Current theme; ``theme_change`` is emitted with the new ThemeType on every set."""

    def __init__(self, system_reader: SystemReader | None = None) -> None:
        self._read_system = system_reader or read_apps_use_light_theme
        self._type = ThemeType.LIGHT
        self._follow_system = False
        self.theme_change = Signal()
        initial = self._read_system()
        self._last_system_light: bool | None = None if initial is None else bool(initial)

    @property
    def theme_type(self) -> ThemeType:
        return self._type

    @property
    def is_follow_system(self) -> bool:
        return self._follow_system

    def is_light(self) -> bool:
        return self._type is ThemeType.LIGHT

    def is_dark(self) -> bool:
        return self._type is ThemeType.DARK

    def set_theme(self, theme_type: ThemeType) -> None:
        """Set the theme and announce it, even if it is unchanged."""
        if not isinstance(theme_type, ThemeType):
            raise TypeError(f"expected ThemeType, got {type(theme_type).__name__}")
        self._type = theme_type
        self.theme_change.emit(theme_type)

    def toggle_light(self) -> None:
        self._follow_system = False
        self.set_theme(ThemeType.LIGHT)

    def toggle_dark(self) -> None:
        self._follow_system = False
        self.set_theme(ThemeType.DARK)

    def toggle_theme(self) -> None:
        self.set_theme(ThemeType.DARK if self.is_light() else ThemeType.LIGHT)

    def follow_system(self) -> None:
        """Start following the system theme and apply it now."""
        if self._follow_system:
            return
        self._follow_system = True
        value = self._read_system()
        # Only an explicit 0 means dark; a missing value counts as light.
        self.set_theme(ThemeType.DARK if value == 0 else ThemeType.LIGHT)

    def notify_system_theme(self, uses_light_theme: bool) -> None:
        """Report the system setting; applies it when it changed and the theme follows the system."""
        uses_light_theme = bool(uses_light_theme)
        if uses_light_theme == self._last_system_light:
            return
        self._last_system_light = uses_light_theme
        if self._follow_system:
            self.set_theme(ThemeType.LIGHT if uses_light_theme else ThemeType.DARK)


_THEME: Theme | None = None


def theme_object() -> Theme:
    """Return the process-wide Theme instance."""
    global _THEME
    if _THEME is None:
        _THEME = Theme()
    return _THEME