"""Window-composition constants, colour packing and Windows version checks."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass

TRANSPARENT_COLOR = 0xFFFFFFFE
"""Border colour that hides the border."""

DEFAULT_COLOR = 0xFFFFFFFF
"""Colour value that restores the system default."""

_WINDOWS_11_BUILD = 22000


def abgr(a: int, b: int, g: int, r: int) -> int:
    """Pack four channels into a 32-bit colour value, alpha in the top byte."""
    return ((a & 0xFF) << 24) | ((b & 0xFF) << 16) | ((g & 0xFF) << 8) | (r & 0xFF)


@dataclass(frozen=True)
class WindowsVersion:
    """Major, minor and build numbers; -1 where unknown."""

    major: int = -1
    minor: int = -1
    build: int = -1

    @property
    def is_known(self) -> bool:
        return self.major >= 0 and self.minor >= 0 and self.build >= 0


class AccentState(enum.IntEnum):
    DISABLED = 0
    ENABLE_GRADIENT = 1
    ENABLE_TRANSPARENTGRADIENT = 2
    ENABLE_AERO_BLUR = 3
    ENABLE_AERO_BLUR_COLOR = 4
    ENABLE_HOSTBACKDROP = 5
    INVALID_STATE = 6


class WindowCompositionAttrib(enum.IntEnum):
    UNDEFINED = 0
    NCRENDERING_ENABLED = 1
    NCRENDERING_POLICY = 2
    TRANSITIONS_FORCEDISABLED = 3
    ALLOW_NCPAINT = 4
    CAPTION_BUTTON_BOUNDS = 5
    NONCLIENT_RTL_LAYOUT = 6
    FORCE_ICONIC_REPRESENTATION = 7
    EXTENDED_FRAME_BOUNDS = 8
    HAS_ICONIC_BITMAP = 9
    THEME_ATTRIBUTES = 10
    NCRENDERING_EXILED = 11
    NCADORNMENTINFO = 12
    EXCLUDED_FROM_LIVEPREVIEW = 13
    VIDEO_OVERLAY_ACTIVE = 14
    FORCE_ACTIVEWINDOW_APPEARANCE = 15
    DISALLOW_PEEK = 16
    CLOAK = 17
    CLOAKED = 18
    ACCENT_POLICY = 19
    FREEZE_REPRESENTATION = 20
    EVER_UNCLOAKED = 21
    VISUAL_OWNER = 22
    HOLOGRAPHIC = 23
    EXCLUDED_FROM_DDA = 24
    PASSIVEUPDATEMODE = 25
    USEDARKMODECOLORS = 26
    CORNER_STYLE = 27
    PART_COLOR = 28
    DISABLE_MOVESIZE_FEEDBACK = 29
    LAST = 30


_CACHED_VERSION: WindowsVersion | None = None


def _current_version() -> WindowsVersion:
    """The running system's version, cached once known; all -1 off Windows."""
    global _CACHED_VERSION
    if _CACHED_VERSION is not None:
        return _CACHED_VERSION
    getter = getattr(sys, "getwindowsversion", None)
    if getter is None:
        return WindowsVersion()
    info = getter()
    version = WindowsVersion(info.major, info.minor, info.build)
    if version.is_known:
        _CACHED_VERSION = version
    return version


def _resolve(version: WindowsVersion | None) -> WindowsVersion:
    return _current_version() if version is None else version


def is_windows_11(version: WindowsVersion | None = None) -> bool:
    """Whether ``version`` (default: this system) is Windows 11."""
    v = _resolve(version)
    return v.major == 10 and v.minor >= 0 and v.build >= _WINDOWS_11_BUILD


def is_windows_10(version: WindowsVersion | None = None) -> bool:
    """Whether ``version`` (default: this system) is Windows 10."""
    v = _resolve(version)
    return v.major == 10 and v.minor >= 0 and 0 <= v.build < _WINDOWS_11_BUILD


def is_below_windows_10(version: WindowsVersion | None = None) -> bool:
    """Whether ``version`` (default: this system) is older than Windows 10."""
    v = _resolve(version)
    return 0 <= v.major < 10 and v.minor >= 0 and v.build >= 0