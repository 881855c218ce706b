"""Time-driven value animations, parallel animation groups and a reusable group pool."""

from __future__ import annotations

import enum
from collections import deque
from functools import partial
from typing import Any, Callable, Iterator

from .colors import TRANSPARENT, Color
from .signals import Signal
from .theme import Theme, ThemeType, theme_object


class Direction(enum.IntEnum):
    """Direction in which an animation runs through its timeline."""

    FORWARD = 0
    BACKWARD = 1


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _interpolate(start: Any, end: Any, progress: float) -> Any:
    """Linear interpolation between two values of a supported kind."""
    if isinstance(start, Color) and isinstance(end, Color):
        pairs = (
            (start.red, end.red),
            (start.green, end.green),
            (start.blue, end.blue),
            (start.alpha, end.alpha),
        )
        return Color(*(int(a + (b - a) * progress) for a, b in pairs))
    if _is_int(start) and _is_int(end):
        return int(start + (end - start) * progress)
    if _is_number(start) and _is_number(end):
        return start + (end - start) * progress
    if (
        isinstance(start, tuple)
        and isinstance(end, tuple)
        and len(start) == len(end)
        and all(_is_number(v) for v in start + end)
    ):
        return tuple(a + (b - a) * progress for a, b in zip(start, end))
    return start if progress < 1.0 else end


class VariantAnimation:
    """Animates a value from ``start_value`` to ``end_value`` over ``duration`` milliseconds.

    Time is driven explicitly with :meth:`advance` or :meth:`set_current_time`.
    ``value_changed`` is emitted with each recomputed value and ``finished``
    when the animation stops at the end of its timeline.
    """

    def __init__(self, start_value: Any = None, end_value: Any = None, duration: int = 250) -> None:
        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        self.value_changed = Signal()
        self.finished = Signal()
        self._start_value = start_value
        self._end_value = end_value
        self._duration = duration
        self._direction = Direction.FORWARD
        self._current_time = 0
        self._running = False
        self._current_value = start_value

    @property
    def start_value(self) -> Any:
        return self._start_value

    @start_value.setter
    def start_value(self, value: Any) -> None:
        self._start_value = value
        self._refresh()

    @property
    def end_value(self) -> Any:
        return self._end_value

    @end_value.setter
    def end_value(self, value: Any) -> None:
        self._end_value = value
        self._refresh()

    @property
    def duration(self) -> int:
        return self._duration

    @duration.setter
    def duration(self, msecs: int) -> None:
        if msecs < 0:
            raise ValueError(f"duration must be >= 0, got {msecs}")
        self._duration = msecs
        self._current_time = min(self._current_time, msecs)
        self._refresh()

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def current_time(self) -> int:
        return self._current_time

    @property
    def current_value(self) -> Any:
        return self._current_value

    @property
    def running(self) -> bool:
        return self._running

    def _progress(self) -> float:
        if self._duration == 0:
            return 1.0
        return self._current_time / self._duration

    def _refresh(self) -> None:
        self._current_value = _interpolate(self._start_value, self._end_value, self._progress())
        self.value_changed.emit(self._current_value)

    def _at_end(self) -> bool:
        if self._direction is Direction.FORWARD:
            return self._current_time == self._duration
        return self._current_time == 0

    def set_direction(self, direction: Direction) -> None:
        if not isinstance(direction, Direction):
            raise TypeError(f"expected Direction, got {type(direction).__name__}")
        self._direction = direction

    def start(self) -> None:
        """Start from the beginning of the timeline for the current direction; no-op while running."""
        if self._running:
            return
        self._running = True
        origin = 0 if self._direction is Direction.FORWARD else self._duration
        self.set_current_time(origin)

    def stop(self) -> None:
        """Stop; ``finished`` is emitted only when stopped at the end of the timeline."""
        if not self._running:
            return
        self._running = False
        if self._at_end():
            self.finished.emit()

    def set_current_time(self, msecs: int) -> None:
        """Jump to ``msecs`` (clamped to the duration) and recompute the value."""
        self._current_time = max(0, min(int(msecs), self._duration))
        self._refresh()
        if self._running and self._at_end():
            self.stop()

    def advance(self, msecs: int) -> None:
        """Move a running animation ``msecs`` along its direction."""
        if not self._running:
            return
        step = msecs if self._direction is Direction.FORWARD else -msecs
        self.set_current_time(self._current_time + step)


class SimpleAnimation(VariantAnimation):
    """A VariantAnimation that records its latest value in ``run_time_value``."""

    def __init__(
        self,
        start: Any,
        end: Any,
        time_msecs: int,
        is_forward: bool = True,
    ) -> None:
        super().__init__(start, end, time_msecs)
        self.set_direction(is_forward)
        self.run_time_value: Any = None
        self.value_changed.connect(self._store_value)

    def _store_value(self, value: Any) -> None:
        self.run_time_value = value

    def set_direction(self, direction: Direction | bool = True) -> None:
        """Accept a Direction, or a bool where True means forward."""
        if isinstance(direction, bool):
            direction = Direction.FORWARD if direction else Direction.BACKWARD
        super().set_direction(direction)

    def set_forward(self) -> None:
        self.set_direction(Direction.FORWARD)

    def set_backward(self) -> None:
        self.set_direction(Direction.BACKWARD)

    def reverse_direction(self) -> None:
        self.set_direction(
            Direction.BACKWARD if self.direction is Direction.FORWARD else Direction.FORWARD
        )

    def reverse_direction_and_start(self) -> None:
        self.reverse_direction()
        self.start()

    def set_value(self, start: Any, end: Any) -> None:
        self.start_value = start
        self.end_value = end

    def set_update(self, callback: Callable[[], Any]) -> None:
        """Call ``callback`` with no arguments whenever the value changes."""
        self.value_changed.connect(lambda _value: callback())

    def paint(self, painter: Any, extra: Any = None) -> None:
        """Drawing hook for subclasses; does nothing by default."""


class ParallelAnimationGroup:
    """Runs several animations at once; finishes when all of them have stopped."""

    def __init__(self, animations: list[VariantAnimation] | None = None) -> None:
        self.finished = Signal()
        self._animations: list[VariantAnimation] = list(animations or [])
        self._running = False
        self._current_time = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def current_time(self) -> int:
        return self._current_time

    @property
    def duration(self) -> int:
        return max((a.duration for a in self._animations), default=0)

    @property
    def animations(self) -> tuple[VariantAnimation, ...]:
        return tuple(self._animations)

    def __len__(self) -> int:
        return len(self._animations)

    def add_animation(self, animation: VariantAnimation) -> None:
        self._animations.append(animation)

    def animation_at(self, index: int) -> VariantAnimation:
        return self._animations[index]

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._current_time = 0
        for animation in self._animations:
            animation.start()
        self._check_finished()

    def stop(self) -> None:
        """Stop the group and its animations without emitting ``finished``."""
        self._halt(emit=False)

    def advance(self, msecs: int) -> None:
        if not self._running:
            return
        self._current_time = min(self._current_time + msecs, self.duration)
        for animation in self._animations:
            animation.advance(msecs)
        self._check_finished()

    def _check_finished(self) -> None:
        if self._running and not any(a.running for a in self._animations):
            self._current_time = self.duration
            self._halt(emit=True)

    def _halt(self, emit: bool) -> None:
        if not self._running:
            return
        self._running = False
        for animation in self._animations:
            animation.stop()
        if emit:
            self.finished.emit()


class ParallelAnimationGroupPool:
    """Queues of idle and running animation groups, reused instead of recreated.

    Groups started through :meth:`acquire_group_and_start` return to the idle
    queue on their own when they finish.
    """

    def __init__(self, factory: Callable[[], ParallelAnimationGroup]) -> None:
        self._factory = factory
        self._idle: deque[ParallelAnimationGroup] = deque()
        self._running: deque[ParallelAnimationGroup] = deque()
        self._connections: dict[ParallelAnimationGroup, Callable[[], None]] = {}

    @property
    def idle(self) -> tuple[ParallelAnimationGroup, ...]:
        return tuple(self._idle)

    @property
    def running(self) -> tuple[ParallelAnimationGroup, ...]:
        return tuple(self._running)

    @property
    def idle_size(self) -> int:
        return len(self._idle)

    @property
    def running_size(self) -> int:
        return len(self._running)

    @property
    def is_idle_empty(self) -> bool:
        return not self._idle

    @property
    def is_running_empty(self) -> bool:
        return not self._running

    def _connect(self, group: ParallelAnimationGroup) -> None:
        if group in self._connections:
            return
        slot = partial(self._handle_finished, group)
        group.finished.connect(slot)
        self._connections[group] = slot

    def _disconnect(self, group: ParallelAnimationGroup) -> None:
        slot = self._connections.pop(group, None)
        if slot is not None:
            group.finished.disconnect(slot)

    def _handle_finished(self, group: ParallelAnimationGroup) -> None:
        if self._running:
            self._running.popleft()
        self._idle.append(group)

    def clear(self) -> None:
        """Forget every group; do not call while groups are running."""
        for group in list(self._connections):
            self._disconnect(group)
        self._idle.clear()
        self._running.clear()

    def add_group(self, group: ParallelAnimationGroup) -> None:
        """Add a group to the idle queue; it returns there whenever it finishes."""
        self._idle.append(group)
        self._connect(group)

    def stop_animation(self, group: ParallelAnimationGroup) -> bool:
        """Stop ``group`` if it is in the running queue; return whether it was."""
        if group not in self._running:
            return False
        group.stop()
        return True

    def release_group(self, group: ParallelAnimationGroup) -> None:
        """Return a group taken with :meth:`acquire_group` to the idle queue."""
        self._idle.append(group)

    def acquire_group(self) -> ParallelAnimationGroup:
        """Take a group for the caller to manage; it is no longer tracked by the pool."""
        return self._acquire(start_immediately=False)

    def acquire_group_and_start(self) -> ParallelAnimationGroup:
        """Take a group, put it in the running queue and start it."""
        return self._acquire(start_immediately=True)

    def _acquire(self, start_immediately: bool) -> ParallelAnimationGroup:
        group = self._idle.popleft() if self._idle else self._factory()
        if start_immediately:
            self._connect(group)
            self._running.append(group)
            group.start()
        else:
            self._disconnect(group)
        return group


class ClickRippleAnimation:
    """Expanding, fading circles drawn where the user clicked."""

    def __init__(
        self,
        msecs: int,
        max_radius: int,
        start_color: Color,
        end_color: Color,
        initial_quantity: int = 0,
    ) -> None:
        self._points: deque[Any] = deque()

        def factory() -> ParallelAnimationGroup:
            radius = SimpleAnimation(0, max_radius, msecs, True)
            colour = SimpleAnimation(start_color, end_color, msecs, True)
            radius.run_time_value = 0
            colour.run_time_value = TRANSPARENT
            group = ParallelAnimationGroup([radius, colour])
            group.finished.connect(self._points.popleft)
            return group

        self._pool = ParallelAnimationGroupPool(factory)
        for _ in range(initial_quantity):
            self._pool.add_group(factory())

    def _idle_animations(self, index: int) -> Iterator[VariantAnimation]:
        return (group.animation_at(index) for group in self._pool.idle)

    def set_update(self, callback: Callable[[], Any]) -> None:
        """Call ``callback`` whenever an idle group's animations change value."""
        for group in self._pool.idle:
            group.animation_at(0).set_update(callback)
            group.animation_at(1).set_update(callback)

    def paint(self, painter: Any) -> None:
        """Draw each running ripple with ``save``, ``set_brush``, ``draw_ellipse`` and ``restore``."""
        painter.save()
        for group, point in zip(self._pool.running, self._points):
            painter.set_brush(group.animation_at(1).run_time_value)
            r = int(group.animation_at(0).run_time_value)
            painter.draw_ellipse(point, r, r)
        painter.restore()

    def update_max_radius(self, max_radius: int) -> None:
        for animation in self._idle_animations(0):
            animation.end_value = max_radius

    def update_start_color(self, color: Color) -> None:
        for animation in self._idle_animations(1):
            animation.start_value = color

    def update_end_color(self, color: Color) -> None:
        for animation in self._idle_animations(1):
            animation.end_value = color

    def start(self, point: Any) -> None:
        """Start a ripple centred on ``point``."""
        self._points.append(point)
        self._pool.acquire_group_and_start()

    def advance(self, msecs: int) -> None:
        """Move every running ripple ``msecs`` forward."""
        for group in self._pool.running:
            group.advance(msecs)


class ThemeColorManagement(VariantAnimation):
    """Animates between a light and a dark colour when the theme changes."""

    def __init__(
        self,
        light: Color = Color(240, 243, 249),
        dark: Color = Color(26, 32, 52),
        theme: Theme | None = None,
    ) -> None:
        super().__init__(light, dark, 300)
        self._theme = theme if theme is not None else theme_object()
        self.enabled = True
        self.run_time_color: Color = dark if self._theme.is_dark() else light
        self.value_changed.connect(self._update_run_time_color)
        self._theme.theme_change.connect(self._on_theme_change)

    @property
    def light_color(self) -> Color:
        return self.start_value

    @property
    def dark_color(self) -> Color:
        return self.end_value

    def set_theme_color(self, light: Color, dark: Color) -> None:
        self.start_value = light
        self.end_value = dark
        self.run_time_color = dark if self._theme.is_dark() else light
        self.value_changed.emit(self.run_time_color)

    def _update_run_time_color(self, value: Color) -> None:
        self.run_time_color = value

    def _on_theme_change(self, theme_type: ThemeType) -> None:
        if not self.enabled:
            return
        if theme_type is ThemeType.LIGHT:
            self.set_direction(Direction.BACKWARD)
        else:
            self.set_direction(Direction.FORWARD)
        self.start()