import pytest

from fwidgetkit.animation import (
    ClickRippleAnimation,
    Direction,
    ParallelAnimationGroup,
    ParallelAnimationGroupPool,
    SimpleAnimation,
    ThemeColorManagement,
    VariantAnimation,
)
from fwidgetkit.colors import TRANSPARENT, Color
from fwidgetkit.theme import Theme


class RecordingPainter:
    def __init__(self):
        self.calls = []

    def save(self):
        self.calls.append(("save",))

    def restore(self):
        self.calls.append(("restore",))

    def set_brush(self, color):
        self.calls.append(("brush", color))

    def draw_ellipse(self, center, rx, ry):
        self.calls.append(("ellipse", center, rx, ry))


def _ellipses(painter):
    return [c for c in painter.calls if c[0] == "ellipse"]


def _brushes(painter):
    return [c[1] for c in painter.calls if c[0] == "brush"]


def _theme():
    return Theme(system_reader=lambda: None)


# VariantAnimation


def test_start_emits_start_value_and_reaches_end():
    anim = VariantAnimation(0, 100, 100)
    seen = []
    anim.value_changed.connect(seen.append)
    anim.start()
    assert anim.running
    assert seen == [0]
    anim.advance(100)
    assert anim.current_value == 100
    assert not anim.running


def test_int_midpoint():
    anim = VariantAnimation(0, 100, 200)
    anim.start()
    anim.advance(50)
    assert anim.current_value == 25


def test_color_midpoint():
    anim = VariantAnimation(Color(0, 0, 0, 0), Color(200, 100, 50, 255), 100)
    anim.start()
    anim.advance(50)
    assert anim.current_value == Color(100, 50, 25, 127)


def test_values_increase_monotonically():
    anim = VariantAnimation(0, 1000, 100)
    seen = []
    anim.value_changed.connect(seen.append)
    anim.start()
    for _ in range(10):
        anim.advance(10)
    assert seen == sorted(seen)
    assert seen[-1] == 1000


def test_finished_emitted_once_at_end():
    anim = VariantAnimation(0, 10, 100)
    count = []
    anim.finished.connect(lambda: count.append(1))
    anim.start()
    anim.advance(60)
    anim.advance(60)
    anim.advance(60)
    assert count == [1]
    assert anim.current_time == anim.duration


def test_stop_midway_does_not_emit_finished():
    anim = VariantAnimation(0, 10, 100)
    count = []
    anim.finished.connect(lambda: count.append(1))
    anim.start()
    anim.advance(30)
    anim.stop()
    assert count == []
    assert not anim.running
    assert anim.current_time == 30


def test_start_while_running_is_noop():
    anim = VariantAnimation(0, 10, 100)
    anim.start()
    anim.advance(40)
    anim.start()
    assert anim.current_time == 40


def test_backward_runs_from_end_to_start():
    anim = VariantAnimation(3, 9, 100)
    anim.set_direction(Direction.BACKWARD)
    anim.start()
    assert anim.current_time == 100
    assert anim.current_value == 9
    anim.advance(100)
    assert anim.current_value == 3
    assert not anim.running


def test_zero_duration_finishes_on_start():
    anim = VariantAnimation(1, 5, 0)
    count = []
    anim.finished.connect(lambda: count.append(1))
    anim.start()
    assert count == [1]
    assert anim.current_value == 5


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        VariantAnimation(0, 1, -1)


def test_set_direction_requires_direction():
    anim = VariantAnimation(0, 1, 10)
    with pytest.raises(TypeError):
        anim.set_direction("forward")


def test_set_current_time_clamps():
    anim = VariantAnimation(0, 10, 100)
    anim.set_current_time(500)
    assert anim.current_time == 100
    assert anim.current_value == 10
    anim.set_current_time(-5)
    assert anim.current_time == 0


def test_advance_when_stopped_does_nothing():
    anim = VariantAnimation(0, 10, 100)
    anim.advance(50)
    assert anim.current_time == 0


# SimpleAnimation


def test_simple_animation_direction_from_flag():
    assert SimpleAnimation(0, 1, 10, False).direction is Direction.BACKWARD
    assert SimpleAnimation(0, 1, 10, True).direction is Direction.FORWARD


def test_simple_animation_reverse_direction():
    anim = SimpleAnimation(0, 1, 10)
    anim.reverse_direction()
    assert anim.direction is Direction.BACKWARD
    anim.reverse_direction()
    assert anim.direction is Direction.FORWARD
    anim.set_backward()
    assert anim.direction is Direction.BACKWARD
    anim.set_forward()
    assert anim.direction is Direction.FORWARD


def test_simple_animation_tracks_run_time_value():
    anim = SimpleAnimation(0, 50, 100)
    assert anim.run_time_value is None
    anim.start()
    anim.advance(100)
    assert anim.run_time_value == 50


def test_reverse_direction_and_start_goes_back():
    anim = SimpleAnimation(2, 8, 100)
    anim.start()
    anim.advance(100)
    anim.reverse_direction_and_start()
    assert anim.running
    assert anim.current_time == 100
    anim.advance(100)
    assert anim.run_time_value == 2


def test_set_value_replaces_endpoints():
    anim = SimpleAnimation(0, 10, 100)
    anim.set_value(7, 70)
    assert (anim.start_value, anim.end_value) == (7, 70)
    assert anim.run_time_value == 7


def test_set_update_calls_callback():
    anim = SimpleAnimation(0, 10, 100)
    calls = []
    anim.set_update(lambda: calls.append(1))
    anim.start()
    anim.advance(50)
    assert len(calls) == 2


def test_paint_hook_leaves_painter_untouched():
    painter = RecordingPainter()
    SimpleAnimation(0, 1, 10).paint(painter, None)
    assert painter.calls == []


# ParallelAnimationGroup


def test_group_finishes_with_longest_child():
    a = VariantAnimation(0, 10, 100)
    b = VariantAnimation(0, 10, 50)
    group = ParallelAnimationGroup([a])
    group.add_animation(b)
    assert group.duration == 100
    assert group.animation_at(1) is b
    count = []
    group.finished.connect(lambda: count.append(1))
    group.start()
    group.advance(50)
    assert not b.running
    assert group.running
    assert count == []
    group.advance(50)
    assert count == [1]
    assert not group.running
    assert a.current_value == a.end_value


def test_empty_group_finishes_immediately():
    group = ParallelAnimationGroup()
    count = []
    group.finished.connect(lambda: count.append(1))
    group.start()
    assert count == [1]


def test_group_stop_midway_no_finished():
    a = VariantAnimation(0, 10, 100)
    group = ParallelAnimationGroup([a])
    count = []
    group.finished.connect(lambda: count.append(1))
    group.start()
    group.advance(20)
    group.stop()
    assert count == []
    assert not a.running


# ParallelAnimationGroupPool


def _make_group():
    return ParallelAnimationGroup([VariantAnimation(0, 1, 100)])


def test_pool_acquire_uses_factory_when_idle_empty():
    made = []

    def factory():
        g = _make_group()
        made.append(g)
        return g

    pool = ParallelAnimationGroupPool(factory)
    assert pool.is_idle_empty
    group = pool.acquire_group()
    assert made == [group]
    assert pool.running_size == 0


def test_pool_started_group_returns_to_idle():
    pool = ParallelAnimationGroupPool(_make_group)
    group = _make_group()
    pool.add_group(group)
    started = pool.acquire_group_and_start()
    assert started is group
    assert pool.running == (group,)
    assert pool.is_idle_empty
    group.advance(100)
    assert pool.is_running_empty
    assert pool.idle == (group,)


def test_pool_factory_group_started_returns_to_idle():
    pool = ParallelAnimationGroupPool(_make_group)
    group = pool.acquire_group_and_start()
    group.advance(100)
    assert pool.idle == (group,)


def test_pool_stop_animation():
    pool = ParallelAnimationGroupPool(_make_group)
    other = _make_group()
    assert pool.stop_animation(other) is False
    group = pool.acquire_group_and_start()
    assert pool.stop_animation(group) is True
    assert not group.running
    assert pool.running == (group,)


def test_pool_acquire_group_detaches():
    pool = ParallelAnimationGroupPool(_make_group)
    group = _make_group()
    pool.add_group(group)
    taken = pool.acquire_group()
    assert taken is group
    taken.start()
    taken.advance(100)
    assert pool.is_idle_empty
    pool.release_group(taken)
    assert pool.idle == (taken,)


def test_pool_clear():
    pool = ParallelAnimationGroupPool(_make_group)
    pool.add_group(_make_group())
    pool.acquire_group_and_start()
    pool.add_group(_make_group())
    pool.clear()
    assert pool.idle_size == 0
    assert pool.running_size == 0


# ClickRippleAnimation

START = Color(10, 20, 30, 200)
END = Color(10, 20, 30, 0)


def test_ripple_paints_at_click_point():
    ripple = ClickRippleAnimation(100, 40, START, END, 1)
    ripple.start((5, 6))
    painter = RecordingPainter()
    ripple.paint(painter)
    assert painter.calls[0] == ("save",)
    assert painter.calls[-1] == ("restore",)
    assert _ellipses(painter) == [("ellipse", (5, 6), 0, 0)]
    assert _brushes(painter) == [START]


def test_ripple_disappears_when_finished():
    ripple = ClickRippleAnimation(100, 40, START, END, 1)
    ripple.start((1, 1))
    ripple.advance(100)
    painter = RecordingPainter()
    ripple.paint(painter)
    assert _ellipses(painter) == []


def test_ripple_several_points_in_order():
    ripple = ClickRippleAnimation(100, 40, START, END, 0)
    ripple.start((1, 1))
    ripple.start((2, 2))
    painter = RecordingPainter()
    ripple.paint(painter)
    assert [c[1] for c in _ellipses(painter)] == [(1, 1), (2, 2)]


def test_ripple_radius_grows():
    ripple = ClickRippleAnimation(100, 40, START, END, 1)
    ripple.start((0, 0))
    ripple.advance(90)
    painter = RecordingPainter()
    ripple.paint(painter)
    (_, _, rx, ry), = _ellipses(painter)
    assert rx == ry
    assert 0 < rx <= 40


def test_ripple_update_max_radius():
    ripple = ClickRippleAnimation(100, 10, START, END, 1)
    ripple.update_max_radius(1000)
    ripple.start((0, 0))
    ripple.advance(99)
    painter = RecordingPainter()
    ripple.paint(painter)
    assert _ellipses(painter)[0][2] > 10


def test_ripple_update_start_color():
    ripple = ClickRippleAnimation(100, 10, START, END, 1)
    new_start = Color(1, 2, 3, 4)
    ripple.update_start_color(new_start)
    ripple.start((0, 0))
    painter = RecordingPainter()
    ripple.paint(painter)
    assert _brushes(painter) == [new_start]


def test_ripple_update_end_color():
    ripple = ClickRippleAnimation(100, 10, START, END, 1)
    ripple.update_end_color(START)
    ripple.start((0, 0))
    ripple.advance(50)
    painter = RecordingPainter()
    ripple.paint(painter)
    assert _brushes(painter) == [START]


def test_ripple_set_update_callback():
    ripple = ClickRippleAnimation(100, 10, START, END, 1)
    calls = []
    ripple.set_update(lambda: calls.append(1))
    ripple.start((0, 0))
    before = len(calls)
    ripple.advance(10)
    assert len(calls) > before > 0


# ThemeColorManagement

LIGHT = Color(240, 243, 249)
DARK = Color(26, 32, 52)


def test_theme_color_initial_light():
    manager = ThemeColorManagement(theme=_theme())
    assert manager.run_time_color == LIGHT
    assert manager.light_color == LIGHT
    assert manager.dark_color == DARK
    assert manager.duration == 300


def test_theme_color_initial_dark():
    theme = _theme()
    theme.toggle_dark()
    manager = ThemeColorManagement(theme=theme)
    assert manager.run_time_color == DARK


def test_theme_color_animates_on_change():
    theme = _theme()
    manager = ThemeColorManagement(theme=theme)
    theme.toggle_dark()
    assert manager.running
    assert manager.direction is Direction.FORWARD
    manager.advance(300)
    assert manager.run_time_color == DARK
    theme.toggle_light()
    assert manager.direction is Direction.BACKWARD
    manager.advance(300)
    assert manager.run_time_color == LIGHT
    assert not manager.running


def test_theme_color_disabled_ignores_change():
    theme = _theme()
    manager = ThemeColorManagement(theme=theme)
    manager.enabled = False
    theme.toggle_dark()
    assert not manager.running
    assert manager.run_time_color == LIGHT


def test_set_theme_color_follows_current_theme():
    theme = _theme()
    manager = ThemeColorManagement(theme=theme)
    new_light = Color(1, 1, 1)
    new_dark = Color(2, 2, 2)
    manager.set_theme_color(new_light, new_dark)
    assert manager.light_color == new_light
    assert manager.dark_color == new_dark
    assert manager.run_time_color == new_light
    theme.toggle_dark()
    manager.advance(300)
    assert manager.run_time_color == new_dark


def test_ripple_initial_run_time_values():
    ripple = ClickRippleAnimation(0, 10, START, END, 0)
    painter = RecordingPainter()
    ripple.paint(painter)
    assert _ellipses(painter) == []
    assert TRANSPARENT.alpha == 0