# fwidgetkit

Building blocks for custom widgets that do not depend on any GUI toolkit:
a light/dark theme switch, shared control colours, state helpers for
drawing controls, value animations with a click-ripple effect, image
filters over numpy arrays, and Windows version and colour helpers.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `fwidgetkit.signals`: `Signal`, a list of callables with `connect`,
  `disconnect` and `emit`. Slots are called in connection order.
  `disconnect` raises `ValueError` for a slot that is not connected.
- `fwidgetkit.colors`: `Color`, a frozen RGBA dataclass with channels
  checked to be in 0..255, and `is_color_light`. `control_colors()` returns
  the shared `ControlColors` palette. Its `dis_enabled`, `normal_border`,
  `prominence`, `background` and `text` properties emit the matching
  `*_color_change` signal when they are set to a new value. `StateFlag`,
  `ControlState`, `CheckableControlState` and `UnCheckableControlState`
  turn a state bitmask into the booleans a painter needs, such as
  `normal`, `normal_over`, `selected` and `unenable`.
- `fwidgetkit.mouse_colors`: `MouseEventColorManagement`, a dataclass that
  holds the brushes and pens for the normal, hover, press-hover and
  press-leave states.
- `fwidgetkit.theme`: `ThemeType` and `Theme`, with the shared instance
  returned by `theme_object()`. `Theme` has `set_theme`, `toggle_light`,
  `toggle_dark`, `toggle_theme`, `follow_system`, `is_light`, `is_dark` and
  a `theme_change` signal. On Windows, `follow_system` reads the
  `AppsUseLightTheme` registry value. On other systems, or when the value
  cannot be read, the theme counts as light. A caller that watches the
  system setting passes changes in through `notify_system_theme`.
- `fwidgetkit.animation`: `Direction`, `VariantAnimation`,
  `SimpleAnimation`, `ParallelAnimationGroup`,
  `ParallelAnimationGroupPool`, `ClickRippleAnimation` and
  `ThemeColorManagement`. Time is driven by calling `advance(msecs)` or
  `set_current_time(msecs)`, so they work with any event loop. Numbers,
  numeric tuples and `Color` values are interpolated linearly.
  `ClickRippleAnimation.paint` takes any painter object that has `save`,
  `set_brush`, `draw_ellipse` and `restore` methods.
- `fwidgetkit.imageutils`: `FImage`, an 8-bit greyscale, 16-bit greyscale,
  RGB or RGBA image. It can be built from a file path, a PIL image, a numpy
  array or another `FImage`. It has chainable in-place filters:
  `gaussian_blur`, `horizontal_gaussian_blur`, `vertical_gaussian_blur`,
  `uniform_blur`, `horizontal_uniform_blur`, `vertical_uniform_blur`,
  `impulse_noise` and `grey_scale`. A negative radius or noise ratio raises
  `ValueError`. `mat()` returns a copy of the pixels and `to_pil()` returns
  a new PIL image. The module also provides `load_image` and
  `gaussian_kernel`.
- `fwidgetkit.windowmanager`: `WindowsVersion`, `is_windows_11`,
  `is_windows_10` and `is_below_windows_10`. When no version is given,
  these check the running system. The module also has the `abgr` colour
  packer, the `TRANSPARENT_COLOR` and `DEFAULT_COLOR` values, and the
  `AccentState` and `WindowCompositionAttrib` enumerations.

## Example

```python
from fwidgetkit.theme import theme_object
from fwidgetkit.animation import ThemeColorManagement

theme = theme_object()
colors = ThemeColorManagement()
theme.toggle_dark()
colors.advance(300)
print(colors.run_time_color)
```

```python
from fwidgetkit.imageutils import load_image

image = load_image("photo.png").gaussian_blur(5).grey_scale()
image.to_pil().save("blurred.png")
```

## What it does not do

The package has no widgets and does no drawing of its own. It also does
not:

- apply window effects (blur, mica, acrylic, title bar or border colours);
- change window styles;
- capture the screen;
- run a background watcher for the system theme.

`AccentState`, `WindowCompositionAttrib` and `abgr` only provide the values
such calls would use.