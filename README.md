# lutro

Building blocks for a small 2D game runtime, in plain Python. The package
draws into 32-bit ARGB bitmaps in software and renders text from bitmap-font
atlases. It also holds a few small services a game expects: random numbers,
timing, mouse state, a private clipboard, shared settings and a lazy module
registry.

## Installation

```
pip install .
```

Pillow is used to decode PNG images. For the tests, install the `test` extra
and run `pytest`.

## Bitmaps and rectangles

`lutro.bitmap.Rect(x, y, width, height)` has `intersect(other)` and
`is_null()`. `lutro.bitmap.Bitmap(width, height, data=None, pitch=0)` holds
pixels as a flat list of `0xAARRGGBB` integers. `pitch` is the row stride in
pixels and defaults to the width. Use `get(x, y)`, `set(x, y, color)` and
`copy()` on it.

`lutro.image_loader.load_image(filename)` decodes a PNG file into a `Bitmap`.
If the file cannot be read or is not a PNG, it raises `ImageLoadError`.

## Drawing

`lutro.painter.Painter(target, font=None, compose=True)` draws onto a target
bitmap. Its state is reset when it is created: black background, white
foreground, clip set to the whole target. With `compose=True`, rectangle fills
and blits alpha-blend onto what is already there. With `compose=False`, they
overwrite it, and blits skip fully transparent pixels. Lines, polygons and
ellipses always overwrite. Nothing is drawn while the foreground alpha is zero.

```python
from lutro.bitmap import Bitmap, Rect
from lutro.painter import Painter

target = Bitmap(320, 240)
painter = Painter(target)
painter.clear()

painter.foreground = 0xFFFF0000
painter.fill_rect(Rect(10, 10, 50, 30))
painter.strike_line(0, 0, 319, 239)
painter.strike_rect(Rect(5, 5, 20, 20))
painter.fill_poly([100, 100, 150, 100, 125, 140])   # convex polygons only
painter.strike_ellipse(200, 120, 40, 20, 32)
painter.fill_ellipse(260, 60, 20, 20, 24)
painter.draw(sprite, Rect(0, 0, 16, 16), Rect(40, 40, 0, 0))  # no scaling
```

`sanitize_clip()` keeps the clip rectangle inside the target.

Transforms sit on a stack that holds up to 64 entries. `push()` copies the
current transform and `pop()` restores the previous one. Both return `False`
when they cannot act. `translate(x, y)` adds to the translation. `scale` and
`rotate` record values, but only the translation affects `fill_rect` and
`draw`. `origin(True)` empties the stack and resets the transform.

## Fonts

A bitmap font is an image strip with glyphs separated by columns. These columns
have the same colour as the top-left pixel.

```python
from lutro.painter import font_load_filename

painter.font = font_load_filename("font.png", " abcdefghijklmnopqrstuvwxyz", 0)
painter.print(8, 8, "hello world", 0)
width = painter.text_width("hello world")
```

`font_load_bitmap(atlas, characters, flags)` builds a font from a copy of a
`Bitmap` already in memory. A font holds at most 256 characters; longer
character lists are truncated and a warning is logged. `print` starts a new
line at `\n`. When `limit` is positive, it also wraps once the line grows
wider than `limit` pixels. Both `print` and `text_width` raise `ValueError`
when the painter has no font.

## Services

- `lutro.lmath.RandomGenerator(seed=None)`: `random()` gives a float in [0, 1],
  `random(max)` an int in [1, max], and `random(min, max)` an int in
  [min, max]. `set_random_seed(a)` and `set_random_seed(a, b)` re-seed it.
- `lutro.timer.Timer(settings, clock=None)`: `get_time()` returns seconds from
  a microsecond clock. `get_delta()` and `get_fps()` read the settings.
- `lutro.system.System`: `get_os()`, `get_processor_count()`,
  `get_power_info()`, and a clipboard that lives only in the object
  (`set_clipboard_text`, `get_clipboard_text`). `open_url()` and `vibrate()`
  only record the request; `open_url()` returns `False`.
- `lutro.mouse.Mouse`: call `update(input_state)` once per frame with a
  callable `(port, device, index, id) -> int`. Positions add up relative
  motion. Read them with `get_x()`, `get_y()` and `get_position()`, and
  buttons with `is_down(1, 2, 3)`.
- `lutro.settings.Settings`: screen size, timing counters and callbacks.
  `update_timing(delta)` updates the delta, FPS and per-second counters.
  `asset_path(gamedir, path)` returns an `AssetPath` with the full path and the
  lower-case extension.
- `lutro.runtime`: `ModuleRegistry` (`preload(name, factory)`,
  `require(name)`), `relpath_to_modname("a/b.lua") == "a.b"`, `get_version()`
  and `not_implemented()`.

Calls with the wrong number of arguments raise `lutro.runtime.LutroError`.
Arguments of the wrong type raise `TypeError`.

## What it does not do

The package is a library of parts, not a runnable game runtime. It does not
load games from directories or archives, and it has no frame loop that calls a
game's update and draw code. It does not host a scripting language, and it has
no window, keyboard, joystick or audio services. It provides no command-line
program.