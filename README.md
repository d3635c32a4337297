# tikzkit

Building blocks for a graphical TikZ diagram editor. The package uses only
the standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `tikzkit.util`

- `bezier_interpolate(dist, c0, c1, c2, c3)` evaluates a one-dimensional
  cubic Bézier curve. `bezier_interpolate_full` does the same for four
  `(x, y)` control points.
- `round_to_nearest(step_size, val)` snaps a value to the nearest multiple
  of the step, with halves rounded away from zero. A step of `0` returns the
  value unchanged.
- `radians_to_degrees` and `degrees_to_radians` convert angles.
  `normalise_angle_deg` brings an integer angle into (-180, 180], and
  `normalise_angle_rad` brings an angle into (-π, π].
- `almost_zero` and `almost_equal` compare floats with a tolerance of 1e-6.
- `float_to_string` prints a number with up to six significant digits. It
  gives `"0"` for values within that tolerance of zero.
- `replace_tex_constants` prepares a label for display:
  - Greek letters and common math symbols become Unicode characters, so
    `\alpha` becomes `α` and `\to` becomes `→`.
  - Size commands such as `\small` and `\Huge` are removed.
  - Surrounding `$...$` is stripped.

### `tikzkit.geometry`

`Rect` is a frozen rectangle with fields `x`, `y`, `width` and `height`.
It has the properties `left`, `top`, `right` and `bottom`, and can be built
with `Rect.from_points(p1, p2)`.

The following functions convert between TikZ coordinates and screen
coordinates:

- `to_screen`
- `from_screen`
- `rect_to_screen`
- `rect_from_screen`

One TikZ unit is 40 pixels, and the y axis is flipped. The grid constants
are also here: `GRID_SEP = 10` and `GRID_N = 4`.

### `tikzkit.colors`

- `Color` is a frozen 8-bit RGB colour. Out-of-range components raise
  `ValueError`. `Color.from_rgb_f(r, g, b)` builds one from components in
  [0, 1].
- `COLOR_NAMES` lists the 19 standard xcolor colours in order.
  `color_by_index(i)` returns the colour at position `i`.
- `color_by_name(name)` accepts an xcolor name or a string of the form
  `rgb,255: red,R; green,G; blue,B`. It returns `None` for anything it does
  not recognise.
- `name_for_color(color)` gives the xcolor name of a colour. If the colour
  has no name, it gives the `rgb,255: ...` form.
- `standard_dialog_colors()` gives 48 colour-picker slots. The named
  colours are laid out in four columns (greys, rainbow,
  brown/green/teal, pinks), and the remaining slots are white.

### `tikzkit.updates`

- `ReleaseVersion.parse(text)` parses versions such as `2.1.6` or
  `2.1.7-rc2`. It raises `InvalidVersionError`, a `ValueError`, for
  malformed text.
- Versions compare by their numbers. A final release counts as later than
  any release candidate with the same numbers.
- `newer_release(current, response)` takes the raw reply of a version
  service, as `str` or `bytes`. Only the first 200 bytes are read.
  - It returns the advertised version in `X.Y.Z[-rcN]` form if that version
    is newer than `current`, and `None` otherwise.
  - A malformed reply raises `InvalidVersionError`.
- `fetch_latest_version(url, timeout)` downloads the version text with
  `urllib` and returns it with whitespace collapsed.
- `CURRENT_VERSION` holds the release number that this module compares
  against.

### `tikzkit.view`

`TikzView` models the zoom level of a canvas:

- `zoom_in()` multiplies the scale by 1.6, and `zoom_out()` multiplies it
  by 0.625.
- `grid(rect)` returns `GridLines`, the screen positions of the grid lines
  inside a region.
  - Major lines are every 40 pixels.
  - Minor lines are every 10 pixels, skipping the major positions. They are
    only included while the scale is above 0.2.
  - The axes at 0 are not listed.
- `wheel(modifiers, delta_y, shift_to_scroll)` maps a mouse-wheel event to
  a `WheelOutcome`, using the `Modifier` flags:
  - The event scrolls normally when no modifier is held. With
    `shift_to_scroll`, it scrolls normally only when Shift alone is held.
  - Control with a positive or negative delta zooms in or out.
  - Otherwise, Shift scrolls horizontally by `-delta_y`.

### `tikzkit.tools`

- `Tool` enumerates `SELECT`, `VERTEX`, `EDGE` and `CROP`.
- `ToolPalette` starts on `SELECT`. Its `actions` hold a `ToolAction`
  (tool, label and icon resource) for each tool it offers: Select, Add
  Vertex and Add Edge.
- `current_tool()` reports the chosen tool. `set_current_tool(tool)`
  changes it and raises `ValueError` for a tool that is not on the palette,
  such as `CROP`.

## Example

    from tikzkit.colors import color_by_name, name_for_color
    from tikzkit.updates import newer_release
    from tikzkit.util import replace_tex_constants

    red = color_by_name("red")                # Color(red=255, green=0, blue=0)
    name_for_color(red)                       # "red"
    replace_tex_constants("$\\alpha$")        # "α"
    newer_release("2.1.6", b"2.1.7-rc1\n")    # "2.1.7-rc1"

## What this package does not do

This is a library of helpers, not an editor. It has no window or drawing
surface and no command to run. It does not read or write TikZ documents,
has no graph model of nodes and edges, and has no undo history, style files
or LaTeX preview.