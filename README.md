# fehkit

The geometry and bookkeeping behind an image viewer and wallpaper setter,
as a plain Python library with no dependencies outside the standard library.

## Modules

- `fehkit.utils`: `FehError` (a fatal error carrying `exit_code = 2`),
  `error_message` and `warn` for diagnostics of the form
  `feh WARNING: ...`, `estrjoin` (joins arguments up to the first `None`),
  `path_is_url` (http, https, gopher, gophers, ftp and file schemes),
  `unique_filename` for a not-yet-existing `feh_<pid>_<n>_<name>` path,
  `read_file` (at most 4095 bytes, one trailing newline dropped, `None` if
  the file cannot be opened) and `shell_escape` (single-quote quoting).
- `fehkit.enums`: `Mode`, `BgMode`, `ZoomMode`, `TextBg`, `SlideChange`,
  `LoadError` and `WinType`, the Motif hint constants, `MwmHints` with
  `MwmHints.borderless()` and `as_tuple()`, and `xy_in_rect`.
- `fehkit.layout`: `Geometry.parse("800x600+10-20")` reads an X geometry
  string; `BgStyle` and `bg_style_for_mode` name the wallpaper styles;
  `scaled_placement`, `centered_placement`, `filled_placement` and
  `maxed_placement` return a `Placement` telling which part of the image
  is drawn where on a screen area.
- `fehkit.fehbg`: `build_bg_script` returns the text of a shell script that
  sets the same background again, using the options in `BgScriptOptions`;
  `write_bg_script` saves it as `<home>/.fehbg` and makes it executable.
- `fehkit.enl_ipc`: the Enlightenment IPC message format.
  `encode_message` splits a message into 20-byte client-message payloads,
  `ReplyAssembler.feed` joins reply payloads back together,
  `background_commands` gives the command sequence that sets a background,
  `client_registration`, `parse_num_desks` and `background_name`.
- `fehkit.view`: `calc_needed_zoom` returns `(zoom, ratio)` to fit or fill
  a destination; `ImageView` holds an image's size, offset, zoom and
  rotation in a window, with `reset`, `sanitise_offsets`, `center_image`,
  `render_region` (a `RenderRegion`), `needs_checks`, `antialias` and
  `rename`; `paused_title` keeps a ` [Paused]` suffix in step.
- `fehkit.window`: `WindowOptions` and `Screen`, `initial_window_geometry`
  for a new window's position and size, `fit_zoom` to choose zoom and
  offset after a resize, `Window` with `move`, `resize` and
  `apply_zoom_fit`, and `WindowRegistry`, which keeps open windows in
  opening order (`register`, `unregister`, `first_of_type`,
  `destroy_all`, iteration and `len`).

## Example

```python
from fehkit.layout import Geometry, filled_placement
from fehkit.view import calc_needed_zoom

geometry = Geometry.parse("+0+0")
placement = filled_placement(1920, 1200, 0, 0, 1920, 1080, geometry)
print(placement.src_x, placement.src_y, placement.src_w, placement.src_h)

zoom, ratio = calc_needed_zoom(4000, 3000, 1920, 1080, None)
```

## What it does not do

fehkit only computes. It does not load or decode images, draw anything,
open windows, talk to an X server or a window manager, or send IPC
messages; it produces the values and message bytes such code would use.
There is no command-line program.

## Tests

```
pip install -e .[test]
pytest
```