"""Image windows: their placement on screen, sizing and the list of open windows."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from fehkit.enums import WinType, ZoomMode
from fehkit.layout import Geometry
from fehkit.view import ImageView, RenderRegion, calc_needed_zoom


@dataclass
class WindowOptions:
    """The options that decide how a window is sized and how its image is zoomed.

    ``geometry`` is a fixed window geometry and ``offset`` a fixed image
    offset. ``default_zoom`` is a percentage; 0 means none.
    """

    geometry: Geometry | None = None
    offset: Geometry | None = None
    screen_clip: bool = False
    scale_down: bool = False
    keep_zoom_vp: bool = False
    default_zoom: int = 0
    zoom_mode: ZoomMode | None = None

    @property
    def has_geometry(self) -> bool:
        g = self.geometry
        return g is not None and any(v is not None for v in (g.width, g.height, g.x, g.y))

    @property
    def fixed_size(self) -> bool:
        g = self.geometry
        return g is not None and (g.width is not None or g.height is not None)


@dataclass(frozen=True)
class Screen:
    """A screen, or one monitor of it, with its origin."""

    width: int
    height: int
    x: int = 0
    y: int = 0


def initial_window_geometry(
    w: int, h: int, full_screen: bool, options: WindowOptions, screen: Screen
) -> tuple[int, int, int, int]:
    """Return ``(x, y, w, h)`` for a new window wanting ``w`` by ``h`` pixels."""
    x = y = 0
    if full_screen:
        return screen.x, screen.y, screen.width, screen.height
    if options.has_geometry:
        g = options.geometry
        assert g is not None
        if g.width is not None:
            w = g.width
        if g.height is not None:
            h = g.height
        if g.x is not None:
            x = screen.width - g.x if g.x_negative else g.x
        if g.y is not None:
            y = screen.height - g.y if g.y_negative else g.y
    elif options.screen_clip:
        w = min(w, screen.width)
        h = min(h, screen.height)
    return x, y, w, h


def _image_offset(window: int, scaled: float, zoom: float, value: int | None, negative: bool) -> int:
    if value is None:
        return int(window - scaled) >> 1
    if negative:
        return int(window - scaled - value)
    return int(-value * zoom)


def fit_zoom(view: ImageView, options: WindowOptions, full_screen: bool | None = None) -> float:
    """Pick the zoom and offset for a freshly sized window and apply them to ``view``.

    Returns the chosen zoom.
    """
    if full_screen is None:
        full_screen = view.full_screen
    required, _ = calc_needed_zoom(view.im_w, view.im_h, view.w, view.h, options.zoom_mode)

    zoom = 0.01 * options.default_zoom if options.default_zoom else 1.0
    if (options.scale_down or (full_screen and not options.default_zoom)) and zoom > required:
        zoom = required
    elif (options.zoom_mode and required > 1) and (
        not options.default_zoom or required < zoom
    ):
        zoom = required
    view.zoom = zoom

    offset = options.offset or Geometry()
    view.im_x = _image_offset(view.w, view.im_w * zoom, zoom, offset.x, offset.x_negative)
    view.im_y = _image_offset(view.h, view.im_h * zoom, zoom, offset.y, offset.y_negative)
    return zoom


@dataclass(eq=False)
class Window:
    """A window showing one image."""

    win_type: WinType = WinType.UNSET
    view: ImageView = field(default_factory=ImageView)
    x: int = 0
    y: int = 0
    had_resize: bool = False
    visible: bool = False

    def move(self, x: int, y: int, screen: Screen) -> bool:
        """Move the window, keeping it from starting past the screen edge.

        Returns True if the position changed.
        """
        if self.x == x and self.y == y:
            return False
        self.x = min(x, screen.width)
        self.y = min(y, screen.height)
        return True

    def resize(
        self, w: int, h: int, options: WindowOptions, screen: Screen, force_resize: bool = False
    ) -> bool:
        """Resize the window to ``w`` by ``h``.

        A fixed geometry wins unless ``force_resize`` is set; the window is
        then only marked for a re-fit. Returns True if the size changed.
        """
        view = self.view
        if options.fixed_size and not force_resize:
            self.had_resize = True
            return False
        if view.w == w and view.h == h:
            return False

        if options.screen_clip:
            required = view.zoom
            if options.scale_down and not options.keep_zoom_vp:
                max_w = min(w, screen.width)
                max_h = min(h, screen.height)
                required, _ = calc_needed_zoom(
                    view.im_w, view.im_h, max_w, max_h, options.zoom_mode
                )
            view.w = min(int(view.im_w * required), screen.width)
            view.h = min(int(view.im_h * required), screen.height)
        else:
            view.w = w
            view.h = h

        self.had_resize = True

        if force_resize and options.fixed_size and self.win_type != WinType.THUMBNAIL:
            options.geometry = replace(options.geometry, width=view.w, height=view.h)
        return True

    def apply_zoom_fit(self, options: WindowOptions) -> RenderRegion:
        """Re-fit zoom and offset after a resize and return the region to draw."""
        if (
            self.had_resize
            and not options.keep_zoom_vp
            and self.win_type != WinType.THUMBNAIL
        ):
            fit_zoom(self.view, options, self.view.full_screen)
        self.had_resize = False
        if options.keep_zoom_vp:
            self.view.sanitise_offsets()
        return self.view.render_region()


class WindowRegistry:
    """The open windows, in the order they were opened."""

    def __init__(self) -> None:
        self._windows: list[Window] = []

    def register(self, window: Window) -> None:
        self._windows.append(window)

    def unregister(self, window: Window) -> None:
        """Remove ``window``; a window that is not registered is ignored."""
        self._windows = [w for w in self._windows if w is not window]

    def first_of_type(self, win_type: WinType) -> Window | None:
        return next((w for w in self._windows if w.win_type == win_type), None)

    def destroy_all(self) -> list[Window]:
        """Close every window, newest first, and return them in that order."""
        closed = list(reversed(self._windows))
        for window in closed:
            self.unregister(window)
            window.visible = False
        return closed

    def __iter__(self) -> Iterator[Window]:
        return iter(list(self._windows))

    def __len__(self) -> int:
        return len(self._windows)