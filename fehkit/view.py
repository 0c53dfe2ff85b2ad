"""Zoom, offsets and the visible part of an image shown in a window."""

from __future__ import annotations

import math
from dataclasses import dataclass

from fehkit.enums import ZoomMode

PAUSED_SUFFIX = " [Paused]"


def _lround(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    rounded = int(math.floor(abs(value) + 0.5))
    return rounded if value >= 0 else -rounded


def calc_needed_zoom(
    orig_w: int, orig_h: int, dest_w: int, dest_h: int, zoom_mode: ZoomMode | int | None = None
) -> tuple[float, float]:
    """Return ``(zoom, ratio)`` that fits an image into a destination.

    With ``ZoomMode.FILL`` the zoom covers the destination instead of
    fitting inside it. ``ratio`` compares the two aspect ratios.
    """
    if min(orig_w, orig_h, dest_w, dest_h) <= 0:
        raise ValueError("sizes must be positive")
    ratio = (orig_w / orig_h) / (dest_w / dest_h)
    if zoom_mode == ZoomMode.FILL:
        ratio = 1.0 / ratio
    zoom = dest_w / orig_w if ratio > 1.0 else dest_h / orig_h
    return zoom, ratio


def paused_title(name: str, paused: bool) -> str:
    """Add or remove the pause marker at the end of a window title."""
    tail = name[-len(PAUSED_SUFFIX):] if len(name) > len(PAUSED_SUFFIX) else name
    if paused and tail != PAUSED_SUFFIX:
        return name + PAUSED_SUFFIX
    if not paused and tail == PAUSED_SUFFIX:
        return name[: len(name) - len(tail)]
    return name


@dataclass(frozen=True)
class RenderRegion:
    """Source rectangle of the image and destination rectangle in the window."""

    sx: int
    sy: int
    sw: int
    sh: int
    dx: int
    dy: int
    dw: int
    dh: int


@dataclass
class ImageView:
    """An image placed in a window: sizes, offset, zoom and rotation."""

    w: int = 0
    h: int = 0
    im_w: int = 0
    im_h: int = 0
    im_x: int = 0
    im_y: int = 0
    zoom: float = 1.0
    old_zoom: float = 1.0
    im_angle: float = 0.0
    has_rotated: bool = False
    full_screen: bool = False
    force_aliasing: bool = False
    name: str | None = None

    def reset(self, keep_zoom_vp: bool = False) -> None:
        """Forget rotation and, unless the viewport is kept, zoom and offset."""
        if not keep_zoom_vp:
            self.zoom = 1.0
            self.old_zoom = 1.0
            self.im_x = 0
            self.im_y = 0
        self.im_angle = 0.0
        self.has_rotated = False

    def sanitise_offsets(self) -> None:
        """Clamp the offset so the image does not drift off the window."""
        scaled_w = self.im_w * self.zoom
        scaled_h = self.im_h * self.zoom
        far_left = int(self.w - scaled_w)
        far_top = int(self.h - scaled_h)

        min_x, max_x = (far_left, 0) if scaled_w > self.w else (0, far_left)
        min_y, max_y = (far_top, 0) if scaled_h > self.h else (0, far_top)

        self.im_x = max(min(self.im_x, max_x), min_x)
        self.im_y = max(min(self.im_y, max_y), min_y)

    def center_image(
        self,
        screen_w: int,
        screen_h: int,
        full_screen: bool | None = None,
        geom_w: int | None = None,
        geom_h: int | None = None,
    ) -> None:
        """Centre the image on the screen, or in a fixed window geometry.

        ``full_screen`` defaults to the view's own flag. Without a fixed
        width or height the offset on that axis is zero.
        """
        if full_screen is None:
            full_screen = self.full_screen
        scaled_w = _lround(self.im_w * self.zoom)
        scaled_h = _lround(self.im_h * self.zoom)
        if full_screen:
            self.im_x = (screen_w - scaled_w) >> 1
            self.im_y = (screen_h - scaled_h) >> 1
        else:
            self.im_x = (int(geom_w) - scaled_w) >> 1 if geom_w is not None else 0
            self.im_y = (int(geom_h) - scaled_h) >> 1 if geom_h is not None else 0

    def render_region(self) -> RenderRegion:
        """The part of the image that is visible and where it is drawn."""
        dx = max(self.im_x, 0)
        dy = max(self.im_y, 0)
        sx = -_lround(self.im_x / self.zoom) if self.im_x < 0 else 0
        sy = -_lround(self.im_y / self.zoom) if self.im_y < 0 else 0

        calc_w = _lround(self.im_w * self.zoom)
        calc_h = _lround(self.im_h * self.zoom)
        dw = min(self.w - self.im_x, calc_w, self.w)
        dh = min(self.h - self.im_y, calc_h, self.h)

        sw = _lround(dw / self.zoom)
        sh = _lround(dh / self.zoom)
        return RenderRegion(sx=sx, sy=sy, sw=sw, sh=sh, dx=dx, dy=dy, dw=dw, dh=dh)

    def needs_checks(self, has_alpha: bool = False, fixed_geometry: bool = False) -> bool:
        """True if a checkerboard must be drawn behind the image."""
        if self.full_screen:
            return False
        return bool(
            has_alpha
            or fixed_geometry
            or self.im_x
            or self.im_y
            or self.w > self.im_w * self.zoom
            or self.h > self.im_h * self.zoom
            or self.has_rotated
        )

    def antialias(self, force_alias: bool = False) -> bool:
        """True if the image should be drawn smoothed."""
        return (
            (self.zoom != 1.0 or self.has_rotated)
            and not force_alias
            and not self.force_aliasing
        )

    def rename(self, newname: str | None, paused: bool = False) -> str:
        """Set the title, keeping the pause marker in step; None keeps the name."""
        if newname is None:
            newname = self.name or ""
        self.name = paused_title(newname, paused)
        return self.name