"""Placement of a wallpaper image inside a screen area."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from fehkit.enums import BgMode

_GEOMETRY_RE = re.compile(
    r"=?(?P<w>\d+)?(?:[xX](?P<h>\d+))?"
    r"(?:(?P<xs>[+-])(?P<x>\d+)(?:(?P<ys>[+-])(?P<y>\d+))?)?"
)


@dataclass(frozen=True)
class Geometry:
    """An X geometry specification such as ``800x600+10-20``.

    Offsets keep their sign; ``x_negative`` records a leading ``-`` so
    that ``-0`` is still measured from the right or bottom edge.
    """

    width: int | None = None
    height: int | None = None
    x: int | None = None
    y: int | None = None
    x_negative: bool = False
    y_negative: bool = False

    @classmethod
    def parse(cls, text: str) -> Geometry:
        """Parse ``[=][W][xH][{+-}X[{+-}Y]]``; raise ValueError if malformed."""
        match = _GEOMETRY_RE.fullmatch(text)
        if match is None:
            raise ValueError(f"invalid geometry: {text!r}")
        parts = match.groupdict()

        def offset(sign: str | None, digits: str | None) -> int | None:
            if digits is None:
                return None
            value = int(digits)
            return -value if sign == "-" else value

        return cls(
            width=int(parts["w"]) if parts["w"] is not None else None,
            height=int(parts["h"]) if parts["h"] is not None else None,
            x=offset(parts["xs"], parts["x"]),
            y=offset(parts["ys"], parts["y"]),
            x_negative=parts["xs"] == "-",
            y_negative=parts["ys"] == "-",
        )

    @property
    def has_x(self) -> bool:
        return self.x is not None

    @property
    def has_y(self) -> bool:
        return self.y is not None


_NO_GEOMETRY = Geometry()


@dataclass(frozen=True)
class Placement:
    """Where to draw an image.

    The source rectangle is the part of the image to take; ``src_w`` and
    ``src_h`` are None when the whole image is used. The destination
    rectangle is where it lands. ``smooth`` is False where the image is
    drawn at its own size and anti-aliasing is never wanted.
    """

    dst_x: int
    dst_y: int
    dst_w: int
    dst_h: int
    src_x: int = 0
    src_y: int = 0
    src_w: int | None = None
    src_h: int | None = None
    smooth: bool = True

    @property
    def whole_image(self) -> bool:
        return self.src_w is None and self.src_h is None


class BgStyle(Enum):
    """Background styles, valued by their ``--bg-`` option name."""

    TILE = "tile"
    CENTER = "center"
    SCALE = "scale"
    FILL = "fill"
    MAX = "max"


def bg_style_for_mode(mode: BgMode | int) -> BgStyle:
    """The style used when setting the background from a file list."""
    return {
        BgMode.TILE: BgStyle.TILE,
        BgMode.SCALE: BgStyle.SCALE,
        BgMode.FILL: BgStyle.FILL,
        BgMode.MAX: BgStyle.MAX,
    }.get(mode, BgStyle.CENTER)


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def scaled_placement(x: int, y: int, w: int, h: int) -> Placement:
    """Stretch the whole image over the area."""
    return Placement(dst_x=x, dst_y=y, dst_w=w, dst_h=h)


def _offset(area: int, size: int, value: int | None, negative: bool) -> int:
    if value is None:
        return (area - size) >> 1
    if negative:
        return (area - size) + value
    return value


def centered_placement(
    img_w: int, img_h: int, x: int, y: int, w: int, h: int, geometry: Geometry | None = None
) -> Placement:
    """Draw the image at its own size, centred or at the geometry offset."""
    geometry = geometry or _NO_GEOMETRY
    offset_x = _offset(w, img_w, geometry.x, geometry.x_negative)
    offset_y = _offset(h, img_h, geometry.y, geometry.y_negative)
    return Placement(
        src_x=-offset_x if offset_x < 0 else 0,
        src_y=-offset_y if offset_y < 0 else 0,
        src_w=w,
        src_h=h,
        dst_x=x + max(offset_x, 0),
        dst_y=y + max(offset_y, 0),
        dst_w=w,
        dst_h=h,
        smooth=False,
    )


def filled_placement(
    img_w: int, img_h: int, x: int, y: int, w: int, h: int, geometry: Geometry | None = None
) -> Placement:
    """Cover the whole area, cutting off the part of the image that overflows."""
    geometry = geometry or _NO_GEOMETRY
    cut_x = img_w * h > img_h * w

    render_w = _div(img_h * w, h) if cut_x else img_w
    render_h = img_h if cut_x else _div(img_w * h, w)
    render_x = (img_w - render_w) >> 1 if cut_x else 0
    render_y = 0 if cut_x else (img_h - render_h) >> 1

    if geometry.has_x and cut_x:
        if geometry.x_negative:
            render_x = img_w - render_w + geometry.x
        else:
            render_x = geometry.x
        if render_x < 0:
            render_x = 0
        elif render_x + render_w > img_w:
            render_x = img_w - render_w
    elif geometry.has_y and not cut_x:
        if geometry.y_negative:
            render_y = img_h - render_h + geometry.y
        else:
            render_y = geometry.y
        if render_y < 0:
            render_y = 0
        elif render_y + render_h > img_h:
            render_y = img_h - render_h

    return Placement(
        src_x=render_x,
        src_y=render_y,
        src_w=render_w,
        src_h=render_h,
        dst_x=x,
        dst_y=y,
        dst_w=w,
        dst_h=h,
    )


def maxed_placement(
    img_w: int, img_h: int, x: int, y: int, w: int, h: int, geometry: Geometry | None = None
) -> Placement:
    """Fit the whole image inside the area, keeping its aspect ratio."""
    geometry = geometry or _NO_GEOMETRY
    border_x = not (img_w * h > img_h * w)

    render_w = _div(img_w * h, img_h) if border_x else w
    render_h = h if border_x else _div(img_h * w, img_w)

    margin_x = _offset(w, render_w, geometry.x, geometry.x_negative)
    margin_y = _offset(h, render_h, geometry.y, geometry.y_negative)

    return Placement(
        dst_x=x + (margin_x if border_x else 0),
        dst_y=y + (0 if border_x else margin_y),
        dst_w=render_w,
        dst_h=render_h,
    )