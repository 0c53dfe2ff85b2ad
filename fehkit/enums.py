"""Modes, window types, Motif hints and other fixed values."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from enum import IntEnum

SLIDESHOW_RELOAD_MAX = 4096

DEFAULT_FONT = "yudit/11"
DEFAULT_MENU_FONT = "yudit/10"
DEFAULT_FONT_BIG = "yudit/12"
DEFAULT_FONT_TITLE = "yudit/14"

INPLACE_EDIT_FLIP = -1
INPLACE_EDIT_MIRROR = -2

ZOOM_MIN = 0.002
ZOOM_MAX = 2000

# Nikon and Canon makernote tags worth showing.
EXIF_NIKON_MAKERNOTE_TAGS = (6, 8, 9, 135, 18, 168, 2, 5, 132, 171, 34, 35, 183)
EXIF_CANON_MAKERNOTE_TAGS = (8, 9)

MWM_HINTS_FUNCTIONS = 1 << 0
MWM_HINTS_DECORATIONS = 1 << 1
MWM_HINTS_INPUT_MODE = 1 << 2
MWM_HINTS_STATUS = 1 << 3

MWM_FUNC_ALL = 1 << 0
MWM_FUNC_RESIZE = 1 << 1
MWM_FUNC_MOVE = 1 << 2
MWM_FUNC_MINIMIZE = 1 << 3
MWM_FUNC_MAXIMIZE = 1 << 4
MWM_FUNC_CLOSE = 1 << 5

MWM_DECOR_ALL = 1 << 0
MWM_DECOR_BORDER = 1 << 1
MWM_DECOR_RESIZEH = 1 << 2
MWM_DECOR_TITLE = 1 << 3
MWM_DECOR_MENU = 1 << 4
MWM_DECOR_MINIMIZE = 1 << 5
MWM_DECOR_MAXIMIZE = 1 << 6

MWM_INPUT_MODELESS = 0
MWM_INPUT_PRIMARY_APPLICATION_MODAL = 1
MWM_INPUT_SYSTEM_MODAL = 2
MWM_INPUT_FULL_APPLICATION_MODAL = 3

PROP_MWM_HINTS_ELEMENTS = 5


class Mode(IntEnum):
    NORMAL = 0
    PAN = 1
    ZOOM = 2
    ROTATE = 3
    BLUR = 4
    NEXT = 5


class BgMode(IntEnum):
    NONE = 0
    TILE = 1
    CENTER = 2
    SCALE = 3
    FILL = 4
    MAX = 5


class ZoomMode(IntEnum):
    FILL = 1
    MAX = 2


class TextBg(IntEnum):
    CLEAR = 0
    TINTED = 1


class SlideChange(IntEnum):
    NEXT = 0
    PREV = 1
    RAND = 2
    FIRST = 3
    LAST = 4
    JUMP_FWD = 5
    JUMP_BACK = 6
    JUMP_NEXT_DIR = 7
    JUMP_PREV_DIR = 8


class LoadError(IntEnum):
    IMLIB = 0
    IMAGEMAGICK = 1
    CURL = 2
    DCRAW = 3
    MAGICBYTES = 4


class WinType(IntEnum):
    UNSET = 0
    SLIDESHOW = 1
    SINGLE = 2
    THUMBNAIL = 3
    THUMBNAIL_VIEWER = 4


@dataclass
class MwmHints:
    """Motif window manager hints, in property order."""

    flags: int = 0
    functions: int = 0
    decorations: int = 0
    input_mode: int = 0
    status: int = 0

    @classmethod
    def borderless(cls) -> MwmHints:
        """Hints that ask the window manager for no decorations."""
        return cls(flags=MWM_HINTS_DECORATIONS, decorations=0)

    def as_tuple(self) -> tuple[int, int, int, int, int]:
        """The hint values in the order the property stores them."""
        return astuple(self)


def xy_in_rect(x: int, y: int, rx: int, ry: int, rw: int, rh: int) -> bool:
    """True if the point lies in the half-open rectangle."""
    return rx <= x < rx + rw and ry <= y < ry + rh