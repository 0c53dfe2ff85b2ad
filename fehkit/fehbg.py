"""The ``.fehbg`` script that restores the last background."""

from __future__ import annotations

import os
import stat
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from fehkit.layout import BgStyle, Geometry
from fehkit.utils import shell_escape, warn


@dataclass
class BgScriptOptions:
    """Options that are repeated in the generated script."""

    image_bg: str | None = None
    xinerama: bool = True
    xinerama_index: int = -1
    geometry: Geometry | None = None
    force_aliasing: bool = False


def _geometry_args(geometry: Geometry | None) -> str:
    if geometry is None or not geometry.has_x:
        return ""
    sign = "-" if geometry.x_negative else "+"
    text = f" --geometry {sign}{abs(geometry.x) if geometry.x_negative else geometry.x}"
    if geometry.has_y:
        sign = "-" if geometry.y_negative else "+"
        text += f"{sign}{abs(geometry.y) if geometry.y_negative else geometry.y}"
    return text


def build_bg_script(
    exec_path: str,
    style: BgStyle,
    options: BgScriptOptions,
    files: str | Sequence[str] | None,
) -> str:
    """Return the script text.

    ``files`` is a single image path, a file list (each entry is written
    followed by a space), or None.
    """
    command = os.path.abspath(exec_path) if "/" in exec_path else exec_path
    parts = ["#!/bin/sh\n", command, " --no-fehbg --bg-", style.value]
    if options.image_bg:
        parts += [" --image-bg ", shell_escape(options.image_bg)]
    if options.xinerama:
        if options.xinerama_index >= 0:
            parts.append(f" --xinerama-index {options.xinerama_index}")
    else:
        parts.append(" --no-xinerama")
    parts.append(_geometry_args(options.geometry))
    if options.force_aliasing:
        parts.append(" --force-aliasing")
    parts.append(" ")
    if isinstance(files, str):
        parts.append(shell_escape(os.path.abspath(files)))
    elif files is not None:
        parts += [shell_escape(os.path.abspath(name)) + " " for name in files]
    parts.append("\n")
    return "".join(parts)


def write_bg_script(home: str | os.PathLike[str] | None, content: str) -> Path | None:
    """Write ``content`` to ``<home>/.fehbg`` and make it executable.

    Returns the path written, or None if there is no home or it failed.
    """
    if home is None:
        return None
    path = Path(home) / ".fehbg"
    try:
        with path.open("w") as handle:
            handle.write(content)
    except OSError:
        warn(f"Can't write to {path}")
        return None
    try:
        mode = path.stat().st_mode
        path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP)
    except OSError:
        warn(f"Can't set {path} as executable")
    return path