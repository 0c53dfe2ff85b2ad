"""Error reporting and small string and file helpers."""

from __future__ import annotations

import itertools
import os
import sys
from pathlib import Path

PACKAGE = "feh"

_URL_PREFIXES = (
    "http://",
    "https://",
    "gopher://",
    "gophers://",
    "ftp://",
    "file://",
)

_READ_LIMIT = 4095
_ESCAPE_BUFFER = 1024
_UNIQUE_LIMIT = 999998

_unique_counter = itertools.count(1)


class FehError(Exception):
    """A fatal error; a command that catches it exits with ``exit_code``."""

    exit_code = 2

    def __init__(self, message: str, error: OSError | None = None) -> None:
        self.message = message
        self.error = error
        super().__init__(error_message("ERROR", message, error))


def error_message(level: str, message: str, error: OSError | None = None) -> str:
    """Format a diagnostic line.

    A message ending in ``:`` has the description of ``error`` appended.
    """
    text = f"{PACKAGE} {level}: {message}"
    if message.endswith(":") and error is not None:
        if error.errno is not None:
            detail = os.strerror(error.errno)
        else:
            detail = str(error)
        text += f" {detail}"
    return text


def warn(message: str, error: OSError | None = None) -> None:
    """Print a warning to standard error and carry on."""
    sys.stdout.flush()
    print(error_message("WARNING", message, error), file=sys.stderr)


def estrjoin(separator: str | None, *args: str | None) -> str:
    """Join ``args`` with ``separator``, stopping at the first ``None``."""
    parts = list(itertools.takewhile(lambda part: part is not None, args))
    return (separator or "").join(parts)


def path_is_url(path: str) -> bool:
    """Return True if ``path`` uses one of the supported URL schemes."""
    return path.startswith(_URL_PREFIXES)


def unique_filename(directory: str, basename: str) -> str:
    """Return a path in ``directory`` that does not exist yet.

    ``directory`` must end with a slash or be empty.
    """
    global _unique_counter
    pid = f"{os.getpid():06d}"
    while True:
        number = next(_unique_counter)
        if number > _UNIQUE_LIMIT:
            _unique_counter = itertools.count(1)
            number = next(_unique_counter)
        candidate = estrjoin("", directory, "feh_", pid, "_", f"{number:06d}", "_", basename)
        if not os.path.exists(candidate):
            return candidate


def read_file(path: str | os.PathLike[str]) -> str | None:
    """Read at most 4095 bytes of a file, dropping one trailing newline.

    Returns None if the file cannot be opened.
    """
    try:
        with Path(path).open("rb") as handle:
            data = handle.read(_READ_LIMIT)
    except OSError:
        return None
    if data.endswith(b"\n"):
        data = data[:-1]
    data = data.split(b"\0", 1)[0]
    return data.decode("utf-8", errors="surrogateescape")


def shell_escape(text: str) -> str:
    """Quote ``text`` for a POSIX shell in single quotes.

    Input that would not fit the fixed output size is cut short.
    """
    out = ["'"]
    length = 1
    for char in text:
        if length >= _ESCAPE_BUFFER - 7:
            break
        if char == "'":
            out.append("'\"'\"'")
            length += 5
        else:
            out.append(char)
            length += 1
    out.append("'")
    return "".join(out)