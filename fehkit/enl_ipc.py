"""Messages exchanged with Enlightenment over its client-message IPC."""

from __future__ import annotations

from fehkit.layout import BgStyle
from fehkit.utils import PACKAGE

CHUNK_SIZE = 20
HEADER_SIZE = 8
PAYLOAD_SIZE = CHUNK_SIZE - HEADER_SIZE
SEND_BUFFER_SIZE = 4096
_BGNAME_SIZE = 20


def encode_message(window_id: int, message: str) -> list[bytes]:
    """Split ``message`` into the 20-byte client-message payloads.

    Each payload starts with ``window_id`` as eight space-padded hex
    digits, followed by up to twelve bytes of the NUL-terminated message.
    """
    header = f"{window_id:8x}".encode("ascii")
    if window_id < 0 or len(header) > HEADER_SIZE:
        raise ValueError(f"window id out of range: {window_id}")
    data = message.encode("utf-8") + b"\0"
    return [
        (header + data[start:start + PAYLOAD_SIZE]).ljust(CHUNK_SIZE, b"\0")
        for start in range(0, len(data), PAYLOAD_SIZE)
    ]


class ReplyAssembler:
    """Collects reply payloads until a short one completes the message."""

    def __init__(self) -> None:
        self._parts: list[bytes] = []

    def feed(self, chunk: bytes) -> str | None:
        """Add the data part of one payload (the bytes after the header).

        Returns the whole reply once a chunk shorter than twelve bytes
        arrives, otherwise None.
        """
        piece = chunk[:PAYLOAD_SIZE].split(b"\0", 1)[0]
        self._parts.append(piece)
        if len(piece) < PAYLOAD_SIZE:
            reply = b"".join(self._parts)
            self._parts = []
            return reply.decode("utf-8", errors="surrogateescape")
        return None


def background_commands(bgname: str, filename: str, style: BgStyle, desktop: int) -> list[str]:
    """The IPC commands that set ``filename`` as the background of ``desktop``."""
    first = f"background {bgname} bg.file {filename}"
    if len(first) >= SEND_BUFFER_SIZE:
        raise ValueError("Writing to IPC send buffer was truncated")
    commands = [first]
    prefix = f"background {bgname}"
    if style is BgStyle.SCALE:
        settings = [
            "bg.solid 0 0 0",
            "bg.tile 0",
            "bg.xjust 512",
            "bg.yjust 512",
            "bg.xperc 1024",
            "bg.yperc 1024",
        ]
    elif style is BgStyle.CENTER:
        settings = ["bg.solid 0 0 0", "bg.tile 0", "bg.xjust 512", "bg.yjust 512"]
    else:
        settings = ["bg.tile 1"]
    commands += [f"{prefix} {setting}" for setting in settings]
    commands.append(f"use_bg {bgname} {desktop}")
    return commands


def client_registration(version: str) -> list[str]:
    """The commands that register this program as an IPC client."""
    return [
        f"set clientname {PACKAGE}",
        f"set version {version}",
        "set email [email]",
        "set info Feh - be pr0n or be dead",
    ]


def parse_num_desks(reply: str | None) -> int:
    """Read the desktop count from a ``num_desks ?`` reply.

    None stands for a faked IPC window and gives -1; a reply without
    digits gives 0.
    """
    if reply is None:
        return -1
    start = next((index for index, char in enumerate(reply) if char.isdigit()), len(reply))
    digits = ""
    for char in reply[start:]:
        if not char.isdigit():
            break
        digits += char
    return int(digits) if digits else 0


def background_name(number: int) -> str:
    """The name under which a background is registered."""
    return f"FEHBG_{number}"[: _BGNAME_SIZE - 1]