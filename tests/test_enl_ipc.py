import pytest

from fehkit.enl_ipc import (
    ReplyAssembler,
    background_commands,
    background_name,
    client_registration,
    encode_message,
    parse_num_desks,
)
from fehkit.layout import BgStyle


def test_encode_short_message_wire_bytes():
    chunks = encode_message(0x1234, "nop")
    assert chunks == [b"    1234nop\0" + b"\0" * 8]


def test_encode_chunks_are_twenty_bytes():
    chunks = encode_message(0xABCDEF, "background FEHBG_1 bg.file /some/long/path.png")
    assert all(len(chunk) == 20 for chunk in chunks)
    assert all(chunk[:8] == b"  abcdef" for chunk in chunks)


def test_encode_exact_multiple_adds_terminator_chunk():
    chunks = encode_message(1, "a" * 12)
    assert len(chunks) == 2
    assert chunks[1][8:] == b"\0" * 12


def test_encode_rejects_oversized_window_id():
    with pytest.raises(ValueError):
        encode_message(1 << 40, "nop")


@pytest.mark.parametrize("message", ["", "nop", "a" * 12, "num_desks ?", "x" * 37])
def test_round_trip_through_assembler(message):
    assembler = ReplyAssembler()
    results = [assembler.feed(chunk[8:]) for chunk in encode_message(0x42, message)]
    assert results[-1] == message
    assert all(result is None for result in results[:-1])


def test_assembler_resets_after_reply():
    assembler = ReplyAssembler()
    for chunk in encode_message(7, "first"):
        assembler.feed(chunk[8:])
    replies = [assembler.feed(chunk[8:]) for chunk in encode_message(7, "second")]
    assert replies[-1] == "second"


def test_background_commands_scale():
    commands = background_commands("FEHBG_1", "/a.png", BgStyle.SCALE, 0)
    assert commands[0] == "background FEHBG_1 bg.file /a.png"
    assert "background FEHBG_1 bg.xperc 1024" in commands
    assert commands[-1] == "use_bg FEHBG_1 0"
    assert len(commands) == 8


def test_background_commands_center():
    commands = background_commands("FEHBG_1", "/a.png", BgStyle.CENTER, 2)
    assert "background FEHBG_1 bg.yjust 512" in commands
    assert not any("perc" in command for command in commands)
    assert commands[-1] == "use_bg FEHBG_1 2"


@pytest.mark.parametrize("style", [BgStyle.TILE, BgStyle.FILL, BgStyle.MAX])
def test_background_commands_tile_fallback(style):
    commands = background_commands("B", "/a.png", style, 1)
    assert commands == ["background B bg.file /a.png", "background B bg.tile 1", "use_bg B 1"]


def test_background_commands_too_long():
    with pytest.raises(ValueError):
        background_commands("B", "/" + "x" * 5000, BgStyle.TILE, 0)


def test_client_registration():
    commands = client_registration("3.0")
    assert commands[0] == "set clientname feh"
    assert "set version 3.0" in commands


@pytest.mark.parametrize(
    "reply, expected",
    [(None, -1), ("4", 4), ("desks: 12 total", 12), ("nothing", 0)],
)
def test_parse_num_desks(reply, expected):
    assert parse_num_desks(reply) == expected


def test_background_name():
    assert background_name(5) == "FEHBG_5"
    assert len(background_name(10**20)) == 19