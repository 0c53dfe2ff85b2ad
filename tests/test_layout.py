import pytest

from fehkit.enums import BgMode
from fehkit.layout import (
    BgStyle,
    Geometry,
    bg_style_for_mode,
    centered_placement,
    filled_placement,
    maxed_placement,
    scaled_placement,
)


def test_parse_full_geometry():
    geom = Geometry.parse("800x600+10-20")
    assert (geom.width, geom.height, geom.x, geom.y) == (800, 600, 10, -20)
    assert geom.x_negative is False
    assert geom.y_negative is True


def test_parse_negative_zero_keeps_flag():
    geom = Geometry.parse("-0+5")
    assert geom.x == 0
    assert geom.x_negative is True
    assert geom.y == 5


def test_parse_offset_only_x():
    geom = Geometry.parse("+7")
    assert geom.has_x and not geom.has_y
    assert geom.width is None


def test_parse_empty_has_nothing():
    assert Geometry.parse("") == Geometry()


@pytest.mark.parametrize("text", ["abc", "800x", "x", "10+", "800x600+1+2+3"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        Geometry.parse(text)


@pytest.mark.parametrize(
    "mode, style",
    [
        (BgMode.TILE, BgStyle.TILE),
        (BgMode.SCALE, BgStyle.SCALE),
        (BgMode.FILL, BgStyle.FILL),
        (BgMode.MAX, BgStyle.MAX),
        (BgMode.CENTER, BgStyle.CENTER),
        (BgMode.NONE, BgStyle.CENTER),
    ],
)
def test_bg_style_for_mode(mode, style):
    assert bg_style_for_mode(mode) is style


def test_scaled_covers_area_with_whole_image():
    p = scaled_placement(5, 6, 100, 200)
    assert (p.dst_x, p.dst_y, p.dst_w, p.dst_h) == (5, 6, 100, 200)
    assert p.whole_image


def test_centered_same_size_has_no_offset():
    p = centered_placement(100, 80, 3, 4, 100, 80, None)
    assert (p.src_x, p.src_y, p.dst_x, p.dst_y) == (0, 0, 3, 4)
    assert p.smooth is False


def test_centered_larger_image_crops_symmetrically():
    p = centered_placement(300, 200, 0, 0, 100, 100, None)
    assert p.dst_x == 0 and p.dst_y == 0
    assert p.src_x * 2 == 300 - 100
    assert p.src_y * 2 == 200 - 100


def test_centered_geometry_offset_used_directly():
    p = centered_placement(50, 50, 10, 10, 100, 100, Geometry.parse("+7+9"))
    assert (p.dst_x, p.dst_y) == (17, 19)


def test_centered_negative_geometry_from_right_edge():
    p = centered_placement(50, 50, 0, 0, 100, 100, Geometry.parse("-0-0"))
    assert (p.dst_x, p.dst_y) == (100 - 50, 100 - 50)


@pytest.mark.parametrize("img", [(400, 100), (100, 400), (300, 300), (1920, 1080)])
def test_filled_source_inside_image_and_fills_area(img):
    img_w, img_h = img
    p = filled_placement(img_w, img_h, 0, 0, 200, 150, None)
    assert 0 <= p.src_x and p.src_x + p.src_w <= img_w
    assert 0 <= p.src_y and p.src_y + p.src_h <= img_h
    assert (p.dst_w, p.dst_h) == (200, 150)
    assert p.src_w == img_w or p.src_h == img_h


def test_filled_geometry_is_clamped():
    p = filled_placement(1000, 100, 0, 0, 100, 100, Geometry.parse("+5000+0"))
    assert p.src_x + p.src_w == 1000


def test_filled_negative_geometry_clamped_at_zero():
    p = filled_placement(1000, 100, 0, 0, 100, 100, Geometry.parse("-5000+0"))
    assert p.src_x == 0


@pytest.mark.parametrize("img", [(400, 100), (100, 400), (300, 300)])
def test_maxed_fits_inside_area(img):
    img_w, img_h = img
    p = maxed_placement(img_w, img_h, 10, 20, 200, 150, None)
    assert p.whole_image
    assert p.dst_x >= 10 and p.dst_x + p.dst_w <= 10 + 200
    assert p.dst_y >= 20 and p.dst_y + p.dst_h <= 20 + 150
    assert p.dst_w == 200 or p.dst_h == 150