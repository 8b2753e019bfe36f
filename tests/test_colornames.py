import pytest

from fractol.colornames import color_by_name, convert_color

RGB565 = (11, 5, 5, 6, 0, 5)
RGB888 = (16, 8, 8, 8, 0, 8)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert color_by_name(name) == expected


def test_lookup_ignores_case():
    assert color_by_name("SNOW") == color_by_name("snow")
    assert color_by_name("Ghost White") == 0xF8F8FF


def test_first_entry_wins_for_duplicate_names():
    assert color_by_name("dark slate") == 0x2F4F4F
    assert color_by_name("light slate") == 0x778899
    assert color_by_name("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert color_by_name("none") == -1


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        color_by_name("no such colour")


def test_non_string_name_raises():
    with pytest.raises(TypeError):
        color_by_name(0xFF)


def test_gray_and_grey_agree():
    for level in range(101):
        assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


@pytest.mark.parametrize("color", [0, 0x123456, 0xFFFFFF, 0xFF000000])
def test_deep_visual_keeps_color(color):
    assert convert_color(color, 24, RGB565) == color
    assert convert_color(color, 32, RGB565) == color


@pytest.mark.parametrize("color", [0, 0x010203, 0x7F7F7F, 0xABCDEF, 0xFFFFFF])
def test_shallow_visual_with_full_width_fields_is_identity(color):
    assert convert_color(color, 16, RGB888) == color


def test_black_converts_to_zero():
    assert convert_color(0, 16, RGB565) == 0


def test_white_fills_all_rgb565_bits():
    assert convert_color(0xFFFFFF, 16, RGB565) == 0xFFFF


def test_channels_land_in_their_own_fields():
    red = convert_color(0xFF0000, 16, RGB565)
    green = convert_color(0x00FF00, 16, RGB565)
    blue = convert_color(0x0000FF, 16, RGB565)
    assert red & ~0xF800 == 0 and red > 0
    assert green & ~0x07E0 == 0 and green > 0
    assert blue & ~0x001F == 0 and blue > 0
    assert red + green + blue == convert_color(0xFFFFFF, 16, RGB565)


def test_wrong_number_of_shifts_raises():
    with pytest.raises(ValueError):
        convert_color(0x123456, 16, (11, 5, 5, 6))