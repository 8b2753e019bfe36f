import pytest

from fractol.fractal import (
    BOUND,
    COLOR_STEP,
    INITIAL_COLOR_BASE,
    MAX_ITER,
    TRANSLATE_STEP,
    ZOOM_FACTOR,
    Button,
    Fractal,
    Key,
)


def small(**kwargs):
    return Fractal(width=8, height=8, **kwargs)


def test_initial_state():
    f = small(mandelbrot=False, c=0.25j)
    assert f.color_base == INITIAL_COLOR_BASE
    assert f.zoom == 1.0
    assert f.translate == 0j
    assert f.moving is False
    assert f.c == 0.25j
    assert len(f.pixels) == 64


def test_invalid_size():
    with pytest.raises(ValueError):
        Fractal(width=0, height=8)


def test_corner_maps_to_bound():
    f = small()
    assert f.to_complex(0, 0) == complex(-BOUND, BOUND)


def test_centre_maps_to_origin():
    f = small()
    assert f.to_complex(4, 4) == 0j


def test_translation_shifts_points():
    f = small()
    before = f.to_complex(2, 3)
    f.on_key(Key.LEFT)
    f.on_key(Key.UP)
    after = f.to_complex(2, 3)
    assert after.real == pytest.approx(before.real + TRANSLATE_STEP)
    assert after.imag == pytest.approx(before.imag + TRANSLATE_STEP)


def test_arrow_keys_cancel_out():
    f = small()
    for key in (Key.LEFT, Key.UP, Key.RIGHT, Key.DOWN):
        f.on_key(key)
    assert f.translate.real == pytest.approx(0.0)
    assert f.translate.imag == pytest.approx(0.0)


def test_wheel_zoom():
    f = small()
    f.on_mouse(Button.WHEEL_DOWN)
    assert f.zoom == ZOOM_FACTOR
    f.on_mouse(Button.WHEEL_UP)
    assert f.zoom == pytest.approx(1.0)


def test_other_button_keeps_zoom():
    f = small()
    f.on_mouse(1)
    assert f.zoom == 1.0


def test_space_toggles_motion():
    f = small()
    f.on_key(Key.SPACE)
    assert f.moving is True
    f.on_key(Key.SPACE)
    assert f.moving is False


def test_colour_keys():
    f = small()
    f.on_key(Key.ZERO)
    assert f.color_base == INITIAL_COLOR_BASE + COLOR_STEP
    f.on_key(Key.NINE)
    assert f.color_base == INITIAL_COLOR_BASE


def test_m_switches_to_mandelbrot():
    f = small(mandelbrot=False)
    f.on_key(Key.M)
    assert f.mandelbrot is True


def test_r_resets_view_but_keeps_kind():
    f = small(mandelbrot=False, c=0.5 + 0.5j)
    f.on_key(Key.SPACE)
    f.on_key(Key.ZERO)
    f.on_mouse(Button.WHEEL_DOWN)
    f.on_key(Key.LEFT)
    f.on_key(Key.R)
    assert f.zoom == 1.0
    assert f.moving is False
    assert f.translate == 0j
    assert f.color_base == INITIAL_COLOR_BASE
    assert f.mandelbrot is False


def test_escape_exits(capsys):
    f = small()
    with pytest.raises(SystemExit) as info:
        f.on_key(Key.ESCAPE)
    assert info.value.code == 1
    out = capsys.readouterr().out
    assert "ESC pressed." in out
    assert "Closing window. Bye!" in out


def test_idle_drifts_c_only_when_moving():
    f = small(mandelbrot=False, c=0.1 + 0.2j)
    f.on_idle()
    assert f.c == 0.1 + 0.2j
    f.on_key(Key.SPACE)
    f.on_idle()
    assert f.c.real < 0.1
    assert f.c.imag == 0.2


def test_bounded_point_is_coloured_zero():
    f = small(mandelbrot=False, c=0j)
    assert f.pixel_color(4, 4) == 0
    assert f.pixels[4 * 8 + 4] == 0


def test_render_matches_pixel_color():
    f = small(mandelbrot=False, c=-0.4 + 0.6j)
    f.render()
    snapshot = list(f.pixels)
    assert all(snapshot[y * 8 + x] == f.pixel_color(x, y) for y in range(8) for x in range(8))


def test_colours_are_multiples_of_palette_step():
    f = small()
    f.render()
    unit = 2 * (f.color_base // 15)
    assert all(value % unit == 0 for value in f.pixels)
    assert max(f.pixels) <= (MAX_ITER - 1) * unit


def test_mandelbrot_render_leaves_last_point_in_c():
    f = small()
    f.render()
    assert f.c == f.to_complex(7, 7)


def test_julia_render_keeps_c():
    f = small(mandelbrot=False, c=0.3 - 0.1j)
    f.render()
    assert f.c == 0.3 - 0.1j