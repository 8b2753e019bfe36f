"""The fractal state, its rendering and its reactions to input events."""

from __future__ import annotations

import enum
from array import array
from dataclasses import dataclass, field

from .complexmath import iterate

WIDTH = 720
HEIGHT = 720
MAX_ITER = 50
MAX_COLORS = 15
BOUND = 3

INITIAL_COLOR_BASE = 0x001000
COLOR_STEP = 0xFF00FF
ZOOM_FACTOR = 0.95
TRANSLATE_STEP = 0.1


class Key(enum.IntEnum):
    """X11 keysyms the fractal reacts to."""

    SPACE = 0x20
    ZERO = 0x30
    NINE = 0x39
    M = 0x4D
    R = 0x52
    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54


class Button(enum.IntEnum):
    """Mouse buttons the fractal reacts to."""

    WHEEL_UP = 4
    WHEEL_DOWN = 5


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


@dataclass
class Fractal:
    """A Mandelbrot or Julia view with its pixel buffer.

    ``pixels`` holds one 0x00RRGGBB colour per pixel, row by row.
    """

    mandelbrot: bool = True
    c: complex = 0j
    width: int = WIDTH
    height: int = HEIGHT
    color_base: int = field(init=False)
    zoom: float = field(init=False)
    moving: bool = field(init=False)
    translate: complex = field(init=False)
    pixels: array = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        self.c = complex(self.c)
        self.mandelbrot = bool(self.mandelbrot)
        self.pixels = array("I", [0]) * (self.width * self.height)
        self.reset()

    def reset(self) -> None:
        """Restore colours, zoom, position and motion; keep the fractal kind."""
        self.color_base = INITIAL_COLOR_BASE
        self.mandelbrot = bool(self.mandelbrot)
        self.zoom = 1.0
        self.translate = 0j
        self.moving = False

    def to_complex(self, x: float, y: float) -> complex:
        """The point of the plane shown at pixel (x, y)."""
        real = (-BOUND + (x / self.width) * 2 * BOUND) / self.zoom + self.translate.real
        imag = (BOUND - (y / self.height) * 2 * BOUND) / self.zoom + self.translate.imag
        return complex(real, imag)

    def pixel_color(self, x: int, y: int) -> int:
        """Compute, store and return the colour of pixel (x, y).

        In Mandelbrot mode the pixel's point also becomes ``c``.
        """
        z = self.to_complex(float(x), float(y))
        if self.mandelbrot:
            self.c = z
        count = iterate(z, self.c, MAX_ITER, BOUND)
        color = (count % MAX_ITER) * _trunc_div(self.color_base, MAX_COLORS) * 2
        color &= 0xFFFFFFFF
        self.pixels[y * self.width + x] = color
        return color

    def render(self) -> None:
        """Recompute every pixel."""
        for y in range(self.height):
            for x in range(self.width):
                self.pixel_color(x, y)

    def on_idle(self) -> None:
        """Drift ``c`` while motion is on, then redraw."""
        if self.moving:
            drift = -1 * 2.0 * BOUND / self.width * 5
            self.c = complex(self.c.real + drift, self.c.imag)
        self.render()

    def on_mouse(self, button: int) -> None:
        """Zoom out on wheel down, in on wheel up, then redraw."""
        if button == Button.WHEEL_DOWN:
            self.zoom *= ZOOM_FACTOR
        if button == Button.WHEEL_UP:
            self.zoom /= ZOOM_FACTOR
        self.render()

    def on_key(self, key: int) -> None:
        """React to a released key, then redraw.

        Escape prints a farewell, releases the pixel buffer and raises
        ``SystemExit(1)``.
        """
        if key == Key.R:
            self.reset()
        if key == Key.SPACE:
            self.moving = not self.moving
        if key == Key.ZERO:
            self.color_base = _wrap_int32(self.color_base + COLOR_STEP)
        if key == Key.NINE:
            self.color_base = _wrap_int32(self.color_base - COLOR_STEP)
        if key == Key.M:
            self.mandelbrot = True
        if key == Key.LEFT:
            self.translate = complex(self.translate.real + TRANSLATE_STEP, self.translate.imag)
        if key == Key.RIGHT:
            self.translate = complex(self.translate.real - TRANSLATE_STEP, self.translate.imag)
        if key == Key.UP:
            self.translate = complex(self.translate.real, self.translate.imag + TRANSLATE_STEP)
        if key == Key.DOWN:
            self.translate = complex(self.translate.real, self.translate.imag - TRANSLATE_STEP)
        if key == Key.ESCAPE:
            print("ESC pressed. ")
            self._close()
        self.render()

    def _close(self) -> None:
        """Release the image buffer and stop the program with status 1."""
        print("Closing window. Bye!")
        self.pixels = array("I")
        self.moving = False
        raise SystemExit(1)