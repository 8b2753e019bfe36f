"""Command-line entry point: parse arguments and run the viewer window."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from .fractal import Fractal, Key
from .numconv import atoi
from .strings import strncmp

_TITLE = "Fract'ol!"
_PROG = "fractol"


class UsageError(ValueError):
    """The command line does not name a fractal."""


def parse_args(argv: Sequence[str]) -> Fractal:
    """Build a fractal from the arguments that follow the program name.

    ``mandelbrot`` selects the Mandelbrot set; two integers select the Julia
    set for that constant.
    """
    args = list(argv)
    if len(args) == 1 and strncmp(args[0], "mandelbrot", 10) == 0:
        return Fractal(mandelbrot=True)
    if len(args) == 2:
        return Fractal(mandelbrot=False, c=complex(atoi(args[0]), atoi(args[1])))
    raise UsageError("Bad function call!")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the viewer; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        fractal = parse_args(args)
    except UsageError as exc:
        print(exc)
        print(f"Usage:\t{_PROG} mandelbrot")
        print(f"OR\t{_PROG} num1 num2")
        return 1
    return _run(fractal)


def _present(pygame, screen, fractal: Fractal) -> None:
    data = fractal.pixels.tobytes()
    r, g, b = (2, 1, 0) if sys.byteorder == "little" else (1, 2, 3)
    rgb = bytearray(fractal.width * fractal.height * 3)
    rgb[0::3] = data[r::4]
    rgb[1::3] = data[g::4]
    rgb[2::3] = data[b::4]
    surface = pygame.image.frombuffer(bytes(rgb), (fractal.width, fractal.height), "RGB")
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def _run(fractal: Fractal) -> int:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    keysyms = {
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((fractal.width, fractal.height))
        pygame.display.set_caption(_TITLE)
        fractal.render()
        _present(pygame, screen, fractal)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    print("Closing window. Bye!")
                    return 1
                if event.type == pygame.KEYUP:
                    fractal.on_key(keysyms.get(event.key, event.key))
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    fractal.on_mouse(event.button)
            fractal.on_idle()
            _present(pygame, screen, fractal)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1
    finally:
        pygame.quit()