# fractol

An interactive explorer for the Mandelbrot set and Julia sets, drawn with
pygame in a 720×720 window titled "Fract'ol!".

## Installing

    pip install .

## Running

Show the Mandelbrot set:

    fractol mandelbrot

Show a Julia set for the constant `c = num1 + num2·i`. Both arguments are read
as integers, C `atoi` style, so `1.5` counts as `1`:

    fractol 0 1

Any other set of arguments prints `Bad function call!` and a usage message,
and the command exits with status 1. Closing the window, or pressing Escape,
prints `Closing window. Bye!` and also ends with status 1.

## Controls in the window

Keys act when they are released.

| Input              | Effect                                              |
|--------------------|-----------------------------------------------------|
| Mouse wheel down   | zoom out (zoom factor × 0.95)                       |
| Mouse wheel up     | zoom in (zoom factor ÷ 0.95)                        |
| Arrow keys         | shift the view offset by 0.1                        |
| `0` / `9`          | raise / lower the colour base by `0xFF00FF`         |
| Space              | start or stop the drift of the Julia constant       |
| Escape             | close the window                                    |

`Fractal.on_key` also handles `Key.M` (switch to Mandelbrot mode) and `Key.R`
(reset zoom, offset, colours and motion). These take X11 keysym values
(`0x4D` and `0x52`), which the window does not produce for the `m` and `r`
keys, so they are reachable only when calling the class directly.

## Library use

`fractol.fractal.Fractal` holds the view state and a pixel buffer
(`pixels`, one `0x00RRGGBB` value per pixel, row by row). It needs no window:

```python
from fractol.fractal import Fractal, Key, Button

f = Fractal(mandelbrot=False, c=complex(0, 1), width=64, height=64)
f.render()
f.on_mouse(Button.WHEEL_UP)   # zoom in and redraw
print(f.to_complex(32, 32), f.pixels[0])
```

`fractol.complexmath` provides the escape-time iteration: `step(z, c)`,
`magnitude(z)` and `iterate(z, c, max_iter, bound)`.

`fractol.app` exposes `parse_args(argv)`, which returns a `Fractal` or raises
`UsageError`, and `main(argv=None)`, the command above.

The remaining modules hold helpers:

- `fractol.charclass`: ASCII character classes and case conversion
- `fractol.numconv`: `atoi` (with 32-bit wrap-around) and `itoa`
- `fractol.output`: writing characters, strings, lines and numbers to a stream
- `fractol.strings`: split, trim, search, substring, compare and bounded copy/concatenate
- `fractol.memory`: fill, zero, search, compare, copy and move in byte buffers
- `fractol.linkedlist`: `Node` and a singly linked `LinkedList`
- `fractol.colornames`: X11 colour names (`color_by_name`) and `convert_color` for visuals shallower than 24 bits
- `fractol.wordtab`: word splitting and substring search, with and without double-quote awareness
- `fractol.xpm`: an XPM reader (`parse_xpm_lines`, `parse_xpm_text`, `read_xpm_file`) that returns an `XpmImage` of 32-bit pixels and handles comments and named colours

## What it does not do

The XPM reader only decodes images into pixel values; the viewer does not
load or display XPM files. There is no way to save a rendered fractal.

## Tests

    pip install .[test]
    pytest