"""Interactive Mandelbrot and Julia set explorer with string, memory, colour-name and XPM helpers."""

__version__ = "0.1.0"