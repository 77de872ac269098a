"""Interactive Mandelbrot, Julia and Burning Ship fractal explorer, with small text helpers."""

__version__ = "1.0.0"