"""Escape-time computation, colouring and rendering of the fractals."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fractol.arguments import FractalKind, FractalSpec

WIDTH = 500
HEIGHT = 400
MAX_ITER = 60
INITIAL_ZOOM = 0.25
ESCAPE_RADIUS_SQUARED = 4.0


@dataclass
class View:
    """The part of the complex plane shown in a window of pixels."""

    zoom: float = INITIAL_ZOOM
    center_x: float = 0.0
    center_y: float = 0.0
    width: int = WIDTH
    height: int = HEIGHT

    def map_x(self, x: float) -> float:
        """Return the real coordinate of pixel column ``x``."""
        return (x - self.width / 2.0) / (self.zoom * self.width) + self.center_x

    def map_y(self, y: float) -> float:
        """Return the imaginary coordinate of pixel row ``y``."""
        return (y - self.height / 2.0) / (self.zoom * self.height) + self.center_y

    def zoom_at(self, factor: float, x: float, y: float) -> None:
        """Scale the zoom by ``factor`` keeping the point under pixel (x, y) fixed."""
        before_x = self.map_x(x)
        before_y = self.map_y(y)
        self.zoom *= factor
        self.center_x += before_x - self.map_x(x)
        self.center_y += before_y - self.map_y(y)

    def pan(self, dx: float, dy: float) -> None:
        """Move the centre of the view by (dx, dy) in plane coordinates."""
        self.center_x += dx
        self.center_y += dy


def escape_count(
    kind: FractalKind, z: complex, c: complex, max_iter: int = MAX_ITER
) -> int:
    """Return the iteration at which z escapes |z| > 2, or ``max_iter`` if it never does."""
    zr, zi = z.real, z.imag
    cr, ci = c.real, c.imag
    burning = kind is FractalKind.BURNING_SHIP
    for k in range(max_iter):
        if burning:
            zr, zi = abs(zr), abs(zi)
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
        if zr * zr + zi * zi > ESCAPE_RADIUS_SQUARED:
            return k
    return max_iter


def _start(spec: FractalSpec, point: complex) -> tuple[complex, complex]:
    if spec.kind is FractalKind.JULIA:
        return point, spec.c
    return 0j, point


def pixel_count(spec: FractalSpec, view: View, x: int, y: int) -> int:
    """Return the escape count of the pixel at column ``x``, row ``y``."""
    z, c = _start(spec, complex(view.map_x(x), view.map_y(y)))
    return escape_count(spec.kind, z, c)


def color(count: int, max_iter: int = MAX_ITER) -> int:
    """Return the 0xRRGGBB colour for an escape count; points in the set are black."""
    if count == max_iter:
        return 0x000000
    red = (count * 5) % 256
    green = (count * 10) % 256
    blue = (count * 15) % 256
    return red << 16 | green << 8 | blue


def _escape_counts(spec: FractalSpec, view: View) -> np.ndarray:
    columns = np.arange(view.width, dtype=np.float64)
    rows = np.arange(view.height, dtype=np.float64)
    real = (columns - view.width / 2.0) / (view.zoom * view.width) + view.center_x
    imag = (rows - view.height / 2.0) / (view.zoom * view.height) + view.center_y
    plane_r, plane_i = np.meshgrid(real, imag)

    if spec.kind is FractalKind.JULIA:
        zr, zi = plane_r.ravel().copy(), plane_i.ravel().copy()
        cr = np.full_like(zr, spec.c.real)
        ci = np.full_like(zr, spec.c.imag)
    else:
        cr, ci = plane_r.ravel().copy(), plane_i.ravel().copy()
        zr = np.zeros_like(cr)
        zi = np.zeros_like(cr)

    counts = np.full(zr.shape, MAX_ITER, dtype=np.int64)
    active = np.arange(zr.size)
    burning = spec.kind is FractalKind.BURNING_SHIP
    with np.errstate(over="ignore", invalid="ignore"):
        for k in range(MAX_ITER):
            if active.size == 0:
                break
            ar, ai = zr[active], zi[active]
            if burning:
                ar, ai = np.abs(ar), np.abs(ai)
            new_r = ar * ar - ai * ai + cr[active]
            new_i = 2 * ar * ai + ci[active]
            zr[active] = new_r
            zi[active] = new_i
            escaped = new_r * new_r + new_i * new_i > ESCAPE_RADIUS_SQUARED
            counts[active[escaped]] = k
            active = active[~escaped]
    return counts.reshape(view.height, view.width)


def render(spec: FractalSpec, view: View) -> np.ndarray:
    """Return a (height, width) array of 0xRRGGBB colours for the view."""
    counts = _escape_counts(spec, view)
    red = (counts * 5) % 256
    green = (counts * 10) % 256
    blue = (counts * 15) % 256
    pixels = (red << 16) | (green << 8) | blue
    pixels[counts == MAX_ITER] = 0
    return pixels.astype(np.uint32)