# fractol

A small interactive fractal viewer. It draws the Mandelbrot set, Julia sets
and the Burning Ship fractal in a 500 × 400 window, colouring each point by
how many of 60 iterations it takes to escape. Points that never escape are
drawn black.

## Installing

```
pip install .
```

## Running

```
fractol mandelbrot
fractol julia -0.8 0.156
fractol burningship
```

The Julia set takes two numbers: the real part of the constant, between -2
and 2, and the imaginary part, between -1.5 and 1.5. Numbers are read as
plain decimals (`digits[.digits]` with an optional sign); there is no
exponent syntax. A value out of range prints a short message, and any other
arguments print a usage summary; in both cases the program exits with
status 1. Closing the window also ends the program with status 1.

A leading `--mandatory` option restricts the program to the basic feature
set:

```
fractol --mandatory mandelbrot
fractol --mandatory julia -0.8 0.156
```

In that mode `burningship` is not accepted, the arrow keys do nothing, and
the mouse wheel zooms about the centre of the view rather than the pointer.

## Controls

- Mouse wheel: zoom in (×1.2) and out (×0.8) around the pointer.
- Arrow keys: move the view by 0.1 in the plane.
- Escape, or closing the window: quit.

## Using it as a library

The drawing code can be used without a window:

```python
from fractol.arguments import parse_arguments
from fractol.fractal import View, render

spec = parse_arguments(["julia", "-0.8", "0.156"], bonus=True)
view = View()
image = render(spec, view)   # (height, width) uint32 array of 0xRRGGBB colours
```

`parse_arguments` takes the arguments without the program name and raises
`fractol.arguments.ArgumentError`, carrying the text to show, when they are
not accepted. `View.zoom_at` and `View.pan` change the visible region;
`fractol.app.handle_key` and `fractol.app.handle_scroll` apply key presses
and mouse-wheel events to a `View` the way the window does. For single
points, `fractol.fractal` also offers `escape_count`, `pixel_count` and
`color`.

The package also has small text helpers:

- `fractol.strings`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr` and `strncmp`.
- `fractol.printf`: `format_printf` and `printf`, supporting the `c`, `s`,
  `d`, `i`, `u`, `p`, `x`, `X` and `%` conversions.
- `fractol.lines`: `iter_lines`, which yields the lines (as bytes, newline
  included) of a file descriptor or binary file object, reading a fixed
  number of bytes at a time.

## Running the tests

```
pip install .[test]
pytest
```