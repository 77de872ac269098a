"""The interactive window: input handling and the program entry point."""

from __future__ import annotations

import os
import sys
from enum import Enum

from fractol.arguments import ArgumentError, FractalSpec, parse_arguments
from fractol.fractal import HEIGHT, WIDTH, View, render
from fractol.printf import printf

PAN_STEP = 0.1
ZOOM_IN_FACTOR = 1.2
ZOOM_OUT_FACTOR = 0.8
SCROLL_UP = 4
SCROLL_DOWN = 5
EXIT_STATUS = 1
MANDATORY_FLAG = "--mandatory"


class Key(Enum):
    """Keys the program reacts to, with their X11 key codes."""

    ESC = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


_PAN = {
    Key.LEFT: (-PAN_STEP, 0.0),
    Key.RIGHT: (PAN_STEP, 0.0),
    Key.DOWN: (0.0, PAN_STEP),
    Key.UP: (0.0, -PAN_STEP),
}


def _as_key(key: Key | int) -> Key | None:
    if isinstance(key, Key):
        return key
    try:
        return Key(key)
    except ValueError:
        return None


def handle_key(view: View, key: Key | int, bonus: bool = False) -> bool:
    """React to a key press, updating ``view`` in place.

    Returns True when the key asks to close the window. The arrow keys pan
    the view only when ``bonus`` is true; other keys are ignored.
    """
    known = _as_key(key)
    if known is Key.ESC:
        return True
    if bonus and known in _PAN:
        dx, dy = _PAN[known]
        view.pan(dx, dy)
    return False


def handle_scroll(view: View, button: int, x: int, y: int, bonus: bool = False) -> None:
    """React to a mouse button, zooming on wheel up (4) and wheel down (5).

    With ``bonus`` the point under the cursor stays fixed; otherwise the
    zoom is about the view's centre.
    """
    if button == SCROLL_UP:
        factor = ZOOM_IN_FACTOR
    elif button == SCROLL_DOWN:
        factor = ZOOM_OUT_FACTOR
    else:
        return
    if bonus:
        view.zoom_at(factor, x, y)
    else:
        view.zoom *= factor


def _run_window(spec: FractalSpec, bonus: bool) -> None:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import numpy as np
    import pygame

    key_map = {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(spec.name)
        view = View()

        def draw() -> None:
            pixels = render(spec, view)
            rgb = np.stack(
                [(pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF],
                axis=-1,
            ).astype(np.uint8)
            surface = pygame.surfarray.make_surface(rgb.transpose(1, 0, 2))
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        draw()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                key = key_map.get(event.key)
                if key is None:
                    continue
                if handle_key(view, key, bonus):
                    return
                if bonus:
                    draw()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                handle_scroll(view, event.button, x, y, bonus)
                if not bonus or event.button in (SCROLL_UP, SCROLL_DOWN):
                    draw()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Parse the command line, open the window and run until it is closed.

    A leading ``--mandatory`` restricts the program to the basic feature set.
    Returns the process exit status.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = True
    if args and args[0] == MANDATORY_FLAG:
        bonus = False
        args = args[1:]
    try:
        spec = parse_arguments(args, bonus)
    except ArgumentError as error:
        printf("%s", str(error))
        return EXIT_STATUS
    _run_window(spec, bonus)
    # Closing the window always ends the program with status 1.
    return EXIT_STATUS


if __name__ == "__main__":
    sys.exit(main())