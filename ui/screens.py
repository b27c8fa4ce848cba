"""
Pong — ui/screens.py
Drawing for the Menu and Game screens.
"""
from typing import Tuple

import tcod
from tcod import libtcodpy

from engine.app_state import Mode

TITLE = "Pong Game"
INSTRUCTIONS = (
    "Press Esc, Ctrl-C or q to stop running.",
    "Press Enter to start game",
)
TITLE_FG: Tuple[int, int, int] = (66, 135, 245)
FRAME_DECORATION = "┌─┐│ │└─┘"
BAR_GLYPH = "█"


def center_line(width: int, height: int) -> str:
    """
    Text for a full-height vertical bar in the middle column of a width x height area.
    Empty when either dimension is below 1.
    """
    if width < 1 or height < 1:
        return ""

    center_col = min(width, (width - 1) // 2)
    return "\n".join(" " * center_col + BAR_GLYPH for _ in range(height))


def render_menu(console: tcod.console.Console) -> None:
    """Bordered panel with the title on the top edge and the instructions below it."""
    width, height = console.width, console.height
    if width < 1 or height < 1:
        return

    if width >= 2 and height >= 2:
        console.draw_frame(0, 0, width, height, decoration=FRAME_DECORATION)

    center_x = width // 2
    console.print(center_x, 0, TITLE, fg=TITLE_FG, alignment=libtcodpy.CENTER)
    for i, line in enumerate(INSTRUCTIONS):
        console.print(center_x, 1 + i, line, alignment=libtcodpy.CENTER)


def render_game(console: tcod.console.Console) -> None:
    for y, line in enumerate(center_line(console.width, console.height).splitlines()):
        console.print(0, y, line)


def render(mode: Mode, console: tcod.console.Console) -> None:
    """Draws the screen for `mode` into `console`, whose size is the viewport."""
    if mode is Mode.MENU:
        render_menu(console)
    elif mode is Mode.GAME:
        render_game(console)
    else:
        raise ValueError(f"Unknown mode: {mode!r}")
