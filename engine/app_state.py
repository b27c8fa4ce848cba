"""
Pong — engine/app_state.py
Application State: running flag, screen mode, and key-driven transitions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

import tcod.event
from tcod.event import KeySym, Modifier


class Mode(Enum):
    """Which screen is shown."""
    MENU = "menu"
    GAME = "game"


CONFIRM_KEYS = frozenset({KeySym.RETURN, KeySym.KP_ENTER})


def is_quit_key(event: tcod.event.KeyDown) -> bool:
    """Escape, an unshifted q, or Ctrl+C (Shift allowed, Alt and GUI not)."""
    if event.sym == KeySym.ESCAPE:
        return True
    if event.sym == KeySym.Q:
        # Shift+Q is a capital Q, which does not quit
        return not event.mod & Modifier.SHIFT
    if event.sym != KeySym.C or event.mod & (Modifier.ALT | Modifier.GUI):
        return False
    return bool(event.mod & Modifier.CTRL)


def is_confirm_key(event: tcod.event.KeyDown) -> bool:
    return event.sym in CONFIRM_KEYS


@dataclass
class ApplicationState:
    """
    Owned by the main loop and mutated only through the transitions below.
    `mode` only ever moves MENU -> GAME; `running` only ever moves True -> False.
    """
    running: bool = True
    mode: Mode = Mode.MENU

    def quit(self) -> None:
        if self.running:
            logging.info("Quit requested in %s mode", self.mode.value)
        self.running = False

    def start_game(self) -> None:
        if self.mode is Mode.MENU:
            logging.info("Starting game")
        self.mode = Mode.GAME

    def on_key_event(self, event: tcod.event.KeyDown) -> None:
        """Apply at most one transition for a key press. Unmapped keys are ignored."""
        if is_quit_key(event):
            self.quit()
        elif is_confirm_key(event):
            self.start_game()
