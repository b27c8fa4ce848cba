"""
Pong — ui/renderer.py
TCOD Renderer: terminal session, frame presentation and event reads.
===============================================
Stack:       Python 3.11+ | tcod
"""

from __future__ import annotations

import contextlib
import logging
from typing import Iterator, Optional

import tcod
import tcod.context
import tcod.event

from engine.settings import DisplaySettings


class TerminalIOError(RuntimeError):
    """Drawing to or reading from the terminal failed."""


class Renderer:
    """
    Manages the tcod context and the root console.
    The root console is replaced every frame so it always matches the window size.
    """
    def __init__(
        self,
        width: int,
        height: int,
        title: str = "Pong Game",
        vsync: bool = True,
        resizable: bool = True,
    ):
        self.width = width
        self.height = height
        self.title = title
        self.vsync = vsync
        self.resizable = resizable
        self.root_console = tcod.console.Console(width, height)
        self.context: Optional[tcod.context.Context] = None

    @classmethod
    def from_settings(cls, settings: DisplaySettings) -> "Renderer":
        return cls(
            width=settings.columns,
            height=settings.rows,
            title=settings.title,
            vsync=settings.vsync,
            resizable=settings.resizable,
        )

    @contextlib.contextmanager
    def session(self) -> Iterator[tcod.context.Context]:
        """Opens the terminal window and always restores it on the way out."""
        flags = tcod.context.SDL_WINDOW_RESIZABLE if self.resizable else 0
        try:
            context = tcod.context.new(
                columns=self.width,
                rows=self.height,
                title=self.title,
                vsync=self.vsync,
                sdl_window_flags=flags,
            )
        except RuntimeError as exc:
            raise TerminalIOError(f"Could not open terminal: {exc}") from exc

        self.context = context
        logging.debug("Terminal session opened (%dx%d)", self.width, self.height)
        try:
            yield context
        finally:
            self.context = None
            context.close()
            logging.debug("Terminal session restored")

    def new_frame(self) -> tcod.console.Console:
        """Returns a cleared console sized to the current viewport."""
        if self.context is not None:
            self.root_console = self.context.new_console()
        self.width = self.root_console.width
        self.height = self.root_console.height
        self.clear()
        return self.root_console

    def clear(self) -> None:
        """Clear the console with black."""
        self.root_console.clear()

    def present(self) -> None:
        """Present the current console to the screen."""
        if self.context is None:
            raise TerminalIOError("No terminal session is open")
        try:
            self.context.present(self.root_console)
        except RuntimeError as exc:
            raise TerminalIOError(f"Could not draw frame: {exc}") from exc

    def read_event(self) -> tcod.event.Event:
        """Blocks until one event is available and returns it. Later events stay queued."""
        if self.context is None:
            raise TerminalIOError("No terminal session is open")
        try:
            while True:
                for event in tcod.event.wait():
                    return self.context.convert_event(event)
        except RuntimeError as exc:
            raise TerminalIOError(f"Could not read event: {exc}") from exc
