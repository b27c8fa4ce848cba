"""
Pong — ui/states.py
Main loop and event routing into the application state.
"""

from __future__ import annotations
from typing import Optional, Any
import tcod

from engine.app_state import ApplicationState
from ui.renderer import Renderer
from ui.screens import render


class Engine(tcod.event.EventDispatch[Any]):
    """
    Central loop controller handling the Renderer and the ApplicationState.
    Events without a handler here (key release, mouse, resize) are drained and ignored.
    """
    def __init__(self, renderer: Renderer, state: Optional[ApplicationState] = None):
        super().__init__()
        self.renderer = renderer
        self.state = state if state is not None else ApplicationState()

    def ev_quit(self, event: tcod.event.Quit) -> None:
        self.state.quit()

    def ev_keydown(self, event: tcod.event.KeyDown) -> None:
        self.state.on_key_event(event)

    def run(self) -> None:
        """Main blocking event loop. Terminal errors propagate after the session is restored."""
        self.state.running = True

        with self.renderer.session():
            while self.state.running:
                # 1. Render
                console = self.renderer.new_frame()
                render(self.state.mode, console)
                self.renderer.present()

                # 2. Handle exactly one input
                self.dispatch(self.renderer.read_event())
