import contextlib
import logging

import pytest
import tcod
import tcod.event
from tcod.event import KeySym, Modifier

import run
from engine.app_state import ApplicationState, Mode
from ui.renderer import Renderer, TerminalIOError
from ui.states import Engine


def key(sym, mod=Modifier.NONE):
    return tcod.event.KeyDown(sym=sym, scancode=0, mod=mod)


class ScriptedRenderer:
    """Stands in for the tcod window: serves fixed-size frames and a fixed event script."""

    def __init__(self, events, size=(20, 6)):
        self.events = list(events)
        self.size = size
        self.frames = []
        self.opened = False
        self.restored = False

    @contextlib.contextmanager
    def session(self):
        self.opened = True
        try:
            yield None
        finally:
            self.restored = True

    def new_frame(self):
        self.console = tcod.console.Console(*self.size)
        return self.console

    def present(self):
        self.frames.append("".join(chr(c) for c in self.console.ch.flat))

    def read_event(self):
        event = self.events.pop(0)
        if isinstance(event, Exception):
            raise event
        return event


def test_quit_from_menu():
    renderer = ScriptedRenderer([key(KeySym.ESCAPE)])
    engine = Engine(renderer)
    engine.run()
    assert engine.state.running is False
    assert engine.state.mode is Mode.MENU
    assert len(renderer.frames) == 1
    assert renderer.restored


def test_start_game_then_quit():
    renderer = ScriptedRenderer([key(KeySym.RETURN), key(KeySym.C, Modifier.LCTRL)])
    engine = Engine(renderer)
    engine.run()
    assert engine.state.mode is Mode.GAME
    assert engine.state.running is False
    assert len(renderer.frames) == 2
    assert "Pong Game" in renderer.frames[0]
    assert "█" in renderer.frames[1]
    assert "Pong Game" not in renderer.frames[1]


def test_non_key_events_are_inert():
    renderer = ScriptedRenderer([
        tcod.event.MouseMotion(),
        tcod.event.WindowResized(type="WindowResized", window_id=0, data=(120, 40)),
        tcod.event.KeyUp(sym=KeySym.RETURN, scancode=0, mod=Modifier.NONE),
        key(KeySym.A),
        key(KeySym.Q),
    ])
    engine = Engine(renderer)
    engine.run()
    assert engine.state.mode is Mode.MENU
    # one frame per consumed event
    assert len(renderer.frames) == 5


def test_window_close_quits():
    renderer = ScriptedRenderer([key(KeySym.RETURN), tcod.event.Quit()])
    engine = Engine(renderer)
    engine.run()
    assert engine.state.running is False
    assert engine.state.mode is Mode.GAME


def test_run_starts_running_from_given_state():
    state = ApplicationState(running=False)
    renderer = ScriptedRenderer([key(KeySym.Q)])
    engine = Engine(renderer, state)
    engine.run()
    assert len(renderer.frames) == 1
    assert engine.state is state


def test_terminal_error_aborts_and_restores():
    renderer = ScriptedRenderer([key(KeySym.RETURN), TerminalIOError("read failed")])
    engine = Engine(renderer)
    with pytest.raises(TerminalIOError, match="read failed"):
        engine.run()
    assert renderer.restored
    assert engine.state.mode is Mode.GAME
    assert engine.state.running is True


def test_main_clean_exit(monkeypatch):
    monkeypatch.setattr(Engine, "run", lambda self: None)
    assert run.main() == 0


def test_main_reports_terminal_error(monkeypatch, caplog):
    def fail(self):
        raise TerminalIOError("Could not draw frame: lost display")
    monkeypatch.setattr(Engine, "run", fail)
    with caplog.at_level(logging.ERROR):
        assert run.main() == 1
    assert "lost display" in caplog.text
