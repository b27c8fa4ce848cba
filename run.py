"""
Pong — run.py
Main entry point for the terminal Pong application.
"""

import logging
import sys
from pathlib import Path

# Ensure we can import the pong packages
project_root = Path(__file__).parent.resolve()
sys.path.insert(0, str(project_root))

from engine.settings import DisplaySettings
from ui.renderer import Renderer, TerminalIOError
from ui.states import Engine


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    renderer = Renderer.from_settings(DisplaySettings())
    engine = Engine(renderer=renderer)
    try:
        engine.run()
    except TerminalIOError as exc:
        logging.error("Fatal terminal error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
