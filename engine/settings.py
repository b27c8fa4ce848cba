"""
Pong — engine/settings.py
Display settings powered by Pydantic.
=============================================================================================
Stack:       Python 3.11+ | Pydantic v2
"""

from pydantic import BaseModel, ConfigDict, Field


class DisplaySettings(BaseModel):
    """Initial window size and presentation options. The window may be resized later."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    columns: int = Field(default=80, ge=1)
    rows: int = Field(default=25, ge=1)
    title: str = "Pong Game"
    vsync: bool = True
    resizable: bool = True
