"""
Terminal drivers.

Fields draw through a driver that owns the cell buffer, the cursor and the
terminal mode. MemoryDriver keeps the grid in memory; BlessedDriver draws
on a real terminal.
"""

from .base import COLOR_DEFAULT, TerminalDriver, terminal_session
from .memory import MemoryDriver
from .terminal import BlessedDriver

__all__ = [
    "COLOR_DEFAULT",
    "TerminalDriver",
    "terminal_session",
    "MemoryDriver",
    "BlessedDriver",
]
