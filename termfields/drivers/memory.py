"""
In-memory terminal driver.

Keeps a fixed-size cell grid with the same pending/flushed split a real
terminal has, so fields can be drawn and inspected without a TTY.
"""

from typing import Optional

from ..errors import DriverInitError
from .base import COLOR_DEFAULT

# A cell is (character, foreground, background)
Cell = tuple[str, int, int]

BLANK: Cell = (" ", COLOR_DEFAULT, COLOR_DEFAULT)


class MemoryDriver:
    """
    Cell grid held in memory.

    set_cell() buffers writes; they show up in the visible grid only after
    flush(). Writes outside the grid are dropped.
    """

    def __init__(self, width: int = 80, height: int = 24):
        self.width = width
        self.height = height
        self.cursor = (0, 0)
        self.writes = 0
        self.flushes = 0
        self._initialized = False
        self._cells: dict[tuple[int, int], Cell] = {}
        self._pending: dict[tuple[int, int], Cell] = {}

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def init(self):
        if self._initialized:
            raise DriverInitError("Driver already initialized")
        self._initialized = True

    def close(self):
        if not self._initialized:
            return
        self.cursor = (0, 0)
        self._pending.clear()
        self._initialized = False

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_cell(self, x: int, y: int, ch: str, fg: int, bg: int):
        if not self.in_bounds(x, y):
            return
        self._pending[(x, y)] = (ch, fg, bg)
        self.writes += 1

    def flush(self):
        self._cells.update(self._pending)
        self._pending.clear()
        self.flushes += 1

    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        """Visible cell at (x, y), or None if nothing was ever flushed there."""
        return self._cells.get((x, y))

    def char_at(self, x: int, y: int) -> str:
        """Visible character at (x, y); untouched cells read as a space."""
        return self._cells.get((x, y), BLANK)[0]

    def row(self, y: int, start: int = 0, end: Optional[int] = None) -> str:
        """Visible characters of row y from start up to (not including) end."""
        if end is None:
            end = self.width
        return "".join(self.char_at(x, y) for x in range(start, end))

    def render(self) -> str:
        """Whole visible grid as newline-joined rows."""
        return "\n".join(self.row(y) for y in range(self.height))
