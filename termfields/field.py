"""
Text fields at fixed terminal coordinates.

A field is one row of text starting at (x, y). It can carry a three-row
border and be moved one cell at a time. All drawing goes through the
driver handed to the FieldManager.

Coordinates are never checked against the terminal size; clipping is left
to the driver. Text longer than the field's length is written in full.
"""

import logging
from enum import Enum
from typing import Optional, Union

from .config import FieldConfig
from .drivers.base import COLOR_DEFAULT, TerminalDriver
from .errors import NotInitializedError, TermFieldsError
from .styles import BoxStyle, StyleLike, coerce_style, glyphs

logger = logging.getLogger(__name__)


class MoveDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    MoveDirection.LEFT: (-1, 0),
    MoveDirection.RIGHT: (1, 0),
    MoveDirection.UP: (0, -1),
    MoveDirection.DOWN: (0, 1),
}


class FieldManager:
    """
    Creates fields drawing on a shared terminal driver.

    The driver must be initialized before fields are created or drawn.
    """

    def __init__(self, driver: TerminalDriver, config: Optional[FieldConfig] = None):
        self.driver = driver
        self.config = config if config is not None else FieldConfig()

    def create_field(self, y: int, x: int, length: int, text: str) -> "Field":
        """
        Create a field at row y, column x and write its initial text.

        Args:
            y: Row of the text
            x: Column of the first character
            length: Content width, used to place the border
            text: Initial contents

        Raises:
            NotInitializedError: If the driver is not initialized
        """
        field = Field(self, x=x, y=y, length=length)
        field.update(text)
        return field

    def _require_init(self):
        if not self.driver.is_initialized:
            raise NotInitializedError()

    def _put(self, x: int, y: int, ch: Optional[str]):
        # None glyphs are transparent
        if ch is None:
            return
        self.driver.set_cell(x, y, ch, COLOR_DEFAULT, COLOR_DEFAULT)


class Field:
    """A single-line text field. Create through FieldManager.create_field()."""

    def __init__(self, manager: FieldManager, x: int, y: int, length: int):
        self.manager = manager
        self.x = x
        self.y = y
        self.length = length
        self.border = BoxStyle.NONE
        self.text = ""

    def __repr__(self) -> str:
        return (
            f"Field(x={self.x}, y={self.y}, length={self.length}, "
            f"border={self.border.value!r}, text={self.text!r})"
        )

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """Inclusive (left, top, right, bottom) cells covered by a border."""
        return (self.x - 1, self.y - 1, self.x + self.length + 1, self.y + 1)

    def draw_box(self, style: StyleLike):
        """
        Draw (or with BoxStyle.CLEAR, erase) the border around the field.

        The border sits one row above and one row below the text, and one
        column left of x and right of x + length.

        Raises:
            NotInitializedError: If the driver is not initialized
            UnknownStyleError: If style is not a known box style
        """
        self.manager._require_init()
        style = coerce_style(style)
        g = glyphs(style)
        put = self.manager._put
        left, top, right, bottom = self.bounds

        # Corners
        put(left, top, g.top_left)
        put(right, top, g.top_right)
        put(left, bottom, g.bottom_left)
        put(right, bottom, g.bottom_right)
        # Sides
        put(left, self.y, g.vertical)
        put(right, self.y, g.vertical)
        # Top and bottom
        for i in range(self.length + 1):
            put(self.x + i, top, g.horizontal)
            put(self.x + i, bottom, g.horizontal)

        self.manager.driver.flush()
        self.border = style

    def update(self, text: str):
        """
        Write text starting at (x, y), one character per cell.

        Cells past the end of text are left alone, so shorter text does not
        erase what a longer earlier write left behind.

        Raises:
            NotInitializedError: If the driver is not initialized
        """
        self.manager._require_init()
        for i, ch in enumerate(text):
            self.manager._put(self.x + i, self.y, ch)
        self.manager.driver.flush()
        self.text = text

    def move(self, direction: Union[MoveDirection, str]):
        """
        Move the field one cell and redraw its border and text.

        The old border is blanked first. With FieldConfig.strict_move a
        driver that is not initialized raises NotInitializedError and the
        field stays put; otherwise the position still changes and the
        drawing errors are ignored.

        Raises:
            ValueError: If direction is not a MoveDirection
        """
        dx, dy = MoveDirection(direction).delta
        if self.manager.config.strict_move:
            self.manager._require_init()

        border = self.border
        self._quietly(self.draw_box, BoxStyle.CLEAR)
        self.x += dx
        self.y += dy
        self._quietly(self.draw_box, border)
        self._quietly(self.update, self.text)
        # Blanking stored CLEAR as the border; restore it if redraw failed
        self.border = border

    def _quietly(self, op, arg):
        try:
            op(arg)
        except TermFieldsError as e:
            if self.manager.config.strict_move:
                raise
            logger.debug("Ignoring error while moving %r: %s", self, e)
