"""
Terminal driver backed by blessed.

Buffers cell writes and emits them as cursor-addressed output on flush().
"""

from typing import Optional, TextIO

from blessed import Terminal

from ..errors import DriverInitError


class BlessedDriver:
    """
    Draws cells on a real terminal through a blessed.Terminal.

    Args:
        term: Terminal to draw on (a new one on stdout if omitted)
        stream: Output stream, used only when term is omitted
        require_tty: Refuse to initialize when the output is not a terminal
    """

    def __init__(
        self,
        term: Optional[Terminal] = None,
        stream: Optional[TextIO] = None,
        require_tty: bool = True,
    ):
        self.term = term if term is not None else Terminal(stream=stream)
        self.require_tty = require_tty
        self._initialized = False
        self._pending: dict[tuple[int, int], str] = {}

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def stream(self) -> TextIO:
        return self.term.stream

    def init(self):
        if self._initialized:
            raise DriverInitError("Driver already initialized")
        if self.require_tty and not self.term.is_a_tty:
            raise DriverInitError("Output is not a terminal")
        self.stream.write(self.term.enter_fullscreen + self.term.hide_cursor)
        self.stream.flush()
        self._initialized = True

    def close(self):
        if not self._initialized:
            return
        self._pending.clear()
        self.stream.write(
            self.term.move_xy(0, 0) + self.term.normal_cursor + self.term.exit_fullscreen
        )
        self.stream.flush()
        self._initialized = False

    def set_cell(self, x: int, y: int, ch: str, fg: int, bg: int):
        # Only the default color pair exists, so fg/bg carry no styling
        if x < 0 or y < 0:
            return
        self._pending[(x, y)] = ch

    def flush(self):
        width, height = self.term.width, self.term.height
        output = []
        for (x, y), ch in self._pending.items():
            if x < width and y < height:
                output.append(self.term.move_xy(x, y) + ch)
        self._pending.clear()
        self.stream.write("".join(output))
        self.stream.flush()
