"""
Terminal driver interface.

Fields never talk to the terminal directly. They go through a driver that
owns the cell buffer, the cursor and the terminal mode, and is passed in by
the caller.
"""

from contextlib import contextmanager
from typing import Iterator, Protocol, TypeVar, runtime_checkable

# The only color pair fields use: the terminal's own foreground/background
COLOR_DEFAULT = 0


@runtime_checkable
class TerminalDriver(Protocol):
    """Cell-grid capabilities a field needs from the terminal."""

    @property
    def is_initialized(self) -> bool: ...

    def init(self) -> None: ...

    def close(self) -> None: ...

    def set_cell(self, x: int, y: int, ch: str, fg: int, bg: int) -> None: ...

    def flush(self) -> None: ...


D = TypeVar("D", bound=TerminalDriver)


@contextmanager
def terminal_session(driver: D) -> Iterator[D]:
    """
    Initialize a driver for the duration of a with-block.

    Example:
        with terminal_session(BlessedDriver()) as driver:
            manager = FieldManager(driver)
            ...

    Init errors propagate and close() is not called for them.
    """
    driver.init()
    try:
        yield driver
    finally:
        driver.close()
