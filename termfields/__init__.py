"""
termfields - updateable text fields at fixed positions in the terminal.

Example:
    from termfields import BlessedDriver, BoxStyle, FieldManager, MoveDirection, terminal_session

    with terminal_session(BlessedDriver()) as driver:
        fields = FieldManager(driver)
        status = fields.create_field(5, 10, 12, "Ready")
        status.draw_box(BoxStyle.UNICODE)
        status.update("Working...")
        status.move(MoveDirection.RIGHT)
"""


def _get_version():
    """Read version from installed metadata, then the VERSION file."""
    from importlib.metadata import PackageNotFoundError, version
    from pathlib import Path
    try:
        return version("termfields")
    except PackageNotFoundError:
        pass
    # Source checkout that was never installed
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


__version__ = _get_version()

from .config import FieldConfig  # noqa: E402
from .drivers import (  # noqa: E402
    COLOR_DEFAULT,
    BlessedDriver,
    MemoryDriver,
    TerminalDriver,
    terminal_session,
)
from .errors import (  # noqa: E402
    DriverInitError,
    NotInitializedError,
    TermFieldsError,
    UnknownStyleError,
)
from .field import Field, FieldManager, MoveDirection  # noqa: E402
from .styles import BOX_STYLES, BoxGlyphs, BoxStyle, glyphs, lookup  # noqa: E402

__all__ = [
    "__version__",
    # Fields
    "Field",
    "FieldManager",
    "MoveDirection",
    # Styles
    "BOX_STYLES",
    "BoxGlyphs",
    "BoxStyle",
    "glyphs",
    "lookup",
    # Drivers
    "COLOR_DEFAULT",
    "TerminalDriver",
    "MemoryDriver",
    "BlessedDriver",
    "terminal_session",
    # Config
    "FieldConfig",
    # Errors
    "TermFieldsError",
    "NotInitializedError",
    "UnknownStyleError",
    "DriverInitError",
]
