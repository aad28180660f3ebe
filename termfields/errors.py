"""
Exceptions raised by termfields.
"""


class TermFieldsError(Exception):
    """Base class for all termfields errors."""
    pass


class NotInitializedError(TermFieldsError):
    """Raised when a field operation runs before the driver is initialized."""

    def __init__(self, message: str = "Terminal not initialized"):
        super().__init__(message)


class UnknownStyleError(TermFieldsError):
    """Raised when a border style identifier is not in the style registry."""

    def __init__(self, style):
        self.style = style
        super().__init__(f"Unknown box style: {style!r}")


class DriverInitError(TermFieldsError):
    """Raised when a terminal driver cannot be initialized."""
    pass
