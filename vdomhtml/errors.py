"""Exceptions raised while parsing documents and editing their byte data."""

__all__ = ["ParseError", "SetBytesError"]


class ParseError(ValueError):
    """Raised when an input document cannot be parsed."""

    def __init__(
        self, message: str = "The input string length is too large to fit in a `u32`"
    ) -> None:
        super().__init__(message)


class SetBytesError(ValueError):
    """Raised when new byte data cannot be stored in a `Bytes` value."""

    def __init__(
        self, message: str = "The string length is too large to fit in a `u32`"
    ) -> None:
        super().__init__(message)