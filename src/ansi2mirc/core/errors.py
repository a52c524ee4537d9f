"""Exceptions raised while converting ANSI art."""


class ConversionError(Exception):
    """Base class for fatal conversion errors.

    Any of these aborts the whole conversion; there is no partial output.
    """

    def __init__(self, message: str, offset: int | None = None):
        self.offset = offset
        if offset is not None:
            message = f"{message} at byte {offset}"
        super().__init__(message)


class ParseError(ConversionError):
    """Malformed or unsupported escape sequence."""


class SequenceTooLongError(ParseError):
    """A CSI sequence ran past the length limit without a command letter."""


class NumberTooLargeError(ParseError):
    """A numeric parameter had more digits than allowed."""


class UnexpectedEndError(ParseError):
    """Input ended after ESC or inside a CSI sequence."""


class CursorRestoreError(ParseError):
    """Cursor restore requested before any save."""


class InternalConsistencyError(ConversionError):
    """The screen grid holds a cell no stage should have produced."""
