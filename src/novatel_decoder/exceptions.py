"""
novatel_decoder.exceptions

Errors raised by the field and status-word decoders.
"""


class DecodeError(ValueError):
    """Base class for all decode failures."""


class BufferTooShortError(DecodeError):
    """A binary field was requested past the end of the supplied buffer."""

    def __init__(self, required: int, available: int, offset: int = 0):
        self.required = required
        self.available = available
        self.offset = offset
        super().__init__(
            f"Need {required} bytes at offset {offset}, only {available} available"
        )


class FieldParseError(DecodeError):
    """An ASCII token is malformed or out of range for its field type."""

    def __init__(self, token: str, field_type: str, base: int | None = None):
        self.token = token
        self.field_type = field_type
        self.base = base
        where = f" (base {base})" if base is not None else ""
        super().__init__(f"Cannot parse {token!r} as {field_type}{where}")


class StatusTableError(DecodeError):
    """The bit table configuration is inconsistent with the status records."""
