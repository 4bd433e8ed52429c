"""
Decode errors raised by the webhook decoder.

Every error carries a ``kind`` so callers can branch on the taxonomy without
isinstance chains, and a human readable message suitable for logs.
"""

from typing import Any

from wahooks.core.types import DecodeErrorKind


class DecodeError(Exception):
    """Base class for all decoding failures."""

    kind: DecodeErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Diagnostic representation for structured logging."""
        return {"kind": self.kind.value, "message": self.message}


class MalformedPayloadError(DecodeError):
    """Input is not valid UTF-8 JSON."""

    kind = DecodeErrorKind.MALFORMED


class WrongShapeError(DecodeError):
    """Input is valid JSON but its root is not an object."""

    kind = DecodeErrorKind.WRONG_SHAPE

    def __init__(self, message: str, actual_type: str | None = None):
        self.actual_type = actual_type
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["actual_type"] = self.actual_type
        return data


class TypeMismatchError(DecodeError):
    """
    A field value cannot be coerced to its declared type.

    Attributes:
        path: Location of the offending value, as keys and list indices
        value: The raw value found at ``path``
    """

    kind = DecodeErrorKind.TYPE_MISMATCH

    def __init__(self, message: str, path: tuple[str | int, ...], value: Any = None):
        self.path = path
        self.value = value
        super().__init__(f"{self.field}: {message}" if path else message)

    @property
    def field(self) -> str:
        """Dotted field path, e.g. ``entry.0.changes.0.value.messages.0.timestamp``."""
        return ".".join(str(part) for part in self.path)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["field"] = self.field
        data["value"] = self.value
        return data
