"""
Custom exception hierarchy for timeanddate.

Why a custom hierarchy:
- Callers can tell a malformed search response (InvalidResponseError)
  apart from a detail page that failed to decode (DeserializeError)
  without matching on generic ValueError/RuntimeError messages.
- Decode errors carry the field name and the raw scraped text, which is
  usually all that is needed to see how the site's markup changed.

Transport failures are *not* wrapped: ``requests`` exceptions reach the
caller unchanged.
"""


class TimeAndDateError(Exception):
    """Base exception for all timeanddate errors."""


class ParseError(TimeAndDateError, ValueError):
    """Raised by a field parser when a text fragment cannot be decoded.

    Attributes:
        field: Name of the value being parsed (e.g. ``"position"``).
        raw: The offending input text.
        reason: Short description of what was wrong.
    """

    def __init__(self, field: str, raw: str, reason: str) -> None:
        self.field = field
        self.raw = raw
        self.reason = reason
        super().__init__(f"{field}: {reason} ({raw!r})")


class DeserializeError(TimeAndDateError):
    """Raised when a detail page field cannot be turned into a snapshot value.

    The underlying ``ParseError`` (if any) is chained as ``__cause__``.
    No partial snapshot is returned alongside this error.
    """

    def __init__(self, part: str, data: str = "", reason: str = "failed to deserialize") -> None:
        self.part = part
        self.data = data
        self.reason = reason
        message = f"deserialize {part}: {reason}"
        if data:
            message += f" ({data})"
        super().__init__(message)


class NotFoundError(DeserializeError):
    """Raised when a required page element (current time or date) is absent."""

    def __init__(self, part: str) -> None:
        super().__init__(part, reason="not found")


class InvalidResponseError(TimeAndDateError):
    """Raised when a search response row has an unexpected number of fields."""


class ConfigValidationError(TimeAndDateError):
    """Raised when a client config file is empty or fails validation."""
