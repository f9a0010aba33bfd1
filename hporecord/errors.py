"""Error types raised by hporecord."""

from typing import Optional


class RecordError(Exception):
    """Base class for all hporecord errors."""


class DecodeError(RecordError, ValueError):
    """
    Malformed wire input.

    Raised for invalid JSON, an unknown or missing ``type`` tag, a missing
    required field, or a field of the wrong type. Never raised for
    semantically inconsistent but well-formed records (see
    ``hporecord.validation``).
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(f"{field}: {message}" if field else message)

    def within(self, prefix: str) -> 'DecodeError':
        """Return a copy whose field path is nested under ``prefix``."""
        field = f"{prefix}.{self.field}" if self.field else prefix
        return DecodeError(self.message, field=field)
