"""Errors raised when the signup store rejects a write."""

from __future__ import annotations


class SignupError(Exception):
    """Base class for rejected signup writes."""


class UnknownEventError(SignupError, LookupError):
    """Raised when a signup references an event that does not exist."""

    def __init__(self, event_id: int) -> None:
        super().__init__(f"Event {event_id} does not exist")
        self.event_id = event_id


class MissingFieldError(SignupError, ValueError):
    """Raised when a required signup column is absent."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Signup field '{field}' is required")
        self.field = field


class FieldTooLongError(SignupError, ValueError):
    """Raised when a signup value exceeds its VARCHAR column length."""

    def __init__(self, field: str, max_length: int) -> None:
        super().__init__(f"Signup field '{field}' exceeds {max_length} characters")
        self.field = field
        self.max_length = max_length
