"""Repository abstractions for database interactions."""

from .event_repository import EventRepository
from .signup_repository import SignupRepository

__all__ = [
    "EventRepository",
    "SignupRepository",
]
