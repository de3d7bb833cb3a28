"""Domain inputs accepted by the signup and event repositories."""

from .models import EventDetails, SignupDetails

__all__ = [
    "EventDetails",
    "SignupDetails",
]
