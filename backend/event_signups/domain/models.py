"""Typed write payloads passed from services and scripts to repositories."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class EventDetails:
    """Attributes of an event row; the store assigns the identifier."""

    title: str
    start_time: datetime
    end_time: datetime
    background: str = ""
    location: str = ""
    price: int = 0
    published: bool = False


@dataclass(slots=True)
class SignupDetails:
    """One person's registration for one event.

    Fields are optional at the type level so absent values reach the
    repository and are rejected there as not-null violations.
    """

    event_id: int | None
    name: str | None
    email: str | None
