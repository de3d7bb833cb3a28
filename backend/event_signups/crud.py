from __future__ import annotations

from sqlalchemy.orm import Session

from event_signups.domain import EventDetails, SignupDetails
from event_signups.repositories import EventRepository, SignupRepository

from .models import Event, EventSignup, EventWithSignups


def create_event(session: Session, details: EventDetails) -> Event:
    return EventRepository(session).create_event(details)


def delete_event(session: Session, event_id: int) -> bool:
    return EventRepository(session).delete_event(event_id)


def add_signup(session: Session, details: SignupDetails) -> EventSignup:
    return SignupRepository(session).add_signup(details)


def list_signups(session: Session, event_id: int) -> list[EventSignup]:
    return SignupRepository(session).list_signups(event_id)


def list_events_with_signups(session: Session) -> list[EventWithSignups]:
    return EventRepository(session).list_events_with_signups()


def get_event_with_signups(session: Session, event_id: int) -> EventWithSignups | None:
    return EventRepository(session).get_event_with_signups(event_id)
