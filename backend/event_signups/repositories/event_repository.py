"""Event rows and the per-event signup count view."""

from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from event_signups.domain import EventDetails
from event_signups.models import Event, EventSignup, EventWithSignups


class EventRepository:
    """Create and remove events, and read them back through the signup view."""

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Mutations

    def create_event(self, details: EventDetails) -> Event:
        event = Event(
            title=details.title,
            background=details.background,
            location=details.location,
            start_time=details.start_time,
            end_time=details.end_time,
            price=details.price,
            published=details.published,
        )
        self._session.add(event)
        self._session.flush()
        return event

    def delete_event(self, event_id: int) -> bool:
        """Delete an event; its signups go with it through ON DELETE CASCADE."""

        event = self._session.get(Event, event_id)
        if event is None:
            return False
        # The database cascade is invisible to the session; drop the signups it
        # still holds so they cannot be read back after the delete.
        held_signups = [
            record
            for record in self._session.identity_map.values()
            if isinstance(record, EventSignup) and record.event_id == event_id
        ]
        self._session.delete(event)
        self._session.flush()
        for record in held_signups:
            if record in self._session:
                self._session.expunge(record)
        logger.debug("Deleted event {}", event_id)
        return True

    # ------------------------------------------------------------------
    # Queries

    def get_event(self, event_id: int) -> Event | None:
        return self._session.get(Event, event_id)

    def list_events_with_signups(self) -> list[EventWithSignups]:
        # populate_existing: rows already in the identity map must pick up
        # the count as of this query, not the one from an earlier read.
        query = (
            select(EventWithSignups)
            .order_by(EventWithSignups.id.asc())
            .execution_options(populate_existing=True)
        )
        return list(self._session.execute(query).scalars().all())

    def get_event_with_signups(self, event_id: int) -> EventWithSignups | None:
        query = (
            select(EventWithSignups)
            .where(EventWithSignups.id == event_id)
            .execution_options(populate_existing=True)
        )
        return self._session.execute(query).scalar_one_or_none()


__all__ = ["EventRepository"]
