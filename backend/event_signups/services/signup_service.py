"""Schema-level facade over signup and event persistence."""

from __future__ import annotations

from loguru import logger
from sqlalchemy.orm import Session

from event_signups.domain import SignupDetails
from event_signups.repositories import EventRepository, SignupRepository
from event_signups.schemas import EventSignupSummary, EventWithSignups, Signup, SignupCreate


class SignupService:
    """Register signups and report per-event counts as pydantic schemas."""

    def __init__(self, session: Session):
        self._session = session
        self._signup_repo = SignupRepository(session)
        self._event_repo = EventRepository(session)

    def register(self, event_id: int, payload: SignupCreate) -> Signup:
        record = self._signup_repo.add_signup(
            SignupDetails(event_id=event_id, name=payload.name, email=payload.email)
        )
        logger.info("Registered signup {} for event {}", record.id, event_id)
        return Signup.model_validate(record)

    def signups_for_event(self, event_id: int) -> list[Signup]:
        return [Signup.model_validate(record) for record in self._signup_repo.list_signups(event_id)]

    def events_overview(self) -> EventSignupSummary:
        rows = self._event_repo.list_events_with_signups()
        items = [EventWithSignups.model_validate(row) for row in rows]
        logger.debug("Read {} rows from events_with_signups", len(items))
        return EventSignupSummary(total=len(items), items=items)

    def event_overview(self, event_id: int) -> EventWithSignups | None:
        row = self._event_repo.get_event_with_signups(event_id)
        if row is None:
            return None
        return EventWithSignups.model_validate(row)

    def cancel_event(self, event_id: int) -> bool:
        """Remove an event and, by cascade, every signup attached to it."""

        removed_signups = self._signup_repo.count_signups(event_id)
        if not self._event_repo.delete_event(event_id):
            return False
        logger.info("Deleted event {} along with {} signups", event_id, removed_signups)
        return True
