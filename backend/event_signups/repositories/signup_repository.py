"""Signup persistence helpers."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from event_signups.domain import SignupDetails
from event_signups.errors import FieldTooLongError, MissingFieldError, UnknownEventError
from event_signups.models import EventSignup

REQUIRED_FIELDS = ("event_id", "name", "email")
LENGTH_LIMITED_FIELDS = ("name", "email")


class SignupRepository:
    """Encapsulate writes to and reads from ``event_signups``."""

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Mutations

    def add_signup(self, details: SignupDetails) -> EventSignup:
        """Insert a signup and return it with its store-assigned id.

        The insert runs inside a savepoint, so a rejected row leaves both the
        table and the caller's transaction untouched.
        """

        for field_name in REQUIRED_FIELDS:
            if getattr(details, field_name) is None:
                raise MissingFieldError(field_name)

        # SQLite does not enforce VARCHAR lengths, so check them before the insert.
        for field_name in LENGTH_LIMITED_FIELDS:
            max_length = EventSignup.__table__.c[field_name].type.length
            if len(getattr(details, field_name)) > max_length:
                raise FieldTooLongError(field_name, max_length)

        signup = EventSignup(event_id=details.event_id, name=details.name, email=details.email)
        try:
            with self._session.begin_nested():
                self._session.add(signup)
        except IntegrityError as exc:
            raise UnknownEventError(details.event_id) from exc
        return signup

    # ------------------------------------------------------------------
    # Queries

    def get_signup(self, signup_id: int) -> EventSignup | None:
        return self._session.get(EventSignup, signup_id)

    def list_signups(self, event_id: int) -> list[EventSignup]:
        query = (
            select(EventSignup)
            .where(EventSignup.event_id == event_id)
            .order_by(EventSignup.id.asc())
        )
        return list(self._session.execute(query).scalars().all())

    def count_signups(self, event_id: int | None = None) -> int:
        query = select(func.count(EventSignup.id))
        if event_id is not None:
            query = query.where(EventSignup.event_id == event_id)
        return self._session.execute(query).scalar_one()


__all__ = ["SignupRepository"]
