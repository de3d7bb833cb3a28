from __future__ import annotations

from datetime import datetime
from unittest.mock import MagicMock, patch

from event_signups import crud
from event_signups.domain import EventDetails, SignupDetails


@patch("event_signups.crud.SignupRepository")
def test_add_signup(mock_signup_repo):
    """Verify that add_signup calls the repository method correctly."""
    mock_session = MagicMock()
    details = SignupDetails(event_id=1, name="Alice", email="a@x.com")

    crud.add_signup(mock_session, details)

    mock_signup_repo.assert_called_once_with(mock_session)
    mock_signup_repo.return_value.add_signup.assert_called_once_with(details)


@patch("event_signups.crud.SignupRepository")
def test_list_signups(mock_signup_repo):
    mock_session = MagicMock()

    crud.list_signups(mock_session, 7)

    mock_signup_repo.assert_called_once_with(mock_session)
    mock_signup_repo.return_value.list_signups.assert_called_once_with(7)


@patch("event_signups.crud.EventRepository")
def test_create_event(mock_event_repo):
    """Verify that create_event calls the repository method correctly."""
    mock_session = MagicMock()
    details = EventDetails(
        title="Gala",
        start_time=datetime(2024, 1, 1, 18),
        end_time=datetime(2024, 1, 1, 22),
    )

    crud.create_event(mock_session, details)

    mock_event_repo.assert_called_once_with(mock_session)
    mock_event_repo.return_value.create_event.assert_called_once_with(details)


@patch("event_signups.crud.EventRepository")
def test_delete_event(mock_event_repo):
    mock_session = MagicMock()
    mock_event_repo.return_value.delete_event.return_value = True

    assert crud.delete_event(mock_session, 3) is True

    mock_event_repo.return_value.delete_event.assert_called_once_with(3)


@patch("event_signups.crud.EventRepository")
def test_view_reads(mock_event_repo):
    """Verify the view helpers delegate to the event repository."""
    mock_session = MagicMock()

    crud.list_events_with_signups(mock_session)
    crud.get_event_with_signups(mock_session, 5)

    mock_event_repo.return_value.list_events_with_signups.assert_called_once_with()
    mock_event_repo.return_value.get_event_with_signups.assert_called_once_with(5)
