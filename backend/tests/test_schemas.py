from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from event_signups.schemas import EventWithSignups, SignupCreate


def test_signup_create_enforces_column_lengths():
    """Verify name and email longer than VARCHAR(255) are rejected."""
    SignupCreate(name="n" * 255, email="e" * 255)

    with pytest.raises(ValidationError):
        SignupCreate(name="n" * 256, email="a@x.com")
    with pytest.raises(ValidationError):
        SignupCreate(name="Alice", email="e" * 256)


def test_signup_create_requires_name_and_email():
    with pytest.raises(ValidationError):
        SignupCreate(name="Alice")
    with pytest.raises(ValidationError):
        SignupCreate(name=None, email="a@x.com")


def test_signup_create_does_not_validate_email_format():
    assert SignupCreate(name="Alice", email="not-an-address").email == "not-an-address"


def test_event_with_signups_coerces_count():
    """Verify big-integer and missing counts become plain ints."""
    base = {
        "id": 1,
        "title": "Gala",
        "background": "",
        "location": "",
        "start_time": datetime(2024, 1, 1, 18),
        "end_time": datetime(2024, 1, 1, 22),
        "price": 0,
        "published": False,
    }

    assert EventWithSignups(**base, signups="2").signups == 2
    assert EventWithSignups(**base, signups=None).signups == 0
    assert EventWithSignups(**base).signups == 0
