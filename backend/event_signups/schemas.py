from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255


class SignupCreate(BaseModel):
    name: str = Field(..., max_length=NAME_MAX_LENGTH, description="Registrant display name")
    email: str = Field(..., max_length=EMAIL_MAX_LENGTH, description="Registrant contact address")


class Signup(SignupCreate):
    id: int
    event_id: int

    model_config = {"from_attributes": True}


class EventBase(BaseModel):
    id: int
    title: str
    background: str
    location: str
    start_time: datetime
    end_time: datetime
    price: int
    published: bool

    model_config = {"from_attributes": True}


class EventWithSignups(EventBase):
    signups: int = 0

    @field_validator("signups", mode="before")
    @classmethod
    def _coerce_count(cls, value: Any) -> int:
        if value is None:
            return 0
        return int(value)


class EventSignupSummary(BaseModel):
    total: int
    items: list[EventWithSignups] = Field(default_factory=list)
