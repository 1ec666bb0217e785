from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

RegistrationStatus = Literal["open", "closed"]


class EventBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    venue: Optional[str] = None
    start_datetime: datetime
    end_datetime: Optional[datetime] = None
    capacity: Optional[int] = Field(default=None, ge=0)
    registration_status: RegistrationStatus = "open"
    rules: Optional[str] = None


class EventCreate(EventBase):
    @model_validator(mode="after")
    def end_after_start(self):
        if self.end_datetime and self.end_datetime < self.start_datetime:
            raise ValueError("End date must be after start date")
        return self


class EventUpdate(EventCreate):
    # Updates replace the whole record, so title and start_datetime stay required
    pass


class EventRead(EventBase):
    id: int
    rules: str = ""
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @field_validator("rules", mode="before")
    @classmethod
    def rules_never_null(cls, v):
        return v or ""
