from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class SessionBase(BaseModel):
    event_id: int
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    speaker: Optional[str] = None
    location: Optional[str] = None
    start_time: datetime
    end_time: Optional[datetime] = None


class SessionCreate(SessionBase):
    @model_validator(mode="after")
    def end_after_start(self):
        if self.end_time and self.end_time < self.start_time:
            raise ValueError("Session end time must be after its start time")
        return self


class SessionRead(SessionBase):
    id: int

    class Config:
        from_attributes = True
