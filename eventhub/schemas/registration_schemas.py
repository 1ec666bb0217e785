from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class RegistrationCreate(BaseModel):
    event_id: int


class RegistrationRead(BaseModel):
    id: int
    user_id: int
    event_id: int
    team_id: Optional[int] = None
    status: str
    created_at: Optional[datetime] = None
    event_name: Optional[str] = None
    start_datetime: Optional[datetime] = None
    venue: Optional[str] = None

    class Config:
        from_attributes = True
