from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class UserBase(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None


class UserRead(UserBase):
    id: int
    role: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ParticipantOverview(UserRead):
    competitions: List[str] = []


class UserDeletionStats(BaseModel):
    team_memberships: int = 0
    registrations: int = 0
    empty_teams: int = 0


class UserDeleteResponse(BaseModel):
    message: str
    details: UserDeletionStats
