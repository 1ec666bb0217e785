from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class TeamBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class TeamCreate(TeamBase):
    event_id: int


class TeamUpdate(TeamBase):
    pass


class TeamRead(TeamBase):
    id: int
    event_id: int
    captain_id: int
    created_at: Optional[datetime] = None
    captain_name: Optional[str] = None
    event_name: Optional[str] = None

    class Config:
        from_attributes = True


class TeamMemberBrief(BaseModel):
    id: int
    user_id: int
    role: str
    status: str
    name: Optional[str] = None
    email: Optional[str] = None

    class Config:
        from_attributes = True


class TeamDetail(TeamRead):
    captain_email: Optional[str] = None
    members: List[TeamMemberBrief] = []
