from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class InviteRequest(BaseModel):
    team_id: int
    user_email: str = Field(min_length=3)


class InviteResponse(BaseModel):
    message: str
    invitation_id: int


class TeamMemberRead(BaseModel):
    id: int
    team_id: int
    user_id: int
    role: str
    status: str
    invited_by: Optional[int] = None
    joined_at: Optional[datetime] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    invited_by_name: Optional[str] = None

    class Config:
        from_attributes = True


class InvitationRead(BaseModel):
    id: int
    team_id: int
    user_id: int
    status: str
    role: str
    joined_at: Optional[datetime] = None
    team_name: Optional[str] = None
    event_name: Optional[str] = None
    invited_by_name: Optional[str] = None

    class Config:
        from_attributes = True


class MyTeamRead(BaseModel):
    id: int
    team_id: int
    status: str
    team_name: Optional[str] = None
    event_id: Optional[int] = None
    event_name: Optional[str] = None
    event_date: Optional[datetime] = None
    location: Optional[str] = None
    captain_id: Optional[int] = None

    class Config:
        from_attributes = True


class TeamMemberOverview(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None
    team_name: str
    role: str
    event_title: str
