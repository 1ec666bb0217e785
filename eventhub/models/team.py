import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from eventhub.core.database import Base


class Team(Base):
    __tablename__ = "teams"
    __table_args__ = (UniqueConstraint("event_id", "name", name="uq_teams_event_name"),)

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    captain_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    event = relationship("Event", back_populates="teams")
    captain = relationship("User", back_populates="captained_teams")
    members = relationship("TeamMember", back_populates="team", cascade="all, delete-orphan")

    @property
    def captain_name(self):
        return self.captain.name if self.captain else None

    @property
    def captain_email(self):
        return self.captain.email if self.captain else None

    @property
    def event_name(self):
        return self.event.title if self.event else None
