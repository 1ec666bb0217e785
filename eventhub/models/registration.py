import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index, text
from sqlalchemy.orm import relationship
from eventhub.core.database import Base

STATUS_REGISTERED = "registered"


class Registration(Base):
    __tablename__ = "registrations"
    __table_args__ = (
        # One individual (team-less) registration per user and event
        Index(
            "uq_registrations_individual",
            "user_id",
            "event_id",
            unique=True,
            sqlite_where=text("team_id IS NULL"),
            postgresql_where=text("team_id IS NULL"),
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=True)
    status = Column(String, default=STATUS_REGISTERED, nullable=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    user = relationship("User", back_populates="registrations")
    event = relationship("Event", back_populates="registrations")

    # Event fields shown next to "my registrations"
    @property
    def event_name(self):
        return self.event.title if self.event else None

    @property
    def start_datetime(self):
        return self.event.start_datetime if self.event else None

    @property
    def venue(self):
        return self.event.venue if self.event else None
