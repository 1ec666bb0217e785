import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from eventhub.core.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    venue = Column(String, nullable=True)
    start_datetime = Column(DateTime, nullable=False)
    end_datetime = Column(DateTime, nullable=True)
    capacity = Column(Integer, nullable=True)  # 0 or NULL means unlimited
    registration_status = Column(String, default="open", nullable=False)  # "open" or "closed"
    rules = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    teams = relationship("Team", back_populates="event", cascade="all, delete-orphan")
    registrations = relationship("Registration", back_populates="event", cascade="all, delete-orphan")
    sessions = relationship(
        "EventSession",
        back_populates="event",
        cascade="all, delete-orphan",
        order_by="EventSession.start_time",
    )

    @property
    def is_open(self) -> bool:
        return self.registration_status == "open"

    @property
    def has_capacity_limit(self) -> bool:
        return bool(self.capacity) and self.capacity > 0
