import datetime

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from eventhub.core.database import Base

ROLE_PARTICIPANT = "participant"
ROLE_ADMIN = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String, default=ROLE_PARTICIPANT, nullable=False)  # "participant" or "admin"
    phone = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    captained_teams = relationship("Team", back_populates="captain")
    memberships = relationship("TeamMember", back_populates="user", foreign_keys="TeamMember.user_id")
    registrations = relationship("Registration", back_populates="user")

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
