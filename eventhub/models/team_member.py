import datetime
from enum import Enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from eventhub.core.database import Base


class MemberRole(str, Enum):
    LEADER = "Leader"
    MEMBER = "Member"


class MemberStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class InvalidTransition(ValueError):
    """Raised when a membership row is moved to a state it cannot reach."""

    def __init__(self, current: MemberStatus, target: MemberStatus):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move membership from {current.value} to {target.value}")


# pending -> accepted | rejected, rejected -> pending (re-invite)
ALLOWED_TRANSITIONS = {
    MemberStatus.PENDING: {MemberStatus.ACCEPTED, MemberStatus.REJECTED},
    MemberStatus.REJECTED: {MemberStatus.PENDING},
    MemberStatus.ACCEPTED: set(),
}


class TeamMember(Base):
    """Membership of a user in a team. A row in ``pending`` is an invitation."""

    __tablename__ = "team_members"
    __table_args__ = (UniqueConstraint("team_id", "user_id", name="uq_team_members_team_user"),)

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    role = Column(String, default=MemberRole.MEMBER.value, nullable=False)
    status = Column(String, default=MemberStatus.PENDING.value, nullable=False)
    invited_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    joined_at = Column(DateTime, default=datetime.datetime.utcnow)

    team = relationship("Team", back_populates="members")
    user = relationship("User", back_populates="memberships", foreign_keys=[user_id])
    inviter = relationship("User", foreign_keys=[invited_by])

    @property
    def member_status(self) -> MemberStatus:
        return MemberStatus(self.status)

    @property
    def is_leader(self) -> bool:
        return self.role == MemberRole.LEADER.value

    def _move_to(self, target: MemberStatus):
        current = self.member_status
        if target not in ALLOWED_TRANSITIONS[current]:
            raise InvalidTransition(current, target)
        self.status = target.value

    def accept(self):
        self._move_to(MemberStatus.ACCEPTED)

    def reject(self):
        self._move_to(MemberStatus.REJECTED)

    def reinvite(self, inviter_id: int):
        self._move_to(MemberStatus.PENDING)
        self.invited_by = inviter_id

    # Read-side helpers used by the membership and invitation listings
    @property
    def name(self):
        return self.user.name if self.user else None

    @property
    def email(self):
        return self.user.email if self.user else None

    @property
    def phone(self):
        return self.user.phone if self.user else None

    @property
    def invited_by_name(self):
        return self.inviter.name if self.inviter else None

    @property
    def team_name(self):
        return self.team.name if self.team else None

    @property
    def event_id(self):
        return self.team.event_id if self.team else None

    @property
    def event_name(self):
        return self.team.event_name if self.team else None

    @property
    def event_date(self):
        return self.team.event.start_datetime if self.team and self.team.event else None

    @property
    def location(self):
        return self.team.event.venue if self.team and self.team.event else None

    @property
    def captain_id(self):
        return self.team.captain_id if self.team else None
