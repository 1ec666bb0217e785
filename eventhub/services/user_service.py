import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from eventhub.models import event as event_model
from eventhub.models import registration as registration_model
from eventhub.models import team as team_model
from eventhub.models import team_member as member_model
from eventhub.models import user as user_model
from eventhub.schemas import user_schemas

logger = logging.getLogger(__name__)

User = user_model.User
Team = team_model.Team
TeamMember = member_model.TeamMember
Registration = registration_model.Registration


def get_user(db: Session, user_id: int) -> Optional[user_model.User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_or_404(db: Session, user_id: int) -> user_model.User:
    user = get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


def count_participants(db: Session) -> int:
    return db.query(User).filter(User.role != user_model.ROLE_ADMIN).count()


def get_participants_overview(db: Session) -> List[user_schemas.ParticipantOverview]:
    """Non-admin users with the titles of the events they take part in.

    An event counts when the user registered for it individually or holds an
    accepted membership in one of its teams.
    """
    participants = db.query(User)\
        .filter(User.role != user_model.ROLE_ADMIN)\
        .order_by(User.created_at.desc(), User.id.desc())\
        .all()

    registered = db.query(Registration.user_id, event_model.Event.title)\
        .join(event_model.Event, Registration.event_id == event_model.Event.id)\
        .all()
    in_teams = db.query(TeamMember.user_id, event_model.Event.title)\
        .join(Team, TeamMember.team_id == Team.id)\
        .join(event_model.Event, Team.event_id == event_model.Event.id)\
        .filter(TeamMember.status == member_model.MemberStatus.ACCEPTED.value)\
        .all()

    competitions = {}
    for user_id, title in registered + in_teams:
        titles = competitions.setdefault(user_id, [])
        if title not in titles:
            titles.append(title)

    overview = []
    for user in participants:
        row = user_schemas.ParticipantOverview.model_validate(user)
        row.competitions = sorted(competitions.get(user.id, []))
        overview.append(row)
    return overview


def _promote_to_captain(db: Session, team_id: int, successor: member_model.TeamMember):
    db.query(Team).filter(Team.id == team_id).update({Team.captain_id: successor.user_id}, synchronize_session=False)
    db.query(TeamMember)\
        .filter(TeamMember.id == successor.id)\
        .update({TeamMember.role: member_model.MemberRole.LEADER.value}, synchronize_session=False)


def delete_user(db: Session, user_id: int) -> user_schemas.UserDeletionStats:
    """Delete a participant and everything that references them, atomically.

    Teams left without members are removed. A team the user captained passes
    to its longest-standing accepted member; with none left it is removed
    together with its outstanding invitations.
    """
    user = get_user_or_404(db, user_id)
    if user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Cannot delete admin users")

    logger.info("Starting deletion of user %s (%s)", user.id, user.name)
    stats = user_schemas.UserDeletionStats()

    try:
        member_team_ids = {
            team_id for (team_id,) in db.query(TeamMember.team_id).filter(TeamMember.user_id == user_id)
        }
        captained_ids = {
            team_id for (team_id,) in db.query(Team.id).filter(Team.captain_id == user_id)
        }

        stats.team_memberships = db.query(TeamMember)\
            .filter(TeamMember.user_id == user_id)\
            .delete(synchronize_session=False)

        # Invitations this user sent stay valid but lose their inviter
        db.query(TeamMember)\
            .filter(TeamMember.invited_by == user_id)\
            .update({TeamMember.invited_by: None}, synchronize_session=False)

        for team_id in sorted(member_team_ids | captained_ids):
            remaining = db.query(TeamMember).filter(TeamMember.team_id == team_id)
            if team_id in captained_ids:
                successor = remaining\
                    .filter(TeamMember.status == member_model.MemberStatus.ACCEPTED.value)\
                    .order_by(TeamMember.joined_at.asc(), TeamMember.id.asc())\
                    .first()
                if successor:
                    _promote_to_captain(db, team_id, successor)
                    logger.info("User %s now captains team %s", successor.user_id, team_id)
                    continue
                # Only open or declined invitations are left; they die with the team
                remaining.delete(synchronize_session=False)
            elif remaining.count():
                continue
            db.query(Registration).filter(Registration.team_id == team_id).delete(synchronize_session=False)
            db.query(Team).filter(Team.id == team_id).delete(synchronize_session=False)
            stats.empty_teams += 1
            logger.info("Deleted empty team %s while removing user %s", team_id, user_id)

        stats.registrations = db.query(Registration)\
            .filter(Registration.user_id == user_id)\
            .delete(synchronize_session=False)

        db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Deletion of user %s failed; rolled back", user_id)
        raise

    db.expire_all()
    logger.info(
        "User %s deleted: %s memberships, %s registrations, %s teams",
        user_id, stats.team_memberships, stats.registrations, stats.empty_teams,
    )
    return stats
