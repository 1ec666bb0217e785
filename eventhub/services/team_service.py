import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy import case
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from eventhub.models import team as team_model
from eventhub.models import team_member as member_model
from eventhub.models import user as user_model
from eventhub.schemas import team_schemas
from eventhub.services import event_service

logger = logging.getLogger(__name__)

Team = team_model.Team
TeamMember = member_model.TeamMember
MemberStatus = member_model.MemberStatus
MemberRole = member_model.MemberRole

DUPLICATE_NAME_MESSAGE = "A team with this name already exists for this competition. Please choose a different name."


def list_teams(db: Session) -> List[team_model.Team]:
    return db.query(Team).order_by(Team.created_at.desc(), Team.id.desc()).all()


def count_teams(db: Session) -> int:
    return db.query(Team).count()


def get_teams_by_event(db: Session, event_id: int) -> List[team_model.Team]:
    return db.query(Team)\
        .filter(Team.event_id == event_id)\
        .order_by(Team.created_at.desc(), Team.id.desc())\
        .all()


def get_team(db: Session, team_id: int) -> Optional[team_model.Team]:
    return db.query(Team).filter(Team.id == team_id).first()


def get_team_or_404(db: Session, team_id: int) -> team_model.Team:
    db_team = get_team(db, team_id)
    if not db_team:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found")
    return db_team


def get_team_members_ordered(db: Session, team_id: int) -> List[member_model.TeamMember]:
    """Members of a team, leader first and then by name."""
    role_order = case(
        (TeamMember.role == MemberRole.LEADER.value, 1),
        (TeamMember.role == MemberRole.MEMBER.value, 2),
        else_=3,
    )
    return db.query(TeamMember)\
        .join(user_model.User, TeamMember.user_id == user_model.User.id)\
        .filter(TeamMember.team_id == team_id)\
        .order_by(role_order, user_model.User.name)\
        .all()


def get_team_detail(db: Session, team_id: int) -> team_schemas.TeamDetail:
    db_team = get_team_or_404(db, team_id)
    detail = team_schemas.TeamDetail.model_validate(db_team)
    detail.members = [
        team_schemas.TeamMemberBrief.model_validate(member)
        for member in get_team_members_ordered(db, team_id)
    ]
    return detail


def find_user_team_for_event(
    db: Session, user_id: int, event_id: int, exclude_team_id: Optional[int] = None
) -> Optional[team_model.Team]:
    """The team a user is an accepted member of for an event. Open invitations do not count."""
    query = db.query(Team)\
        .join(TeamMember, TeamMember.team_id == Team.id)\
        .filter(
            Team.event_id == event_id,
            TeamMember.user_id == user_id,
            TeamMember.status == MemberStatus.ACCEPTED.value,
        )
    if exclude_team_id is not None:
        query = query.filter(Team.id != exclude_team_id)
    return query.first()


def _name_taken(db: Session, event_id: int, name: str, exclude_team_id: Optional[int] = None) -> bool:
    query = db.query(Team).filter(Team.event_id == event_id, Team.name == name)
    if exclude_team_id is not None:
        query = query.filter(Team.id != exclude_team_id)
    return db.query(query.exists()).scalar()


def create_team(db: Session, team_in: team_schemas.TeamCreate, captain_id: int) -> team_model.Team:
    event_service.get_event_or_404(db, team_in.event_id)

    existing_team = find_user_team_for_event(db, captain_id, team_in.event_id)
    if existing_team:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                f'You are already registered in team "{existing_team.name}" for this competition. '
                "You cannot create another team for the same event."
            ),
        )

    if _name_taken(db, team_in.event_id, team_in.name):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_NAME_MESSAGE)

    # Team and leader membership are written in one transaction
    db_team = Team(name=team_in.name, event_id=team_in.event_id, captain_id=captain_id)
    try:
        db.add(db_team)
        db.flush()
        db.add(TeamMember(
            team_id=db_team.id,
            user_id=captain_id,
            role=MemberRole.LEADER.value,
            status=MemberStatus.ACCEPTED.value,
        ))
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Concurrent team creation conflict for event %s by user %s", team_in.event_id, captain_id)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_NAME_MESSAGE)
    db.refresh(db_team)
    logger.info("Team %s (%s) created for event %s by user %s", db_team.id, db_team.name, db_team.event_id, captain_id)
    return db_team


def _get_captained_team(db: Session, team_id: int, current_user_id: int, action: str) -> team_model.Team:
    db_team = get_team_or_404(db, team_id)
    if db_team.captain_id != current_user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Only team captain can {action} team")
    return db_team


def update_team(db: Session, team_id: int, team_update: team_schemas.TeamUpdate, current_user_id: int) -> team_model.Team:
    db_team = _get_captained_team(db, team_id, current_user_id, "update")

    if _name_taken(db, db_team.event_id, team_update.name, exclude_team_id=db_team.id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DUPLICATE_NAME_MESSAGE)

    db_team.name = team_update.name
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_NAME_MESSAGE)
    db.refresh(db_team)
    return db_team


def delete_team(db: Session, team_id: int, current_user_id: int) -> bool:
    db_team = _get_captained_team(db, team_id, current_user_id, "delete")
    try:
        db.query(TeamMember).filter(TeamMember.team_id == team_id).delete(synchronize_session=False)
        db.delete(db_team)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Team %s deleted by captain %s", team_id, current_user_id)
    return True
