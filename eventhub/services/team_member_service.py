import logging
from typing import List, Tuple

from fastapi import HTTPException, status
from sqlalchemy import case
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from eventhub.models import event as event_model
from eventhub.models import team as team_model
from eventhub.models import team_member as member_model
from eventhub.models import user as user_model
from eventhub.services import team_service

logger = logging.getLogger(__name__)

TeamMember = member_model.TeamMember
MemberStatus = member_model.MemberStatus
MemberRole = member_model.MemberRole


def get_team_members(db: Session, team_id: int) -> List[member_model.TeamMember]:
    leader_first = case((TeamMember.role == MemberRole.LEADER.value, 0), else_=1)
    return db.query(TeamMember)\
        .filter(TeamMember.team_id == team_id)\
        .order_by(leader_first, TeamMember.joined_at.asc(), TeamMember.id.asc())\
        .all()


def get_user_invitations(db: Session, user_id: int) -> List[member_model.TeamMember]:
    return db.query(TeamMember)\
        .filter(TeamMember.user_id == user_id, TeamMember.status == MemberStatus.PENDING.value)\
        .order_by(TeamMember.joined_at.desc(), TeamMember.id.desc())\
        .all()


def get_user_teams(db: Session, user_id: int) -> List[member_model.TeamMember]:
    return db.query(TeamMember)\
        .join(team_model.Team, TeamMember.team_id == team_model.Team.id)\
        .join(event_model.Event, team_model.Team.event_id == event_model.Event.id)\
        .filter(TeamMember.user_id == user_id, TeamMember.status == MemberStatus.ACCEPTED.value)\
        .order_by(event_model.Event.start_datetime.desc())\
        .all()


def _find_membership(db: Session, team_id: int, user_id: int):
    return db.query(TeamMember)\
        .filter(TeamMember.team_id == team_id, TeamMember.user_id == user_id)\
        .first()


def invite_member(db: Session, team_id: int, user_email: str, current_user_id: int) -> Tuple[member_model.TeamMember, bool]:
    """Invite a user to a team by email.

    Returns the invitation row and whether it was newly created (``False`` when a
    previously rejected invitation was re-sent).
    """
    db_team = team_service.get_team_or_404(db, team_id)
    if db_team.captain_id != current_user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only team captain can invite members")

    invitee = db.query(user_model.User)\
        .filter(user_model.User.email == user_email.lower().strip())\
        .first()
    if not invitee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found with this email")

    if invitee.id == current_user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You cannot invite yourself")

    existing = _find_membership(db, team_id, invitee.id)

    if existing:
        current = existing.member_status
        if current == MemberStatus.ACCEPTED:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User is already a team member")
        if current == MemberStatus.PENDING:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invitation already sent to this user")
        existing.reinvite(current_user_id)
        db.commit()
        db.refresh(existing)
        logger.info("Invitation %s re-sent to user %s for team %s", existing.id, invitee.id, team_id)
        return existing, False

    invitation = TeamMember(
        team_id=team_id,
        user_id=invitee.id,
        role=MemberRole.MEMBER.value,
        status=MemberStatus.PENDING.value,
        invited_by=current_user_id,
    )
    try:
        db.add(invitation)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Invitation already sent to this user")
    db.refresh(invitation)
    logger.info("User %s invited to team %s by %s", invitee.id, team_id, current_user_id)
    return invitation, True


def _get_own_invitation(db: Session, invitation_id: int, current_user_id: int) -> member_model.TeamMember:
    invitation = db.query(TeamMember).filter(TeamMember.id == invitation_id).first()
    if not invitation:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invitation not found")
    if invitation.user_id != current_user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="This invitation is not for you")
    return invitation


def _apply_decision(transition):
    try:
        transition()
    except member_model.InvalidTransition:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invitation already processed")


def accept_invitation(db: Session, invitation_id: int, current_user_id: int) -> member_model.TeamMember:
    invitation = _get_own_invitation(db, invitation_id, current_user_id)
    if invitation.member_status == MemberStatus.PENDING:
        other_team = team_service.find_user_team_for_event(
            db, current_user_id, invitation.team.event_id, exclude_team_id=invitation.team_id
        )
        if other_team:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f'You are already a member of team "{other_team.name}" for this competition',
            )
    _apply_decision(invitation.accept)
    db.commit()
    db.refresh(invitation)
    logger.info("User %s accepted invitation %s", current_user_id, invitation_id)
    return invitation


def reject_invitation(db: Session, invitation_id: int, current_user_id: int) -> member_model.TeamMember:
    invitation = _get_own_invitation(db, invitation_id, current_user_id)
    _apply_decision(invitation.reject)
    db.commit()
    db.refresh(invitation)
    logger.info("User %s rejected invitation %s", current_user_id, invitation_id)
    return invitation


def remove_member(db: Session, member_id: int, current_user_id: int) -> bool:
    member = db.query(TeamMember).filter(TeamMember.id == member_id).first()
    if not member:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")

    captain_id = member.team.captain_id
    if current_user_id not in (captain_id, member.user_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only team captain can remove members")
    if member.user_id == captain_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot remove team captain")

    db.delete(member)
    db.commit()
    logger.info("Membership %s removed by user %s", member_id, current_user_id)
    return True


def leave_team(db: Session, team_id: int, current_user_id: int) -> bool:
    db_team = team_service.get_team_or_404(db, team_id)
    if db_team.captain_id == current_user_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Team captain cannot leave. Delete the team instead.",
        )

    membership = db.query(TeamMember)\
        .filter(
            TeamMember.team_id == team_id,
            TeamMember.user_id == current_user_id,
            TeamMember.status == MemberStatus.ACCEPTED.value,
        )\
        .first()
    if not membership:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="You are not a member of this team")

    db.delete(membership)
    db.commit()
    logger.info("User %s left team %s", current_user_id, team_id)
    return True
