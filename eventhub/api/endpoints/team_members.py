from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from eventhub.services import team_member_service, auth_service
from eventhub.schemas import auth_schemas, common_schemas, team_member_schemas
from eventhub.api.dependencies import get_db

router = APIRouter()


@router.get("/team/{team_id}", response_model=List[team_member_schemas.TeamMemberRead])
def get_team_members_endpoint(team_id: int, db: Session = Depends(get_db)):
    return team_member_service.get_team_members(db=db, team_id=team_id)


@router.get("/my-invitations", response_model=List[team_member_schemas.InvitationRead])
def get_my_invitations_endpoint(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return team_member_service.get_user_invitations(db=db, user_id=current_user.id)


@router.get("/my-teams", response_model=List[team_member_schemas.MyTeamRead])
def get_my_teams_endpoint(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return team_member_service.get_user_teams(db=db, user_id=current_user.id)


@router.post(
    "/invite",
    response_model=team_member_schemas.InviteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={200: {"model": team_member_schemas.InviteResponse, "description": "Rejected invitation re-sent"}},
)
def invite_member_endpoint(
    invite_in: team_member_schemas.InviteRequest,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    invitation, created = team_member_service.invite_member(
        db=db, team_id=invite_in.team_id, user_email=invite_in.user_email, current_user_id=current_user.id
    )
    if not created:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"message": "Invitation resent successfully", "invitation_id": invitation.id},
        )
    return {"message": "Invitation sent successfully", "invitation_id": invitation.id}


@router.put("/accept/{invitation_id}", response_model=common_schemas.MessageResponse)
def accept_invitation_endpoint(
    invitation_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    team_member_service.accept_invitation(db=db, invitation_id=invitation_id, current_user_id=current_user.id)
    return {"message": "Invitation accepted successfully"}


@router.put("/reject/{invitation_id}", response_model=common_schemas.MessageResponse)
def reject_invitation_endpoint(
    invitation_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    team_member_service.reject_invitation(db=db, invitation_id=invitation_id, current_user_id=current_user.id)
    return {"message": "Invitation rejected"}


@router.delete("/leave/{team_id}", response_model=common_schemas.MessageResponse)
def leave_team_endpoint(
    team_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    team_member_service.leave_team(db=db, team_id=team_id, current_user_id=current_user.id)
    return {"message": "You have left the team"}


@router.delete("/{member_id}", response_model=common_schemas.MessageResponse)
def remove_member_endpoint(
    member_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    team_member_service.remove_member(db=db, member_id=member_id, current_user_id=current_user.id)
    return {"message": "Member removed successfully"}
