from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from eventhub.services import team_service, auth_service
from eventhub.schemas import auth_schemas, common_schemas, team_schemas
from eventhub.api.dependencies import get_db

router = APIRouter()

# /count and /event/{id} are declared before /{team_id} so they are not shadowed


@router.get("/count", response_model=common_schemas.CountResponse)
def count_teams_endpoint(db: Session = Depends(get_db)):
    return {"count": team_service.count_teams(db=db)}


@router.get("", response_model=List[team_schemas.TeamRead])
def list_teams_endpoint(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return team_service.list_teams(db=db)


@router.get("/event/{event_id}", response_model=List[team_schemas.TeamRead])
def get_teams_by_event_endpoint(event_id: int, db: Session = Depends(get_db)):
    return team_service.get_teams_by_event(db=db, event_id=event_id)


@router.get("/{team_id}", response_model=team_schemas.TeamDetail)
def get_team_endpoint(
    team_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return team_service.get_team_detail(db=db, team_id=team_id)


@router.post("", response_model=common_schemas.CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_team_endpoint(
    team_in: team_schemas.TeamCreate,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    team = team_service.create_team(db=db, team_in=team_in, captain_id=current_user.id)
    return {"id": team.id, "message": "Team created successfully"}


@router.put("/{team_id}", response_model=common_schemas.MessageResponse)
def update_team_endpoint(
    team_id: int,
    team_in: team_schemas.TeamUpdate,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    team_service.update_team(db=db, team_id=team_id, team_update=team_in, current_user_id=current_user.id)
    return {"message": "Team updated successfully"}


@router.delete("/{team_id}", response_model=common_schemas.MessageResponse)
def delete_team_endpoint(
    team_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    team_service.delete_team(db=db, team_id=team_id, current_user_id=current_user.id)
    return {"message": "Team deleted successfully"}
