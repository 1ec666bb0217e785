from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from eventhub.services import admin_service, auth_service
from eventhub.schemas import auth_schemas, common_schemas, team_member_schemas
from eventhub.api.dependencies import get_db

router = APIRouter()


@router.get("/team-members-count", response_model=common_schemas.CountResponse)
def count_team_members_endpoint(db: Session = Depends(get_db)):
    return {"count": admin_service.count_team_members(db=db)}


@router.get("/team-members", response_model=List[team_member_schemas.TeamMemberOverview])
def get_team_members_overview_endpoint(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.require_admin),
):
    return admin_service.get_team_members_overview(db=db)
