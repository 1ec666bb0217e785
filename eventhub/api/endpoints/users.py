from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from eventhub.services import auth_service, user_service
from eventhub.schemas import auth_schemas, common_schemas, user_schemas
from eventhub.api.dependencies import get_db

router = APIRouter()


@router.get("/me", response_model=user_schemas.UserRead)
def read_users_me(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return user_service.get_user_or_404(db=db, user_id=current_user.id)


@router.get("/count", response_model=common_schemas.CountResponse)
def count_users(db: Session = Depends(get_db)):
    return {"count": user_service.count_participants(db=db)}


@router.get("", response_model=List[user_schemas.ParticipantOverview])
def list_participants(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.require_admin),
):
    return user_service.get_participants_overview(db=db)


@router.get("/{user_id}", response_model=user_schemas.UserRead)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    if current_user.id != user_id and not current_user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return user_service.get_user_or_404(db=db, user_id=user_id)


@router.delete("/{user_id}", response_model=user_schemas.UserDeleteResponse)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.require_admin),
):
    stats = user_service.delete_user(db=db, user_id=user_id)
    return {"message": "User deleted successfully", "details": stats}
