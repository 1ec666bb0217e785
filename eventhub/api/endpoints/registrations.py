from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from eventhub.services import registration_service, auth_service
from eventhub.schemas import auth_schemas, common_schemas, registration_schemas
from eventhub.api.dependencies import get_db

router = APIRouter()


@router.post("", response_model=common_schemas.CreatedResponse, status_code=status.HTTP_201_CREATED)
def register_for_event_endpoint(
    registration_in: registration_schemas.RegistrationCreate,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    registration = registration_service.register_for_event(
        db=db, registration_in=registration_in, user_id=current_user.id
    )
    return {"id": registration.id, "message": "Registered successfully"}


@router.get("/my", response_model=List[registration_schemas.RegistrationRead])
def get_my_registrations_endpoint(
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    return registration_service.get_user_registrations(db=db, user_id=current_user.id)


@router.delete("/{registration_id}", response_model=common_schemas.MessageResponse)
def cancel_registration_endpoint(
    registration_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.get_current_user),
):
    registration_service.cancel_registration(db=db, registration_id=registration_id, current_user=current_user)
    return {"message": "Registration cancelled"}
