from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from eventhub.services import session_service, auth_service
from eventhub.schemas import auth_schemas, common_schemas, session_schemas
from eventhub.api.dependencies import get_db

router = APIRouter()


@router.get("/event/{event_id}", response_model=List[session_schemas.SessionRead])
def get_event_sessions_endpoint(event_id: int, db: Session = Depends(get_db)):
    return session_service.get_event_sessions(db=db, event_id=event_id)


@router.get("/count", response_model=common_schemas.CountResponse)
def count_sessions_endpoint(db: Session = Depends(get_db)):
    return {"count": session_service.count_sessions(db=db)}


@router.post("", response_model=session_schemas.SessionRead, status_code=status.HTTP_201_CREATED)
def create_session_endpoint(
    session_in: session_schemas.SessionCreate,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.require_admin),
):
    return session_service.create_session(db=db, session_in=session_in)


@router.delete("/{session_id}", response_model=common_schemas.MessageResponse)
def delete_session_endpoint(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.require_admin),
):
    session_service.delete_session(db=db, session_id=session_id)
    return {"message": "Session deleted successfully"}
