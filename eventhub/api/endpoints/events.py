from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from eventhub.services import event_service, auth_service
from eventhub.schemas import auth_schemas, common_schemas, event_schemas
from eventhub.api.dependencies import get_db

router = APIRouter()


@router.get("", response_model=List[event_schemas.EventRead])
def list_events_endpoint(
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
    db: Session = Depends(get_db),
):
    return event_service.list_events(db=db, sort_by=sort_by)


@router.get("/count", response_model=common_schemas.CountResponse)
def count_events_endpoint(db: Session = Depends(get_db)):
    return {"count": event_service.count_events(db=db)}


@router.get("/{event_id}", response_model=event_schemas.EventRead)
def get_event_endpoint(event_id: int, db: Session = Depends(get_db)):
    return event_service.get_event_or_404(db=db, event_id=event_id)


@router.post("", response_model=common_schemas.CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_event_endpoint(
    event_in: event_schemas.EventCreate,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.require_admin),
):
    event = event_service.create_event(db=db, event_in=event_in)
    return {"id": event.id, "message": "Event created successfully"}


@router.put("/{event_id}", response_model=event_schemas.EventRead)
def update_event_endpoint(
    event_id: int,
    event_in: event_schemas.EventUpdate,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.require_admin),
):
    return event_service.update_event(db=db, event_id=event_id, event_in=event_in)


@router.delete("/{event_id}", response_model=common_schemas.MessageResponse)
def delete_event_endpoint(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: auth_schemas.TokenData = Depends(auth_service.require_admin),
):
    event_service.delete_event(db=db, event_id=event_id)
    return {"message": "Event deleted successfully"}
