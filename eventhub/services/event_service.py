import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy import case
from sqlalchemy.orm import Session

from eventhub.models import event as event_model
from eventhub.schemas import event_schemas

logger = logging.getLogger(__name__)

Event = event_model.Event


def _ordering(sort_by: Optional[str]):
    def first_when(value):
        return case((Event.registration_status == value, 0), else_=1)

    if sort_by == "latest":
        return [Event.start_datetime.desc()]
    if sort_by == "oldest":
        return [Event.start_datetime.asc()]
    if sort_by == "alphabetical":
        return [Event.title.asc()]
    if sort_by == "open-first":
        return [first_when("open"), Event.start_datetime.desc()]
    if sort_by == "closed-first":
        return [first_when("closed"), Event.start_datetime.desc()]
    # Unknown or missing sort key: most recently created first
    return [Event.created_at.desc(), Event.id.desc()]


def list_events(db: Session, sort_by: Optional[str] = None) -> List[event_model.Event]:
    return db.query(Event).order_by(*_ordering(sort_by)).all()


def count_events(db: Session) -> int:
    return db.query(Event).count()


def get_event(db: Session, event_id: int) -> Optional[event_model.Event]:
    return db.query(Event).filter(Event.id == event_id).first()


def get_event_or_404(db: Session, event_id: int) -> event_model.Event:
    db_event = get_event(db, event_id)
    if not db_event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return db_event


def create_event(db: Session, event_in: event_schemas.EventCreate) -> event_model.Event:
    db_event = Event(**event_in.model_dump())
    db.add(db_event)
    db.commit()
    db.refresh(db_event)
    logger.info("Created event %s (%s)", db_event.id, db_event.title)
    return db_event


def update_event(db: Session, event_id: int, event_in: event_schemas.EventUpdate) -> event_model.Event:
    db_event = get_event_or_404(db, event_id)
    for key, value in event_in.model_dump().items():
        setattr(db_event, key, value)
    db.commit()
    db.refresh(db_event)
    logger.info("Updated event %s", db_event.id)
    return db_event


def delete_event(db: Session, event_id: int) -> bool:
    db_event = get_event_or_404(db, event_id)
    # Teams (with their members), registrations and sessions go with the event
    # through the relationship cascades, all inside this commit.
    try:
        db.delete(db_event)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Deleted event %s", event_id)
    return True
