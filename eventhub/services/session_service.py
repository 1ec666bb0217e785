import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from eventhub.models import event_session as session_model
from eventhub.schemas import session_schemas
from eventhub.services import event_service

logger = logging.getLogger(__name__)

EventSession = session_model.EventSession


def get_event_sessions(db: Session, event_id: int) -> List[session_model.EventSession]:
    return db.query(EventSession)\
        .filter(EventSession.event_id == event_id)\
        .order_by(EventSession.start_time.asc())\
        .all()


def count_sessions(db: Session) -> int:
    return db.query(EventSession).count()


def create_session(db: Session, session_in: session_schemas.SessionCreate) -> session_model.EventSession:
    event_service.get_event_or_404(db, session_in.event_id)
    db_session = EventSession(**session_in.model_dump())
    db.add(db_session)
    db.commit()
    db.refresh(db_session)
    logger.info("Added session %s to event %s", db_session.id, db_session.event_id)
    return db_session


def delete_session(db: Session, session_id: int) -> bool:
    db_session = db.query(EventSession).filter(EventSession.id == session_id).first()
    if not db_session:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    db.delete(db_session)
    db.commit()
    return True
