import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from eventhub.models import registration as registration_model
from eventhub.schemas import auth_schemas, registration_schemas
from eventhub.services import event_service

logger = logging.getLogger(__name__)

Registration = registration_model.Registration


def count_registered(db: Session, event_id: int) -> int:
    return db.query(Registration).filter(
        Registration.event_id == event_id,
        Registration.status == registration_model.STATUS_REGISTERED,
    ).count()


def find_individual_registration(db: Session, user_id: int, event_id: int):
    return db.query(Registration).filter(
        Registration.user_id == user_id,
        Registration.event_id == event_id,
        Registration.team_id.is_(None),
    ).first()


def register_for_event(
    db: Session, registration_in: registration_schemas.RegistrationCreate, user_id: int
) -> registration_model.Registration:
    db_event = event_service.get_event_or_404(db, registration_in.event_id)

    if not db_event.is_open:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Registration is closed for this event")

    if find_individual_registration(db, user_id, db_event.id):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Already registered")

    if db_event.has_capacity_limit and count_registered(db, db_event.id) >= db_event.capacity:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Event is full")

    db_registration = Registration(user_id=user_id, event_id=db_event.id)
    try:
        db.add(db_registration)
        db.commit()
    except IntegrityError:
        # The partial unique index caught a concurrent duplicate
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Already registered")
    db.refresh(db_registration)
    logger.info("User %s registered for event %s", user_id, db_event.id)
    return db_registration


def cancel_registration(db: Session, registration_id: int, current_user: auth_schemas.TokenData) -> bool:
    db_registration = db.query(Registration).filter(Registration.id == registration_id).first()
    if not db_registration:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Registration not found")

    if db_registration.user_id != current_user.id and not current_user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed")

    db.delete(db_registration)
    db.commit()
    logger.info("Registration %s cancelled by user %s", registration_id, current_user.id)
    return True


def get_user_registrations(db: Session, user_id: int) -> List[registration_model.Registration]:
    return db.query(Registration)\
        .filter(Registration.user_id == user_id)\
        .order_by(Registration.created_at.desc(), Registration.id.desc())\
        .all()
