import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from eventhub.core import security
from eventhub.models import user as user_model
from eventhub.schemas import auth_schemas

logger = logging.getLogger(__name__)


def register_user(db: Session, user_in: auth_schemas.RegisterRequest) -> user_model.User:
    email = user_in.email.lower()
    existing = db.query(user_model.User).filter(user_model.User.email == email).first()
    if existing:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already exists")

    # Self-registration always yields a participant; admins come from the seed command
    db_user = user_model.User(
        name=user_in.name,
        email=email,
        password_hash=security.get_password_hash(user_in.password),
        phone=user_in.phone,
        role=user_model.ROLE_PARTICIPANT,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info("Registered user %s (%s)", db_user.id, db_user.email)
    return db_user


def authenticate_user(db: Session, email: str, password: str) -> Optional[user_model.User]:
    user = db.query(user_model.User).filter(user_model.User.email == email.lower()).first()
    if not user or not security.verify_password(password, user.password_hash):
        return None
    return user


def get_current_user(token: Optional[str] = Depends(security.oauth2_scheme)) -> auth_schemas.TokenData:
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    return security.verify_token(token, credentials_exception)


def require_roles(*roles: str):
    """Dependency factory: authenticated user whose role is one of ``roles``."""

    def role_checker(current_user: auth_schemas.TokenData = Depends(get_current_user)) -> auth_schemas.TokenData:
        if roles and current_user.role not in roles:
            logger.warning("User %s with role %s denied; requires %s", current_user.id, current_user.role, roles)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
        return current_user

    return role_checker


require_admin = require_roles(user_model.ROLE_ADMIN)
