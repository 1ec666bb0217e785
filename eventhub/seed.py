"""Create or promote the admin account configured in the settings.

Usage: ``python -m eventhub.seed``
"""
import logging

from eventhub.core import security
from eventhub.core.config import settings
from eventhub.core.database import SessionLocal, init_db
from eventhub.models import user as user_model

logger = logging.getLogger(__name__)


def create_admin(db, email: str, password: str, name: str) -> user_model.User:
    email = email.lower()
    user = db.query(user_model.User).filter(user_model.User.email == email).first()
    if user:
        user.password_hash = security.get_password_hash(password)
        user.role = user_model.ROLE_ADMIN
        logger.info("Admin user %s updated", email)
    else:
        user = user_model.User(
            name=name,
            email=email,
            password_hash=security.get_password_hash(password),
            role=user_model.ROLE_ADMIN,
        )
        db.add(user)
        logger.info("Admin user %s created", email)
    db.commit()
    db.refresh(user)
    return user


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    init_db()
    db = SessionLocal()
    try:
        create_admin(db, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD, settings.ADMIN_NAME)
    finally:
        db.close()


if __name__ == "__main__":
    main()
