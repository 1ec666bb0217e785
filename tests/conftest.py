from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import eventhub.models  # noqa: F401  registers every table on Base
from eventhub.api.dependencies import get_db
from eventhub.core import security
from eventhub.core.database import Base
from eventhub.main import app
from eventhub.models import event as event_model
from eventhub.models import user as user_model

TEST_PASSWORD = "secret123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture(scope="session")
def password_hash():
    # bcrypt is slow on purpose; hash once for the whole run
    return security.get_password_hash(TEST_PASSWORD)


@pytest.fixture
def make_user(db, password_hash):
    counter = {"n": 0}

    def _make_user(name=None, email=None, role=user_model.ROLE_PARTICIPANT, phone=None):
        counter["n"] += 1
        n = counter["n"]
        user = user_model.User(
            name=name or f"User {n}",
            email=email or f"user{n}@example.com",
            password_hash=password_hash,
            role=role,
            phone=phone,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_event(db):
    def _make_event(title="Hack", **kwargs):
        kwargs.setdefault("start_datetime", datetime(2025, 1, 1, 10, 0))
        event = event_model.Event(title=title, **kwargs)
        db.add(event)
        db.commit()
        db.refresh(event)
        return event

    return _make_event


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        return {"Authorization": f"Bearer {security.create_user_token(user)}"}

    return _auth_headers


@pytest.fixture
def admin(make_user):
    return make_user(name="Admin", email="admin@example.com", role=user_model.ROLE_ADMIN)
