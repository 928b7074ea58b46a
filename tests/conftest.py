import os
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Keep the app's own engine off disk before it is imported.
os.environ.setdefault("DATABASE_URL", "sqlite://")

from conduit import security  # noqa: E402
from conduit.database import Base, get_db  # noqa: E402
from conduit.main import app  # noqa: E402
from conduit.models import User  # noqa: E402

# In-memory SQLite database shared across connections via StaticPool.
TEST_DATABASE_URL = "sqlite://"


engine_test = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine_test,
)


@pytest.fixture()
def db_session():
    """Provide a fresh test database session for each test.

    The schema is dropped and recreated for every test function.
    """
    Base.metadata.drop_all(bind=engine_test)
    Base.metadata.create_all(bind=engine_test)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(db_session):
    """TestClient whose requests all run against the in-memory database."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture()
def user_factory(db_session):
    """Insert users directly, bypassing the HTTP API.

    The password is hashed with the same context the service uses, so the
    created account can log in through `/api/users/login`.
    """

    def _create_user(
        username: str,
        email: str,
        password: str = "secret",
        token: Optional[str] = None,
        bio: Optional[str] = None,
        image: Optional[str] = None,
    ) -> User:
        user = User(
            username=username,
            email=email,
            password=security.pwd_context.hash(password),
            token=token or f"token-{username}",
            bio=bio,
            image=image,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _create_user


@pytest.fixture()
def signup_payload():
    return {
        "user": {
            "username": "admin",
            "email": "admin@gmail.com",
            "password": "secret",
        }
    }
