"""
Pytest configuration and shared fixtures.

Every test gets its own in-memory SQLite database, shared across
connections through StaticPool, with the app's ``get_db`` dependency
pointed at it.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from chefbook import schemas
from chefbook.app import app
from chefbook.db import Base, get_db, init_db


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # no `with`: skip the lifespan so the file-backed default DB is untouched
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def chef_payload():
    return {
        "username": "julia",
        "email": "julia@example.com",
        "password": "s3cret",
        "isAdmin": False,
    }


@pytest.fixture
def chef_in(chef_payload):
    return schemas.ChefCreate.model_validate(chef_payload)
