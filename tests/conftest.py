"""Shared test fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment before importing app modules
os.environ["DATABASE_URL"] = "sqlite://"  # In-memory DB for tests
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret"

from stayease.db import Base, get_db
from stayease.main import app
from stayease.models import User, Property
from stayease.security import hash_password

# Import all models so Base.metadata knows about them
import stayease.models  # noqa: F401


@pytest.fixture
def engine():
    """A fresh in-memory database for each test."""
    test_engine = create_engine(
        "sqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def host(db_session: Session) -> User:
    user = User(
        login="hostess",
        hashed_password=hash_password("secret123"),
        email="host@example.com",
        first_name="Hanna",
        last_name="Host",
        phone_number="+15550001111",
        is_host=True,
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def sample_property(db_session: Session, host: User) -> Property:
    prop = Property(
        host_id=host.id,
        title="Seaside Loft",
        description="Bright loft two minutes from the beach",
        city="Lisbon",
        price=120,
        rooms=2,
        bathrooms=1,
        area=65,
        has_wifi=True,
        has_parking=False,
        has_pool=False,
    )
    db_session.add(prop)
    db_session.commit()
    return prop


# ==== API ====

@pytest.fixture
def make_client(session_factory):
    """Build TestClients sharing one database; each keeps its own session cookie."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield lambda: TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture
def signup(make_client):
    """Register a user through the API and return a client logged in as them."""
    counter = {"n": 0}

    def _signup(login=None, is_host=False, password="secret123"):
        counter["n"] += 1
        login = login or f"user{counter['n']}"
        c = make_client()
        res = c.post("/api/register", json={
            "firstName": "Test",
            "lastName": "User",
            "email": f"{login}@example.com",
            "phoneNumber": "+15551234567",
            "login": login,
            "password": password,
            "isHost": is_host,
        })
        assert res.status_code == 201, res.text
        c.user = res.json()
        return c

    return _signup


@pytest.fixture
def host_client(signup) -> TestClient:
    return signup(login="hosty", is_host=True)


@pytest.fixture
def guest_client(signup) -> TestClient:
    return signup(login="guesty")


LISTING = {
    "title": "Garden Cottage",
    "description": "Quiet cottage with a private garden",
    "city": "Porto",
    "price": 100,
    "rooms": 2,
    "bathrooms": 1,
    "area": 55,
    "hasWifi": True,
}


@pytest.fixture
def listing(host_client) -> dict:
    res = host_client.post("/api/properties", json=LISTING)
    assert res.status_code == 201, res.text
    return res.json()
