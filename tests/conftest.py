
import os

# Point the application engine at a throwaway database before anything
# imports the settings module.
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Import Base + all models so metadata is complete
from opportunities.db.base import Base
from opportunities.db.session import get_db
from opportunities.core.security import create_access_token
from opportunities.main import app
from opportunities.models.listing import ListingType
from opportunities.models.user import User
from opportunities.services.listings import store_for


def _test_db_url() -> str:
    return os.getenv("DATABASE_URL_TEST", "sqlite://")


@pytest.fixture(scope="session")
def engine():
    url = _test_db_url()
    if url.startswith("sqlite"):
        engine = create_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    else:
        engine = create_engine(url, pool_pre_ping=True)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def db(engine):
    """A session on a freshly created schema."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    """
    HTTP client that uses the test DB session via dependency override.
    """
    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


def _make_user(db, email, role="user", **fields):
    user = User(email=email, role=role, is_active=True, **fields)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def user(db):
    return _make_user(db, "ada@example.com", nickname="ada", first_name="Ada", last_name="Lovelace")


@pytest.fixture
def other_user(db):
    return _make_user(db, "grace@example.com", nickname="grace", first_name="Grace", last_name="Hopper")


@pytest.fixture
def admin(db):
    return _make_user(db, "admin@example.com", role="admin", nickname="mod")


@pytest.fixture
def user_headers(user):
    return auth_headers(user)


@pytest.fixture
def other_headers(other_user):
    return auth_headers(other_user)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------

LISTING_DEFAULTS = {
    ListingType.tutoring: {"name": "Bright Minds Tutoring", "type": "business"},
    ListingType.camp: {"name": "Ocean Science Camp"},
    ListingType.internship: {"company_name": "Acme Labs", "title": "Research Intern"},
    ListingType.job: {"company_name": "Corner Market", "title": "Cashier"},
    ListingType.service: {"name": "College Counseling Co"},
    ListingType.event: {"title": "STEM Fair", "organizer": "City Library", "event_date": date(2026, 11, 14)},
}


@pytest.fixture
def make_listing(db):
    """Insert a listing row directly, approved and active unless told otherwise."""
    def _make(listing_type, approved=True, active=True, **fields):
        listing_type = ListingType(listing_type)
        values = dict(LISTING_DEFAULTS[listing_type])
        values.update(fields)
        listing = store_for(listing_type).model(
            is_approved=approved, is_active=active, view_count=0, **values
        )
        db.add(listing)
        db.commit()
        db.refresh(listing)
        return listing

    return _make


@pytest.fixture
def headers_for():
    return auth_headers
