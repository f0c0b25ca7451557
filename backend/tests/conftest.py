"""
Pytest fixtures shared by the unit and API tests.

Provides an in-memory SQLite database, an HTTP client bound to the app with
the database and auth dependencies overridden, and seeded locations.
"""
import os

# Settings are read on first import of the app; point them at SQLite first.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("ALLOWED_ORIGINS", "http://testserver")

from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from backoffice.core.database import Base, get_db
from backoffice.core.security import AuthenticatedUser, get_current_user
from backoffice.main import app
from backoffice.models import City, Notice, Property, Tenant, Unit, Vendor

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(engine):
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def current_user():
    """Admin user; tests needing narrower permissions override this fixture."""
    return AuthenticatedUser(uid="test-admin", email="admin@example.com", claims={"role": "admin"})


@pytest.fixture
async def client(db_session, current_user):
    """HTTP client for the app with database and auth dependencies overridden."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_user] = lambda: current_user

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
async def locations(db_session):
    """
    Two cities:
    - Springfield: Maple Court (A1, A2), Oak Plaza (B1)
    - Shelbyville: Elm Tower (C1)
    """
    springfield = City(name="Springfield")
    shelbyville = City(name="Shelbyville")
    db_session.add_all([springfield, shelbyville])
    await db_session.flush()

    maple = Property(name="Maple Court", city_id=springfield.id)
    oak = Property(name="Oak Plaza", city_id=springfield.id)
    elm = Property(name="Elm Tower", city_id=shelbyville.id)
    db_session.add_all([maple, oak, elm])
    await db_session.flush()

    a1 = Unit(unit_name="A1", property_id=maple.id)
    a2 = Unit(unit_name="A2", property_id=maple.id)
    b1 = Unit(unit_name="B1", property_id=oak.id)
    c1 = Unit(unit_name="C1", property_id=elm.id)
    db_session.add_all([a1, a2, b1, c1])
    await db_session.commit()

    return SimpleNamespace(
        springfield=springfield,
        shelbyville=shelbyville,
        maple=maple,
        oak=oak,
        elm=elm,
        a1=a1,
        a2=a2,
        b1=b1,
        c1=c1,
    )


@pytest.fixture
async def tenants(db_session, locations):
    jane = Tenant(first_name="Jane", last_name="Doe", unit_id=locations.a1.id)
    john = Tenant(first_name="John", last_name="Smith", unit_id=locations.c1.id)
    db_session.add_all([jane, john])
    await db_session.commit()
    return SimpleNamespace(jane=jane, john=john)


@pytest.fixture
async def notice_types(db_session):
    three_day = Notice(notice_name="3 Day Notice", days=3)
    thirty_day = Notice(notice_name="30 Day Notice", days=30)
    db_session.add_all([three_day, thirty_day])
    await db_session.commit()
    return SimpleNamespace(three_day=three_day, thirty_day=thirty_day)


@pytest.fixture
async def vendors(db_session, locations):
    plumber = Vendor(vendor_name="Pipe Pros", service_type="Plumbing", city_id=locations.springfield.id)
    painter = Vendor(vendor_name="Fresh Coat", service_type="Painting", city_id=locations.shelbyville.id)
    db_session.add_all([plumber, painter])
    await db_session.commit()
    return SimpleNamespace(plumber=plumber, painter=painter)
