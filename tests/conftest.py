"""Shared fixtures: in-memory database, sessions, sample listings"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from estate_listings.database import Base, get_db
from estate_listings.models import ADMIN_ROLE
from estate_listings.services.auth import AuthService, SessionClaims

import estate_listings.models  # noqa: F401  (registers tables)

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "Sup3r$ecretPass"


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database per test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def admin_session():
    return SessionClaims(id=1, email=ADMIN_EMAIL, name="Admin", role=ADMIN_ROLE)


@pytest.fixture
def visitor_session():
    """Signed in, but not an administrator"""
    return SessionClaims(id=2, email="visitor@example.com", name="Visitor", role="user")


@pytest_asyncio.fixture
async def admin_user(db):
    return await AuthService(db).create_admin(ADMIN_EMAIL, ADMIN_PASSWORD, "Admin")


@pytest.fixture
def make_draft():
    """Factory for valid seller submissions"""
    def _make(**overrides):
        draft = {
            "title": "Riverside plot",
            "description": "Level plot with river frontage and road access.",
            "location": "Kampala, Uganda",
            "land_size": 2.5,
            "land_size_unit": "acres",
            "asking_price": 25000000,
            "images": ["https://img.example.com/plot-1.jpg"],
            "youtube_video": None,
            "seller": {
                "name": "Jane Seller",
                "phone": "+256700000000",
                "email": "jane@example.com",
                "details": "Title deed available",
            },
        }
        draft.update(overrides)
        return draft
    return _make


@pytest_asyncio.fixture
async def client(session_maker):
    """HTTP client bound to the app with the in-memory database"""
    from estate_listings.main import app

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
