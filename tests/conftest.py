import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

import domains.models  # noqa: F401
from core.database import Base, get_db
from domains.recipe.models import Recipe
from domains.user.models import User
from main import app

# in-memory SQLite, rebuilt for every test
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_USER_ID = "user-123"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    # StaticPool keeps the single in-memory connection alive across sessions
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine):
    session_factory = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def test_user(db_session):
    user = User(
        external_id=TEST_USER_ID,
        first_name="Ana",
        last_name="Silva",
        nickname="ana",
        email="ana@example.com",
        image_ref="profile1",
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture(scope="function")
async def make_recipe(db_session):
    """Inserts a recipe straight through the session; returns its id."""

    async def _make(name: str, type: str = "Italiana", calories: int = 0, owner: str = TEST_USER_ID):
        recipe = Recipe(
            name=name,
            description=f"{name} description",
            method=f"{name} method",
            owner_user_id=owner,
            type=type,
            calories=calories,
            image_ref=type,
        )
        db_session.add(recipe)
        await db_session.commit()
        return recipe.id

    return _make


@pytest_asyncio.fixture(scope="function")
async def client(db_session):
    # every request shares the test session instead of opening one from app.state.database
    async def _get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_test_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def authorized_client(client):
    client.headers["Authorization"] = f"Bearer {TEST_USER_ID}"
    yield client
