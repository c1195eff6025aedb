"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from applybureau.database import get_db
from applybureau.main import create_app
from applybureau.models import Base, Client, ClientOnboarding, ClientRole, ExecutionStatus


# Use SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client_user(db_session) -> Client:
    """A concierge client account."""
    user = Client(email="jane.doe@example.com", full_name="Jane Doe", role=ClientRole.CLIENT)
    db_session.add(user)
    await db_session.flush()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def unlocked_client(db_session) -> Client:
    """A client whose onboarding staff have approved."""
    user = Client(
        email="sam.lee@example.com",
        full_name="Sam Lee",
        role=ClientRole.CLIENT,
        profile_unlocked=True,
        onboarding_submitted=True,
    )
    user.onboarding = ClientOnboarding(
        target_job_titles=["Data Analyst"],
        career_goals_short_term="Move into analytics at a healthcare company.",
        execution_status=ExecutionStatus.ACTIVE.value,
    )
    db_session.add(user)
    await db_session.flush()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def admin_user(db_session) -> Client:
    """A staff account."""
    user = Client(email="admin@applybureau.com", full_name="Ada Admin", role=ClientRole.ADMIN)
    db_session.add(user)
    await db_session.flush()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def api_client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to an app that uses the test session."""
    app = create_app()

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def now() -> datetime:
    """A fixed Wednesday afternoon."""
    return datetime(2024, 3, 13, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def onboarding_payload():
    """A complete, valid onboarding questionnaire."""
    return {
        "target_job_titles": ["Product Manager", "Senior Product Manager"],
        "target_industries": ["Fintech"],
        "target_locations": ["Toronto", "Remote"],
        "current_salary_range": "$90,000 - $110,000",
        "target_salary_range": "$120,000 - $140,000",
        "years_of_experience": 7,
        "key_technical_skills": ["SQL", "Roadmapping"],
        "career_goals_short_term": "Land a senior PM role at a growth-stage fintech.",
        "biggest_career_challenges": ["Getting past recruiter screens"],
        "support_areas_needed": ["Resume tailoring", "Interview preparation"],
    }


@pytest.fixture
def application_payload():
    """Application data as staff would submit it (client_id added per test)."""
    return {
        "job_title": "Senior Product Manager",
        "company": "Acme Corp",
        "job_url": "https://acme.example.com/careers/123",
        "salary_range": "$120,000 - $140,000",
        "location": "Toronto, ON",
        "job_type": "full-time",
    }
