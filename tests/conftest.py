"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite database, session, and httpx client fixtures.
Each test gets a fresh schema on its own engine; StaticPool keeps the single
in-memory connection alive for the whole test.
"""

import os

# 앱 임포트 전에 DB URL 지정 — point the app engine at SQLite before importing it
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models import FootballTeam, Teacher

TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def cowboys(db: AsyncSession) -> FootballTeam:
    """Dallas-Cowboys 팀을 생성합니다."""
    team = FootballTeam(team_name="Dallas-Cowboys", wins=7, losses=3, current_super_bowl_champion=False)
    db.add(team)
    await db.flush()
    await db.refresh(team)
    return team


@pytest_asyncio.fixture
async def chiefs(db: AsyncSession) -> FootballTeam:
    """Kansas-City-Chiefs 팀을 생성합니다."""
    team = FootballTeam(team_name="Kansas-City-Chiefs", wins=11, losses=1, current_super_bowl_champion=True)
    db.add(team)
    await db.flush()
    await db.refresh(team)
    return team


@pytest_asyncio.fixture
async def teacher(db: AsyncSession) -> Teacher:
    """테스트 교사를 생성합니다."""
    t = Teacher(name="Ada Lovelace", subject="Mathematics", years_of_experience=12, tenured=True)
    db.add(t)
    await db.flush()
    await db.refresh(t)
    return t
