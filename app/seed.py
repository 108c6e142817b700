"""초기 데이터 시드 스크립트 — 예시 팀 및 교사 생성.

Seed script — Creates example football teams and teachers.
Run this script once to bootstrap a database with sample data.

Usage:
    python -m app.seed

Creates:
    - 3개 풋볼 팀 (3 football teams)
    - 2명 교사 (2 teachers)
"""

import asyncio
import logging

from app.config import settings
from app.database import async_session, engine, Base
from app.logging_config import configure_logging
from app.models import FootballTeam, Teacher
from app.repositories.football_team_repository import football_team_repository
from app.repositories.teacher_repository import teacher_repository

logger = logging.getLogger(__name__)

SEED_TEAMS: list[dict] = [
    {"team_name": "Dallas-Cowboys", "wins": 7, "losses": 3, "current_super_bowl_champion": False},
    {"team_name": "Kansas-City-Chiefs", "wins": 11, "losses": 1, "current_super_bowl_champion": True},
    {"team_name": "Pittsburgh-Steelers", "wins": 4, "losses": 7, "current_super_bowl_champion": False},
]

SEED_TEACHERS: list[dict] = [
    {"name": "Ada Lovelace", "subject": "Mathematics", "years_of_experience": 12, "tenured": True},
    {"name": "Alan Turing", "subject": "Computer Science", "years_of_experience": 3, "tenured": False},
]


async def seed() -> None:
    """데이터베이스를 예시 데이터로 시드합니다.

    Seed the database with example data.
    Creates tables if they don't exist, then inserts the sample rows.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        # 팀이 하나라도 있으면 건너뜀 (Skip when any team already exists)
        if await football_team_repository.count(db) > 0:
            logger.info("Already seeded. Skipping.")
            return

        await football_team_repository.save_all(db, [FootballTeam(**t) for t in SEED_TEAMS])
        await teacher_repository.save_all(db, [Teacher(**t) for t in SEED_TEACHERS])
        await db.commit()

    logger.info("Seeded %d football teams and %d teachers", len(SEED_TEAMS), len(SEED_TEACHERS))


if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    asyncio.run(seed())
