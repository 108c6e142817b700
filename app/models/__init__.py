"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
Base.metadata.create_all.

Modules:
    football_team: 풋볼 팀 (FootballTeam)
    teacher: 교사 (Teacher)
"""

from app.models.football_team import FootballTeam
from app.models.teacher import Teacher

__all__ = [
    "FootballTeam",
    "Teacher",
]
