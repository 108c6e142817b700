"""풋볼 팀 SQLAlchemy ORM 모델 정의.

Football team SQLAlchemy ORM model definition.

Tables:
    - football_teams: 풋볼 팀 전적 (Football team season record)
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class FootballTeam(Base):
    """풋볼 팀 모델 — 팀 하나당 한 행.

    Football team model — one row per team.
    The id is generated by the database; an instance whose id is still
    None (or 0) has not been persisted yet.

    Attributes:
        id: 자동 증가 기본키 (Auto-increment primary key)
        team_name: 팀 이름 (Team name, looked up by name)
        wins: 승리 수 (Number of wins)
        losses: 패배 수 (Number of losses)
        current_super_bowl_champion: 현 슈퍼볼 챔피언 여부 (Reigning champion flag)
    """

    __tablename__ = "football_teams"

    # 팀 고유 식별자 — Team identifier (generated on insert, immutable)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 팀 이름 — Team name
    team_name: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    # 승리 수 — Wins this season
    wins: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 패배 수 — Losses this season
    losses: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 현 챔피언 여부 — Whether the team holds the current Super Bowl title
    current_super_bowl_champion: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<FootballTeam id={self.id} team_name={self.team_name!r}>"
