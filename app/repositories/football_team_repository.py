"""풋볼 팀 레포지토리 — 팀 CRUD 및 이름 조회.

Football Team Repository — CRUD and lookup-by-name for football teams.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.football_team import FootballTeam
from app.repositories.base import CrudRepository


class FootballTeamRepository(CrudRepository[FootballTeam, int]):
    """football_teams 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the football_teams table.
    """

    def __init__(self) -> None:
        """FootballTeamRepository를 초기화합니다.

        Initialize the FootballTeamRepository with the FootballTeam model.
        """
        super().__init__(FootballTeam)

    async def find_by_team_name(
        self,
        db: AsyncSession,
        team_name: str,
    ) -> FootballTeam | None:
        """팀 이름으로 팀을 조회합니다.

        Retrieve the first team whose name equals ``team_name``.
        Callers expect exactly one match.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            team_name: 팀 이름 (Team name)

        Returns:
            FootballTeam | None: 조회된 팀 또는 None (Matching team or None)
        """
        return await self.find_first_by(db, team_name=team_name)


# 싱글턴 인스턴스 — Singleton instance
football_team_repository: FootballTeamRepository = FootballTeamRepository()
