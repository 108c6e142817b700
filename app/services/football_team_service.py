"""풋볼 팀 서비스 — DTO 매핑 및 레포지토리 호출 조율.

Football Team Service — Orchestrates DTO mapping and repository calls.
Each operation maps the DTO to an entity, calls one persistence primitive,
and maps back to a DTO or returns a confirmation message.

Not-found policy:
    - 조회(read): NotFoundError 발생 → 404 (Reads raise NotFoundError)
    - 수정(update): 예외 없이 안내 메시지 반환 (Updates answer with a message)
    - 삭제(delete): 존재 여부와 관계없이 확인 메시지 (Deletes always confirm)
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.football_team import FootballTeam
from app.repositories.football_team_repository import (
    FootballTeamRepository,
    football_team_repository,
)
from app.schemas.football_team import FootballTeamDto
from app.utils.exceptions import NotFoundError
from app.utils.mapper import ObjectMapper, object_mapper

logger = logging.getLogger(__name__)


class FootballTeamService:
    """풋볼 팀 관련 비즈니스 로직을 처리하는 서비스.

    Service handling football team create/read/update/delete.
    The repository and mapper are passed in explicitly; the module-level
    singletons are used by default.
    """

    def __init__(
        self,
        repository: FootballTeamRepository = football_team_repository,
        mapper: ObjectMapper = object_mapper,
    ) -> None:
        self.repository: FootballTeamRepository = repository
        self.mapper: ObjectMapper = mapper

    def _to_dto(self, team: FootballTeam) -> FootballTeamDto:
        """팀 모델을 DTO로 변환합니다.

        Convert a FootballTeam entity to a FootballTeamDto.
        """
        return self.mapper.map(team, FootballTeamDto)

    async def create(self, db: AsyncSession, data: FootballTeamDto) -> str:
        """새 팀을 저장합니다.

        Persist a new team built from the DTO.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 팀 생성 데이터 (Team data)

        Returns:
            str: 팀 이름을 포함한 확인 메시지 (Confirmation naming the team)
        """
        team: FootballTeam = self.mapper.map(data, FootballTeam)
        saved: FootballTeam = await self.repository.save(db, team)
        logger.info("Saved football team id=%s name=%s", saved.id, saved.team_name)
        return f"Football team '{saved.team_name}' saved successfully"

    async def read(self, db: AsyncSession, team_name: str) -> FootballTeamDto:
        """팀 이름으로 팀을 조회합니다.

        Retrieve a team by its name.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            team_name: 팀 이름 (Team name)

        Returns:
            FootballTeamDto: 팀 DTO (Team DTO)

        Raises:
            NotFoundError: 팀을 찾을 수 없을 때 (No team with that name)
        """
        team: FootballTeam | None = await self.repository.find_by_team_name(db, team_name)
        if team is None:
            raise NotFoundError(f"No football team named '{team_name}'")
        return self._to_dto(team)

    async def read_by_id(self, db: AsyncSession, football_id: int) -> FootballTeamDto:
        """ID로 팀을 조회합니다.

        Retrieve a team by its id.

        Raises:
            NotFoundError: 팀을 찾을 수 없을 때 (No team with that id)
        """
        team: FootballTeam | None = await self.repository.find_by_id(db, football_id)
        if team is None:
            raise NotFoundError(f"No football team with id {football_id}")
        return self._to_dto(team)

    async def list_teams(self, db: AsyncSession) -> list[FootballTeamDto]:
        """모든 팀을 조회합니다.

        List every stored team.
        """
        teams: list[FootballTeam] = await self.repository.find_all(db)
        return [self._to_dto(t) for t in teams]

    async def count(self, db: AsyncSession) -> int:
        return await self.repository.count(db)

    async def update(
        self,
        db: AsyncSession,
        football_id: int,
        data: FootballTeamDto,
    ) -> str:
        """팀 정보를 수정합니다.

        Overlay the fields sent in ``data`` onto the stored team.
        The id and any unsent fields are preserved. A missing id is not an
        error: nothing is written and a not-updated message is returned.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            football_id: 팀 ID (Team id from the URL path)
            data: 수정 데이터, 부분 필드 허용 (Update data, partial allowed)

        Returns:
            str: 성공 또는 미수정 안내 메시지 (Success or not-updated message)
        """
        team: FootballTeam | None = await self.repository.find_by_id(db, football_id)
        if team is None:
            logger.warning("Football team id=%s not found, nothing updated", football_id)
            return f"Football team with id {football_id} was not updated, the id may not exist"

        self.mapper.map_onto(data, team)
        await self.repository.save(db, team)
        logger.info("Updated football team id=%s", football_id)
        return f"Football team with id {football_id} updated successfully"

    async def delete(self, db: AsyncSession, football_id: int) -> str:
        """팀을 삭제합니다.

        Delete a team by id. The confirmation is the same whether or not a
        row existed.
        """
        deleted: bool = await self.repository.delete_by_id(db, football_id)
        logger.info("Delete football team id=%s removed=%s", football_id, deleted)
        return f"Football team with id {football_id} deleted"


# 싱글턴 인스턴스 — Singleton instance
football_team_service: FootballTeamService = FootballTeamService()
