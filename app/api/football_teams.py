"""풋볼 팀 라우터 — 팀 CRUD 엔드포인트.

Football Team Router — CRUD endpoints under /football-team.
Mutations answer with a plain-text confirmation; reads answer with JSON.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.football_team import FootballTeamDto
from app.services.football_team_service import football_team_service

router: APIRouter = APIRouter()


@router.post("", response_class=PlainTextResponse, status_code=201)
async def create_football_team(
    data: FootballTeamDto,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> str:
    """새 팀을 생성합니다.

    Create a new football team.
    """
    result: str = await football_team_service.create(db, data)
    await db.commit()
    return result


@router.get("", response_model=list[FootballTeamDto])
async def list_football_teams(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[FootballTeamDto]:
    """팀 목록을 조회합니다.

    List every football team.
    """
    return await football_team_service.list_teams(db)


@router.get("/id/{football_id}", response_model=FootballTeamDto)
async def get_football_team_by_id(
    football_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> FootballTeamDto:
    """ID로 팀을 조회합니다.

    Retrieve a football team by id.
    """
    return await football_team_service.read_by_id(db, football_id)


@router.get("/{team_name}", response_model=FootballTeamDto)
async def get_football_team(
    team_name: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> FootballTeamDto:
    """팀 이름으로 팀을 조회합니다.

    Retrieve a football team by name.
    """
    return await football_team_service.read(db, team_name)


@router.put("/{football_id}", response_class=PlainTextResponse)
async def update_football_team(
    football_id: int,
    data: FootballTeamDto,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> str:
    """팀 정보를 수정합니다 (부분 필드 허용).

    Update a football team; only the fields sent are changed.
    """
    result: str = await football_team_service.update(db, football_id, data)
    await db.commit()
    return result


@router.delete("/{football_id}", response_class=PlainTextResponse)
async def delete_football_team(
    football_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> str:
    """팀을 삭제합니다.

    Delete a football team by id.
    """
    result: str = await football_team_service.delete(db, football_id)
    await db.commit()
    return result
