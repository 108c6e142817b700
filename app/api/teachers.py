"""교사 라우터 — 교사 CRUD 엔드포인트.

Teacher Router — CRUD endpoints under /teacher.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.teacher import TeacherDto
from app.services.teacher_service import teacher_service

router: APIRouter = APIRouter()


@router.post("", response_class=PlainTextResponse, status_code=201)
async def create_teacher(
    data: TeacherDto,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> str:
    """새 교사를 생성합니다."""
    result: str = await teacher_service.create(db, data)
    await db.commit()
    return result


@router.get("", response_model=list[TeacherDto])
async def list_teachers(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[TeacherDto]:
    """교사 목록을 조회합니다."""
    return await teacher_service.list_teachers(db)


@router.get("/id/{teacher_id}", response_model=TeacherDto)
async def get_teacher_by_id(
    teacher_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeacherDto:
    """ID로 교사를 조회합니다."""
    return await teacher_service.read_by_id(db, teacher_id)


@router.get("/{name}", response_model=TeacherDto)
async def get_teacher(
    name: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeacherDto:
    """이름으로 교사를 조회합니다."""
    return await teacher_service.read(db, name)


@router.put("/{teacher_id}", response_class=PlainTextResponse)
async def update_teacher(
    teacher_id: int,
    data: TeacherDto,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> str:
    """교사 정보를 수정합니다."""
    result: str = await teacher_service.update(db, teacher_id, data)
    await db.commit()
    return result


@router.delete("/{teacher_id}", response_class=PlainTextResponse)
async def delete_teacher(
    teacher_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> str:
    """교사를 삭제합니다."""
    result: str = await teacher_service.delete(db, teacher_id)
    await db.commit()
    return result
