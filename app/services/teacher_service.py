"""교사 서비스 — 교사 CRUD 비즈니스 로직.

Teacher Service — Business logic for teacher CRUD, same policies as the
football team service.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.teacher import Teacher
from app.repositories.teacher_repository import TeacherRepository, teacher_repository
from app.schemas.teacher import TeacherDto
from app.utils.exceptions import NotFoundError
from app.utils.mapper import ObjectMapper, object_mapper

logger = logging.getLogger(__name__)


class TeacherService:
    """교사 관련 비즈니스 로직을 처리하는 서비스.

    Service handling teacher create/read/update/delete.
    """

    def __init__(
        self,
        repository: TeacherRepository = teacher_repository,
        mapper: ObjectMapper = object_mapper,
    ) -> None:
        self.repository: TeacherRepository = repository
        self.mapper: ObjectMapper = mapper

    async def create(self, db: AsyncSession, data: TeacherDto) -> str:
        """새 교사를 저장하고 확인 메시지를 반환합니다.

        Persist a new teacher and return a confirmation naming them.
        """
        saved: Teacher = await self.repository.save(db, self.mapper.map(data, Teacher))
        logger.info("Saved teacher id=%s name=%s", saved.id, saved.name)
        return f"Teacher '{saved.name}' saved successfully"

    async def read(self, db: AsyncSession, name: str) -> TeacherDto:
        """이름으로 교사를 조회합니다.

        Raises:
            NotFoundError: 교사를 찾을 수 없을 때 (No teacher with that name)
        """
        teacher: Teacher | None = await self.repository.find_by_name(db, name)
        if teacher is None:
            raise NotFoundError(f"No teacher named '{name}'")
        return self.mapper.map(teacher, TeacherDto)

    async def read_by_id(self, db: AsyncSession, teacher_id: int) -> TeacherDto:
        """ID로 교사를 조회합니다.

        Raises:
            NotFoundError: 교사를 찾을 수 없을 때 (No teacher with that id)
        """
        teacher: Teacher | None = await self.repository.find_by_id(db, teacher_id)
        if teacher is None:
            raise NotFoundError(f"No teacher with id {teacher_id}")
        return self.mapper.map(teacher, TeacherDto)

    async def list_teachers(self, db: AsyncSession) -> list[TeacherDto]:
        teachers: list[Teacher] = await self.repository.find_all(db)
        return [self.mapper.map(t, TeacherDto) for t in teachers]

    async def count(self, db: AsyncSession) -> int:
        return await self.repository.count(db)

    async def update(self, db: AsyncSession, teacher_id: int, data: TeacherDto) -> str:
        """교사 정보를 수정합니다 (없는 ID면 안내 메시지).

        Overlay the sent fields onto the stored teacher, or answer with a
        not-updated message when the id is unknown.
        """
        teacher: Teacher | None = await self.repository.find_by_id(db, teacher_id)
        if teacher is None:
            logger.warning("Teacher id=%s not found, nothing updated", teacher_id)
            return f"Teacher with id {teacher_id} was not updated, the id may not exist"

        self.mapper.map_onto(data, teacher)
        await self.repository.save(db, teacher)
        logger.info("Updated teacher id=%s", teacher_id)
        return f"Teacher with id {teacher_id} updated successfully"

    async def delete(self, db: AsyncSession, teacher_id: int) -> str:
        deleted: bool = await self.repository.delete_by_id(db, teacher_id)
        logger.info("Delete teacher id=%s removed=%s", teacher_id, deleted)
        return f"Teacher with id {teacher_id} deleted"


# 싱글턴 인스턴스 — Singleton instance
teacher_service: TeacherService = TeacherService()
