"""교사 레포지토리 — 교사 CRUD 및 이름 조회.

Teacher Repository — CRUD and lookup-by-name for teachers.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.teacher import Teacher
from app.repositories.base import CrudRepository


class TeacherRepository(CrudRepository[Teacher, int]):
    """teachers 테이블 레포지토리.

    Repository handling database queries for the teachers table.
    """

    def __init__(self) -> None:
        super().__init__(Teacher)

    async def find_by_name(self, db: AsyncSession, name: str) -> Teacher | None:
        """이름으로 교사를 조회합니다.

        Retrieve the first teacher whose name equals ``name``.
        """
        return await self.find_first_by(db, name=name)


# 싱글턴 인스턴스 — Singleton instance
teacher_repository: TeacherRepository = TeacherRepository()
