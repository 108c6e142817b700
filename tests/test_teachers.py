"""교사 CRUD API 테스트.

Teacher CRUD API tests — same contract as the football team endpoints.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.teacher_service import teacher_service
from app.utils.exceptions import NotFoundError

URL = "/teacher"


class TestTeacherApi:
    """교사 API 테스트."""

    async def test_create_and_read(self, client: AsyncClient):
        """교사 생성 후 이름으로 조회."""
        res = await client.post(URL, json={
            "name": "Alan Turing",
            "subject": "Computer Science",
            "yearsOfExperience": 3,
            "tenured": False,
        })
        assert res.status_code == 201
        assert res.text == "Teacher 'Alan Turing' saved successfully"

        res = await client.get(f"{URL}/Alan Turing")
        assert res.status_code == 200
        assert res.json() == {
            "name": "Alan Turing",
            "subject": "Computer Science",
            "yearsOfExperience": 3,
            "tenured": False,
        }

    async def test_list_teachers(self, client: AsyncClient, teacher):
        res = await client.get(URL)
        assert res.status_code == 200
        assert [t["name"] for t in res.json()] == ["Ada Lovelace"]

    async def test_read_missing_teacher(self, client: AsyncClient):
        """존재하지 않는 교사 조회 시 404."""
        res = await client.get(f"{URL}/Nobody")
        assert res.status_code == 404

    async def test_update_teacher(self, client: AsyncClient, teacher):
        """부분 업데이트 — 경력만 변경."""
        res = await client.put(f"{URL}/{teacher.id}", json={"yearsOfExperience": 13})
        assert res.status_code == 200
        assert res.text == f"Teacher with id {teacher.id} updated successfully"

        data = (await client.get(f"{URL}/Ada Lovelace")).json()
        assert data["yearsOfExperience"] == 13
        assert data["subject"] == "Mathematics"
        assert data["tenured"] is True

    async def test_update_missing_teacher(self, client: AsyncClient):
        res = await client.put(f"{URL}/77", json={"name": "Ghost"})
        assert res.status_code == 200
        assert res.text == "Teacher with id 77 was not updated, the id may not exist"

    async def test_delete_teacher(self, client: AsyncClient, teacher):
        """삭제 후 조회 시 404."""
        res = await client.delete(f"{URL}/{teacher.id}")
        assert res.status_code == 200
        assert res.text == f"Teacher with id {teacher.id} deleted"

        res2 = await client.get(f"{URL}/Ada Lovelace")
        assert res2.status_code == 404

    async def test_get_teacher_by_id(self, client: AsyncClient, teacher):
        """ID로 교사 조회."""
        res = await client.get(f"{URL}/id/{teacher.id}")
        assert res.status_code == 200
        assert res.json()["name"] == "Ada Lovelace"
        assert res.json()["yearsOfExperience"] == 12

    async def test_get_teacher_by_missing_id(self, client: AsyncClient):
        """존재하지 않는 id 조회 시 404."""
        res = await client.get(f"{URL}/id/999")
        assert res.status_code == 404
        assert res.json()["detail"] == "No teacher with id 999"


class TestTeacherService:
    """교사 서비스 테스트."""

    async def test_read_by_id(self, db: AsyncSession, teacher):
        dto = await teacher_service.read_by_id(db, teacher.id)
        assert dto.subject == "Mathematics"
        assert dto.tenured is True

    async def test_read_by_id_missing_raises(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await teacher_service.read_by_id(db, 404)

    async def test_count(self, db: AsyncSession, teacher):
        """교사 수 조회."""
        assert await teacher_service.count(db) == 1
        await teacher_service.delete(db, teacher.id)
        assert await teacher_service.count(db) == 0
