"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides the generic persistence contract keyed by entity identity:
save / find / exists / count / delete, single and bulk.

Mutating methods only flush; the caller commits once per logical call,
so a failure in the middle of a bulk operation leaves nothing committed.

Usage:
    class FootballTeamRepository(CrudRepository[FootballTeam, int]):
        def __init__(self) -> None:
            super().__init__(FootballTeam)
"""

from typing import Any, Generic, Iterable, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import make_transient

from app.database import Base
from app.utils.exceptions import BadRequestError

# 제네릭 타입 변수 — SQLAlchemy 모델과 식별자 타입
# Generic type variables for the SQLAlchemy model and its identity type
ModelType = TypeVar("ModelType", bound=Base)
IdType = TypeVar("IdType")


class CrudRepository(Generic[ModelType, IdType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository over a model with an ``id`` primary key.
    An entity whose id is None or 0 is treated as transient (never saved);
    any other id is presumed to name a stored row.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    # ------------------------------------------------------------------
    # 인자 검증 — Argument validation
    # ------------------------------------------------------------------
    @staticmethod
    def _require(value: Any, name: str) -> None:
        if value is None:
            raise BadRequestError(f"{name} must not be None")

    def _require_all(self, values: Iterable[Any] | None, name: str) -> list[Any]:
        self._require(values, name)
        items: list[Any] = list(values)
        if any(item is None for item in items):
            raise BadRequestError(f"{name} must not contain None elements")
        return items

    @staticmethod
    def _is_new(entity: ModelType) -> bool:
        return entity.id is None or entity.id == 0

    # ------------------------------------------------------------------
    # 저장 — Save
    # ------------------------------------------------------------------
    async def save(self, db: AsyncSession, entity: ModelType) -> ModelType:
        """엔티티를 저장합니다 (신규면 삽입, 기존이면 덮어쓰기).

        Insert or update an entity.

        A transient entity (id None/0) is inserted and receives a generated id.
        An entity whose id matches a stored row overwrites every column of
        that row; unset attributes become None or the column default.
        An entity whose id matches nothing is inserted under a fresh id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entity: 저장할 엔티티 (Entity to persist)

        Returns:
            ModelType: id가 채워진 저장 상태의 엔티티 (Persisted entity with id populated)

        Raises:
            BadRequestError: entity가 None일 때 (When entity is None)
        """
        self._require(entity, "Entity")
        return await self._save(db, entity)

    async def _save(self, db: AsyncSession, entity: ModelType) -> ModelType:
        if not self._is_new(entity):
            stored: ModelType | None = await self.find_by_id(db, entity.id)
            if stored is not None:
                # 세션의 인스턴스가 아니면 모든 컬럼을 덮어씀
                # (A separate instance replaces every column of the stored row)
                if stored is not entity:
                    self._overwrite(stored, entity)
                await db.flush()
                return stored
            # 저장된 행이 없는 id — 새 id로 삽입 (Unknown id: insert under a fresh identity)
            make_transient(entity)

        entity.id = None
        db.add(entity)
        await db.flush()
        await db.refresh(entity)
        return entity

    def _overwrite(self, stored: ModelType, entity: ModelType) -> None:
        """entity의 모든 비-키 컬럼 값을 stored에 복사합니다.

        Copy every non-key column of ``entity`` onto ``stored``, unset
        attributes included. None on a non-nullable column falls back to the
        column's scalar default.

        Raises:
            BadRequestError: 기본값이 없는 필수 컬럼이 None일 때
                             (When a non-nullable column without default is None)
        """
        for attr in sa_inspect(self.model).column_attrs:
            column = attr.columns[0]
            if column.primary_key:
                continue

            value: Any = getattr(entity, attr.key)
            if value is None and not column.nullable:
                default = column.default
                if default is None or not default.is_scalar:
                    raise BadRequestError(
                        f"{self.model.__name__}.{attr.key} must not be None"
                    )
                value = default.arg
            setattr(stored, attr.key, value)

    async def save_all(
        self,
        db: AsyncSession,
        entities: Iterable[ModelType] | None,
    ) -> list[ModelType]:
        """여러 엔티티를 저장합니다.

        Save every entity in order. All elements are validated before any
        write happens.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entities: 저장할 엔티티 목록 (Entities to persist)

        Returns:
            list[ModelType]: 저장된 엔티티 목록 (Persisted entities)

        Raises:
            BadRequestError: 목록 또는 요소가 None일 때 (When the sequence or an element is None)
        """
        items: list[ModelType] = self._require_all(entities, "Entities")
        return [await self._save(db, entity) for entity in items]

    # ------------------------------------------------------------------
    # 조회 — Read
    # ------------------------------------------------------------------
    async def find_by_id(self, db: AsyncSession, record_id: IdType | None) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 ID (Id of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)

        Raises:
            BadRequestError: record_id가 None일 때 (When record_id is None)
        """
        self._require(record_id, "Id")
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def exists_by_id(self, db: AsyncSession, record_id: IdType | None) -> bool:
        """ID에 해당하는 레코드가 존재하는지 확인합니다.

        Check whether a record with the given id exists.
        """
        self._require(record_id, "Id")
        query: Select = (
            select(func.count()).select_from(self.model).where(self.model.id == record_id)
        )
        count: int = (await db.execute(query)).scalar() or 0
        return count > 0

    async def find_all(self, db: AsyncSession) -> list[ModelType]:
        """모든 레코드를 조회합니다 (순서 보장 없음).

        Retrieve every stored record. No ordering is guaranteed.
        """
        result = await db.execute(select(self.model))
        return list(result.scalars().all())

    async def find_all_by_id(
        self,
        db: AsyncSession,
        record_ids: Iterable[IdType] | None,
    ) -> list[ModelType]:
        """ID 목록에 해당하는 레코드를 조회합니다.

        Retrieve the records whose ids are in ``record_ids``.
        Ids with no stored row are silently skipped; order is not guaranteed.

        Raises:
            BadRequestError: 목록 또는 요소가 None일 때 (When the sequence or an element is None)
        """
        ids: list[IdType] = self._require_all(record_ids, "Ids")
        if not ids:
            return []
        result = await db.execute(select(self.model).where(self.model.id.in_(ids)))
        return list(result.scalars().all())

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수를 반환합니다.

        Count stored records.
        """
        query: Select = select(func.count()).select_from(self.model)
        return (await db.execute(query)).scalar() or 0

    async def find_first_by(self, db: AsyncSession, **criteria: Any) -> ModelType | None:
        """속성 동등 조건으로 첫 번째 레코드를 조회합니다.

        Return the first record whose attributes equal every given criterion,
        or None. Concrete repositories build their lookups on this.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            **criteria: {'속성명': 값} 동등 조건 ({'attribute': value} equality filters)

        Returns:
            ModelType | None: 첫 번째 일치 레코드 또는 None (First match or None)

        Raises:
            BadRequestError: 조건이 없거나 알 수 없는 속성일 때
                             (When no criteria are given or an attribute is unknown)
        """
        if not criteria:
            raise BadRequestError("At least one lookup criterion is required")

        query: Select = select(self.model)
        for column_name, value in criteria.items():
            if column_name not in self.model.__table__.columns:
                raise BadRequestError(
                    f"{self.model.__name__} has no attribute '{column_name}'"
                )
            query = query.where(getattr(self.model, column_name) == value)

        result = await db.execute(query.order_by(self.model.id).limit(1))
        return result.scalars().first()

    # ------------------------------------------------------------------
    # 삭제 — Delete
    # ------------------------------------------------------------------
    async def delete_by_id(self, db: AsyncSession, record_id: IdType | None) -> bool:
        """ID로 레코드를 삭제합니다 (멱등).

        Delete a record by id. Deleting an id with no stored row is a no-op.

        Returns:
            bool: 실제로 삭제되었는지 여부 (Whether a row was removed)

        Raises:
            BadRequestError: record_id가 None일 때 (When record_id is None)
        """
        db_obj: ModelType | None = await self.find_by_id(db, record_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True

    async def delete(self, db: AsyncSession, entity: ModelType | None) -> None:
        """엔티티를 삭제합니다.

        Delete the stored row behind ``entity``. A transient entity or one
        whose row is already gone is ignored.
        """
        self._require(entity, "Entity")
        if self._is_new(entity):
            return
        await self.delete_by_id(db, entity.id)

    async def delete_all_by_id(
        self,
        db: AsyncSession,
        record_ids: Iterable[IdType] | None,
    ) -> int:
        """ID 목록에 해당하는 레코드를 삭제합니다.

        Delete every record whose id is listed; unknown ids are ignored.

        Returns:
            int: 삭제된 레코드 수 (Number of rows removed)
        """
        db_objs: list[ModelType] = await self.find_all_by_id(db, record_ids)
        return await self._delete_loaded(db, db_objs)

    async def delete_many(
        self,
        db: AsyncSession,
        entities: Iterable[ModelType] | None,
    ) -> int:
        """여러 엔티티를 삭제합니다.

        Delete the stored rows behind the given entities.

        Raises:
            BadRequestError: 목록 또는 요소가 None일 때 (When the sequence or an element is None)
        """
        items: list[ModelType] = self._require_all(entities, "Entities")
        ids: list[Any] = [entity.id for entity in items if not self._is_new(entity)]
        return await self.delete_all_by_id(db, ids)

    async def delete_all(self, db: AsyncSession) -> int:
        """테이블의 모든 레코드를 삭제합니다.

        Delete every stored record of this model.
        """
        return await self._delete_loaded(db, await self.find_all(db))

    async def _delete_loaded(self, db: AsyncSession, db_objs: Sequence[ModelType]) -> int:
        for db_obj in db_objs:
            await db.delete(db_obj)
        await db.flush()
        return len(db_objs)
