"""DTO ↔ 엔티티 필드 복사 매퍼 모듈.

Field-copying mapper between DTOs and ORM entities.
Copies every attribute whose name exists on both shapes and whose value
fits the target attribute's type. Attributes present on only one side are
ignored, so the entity id never leaks into a DTO and a DTO never sets one.

Shapes are introspected:
    - Pydantic 모델: model_fields 어노테이션 (Pydantic models via model_fields)
    - SQLAlchemy 모델: 컬럼의 python_type / nullable (ORM models via column_attrs)

Usage:
    from app.utils.mapper import object_mapper
    entity = object_mapper.map(dto, FootballTeam)
    dto = object_mapper.map(entity, FootballTeamDto)
    object_mapper.map_onto(dto, entity)  # 부분 업데이트 (partial overlay)
"""

import types
from dataclasses import dataclass
from typing import Any, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect

T = TypeVar("T")


@dataclass(frozen=True)
class FieldShape:
    """대상 속성의 타입 정보.

    Type information for one target attribute.

    Attributes:
        python_types: 허용되는 파이썬 타입 (Accepted Python types)
        optional: None 허용 여부 (Whether None is an accepted value)
    """

    python_types: tuple[type, ...]
    optional: bool


def _annotation_shape(annotation: Any) -> FieldShape:
    # Optional[X] / X | None 분해 — unwrap unions into their member types
    if get_origin(annotation) in (Union, types.UnionType):
        members = get_args(annotation)
        concrete = tuple(m for m in members if m is not type(None))
        return FieldShape(
            python_types=tuple(get_origin(m) or m for m in concrete),
            optional=len(concrete) < len(members),
        )
    if annotation is Any or annotation is None:
        return FieldShape(python_types=(object,), optional=True)
    return FieldShape(python_types=(get_origin(annotation) or annotation,), optional=False)


class ObjectMapper:
    """이름이 같은 필드를 복사하는 범용 매퍼.

    Generic mapper copying same-named, type-compatible attributes between
    Pydantic DTOs, SQLAlchemy entities and plain objects.
    """

    def map(self, source: Any, target_type: type[T]) -> T:
        """source로부터 새 target_type 인스턴스를 생성합니다.

        Build a new ``target_type`` instance from ``source``.

        Args:
            source: 원본 객체 (DTO or entity)
            target_type: 생성할 대상 타입 (Target class)

        Returns:
            T: 매핑된 새 인스턴스 (New mapped instance)

        Raises:
            TypeError: 필수 속성의 타입이 맞지 않을 때
                       (When a value does not fit a required attribute)
        """
        values: dict[str, Any] = self._compatible_values(
            self._read(source, only_set=False), self._shape_of(target_type)
        )
        return target_type(**values)

    def map_onto(self, source: Any, target: T, only_set: bool = True) -> T:
        """source의 속성을 기존 target 인스턴스에 덮어씁니다.

        Overlay ``source``'s attributes onto an existing ``target``.
        With ``only_set`` a Pydantic source contributes only the fields the
        client actually sent, so unsent fields keep their stored values.
        The target's identity is never touched because DTOs have none.
        """
        values: dict[str, Any] = self._compatible_values(
            self._read(source, only_set=only_set), self._shape_of(type(target))
        )
        for name, value in values.items():
            setattr(target, name, value)
        return target

    # ------------------------------------------------------------------
    # 내부 헬퍼 — Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _read(source: Any, only_set: bool) -> dict[str, Any]:
        if source is None:
            raise TypeError("Cannot map from None")
        if isinstance(source, BaseModel):
            return source.model_dump(exclude_unset=only_set)

        mapper = sa_inspect(type(source), raiseerr=False)
        if mapper is not None:
            return {attr.key: getattr(source, attr.key) for attr in mapper.column_attrs}

        return {k: v for k, v in vars(source).items() if not k.startswith("_")}

    @staticmethod
    def _shape_of(target_type: type) -> dict[str, FieldShape]:
        if isinstance(target_type, type) and issubclass(target_type, BaseModel):
            return {
                name: _annotation_shape(info.annotation)
                for name, info in target_type.model_fields.items()
            }

        mapper = sa_inspect(target_type, raiseerr=False)
        if mapper is None:
            raise TypeError(f"Cannot map onto unsupported type {target_type.__name__}")

        shape: dict[str, FieldShape] = {}
        for attr in mapper.column_attrs:
            column = attr.columns[0]
            try:
                python_type: type = column.type.python_type
            except NotImplementedError:
                python_type = object
            shape[attr.key] = FieldShape(python_types=(python_type,), optional=bool(column.nullable))
        return shape

    @staticmethod
    def _compatible_values(
        values: dict[str, Any], shape: dict[str, FieldShape]
    ) -> dict[str, Any]:
        compatible: dict[str, Any] = {}
        for name, value in values.items():
            field = shape.get(name)
            if field is None:
                continue

            if value is None:
                # None은 nullable 속성에만 복사 — None only lands on optional attributes
                if field.optional:
                    compatible[name] = value
                continue

            # bool은 int의 하위 클래스이므로 별도로 구분 (bool must not pass as int)
            fits = isinstance(value, field.python_types) and (
                not isinstance(value, bool) or bool in field.python_types or object in field.python_types
            )
            if fits:
                compatible[name] = value
            elif not field.optional:
                expected = ", ".join(t.__name__ for t in field.python_types)
                raise TypeError(
                    f"Cannot map '{name}': expected {expected}, got {type(value).__name__}"
                )
        return compatible


# 싱글턴 인스턴스 — Singleton instance
object_mapper: ObjectMapper = ObjectMapper()
