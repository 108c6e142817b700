"""교사 SQLAlchemy ORM 모델 정의.

Teacher SQLAlchemy ORM model definition.

Tables:
    - teachers: 교사 정보 (Teacher records)
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Teacher(Base):
    """교사 모델.

    Teacher model — one row per teacher.

    Attributes:
        id: 자동 증가 기본키 (Auto-increment primary key)
        name: 교사 이름 (Teacher name, looked up by name)
        subject: 담당 과목 (Subject taught)
        years_of_experience: 경력 연수 (Years of teaching experience)
        tenured: 종신 재직 여부 (Tenure flag)
    """

    __tablename__ = "teachers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    subject: Mapped[str | None] = mapped_column(String(255), nullable=True)
    years_of_experience: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    tenured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Teacher id={self.id} name={self.name!r}>"
