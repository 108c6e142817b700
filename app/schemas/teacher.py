"""교사 Pydantic DTO 정의.

Teacher Pydantic DTO definitions.
JSON field names are camelCase (yearsOfExperience).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TeacherDto(BaseModel):
    """교사 요청/응답 DTO.

    Teacher data transfer object; carries no id.

    Attributes:
        name: 교사 이름 (Teacher name)
        subject: 담당 과목 (Subject taught)
        years_of_experience: 경력 연수 (Years of experience)
        tenured: 종신 재직 여부 (Tenure flag)
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None  # 교사 이름 (Teacher name)
    subject: str | None = None  # 담당 과목 (Subject)
    years_of_experience: int = 0  # 경력 연수 (JSON: yearsOfExperience)
    tenured: bool = False  # 종신 재직 여부 (Tenure flag)
