"""풋볼 팀 Pydantic DTO 정의.

Football team Pydantic DTO definitions.
The DTO mirrors the entity's non-key attributes and carries no id; update
and delete flows receive the id from the URL path instead.
JSON field names are camelCase (teamName, currentSuperBowlChampion).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FootballTeamDto(BaseModel):
    """풋볼 팀 요청/응답 DTO.

    Football team data transfer object used for both requests and responses.
    Every field has a default so a PUT body may carry only the fields
    being changed; unsent fields are left out of ``model_fields_set``.

    Attributes:
        team_name: 팀 이름 (Team name)
        wins: 승리 수 (Wins)
        losses: 패배 수 (Losses)
        current_super_bowl_champion: 현 챔피언 여부 (Reigning champion flag)
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    team_name: str | None = None  # 팀 이름 (JSON: teamName)
    wins: int = 0  # 승리 수 (Wins)
    losses: int = 0  # 패배 수 (Losses)
    current_super_bowl_champion: bool = False  # 현 챔피언 여부 (JSON: currentSuperBowlChampion)
