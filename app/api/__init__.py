"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates all resource routers into a single router
for inclusion in the FastAPI application.

Included routers:
    - football_teams: 풋볼 팀 관리 (/football-team)
    - teachers: 교사 관리 (/teacher)
"""

from fastapi import APIRouter

from app.api.football_teams import router as football_teams_router
from app.api.teachers import router as teachers_router

api_router: APIRouter = APIRouter()

api_router.include_router(football_teams_router, prefix="/football-team", tags=["Football Teams"])
api_router.include_router(teachers_router, prefix="/teacher", tags=["Teachers"])
