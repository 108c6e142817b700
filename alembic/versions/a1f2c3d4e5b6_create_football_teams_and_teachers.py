"""create_football_teams_and_teachers

Revision ID: a1f2c3d4e5b6
Revises:
Create Date: 2026-10-18 10:00:00.000000

풋볼 팀 및 교사 테이블 생성: football_teams, teachers.
Create football_teams and teachers tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1f2c3d4e5b6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # football_teams — 팀 전적 (one row per team)
    op.create_table(
        'football_teams',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('team_name', sa.String(255), nullable=True),
        sa.Column('wins', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('losses', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('current_super_bowl_champion', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_football_teams_team_name', 'football_teams', ['team_name'])

    # teachers — 교사 정보 (one row per teacher)
    op.create_table(
        'teachers',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('subject', sa.String(255), nullable=True),
        sa.Column('years_of_experience', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('tenured', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_teachers_name', 'teachers', ['name'])


def downgrade() -> None:
    op.drop_index('ix_teachers_name', table_name='teachers')
    op.drop_table('teachers')
    op.drop_index('ix_football_teams_team_name', table_name='football_teams')
    op.drop_table('football_teams')
