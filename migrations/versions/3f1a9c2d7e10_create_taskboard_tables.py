"""Create boards, board_statuses and tasks tables

Revision ID: 3f1a9c2d7e10
Revises:
Create Date: 2024-01-15T10:30:00.000000
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = '3f1a9c2d7e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- boards ---
    op.create_table(
        'boards',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('title', name='uq_board_title'),
    )

    # --- board_statuses ---
    op.create_table(
        'board_statuses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('board_id', sa.Integer(), sa.ForeignKey('boards.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status_key', sa.String(length=50), nullable=False),
        sa.Column('status_label', sa.String(length=100), nullable=False),
        sa.Column('status_color', sa.String(length=7), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('board_id', 'status_key', name='uq_board_status_key'),
        sa.UniqueConstraint('board_id', 'status_label', name='uq_board_status_label'),
    )
    op.create_index('idx_board_status_position', 'board_statuses', ['board_id', 'position'])

    # --- tasks ---
    op.create_table(
        'tasks',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('board_id', sa.Integer(), sa.ForeignKey('boards.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status_key', sa.String(length=50), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('priority', sa.String(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_task_board_position', 'tasks', ['board_id', 'position'])
    op.create_index('idx_task_board_status_key', 'tasks', ['board_id', 'status_key'])


def downgrade() -> None:
    op.drop_index('idx_task_board_status_key', table_name='tasks')
    op.drop_index('idx_task_board_position', table_name='tasks')
    op.drop_table('tasks')
    op.drop_index('idx_board_status_position', table_name='board_statuses')
    op.drop_table('board_statuses')
    op.drop_table('boards')
