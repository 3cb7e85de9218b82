"""add per-user content_likes table

Revision ID: 20261010090000
Revises: 20261001120000
Create Date: 2026-10-10 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261010090000'
down_revision: Union[str, Sequence[str], None] = '20261001120000'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """One like per (user, content) so like/unlike are idempotent."""
    op.create_table(
        'content_likes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('content_id', sa.Integer(), sa.ForeignKey('historical_content.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'content_id', name='uq_like_user_content'),
    )
    op.create_index(op.f('ix_content_likes_id'), 'content_likes', ['id'], unique=False)
    op.create_index(op.f('ix_content_likes_user_id'), 'content_likes', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_content_likes_user_id'), table_name='content_likes')
    op.drop_index(op.f('ix_content_likes_id'), table_name='content_likes')
    op.drop_table('content_likes')
