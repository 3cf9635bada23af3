"""Create users and generations tables

Revision ID: 3a1f9c0d7b2e
Revises:
Create Date: 2025-11-22 06:40:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a1f9c0d7b2e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the user and generation tables with the history query indexes."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index('ix_users_id', 'users', ['id'], unique=False)

    op.create_table(
        'generations',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('prompt', sa.Text(), nullable=False),
        sa.Column('language', sa.String(), nullable=False),
        sa.Column('code', sa.Text(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE', onupdate='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_generations_id', 'generations', ['id'], unique=False)
    op.create_index('ix_generations_created_at', 'generations', ['created_at'], unique=False)
    op.create_index('ix_generations_language', 'generations', ['language'], unique=False)


def downgrade() -> None:
    """Drop the generation and user tables."""
    op.drop_index('ix_generations_language', table_name='generations')
    op.drop_index('ix_generations_created_at', table_name='generations')
    op.drop_index('ix_generations_id', table_name='generations')
    op.drop_table('generations')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
