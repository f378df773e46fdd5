"""create mothers, litters, offspring and reports tables

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7e2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'mothers',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('notes', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'litters',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('mother_id', sa.String(length=255), nullable=False),
        # UNKNOWN_FATHER sentinel instead of NULL keeps the unique constraint effective
        sa.Column('father_id', sa.String(length=255), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('reported_litter_size', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('notes', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('mother_id', 'father_id', 'birth_date', name='ux_litters_mother_father_birth')
    )
    op.create_index(op.f('ix_litters_mother_id'), 'litters', ['mother_id'], unique=False)

    op.create_table(
        'offspring',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('litter_id', sa.String(length=255), nullable=False),
        sa.Column('sex', sa.String(length=16), nullable=False),
        sa.Column('is_alive', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('is_weaned', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('notes', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['litter_id'], ['litters.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_offspring_litter_id'), 'offspring', ['litter_id'], unique=False)

    op.create_table(
        'reports',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('entries', sa.JSON(), nullable=False),
        sa.Column('results', sa.JSON(), nullable=False),
        sa.Column('summary', sa.JSON(), nullable=True),
        sa.Column('date_generated', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )


def downgrade() -> None:
    op.drop_table('reports')
    op.drop_index(op.f('ix_offspring_litter_id'), table_name='offspring')
    op.drop_table('offspring')
    op.drop_index(op.f('ix_litters_mother_id'), table_name='litters')
    op.drop_table('litters')
    op.drop_table('mothers')
