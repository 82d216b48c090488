"""create_recruitment_tables

Revision ID: 3c1d2e4f5a6b
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '3c1d2e4f5a6b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'api_keys',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('key_hash', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('last_used_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('key_hash'),
    )
    op.create_index(op.f('ix_api_keys_key_hash'), 'api_keys', ['key_hash'], unique=False)

    op.create_table(
        'vacantes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('area', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('sueldo', sa.Numeric(precision=19, scale=4), nullable=True),
        sa.Column('activo', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_vacantes_area'), 'vacantes', ['area'], unique=False)
    op.create_index(op.f('ix_vacantes_activo'), 'vacantes', ['activo'], unique=False)

    op.create_table(
        'prospectos',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nombre', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('correo', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('fecha_registro', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('correo'),
    )
    op.create_index(op.f('ix_prospectos_nombre'), 'prospectos', ['nombre'], unique=False)

    op.create_table(
        'entrevistas',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('vacante', sa.Integer(), nullable=False),
        sa.Column('prospecto', sa.Integer(), nullable=False),
        sa.Column('fecha_entrevista', sa.Date(), nullable=True),
        sa.Column('notas', sa.Text(), nullable=True),
        sa.Column('reclutado', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['vacante'], ['vacantes.id']),
        sa.ForeignKeyConstraint(['prospecto'], ['prospectos.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('vacante', 'prospecto', name='uq_entrevistas_vacante_prospecto'),
    )
    op.create_index(op.f('ix_entrevistas_vacante'), 'entrevistas', ['vacante'], unique=False)
    op.create_index(op.f('ix_entrevistas_prospecto'), 'entrevistas', ['prospecto'], unique=False)
    op.create_index(op.f('ix_entrevistas_reclutado'), 'entrevistas', ['reclutado'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_entrevistas_reclutado'), table_name='entrevistas')
    op.drop_index(op.f('ix_entrevistas_prospecto'), table_name='entrevistas')
    op.drop_index(op.f('ix_entrevistas_vacante'), table_name='entrevistas')
    op.drop_table('entrevistas')
    op.drop_index(op.f('ix_prospectos_nombre'), table_name='prospectos')
    op.drop_table('prospectos')
    op.drop_index(op.f('ix_vacantes_activo'), table_name='vacantes')
    op.drop_index(op.f('ix_vacantes_area'), table_name='vacantes')
    op.drop_table('vacantes')
    op.drop_index(op.f('ix_api_keys_key_hash'), table_name='api_keys')
    op.drop_table('api_keys')
