"""initial farm ledger schema

Revision ID: 3c1f9a7d2b10
Revises:
Create Date: 2026-10-19 09:12:44.318207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f9a7d2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'profiles',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('farm_name', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_profiles_id'), 'profiles', ['id'], unique=False)

    op.create_table(
        'coops',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_coops_id'), 'coops', ['id'], unique=False)
    op.create_index(op.f('ix_coops_user_id'), 'coops', ['user_id'], unique=False)

    op.create_table(
        'chickens',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('coop_id', sa.Integer(), nullable=True),
        sa.Column('batch_number', sa.String(), nullable=False),
        sa.Column('breed', sa.String(), nullable=False),
        sa.Column('initial_count', sa.Integer(), nullable=False),
        sa.Column('current_count', sa.Integer(), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('status', sa.Enum('ACTIVE', 'SOLD', 'DEAD', name='chickenstatus'), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['coop_id'], ['coops.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_chickens_id'), 'chickens', ['id'], unique=False)
    op.create_index(op.f('ix_chickens_user_id'), 'chickens', ['user_id'], unique=False)
    op.create_index(op.f('ix_chickens_coop_id'), 'chickens', ['coop_id'], unique=False)

    op.create_table(
        'egg_production',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('chicken_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('count', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Numeric(10, 3), nullable=True),
        sa.Column('quality', sa.Enum('A', 'B', 'C', name='egggrade'), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['chicken_id'], ['chickens.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_egg_production_id'), 'egg_production', ['id'], unique=False)
    op.create_index(op.f('ix_egg_production_chicken_id'), 'egg_production', ['chicken_id'], unique=False)
    op.create_index(op.f('ix_egg_production_date'), 'egg_production', ['date'], unique=False)

    op.create_table(
        'feed',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('coop_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('quantity_kg', sa.Numeric(10, 3), nullable=False),
        sa.Column('cost', sa.Numeric(12, 2), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['coop_id'], ['coops.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_feed_id'), 'feed', ['id'], unique=False)
    op.create_index(op.f('ix_feed_coop_id'), 'feed', ['coop_id'], unique=False)
    op.create_index(op.f('ix_feed_date'), 'feed', ['date'], unique=False)

    op.create_table(
        'health_records',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('chicken_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('type', sa.Enum('VACCINATION', 'TREATMENT', 'CHECKUP', name='healthrecordtype'), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('cost', sa.Numeric(12, 2), nullable=False),
        sa.Column('vet_name', sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['chicken_id'], ['chickens.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_health_records_id'), 'health_records', ['id'], unique=False)
    op.create_index(op.f('ix_health_records_chicken_id'), 'health_records', ['chicken_id'], unique=False)
    op.create_index(op.f('ix_health_records_date'), 'health_records', ['date'], unique=False)

    op.create_table(
        'sales',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('egg_count', sa.Integer(), nullable=False),
        sa.Column('price_per_unit', sa.Numeric(12, 2), nullable=False),
        sa.Column('total', sa.Numeric(14, 2), nullable=False),
        sa.Column('customer', sa.String(), nullable=True),
        sa.Column('status', sa.Enum('PENDING', 'COMPLETED', name='salestatus'), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_sales_id'), 'sales', ['id'], unique=False)
    op.create_index(op.f('ix_sales_user_id'), 'sales', ['user_id'], unique=False)
    op.create_index(op.f('ix_sales_date'), 'sales', ['date'], unique=False)

    op.create_table(
        'revoked_tokens',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('token_id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_revoked_tokens_id'), 'revoked_tokens', ['id'], unique=False)
    op.create_index(op.f('ix_revoked_tokens_token_id'), 'revoked_tokens', ['token_id'], unique=True)
    op.create_index(op.f('ix_revoked_tokens_user_id'), 'revoked_tokens', ['user_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('revoked_tokens')
    op.drop_table('sales')
    op.drop_table('health_records')
    op.drop_table('feed')
    op.drop_table('egg_production')
    op.drop_table('chickens')
    op.drop_table('coops')
    op.drop_table('profiles')
    for enum_name in ('salestatus', 'healthrecordtype', 'egggrade', 'chickenstatus'):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
