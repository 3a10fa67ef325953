"""create_profiles_contracts_jobs

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial'
down_revision = None
branch_labels = None
depends_on = None

profile_type = sa.Enum('client', 'contractor', name='profile_type')
contract_status = sa.Enum('new', 'in_progress', 'terminated', name='contract_status')


def upgrade() -> None:
    # Create profiles table
    op.create_table(
        'profiles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.Column('profession', sa.String(length=255), nullable=False),
        sa.Column('balance', sa.Numeric(12, 2), nullable=False),
        sa.Column('type', profile_type, nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('balance >= 0', name='check_profiles_balance_non_negative'),
    )
    op.create_index(op.f('ix_profiles_id'), 'profiles', ['id'], unique=False)
    op.create_index(op.f('ix_profiles_type'), 'profiles', ['type'], unique=False)

    # Create contracts table
    op.create_table(
        'contracts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('terms', sa.Text(), nullable=False),
        sa.Column('status', contract_status, nullable=False),
        sa.Column('client_id', sa.Integer(), nullable=False),
        sa.Column('contractor_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['client_id'], ['profiles.id'], name='fk_contracts_client_id'),
        sa.ForeignKeyConstraint(['contractor_id'], ['profiles.id'], name='fk_contracts_contractor_id'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_contracts_id'), 'contracts', ['id'], unique=False)
    op.create_index(op.f('ix_contracts_status'), 'contracts', ['status'], unique=False)
    op.create_index(op.f('ix_contracts_client_id'), 'contracts', ['client_id'], unique=False)
    op.create_index(op.f('ix_contracts_contractor_id'), 'contracts', ['contractor_id'], unique=False)
    op.create_index('ix_contracts_client_status', 'contracts', ['client_id', 'status'], unique=False)
    op.create_index('ix_contracts_contractor_status', 'contracts', ['contractor_id', 'status'], unique=False)

    # Create jobs table
    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('paid', sa.Boolean(), nullable=True),
        sa.Column('payment_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('contract_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['contract_id'], ['contracts.id'], name='fk_jobs_contract_id'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('price > 0', name='check_jobs_price_positive'),
    )
    op.create_index(op.f('ix_jobs_id'), 'jobs', ['id'], unique=False)
    op.create_index(op.f('ix_jobs_contract_id'), 'jobs', ['contract_id'], unique=False)
    op.create_index('ix_jobs_paid_payment_date', 'jobs', ['paid', 'payment_date'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_jobs_paid_payment_date', table_name='jobs')
    op.drop_index(op.f('ix_jobs_contract_id'), table_name='jobs')
    op.drop_index(op.f('ix_jobs_id'), table_name='jobs')
    op.drop_table('jobs')

    op.drop_index('ix_contracts_contractor_status', table_name='contracts')
    op.drop_index('ix_contracts_client_status', table_name='contracts')
    op.drop_index(op.f('ix_contracts_contractor_id'), table_name='contracts')
    op.drop_index(op.f('ix_contracts_client_id'), table_name='contracts')
    op.drop_index(op.f('ix_contracts_status'), table_name='contracts')
    op.drop_index(op.f('ix_contracts_id'), table_name='contracts')
    op.drop_table('contracts')

    op.drop_index(op.f('ix_profiles_type'), table_name='profiles')
    op.drop_index(op.f('ix_profiles_id'), table_name='profiles')
    op.drop_table('profiles')

    # Drop enum types (PostgreSQL only, no-op elsewhere)
    contract_status.drop(op.get_bind(), checkfirst=True)
    profile_type.drop(op.get_bind(), checkfirst=True)
