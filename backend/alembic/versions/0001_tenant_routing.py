"""tenants and custom domain bindings

Revision ID: 0001_tenant_routing
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


revision: str = '0001_tenant_routing'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        'tenants',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('slug', sa.String(length=63), nullable=False),
        sa.Column('company_name', sa.String(length=200), nullable=False),
        sa.Column('logo_url', sa.String(length=1024), nullable=True),
        sa.Column('landing_page_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('slug', name='uq_tenants_slug'),
        sa.CheckConstraint(
            "status in ('active', 'trial', 'suspended', 'cancelled')",
            name='tenant_status_values',
        ),
    )
    op.create_index('ix_tenants_slug', 'tenants', ['slug'])

    op.create_table(
        'tenant_custom_domains',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('domain', sa.String(length=255), nullable=False),
        sa.Column('subdomain', sa.String(length=63), nullable=True),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('ssl_status', sa.String(length=30), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['tenant_id'], ['tenants.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('domain', 'subdomain', name='uq_tenant_custom_domains_domain_subdomain'),
    )
    op.create_index('ix_tenant_custom_domains_domain', 'tenant_custom_domains', ['domain'])
    op.create_index('ix_tenant_custom_domains_tenant', 'tenant_custom_domains', ['tenant_id'])


def downgrade() -> None:
    op.drop_index('ix_tenant_custom_domains_tenant', table_name='tenant_custom_domains')
    op.drop_index('ix_tenant_custom_domains_domain', table_name='tenant_custom_domains')
    op.drop_table('tenant_custom_domains')
    op.drop_index('ix_tenants_slug', table_name='tenants')
    op.drop_table('tenants')
