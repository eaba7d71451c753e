import uuid

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base_class import Base
from app.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


TENANT_STATUSES = ('active', 'trial', 'suspended', 'cancelled')


class Tenant(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'tenants'
    __table_args__ = (
        UniqueConstraint('slug', name='uq_tenants_slug'),
        CheckConstraint(
            "status in ('active', 'trial', 'suspended', 'cancelled')",
            name='tenant_status_values',
        ),
    )

    slug: Mapped[str] = mapped_column(String(63), nullable=False)
    company_name: Mapped[str] = mapped_column(String(200), nullable=False)
    logo_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    landing_page_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='active')

    custom_domains: Mapped[list['TenantCustomDomain']] = relationship(
        back_populates='tenant', cascade='all, delete-orphan'
    )


class TenantCustomDomain(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'tenant_custom_domains'
    __table_args__ = (
        UniqueConstraint('domain', 'subdomain', name='uq_tenant_custom_domains_domain_subdomain'),
    )

    tenant_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey('tenants.id', ondelete='CASCADE'), nullable=False
    )
    domain: Mapped[str] = mapped_column(String(255), nullable=False)
    subdomain: Mapped[str | None] = mapped_column(String(63), nullable=True)
    is_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    ssl_status: Mapped[str | None] = mapped_column(String(30), nullable=True)

    tenant: Mapped['Tenant'] = relationship(back_populates='custom_domains')


Index('ix_tenants_slug', Tenant.slug)
Index('ix_tenant_custom_domains_domain', TenantCustomDomain.domain)
Index('ix_tenant_custom_domains_tenant', TenantCustomDomain.tenant_id)
