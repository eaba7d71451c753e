from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.tenant import Tenant
from app.multitenancy.outcome import (
    TENANT_CONFIG_NOT_FOUND,
    TENANT_SUSPENDED,
    DomainBinding,
    ResolutionOutcome,
    TenantSummary,
)


logger = logging.getLogger(__name__)

SERVABLE_STATUSES = frozenset({'active', 'trial'})


def _to_summary(tenant: Tenant) -> TenantSummary:
    return TenantSummary(
        id=str(tenant.id),
        slug=tenant.slug,
        company_name=tenant.company_name,
        logo_url=tenant.logo_url,
        landing_page_enabled=bool(tenant.landing_page_enabled),
        status=tenant.status,
    )


def load_tenant_summary(db: Session, tenant_id: str) -> TenantSummary | None:
    try:
        key = uuid.UUID(str(tenant_id))
    except ValueError:
        logger.warning('Tenant id %r is not a valid UUID', tenant_id)
        return None
    try:
        tenant = db.scalar(select(Tenant).where(Tenant.id == key))
    except SQLAlchemyError as exc:
        logger.warning('Tenant read failed for %s: %s', tenant_id, exc)
        db.rollback()
        return None
    return _to_summary(tenant) if tenant else None


def check_status(tenant: TenantSummary, binding: DomainBinding | None = None) -> ResolutionOutcome:
    if (tenant.status or '').lower() not in SERVABLE_STATUSES:
        logger.info('Tenant %s is not servable (status=%s)', tenant.slug, tenant.status)
        return ResolutionOutcome.error(TENANT_SUSPENDED)
    return ResolutionOutcome.custom_domain(tenant, binding)


def gate_tenant(db: Session, tenant_id: str, binding: DomainBinding | None = None) -> ResolutionOutcome:
    tenant = load_tenant_summary(db, tenant_id)
    if tenant is None:
        return ResolutionOutcome.error(TENANT_CONFIG_NOT_FOUND)
    return check_status(tenant, binding)
