from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.tenant import TenantCustomDomain
from app.multitenancy.host_classifier import normalize_host, strip_www
from app.multitenancy.outcome import DomainBinding


logger = logging.getLogger(__name__)


def candidate_hosts(host: str) -> tuple[str, ...]:
    """Return the host plus its www-less and www forms, deduplicated in order."""
    normalized = normalize_host(host)
    if not normalized:
        return ()
    bare = strip_www(normalized)
    return tuple(dict.fromkeys([normalized, bare, f'www.{bare}']))


def split_subdomain(host: str) -> tuple[str, str] | None:
    labels = [label for label in strip_www(normalize_host(host)).split('.') if label]
    if len(labels) < 3:
        return None
    return labels[0], '.'.join(labels[1:])


def _to_binding(row: TenantCustomDomain) -> DomainBinding:
    return DomainBinding(
        tenant_id=str(row.tenant_id),
        domain=row.domain,
        subdomain=row.subdomain or None,
        is_verified=bool(row.is_verified),
        ssl_status=row.ssl_status,
    )


def find_exact_binding(db: Session, host: str) -> DomainBinding | None:
    candidates = candidate_hosts(host)
    if not candidates:
        return None
    rows = db.scalars(
        select(TenantCustomDomain)
        .where(TenantCustomDomain.domain.in_(candidates))
        .order_by(TenantCustomDomain.created_at.asc(), TenantCustomDomain.id.asc())
    ).all()
    # Within one domain, a binding without a subdomain label goes first.
    by_domain: dict[str, TenantCustomDomain] = {}
    for row in sorted(rows, key=lambda item: bool(item.subdomain)):
        by_domain.setdefault(row.domain, row)
    for candidate in candidates:
        if candidate in by_domain:
            return _to_binding(by_domain[candidate])
    return None


def find_subdomain_binding(db: Session, host: str) -> DomainBinding | None:
    parts = split_subdomain(host)
    if not parts:
        return None
    subdomain, root = parts
    row = db.scalar(
        select(TenantCustomDomain)
        .where(TenantCustomDomain.domain == root, TenantCustomDomain.subdomain == subdomain)
        .order_by(TenantCustomDomain.created_at.asc())
        .limit(1)
    )
    return _to_binding(row) if row else None


def lookup_binding(db: Session, host: str) -> DomainBinding | None:
    # Exact hostname bindings take precedence over subdomain decomposition.
    try:
        binding = find_exact_binding(db, host)
    except SQLAlchemyError as exc:
        logger.warning('Domain lookup failed (exact match) for %s: %s', host, exc)
        db.rollback()
        binding = None
    if binding:
        return binding

    try:
        return find_subdomain_binding(db, host)
    except SQLAlchemyError as exc:
        logger.warning('Domain lookup failed (subdomain match) for %s: %s', host, exc)
        db.rollback()
        return None
