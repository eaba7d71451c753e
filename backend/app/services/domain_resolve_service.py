from __future__ import annotations

from sqlalchemy.orm import Session

from app.multitenancy.host_classifier import normalize_host
from app.multitenancy.outcome import DomainBinding, TenantSummary
from app.multitenancy.registry import lookup_binding
from app.multitenancy.status_gate import load_tenant_summary


def resolve_host_binding(db: Session, host: str) -> tuple[DomainBinding, TenantSummary] | None:
    """Look up the binding and tenant for a host without judging tenant status.

    Backs the public resolve endpoint; callers apply their own status gate.
    """
    normalized = normalize_host(host)
    if not normalized:
        return None
    binding = lookup_binding(db, normalized)
    if not binding:
        return None
    tenant = load_tenant_summary(db, binding.tenant_id)
    if not tenant:
        return None
    return binding, tenant
