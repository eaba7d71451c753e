from app.models.tenant import Tenant, TenantCustomDomain

__all__ = [
    'Tenant',
    'TenantCustomDomain',
]
