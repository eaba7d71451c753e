from app.db.base_class import Base
from app.models.tenant import Tenant, TenantCustomDomain


__all__ = [
    'Base',
    'Tenant',
    'TenantCustomDomain',
]
