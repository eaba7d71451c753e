from app.services import domain_resolve_service

__all__ = [
    'domain_resolve_service',
]
