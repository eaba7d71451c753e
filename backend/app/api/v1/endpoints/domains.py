from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.domain import DomainBindingOut, DomainResolveResponse, TenantSummaryOut
from app.services import domain_resolve_service


router = APIRouter(prefix='/domains', tags=['domains'])


@router.get('/resolve', response_model=DomainResolveResponse, response_model_exclude_none=True)
def resolve_domain(
    host: str | None = Query(default=None),
    hostname: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> DomainResolveResponse:
    raw_host = (host or hostname or '').strip()
    if not raw_host:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='host is required')

    resolved = domain_resolve_service.resolve_host_binding(db, raw_host)
    if not resolved:
        return DomainResolveResponse(found=False)

    binding, tenant = resolved
    return DomainResolveResponse(
        found=True,
        domain=DomainBindingOut.model_validate(binding),
        tenant=TenantSummaryOut.model_validate(tenant),
    )
