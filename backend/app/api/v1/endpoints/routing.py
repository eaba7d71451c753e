from fastapi import APIRouter, Depends

from app.multitenancy.deps import get_route_context, require_custom_domain
from app.multitenancy.outcome import RouteContext
from app.schemas.domain import RouteContextOut, TenantSummaryOut


router = APIRouter(prefix='/routing', tags=['routing'])


@router.get('/context', response_model=RouteContextOut)
def get_context(ctx: RouteContext = Depends(get_route_context)) -> RouteContextOut:
    return RouteContextOut(
        mode='custom_domain' if ctx.is_custom_domain else 'platform',
        is_custom_domain=ctx.is_custom_domain,
        effective_slug=ctx.effective_slug,
        tenant=TenantSummaryOut.model_validate(ctx.tenant) if ctx.tenant else None,
        domain_verified=ctx.domain_verified,
    )


@router.get('/tenant', response_model=TenantSummaryOut)
def get_tenant(ctx: RouteContext = Depends(require_custom_domain)) -> TenantSummaryOut:
    return TenantSummaryOut.model_validate(ctx.tenant)
