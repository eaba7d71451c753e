from fastapi import APIRouter, Depends

from app.multitenancy.deps import get_route_context
from app.multitenancy.outcome import RouteContext
from app.schemas.domain import PageViewOut, TenantSummaryOut


# Page content itself is rendered elsewhere; these routes only pick the view.
router = APIRouter(tags=['pages'])


def _tenant_view(view: str, ctx: RouteContext) -> PageViewOut:
    return PageViewOut(
        view=view,
        slug=ctx.effective_slug,
        tenant=TenantSummaryOut.model_validate(ctx.tenant) if ctx.tenant else None,
    )


@router.get('/', response_model=PageViewOut)
def landing(ctx: RouteContext = Depends(get_route_context)) -> PageViewOut:
    if ctx.is_custom_domain and ctx.tenant:
        view = 'tenant_landing' if ctx.tenant.landing_page_enabled else 'tenant_login'
        return _tenant_view(view, ctx)
    return PageViewOut(view='platform_landing')


@router.get('/login', response_model=PageViewOut)
def login(ctx: RouteContext = Depends(get_route_context)) -> PageViewOut:
    if ctx.is_custom_domain and ctx.tenant:
        return _tenant_view('tenant_login', ctx)
    return PageViewOut(view='platform_login')


@router.get('/p/{slug}', response_model=PageViewOut)
def tenant_landing_by_slug(slug: str) -> PageViewOut:
    return PageViewOut(view='tenant_landing', slug=slug)


@router.get('/t/{slug}', response_model=PageViewOut)
def tenant_login_by_slug(slug: str) -> PageViewOut:
    return PageViewOut(view='tenant_login', slug=slug)
