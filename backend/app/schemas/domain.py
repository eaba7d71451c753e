from pydantic import BaseModel

from app.schemas.common import BaseSchema


class TenantSummaryOut(BaseSchema):
    id: str
    slug: str
    company_name: str
    logo_url: str | None = None
    landing_page_enabled: bool = False
    status: str


class DomainBindingOut(BaseSchema):
    tenant_id: str
    domain: str
    subdomain: str | None = None
    is_verified: bool = False
    ssl_status: str | None = None


class DomainResolveResponse(BaseModel):
    success: bool = True
    found: bool
    domain: DomainBindingOut | None = None
    tenant: TenantSummaryOut | None = None


class RouteContextOut(BaseModel):
    mode: str
    is_custom_domain: bool
    effective_slug: str | None = None
    tenant: TenantSummaryOut | None = None
    domain_verified: bool | None = None


class PageViewOut(BaseModel):
    view: str
    slug: str | None = None
    tenant: TenantSummaryOut | None = None
