from __future__ import annotations

from dataclasses import dataclass


PLATFORM = 'platform'
CUSTOM_DOMAIN = 'custom_domain'
NOT_FOUND = 'not_found'
ERROR = 'error'

TENANT_CONFIG_NOT_FOUND = 'tenant configuration not found'
TENANT_SUSPENDED = 'this account is currently suspended'
UNEXPECTED_ERROR = 'unexpected error'


@dataclass(frozen=True)
class TenantSummary:
    id: str
    slug: str
    company_name: str
    logo_url: str | None = None
    landing_page_enabled: bool = False
    status: str = 'active'


@dataclass(frozen=True)
class DomainBinding:
    tenant_id: str
    domain: str
    subdomain: str | None = None
    is_verified: bool = False
    ssl_status: str | None = None


@dataclass(frozen=True)
class ResolutionOutcome:
    """The single decided result of classifying one hostname.

    Build instances through the classmethods so that exactly one variant's
    fields are populated.
    """

    kind: str  # platform | custom_domain | not_found | error
    tenant: TenantSummary | None = None
    binding: DomainBinding | None = None
    reason: str | None = None

    @classmethod
    def platform(cls) -> ResolutionOutcome:
        return cls(kind=PLATFORM)

    @classmethod
    def custom_domain(cls, tenant: TenantSummary, binding: DomainBinding | None = None) -> ResolutionOutcome:
        return cls(kind=CUSTOM_DOMAIN, tenant=tenant, binding=binding)

    @classmethod
    def not_found(cls) -> ResolutionOutcome:
        return cls(kind=NOT_FOUND)

    @classmethod
    def error(cls, reason: str) -> ResolutionOutcome:
        return cls(kind=ERROR, reason=reason)

    @property
    def is_custom_domain(self) -> bool:
        return self.kind == CUSTOM_DOMAIN


@dataclass(frozen=True)
class RouteContext:
    is_custom_domain: bool
    tenant: TenantSummary | None
    effective_slug: str | None
    domain_verified: bool | None = None

    @classmethod
    def from_outcome(cls, outcome: ResolutionOutcome) -> RouteContext:
        if outcome.is_custom_domain and outcome.tenant is not None:
            verified = outcome.binding.is_verified if outcome.binding is not None else None
            return cls(
                is_custom_domain=True,
                tenant=outcome.tenant,
                effective_slug=outcome.tenant.slug,
                domain_verified=verified,
            )
        return cls.platform()

    @classmethod
    def platform(cls) -> RouteContext:
        return cls(is_custom_domain=False, tenant=None, effective_slug=None)
