from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit, urlunsplit

import httpx

from app.core.config import settings
from app.multitenancy.outcome import DomainBinding, TenantSummary


logger = logging.getLogger(__name__)

RESOLVE_PATH = '/api/domains/resolve'


def normalize_base(raw: str | None) -> str | None:
    value = (raw or '').strip()
    if not value:
        return None
    if '://' not in value:
        value = f'https://{value}'
    parts = urlsplit(value)
    if not parts.netloc:
        return None
    path = parts.path.rstrip('/')
    if path.endswith('/api'):
        path = path[: -len('/api')]
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), path, '', ''))


def candidate_bases(raw_bases: Iterable[str | None]) -> list[str]:
    normalized = (normalize_base(base) for base in raw_bases)
    return list(dict.fromkeys(base for base in normalized if base))


@dataclass(frozen=True)
class RemoteMatch:
    binding: DomainBinding
    tenant: TenantSummary | None = None


def _parse_tenant(data: Any, tenant_id: str) -> TenantSummary | None:
    if not isinstance(data, dict):
        return None
    if not data.get('id') or not data.get('slug') or not data.get('status'):
        return None
    if str(data['id']) != tenant_id:
        return None
    return TenantSummary(
        id=str(data['id']),
        slug=str(data['slug']),
        company_name=str(data.get('company_name') or ''),
        logo_url=data.get('logo_url') or None,
        landing_page_enabled=data.get('landing_page_enabled') is True,
        status=str(data['status']),
    )


def parse_resolve_payload(data: Any, host: str) -> RemoteMatch | None:
    """Interpret a resolve response body; None unless it reports a usable binding."""
    if not isinstance(data, dict) or data.get('found') is not True:
        return None
    domain = data.get('domain')
    if not isinstance(domain, dict) or not domain.get('tenant_id'):
        return None

    tenant_id = str(domain['tenant_id'])
    binding = DomainBinding(
        tenant_id=tenant_id,
        domain=str(domain.get('domain') or host),
        subdomain=domain.get('subdomain') or None,
        is_verified=domain.get('is_verified') is True,
        ssl_status=domain.get('ssl_status'),
    )
    return RemoteMatch(binding=binding, tenant=_parse_tenant(data.get('tenant'), tenant_id))


class RemoteResolver:
    """Asks remote resolve endpoints about a hostname, strictly one base at a time."""

    def __init__(
        self,
        bases: Iterable[str | None],
        *,
        timeout_ms: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.bases = candidate_bases(bases)
        self.timeout_ms = timeout_ms
        self._transport = transport

    def resolve(self, host: str) -> RemoteMatch | None:
        if not self.bases:
            return None
        with httpx.Client(timeout=httpx.Timeout(self.timeout_ms / 1000.0), transport=self._transport) as client:
            for base in self.bases:
                match = self._try_base(client, base, host)
                if match:
                    return match
        return None

    def _try_base(self, client: httpx.Client, base: str, host: str) -> RemoteMatch | None:
        url = f'{base}{RESOLVE_PATH}'
        try:
            resp = client.get(url, params={'host': host})
        except httpx.HTTPError as exc:
            logger.warning('Remote domain resolve via %s failed for %s: %s', base, host, exc)
            return None
        if not resp.is_success:
            logger.warning('Remote domain resolve via %s returned %s for %s', base, resp.status_code, host)
            return None
        try:
            data = resp.json()
        except ValueError:
            logger.warning('Remote domain resolve via %s returned a non-JSON body for %s', base, host)
            return None
        return parse_resolve_payload(data, host)


def get_remote_resolver() -> RemoteResolver:
    return RemoteResolver(settings.resolve_api_bases, timeout_ms=settings.RESOLVE_TIMEOUT_MS)
