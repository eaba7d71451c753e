import httpx
import pytest

from app.multitenancy.remote import RemoteResolver, candidate_bases, normalize_base, parse_resolve_payload

TENANT_ID = '6f1c2a8e-3d7b-4f0a-9c55-0b2d1e4a7c11'


def _found_payload(**tenant_overrides) -> dict:
    tenant = {
        'id': TENANT_ID,
        'slug': 'acme',
        'company_name': 'Acme Networks',
        'logo_url': None,
        'landing_page_enabled': True,
        'status': 'active',
    }
    tenant.update(tenant_overrides)
    return {
        'success': True,
        'found': True,
        'domain': {'tenant_id': TENANT_ID, 'domain': 'acme.net', 'subdomain': None, 'is_verified': True},
        'tenant': tenant,
    }


@pytest.mark.parametrize(
    ('raw', 'expected'),
    [
        ('https://API.Example.com/', 'https://api.example.com'),
        ('https://api.example.com/api', 'https://api.example.com'),
        ('https://api.example.com/api/', 'https://api.example.com'),
        ('api.example.com', 'https://api.example.com'),
        ('http://10.0.0.5:3001/poller', 'http://10.0.0.5:3001/poller'),
        ('   ', None),
        (None, None),
    ],
)
def test_normalize_base(raw, expected) -> None:
    assert normalize_base(raw) == expected


def test_candidate_bases_dedupe_after_normalizing() -> None:
    bases = candidate_bases(['https://a.example.com/api', None, 'https://A.example.com/', 'b.example.com'])

    assert bases == ['https://a.example.com', 'https://b.example.com']


def test_payload_without_found_flag_is_ignored() -> None:
    assert parse_resolve_payload({'success': True, 'found': False}, 'acme.net') is None
    assert parse_resolve_payload({'found': 'true', 'domain': {'tenant_id': TENANT_ID}}, 'acme.net') is None
    assert parse_resolve_payload({'found': True, 'domain': {}}, 'acme.net') is None
    assert parse_resolve_payload(['found'], 'acme.net') is None


def test_payload_with_embedded_tenant() -> None:
    match = parse_resolve_payload(_found_payload(), 'acme.net')

    assert match.binding.tenant_id == TENANT_ID
    assert match.tenant.slug == 'acme'
    assert match.tenant.landing_page_enabled is True


def test_payload_with_partial_or_mismatched_tenant_falls_back_to_id() -> None:
    partial = _found_payload()
    partial['tenant'] = {'id': TENANT_ID, 'slug': 'acme'}
    assert parse_resolve_payload(partial, 'acme.net').tenant is None

    mismatched = _found_payload(id='someone-else')
    assert parse_resolve_payload(mismatched, 'acme.net').tenant is None

    missing = _found_payload()
    missing['tenant'] = None
    match = parse_resolve_payload(missing, 'acme.net')
    assert match.tenant is None
    assert match.binding.tenant_id == TENANT_ID


def test_resolver_queries_resolve_path_with_host() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_found_payload())

    resolver = RemoteResolver(['https://api.example.com/api'], timeout_ms=500, transport=httpx.MockTransport(handler))
    match = resolver.resolve('acme.net')

    assert match is not None
    assert len(seen) == 1
    assert seen[0].url.path == '/api/domains/resolve'
    assert seen[0].url.params['host'] == 'acme.net'


def test_timeout_moves_to_next_base_without_retrying() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.host)
        if request.url.host == 'slow.example.com':
            raise httpx.ReadTimeout('timed out', request=request)
        return httpx.Response(200, json=_found_payload(slug='second'))

    resolver = RemoteResolver(
        ['https://slow.example.com', 'https://fast.example.com'],
        timeout_ms=500,
        transport=httpx.MockTransport(handler),
    )
    match = resolver.resolve('acme.net')

    assert match.tenant.slug == 'second'
    assert calls == ['slow.example.com', 'fast.example.com']


def test_bad_responses_are_skipped() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.host)
        if request.url.host == 'down.example.com':
            return httpx.Response(502, json={'success': False})
        if request.url.host == 'html.example.com':
            return httpx.Response(200, text='<html>maintenance</html>')
        return httpx.Response(200, json={'success': True, 'found': False})

    resolver = RemoteResolver(
        ['https://down.example.com', 'https://html.example.com', 'https://empty.example.com'],
        timeout_ms=500,
        transport=httpx.MockTransport(handler),
    )

    assert resolver.resolve('acme.net') is None
    assert calls == ['down.example.com', 'html.example.com', 'empty.example.com']


def test_no_bases_means_no_requests() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError('no request expected')

    resolver = RemoteResolver([], timeout_ms=500, transport=httpx.MockTransport(handler))

    assert resolver.resolve('acme.net') is None
