from fastapi.testclient import TestClient


def test_resolve_requires_host(client: TestClient) -> None:
    response = client.get('/api/domains/resolve')

    assert response.status_code == 400
    assert response.json()['detail'] == 'host is required'


def test_resolve_unknown_host(client: TestClient) -> None:
    response = client.get('/api/domains/resolve', params={'host': 'nobody.net'})

    assert response.status_code == 200
    assert response.json() == {'success': True, 'found': False}


def test_resolve_exact_binding(client: TestClient, make_tenant, bind_domain) -> None:
    tenant = make_tenant('acme')
    bind_domain(tenant, 'acme.net')

    response = client.get('/api/domains/resolve', params={'host': 'WWW.Acme.net:8080'})

    payload = response.json()
    assert payload['found'] is True
    assert payload['domain']['tenant_id'] == str(tenant.id)
    assert payload['domain']['domain'] == 'acme.net'
    assert payload['tenant']['slug'] == 'acme'
    assert payload['tenant']['status'] == 'active'


def test_resolve_reports_suspended_tenant_without_gating(client: TestClient, make_tenant, bind_domain) -> None:
    tenant = make_tenant('late', status='suspended')
    bind_domain(tenant, 'tenantdomain.com', subdomain='sales', is_verified=False)

    response = client.get('/domains/resolve', params={'hostname': 'sales.tenantdomain.com'})

    payload = response.json()
    assert payload['found'] is True
    assert payload['domain']['subdomain'] == 'sales'
    assert payload['domain']['is_verified'] is False
    assert payload['tenant']['status'] == 'suspended'


def test_resolve_endpoint_works_on_tenant_hosts(client: TestClient) -> None:
    response = client.get('/api/domains/resolve', params={'host': 'nobody.net'}, headers={'host': 'nobody.net'})

    assert response.status_code == 200
    assert response.json()['found'] is False
