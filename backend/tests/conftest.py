import os
import uuid
from collections.abc import Callable, Generator

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

os.environ.setdefault('DATABASE_URL', os.getenv('TEST_DATABASE_URL', 'sqlite://'))
os.environ.setdefault('APP_ENV', 'test')
os.environ.setdefault('CORS_ORIGINS', 'http://localhost:3001')
os.environ.setdefault('PLATFORM_HOSTS', 'testserver,localhost,oltapp.isppoint.com,www.oltapp.isppoint.com')
os.environ.setdefault('PLATFORM_DOMAINS', 'isppoint.com,sandbox-preview.dev')
os.environ.setdefault('PREVIEW_MARKERS', 'preview--')
os.environ.setdefault('RESOLVE_API_BASES', '')

from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.main import app
from app.models.tenant import Tenant, TenantCustomDomain
from app.multitenancy import middleware
from app.multitenancy.remote import RemoteResolver


@pytest.fixture(autouse=True)
def setup_database() -> Generator[None, None, None]:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as api_client:
        yield api_client


@pytest.fixture()
def make_tenant(db_session: Session) -> Callable[..., Tenant]:
    def _make(slug: str, *, status: str = 'active', landing_page_enabled: bool = True) -> Tenant:
        tenant = Tenant(
            id=uuid.uuid4(),
            slug=slug,
            company_name=f'{slug.title()} Networks',
            logo_url=f'https://cdn.example.net/{slug}.png',
            landing_page_enabled=landing_page_enabled,
            status=status,
        )
        db_session.add(tenant)
        db_session.commit()
        return tenant

    return _make


@pytest.fixture()
def bind_domain(db_session: Session) -> Callable[..., TenantCustomDomain]:
    def _bind(
        tenant: Tenant,
        domain: str,
        *,
        subdomain: str | None = None,
        is_verified: bool = True,
    ) -> TenantCustomDomain:
        row = TenantCustomDomain(
            tenant_id=tenant.id,
            domain=domain,
            subdomain=subdomain,
            is_verified=is_verified,
            ssl_status='active' if is_verified else 'pending',
        )
        db_session.add(row)
        db_session.commit()
        return row

    return _bind


@pytest.fixture()
def remote_calls() -> list[str]:
    return []


@pytest.fixture()
def use_remote(monkeypatch: pytest.MonkeyPatch, remote_calls: list[str]) -> Callable[..., RemoteResolver]:
    """Route the middleware's remote fallback through a fake transport."""

    def _install(bases: list[str], handler: Callable[[httpx.Request], httpx.Response]) -> RemoteResolver:
        def _recording_handler(request: httpx.Request) -> httpx.Response:
            remote_calls.append(str(request.url))
            return handler(request)

        resolver = RemoteResolver(bases, timeout_ms=500, transport=httpx.MockTransport(_recording_handler))
        monkeypatch.setattr(middleware, 'get_remote_resolver', lambda: resolver)
        return resolver

    return _install
