from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from app.core.config import settings
from app.multitenancy.orchestrator import build_orchestrator
from app.multitenancy.outcome import ResolutionOutcome
from app.multitenancy.remote import get_remote_resolver
from app.multitenancy.state_machine import RouteState, RoutingStateMachine


logger = logging.getLogger(__name__)

NOT_FOUND_GUIDANCE = (
    'If you own this domain, confirm it is added and verified in your ISP dashboard '
    'and that its DNS points at the platform.'
)


def get_request_host(request: Request) -> str | None:
    host = request.headers.get('x-forwarded-host') if settings.TRUST_PROXY_HEADERS else None
    if host:
        return host.split(',')[0].strip()
    return request.headers.get('host')


def _diagnostic_response(request: Request, machine: RoutingStateMachine) -> JSONResponse:
    headers = {'Cache-Control': 'no-store'}
    if machine.state is RouteState.NOT_FOUND:
        return JSONResponse(
            status_code=404,
            headers=headers,
            content={
                'state': machine.state.value,
                'host': machine.host,
                'detail': 'No tenant is configured for this domain',
                'guidance': NOT_FOUND_GUIDANCE,
                'retry_url': str(request.url),
            },
        )
    reason = machine.outcome.reason if machine.outcome else None
    return JSONResponse(
        status_code=503,
        headers=headers,
        content={
            'state': machine.state.value,
            'host': machine.host,
            'detail': reason,
            'retry_url': str(request.url),
        },
    )


class CustomDomainMiddleware:
    """Resolves the request host to a tenant before routing.

    Custom-domain requests get ``request.state.route_context`` and have
    legacy slug paths swapped for their clean equivalents in-process.
    Unknown or unservable domains are answered with a diagnostic.
    """

    def __init__(self, app: ASGIApp, *, session_factory: Callable[[], Session]) -> None:
        self.app = app
        self.session_factory = session_factory

    def _is_exempt(self, path: str) -> bool:
        return any(path == prefix or path.startswith(f'{prefix}/') for prefix in settings.routing_exempt_paths)

    def _resolve(self, host: str | None) -> ResolutionOutcome:
        with self.session_factory() as db:
            orchestrator = build_orchestrator(db, remote_resolver=get_remote_resolver())
            return orchestrator.resolve(host)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope['type'] != 'http' or self._is_exempt(scope['path']):
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        machine = RoutingStateMachine()
        ticket = machine.begin(get_request_host(request))
        try:
            outcome = await run_in_threadpool(self._resolve, machine.host)
            machine.complete(ticket, outcome)

            if machine.state in (RouteState.NOT_FOUND, RouteState.ERROR):
                response = _diagnostic_response(request, machine)
                await response(scope, receive, send)
                return

            request.state.route_context = machine.context
            navigation = machine.navigate(scope['path'])
            if navigation.is_replace:
                logger.debug('Serving %s as %s for host %s', scope['path'], navigation.path, machine.host)
                scope = dict(scope, path=navigation.path, raw_path=navigation.path.encode('utf-8'))
            await self.app(scope, receive, send)
        finally:
            machine.teardown()
