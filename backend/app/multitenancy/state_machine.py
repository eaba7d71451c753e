from __future__ import annotations

from enum import Enum

from app.multitenancy.host_classifier import normalize_host
from app.multitenancy.outcome import CUSTOM_DOMAIN, ERROR, NOT_FOUND, PLATFORM, ResolutionOutcome, RouteContext
from app.multitenancy.path_rewriter import Navigation, rewrite_path


class RouteState(str, Enum):
    LOADING = 'loading'
    PLATFORM = 'platform'
    CUSTOM_DOMAIN = 'custom_domain'
    NOT_FOUND = 'not_found'
    ERROR = 'error'


_STATE_BY_KIND = {
    PLATFORM: RouteState.PLATFORM,
    CUSTOM_DOMAIN: RouteState.CUSTOM_DOMAIN,
    NOT_FOUND: RouteState.NOT_FOUND,
    ERROR: RouteState.ERROR,
}


class RoutingStateMachine:
    """Tracks the routing state for one hostname.

    ``begin`` hands out a ticket for each resolution pass. Only the latest
    ticket may complete, and nothing completes after ``teardown``.
    """

    def __init__(self) -> None:
        self._state = RouteState.LOADING
        self._host: str | None = None
        self._outcome: ResolutionOutcome | None = None
        self._context: RouteContext | None = None
        self._ticket = 0
        self._torn_down = False

    @property
    def state(self) -> RouteState:
        return self._state

    @property
    def host(self) -> str | None:
        return self._host

    @property
    def outcome(self) -> ResolutionOutcome | None:
        return self._outcome

    @property
    def context(self) -> RouteContext | None:
        return self._context

    @property
    def is_torn_down(self) -> bool:
        return self._torn_down

    def begin(self, host: str | None) -> int:
        if self._torn_down:
            raise RuntimeError('Routing state machine was torn down')
        self._host = normalize_host(host)
        self._state = RouteState.LOADING
        self._outcome = None
        self._context = None
        self._ticket += 1
        return self._ticket

    def retry(self) -> int:
        return self.begin(self._host)

    def complete(self, ticket: int, outcome: ResolutionOutcome) -> bool:
        if self._torn_down or ticket != self._ticket:
            return False
        self._outcome = outcome
        self._state = _STATE_BY_KIND[outcome.kind]
        self._context = RouteContext.from_outcome(outcome)
        return True

    def navigate(self, path: str) -> Navigation:
        if self._state is not RouteState.CUSTOM_DOMAIN or self._context is None:
            return Navigation.none(path)
        return rewrite_path(path, self._context.effective_slug)

    def teardown(self) -> None:
        self._torn_down = True
