from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from sqlalchemy.orm import Session

from app.core.config import settings
from app.multitenancy.host_classifier import HostClassifier, normalize_host
from app.multitenancy.outcome import UNEXPECTED_ERROR, ResolutionOutcome
from app.multitenancy.registry import lookup_binding
from app.multitenancy.remote import RemoteResolver, get_remote_resolver
from app.multitenancy.status_gate import check_status, gate_tenant


logger = logging.getLogger(__name__)


class ResolverStrategy(Protocol):
    name: str

    def __call__(self, host: str) -> ResolutionOutcome | None: ...


class RegistryStrategy:
    name = 'registry'

    def __init__(self, db: Session) -> None:
        self.db = db

    def __call__(self, host: str) -> ResolutionOutcome | None:
        binding = lookup_binding(self.db, host)
        if not binding:
            return None
        if not binding.is_verified:
            logger.info('Host %s matched unverified binding %s', host, binding.domain)
        return gate_tenant(self.db, binding.tenant_id, binding)


class RemoteStrategy:
    name = 'remote'

    def __init__(self, db: Session, resolver: RemoteResolver) -> None:
        self.db = db
        self.resolver = resolver

    def __call__(self, host: str) -> ResolutionOutcome | None:
        # Reads only; hand the connection back to the pool while remote bases are tried.
        self.db.rollback()
        match = self.resolver.resolve(host)
        if not match:
            return None
        if match.tenant is not None:
            return check_status(match.tenant, match.binding)
        return gate_tenant(self.db, match.binding.tenant_id, match.binding)


class ResolutionOrchestrator:
    """Folds over resolver strategies in order and keeps the first outcome.

    Platform hosts short-circuit before any strategy runs. Exceptions raised
    by a strategy end the pass with an unexpected-error outcome.
    """

    def __init__(self, classifier: HostClassifier, strategies: Sequence[ResolverStrategy]) -> None:
        self.classifier = classifier
        self.strategies = tuple(strategies)

    def resolve(self, raw_host: str | None) -> ResolutionOutcome:
        host = normalize_host(raw_host)
        if self.classifier.is_platform(host):
            return ResolutionOutcome.platform()
        if not host:
            return ResolutionOutcome.not_found()

        try:
            for strategy in self.strategies:
                outcome = strategy(host)
                if outcome is not None:
                    logger.debug('Host %s resolved by %s strategy: %s', host, strategy.name, outcome.kind)
                    return outcome
        except Exception:  # noqa: BLE001
            logger.exception('Unexpected error while resolving host %s', host)
            return ResolutionOutcome.error(UNEXPECTED_ERROR)

        return ResolutionOutcome.not_found()


def build_orchestrator(db: Session, *, remote_resolver: RemoteResolver | None = None) -> ResolutionOrchestrator:
    return ResolutionOrchestrator(
        HostClassifier.from_settings(settings),
        [
            RegistryStrategy(db),
            RemoteStrategy(db, remote_resolver or get_remote_resolver()),
        ],
    )
