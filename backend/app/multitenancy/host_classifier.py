from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from app.core.config import Settings


def normalize_host(host: str | None) -> str:
    host = (host or '').strip().lower()
    if host.startswith('['):
        end = host.find(']')
        return host[: end + 1] if end != -1 else host
    host = host.split(':', 1)[0]
    return host.rstrip('.')


def strip_www(host: str) -> str:
    return host[4:] if host.startswith('www.') else host


def _match_base_domain(host: str, base_domains: Iterable[str]) -> str | None:
    for base in base_domains:
        if host == base:
            return base
        if host.endswith(f'.{base}'):
            return base
    return None


@dataclass(frozen=True)
class HostClassifier:
    exact_hosts: frozenset[str]
    domain_suffixes: tuple[str, ...] = ()
    preview_markers: tuple[str, ...] = ()

    @classmethod
    def from_settings(cls, settings: Settings) -> HostClassifier:
        return cls(
            exact_hosts=frozenset(settings.platform_hosts),
            domain_suffixes=tuple(settings.platform_domains),
            preview_markers=tuple(settings.preview_markers),
        )

    def is_platform(self, host: str) -> bool:
        """Return True when the host belongs to platform infrastructure.

        Rules run in order: reserved exact hosts, platform domain suffixes,
        then preview-environment markers. Anything else is a candidate
        tenant domain.
        """
        normalized = normalize_host(host)
        if not normalized:
            return False
        if normalized in self.exact_hosts:
            return True
        if _match_base_domain(normalized, self.domain_suffixes):
            return True
        return any(marker in normalized for marker in self.preview_markers)
