from __future__ import annotations

import re
from dataclasses import dataclass


_LEGACY_TENANT_PATH = re.compile(r'^/(?P<prefix>[pt])/(?P<slug>[^/]+)/?$')

_CLEAN_PATHS = {
    'p': '/',
    't': '/login',
}


@dataclass(frozen=True)
class Navigation:
    """Where the request should be served from.

    ``replace`` swaps the path in-process: the client never sees a redirect
    and the externally visible address stays as requested.
    """

    kind: str  # none | replace
    path: str

    @classmethod
    def none(cls, path: str) -> Navigation:
        return cls(kind='none', path=path)

    @classmethod
    def replace(cls, path: str) -> Navigation:
        return cls(kind='replace', path=path)

    @property
    def is_replace(self) -> bool:
        return self.kind == 'replace'


def rewrite_path(path: str, tenant_slug: str | None) -> Navigation:
    match = _LEGACY_TENANT_PATH.match(path or '')
    if not match or not tenant_slug or match.group('slug') != tenant_slug:
        return Navigation.none(path)
    return Navigation.replace(_CLEAN_PATHS[match.group('prefix')])
