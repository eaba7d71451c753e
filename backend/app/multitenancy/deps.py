from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status

from app.multitenancy.outcome import RouteContext


def get_route_context(request: Request) -> RouteContext:
    # Exempt paths skip resolution and are always served as platform traffic.
    ctx = getattr(request.state, 'route_context', None)
    return ctx if isinstance(ctx, RouteContext) else RouteContext.platform()


def require_custom_domain(ctx: RouteContext = Depends(get_route_context)) -> RouteContext:
    if not ctx.is_custom_domain:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Not a custom domain host')
    return ctx
