"""Session cookie endpoints and request authorization dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Cookie, Depends, Request, Response

from tastr.api.models import LoginClaims
from tastr.domain.errors import InvalidTokenError
from tastr.domain.identity import Identity  # noqa: TC001
from tastr.services.authorization import ensure_owner

if TYPE_CHECKING:
    from tastr.containers import AppContainer

TOKEN_COOKIE = "token"

router = APIRouter(prefix="/api/jwt", tags=["auth"])


def _cookie_flags(request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    production = container.settings.is_production
    return {
        "httponly": True,
        "secure": production,
        "samesite": "none" if production else "strict",
    }


async def require_identity(
    request: Request, token: str | None = Cookie(default=None)
) -> Identity:
    """Resolve the caller's identity from the session cookie."""
    if not token:
        raise InvalidTokenError("missing session cookie")
    container: AppContainer = request.app.state.container
    return container.token_service.verify(token)


async def require_owner_email(
    email: str | None = None,
    identity: Identity = Depends(require_identity),
) -> str:
    """Ensure the ``email`` query parameter names the authenticated caller."""
    ensure_owner(identity.email, email)
    return identity.email


@router.post("")
async def issue_token(
    claims: LoginClaims, request: Request, response: Response
) -> dict[str, bool]:
    """Sign the posted identity claims into the session cookie."""
    container: AppContainer = request.app.state.container
    token = container.token_service.issue(claims.model_dump())
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=int(container.token_service.lifetime.total_seconds()),
        **_cookie_flags(request),
    )
    return {"success": True}


@router.post("/logout")
async def clear_token(request: Request, response: Response) -> dict[str, bool]:
    """Clear the session cookie."""
    response.delete_cookie(TOKEN_COOKIE, **_cookie_flags(request))
    return {"logoutSuccess": True}
