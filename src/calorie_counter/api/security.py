"""Bearer token auth for API routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Header, HTTPException, Request, status

from calorie_counter.config import parse_api_tokens

if TYPE_CHECKING:
    from calorie_counter.containers import AppContainer


def bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer`` header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def api_tokens_for(request: Request) -> set[str] | None:
    """Return the accepted tokens, or None when auth is disabled."""
    container: AppContainer = request.app.state.container
    return parse_api_tokens(container.settings.api_tokens)


async def require_api_token(
    authorization: str | None = Header(default=None),
    api_tokens: set[str] | None = Depends(api_tokens_for),
) -> str | None:
    """Ensure requests carry a valid bearer token when tokens are configured."""
    token = bearer_token(authorization)
    if api_tokens is None:
        return token
    if token is None or token not in api_tokens:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token
