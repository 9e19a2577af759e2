"""Request rate limiting with slowapi."""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from calorie_counter.api.security import api_tokens_for, bearer_token
from calorie_counter.config import Settings


def client_identifier(request: Request) -> str:
    """Key requests by validated API token, falling back to the client address.

    Unverified tokens share the caller's address bucket so they cannot open
    fresh windows.
    """
    token = bearer_token(request.headers.get("authorization"))
    api_tokens = api_tokens_for(request)
    if token is not None and api_tokens is not None and token in api_tokens:
        return f"token:{token}"
    return f"ip:{get_remote_address(request)}"


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter applying the configured rate to every limited route."""
    rate = (
        f"{settings.rate_limit_requests}/"
        f"{settings.rate_limit_window_seconds} seconds"
    )
    return Limiter(
        key_func=client_identifier,
        default_limits=[rate],
        headers_enabled=True,
        storage_uri="memory://",
    )
