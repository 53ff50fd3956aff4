"""Identity dependency: owner id from the bearer token (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.domain.exceptions import AuthenticationException
from app.infrastructure.security.jwt import verify_token
from app.shared.context import set_current_owner

_http_bearer = HTTPBearer(auto_error=False)


async def get_owner_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str:
    """Return the verified owner id (token sub); raise 401 if missing or invalid."""
    if credentials is None:
        raise AuthenticationException("Not authenticated")
    owner_id = verify_token(credentials.credentials)
    set_current_owner(owner_id)
    return owner_id
