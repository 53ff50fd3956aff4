"""Bearer token handling for owner identity.

Tokens are minted by the identity provider (scripts/create_dev_token.py in
development) with the owner id in the sub claim. This service only verifies
them; it never sees credentials.
"""

from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.core.config import get_settings
from app.domain.exceptions import AuthenticationException
from app.shared.utils.datetime import utc_now


def create_access_token(
    owner_id: str,
    expires_delta: timedelta | None = None,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Create a signed token whose sub claim is owner_id.

    Args:
        owner_id: Stable owner identifier (becomes the sub claim).
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.
        extra_claims: Optional additional claims (e.g. name for display).

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims: dict[str, Any] = dict(extra_claims or {})
    claims.update({"sub": owner_id, "iat": utc_now(), "exp": utc_now() + ttl})
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> str:
    """Verify token and return the owner id from its sub claim.

    Raises:
        AuthenticationException: If the token is invalid, expired, or has no sub.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise AuthenticationException("Invalid or expired token") from e
    owner_id = payload.get("sub")
    if not isinstance(owner_id, str) or not owner_id.strip():
        raise AuthenticationException("Token missing required claim: sub")
    return owner_id
