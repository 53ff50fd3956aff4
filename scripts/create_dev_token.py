"""Mint a development bearer token for an owner id.

In production tokens come from the identity provider; this script signs one
with the local SECRET_KEY so the API can be exercised with curl.

Usage:
    uv run python -m scripts.create_dev_token <owner_id> [ttl_minutes]
All imports use app.*.
"""

import sys
from datetime import timedelta

from dotenv import load_dotenv

from app.infrastructure.security.jwt import create_access_token


def main() -> None:
    """Print a signed token whose sub claim is the given owner id."""
    load_dotenv()
    if len(sys.argv) < 2:
        print(
            "Usage: uv run python -m scripts.create_dev_token <owner_id> [ttl_minutes]",
            file=sys.stderr,
        )
        sys.exit(1)
    owner_id = sys.argv[1]
    ttl = timedelta(minutes=int(sys.argv[2])) if len(sys.argv) > 2 else None
    print(create_access_token(owner_id, expires_delta=ttl))


if __name__ == "__main__":
    main()
