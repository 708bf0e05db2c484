"""
Bearer-token check for the ingestion endpoint.

With no API key configured every request is accepted. That is an explicit
operator opt-in for trusted networks, not a production default.
"""

from typing import Optional

from ingest.errors import UnauthorizedError

MISSING_HEADER = "missing header"
MALFORMED_HEADER = "malformed header"
INVALID_KEY = "invalid key"


def requires_api_key(api_key: str) -> bool:
    return len(api_key) > 0


def is_valid_api_key(api_key: str, token: str) -> bool:
    # TODO: constant-time comparison via hmac.compare_digest
    return api_key == token.strip()


def check_authorization(authorization: Optional[str], api_key: str) -> None:
    """
    Raise UnauthorizedError unless the Authorization header carries the
    configured key as `Bearer <key>`. Returns None when authorized.
    """
    if not requires_api_key(api_key):
        return

    if not authorization:
        raise UnauthorizedError(
            "Unauthorized: Missing Authorization header", reason=MISSING_HEADER
        )

    scheme, sep, token = authorization.partition(" ")
    if not sep or scheme.lower() != "bearer":
        raise UnauthorizedError(
            "Unauthorized: Invalid Authorization header format", reason=MALFORMED_HEADER
        )

    if not is_valid_api_key(api_key, token):
        raise UnauthorizedError("Unauthorized: Invalid API key", reason=INVALID_KEY)
