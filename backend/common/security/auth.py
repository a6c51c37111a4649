"""
Bearer token extraction.

Tokens are never validated locally; they are only forwarded to the identity
provider, which owns token issuance and revocation.
"""
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# auto_error=False: a missing header is allowed, the route decides what that means
security = HTTPBearer(auto_error=False)


async def get_optional_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str | None:
    """Return the raw bearer token from the Authorization header, if any."""
    if not credentials or not credentials.credentials:
        return None
    return credentials.credentials
