"""Security and caller identity utilities."""
from typing import Optional
from fastapi import Header, Security, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.config import ADMIN_API_KEY, CALLER_IDENTITY_HEADER

security_scheme = HTTPBearer()


def verify_admin_key(credentials: HTTPAuthorizationCredentials = Security(security_scheme)):
    """Verifies the token provided in the Authorization header."""
    if credentials.credentials != ADMIN_API_KEY:
        raise HTTPException(
            status_code=403,
            detail="Invalid or missing API Key for audit access."
        )
    return True


def get_caller_identity(
    caller: Optional[str] = Header(default=None, alias=CALLER_IDENTITY_HEADER)
) -> str:
    """Returns the authenticated caller identity set by the host environment.

    The value is opaque: it is compared, stored and logged, never parsed.
    """
    if caller is None or not caller.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing caller identity header '{CALLER_IDENTITY_HEADER}'."
        )
    return caller.strip()
