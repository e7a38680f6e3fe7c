from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from app.core.config import settings
from app.utils.ledger_validation import is_null_identity

# The gateway in front of the API authenticates the caller and forwards the
# verified identity in this header.
identity_header = APIKeyHeader(name=settings.IDENTITY_HEADER, auto_error=False)

async def get_caller_identity(identity: str | None = Depends(identity_header)) -> str:
    """Get the calling identity from the request."""
    if is_null_identity(identity):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing or null {settings.IDENTITY_HEADER} header"
        )
    return identity
