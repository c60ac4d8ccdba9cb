"""
Authentication dependencies.

Every todo route is gated by the same chain: the ``Authorization`` header
must be present, then it must match exactly one registered user. The raw
header value is the API key; no ``Bearer`` scheme is parsed.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import APIKeyHeader
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.crud.user import user as user_crud
from todo_api.database import get_db
from todo_api.schemas.user import Principal
from todo_api.utils.logging_config import get_logger

logger = get_logger(__name__)

# Define the API key header security scheme for Swagger UI
api_key_header_scheme = APIKeyHeader(
    name="Authorization",
    scheme_name="ApiKeyAuth",
    description="API key returned by /register, sent as the raw header value.",
    auto_error=False,
)


async def get_api_key(
    api_key_value: Optional[str] = Security(api_key_header_scheme),
) -> str:
    """
    Presence check: return the API key from the Authorization header.

    Raises:
        HTTPException: 403 if the header is missing or empty
    """
    if not api_key_value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="No api token",
        )
    return api_key_value


async def get_current_user(
    request: Request,
    api_key: str = Depends(get_api_key),
    db: AsyncSession = Depends(get_db),
) -> Principal:
    """
    Validity check and identity attachment in a single lookup.

    The principal is also stored on ``request.state.principal``.

    Args:
        request: Incoming request
        api_key: Key that passed the presence check
        db: Database session

    Returns:
        The authenticated principal

    Raises:
        HTTPException: 403 if no user holds the key
    """
    user_obj = await user_crud.get_by_api_key(db, api_key=api_key)

    if not user_obj:
        logger.warning(f"Rejected unknown api token on {request.method} {request.url.path}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid api token",
        )

    principal = Principal.model_validate(user_obj)
    request.state.principal = principal
    return principal
