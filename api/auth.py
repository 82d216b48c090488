from pydantic import BaseModel
from fastapi import HTTPException, Security, status, Depends
from fastapi.security import APIKeyHeader
from sqlmodel import Session

from repositories.api_key_repository import APIKeyRepository
from services.context import RequestContext
from utils.database import get_db

# Define API Key security scheme for OpenAPI/Swagger
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


class APIKeyContext(BaseModel):
    """Context info extracted from verified API key."""
    api_key_id: int
    api_key_name: str


def verify_api_key(
    api_key: str = Security(api_key_header),
    db: Session = Depends(get_db),
) -> APIKeyContext:
    """
    Dependency to verify API key from X-API-Key header, backed by api_keys table.

    Returns:
        APIKeyContext: API key metadata for use in routes

    Raises:
        HTTPException: If API key is missing, invalid, inactive, or the lookup fails.
    """
    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key",
            headers={"WWW-Authenticate": "ApiKey"},
        )

    try:
        repo = APIKeyRepository(db)
        record = repo.get_by_raw_key(api_key)

        if not record:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid API key",
                headers={"WWW-Authenticate": "ApiKey"},
            )

        if not record.is_active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="API key is inactive",
                headers={"WWW-Authenticate": "ApiKey"},
            )

        repo.touch_last_used(record)

        return APIKeyContext(api_key_id=record.id, api_key_name=record.name)
    except HTTPException:
        raise
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to validate API key",
        )


def get_request_context(
    api_key_context: APIKeyContext = Depends(verify_api_key),
) -> RequestContext:
    """
    Turn the verified API key into the context passed to service calls.

    Usage:
        @router.get("/vacantes")
        def list_vacantes(context: RequestContext = Depends(get_request_context)):
            return service.get_all(context)
    """
    return RequestContext(actor=api_key_context.api_key_name, api_key_id=api_key_context.api_key_id)
