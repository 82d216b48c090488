"""Map service results to HTTP responses."""

from typing import Dict, Type

from fastapi import status
from fastapi.responses import JSONResponse

from config.settings import settings
from services.result import Conflict, NotFound, Ok, ServiceResult, SystemFailure, ValidationFailed

STATUS_BY_RESULT: Dict[Type, int] = {
    Ok: status.HTTP_200_OK,
    ValidationFailed: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NotFound: status.HTTP_404_NOT_FOUND,
    Conflict: status.HTTP_409_CONFLICT,
    SystemFailure: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_response(result: ServiceResult, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """
    Render a service result as a JSON envelope.

    Args:
        result: Result returned by a service operation
        success_status: Status for Ok results (201 for creates)
    """
    status_code = success_status if isinstance(result, Ok) else STATUS_BY_RESULT[type(result)]
    return JSONResponse(
        status_code=status_code,
        content=result.to_envelope(expose_details=settings.EXPOSE_ERROR_DETAILS),
    )


def missing_query_response() -> JSONResponse:
    """400 returned by search endpoints called without `q`."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Query parameter is required"},
    )
