from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Query, status
from sqlmodel import Session

from api.auth import get_request_context, verify_api_key
from api.models.envelope_schemas import ERROR_RESPONSES, PROSPECTO_EXAMPLE, Envelope
from api.responses import missing_query_response, to_response
from services.context import RequestContext
from services.prospecto_service import ProspectoService
from utils.database import get_db

router = APIRouter(
    prefix="/prospectos",
    tags=["Prospectos"],
    dependencies=[Depends(verify_api_key)],
    responses=ERROR_RESPONSES,
)


def get_prospecto_service(db: Session = Depends(get_db)) -> ProspectoService:
    return ProspectoService(db)


@router.get("", response_model=Envelope)
def list_prospectos(
    service: ProspectoService = Depends(get_prospecto_service),
    context: RequestContext = Depends(get_request_context),
):
    """List every candidate ordered by id."""
    return to_response(service.get_all(context))


@router.post("", response_model=Envelope, status_code=status.HTTP_201_CREATED)
def create_prospecto(
    payload: Dict[str, Any] = Body(..., examples=[PROSPECTO_EXAMPLE]),
    service: ProspectoService = Depends(get_prospecto_service),
    context: RequestContext = Depends(get_request_context),
):
    """
    Create a candidate.

    Body fields: `nombre` (string, max 255), `correo` (unique email),
    `fecha_registro` (ISO date).
    """
    return to_response(service.create(payload, context), success_status=status.HTTP_201_CREATED)


@router.get("/activos", response_model=Envelope)
def list_active_prospectos(
    service: ProspectoService = Depends(get_prospecto_service),
    context: RequestContext = Depends(get_request_context),
):
    """List candidates that have not been hired through any interview."""
    return to_response(service.get_active(context))


@router.get("/search", response_model=Envelope, responses={400: {"model": Envelope}})
def search_prospectos(
    q: str = Query("", description="Substring matched against nombre and correo"),
    service: ProspectoService = Depends(get_prospecto_service),
    context: RequestContext = Depends(get_request_context),
):
    if not q.strip():
        return missing_query_response()
    return to_response(service.search(q, context))


@router.get("/{prospecto_id}", response_model=Envelope)
def get_prospecto(
    prospecto_id: int,
    service: ProspectoService = Depends(get_prospecto_service),
    context: RequestContext = Depends(get_request_context),
):
    return to_response(service.get(prospecto_id, context))


@router.put("/{prospecto_id}", response_model=Envelope)
def update_prospecto(
    prospecto_id: int,
    payload: Dict[str, Any] = Body(..., examples=[PROSPECTO_EXAMPLE]),
    service: ProspectoService = Depends(get_prospecto_service),
    context: RequestContext = Depends(get_request_context),
):
    """Replace every field of a candidate. The candidate's own email does not count as taken."""
    return to_response(service.update(prospecto_id, payload, context))


@router.delete("/{prospecto_id}", response_model=Envelope)
def delete_prospecto(
    prospecto_id: int,
    service: ProspectoService = Depends(get_prospecto_service),
    context: RequestContext = Depends(get_request_context),
):
    return to_response(service.delete(prospecto_id, context))
