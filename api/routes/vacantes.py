from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Query, status
from sqlmodel import Session

from api.auth import get_request_context, verify_api_key
from api.models.envelope_schemas import ERROR_RESPONSES, VACANTE_EXAMPLE, Envelope
from api.responses import missing_query_response, to_response
from services.context import RequestContext
from services.vacante_service import VacanteService
from utils.database import get_db

router = APIRouter(
    prefix="/vacantes",
    tags=["Vacantes"],
    dependencies=[Depends(verify_api_key)],
    responses=ERROR_RESPONSES,
)


def get_vacante_service(db: Session = Depends(get_db)) -> VacanteService:
    return VacanteService(db)


@router.get("", response_model=Envelope)
def list_vacantes(
    service: VacanteService = Depends(get_vacante_service),
    context: RequestContext = Depends(get_request_context),
):
    """List every vacancy ordered by id."""
    return to_response(service.get_all(context))


@router.post("", response_model=Envelope, status_code=status.HTTP_201_CREATED)
def create_vacante(
    payload: Dict[str, Any] = Body(..., examples=[VACANTE_EXAMPLE]),
    service: VacanteService = Depends(get_vacante_service),
    context: RequestContext = Depends(get_request_context),
):
    """
    Create a vacancy.

    Body fields: `area` (string, max 255), `sueldo` (number >= 0), `activo` (boolean).
    Returns 201 with the stored vacancy or 422 with errors by field.
    """
    return to_response(service.create(payload, context), success_status=status.HTTP_201_CREATED)


@router.get("/activas", response_model=Envelope)
def list_active_vacantes(
    service: VacanteService = Depends(get_vacante_service),
    context: RequestContext = Depends(get_request_context),
):
    """List vacancies with `activo = true`."""
    return to_response(service.get_active(context))


@router.get("/search", response_model=Envelope, responses={400: {"model": Envelope}})
def search_vacantes(
    q: str = Query("", description="Substring matched against the vacancy area"),
    service: VacanteService = Depends(get_vacante_service),
    context: RequestContext = Depends(get_request_context),
):
    """Search vacancies whose area contains `q`."""
    if not q.strip():
        return missing_query_response()
    return to_response(service.search(q, context))


@router.get("/{vacante_id}", response_model=Envelope)
def get_vacante(
    vacante_id: int,
    service: VacanteService = Depends(get_vacante_service),
    context: RequestContext = Depends(get_request_context),
):
    return to_response(service.get(vacante_id, context))


@router.put("/{vacante_id}", response_model=Envelope)
def update_vacante(
    vacante_id: int,
    payload: Dict[str, Any] = Body(..., examples=[VACANTE_EXAMPLE]),
    service: VacanteService = Depends(get_vacante_service),
    context: RequestContext = Depends(get_request_context),
):
    """Replace every field of a vacancy. Same rules as create."""
    return to_response(service.update(vacante_id, payload, context))


@router.delete("/{vacante_id}", response_model=Envelope)
def delete_vacante(
    vacante_id: int,
    service: VacanteService = Depends(get_vacante_service),
    context: RequestContext = Depends(get_request_context),
):
    """Delete a vacancy. Returns 409 while interviews reference it."""
    return to_response(service.delete(vacante_id, context))
