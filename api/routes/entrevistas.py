from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from sqlmodel import Session

from api.auth import get_request_context, verify_api_key
from api.models.envelope_schemas import ENTREVISTA_EXAMPLE, ERROR_RESPONSES, Envelope
from api.responses import to_response
from services.context import RequestContext
from services.entrevista_service import EntrevistaService
from utils.database import get_db

router = APIRouter(
    prefix="/entrevistas",
    tags=["Entrevistas"],
    dependencies=[Depends(verify_api_key)],
    responses=ERROR_RESPONSES,
)


def get_entrevista_service(db: Session = Depends(get_db)) -> EntrevistaService:
    return EntrevistaService(db)


@router.get("", response_model=Envelope)
def list_entrevistas(
    service: EntrevistaService = Depends(get_entrevista_service),
    context: RequestContext = Depends(get_request_context),
):
    """List every interview with `vacante_detalle` and `prospecto_detalle` attached."""
    return to_response(service.get_all(context))


@router.post("", response_model=Envelope, status_code=status.HTTP_201_CREATED)
def create_entrevista(
    payload: Dict[str, Any] = Body(..., examples=[ENTREVISTA_EXAMPLE]),
    service: EntrevistaService = Depends(get_entrevista_service),
    context: RequestContext = Depends(get_request_context),
):
    """
    Schedule an interview for a (vacante, prospecto) pair.

    Returns 422 when either id does not exist and 409 when the pair already
    has an interview.
    """
    return to_response(service.create(payload, context), success_status=status.HTTP_201_CREATED)


@router.get("/form-data", response_model=Envelope)
def get_form_data(
    service: EntrevistaService = Depends(get_entrevista_service),
    context: RequestContext = Depends(get_request_context),
):
    """Vacancies and candidates for building interview forms."""
    return to_response(service.get_form_data(context))


# Declared before /{vacante_id}/{prospecto_id} so the literal segments win
@router.get("/vacante/{vacante_id}", response_model=Envelope)
def list_entrevistas_by_vacante(
    vacante_id: int,
    service: EntrevistaService = Depends(get_entrevista_service),
    context: RequestContext = Depends(get_request_context),
):
    return to_response(service.get_by_vacante(vacante_id, context))


@router.get("/prospecto/{prospecto_id}", response_model=Envelope)
def list_entrevistas_by_prospecto(
    prospecto_id: int,
    service: EntrevistaService = Depends(get_entrevista_service),
    context: RequestContext = Depends(get_request_context),
):
    return to_response(service.get_by_prospecto(prospecto_id, context))


@router.get("/{vacante_id}/{prospecto_id}", response_model=Envelope)
def get_entrevista(
    vacante_id: int,
    prospecto_id: int,
    service: EntrevistaService = Depends(get_entrevista_service),
    context: RequestContext = Depends(get_request_context),
):
    return to_response(service.get(vacante_id, prospecto_id, context))


@router.put("/{vacante_id}/{prospecto_id}", response_model=Envelope)
def update_entrevista(
    vacante_id: int,
    prospecto_id: int,
    payload: Dict[str, Any] = Body(..., examples=[ENTREVISTA_EXAMPLE]),
    service: EntrevistaService = Depends(get_entrevista_service),
    context: RequestContext = Depends(get_request_context),
):
    """
    Update the interview addressed by its current pair.

    The body may move it to another pair; 409 if that pair is already taken.
    """
    return to_response(service.update(vacante_id, prospecto_id, payload, context))


@router.delete("/{vacante_id}/{prospecto_id}", response_model=Envelope)
def delete_entrevista(
    vacante_id: int,
    prospecto_id: int,
    service: EntrevistaService = Depends(get_entrevista_service),
    context: RequestContext = Depends(get_request_context),
):
    return to_response(service.delete(vacante_id, prospecto_id, context))
