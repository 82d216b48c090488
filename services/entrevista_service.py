"""
Entrevista Service - Business Logic Layer.

Owns the interview rules:
- both referenced rows must exist (validation)
- at most one interview per (vacante, prospecto) pair (conflict)
- updates address the row by its current pair and re-check the pair only
  when it changes

Read operations return `EntrevistaDetail` values with the vacancy and
candidate attached.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from models.entrevista import Entrevista
from repositories import EntrevistaRepository, ProspectoRepository, VacanteRepository
from services.base_service import BaseService, service_operation
from services.context import RequestContext
from services.result import Conflict, NotFound, Ok, ServiceResult, ValidationFailed
from services.validation import validate_entrevista

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Interview not found"
DUPLICATE_MESSAGE = "An interview already exists for this vacancy and candidate"


class EntrevistaService(BaseService):
    """Application service for interviews."""

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.entrevistas = EntrevistaRepository(db_session)
        self.vacantes = VacanteRepository(db_session)
        self.prospectos = ProspectoRepository(db_session)

    # ============ READS ============

    @service_operation("Error retrieving interviews")
    def get_all(self, context: Optional[RequestContext] = None) -> ServiceResult:
        entrevistas = self.entrevistas.list_all(include_relations=True)
        logger.info(f"Interviews retrieved: count={len(entrevistas)} actor={self.actor(context)}")
        return Ok(entrevistas, "Interviews retrieved successfully")

    @service_operation("Error retrieving interviews")
    def get_by_vacante(self, vacante_id: int, context: Optional[RequestContext] = None) -> ServiceResult:
        entrevistas = self.entrevistas.get_by_vacante(vacante_id, include_relations=True)
        return Ok(entrevistas, "Interviews for the vacancy retrieved successfully")

    @service_operation("Error retrieving interviews")
    def get_by_prospecto(self, prospecto_id: int, context: Optional[RequestContext] = None) -> ServiceResult:
        entrevistas = self.entrevistas.get_by_prospecto(prospecto_id, include_relations=True)
        return Ok(entrevistas, "Interviews for the candidate retrieved successfully")

    @service_operation("Error retrieving the interview")
    def get(
        self,
        vacante_id: int,
        prospecto_id: int,
        context: Optional[RequestContext] = None
    ) -> ServiceResult:
        detail = self.entrevistas.get_by_key(vacante_id, prospecto_id, include_relations=True)
        if detail is None:
            return NotFound(NOT_FOUND_MESSAGE)
        return Ok(detail, "Interview retrieved successfully")

    @service_operation("Error retrieving the form data")
    def get_form_data(self, context: Optional[RequestContext] = None) -> ServiceResult:
        """Vacancies and candidates for the create/edit selection inputs."""
        data: Dict[str, Any] = {
            "vacantes": self.vacantes.get_all(),
            "prospectos": self.prospectos.get_all(),
        }
        return Ok(data, "Form data retrieved successfully")

    # ============ WRITES ============

    @service_operation("Error creating the interview")
    def create(self, data: Mapping[str, Any], context: Optional[RequestContext] = None) -> ServiceResult:
        record, errors = validate_entrevista(data, vacantes=self.vacantes, prospectos=self.prospectos)
        if errors:
            logger.debug(f"Interview rejected: {errors}")
            return ValidationFailed(errors)

        vacante_id, prospecto_id = record["vacante"], record["prospecto"]
        if self.entrevistas.pair_exists(vacante_id, prospecto_id):
            return Conflict(DUPLICATE_MESSAGE)

        try:
            entrevista = self.entrevistas.create(Entrevista(**record))
        except IntegrityError as exc:
            return self._integrity_conflict(exc, vacante_id, prospecto_id)

        logger.info(f"Interview created: entrevista={entrevista.key} actor={self.actor(context)}")
        detail = self.entrevistas.get_by_key(vacante_id, prospecto_id, include_relations=True)
        return Ok(detail, "Interview created successfully")

    @service_operation("Error updating the interview")
    def update(
        self,
        vacante_id: int,
        prospecto_id: int,
        data: Mapping[str, Any],
        context: Optional[RequestContext] = None
    ) -> ServiceResult:
        entrevista = self.entrevistas.get_by_key(vacante_id, prospecto_id)
        if entrevista is None:
            return NotFound(NOT_FOUND_MESSAGE)

        record, errors = validate_entrevista(data, vacantes=self.vacantes, prospectos=self.prospectos)
        if errors:
            logger.debug(f"Interview {vacante_id}-{prospecto_id} update rejected: {errors}")
            return ValidationFailed(errors)

        new_vacante, new_prospecto = record["vacante"], record["prospecto"]
        pair_changed = (new_vacante, new_prospecto) != (vacante_id, prospecto_id)
        if pair_changed and self.entrevistas.pair_exists(new_vacante, new_prospecto, exclude_id=entrevista.id):
            return Conflict(DUPLICATE_MESSAGE)

        entrevista_id = entrevista.id
        try:
            self.entrevistas.update(entrevista, record)
        except IntegrityError as exc:
            return self._integrity_conflict(exc, new_vacante, new_prospecto, exclude_id=entrevista_id)

        logger.info(
            f"Interview updated: entrevista={vacante_id}-{prospecto_id} "
            f"now={new_vacante}-{new_prospecto} actor={self.actor(context)}"
        )
        detail = self.entrevistas.get_by_key(new_vacante, new_prospecto, include_relations=True)
        return Ok(detail, "Interview updated successfully")

    @service_operation("Error deleting the interview")
    def delete(
        self,
        vacante_id: int,
        prospecto_id: int,
        context: Optional[RequestContext] = None
    ) -> ServiceResult:
        entrevista = self.entrevistas.get_by_key(vacante_id, prospecto_id)
        if entrevista is None:
            return NotFound(NOT_FOUND_MESSAGE)

        self.entrevistas.delete(entrevista)
        logger.info(f"Interview deleted: entrevista={vacante_id}-{prospecto_id} actor={self.actor(context)}")
        return Ok(message="Interview deleted successfully")

    def _integrity_conflict(
        self,
        exc: IntegrityError,
        vacante_id: int,
        prospecto_id: int,
        exclude_id: Optional[int] = None
    ) -> ServiceResult:
        """
        Handle an IntegrityError raised at commit.

        If the pair is now taken, a concurrent request won the unique
        constraint and the caller gets the same conflict as the read-side
        check. Anything else is re-raised for service_operation.
        """
        self.rollback()
        if self.entrevistas.pair_exists(vacante_id, prospecto_id, exclude_id=exclude_id):
            return Conflict(DUPLICATE_MESSAGE)
        raise exc
