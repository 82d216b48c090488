"""
Prospecto Service - Business Logic Layer.

Validates candidate input (including the unique email rule), guards deletion
while interviews reference the candidate, and wraps every outcome in a
service result.
"""

import logging
from typing import Any, Mapping, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from models.prospecto import Prospecto
from repositories import ProspectoRepository
from services.base_service import BaseService, service_operation
from services.context import RequestContext
from services.result import Conflict, NotFound, Ok, ServiceResult, ValidationFailed
from services.validation import validate_prospecto

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Candidate not found"
HAS_ENTREVISTAS_MESSAGE = "Cannot delete the candidate because they have associated interviews"
CORREO_TAKEN = {"correo": ["The correo has already been taken."]}


class ProspectoService(BaseService):
    """Application service for candidates."""

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.prospectos = ProspectoRepository(db_session)

    @service_operation("Error retrieving candidates")
    def get_all(self, context: Optional[RequestContext] = None) -> ServiceResult:
        prospectos = self.prospectos.get_all()
        logger.info(f"Candidates retrieved: count={len(prospectos)} actor={self.actor(context)}")
        return Ok(prospectos, "Candidates retrieved successfully")

    @service_operation("Error retrieving active candidates")
    def get_active(self, context: Optional[RequestContext] = None) -> ServiceResult:
        prospectos = self.prospectos.get_active()
        return Ok(prospectos, "Active candidates retrieved successfully")

    @service_operation("Error searching candidates")
    def search(self, query: str, context: Optional[RequestContext] = None) -> ServiceResult:
        prospectos = self.prospectos.search(query)
        return Ok(prospectos, "Candidate search completed")

    @service_operation("Error retrieving the candidate")
    def get(self, prospecto_id: int, context: Optional[RequestContext] = None) -> ServiceResult:
        prospecto = self.prospectos.get_by_id(prospecto_id)
        if prospecto is None:
            return NotFound(NOT_FOUND_MESSAGE)
        return Ok(prospecto, "Candidate retrieved successfully")

    @service_operation("Error creating the candidate")
    def create(self, data: Mapping[str, Any], context: Optional[RequestContext] = None) -> ServiceResult:
        record, errors = validate_prospecto(data, prospectos=self.prospectos)
        if errors:
            logger.debug(f"Candidate rejected: {errors}")
            return ValidationFailed(errors)

        try:
            prospecto = self.prospectos.create(Prospecto(**record))
        except IntegrityError:
            self.rollback()
            if self.prospectos.get_by_correo(record["correo"]):
                return ValidationFailed(CORREO_TAKEN)
            raise

        logger.info(f"Candidate created: prospecto_id={prospecto.id} actor={self.actor(context)}")
        return Ok(prospecto, "Candidate created successfully")

    @service_operation("Error updating the candidate")
    def update(
        self,
        prospecto_id: int,
        data: Mapping[str, Any],
        context: Optional[RequestContext] = None
    ) -> ServiceResult:
        prospecto = self.prospectos.get_by_id(prospecto_id)
        if prospecto is None:
            return NotFound(NOT_FOUND_MESSAGE)

        record, errors = validate_prospecto(data, prospectos=self.prospectos, ignore_id=prospecto_id)
        if errors:
            logger.debug(f"Candidate {prospecto_id} update rejected: {errors}")
            return ValidationFailed(errors)

        try:
            prospecto = self.prospectos.update(prospecto, record)
        except IntegrityError:
            self.rollback()
            if self.prospectos.get_by_correo(record["correo"], exclude_id=prospecto_id):
                return ValidationFailed(CORREO_TAKEN)
            raise

        logger.info(f"Candidate updated: prospecto_id={prospecto_id} actor={self.actor(context)}")
        return Ok(prospecto, "Candidate updated successfully")

    @service_operation("Error deleting the candidate")
    def delete(self, prospecto_id: int, context: Optional[RequestContext] = None) -> ServiceResult:
        prospecto = self.prospectos.get_by_id(prospecto_id)
        if prospecto is None:
            return NotFound(NOT_FOUND_MESSAGE)

        if self.prospectos.count_entrevistas(prospecto_id) > 0:
            return Conflict(HAS_ENTREVISTAS_MESSAGE)

        try:
            self.prospectos.delete(prospecto)
        except IntegrityError:
            self.rollback()
            if self.prospectos.count_entrevistas(prospecto_id) > 0:
                return Conflict(HAS_ENTREVISTAS_MESSAGE)
            raise

        logger.info(f"Candidate deleted: prospecto_id={prospecto_id} actor={self.actor(context)}")
        return Ok(message="Candidate deleted successfully")
