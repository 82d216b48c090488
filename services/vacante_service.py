"""
Vacante Service - Business Logic Layer.

Validates vacancy input, guards deletion while interviews reference the
vacancy, and wraps every outcome in a service result.
"""

import logging
from typing import Any, Mapping, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from models.vacante import Vacante
from repositories import VacanteRepository
from services.base_service import BaseService, service_operation
from services.context import RequestContext
from services.result import Conflict, NotFound, Ok, ServiceResult, ValidationFailed
from services.validation import validate_vacante

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Vacancy not found"
HAS_ENTREVISTAS_MESSAGE = "Cannot delete the vacancy because it has associated interviews"


class VacanteService(BaseService):
    """Application service for job openings."""

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.vacantes = VacanteRepository(db_session)

    @service_operation("Error retrieving vacancies")
    def get_all(self, context: Optional[RequestContext] = None) -> ServiceResult:
        vacantes = self.vacantes.get_all()
        logger.info(f"Vacancies retrieved: count={len(vacantes)} actor={self.actor(context)}")
        return Ok(vacantes, "Vacancies retrieved successfully")

    @service_operation("Error retrieving active vacancies")
    def get_active(self, context: Optional[RequestContext] = None) -> ServiceResult:
        vacantes = self.vacantes.get_active()
        return Ok(vacantes, "Active vacancies retrieved successfully")

    @service_operation("Error searching vacancies")
    def search(self, query: str, context: Optional[RequestContext] = None) -> ServiceResult:
        vacantes = self.vacantes.search(query)
        return Ok(vacantes, "Vacancy search completed")

    @service_operation("Error retrieving the vacancy")
    def get(self, vacante_id: int, context: Optional[RequestContext] = None) -> ServiceResult:
        vacante = self.vacantes.get_by_id(vacante_id)
        if vacante is None:
            return NotFound(NOT_FOUND_MESSAGE)
        return Ok(vacante, "Vacancy retrieved successfully")

    @service_operation("Error creating the vacancy")
    def create(self, data: Mapping[str, Any], context: Optional[RequestContext] = None) -> ServiceResult:
        record, errors = validate_vacante(data)
        if errors:
            logger.debug(f"Vacancy rejected: {errors}")
            return ValidationFailed(errors)

        vacante = self.vacantes.create(Vacante(**record))
        logger.info(f"Vacancy created: vacante_id={vacante.id} actor={self.actor(context)}")
        return Ok(vacante, "Vacancy created successfully")

    @service_operation("Error updating the vacancy")
    def update(
        self,
        vacante_id: int,
        data: Mapping[str, Any],
        context: Optional[RequestContext] = None
    ) -> ServiceResult:
        vacante = self.vacantes.get_by_id(vacante_id)
        if vacante is None:
            return NotFound(NOT_FOUND_MESSAGE)

        record, errors = validate_vacante(data)
        if errors:
            logger.debug(f"Vacancy {vacante_id} update rejected: {errors}")
            return ValidationFailed(errors)

        vacante = self.vacantes.update(vacante, record)
        logger.info(f"Vacancy updated: vacante_id={vacante_id} actor={self.actor(context)}")
        return Ok(vacante, "Vacancy updated successfully")

    @service_operation("Error deleting the vacancy")
    def delete(self, vacante_id: int, context: Optional[RequestContext] = None) -> ServiceResult:
        vacante = self.vacantes.get_by_id(vacante_id)
        if vacante is None:
            return NotFound(NOT_FOUND_MESSAGE)

        if self.vacantes.count_entrevistas(vacante_id) > 0:
            return Conflict(HAS_ENTREVISTAS_MESSAGE)

        try:
            self.vacantes.delete(vacante)
        except IntegrityError:
            # An interview was attached between the check and the delete
            self.rollback()
            if self.vacantes.count_entrevistas(vacante_id) > 0:
                return Conflict(HAS_ENTREVISTAS_MESSAGE)
            raise

        logger.info(f"Vacancy deleted: vacante_id={vacante_id} actor={self.actor(context)}")
        return Ok(message="Vacancy deleted successfully")
