"""
Vacante repository for job opening persistence.

Handles CRUD operations for the vacantes table plus the filtered queries the
services need (active-only, area search, dependent interview count).
"""

from typing import List
from sqlmodel import Session, select, func

from models.entrevista import Entrevista
from models.vacante import Vacante
from repositories.base_repository import BaseRepository


class VacanteRepository(BaseRepository[Vacante]):
    """Repository for managing vacancies."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Vacante)

    def get_active(self) -> List[Vacante]:
        """Get vacancies flagged as active."""
        statement = select(Vacante).where(Vacante.activo == True).order_by(Vacante.id)  # noqa: E712
        return list(self.db.exec(statement).all())

    def search(self, query: str) -> List[Vacante]:
        """
        Find vacancies whose area contains the query.

        Args:
            query: Substring to look for (case sensitivity follows the database collation)

        Returns:
            Matching vacancies ordered by id
        """
        statement = (
            select(Vacante)
            .where(Vacante.area.contains(query, autoescape=True))
            .order_by(Vacante.id)
        )
        return list(self.db.exec(statement).all())

    def count_entrevistas(self, vacante_id: int) -> int:
        """Number of interviews referencing this vacancy."""
        statement = select(func.count(Entrevista.id)).where(Entrevista.vacante == vacante_id)
        return self.db.exec(statement).one()
