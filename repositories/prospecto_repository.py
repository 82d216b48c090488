"""
Prospecto repository for candidate persistence.

Handles CRUD operations for the prospectos table with search, email lookup and
dependent interview counts.
"""

from typing import List, Optional
from sqlalchemy import or_
from sqlmodel import Session, select, func

from models.entrevista import Entrevista
from models.prospecto import Prospecto
from repositories.base_repository import BaseRepository


class ProspectoRepository(BaseRepository[Prospecto]):
    """Repository for managing candidates."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Prospecto)

    def get_by_correo(self, correo: str, exclude_id: Optional[int] = None) -> Optional[Prospecto]:
        """
        Find a candidate by email.

        Args:
            correo: Email to look up
            exclude_id: Candidate id to ignore (the record being updated)

        Returns:
            Prospecto or None
        """
        if not correo:
            return None
        statement = select(Prospecto).where(Prospecto.correo == correo)
        if exclude_id is not None:
            statement = statement.where(Prospecto.id != exclude_id)
        return self.db.exec(statement).first()

    def search(self, query: str) -> List[Prospecto]:
        """Find candidates whose name or email contains the query."""
        statement = (
            select(Prospecto)
            .where(or_(
                Prospecto.nombre.contains(query, autoescape=True),
                Prospecto.correo.contains(query, autoescape=True),
            ))
            .order_by(Prospecto.id)
        )
        return list(self.db.exec(statement).all())

    def get_active(self) -> List[Prospecto]:
        """
        Get candidates that are still available.

        A candidate stops being available once any of their interviews ended
        in a hire (reclutado = true).
        """
        hired = select(Entrevista.prospecto).where(Entrevista.reclutado == True)  # noqa: E712
        statement = select(Prospecto).where(Prospecto.id.not_in(hired)).order_by(Prospecto.id)
        return list(self.db.exec(statement).all())

    def count_entrevistas(self, prospecto_id: int) -> int:
        """Number of interviews referencing this candidate."""
        statement = select(func.count(Entrevista.id)).where(Entrevista.prospecto == prospecto_id)
        return self.db.exec(statement).one()
