"""
Entrevista repository for interview persistence.

Interviews are addressed by their (vacante, prospecto) pair. Read methods take
an `include_relations` flag: when set, rows are returned as `EntrevistaDetail`
values built from a single joined query, so callers never need extra lookups.
"""

from typing import List, Optional, Union
from sqlmodel import Session, select, func

from models.entrevista import Entrevista, EntrevistaDetail
from models.prospecto import Prospecto
from models.vacante import Vacante
from repositories.base_repository import BaseRepository, is_storable_id

EntrevistaRow = Union[Entrevista, EntrevistaDetail]


class EntrevistaRepository(BaseRepository[Entrevista]):
    """Repository for managing interviews."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Entrevista)

    def _select(self, include_relations: bool):
        if include_relations:
            return (
                select(Entrevista, Vacante, Prospecto)
                .join(Vacante, Vacante.id == Entrevista.vacante)
                .join(Prospecto, Prospecto.id == Entrevista.prospecto)
            )
        return select(Entrevista)

    def _fetch_all(self, statement, include_relations: bool) -> List[EntrevistaRow]:
        statement = statement.order_by(Entrevista.id)
        rows = self.db.exec(statement).all()
        if include_relations:
            return [EntrevistaDetail(entrevista=e, vacante=v, prospecto=p) for e, v, p in rows]
        return list(rows)

    def list_all(self, include_relations: bool = False) -> List[EntrevistaRow]:
        """Get every interview."""
        return self._fetch_all(self._select(include_relations), include_relations)

    def get_by_vacante(self, vacante_id: int, include_relations: bool = False) -> List[EntrevistaRow]:
        """Get interviews for one vacancy."""
        if not is_storable_id(vacante_id):
            return []
        statement = self._select(include_relations).where(Entrevista.vacante == vacante_id)
        return self._fetch_all(statement, include_relations)

    def get_by_prospecto(self, prospecto_id: int, include_relations: bool = False) -> List[EntrevistaRow]:
        """Get interviews for one candidate."""
        if not is_storable_id(prospecto_id):
            return []
        statement = self._select(include_relations).where(Entrevista.prospecto == prospecto_id)
        return self._fetch_all(statement, include_relations)

    def get_by_key(
        self,
        vacante_id: int,
        prospecto_id: int,
        include_relations: bool = False
    ) -> Optional[EntrevistaRow]:
        """
        Get an interview by its composite key.

        Args:
            vacante_id: Vacancy id half of the key
            prospecto_id: Candidate id half of the key
            include_relations: Return an EntrevistaDetail instead of the bare row

        Returns:
            The interview, or None if the pair has no row
        """
        if not (is_storable_id(vacante_id) and is_storable_id(prospecto_id)):
            return None
        statement = self._select(include_relations).where(
            Entrevista.vacante == vacante_id,
            Entrevista.prospecto == prospecto_id
        )
        row = self.db.exec(statement).first()
        if row is None:
            return None
        if include_relations:
            entrevista, vacante, prospecto = row
            return EntrevistaDetail(entrevista=entrevista, vacante=vacante, prospecto=prospecto)
        return row

    def pair_exists(self, vacante_id: int, prospecto_id: int, exclude_id: Optional[int] = None) -> bool:
        """
        Check whether an interview already uses the (vacante, prospecto) pair.

        Args:
            vacante_id: Vacancy id
            prospecto_id: Candidate id
            exclude_id: Interview id to ignore (the row being updated)
        """
        if not (is_storable_id(vacante_id) and is_storable_id(prospecto_id)):
            return False
        statement = select(func.count(Entrevista.id)).where(
            Entrevista.vacante == vacante_id,
            Entrevista.prospecto == prospecto_id
        )
        if exclude_id is not None:
            statement = statement.where(Entrevista.id != exclude_id)
        return self.db.exec(statement).one() > 0

