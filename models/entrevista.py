from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from sqlalchemy import Text, UniqueConstraint
from sqlmodel import SQLModel, Field, Column

from models.prospecto import Prospecto
from models.vacante import Vacante
from utils.serialization import model_to_dict
from utils.timestamps import TIMESTAMP, utc_now


class Entrevista(SQLModel, table=True):
    """
    Interview joining one Vacante and one Prospecto.

    Public operations address a row by its (vacante, prospecto) pair; the
    surrogate `id` is only used internally. The unique constraint on the pair
    guarantees at most one interview per vacancy/candidate under concurrent
    writes.
    """

    __tablename__ = "entrevistas"
    __table_args__ = (
        UniqueConstraint("vacante", "prospecto", name="uq_entrevistas_vacante_prospecto"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    vacante: int = Field(foreign_key="vacantes.id", index=True)
    prospecto: int = Field(foreign_key="prospectos.id", index=True)
    fecha_entrevista: Optional[date] = Field(default=None)
    notas: Optional[str] = Field(default=None, sa_column=Column(Text))
    reclutado: Optional[bool] = Field(default=None, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=TIMESTAMP, nullable=False)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=TIMESTAMP, nullable=False)

    @property
    def key(self) -> str:
        """Composite key as used in log lines, e.g. `3-7`."""
        return f"{self.vacante}-{self.prospecto}"


@dataclass
class EntrevistaDetail:
    """An interview together with the vacancy and candidate it links."""

    entrevista: Entrevista
    vacante: Vacante
    prospecto: Prospecto

    def to_dict(self) -> Dict[str, Any]:
        data = model_to_dict(self.entrevista)
        data["vacante_detalle"] = model_to_dict(self.vacante)
        data["prospecto_detalle"] = model_to_dict(self.prospecto)
        return data
