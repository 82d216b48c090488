from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import SQLModel, Field

from utils.timestamps import TIMESTAMP, utc_now


class Vacante(SQLModel, table=True):
    """Job opening. Owns zero or more interviews through `entrevistas.vacante`."""

    __tablename__ = "vacantes"

    id: Optional[int] = Field(default=None, primary_key=True)
    area: Optional[str] = Field(default=None, max_length=255, index=True)
    sueldo: Optional[Decimal] = Field(default=None, max_digits=19, decimal_places=4)
    activo: Optional[bool] = Field(default=None, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=TIMESTAMP, nullable=False)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=TIMESTAMP, nullable=False)
