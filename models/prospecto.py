from datetime import date, datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from utils.timestamps import TIMESTAMP, utc_now


class Prospecto(SQLModel, table=True):
    """Candidate. `correo` is unique across the table."""

    __tablename__ = "prospectos"

    id: Optional[int] = Field(default=None, primary_key=True)
    nombre: Optional[str] = Field(default=None, max_length=255, index=True)
    # Unique index is the backstop for the read-side uniqueness check
    correo: Optional[str] = Field(default=None, max_length=255, unique=True)
    fecha_registro: Optional[date] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, sa_type=TIMESTAMP, nullable=False)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=TIMESTAMP, nullable=False)
