from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from utils.timestamps import TIMESTAMP, utc_now


class APIKey(SQLModel, table=True):
    """
    Client credential for the JSON API.

    Only the SHA-256 hash of the raw key is stored; `name` identifies the
    client in service logs.
    """

    __tablename__ = "api_keys"

    id: Optional[int] = Field(default=None, primary_key=True)
    key_hash: str = Field(index=True, nullable=False, sa_column_kwargs={"unique": True})
    name: str = Field(nullable=False)
    is_active: bool = Field(default=True, nullable=False)
    created_at: datetime = Field(default_factory=utc_now, sa_type=TIMESTAMP, nullable=False)
    last_used_at: Optional[datetime] = Field(default=None, sa_type=TIMESTAMP, nullable=True)

    def mark_used(self) -> None:
        self.last_used_at = utc_now()
