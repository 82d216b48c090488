"""
Base repository with the CRUD shared by vacancies, candidates and interviews.

Writes commit immediately; callers that hit an IntegrityError must roll the
session back before using it again.
"""

from typing import TypeVar, Generic, Optional, List, Type, Any, Dict
from sqlmodel import Session, select, func, SQLModel

from utils.timestamps import utc_now

T = TypeVar("T", bound=SQLModel)

# Largest value a BIGINT / SQLite INTEGER key can hold
MAX_ID = 2**63 - 1


def is_storable_id(value: Any) -> bool:
    """True when `value` can be a stored primary key (1..MAX_ID)."""
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= MAX_ID


class BaseRepository(Generic[T]):
    """
    Generic repository over one table model with an integer `id` key.

    Type Parameters:
        T: SQLModel table model
    """

    def __init__(self, db_session: Session, model_class: Type[T]):
        self.db = db_session
        self.model_class = model_class

    def get_by_id(self, id: int) -> Optional[T]:
        if not is_storable_id(id):
            return None
        return self.db.get(self.model_class, id)

    def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[T]:
        """
        All rows ordered by id.

        Args:
            limit: Maximum number of rows (None for every row)
            offset: Rows to skip
        """
        statement = select(self.model_class).order_by(self.model_class.id).offset(offset)
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.db.exec(statement).all())

    def count(self) -> int:
        return self.db.exec(select(func.count(self.model_class.id))).one()

    def exists(self, id: int) -> bool:
        """Existence check that does not load the row."""
        if not is_storable_id(id):
            return False
        statement = select(func.count(self.model_class.id)).where(self.model_class.id == id)
        return self.db.exec(statement).one() > 0

    def create(self, entity: T) -> T:
        """Insert `entity` and return it with its generated id."""
        return self._save(entity)

    def update(self, entity: T, values: Optional[Dict[str, Any]] = None) -> T:
        """
        Apply `values` to `entity`, bump `updated_at` and save.

        Args:
            entity: Row loaded from this session
            values: Field -> value mapping, usually a validated record
        """
        for field, value in (values or {}).items():
            setattr(entity, field, value)
        if hasattr(entity, "updated_at"):
            entity.updated_at = utc_now()
        return self._save(entity)

    def delete(self, entity: T) -> None:
        self.db.delete(entity)
        self.db.commit()

    def _save(self, entity: T) -> T:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity
