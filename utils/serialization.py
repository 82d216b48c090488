"""JSON-friendly conversion of SQLModel rows and service payloads."""

from typing import Any, Dict

from pydantic_core import to_jsonable_python
from sqlmodel import SQLModel


def model_to_dict(model: SQLModel) -> Dict[str, Any]:
    """
    Dump a table model through attribute access.

    Rows expired by a commit have an empty `__dict__`; reading each field
    through its attribute reloads it from the session first.
    """
    values = {name: getattr(model, name) for name in type(model).model_fields}
    return to_jsonable_python(values)


def serialize(value: Any) -> Any:
    """Convert models, details and containers of them into JSON-friendly values."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, SQLModel):
        return model_to_dict(value)
    if isinstance(value, dict):
        return {key: serialize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    return to_jsonable_python(value)
