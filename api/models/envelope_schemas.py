from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class Envelope(BaseModel):
    """Body returned by every vacancy, candidate and interview endpoint."""
    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Human readable outcome")
    data: Optional[Any] = Field(None, description="Payload on success")
    errors: Optional[Dict[str, List[str]]] = Field(None, description="Field -> messages on validation failure")
    error: Optional[str] = Field(None, description="Raw error text (only when EXPOSE_ERROR_DETAILS is on)")

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "message": "Invalid input data",
                "errors": {"area": ["The area field is required."]}
            }
        }


# Shared OpenAPI documentation for envelope error responses
ERROR_RESPONSES = {
    404: {"model": Envelope, "description": "Record not found"},
    409: {"model": Envelope, "description": "Duplicate interview or record with dependent interviews"},
    422: {"model": Envelope, "description": "Validation errors by field"},
    500: {"model": Envelope, "description": "Unexpected storage error"},
}

VACANTE_EXAMPLE = {"area": "Desarrollo", "sueldo": 45000, "activo": True}
PROSPECTO_EXAMPLE = {"nombre": "Ana Torres", "correo": "ana.torres@empresa.com", "fecha_registro": "2024-01-10"}
ENTREVISTA_EXAMPLE = {
    "vacante": 1,
    "prospecto": 1,
    "fecha_entrevista": "2024-01-15",
    "notas": "Primera entrevista técnica",
    "reclutado": False
}
