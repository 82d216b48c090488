"""
Services module - Business Logic Layer.

Contains application services that orchestrate business logic,
sitting between the adapters (API routes, Streamlit pages) and the data
layer (repositories).

Services handle:
- Input validation (services.validation)
- Integrity rules (duplicate interview pairs, delete-with-dependents)
- Transaction rollback on unexpected errors
- Returning a result variant (services.result) instead of raising

Usage:
    from services import EntrevistaService

    service = EntrevistaService(db_session)
    result = service.create({"vacante": 1, "prospecto": 2, ...}, context)
"""

from services.context import RequestContext
from services.vacante_service import VacanteService
from services.prospecto_service import ProspectoService
from services.entrevista_service import EntrevistaService

__all__ = [
    "RequestContext",
    "VacanteService",
    "ProspectoService",
    "EntrevistaService",
]
