"""
Repositories module - Data Access Layer.

Provides repository classes for database operations following the Repository pattern.
Each repository handles CRUD operations for a specific domain entity.

Usage:
    from repositories import (
        VacanteRepository,
        ProspectoRepository,
        EntrevistaRepository
    )

    # Initialize with a database session
    vacante_repo = VacanteRepository(db_session)
    entrevista_repo = EntrevistaRepository(db_session)

    # Use repository methods
    vacante = vacante_repo.get_by_id(vacante_id)
    entrevistas = entrevista_repo.get_by_vacante(vacante_id, include_relations=True)
"""

from repositories.base_repository import BaseRepository
from repositories.api_key_repository import APIKeyRepository
from repositories.vacante_repository import VacanteRepository
from repositories.prospecto_repository import ProspectoRepository
from repositories.entrevista_repository import EntrevistaRepository

__all__ = [
    "BaseRepository",
    "APIKeyRepository",
    "VacanteRepository",
    "ProspectoRepository",
    "EntrevistaRepository",
]
