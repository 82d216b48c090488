from models.api_key import APIKey
from models.vacante import Vacante
from models.prospecto import Prospecto
from models.entrevista import Entrevista, EntrevistaDetail

__all__ = [
    "APIKey",
    "Vacante",
    "Prospecto",
    "Entrevista",
    "EntrevistaDetail",
]
