"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database with foreign keys enforced;
API tests run against the FastAPI app with `get_db` pointed at that database
and a seeded API key in the default headers.
"""

import sys
from pathlib import Path

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import models  # noqa: F401  registers the table models
from api.main import app
from repositories.api_key_repository import APIKeyRepository
from services import EntrevistaService, ProspectoService, VacanteService
from utils.database import enable_sqlite_foreign_keys, get_db

TEST_API_KEY = "test-api-key"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def vacante_service(db_session):
    return VacanteService(db_session)


@pytest.fixture
def prospecto_service(db_session):
    return ProspectoService(db_session)


@pytest.fixture
def entrevista_service(db_session):
    return EntrevistaService(db_session)


@pytest.fixture
def api_key(db_session):
    return APIKeyRepository(db_session).create_key(TEST_API_KEY, name="test-client")


@pytest.fixture
def client(db_session, api_key):
    def get_db_override():
        return db_session

    app.dependency_overrides[get_db] = get_db_override
    with TestClient(app) as test_client:
        test_client.headers.update({"X-API-Key": TEST_API_KEY})
        yield test_client
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Sample payloads
# ---------------------------------------------------------------------------

@pytest.fixture
def vacante_data():
    return {"area": "Desarrollo", "sueldo": 45000, "activo": True}


@pytest.fixture
def prospecto_data():
    return {"nombre": "Ana Torres", "correo": "ana.torres@empresa.com", "fecha_registro": "2024-01-10"}


@pytest.fixture
def vacante(vacante_service, vacante_data):
    return vacante_service.create(vacante_data).data


@pytest.fixture
def prospecto(prospecto_service, prospecto_data):
    return prospecto_service.create(prospecto_data).data


@pytest.fixture
def entrevista_data(vacante, prospecto):
    return {
        "vacante": vacante.id,
        "prospecto": prospecto.id,
        "fecha_entrevista": "2024-01-15",
        "notas": "Primera entrevista técnica",
        "reclutado": False,
    }
