from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes.vacantes import router as vacantes_router
from api.routes.prospectos import router as prospectos_router
from api.routes.entrevistas import router as entrevistas_router
from config.settings import settings
from utils.logging_config import configure_logging

configure_logging()

DESCRIPTION = """
Recruitment tracker for job openings (vacantes), candidates (prospectos) and the interviews that link them (entrevistas).

## Authentication

All endpoints (except `/`, `/ping` and `/health`) require an API key via the `X-API-Key` header.

Use the **Authorize** button above to set your API key for testing.

## Quick Start

1. **Open a vacancy** → `POST /vacantes` with area, sueldo and activo
2. **Register a candidate** → `POST /prospectos` with nombre, correo and fecha_registro
3. **Schedule an interview** → `POST /entrevistas` with the vacante and prospecto ids

## Responses

Every endpoint answers with the same envelope:

| Field | Description |
|-------|-------------|
| `success` | `true` when the operation succeeded |
| `message` | Human readable outcome |
| `data` | Payload on success |
| `errors` | Messages by field on validation failure (422) |

Not found records return 404, duplicate interviews and deletes blocked by interviews return 409.
"""

tags_metadata = [
    {
        "name": "Health",
        "description": "Health check endpoints. No authentication required.",
    },
    {
        "name": "Vacantes",
        "description": "Job openings. A vacancy cannot be deleted while interviews reference it.",
    },
    {
        "name": "Prospectos",
        "description": "Candidates. The email (correo) is unique across candidates.",
    },
    {
        "name": "Entrevistas",
        "description": "Interviews, addressed by the (vacante, prospecto) pair. At most one per pair.",
    },
]

app = FastAPI(
    title="Reclutamiento API",
    description=DESCRIPTION,
    version="1.0.0",
    openapi_tags=tags_metadata,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information and documentation links"""
    return {
        "message": "Welcome to Reclutamiento API",
        "version": "1.0.0",
        "documentation": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "authentication": {
            "type": "API Key",
            "header": "X-API-Key",
            "note": "Required for all endpoints except /, /ping and /health"
        },
        "endpoints": {
            "health": "/health",
            "ping": "/ping",
            "vacantes": "/vacantes",
            "prospectos": "/prospectos",
            "entrevistas": "/entrevistas"
        }
    }


# Health check endpoints (public - no authentication required)
@app.get("/ping", tags=["Health"])
def ping():
    """Simple ping endpoint to check if API is responding. No authentication required."""
    return {"message": "pong"}


@app.get("/health", tags=["Health"])
def health():
    """Health check endpoint with basic status information. No authentication required."""
    return {
        "status": "healthy",
        "service": "Reclutamiento API",
        "version": "1.0.0"
    }


# Register routers
app.include_router(vacantes_router)
app.include_router(prospectos_router)
app.include_router(entrevistas_router)
