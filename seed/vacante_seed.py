"""
Vacancy seeding script.
This module contains sample vacancy data and seeding logic.
"""

from sqlmodel import Session

from services.context import RequestContext
from services.result import Ok
from services.vacante_service import VacanteService

SEED_CONTEXT = RequestContext(actor="seed")

VACANTES_DATA = [
    {"area": "Desarrollo", "sueldo": 45000, "activo": True},
    {"area": "Recursos Humanos", "sueldo": 28000, "activo": True},
    {"area": "Marketing", "sueldo": 32000, "activo": True},
    {"area": "Soporte Técnico", "sueldo": 22000, "activo": False},
    {"area": "Finanzas", "sueldo": 38000, "activo": True},
]


def seed_vacantes(db_session: Session) -> int:
    """Seed the database with sample vacancies. Returns the number created."""
    service = VacanteService(db_session)
    created = 0

    print("Starting vacancy seeding...")
    print("=" * 60)

    for idx, data in enumerate(VACANTES_DATA, 1):
        print(f"\n[{idx}/{len(VACANTES_DATA)}] Seeding vacancy: {data['area']}")
        result = service.create(data, SEED_CONTEXT)
        if isinstance(result, Ok):
            created += 1
            print(f"✓ Created vacancy id={result.data.id}")
        else:
            print(f"✗ Failed: {result.message}")

    print("\n" + "=" * 60)
    print("Vacancy seeding completed!")
    print(f"Total vacancies seeded: {created}")
    return created
