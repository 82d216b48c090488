"""
Candidate seeding script.
This module contains sample candidate data and seeding logic.
"""

from sqlmodel import Session

from services.prospecto_service import ProspectoService
from services.result import Ok, ValidationFailed
from seed.vacante_seed import SEED_CONTEXT

PROSPECTOS_DATA = [
    {"nombre": "Ana Torres", "correo": "ana.torres@empresa.com", "fecha_registro": "2024-01-08"},
    {"nombre": "Luis Ramírez", "correo": "luis.ramirez@empresa.com", "fecha_registro": "2024-01-10"},
    {"nombre": "María Fernández", "correo": "maria.fernandez@empresa.com", "fecha_registro": "2024-01-15"},
    {"nombre": "Carlos Méndez", "correo": "carlos.mendez@empresa.com", "fecha_registro": "2024-01-22"},
    {"nombre": "Sofía Herrera", "correo": "sofia.herrera@empresa.com", "fecha_registro": "2024-02-01"},
    {"nombre": "Jorge Castillo", "correo": "jorge.castillo@empresa.com", "fecha_registro": "2024-02-05"},
    {"nombre": "Valeria Ruiz", "correo": "valeria.ruiz@empresa.com", "fecha_registro": "2024-02-12"},
    {"nombre": "Diego Morales", "correo": "diego.morales@empresa.com", "fecha_registro": "2024-02-19"},
    {"nombre": "Camila Ortiz", "correo": "camila.ortiz@empresa.com", "fecha_registro": "2024-03-01"},
    {"nombre": "Andrés Vargas", "correo": "andres.vargas@empresa.com", "fecha_registro": "2024-03-04"},
]


def seed_prospectos(db_session: Session) -> int:
    """
    Seed the database with sample candidates. Returns the number created.

    Candidates whose email already exists are skipped, so the seed can be rerun.
    """
    service = ProspectoService(db_session)
    created = 0

    print("Starting candidate seeding...")
    print("=" * 60)

    for idx, data in enumerate(PROSPECTOS_DATA, 1):
        print(f"\n[{idx}/{len(PROSPECTOS_DATA)}] Seeding candidate: {data['nombre']}")
        result = service.create(data, SEED_CONTEXT)
        if isinstance(result, Ok):
            created += 1
            print(f"✓ Created candidate id={result.data.id}")
        elif isinstance(result, ValidationFailed) and "correo" in result.errors:
            print(f"- Skipped, {data['correo']} already registered")
        else:
            print(f"✗ Failed: {result.message}")

    print("\n" + "=" * 60)
    print("Candidate seeding completed!")
    print(f"Total candidates seeded: {created}")
    return created
