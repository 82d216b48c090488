"""
Main seed runner script.
This script runs all seeding operations in the correct order.

Usage:
  python -m seed.run_all
"""

from sqlmodel import Session

from utils.database import get_engine, init_db
from utils.logging_config import configure_logging
from .vacante_seed import seed_vacantes
from .prospecto_seed import seed_prospectos


def run_all_seeds():
    """Run all seed operations."""
    print("=" * 60)
    print("STARTING ALL SEEDING OPERATIONS")
    print("=" * 60)
    print()

    engine = get_engine()
    init_db(engine)

    with Session(engine) as db_session:
        seed_vacantes(db_session)
        print()
        seed_prospectos(db_session)

    print()
    print("=" * 60)
    print("ALL SEEDING OPERATIONS COMPLETED")
    print("=" * 60)


if __name__ == "__main__":
    configure_logging()
    run_all_seeds()
