"""Seed script to insert an API key for local development/testing.

Usage:
  python scripts/seed_api_key.py
  python scripts/seed_api_key.py --key my-secret-key
  python scripts/seed_api_key.py --reset
"""

import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import argparse
from sqlmodel import Session
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError

from models.api_key import APIKey
from repositories.api_key_repository import APIKeyRepository, hash_api_key
from utils.database import get_engine, init_db

DEFAULT_RAW_KEY = "reclutamiento-dev-key"
DEFAULT_NAME = "reclutamiento-key"


def seed_api_key(raw_key: str = DEFAULT_RAW_KEY, name: str = DEFAULT_NAME, reset: bool = False) -> bool:
    try:
        engine = get_engine()
    except RuntimeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return False

    key_hash = hash_api_key(raw_key)

    try:
        init_db(engine)
        with Session(engine) as db:
            repo = APIKeyRepository(db)

            if reset:
                res = db.exec(delete(APIKey).where(APIKey.key_hash == key_hash))
                deleted = res.rowcount if hasattr(res, "rowcount") and res.rowcount else 0
                db.commit()
                print(f"Reset: removed {deleted} existing key(s)")

            existing = repo.get_by_hash(key_hash)
            if existing:
                print(f"API key already exists (name={existing.name}, active={existing.is_active})")
                return True

            api_key = repo.create_key(raw_key, name=name)

            print(f"API key seeded successfully:")
            print(f"  Raw key: {raw_key}")
            print(f"  Hash:    {key_hash[:16]}...")
            print(f"  Name:    {api_key.name}")
            print(f"  ID:      {api_key.id}")
            return True

    except SQLAlchemyError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return False


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed an API key for local dev/testing")
    parser.add_argument("--key", default=DEFAULT_RAW_KEY, help=f"Raw API key value (default: {DEFAULT_RAW_KEY})")
    parser.add_argument("--name", default=DEFAULT_NAME, help=f"Key name shown in logs (default: {DEFAULT_NAME})")
    parser.add_argument("--reset", action="store_true", help="Remove existing key before inserting")
    args = parser.parse_args()

    ok = seed_api_key(raw_key=args.key, name=args.name, reset=args.reset)
    sys.exit(0 if ok else 1)
