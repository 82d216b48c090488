import hashlib
from typing import Optional

from sqlmodel import Session, select

from models.api_key import APIKey


def hash_api_key(raw_key: str) -> str:
    """SHA-256 hex digest stored in `api_keys.key_hash`."""
    return hashlib.sha256(raw_key.encode("utf-8")).hexdigest()


class APIKeyRepository:
    """Lookup and bookkeeping for API keys. Raw keys never reach the database."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_hash(self, key_hash: str) -> Optional[APIKey]:
        return self.db.exec(select(APIKey).where(APIKey.key_hash == key_hash)).first()

    def get_by_raw_key(self, raw_key: str) -> Optional[APIKey]:
        return self.get_by_hash(hash_api_key(raw_key))

    def create_key(self, raw_key: str, name: str, is_active: bool = True) -> APIKey:
        """Store a new key under the hash of `raw_key`."""
        api_key = APIKey(key_hash=hash_api_key(raw_key), name=name, is_active=is_active)
        self.db.add(api_key)
        self.db.commit()
        self.db.refresh(api_key)
        return api_key

    def touch_last_used(self, api_key: APIKey) -> APIKey:
        api_key.mark_used()
        self.db.add(api_key)
        self.db.commit()
        return api_key
