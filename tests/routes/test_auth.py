"""
API key authentication tests.

Run: pytest tests/routes/test_auth.py -v
"""

from repositories.api_key_repository import APIKeyRepository


class TestApiKeyAuth:

    def test_public_endpoints_need_no_key(self, client):
        client.headers.pop("X-API-Key")
        assert client.get("/").status_code == 200
        assert client.get("/ping").json() == {"message": "pong"}
        assert client.get("/health").json()["status"] == "healthy"

    def test_missing_key_returns_401(self, client):
        client.headers.pop("X-API-Key")
        response = client.get("/vacantes")
        assert response.status_code == 401
        assert response.json()["detail"] == "Missing API key"

    def test_unknown_key_returns_401(self, client):
        response = client.get("/vacantes", headers={"X-API-Key": "wrong-key"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid API key"

    def test_inactive_key_returns_403(self, client, db_session):
        APIKeyRepository(db_session).create_key("retired-key", name="retired", is_active=False)
        response = client.get("/prospectos", headers={"X-API-Key": "retired-key"})
        assert response.status_code == 403

    def test_valid_key_records_last_use(self, client, api_key, db_session):
        assert client.get("/entrevistas").status_code == 200
        db_session.refresh(api_key)
        assert api_key.last_used_at is not None
