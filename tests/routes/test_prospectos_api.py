"""
API tests for /prospectos.

Run: pytest tests/routes/test_prospectos_api.py -v
"""


class TestProspectosApi:

    def test_create_returns_201(self, client, prospecto_data):
        response = client.post("/prospectos", json=prospecto_data)
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["correo"] == "ana.torres@empresa.com"
        assert data["fecha_registro"] == "2024-01-10"

    def test_duplicate_email_returns_422_on_correo(self, client, prospecto_data):
        client.post("/prospectos", json=prospecto_data)
        response = client.post("/prospectos", json={**prospecto_data, "nombre": "Otra Persona"})
        assert response.status_code == 422
        assert response.json()["errors"] == {"correo": ["The correo has already been taken."]}

    def test_update_keeping_own_email(self, client, prospecto_data):
        created = client.post("/prospectos", json=prospecto_data).json()["data"]
        response = client.put(f"/prospectos/{created['id']}", json={**prospecto_data, "nombre": "Ana María Torres"})
        assert response.status_code == 200
        assert response.json()["data"]["nombre"] == "Ana María Torres"

    def test_active_listing_excludes_hired(self, client, prospecto_data, vacante_data):
        vacante = client.post("/vacantes", json=vacante_data).json()["data"]
        hired = client.post("/prospectos", json=prospecto_data).json()["data"]
        pending = client.post(
            "/prospectos",
            json={"nombre": "Luis Ramírez", "correo": "luis@empresa.com", "fecha_registro": "2024-01-12"},
        ).json()["data"]
        client.post("/entrevistas", json={
            "vacante": vacante["id"],
            "prospecto": hired["id"],
            "fecha_entrevista": "2024-01-15",
            "notas": "Contratada",
            "reclutado": True,
        })

        response = client.get("/prospectos/activos")
        assert response.status_code == 200
        assert [p["id"] for p in response.json()["data"]] == [pending["id"]]

    def test_search(self, client, prospecto_data):
        client.post("/prospectos", json=prospecto_data)
        response = client.get("/prospectos/search", params={"q": "torres@"})
        assert response.status_code == 200
        assert len(response.json()["data"]) == 1

    def test_search_with_blank_query_returns_400(self, client):
        assert client.get("/prospectos/search", params={"q": "  "}).status_code == 400

    def test_missing_candidate_returns_404(self, client):
        assert client.get("/prospectos/999").status_code == 404
        assert client.put("/prospectos/999", json={}).status_code == 404
        assert client.delete("/prospectos/999").status_code == 404

    def test_delete(self, client, prospecto_data):
        created = client.post("/prospectos", json=prospecto_data).json()["data"]
        assert client.delete(f"/prospectos/{created['id']}").status_code == 200
        assert client.get("/prospectos").json()["data"] == []
