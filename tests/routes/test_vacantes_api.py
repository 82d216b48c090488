"""
API tests for /vacantes.

Run: pytest tests/routes/test_vacantes_api.py -v
"""

from decimal import Decimal


class TestVacantesApi:

    def test_create_returns_201(self, client, vacante_data):
        response = client.post("/vacantes", json=vacante_data)
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Vacancy created successfully"
        assert body["data"]["id"] is not None
        assert body["data"]["area"] == "Desarrollo"
        assert Decimal(str(body["data"]["sueldo"])) == Decimal("45000")

    def test_create_with_invalid_data_returns_422_with_errors(self, client):
        response = client.post("/vacantes", json={"sueldo": -1, "activo": "maybe"})
        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["errors"] == {
            "area": ["The area field is required."],
            "sueldo": ["The sueldo field must be at least 0."],
            "activo": ["The activo field must be true or false."],
        }

    def test_list_and_show(self, client, vacante_data):
        created = client.post("/vacantes", json=vacante_data).json()["data"]

        listing = client.get("/vacantes")
        assert listing.status_code == 200
        assert [v["id"] for v in listing.json()["data"]] == [created["id"]]

        show = client.get(f"/vacantes/{created['id']}")
        assert show.status_code == 200
        assert show.json()["data"]["area"] == "Desarrollo"

    def test_show_missing_returns_404(self, client):
        response = client.get("/vacantes/999")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Vacancy not found"}

    def test_show_id_beyond_integer_range_returns_404(self, client):
        response = client.get("/vacantes/9223372036854775808")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Vacancy not found"}

    def test_active_listing(self, client):
        client.post("/vacantes", json={"area": "Desarrollo", "sueldo": 1, "activo": True})
        client.post("/vacantes", json={"area": "Soporte", "sueldo": 1, "activo": False})

        response = client.get("/vacantes/activas")
        assert response.status_code == 200
        assert [v["area"] for v in response.json()["data"]] == ["Desarrollo"]

    def test_search(self, client):
        client.post("/vacantes", json={"area": "Desarrollo Backend", "sueldo": 1, "activo": True})
        client.post("/vacantes", json={"area": "Marketing", "sueldo": 1, "activo": True})

        response = client.get("/vacantes/search", params={"q": "Market"})
        assert response.status_code == 200
        assert [v["area"] for v in response.json()["data"]] == ["Marketing"]

    def test_search_without_query_returns_400(self, client):
        response = client.get("/vacantes/search")
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Query parameter is required"}

    def test_update(self, client, vacante_data):
        created = client.post("/vacantes", json=vacante_data).json()["data"]
        response = client.put(f"/vacantes/{created['id']}", json={"area": "Finanzas", "sueldo": 38000, "activo": False})
        assert response.status_code == 200
        assert response.json()["data"]["area"] == "Finanzas"
        assert client.get(f"/vacantes/{created['id']}").json()["data"]["activo"] is False

    def test_delete_blocked_by_interview_returns_409(self, client, vacante_data, prospecto_data):
        vacante = client.post("/vacantes", json=vacante_data).json()["data"]
        prospecto = client.post("/prospectos", json=prospecto_data).json()["data"]
        client.post("/entrevistas", json={
            "vacante": vacante["id"],
            "prospecto": prospecto["id"],
            "fecha_entrevista": "2024-01-15",
            "notas": "Entrevista",
            "reclutado": False,
        })

        response = client.delete(f"/vacantes/{vacante['id']}")
        assert response.status_code == 409
        assert response.json()["message"] == "Cannot delete the vacancy because it has associated interviews"
        assert client.get(f"/vacantes/{vacante['id']}").status_code == 200

    def test_delete(self, client, vacante_data):
        created = client.post("/vacantes", json=vacante_data).json()["data"]
        response = client.delete(f"/vacantes/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Vacancy deleted successfully"}
        assert client.get(f"/vacantes/{created['id']}").status_code == 404
