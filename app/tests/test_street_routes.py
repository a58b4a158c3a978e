from fastapi.testclient import TestClient


STREET_URL = "/api/streets/MAIN/district/DT/city/MET"


class TestStreetRoutes:
    """Test suite for street API routes."""

    def test_create_street_success(self, client: TestClient, sample_district):
        response = client.post(
            "/api/streets",
            json={
                "streetName": "Main Street",
                "streetCode": "MAIN",
                "districtCode": "DT",
                "cityCode": "MET",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["streetCode"] == "MAIN"
        assert data["districtCode"] == "DT"
        assert data["cityCode"] == "MET"

    def test_create_street_accepts_snake_case(self, client: TestClient, sample_district):
        response = client.post(
            "/api/streets",
            json={
                "street_name": "Main Street",
                "street_code": "MAIN",
                "district_code": "DT",
                "city_code": "MET",
            },
        )

        assert response.status_code == 201

    def test_create_street_conflict(self, client: TestClient, sample_street):
        response = client.post(
            "/api/streets",
            json={
                "streetName": "Main Street",
                "streetCode": "OTHER",
                "districtCode": "DT",
                "cityCode": "MET",
            },
        )

        assert response.status_code == 409

    def test_create_street_unknown_district(self, client: TestClient, sample_city):
        response = client.post(
            "/api/streets",
            json={
                "streetName": "Main Street",
                "streetCode": "MAIN",
                "districtCode": "NOPE",
                "cityCode": "MET",
            },
        )

        assert response.status_code == 404

    def test_create_street_invalid_body(self, client: TestClient):
        response = client.post("/api/streets", json={"streetName": "Main Street"})

        assert response.status_code == 400

    def test_get_street(self, client: TestClient, sample_street):
        response = client.get(STREET_URL)

        assert response.status_code == 200
        assert response.json()["streetName"] == "Main Street"

    def test_get_street_not_found(self, client: TestClient, sample_district):
        response = client.get("/api/streets/NOPE/district/DT/city/MET")

        assert response.status_code == 404
        assert response.json()["error_code"] == "STREET_NOT_FOUND"

    def test_list_streets_by_district(self, client: TestClient, sample_street):
        response = client.get("/api/streets/district/DT/city/MET")

        assert response.status_code == 200
        assert [s["streetCode"] for s in response.json()] == ["MAIN"]

    def test_list_streets_by_district_empty(self, client: TestClient, sample_district):
        response = client.get("/api/streets/district/DT/city/MET")

        assert response.status_code == 204

    def test_list_streets_by_unknown_district(self, client: TestClient, sample_city):
        response = client.get("/api/streets/district/NOPE/city/MET")

        assert response.status_code == 404

    def test_list_all_streets(self, client: TestClient, sample_street):
        response = client.get("/api/streets/all")

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_update_street(self, client: TestClient, sample_street):
        response = client.put(
            STREET_URL, json={"streetName": "Broadway", "streetCode": "BRD"}
        )

        assert response.status_code == 200
        assert response.json()["streetName"] == "Broadway"
        assert client.get(STREET_URL).status_code == 404

    def test_update_street_not_found(self, client: TestClient, sample_district):
        response = client.put(
            "/api/streets/NOPE/district/DT/city/MET",
            json={"streetName": "Broadway", "streetCode": "BRD"},
        )

        assert response.status_code == 404

    def test_delete_street(self, client: TestClient, sample_street):
        response = client.delete(STREET_URL)

        assert response.status_code == 204
        assert client.get(STREET_URL).status_code == 404

    def test_delete_street_not_found(self, client: TestClient, sample_district):
        response = client.delete("/api/streets/NOPE/district/DT/city/MET")

        assert response.status_code == 404
