"""Integration tests for /api/locations."""

import uuid

import pytest


def location_body(code="IST", name="Istanbul Airport", display_order=None):
    body = {"name": name, "country": "Turkey", "city": "Istanbul", "locationCode": code}
    if display_order is not None:
        body["displayOrder"] = display_order
    return body


@pytest.fixture
def create_location(client, api_base_url, admin_headers):
    def _create(**kwargs):
        response = client.post(f"{api_base_url}/locations", json=location_body(**kwargs), headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


class TestCreateLocation:
    def test_create(self, client, api_base_url, admin_headers):
        response = client.post(f"{api_base_url}/locations", json=location_body(display_order=3), headers=admin_headers)

        assert response.status_code == 201
        data = response.json()
        assert uuid.UUID(data["id"])
        assert data["name"] == "Istanbul Airport"
        assert data["locationCode"] == "IST"
        assert data["displayOrder"] == 3

    def test_code_is_upper_cased(self, create_location):
        assert create_location(code=" saw ")["locationCode"] == "SAW"

    def test_duplicate_code_is_case_insensitive(self, client, api_base_url, admin_headers, create_location):
        create_location(code="IST")
        response = client.post(f"{api_base_url}/locations", json=location_body(code="ist"), headers=admin_headers)

        assert response.status_code == 409
        assert response.json()["message"] == "Location already exists with locationCode: 'IST'"

    @pytest.mark.parametrize("field,value", [
        ("locationCode", "I!"),
        ("locationCode", "AB"),
        ("locationCode", "ABCDEFGHIJK"),
        ("name", "X"),
        ("country", ""),
    ])
    def test_invalid_fields(self, client, api_base_url, admin_headers, field, value):
        body = location_body()
        body[field] = value
        response = client.post(f"{api_base_url}/locations", json=body, headers=admin_headers)

        assert response.status_code == 400
        assert field in [e["field"] for e in response.json()["validationErrors"]]


class TestReadLocations:
    def test_list_is_ordered(self, client, api_base_url, admin_headers, create_location):
        create_location(code="LHR", name="Heathrow")
        create_location(code="SAW", name="Sabiha", display_order=2)
        create_location(code="IST", name="Istanbul", display_order=1)

        response = client.get(f"{api_base_url}/locations", headers=admin_headers)

        assert response.status_code == 200
        assert [loc["locationCode"] for loc in response.json()] == ["IST", "SAW", "LHR"]

    def test_get(self, client, api_base_url, admin_headers, create_location):
        created = create_location()
        response = client.get(f"{api_base_url}/locations/{created['id']}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing(self, client, api_base_url, admin_headers):
        missing = uuid.uuid4()
        response = client.get(f"{api_base_url}/locations/{missing}", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["message"] == f"Location not found with id: '{missing}'"

    def test_malformed_id(self, client, api_base_url, admin_headers):
        response = client.get(f"{api_base_url}/locations/not-a-uuid", headers=admin_headers)
        assert response.status_code == 400


class TestUpdateLocation:
    def test_update(self, client, api_base_url, admin_headers, create_location):
        created = create_location()
        response = client.put(
            f"{api_base_url}/locations/{created['id']}",
            json=location_body(code="IST", name="Istanbul New Airport", display_order=7),
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Istanbul New Airport"
        assert response.json()["displayOrder"] == 7

    def test_update_to_taken_code(self, client, api_base_url, admin_headers, create_location):
        create_location(code="IST")
        saw = create_location(code="SAW", name="Sabiha")
        response = client.put(
            f"{api_base_url}/locations/{saw['id']}", json=location_body(code="IST"), headers=admin_headers
        )
        assert response.status_code == 409

    def test_update_missing(self, client, api_base_url, admin_headers):
        response = client.put(f"{api_base_url}/locations/{uuid.uuid4()}", json=location_body(), headers=admin_headers)
        assert response.status_code == 404


class TestDeleteLocation:
    def test_delete(self, client, api_base_url, admin_headers, create_location):
        created = create_location()

        assert client.delete(f"{api_base_url}/locations/{created['id']}", headers=admin_headers).status_code == 204
        assert client.get(f"{api_base_url}/locations/{created['id']}", headers=admin_headers).status_code == 404

    def test_code_reusable_after_delete(self, client, api_base_url, admin_headers, create_location):
        created = create_location(code="IST")
        client.delete(f"{api_base_url}/locations/{created['id']}", headers=admin_headers)
        assert create_location(code="IST")["id"] != created["id"]

    def test_delete_referenced_location(self, client, api_base_url, admin_headers, create_location):
        ist = create_location(code="IST")
        lhr = create_location(code="LHR", name="Heathrow")
        client.post(
            f"{api_base_url}/transportations",
            json={
                "originLocationId": ist["id"],
                "destinationLocationId": lhr["id"],
                "transportationType": "FLIGHT",
                "operatingDays": [1],
            },
            headers=admin_headers,
        )

        response = client.delete(f"{api_base_url}/locations/{lhr['id']}", headers=admin_headers)

        assert response.status_code == 409
        assert "referenced by one or more active transportations" in response.json()["message"]

    def test_delete_missing(self, client, api_base_url, admin_headers):
        assert client.delete(f"{api_base_url}/locations/{uuid.uuid4()}", headers=admin_headers).status_code == 404
