"""
API Integration Tests for Move-In Endpoints.

Tests the /v1/move-ins index, export and CRUD endpoints, including the shared
index behaviour (filters, pagination, redirects, permissions).
"""
import csv
import io

import pytest
from fastapi import status

from backoffice.core.security import AuthenticatedUser


def move_in_payload(unit, **overrides):
    payload = {
        "unit_id": unit.id,
        "signed_lease": "Yes",
        "move_in_date": "2024-03-01",
    }
    payload.update(overrides)
    return payload


@pytest.mark.api
class TestMoveInsCRUD:
    """Create, read, update and archive move-ins."""

    async def test_create_registers_tenant(self, client, locations):
        response = await client.post(
            "/v1/move-ins",
            json=move_in_payload(
                locations.a2,
                city_id=locations.springfield.id,
                property_id=locations.maple.id,
                first_name="Ada",
                last_name="Lovelace",
            ),
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["message"] == "Move-in created successfully."
        assert body["redirect_to"] == "/v1/move-ins"

        data = body["data"]
        assert data["tenant_name"] == "Ada Lovelace"
        assert data["city_name"] == "Springfield"
        assert data["property_name"] == "Maple Court"
        assert data["unit_name"] == "A2"

        assert locations.a2.tenants == "Ada Lovelace"
        assert locations.a2.vacant == "No"

        tenants = (await client.get("/v1/tenants", params={"unit_id": locations.a2.id})).json()
        assert [t["full_name"] for t in tenants] == ["Ada Lovelace"]

    async def test_no_insurance_clears_expiration(self, client, locations):
        response = await client.post(
            "/v1/move-ins",
            json=move_in_payload(
                locations.a1,
                submitted_insurance="no",
                date_of_insurance_expiration="2025-01-01",
                filled_move_in_form="Yes",
                date_of_move_in_form_filled="02/20/2024",
            ),
        )

        data = response.json()["data"]
        assert data["submitted_insurance"] == "No"
        assert data["date_of_insurance_expiration"] is None
        assert data["date_of_move_in_form_filled"] == "2024-02-20"

    async def test_unit_outside_property_rejected(self, client, locations):
        response = await client.post(
            "/v1/move-ins",
            json=move_in_payload(
                locations.c1,
                city_id=locations.springfield.id,
                property_id=locations.maple.id,
            ),
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "unit_id" in response.json()["errors"]

    async def test_property_outside_city_rejected(self, client, locations):
        response = await client.post(
            "/v1/move-ins",
            json=move_in_payload(
                locations.c1,
                city_id=locations.springfield.id,
                property_id=locations.elm.id,
            ),
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "property_id" in response.json()["errors"]

    async def test_unknown_city_rejected(self, client, locations):
        response = await client.post(
            "/v1/move-ins",
            json=move_in_payload(locations.a1, city_id=9999, property_id=locations.maple.id),
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "city_id" in response.json()["errors"]

    async def test_update_with_names_registers_tenant(self, client, locations):
        created = (await client.post("/v1/move-ins", json=move_in_payload(locations.a2))).json()["data"]
        assert created["tenant_name"] is None

        response = await client.put(
            f"/v1/move-ins/{created['id']}",
            json={"first_name": "Ann", "last_name": "Lee"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["tenant_name"] == "Ann Lee"
        assert locations.a2.tenants == "Ann Lee"
        assert locations.a2.vacant == "No"

        tenants = (await client.get("/v1/tenants", params={"unit_id": locations.a2.id})).json()
        assert [t["full_name"] for t in tenants] == ["Ann Lee"]

    async def test_missing_fields_give_error_bag(self, client):
        response = await client.post("/v1/move-ins", json={"signed_lease": "perhaps"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        errors = response.json()["errors"]
        assert "unit_id" in errors
        assert "signed_lease" in errors

    async def test_update(self, client, locations):
        created = (await client.post("/v1/move-ins", json=move_in_payload(locations.a1))).json()["data"]

        response = await client.put(
            f"/v1/move-ins/{created['id']}",
            json={"handled_keys": "yes", "tenant_name": "Jane Doe"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["handled_keys"] == "Yes"
        assert data["tenant_name"] == "Jane Doe"
        assert data["move_in_date"] == "2024-03-01"

    async def test_update_cannot_clear_signed_lease(self, client, locations):
        created = (await client.post("/v1/move-ins", json=move_in_payload(locations.a1))).json()["data"]

        response = await client.put(f"/v1/move-ins/{created['id']}", json={"signed_lease": None})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "signed_lease" in response.json()["errors"]

    async def test_delete_archives(self, client, locations):
        created = (await client.post("/v1/move-ins", json=move_in_payload(locations.a1))).json()["data"]

        response = await client.delete(f"/v1/move-ins/{created['id']}", params={"city": "Spring"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["redirect_to"] == "/v1/move-ins?city=Spring"
        assert (await client.get(f"/v1/move-ins/{created['id']}")).status_code == status.HTTP_404_NOT_FOUND

        index = (await client.get("/v1/move-ins")).json()
        assert index["records"]["meta"]["total"] == 0

    async def test_missing_record(self, client):
        response = await client.get("/v1/move-ins/12345")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Move-in not found"

    async def test_redirect_restores_filters(self, client, locations):
        response = await client.post(
            "/v1/move-ins",
            params={"filter_city": "Spring", "filter_page": "2", "filter_per_page": "30"},
            json=move_in_payload(locations.a1),
        )

        assert response.json()["redirect_to"] == "/v1/move-ins?city=Spring&per_page=30&page=2"


@pytest.mark.api
class TestMoveInsIndex:
    """Filtering, ordering and pagination of the index."""

    async def test_filters_by_location_names(self, client, locations):
        await client.post("/v1/move-ins", json=move_in_payload(locations.a1))
        await client.post("/v1/move-ins", json=move_in_payload(locations.b1))
        await client.post("/v1/move-ins", json=move_in_payload(locations.c1))

        springfield = (await client.get("/v1/move-ins", params={"city": "spring"})).json()
        assert {r["unit_name"] for r in springfield["records"]["data"]} == {"A1", "B1"}
        assert springfield["filters"]["city"] == "spring"

        oak = (await client.get("/v1/move-ins", params={"city": "Spring", "property": "oak"})).json()
        assert [r["unit_name"] for r in oak["records"]["data"]] == ["B1"]

    async def test_newest_move_in_first(self, client, locations):
        await client.post("/v1/move-ins", json=move_in_payload(locations.a1, move_in_date="2024-01-01"))
        await client.post("/v1/move-ins", json=move_in_payload(locations.a2, move_in_date="2024-06-01"))

        data = (await client.get("/v1/move-ins")).json()["records"]["data"]

        assert [r["move_in_date"] for r in data] == ["2024-06-01", "2024-01-01"]

    async def test_index_carries_location_options(self, client, locations):
        body = (await client.get("/v1/move-ins")).json()

        assert len(body["cities"]) == 2
        assert str(locations.maple.id) in body["unitsByProperty"]
        assert body["filters"]["per_page"] == "15"

    async def test_pagination(self, client, locations):
        for day in range(1, 18):
            await client.post(
                "/v1/move-ins", json=move_in_payload(locations.a1, move_in_date=f"2024-01-{day:02d}")
            )

        first = (await client.get("/v1/move-ins")).json()["records"]
        assert len(first["data"]) == 15
        assert first["meta"]["total"] == 17
        assert first["meta"]["last_page"] == 2
        assert first["meta"]["from"] == 1
        assert first["meta"]["to"] == 15
        assert [link["label"] for link in first["links"]] == ["Previous", "1", "2", "Next"]

        second = (await client.get("/v1/move-ins", params={"page": 2})).json()["records"]
        assert len(second["data"]) == 2
        assert second["meta"]["from"] == 16

        everything = (await client.get("/v1/move-ins", params={"per_page": "all"})).json()
        assert len(everything["records"]["data"]) == 17
        assert everything["filters"]["per_page"] == "all"

    async def test_unknown_per_page_falls_back(self, client, locations):
        body = (await client.get("/v1/move-ins", params={"per_page": "7"})).json()

        assert body["records"]["meta"]["per_page"] == 15


@pytest.mark.api
class TestMoveInsExport:
    """CSV download of the current index page."""

    async def test_export_current_page(self, client, locations):
        await client.post(
            "/v1/move-ins",
            json=move_in_payload(locations.a1, tenant_name='Jane "JD" Doe', lease_signing_date="2024-02-15"),
        )
        await client.post("/v1/move-ins", json=move_in_payload(locations.c1))

        response = await client.get("/v1/move-ins/export", params={"city": "Springfield"})

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"].startswith("text/csv")
        assert "attachment" in response.headers["content-disposition"]
        assert "move-ins-" in response.headers["content-disposition"]

        rows = list(csv.reader(io.StringIO(response.text)))
        assert rows[0][:5] == ["ID", "City", "Property", "Unit Name", "Tenant Name"]
        assert len(rows) == 2
        assert rows[1][1:5] == ["Springfield", "Maple Court", "A1", 'Jane "JD" Doe']
        assert rows[1][6] == "02/15/2024"
        assert rows[1][7] == "03/01/2024"

    async def test_export_empty(self, client):
        response = await client.get("/v1/move-ins/export")

        assert response.status_code == status.HTTP_200_OK
        assert len(response.text.splitlines()) == 1


@pytest.mark.api
class TestMoveInsPermissions:
    """Permission checks on the move-in endpoints."""

    @pytest.fixture
    def current_user(self):
        return AuthenticatedUser(
            uid="viewer",
            email="viewer@example.com",
            claims={"role": "staff", "permissions": ["move-in.index"]},
        )

    async def test_index_allowed(self, client):
        response = await client.get("/v1/move-ins")

        assert response.status_code == status.HTTP_200_OK

    async def test_store_forbidden(self, client, locations):
        response = await client.post("/v1/move-ins", json=move_in_payload(locations.a1))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == "Missing permission: move-in.store"
