"""
API Integration Tests for Move-Out Endpoints.

Tests the /v1/move-outs endpoints and the unit bookkeeping on an ended lease.
"""
import pytest
from fastapi import status


@pytest.mark.api
class TestMoveOutsAPI:
    """Test suite for move-out endpoints."""

    async def test_ended_lease_vacates_unit(self, client, locations, db_session):
        locations.a1.tenants = "Jane Doe"
        locations.a1.vacant = "No"
        locations.a1.listed = "Yes"
        locations.a1.total_applications = 4
        await db_session.commit()

        response = await client.post(
            "/v1/move-outs",
            json={
                "unit_id": locations.a1.id,
                "tenants_name": "Jane Doe",
                "move_out_date": "2024-04-30",
                "lease_status": "Ended",
                "cleaning": "uncleaned",
                "move_out_form": "filled",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()["data"]
        assert data["cleaning"] == "uncleaned"
        assert data["unit_name"] == "A1"

        assert locations.a1.tenants is None
        assert locations.a1.vacant == "Yes"
        assert locations.a1.listed == "No"
        assert locations.a1.total_applications == 0

    async def test_active_lease_leaves_unit_alone(self, client, locations, db_session):
        locations.b1.tenants = "Sam Lee"
        locations.b1.vacant = "No"
        await db_session.commit()

        response = await client.post(
            "/v1/move-outs",
            json={"unit_id": locations.b1.id, "lease_status": "active"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert locations.b1.tenants == "Sam Lee"
        assert locations.b1.vacant == "No"

    async def test_update_to_ended_vacates_unit(self, client, locations, db_session):
        locations.c1.tenants = "John Smith"
        locations.c1.vacant = "No"
        await db_session.commit()
        created = (
            await client.post("/v1/move-outs", json={"unit_id": locations.c1.id, "lease_status": "active"})
        ).json()["data"]

        response = await client.put(f"/v1/move-outs/{created['id']}", json={"lease_status": "ended"})

        assert response.status_code == status.HTTP_200_OK
        assert locations.c1.tenants is None
        assert locations.c1.vacant == "Yes"

    async def test_invalid_cleaning_value(self, client, locations):
        response = await client.post(
            "/v1/move-outs", json={"unit_id": locations.a1.id, "cleaning": "spotless"}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "cleaning" in response.json()["errors"]

    async def test_unknown_unit(self, client):
        response = await client.post("/v1/move-outs", json={"unit_id": 999})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "unit_id" in response.json()["errors"]

    async def test_filter_and_order(self, client, locations):
        await client.post("/v1/move-outs", json={"unit_id": locations.a1.id, "move_out_date": "2024-01-31"})
        await client.post("/v1/move-outs", json={"unit_id": locations.a2.id, "move_out_date": "2024-05-31"})
        await client.post("/v1/move-outs", json={"unit_id": locations.c1.id, "move_out_date": "2024-03-31"})

        data = (await client.get("/v1/move-outs", params={"property": "Maple"})).json()["records"]["data"]

        assert [r["unit_name"] for r in data] == ["A2", "A1"]
