"""
API Integration Tests for Vendor Task and Vendor Endpoints.

Tests /v1/vendor-tasks (status filter, date rules, vendor names) and /v1/vendors.
"""
import pytest
from fastapi import status


def task_payload(unit, vendor=None, **overrides):
    payload = {
        "unit_id": unit.id,
        "task_submission_date": "2024-04-01",
        "assigned_tasks": "Fix leaking sink",
        "urgent": "No",
    }
    if vendor is not None:
        payload["vendor_id"] = vendor.id
    payload.update(overrides)
    return payload


async def create_task(client, unit, vendor=None, **overrides):
    response = await client.post("/v1/vendor-tasks", json=task_payload(unit, vendor, **overrides))
    assert response.status_code == status.HTTP_201_CREATED, response.text
    return response.json()["data"]


@pytest.mark.api
class TestVendorTasksAPI:
    """Test suite for vendor task endpoints."""

    async def test_create_with_vendor(self, client, locations, vendors):
        data = await create_task(client, locations.a1, vendors.plumber, urgent="yes")

        assert data["vendor_name"] == "Pipe Pros"
        assert data["urgent"] == "Yes"
        assert data["property_name"] == "Maple Court"

    async def test_completed_hidden_by_default(self, client, locations, vendors):
        await create_task(client, locations.a1, status="Completed")
        await create_task(client, locations.a2, status="In Progress")
        await create_task(client, locations.b1)

        default = (await client.get("/v1/vendor-tasks")).json()["records"]["data"]
        assert sorted(t["unit_name"] for t in default) == ["A2", "B1"]

        everything = (await client.get("/v1/vendor-tasks", params={"status": "all"})).json()
        assert everything["records"]["meta"]["total"] == 3

        completed = (await client.get("/v1/vendor-tasks", params={"status": "Completed"})).json()
        assert [t["unit_name"] for t in completed["records"]["data"]] == ["A1"]

    async def test_filter_by_vendor_name(self, client, locations, vendors):
        await create_task(client, locations.a1, vendors.plumber)
        await create_task(client, locations.c1, vendors.painter)

        data = (await client.get("/v1/vendor-tasks", params={"vendor": "coat"})).json()["records"]["data"]

        assert [t["vendor_name"] for t in data] == ["Fresh Coat"]

    async def test_ending_before_submission_rejected(self, client, locations):
        response = await client.post(
            "/v1/vendor-tasks",
            json=task_payload(locations.a1, task_ending_date="2024-03-31"),
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "task_ending_date" in response.json()["errors"]

    async def test_archived_vendor_rejected(self, client, locations, vendors, db_session):
        vendors.painter.is_archived = True
        await db_session.commit()

        response = await client.post("/v1/vendor-tasks", json=task_payload(locations.a1, vendors.painter))

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "vendor_id" in response.json()["errors"]

    async def test_update_keeps_date_rule(self, client, locations):
        created = await create_task(client, locations.a1, task_ending_date="2024-04-10")

        response = await client.put(
            f"/v1/vendor-tasks/{created['id']}", json={"task_submission_date": "2024-05-01"}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "task_ending_date" in response.json()["errors"]

    async def test_redirect_keeps_status_filter(self, client, locations):
        response = await client.post(
            "/v1/vendor-tasks",
            params={"filter_status": "all", "filter_unit": "A1"},
            json=task_payload(locations.a1),
        )

        assert response.json()["redirect_to"] == "/v1/vendor-tasks?unit=A1&status=all"

    async def test_export(self, client, locations, vendors):
        await create_task(client, locations.a1, vendors.plumber, notes="Bring parts, \"big\" wrench")

        response = await client.get("/v1/vendor-tasks/export")

        lines = response.text.splitlines()
        assert lines[0].startswith("ID,City,Property,Unit Name,Vendor Name")
        assert '"Pipe Pros"' in lines[1]
        assert '"Bring parts, ""big"" wrench"' in lines[1]


@pytest.mark.api
class TestVendorsAPI:
    async def test_create_and_archive(self, client, locations):
        created = await client.post(
            "/v1/vendors",
            json={"vendor_name": "Sparky Electric", "service_type": "Electrical", "city_id": locations.springfield.id},
        )
        assert created.status_code == status.HTTP_201_CREATED
        vendor = created.json()
        assert vendor["city_name"] == "Springfield"

        deleted = await client.delete(f"/v1/vendors/{vendor['id']}")
        assert deleted.status_code == status.HTTP_204_NO_CONTENT

        names = [v["vendor_name"] for v in (await client.get("/v1/vendors")).json()]
        assert "Sparky Electric" not in names

    async def test_unknown_city(self, client):
        response = await client.post("/v1/vendors", json={"vendor_name": "Nowhere Co", "city_id": 999})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
