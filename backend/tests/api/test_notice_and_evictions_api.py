"""
API Integration Tests for Notice and Eviction Endpoints.

Tests the /v1/notice-and-evictions endpoints and the notice-type catalogue.
"""
from datetime import date, timedelta

import pytest
from fastapi import status


@pytest.mark.api
class TestNoticeAndEvictionsAPI:
    """Test suite for notice/eviction records."""

    async def test_alert_when_notice_elapsed(self, client, tenants, notice_types):
        response = await client.post(
            "/v1/notice-and-evictions",
            json={
                "tenant_id": tenants.jane.id,
                "date": "2024-01-02",
                "type_of_notice": "3 Day Notice",
                "have_an_exception": "No",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()["data"]
        assert data["evictions"] == "Alert"
        assert data["tenant_name"] == "Jane Doe"
        assert data["unit_name"] == "A1"
        assert data["city_name"] == "Springfield"

    async def test_no_alert_within_notice_period(self, client, tenants, notice_types):
        response = await client.post(
            "/v1/notice-and-evictions",
            json={
                "tenant_id": tenants.jane.id,
                "date": date.today().isoformat(),
                "type_of_notice": "30 Day Notice",
            },
        )

        assert response.json()["data"]["evictions"] == ""

    async def test_exception_overrides_alert(self, client, tenants, notice_types):
        response = await client.post(
            "/v1/notice-and-evictions",
            json={
                "tenant_id": tenants.john.id,
                "date": "2024-01-02",
                "type_of_notice": "3 Day Notice",
                "have_an_exception": "yes",
            },
        )

        assert response.json()["data"]["evictions"] == "Have An Exception"

    async def test_writ_date_before_notice_date(self, client, tenants, notice_types):
        response = await client.post(
            "/v1/notice-and-evictions",
            json={
                "tenant_id": tenants.jane.id,
                "date": "2024-03-10",
                "writ_date": "2024-03-01",
            },
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "writ_date" in response.json()["errors"]

    async def test_hearing_date_before_notice_date(self, client, tenants):
        response = await client.post(
            "/v1/notice-and-evictions",
            json={"tenant_id": tenants.jane.id, "date": "2024-03-10", "hearing_dates": "2024-03-09"},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "hearing_dates" in response.json()["errors"]

    async def test_unknown_notice_type(self, client, tenants):
        response = await client.post(
            "/v1/notice-and-evictions",
            json={"tenant_id": tenants.jane.id, "date": "2024-03-10", "type_of_notice": "Pay or Quit"},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "type_of_notice" in response.json()["errors"]

    async def test_archived_tenant_rejected(self, client, tenants, db_session):
        tenants.john.is_archived = True
        await db_session.commit()

        response = await client.post("/v1/notice-and-evictions", json={"tenant_id": tenants.john.id})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "tenant_id" in response.json()["errors"]

    async def test_outcome_misspelling_normalized(self, client, tenants):
        response = await client.post(
            "/v1/notice-and-evictions",
            json={"tenant_id": tenants.jane.id, "evicted_or_payment_plan": "Evected"},
        )

        assert response.json()["data"]["evicted_or_payment_plan"] == "Evicted"

    async def test_update_recomputes_evictions(self, client, tenants, notice_types):
        created = (
            await client.post(
                "/v1/notice-and-evictions",
                json={"tenant_id": tenants.jane.id, "date": date.today().isoformat(), "type_of_notice": "3 Day Notice"},
            )
        ).json()["data"]
        assert created["evictions"] == ""

        past = (date.today() - timedelta(days=10)).isoformat()
        response = await client.put(f"/v1/notice-and-evictions/{created['id']}", json={"date": past})

        assert response.json()["data"]["evictions"] == "Alert"

    async def test_filter_by_tenant_and_city(self, client, tenants):
        await client.post("/v1/notice-and-evictions", json={"tenant_id": tenants.jane.id})
        await client.post("/v1/notice-and-evictions", json={"tenant_id": tenants.john.id})

        by_tenant = (await client.get("/v1/notice-and-evictions", params={"tenant": "smith"})).json()
        assert [r["tenant_name"] for r in by_tenant["records"]["data"]] == ["John Smith"]
        assert by_tenant["filters"]["tenant"] == "smith"

        by_city = (await client.get("/v1/notice-and-evictions", params={"city": "Springfield"})).json()
        assert [r["tenant_name"] for r in by_city["records"]["data"]] == ["Jane Doe"]


@pytest.mark.api
class TestNoticeTypesAPI:
    async def test_create_and_list(self, client):
        response = await client.post("/v1/notices", json={"notice_name": "14 Day Notice", "days": 14})
        assert response.status_code == status.HTTP_201_CREATED

        names = [n["notice_name"] for n in (await client.get("/v1/notices")).json()]
        assert "14 Day Notice" in names

    async def test_duplicate_name_rejected(self, client, notice_types):
        response = await client.post("/v1/notices", json={"notice_name": "3 Day Notice", "days": 3})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "notice_name" in response.json()["errors"]
