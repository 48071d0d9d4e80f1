"""Integration tests for testimonial API."""

import pytest
from httpx import AsyncClient

TESTIMONIAL = {
    "name": "Jordan Lee",
    "role": "Engineering Manager",
    "company": "Acme",
    "image": "https://example.com/jordan.png",
    "content": "Delivered the project ahead of schedule with great care.",
    "rating": 5,
    "relationship": "manager",
    "status": "published",
}


@pytest.mark.asyncio
class TestTestimonialsAPI:
    """Integration tests for testimonial endpoints."""

    async def test_create_and_list(self, client: AsyncClient, admin_headers: dict):
        """Test a published testimonial shows up in the public list."""
        created = await client.post("/api/testimonials", headers=admin_headers, json=TESTIMONIAL)
        assert created.status_code == 201
        assert "project" not in created.json()["data"]

        response = await client.get("/api/testimonials")

        assert response.status_code == 200
        assert [t["name"] for t in response.json()["data"]] == ["Jordan Lee"]

    async def test_empty_project_is_stored_as_absent(
        self, client: AsyncClient, mongo_db, admin_headers: dict
    ):
        """Test an empty project name is dropped."""
        created = await client.post(
            "/api/testimonials", headers=admin_headers, json={**TESTIMONIAL, "project": ""}
        )

        assert created.status_code == 201
        doc = await mongo_db["testimonials"].find_one({"name": "Jordan Lee"})
        assert "project" not in doc

    @pytest.mark.parametrize(
        "override, field",
        [
            ({"rating": 6}, "rating"),
            ({"rating": 0}, "rating"),
            ({"relationship": "friend"}, "relationship"),
            ({"content": "Too short"}, "content"),
            ({"name": "J"}, "name"),
        ],
    )
    async def test_validation(
        self, client: AsyncClient, admin_headers: dict, override: dict, field: str
    ):
        """Test field constraints are enforced."""
        response = await client.post(
            "/api/testimonials", headers=admin_headers, json={**TESTIMONIAL, **override}
        )

        assert response.status_code == 400
        assert field in {issue["field"] for issue in response.json()["issues"]}

    async def test_filters(self, client: AsyncClient, admin_headers: dict):
        """Test relationship and search filters."""
        await client.post("/api/testimonials", headers=admin_headers, json=TESTIMONIAL)
        await client.post(
            "/api/testimonials",
            headers=admin_headers,
            json={**TESTIMONIAL, "name": "Sam Rivera", "company": "Globex", "relationship": "client"},
        )

        clients = await client.get("/api/testimonials", params={"relationship": "client"})
        everyone = await client.get("/api/testimonials", params={"relationship": "all"})
        globex = await client.get("/api/testimonials", params={"search": "globex"})

        assert [t["name"] for t in clients.json()["data"]] == ["Sam Rivera"]
        assert len(everyone.json()["data"]) == 2
        assert [t["name"] for t in globex.json()["data"]] == ["Sam Rivera"]

    async def test_update_and_delete(self, client: AsyncClient, admin_headers: dict):
        created = await client.post("/api/testimonials", headers=admin_headers, json=TESTIMONIAL)
        testimonial_id = created.json()["data"]["_id"]

        updated = await client.put(
            f"/api/testimonials/{testimonial_id}",
            headers=admin_headers,
            json={"rating": 4, "project": "Checkout redesign"},
        )
        assert updated.status_code == 200
        assert updated.json()["data"]["rating"] == 4
        assert updated.json()["data"]["project"] == "Checkout redesign"

        fetched = await client.get(f"/api/testimonials/{testimonial_id}")
        assert fetched.json()["data"]["rating"] == 4

        deleted = await client.delete(f"/api/testimonials/{testimonial_id}", headers=admin_headers)
        assert deleted.status_code == 200

    async def test_get_invalid_id(self, client: AsyncClient):
        response = await client.get("/api/testimonials/xyz")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid or missing testimonial ID"
