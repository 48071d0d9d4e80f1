"""Integration tests for project API."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient

from portfolio_api.services.documents import DocumentStore


async def create_project(client: AsyncClient, headers: dict, payload: dict, **overrides) -> dict:
    response = await client.post("/api/projects", headers=headers, json={**payload, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.mark.asyncio
class TestProjectsAPI:
    """Integration tests for project endpoints."""

    async def test_create_project(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test creating a project."""
        response = await client.post("/api/projects", headers=admin_headers, json=project_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["title"] == "Portfolio Site"
        assert data["slug"] == "portfolio-site"
        assert data["views"] == 0
        assert data["likes"] == 0
        assert data["featured"] is False
        assert "_id" in data
        assert "createdAt" in data

    async def test_create_project_defaults_to_draft(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test status defaults to draft when omitted."""
        payload = {k: v for k, v in project_payload.items() if k != "status"}

        data = await create_project(client, admin_headers, payload)

        assert data["status"] == "draft"

    async def test_create_project_unauthorized(
        self, client: AsyncClient, project_payload: dict
    ):
        """Test creating a project without a token."""
        response = await client.post("/api/projects", json=project_payload)

        assert response.status_code == 401
        assert response.json()["success"] is False

    async def test_create_project_forbidden_for_non_admin(
        self, client: AsyncClient, user_headers: dict, project_payload: dict
    ):
        """Test a valid non-admin token is refused."""
        response = await client.post("/api/projects", headers=user_headers, json=project_payload)

        assert response.status_code == 403
        assert response.json()["error"] == "Administrator privileges required"

    async def test_create_project_invalid_url(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test non-URL image values fail validation."""
        response = await client.post(
            "/api/projects",
            headers=admin_headers,
            json={**project_payload, "image": "not a url"},
        )

        assert response.status_code == 400
        issues = response.json()["issues"]
        assert {"field": "image", "message": "Invalid URL"} in issues

    async def test_create_project_duplicate_title(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test a title producing an existing slug is rejected."""
        await create_project(client, admin_headers, project_payload)

        response = await client.post(
            "/api/projects",
            headers=admin_headers,
            json={**project_payload, "title": "Portfolio  SITE!"},
        )

        assert response.status_code == 400

    async def test_concurrent_create_same_title(
        self, client: AsyncClient, mongo_db, admin_headers: dict, project_payload: dict
    ):
        """Test the unique slug index rejects a create that raced past the check."""
        await mongo_db["projects"].create_index("slug", unique=True)

        with patch.object(DocumentStore, "unique_slug", AsyncMock(return_value="portfolio-site")):
            first = await client.post("/api/projects", headers=admin_headers, json=project_payload)
            second = await client.post("/api/projects", headers=admin_headers, json=project_payload)

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json() == {
            "success": False,
            "error": "A project with this title already exists",
        }
    async def test_list_projects_hides_drafts_from_public(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test anonymous callers only see published projects."""
        await create_project(client, admin_headers, project_payload)
        await create_project(
            client, admin_headers, project_payload, title="Secret", status="draft"
        )

        response = await client.get("/api/projects", params={"status": "all"})

        assert response.status_code == 200
        titles = [p["title"] for p in response.json()["data"]]
        assert titles == ["Portfolio Site"]

    async def test_list_projects_admin_status_filter(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test admins may list drafts or everything."""
        await create_project(client, admin_headers, project_payload)
        await create_project(
            client, admin_headers, project_payload, title="Secret", status="draft"
        )

        drafts = await client.get(
            "/api/projects", params={"status": "draft"}, headers=admin_headers
        )
        everything = await client.get(
            "/api/projects", params={"status": "all"}, headers=admin_headers
        )

        assert [p["title"] for p in drafts.json()["data"]] == ["Secret"]
        assert len(everything.json()["data"]) == 2

    async def test_list_projects_filters(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test category, featured and search filters."""
        await create_project(client, admin_headers, project_payload)
        await create_project(
            client,
            admin_headers,
            project_payload,
            title="Mobile App",
            category="mobile",
            featured=True,
            tags=["kotlin"],
            description="An Android client.",
        )

        by_category = await client.get("/api/projects", params={"category": "mobile"})
        all_categories = await client.get("/api/projects", params={"category": "all"})
        featured = await client.get("/api/projects", params={"featured": "true"})
        search = await client.get("/api/projects", params={"search": "ANDROID"})

        assert [p["title"] for p in by_category.json()["data"]] == ["Mobile App"]
        assert len(all_categories.json()["data"]) == 2
        assert [p["title"] for p in featured.json()["data"]] == ["Mobile App"]
        assert [p["title"] for p in search.json()["data"]] == ["Mobile App"]

    async def test_search_escapes_regex(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test regex metacharacters in the search term match literally."""
        await create_project(client, admin_headers, project_payload)

        response = await client.get("/api/projects", params={"search": ".*"})

        assert response.status_code == 200
        assert response.json()["data"] == []

    async def test_get_project_increments_views(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test each detail fetch counts exactly one view."""
        project = await create_project(client, admin_headers, project_payload)

        first = await client.get(f"/api/projects/{project['_id']}")
        second = await client.get(f"/api/projects/{project['slug']}")

        assert first.status_code == 200
        assert first.json()["data"]["views"] == 1
        assert second.json()["data"]["views"] == 2

    async def test_concurrent_views_are_all_counted(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test concurrent fetches never lose an increment."""
        project = await create_project(client, admin_headers, project_payload)

        await asyncio.gather(
            *(client.get(f"/api/projects/{project['_id']}") for _ in range(5))
        )
        response = await client.get(f"/api/projects/{project['_id']}")

        assert response.json()["data"]["views"] == 6

    async def test_get_project_not_found(self, client: AsyncClient):
        """Test fetching an unknown project."""
        response = await client.get("/api/projects/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Project not found"}

    async def test_record_view(
        self, client: AsyncClient, mongo_db, admin_headers: dict, project_payload: dict
    ):
        """Test the view endpoint bumps the counter."""
        project = await create_project(client, admin_headers, project_payload)

        response = await client.post(f"/api/projects/{project['_id']}/view")

        assert response.status_code == 200
        doc = await mongo_db["projects"].find_one({"slug": project["slug"]})
        assert doc["views"] == 1

    async def test_record_view_invalid_id(self, client: AsyncClient):
        response = await client.post("/api/projects/not-an-id/view")

        assert response.status_code == 400

    async def test_update_project(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test a partial update keeps other fields and renames the slug."""
        project = await create_project(client, admin_headers, project_payload)

        response = await client.put(
            f"/api/projects/{project['_id']}",
            headers=admin_headers,
            json={"title": "Portfolio Site v2", "featured": True},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "Portfolio Site v2"
        assert data["slug"] == "portfolio-site-v2"
        assert data["featured"] is True
        assert data["category"] == "web"

    async def test_update_project_clears_optional_url(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test sending null for an optional field removes it."""
        project = await create_project(client, admin_headers, project_payload)

        response = await client.put(
            f"/api/projects/{project['_id']}",
            headers=admin_headers,
            json={"githubUrl": None},
        )

        assert response.status_code == 200
        assert "githubUrl" not in response.json()["data"]

    async def test_update_project_empty_body(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        project = await create_project(client, admin_headers, project_payload)

        response = await client.put(
            f"/api/projects/{project['_id']}", headers=admin_headers, json={}
        )

        assert response.status_code == 400

    async def test_update_project_invalid_id(self, client: AsyncClient, admin_headers: dict):
        response = await client.put(
            "/api/projects/not-an-id", headers=admin_headers, json={"featured": True}
        )

        assert response.status_code == 400

    async def test_update_project_not_found(self, client: AsyncClient, admin_headers: dict):
        response = await client.put(
            "/api/projects/507f1f77bcf86cd799439011",
            headers=admin_headers,
            json={"featured": True},
        )

        assert response.status_code == 404

    async def test_delete_project(
        self, client: AsyncClient, admin_headers: dict, project_payload: dict
    ):
        """Test deleting a project."""
        project = await create_project(client, admin_headers, project_payload)

        response = await client.delete(f"/api/projects/{project['_id']}", headers=admin_headers)
        assert response.status_code == 200

        again = await client.delete(f"/api/projects/{project['_id']}", headers=admin_headers)
        assert again.status_code == 404
