"""Integration tests for certification API."""

import pytest
from httpx import AsyncClient

CERTIFICATION = {
    "title": "Cloud Practitioner",
    "organization": "AWS",
    "issueDate": "2023-05",
    "badge": "aws",
    "color": "#FF9900",
    "credentialId": "ABC-123",
    "link": "https://example.com/verify/ABC-123",
}


@pytest.mark.asyncio
class TestCertificationsAPI:
    """Integration tests for certification endpoints."""

    async def test_create_and_list(self, client: AsyncClient, admin_headers: dict):
        """Test certifications are listed newest issue date first."""
        await client.post(
            "/api/certifications",
            headers=admin_headers,
            json={**CERTIFICATION, "credentialId": "OLD-1", "issueDate": "2020-01"},
        )
        created = await client.post("/api/certifications", headers=admin_headers, json=CERTIFICATION)
        assert created.status_code == 201

        response = await client.get("/api/certifications")

        assert [c["issueDate"] for c in response.json()["data"]] == ["2023-05", "2020-01"]

    async def test_duplicate_credential_id(self, client: AsyncClient, admin_headers: dict):
        """Test a repeated credential id is rejected."""
        await client.post("/api/certifications", headers=admin_headers, json=CERTIFICATION)

        response = await client.post(
            "/api/certifications",
            headers=admin_headers,
            json={**CERTIFICATION, "title": "Another"},
        )

        assert response.status_code == 400

    async def test_empty_link_and_credential_allowed(
        self, client: AsyncClient, mongo_db, admin_headers: dict
    ):
        """Test empty optional strings are stored as absent."""
        response = await client.post(
            "/api/certifications",
            headers=admin_headers,
            json={**CERTIFICATION, "link": "", "credentialId": ""},
        )

        assert response.status_code == 201
        doc = await mongo_db["certifications"].find_one({"title": "Cloud Practitioner"})
        assert "link" not in doc
        assert "credentialId" not in doc

    async def test_issue_date_too_long(self, client: AsyncClient, admin_headers: dict):
        response = await client.post(
            "/api/certifications",
            headers=admin_headers,
            json={**CERTIFICATION, "issueDate": "May 5th, 2023"},
        )

        assert response.status_code == 400

    async def test_update_and_delete(self, client: AsyncClient, admin_headers: dict):
        created = await client.post("/api/certifications", headers=admin_headers, json=CERTIFICATION)
        certification_id = created.json()["data"]["_id"]

        updated = await client.put(
            f"/api/certifications/{certification_id}",
            headers=admin_headers,
            json={"color": "#000000", "link": None},
        )
        assert updated.status_code == 200
        assert updated.json()["data"]["color"] == "#000000"
        assert "link" not in updated.json()["data"]

        deleted = await client.delete(
            f"/api/certifications/{certification_id}", headers=admin_headers
        )
        assert deleted.status_code == 200
