"""Unit tests for document store query helpers."""

import pytest
from bson import ObjectId
from fastapi import HTTPException

from portfolio_api.schemas.contact import ContactUpdate
from portfolio_api.services.documents import (
    all_of,
    id_or_slug_query,
    parse_object_id,
    visibility_query,
)
from portfolio_api.services.stores import contacts, projects, users


class TestVisibility:
    """Tests for the published/draft listing filter."""

    @pytest.mark.parametrize("requested", [None, "draft", "all", "published"])
    def test_visitors_only_see_published(self, requested):
        assert visibility_query(requested, is_admin=False) == {"status": "published"}

    def test_admin_defaults_to_published(self):
        assert visibility_query(None, is_admin=True) == {"status": "published"}

    def test_admin_can_request_drafts(self):
        assert visibility_query("draft", is_admin=True) == {"status": "draft"}

    def test_admin_all_removes_filter(self):
        assert visibility_query("all", is_admin=True) == {}


class TestQueryHelpers:
    def test_all_of_skips_empty_clauses(self):
        assert all_of(None, {}) == {}
        assert all_of({"a": 1}, None) == {"a": 1}
        assert all_of({"a": 1}, {"b": 2}) == {"$and": [{"a": 1}, {"b": 2}]}

    def test_id_or_slug(self):
        oid = ObjectId()

        assert id_or_slug_query(str(oid)) == {"$or": [{"_id": oid}, {"slug": str(oid)}]}
        assert id_or_slug_query("my-project") == {"slug": "my-project"}

    def test_parse_object_id(self):
        oid = ObjectId()

        assert parse_object_id(str(oid)) == oid

    @pytest.mark.parametrize("value", ["", "nope", "123"])
    def test_parse_object_id_rejects_malformed(self, value):
        with pytest.raises(HTTPException) as exc_info:
            parse_object_id(value, "contact")

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Invalid or missing contact ID"


class TestPartialUpdates:
    """Tests for splitting updates into $set and $unset."""

    def test_clearable_fields_are_optional_ones(self):
        clearable = contacts.clearable

        assert {"subject", "projectType", "budget", "company", "reply"} <= clearable
        assert "name" not in clearable
        assert "status" not in clearable
        assert "_id" not in clearable

    def test_split_changes(self):
        """Verify nulls clear optional fields and are ignored for required ones."""
        update = ContactUpdate.model_validate(
            {"name": None, "budget": None, "company": "Acme", "status": "read"}
        )

        to_set, to_unset = contacts.split_changes(update)

        assert to_set == {"company": "Acme", "status": "read"}
        assert to_unset == {"budget": ""}

    def test_unsent_fields_are_untouched(self):
        to_set, to_unset = contacts.split_changes(ContactUpdate(subject="Hello"))

        assert to_set == {"subject": "Hello"}
        assert to_unset == {}

    def test_not_found_message(self):
        assert contacts.not_found().detail == "Contact not found"

    def test_conflict_errors(self):
        """Verify unique index violations map to each store's conflict error."""
        assert projects.conflict().status_code == 400
        assert projects.conflict().detail == "A project with this title already exists"
        assert users.conflict().status_code == 409
        assert users.conflict().detail == "User already exists"
        assert users.conflict("Email already in use").detail == "Email already in use"
