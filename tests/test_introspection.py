"""Tests for require, explain, grants_for and snapshots."""

from __future__ import annotations

import pytest

from accesslist import (
    WILDCARD,
    AccessControlList,
    AccessDenied,
    Resource,
    UnknownResource,
)


class TestRequire:

    def test_passes_when_allowed(self, admin_acl: AccessControlList):
        admin_acl.grant("jim", "Admin", "read")
        admin_acl.require("jim", "Admin", "read")

    def test_raises_when_denied(self, admin_acl: AccessControlList):
        with pytest.raises(AccessDenied) as exc:
            admin_acl.require("jim", "Admin", "delete")
        assert exc.value.subject == "jim"
        assert exc.value.resource == "Admin"
        assert exc.value.action == "delete"
        assert "No grant" in exc.value.reason


class TestExplain:

    def test_allowed(self, admin_acl: AccessControlList):
        admin_acl.grant("jim", "Admin", WILDCARD)
        explanation = admin_acl.explain("jim", "Admin", "update")

        assert explanation["decision"] == "ALLOW"
        assert explanation["match"] == "resource_wildcard"
        assert explanation["granted_on"] == "Admin"
        assert explanation["resource_registered"] is True
        assert explanation["action_defined"] is True
        assert WILDCARD in explanation["available_actions"]

    def test_unregistered_resource(self, acl: AccessControlList):
        explanation = acl.explain("jim", "Unknown", "read")

        assert explanation["decision"] == "DENY"
        assert explanation["match"] is None
        assert explanation["granted_on"] is None
        assert explanation["resource_registered"] is False
        assert "available_actions" not in explanation
        assert explanation["request"] == {
            "subject": "jim",
            "resource": "Unknown",
            "action": "read",
        }


class TestIntrospection:

    def test_get_resource(self, admin_acl: AccessControlList):
        resource = admin_acl.get_resource("Admin")
        assert isinstance(resource, Resource)
        assert resource.name == "Admin"

    def test_get_unknown_resource(self, admin_acl: AccessControlList):
        with pytest.raises(UnknownResource) as exc:
            admin_acl.get_resource("Missing")
        assert exc.value.known_resources == [WILDCARD, "Admin"]

    def test_len_and_iter(self, admin_acl: AccessControlList):
        assert len(admin_acl) == 2
        assert [resource.name for resource in admin_acl] == [WILDCARD, "Admin"]

    def test_has_resource_unhashable(self, admin_acl: AccessControlList):
        assert admin_acl.has_resource(["Admin"]) is False

    def test_grants_for(self, admin_acl: AccessControlList):
        admin_acl.add_resource("Reports", actions=["view", "export"])
        admin_acl.grant("jim", "Admin", "read")
        admin_acl.grant("jim", "Admin", "update")
        admin_acl.grant("jim", "Reports", "export")
        admin_acl.grant("jane", "Reports", "view")

        assert admin_acl.grants_for("jim") == {
            "Admin": ["read", "update"],
            "Reports": ["export"],
        }
        assert admin_acl.grants_for("nobody") == {}

    def test_to_dict(self, acl: AccessControlList):
        acl.add_resource("Reports", actions=["view"], description="Monthly reports")
        acl.grant("jane", "Reports", "view")

        assert acl.to_dict() == {
            WILDCARD: {"name": WILDCARD, "actions": {WILDCARD: []}},
            "Reports": {
                "name": "Reports",
                "actions": {"view": ["jane"]},
                "description": "Monthly reports",
            },
        }

    def test_to_dict_is_a_copy(self, admin_acl: AccessControlList):
        snapshot = admin_acl.to_dict()
        snapshot["Admin"]["actions"]["read"].append("intruder")
        assert admin_acl.allowed("intruder", "Admin", "read") is False


class TestResource:

    def test_build_defaults(self):
        resource = Resource.build("Admin")
        assert list(resource.actions) == ["create", "read", "update", "delete", "*"]
        assert resource.description is None

    def test_subjects_is_a_copy(self):
        resource = Resource.build("Admin")
        resource.actions["read"].append("jim")
        resource.subjects("read").append("jane")
        assert resource.subjects("read") == ["jim"]
        assert resource.subjects("missing") == []

    def test_grant_count_and_clear(self):
        resource = Resource.build("Admin")
        resource.actions["read"].extend(["jim", "jane"])
        resource.actions["*"].append("root")
        assert resource.grant_count() == 3
        resource.clear()
        assert resource.grant_count() == 0
        assert list(resource.actions) == ["create", "read", "update", "delete", "*"]
