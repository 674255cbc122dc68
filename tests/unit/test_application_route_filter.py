"""Unit tests for the route filter.

Tests cover:
- Self-exclusion of reserved paths (and everything under them)
- Hide flag
- Literal and pattern path entries, tags (any-of), methods (case-insensitive)
- Absent / empty policies
"""

import re

import pytest

from openapi_live.application.services.route_filter import is_reserved, should_include
from openapi_live.domain.entities.route_definition import HTTPMethod
from openapi_live.domain.value_objects.exclusion_policy import ExclusionPolicy
from tests.conftest import make_route

RESERVED = ("/openapi", "/openapi/json")


@pytest.mark.unit
class TestReservedPaths:
    """Test self-exclusion."""

    def test_reserved_paths_and_children_are_reserved(self):
        """The page, the spec endpoint and nested paths are reserved."""
        assert is_reserved("/openapi", RESERVED)
        assert is_reserved("/openapi/json", RESERVED)
        assert is_reserved("/openapi/assets/app.js", RESERVED)

    def test_prefix_without_separator_is_not_reserved(self):
        """'/openapix' only shares a string prefix."""
        assert not is_reserved("/openapix", RESERVED)

    def test_root_reserves_only_itself(self):
        """Docs served at '/' do not hide the rest of the API."""
        reserved = ("/", "/json")

        assert is_reserved("/", reserved)
        assert is_reserved("/json", reserved)
        assert not is_reserved("/users", reserved)
        assert should_include(make_route(path="/users/:id"), None, reserved)

    def test_reserved_route_excluded_even_without_policy(self):
        """Self-exclusion does not depend on the policy."""
        assert not should_include(make_route(path="/openapi/json"), None, RESERVED)


@pytest.mark.unit
class TestShouldInclude:
    """Test should_include() across dimensions."""

    def test_no_policy_includes_everything_visible(self):
        """An absent policy excludes nothing but hidden routes."""
        assert should_include(make_route(path="/users"), None)
        assert not should_include(make_route(path="/users", hide=True), None)

    def test_empty_policy_excludes_nothing(self):
        """A policy with every dimension unset behaves like no policy."""
        assert should_include(make_route(path="/users", tags=("users",)), ExclusionPolicy())

    def test_literal_path_requires_equality(self):
        """Literal entries match the whole path only."""
        policy = ExclusionPolicy(paths=("/internal",))

        assert not should_include(make_route(path="/internal"), policy)
        assert should_include(make_route(path="/internal/stats"), policy)

    def test_pattern_path_uses_search(self):
        """Pattern entries match anywhere in the path."""
        policy = ExclusionPolicy(paths=re.compile(r"^/debug"))

        assert not should_include(make_route(path="/debug/vars"), policy)
        assert should_include(make_route(path="/api/debug"), policy)

    def test_mixed_literal_and_pattern_paths(self):
        """Literal and pattern entries combine in one list."""
        policy = ExclusionPolicy(paths=("/health", re.compile(r"/admin/")))

        assert not should_include(make_route(path="/health"), policy)
        assert not should_include(make_route(path="/v1/admin/users"), policy)
        assert should_include(make_route(path="/users"), policy)

    def test_any_excluded_tag_excludes_route(self):
        """One matching tag is enough."""
        policy = ExclusionPolicy(tags=("admin",))

        assert not should_include(make_route(path="/x", tags=("users", "admin")), policy)
        assert should_include(make_route(path="/x", tags=("users",)), policy)
        assert should_include(make_route(path="/x"), policy)

    def test_methods_match_case_insensitively(self):
        """Policy method names are compared upper-cased."""
        policy = ExclusionPolicy(methods=("delete",))

        assert not should_include(make_route(HTTPMethod.DELETE, "/x"), policy)
        assert not should_include(make_route("Delete", "/x"), policy)
        assert should_include(make_route(HTTPMethod.GET, "/x"), policy)

    def test_wildcard_route_only_excluded_by_all(self):
        """A wildcard route is not excluded by a single concrete method."""
        wildcard = make_route(HTTPMethod.ALL, "/proxy")

        assert should_include(wildcard, ExclusionPolicy(methods=("GET",)))
        assert not should_include(wildcard, ExclusionPolicy(methods=("all",)))

    def test_hidden_route_excluded_before_policy(self):
        """The hide flag wins regardless of policy contents."""
        assert not should_include(make_route(path="/x", hide=True), ExclusionPolicy())
