"""Property-based tests using hypothesis."""

from __future__ import annotations

import re

import pytest
from graphql import GraphQLObjectType, GraphQLString
from hypothesis import assume, given
from hypothesis import strategies as st

from protogql import ConversionContext, SchemaError, to_camel_case
from protogql.naming import reference_name_for

GRAPHQL_NAME = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")

identifiers = st.from_regex(r"[A-Za-z][A-Za-z0-9]{0,8}", fullmatch=True)
full_names = st.lists(identifiers, min_size=1, max_size=4).map(".".join)
field_names = st.from_regex(r"[a-z][a-z0-9_]{0,15}", fullmatch=True)


class TestReferenceNameProperties:
    """Property-based tests for reference names."""

    @given(full_name=full_names)
    def test_deterministic(self, full_name: str) -> None:
        """Test the same path always yields the same name."""
        assert reference_name_for(full_name) == reference_name_for(full_name)

    @given(first=full_names, second=full_names)
    def test_distinct_paths_never_collide(self, first: str, second: str) -> None:
        """Test distinct paths yield distinct names."""
        assume(first != second)
        assert reference_name_for(first) != reference_name_for(second)

    @given(full_name=full_names, file_name=st.from_regex(r"[a-z0-9/_.-]{0,20}\.proto", fullmatch=True))
    def test_valid_graphql_name(self, full_name: str, file_name: str) -> None:
        """Test results are always valid GraphQL names."""
        assert GRAPHQL_NAME.match(reference_name_for(full_name, file_name, ""))


class TestCamelCaseProperties:
    """Property-based tests for field name conversion."""

    @given(name=field_names)
    def test_no_underscores(self, name: str) -> None:
        """Test camelCase names contain no underscores."""
        assert "_" not in to_camel_case(name)

    @given(name=field_names)
    def test_idempotent(self, name: str) -> None:
        """Test converting twice changes nothing."""
        once = to_camel_case(name)
        assert to_camel_case(once) == once

    @given(name=field_names)
    def test_lowercase_letters_preserved(self, name: str) -> None:
        """Test only the letters after underscores change."""
        assert to_camel_case(name).lower() == name.replace("_", "")


class TestConversionContextProperties:
    """Property-based tests for the type cache."""

    @given(first=full_names, second=full_names)
    def test_one_origin_per_name(self, first: str, second: str) -> None:
        """Test a name registered for one descriptor is refused to any other."""
        assume(first != second)
        context = ConversionContext()
        registered = GraphQLObjectType("Shared", {"value": GraphQLString})
        context.register("Shared", first, registered)

        assert context.lookup("Shared", first) is registered
        with pytest.raises(SchemaError):
            context.lookup("Shared", second)
        with pytest.raises(SchemaError):
            context.register("Shared", second, registered)
