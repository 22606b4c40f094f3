"""Tests for rules/naming.py.

Tests:
- longest_abbreviation
- type-name-casing
- member-name-casing
- backing-field-underscore
"""

import pytest

from ospreylint.application.rules.naming import longest_abbreviation
from tests.factories import positions, run_rule


class TestLongestAbbreviation:
    """Tests for longest_abbreviation."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("HtmlDocument", 0),
            ("IOError", 2),
            ("HTMLDocument", 4),
            ("parseURL", 3),
            ("value", 0),
        ],
    )
    def test_lengths(self, name: str, expected: int) -> None:
        """A capital starting the next word does not count."""
        assert longest_abbreviation(name) == expected


class TestTypeNameCasing:
    """Tests for type-name-casing."""

    @pytest.mark.parametrize("name", ["HtmlDocument", "IOError", "Widget", "Vec3"])
    def test_valid_names(self, name: str) -> None:
        """UpperCamelCase with short abbreviations passes."""
        assert run_rule("type-name-casing", f"class {name} {{}}\n") == ()

    def test_lower_camel_type_name(self) -> None:
        """`dataContainer` is exactly one diagnostic at the name."""
        (diagnostic,) = run_rule("type-name-casing", "class dataContainer {}\n")

        assert (diagnostic.line, diagnostic.column) == (1, 7)
        assert diagnostic.message == "type name 'dataContainer' must be UpperCamelCase"

    def test_long_abbreviation(self) -> None:
        """More than two capitals in a row is flagged."""
        (diagnostic,) = run_rule("type-name-casing", "struct HTMLDocument {}\n")

        assert "capitalizes an abbreviation longer than two letters" in diagnostic.message

    def test_snake_case_type_name(self) -> None:
        """Underscores are not allowed in type names."""
        assert len(run_rule("type-name-casing", "enum Color_Kind {}\n")) == 1

    def test_member_names_are_ignored(self) -> None:
        """Only types are checked."""
        assert run_rule("type-name-casing", "var Field;\nfn Method() {}\n") == ()


class TestMemberNameCasing:
    """Tests for member-name-casing."""

    def test_valid_members(self) -> None:
        """lowerCamelCase members pass; underscores are ignored."""
        source = "class A {\n\tvar _size;\n\n\tfn parseIO() {}\n\n\tproperty size { get; }\n}\n"

        assert run_rule("member-name-casing", source) == ()

    def test_upper_snake_constant(self) -> None:
        """Constants are lowerCamelCase too."""
        (diagnostic,) = run_rule("member-name-casing", "class A {\n\tconst MAX_SIZE = 1;\n}\n")

        assert (diagnostic.line, diagnostic.column) == (2, 8)
        assert diagnostic.message == "constant 'MAX_SIZE' must be lowerCamelCase, not UPPER_SNAKE_CASE"

    def test_upper_case_field(self) -> None:
        """An all-capitals field is UPPER_SNAKE_CASE."""
        (diagnostic,) = run_rule("member-name-casing", "var MAX;\n")

        assert diagnostic.message == "field 'MAX' must be lowerCamelCase, not UPPER_SNAKE_CASE"

    def test_upper_camel_method(self) -> None:
        """Methods must start lowercase."""
        (diagnostic,) = run_rule("member-name-casing", "fn DoThing() {}\n")

        assert diagnostic.message == "method name 'DoThing' must be lowerCamelCase"

    def test_snake_case_method(self) -> None:
        """Inner underscores are not camel case."""
        assert len(run_rule("member-name-casing", "fn get_value() {}\n")) == 1

    def test_long_abbreviation(self) -> None:
        """`parseHTML` capitalizes a four letter abbreviation."""
        (diagnostic,) = run_rule("member-name-casing", "fn parseHTML() {}\n")

        assert diagnostic.message == (
            "method name 'parseHTML' capitalizes an abbreviation longer than two letters"
        )

    def test_enum_values(self) -> None:
        """Enum values are members."""
        diagnostics = run_rule("member-name-casing", "enum Color {\n\tRED,\n\n\tgreen\n}\n")

        assert positions(diagnostics) == [(2, 2)]

    def test_types_and_operators_are_ignored(self) -> None:
        """Type names and overloaded operators are not members."""
        source = "class Vector {\n\toperator +(other) {}\n}\n"

        assert run_rule("member-name-casing", source) == ()


class TestBackingFieldUnderscore:
    """Tests for backing-field-underscore."""

    def test_backing_field_with_underscore_passes(self) -> None:
        """`_size` backing `size` is correct."""
        source = "class A {\n\tvar _size = 0;\n\n\tproperty size { get { return _size; } }\n}\n"

        assert run_rule("backing-field-underscore", source) == ()

    def test_field_read_by_other_property_is_not_backing(self) -> None:
        """A helper field that a computed property reads keeps its plain name."""
        source = (
            "class Bag {\n\tvar items = [];\n\n"
            "\tproperty count {\n\t\tget { return items.length; }\n\t}\n}\n"
        )

        assert run_rule("backing-field-underscore", source) == ()

    def test_underscored_field_read_by_other_property(self) -> None:
        """Reading `_store` from property `size` does not make it a backing field."""
        source = "class A {\n\tvar _store = 0;\n\n\tproperty size { get { return _store; } }\n}\n"

        (diagnostic,) = run_rule("backing-field-underscore", source)

        assert diagnostic.message == (
            "field '_store' backs no property and must not start or end with '_'"
        )

    def test_same_name_as_property(self) -> None:
        """A private field named like a property backs it."""
        source = "class A {\n\tvar count = 0;\n\n\tproperty count { get; }\n}\n"

        (diagnostic,) = run_rule("backing-field-underscore", source)

        assert diagnostic.message == "backing field 'count' must be named '_count'"

    def test_double_underscore(self) -> None:
        """Exactly one leading underscore."""
        source = "class A {\n\tvar __size;\n\n\tproperty size { get { return __size; } }\n}\n"

        (diagnostic,) = run_rule("backing-field-underscore", source)

        assert diagnostic.message == "backing field '__size' must be named '_size'"

    def test_public_field_is_not_backing(self) -> None:
        """Only private fields back properties."""
        source = (
            "class A {\n\tpublic var size = 0;\n\n\tproperty total { get { return size; } }\n}\n"
        )

        assert run_rule("backing-field-underscore", source) == ()

    def test_underscore_without_property(self) -> None:
        """Other fields must not carry underscores."""
        (diagnostic,) = run_rule("backing-field-underscore", "class A {\n\tvar _cache;\n}\n")

        assert (diagnostic.line, diagnostic.column) == (2, 6)
        assert diagnostic.message == (
            "field '_cache' backs no property and must not start or end with '_'"
        )

    def test_trailing_underscore(self) -> None:
        """Trailing underscores are flagged too."""
        assert len(run_rule("backing-field-underscore", "var cache_;\n")) == 1

    def test_property_in_other_type_does_not_count(self) -> None:
        """Properties only back fields of the same type."""
        source = (
            "class A {\n\tvar _x;\n}\n\nclass B {\n\tproperty x { get { return _x; } }\n}\n"
        )

        assert positions(run_rule("backing-field-underscore", source)) == [(2, 6)]
