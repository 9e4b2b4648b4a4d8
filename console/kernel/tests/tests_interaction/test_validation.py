"""
Draft Validation

Structural checks per field kind. Returns error strings; empty = valid.
"""

import pytest

from console.kernel.types import EntitySchema, FieldSpec
from console.kernel.validation import has_missing_required, has_negative_number, validate_fields

SCHEMA = EntitySchema(
    name="thing",
    plural="things",
    fields=(
        FieldSpec("name", required=True),
        FieldSpec("notes", kind="text"),
        FieldSpec("price", kind="number", non_negative=True),
        FieldSpec("count", kind="integer"),
        FieldSpec("active", kind="boolean"),
        FieldSpec("status", kind="choice", choices=("on", "off")),
    ),
)

VALID = {"name": "A", "notes": "", "price": 1.5, "count": 2, "active": True, "status": "on"}


def with_(**overrides):
    return {**VALID, **overrides}


class TestValidateFields:
    def test_valid_draft(self):
        assert validate_fields(SCHEMA, VALID) == []

    def test_blank_draft_fails_required_only(self):
        errors = validate_fields(SCHEMA, SCHEMA.blank_draft())
        assert errors == ["Name is required"]

    def test_required_whitespace(self):
        assert validate_fields(SCHEMA, with_(name="\t ")) == ["Name is required"]

    def test_optional_text_may_be_empty(self):
        assert validate_fields(SCHEMA, with_(notes="")) == []

    def test_text_type(self):
        assert validate_fields(SCHEMA, with_(name=3)) == ["Name must be text"]

    def test_negative_number(self):
        errors = validate_fields(SCHEMA, with_(price=-0.01))
        assert errors == ["Price must be non-negative"]
        assert has_negative_number(errors)

    def test_negative_allowed_without_flag(self):
        assert validate_fields(SCHEMA, with_(count=-3)) == []

    def test_number_type(self):
        assert validate_fields(SCHEMA, with_(price="5")) == ["Price must be a number"]
        assert validate_fields(SCHEMA, with_(price=True)) == ["Price must be a number"]

    def test_integer_must_be_whole(self):
        assert validate_fields(SCHEMA, with_(count=2.5)) == ["Count must be a whole number"]
        assert validate_fields(SCHEMA, with_(count=2.0)) == []

    def test_nan_and_infinity_are_not_numbers(self):
        assert validate_fields(SCHEMA, with_(price=float("nan"))) == ["Price must be a number"]
        assert validate_fields(SCHEMA, with_(price=float("inf"))) == ["Price must be a number"]
        assert validate_fields(SCHEMA, with_(count=float("-inf"))) == ["Count must be a number"]

    def test_huge_integer_is_whole(self):
        assert validate_fields(SCHEMA, with_(count=10**400)) == []

    def test_missing_number(self):
        draft = dict(VALID)
        del draft["price"]
        errors = validate_fields(SCHEMA, draft)
        assert errors == ["Price is required"]
        assert has_missing_required(errors)

    def test_boolean(self):
        assert validate_fields(SCHEMA, with_(active="yes")) == ["Active must be true or false"]

    def test_choice(self):
        assert validate_fields(SCHEMA, with_(status="maybe")) == ["Status must be one of: on, off"]

    def test_unknown_key(self):
        assert validate_fields(SCHEMA, with_(colour="red")) == ["Unknown field: colour"]


class TestSchema:
    def test_blank_defaults(self):
        assert SCHEMA.blank_draft() == {
            "name": "",
            "notes": "",
            "price": 0.0,
            "count": 0,
            "active": False,
            "status": "on",
        }

    def test_declared_default_wins(self):
        spec = FieldSpec("role", kind="choice", choices=("a", "b"), default="b")
        assert spec.blank() == "b"

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            FieldSpec("x", kind="date")

    def test_choice_needs_choices(self):
        with pytest.raises(ValueError):
            FieldSpec("x", kind="choice")

    def test_duplicate_field(self):
        with pytest.raises(ValueError):
            EntitySchema(name="x", plural="xs", fields=(FieldSpec("a"), FieldSpec("a")))

    def test_id_reserved(self):
        with pytest.raises(ValueError):
            EntitySchema(name="x", plural="xs", fields=(FieldSpec("id"),))

    def test_search_fields(self):
        schema = EntitySchema(
            name="x",
            plural="xs",
            fields=(FieldSpec("a", searchable=True), FieldSpec("b"), FieldSpec("c", searchable=True)),
        )
        assert schema.search_fields == ["a", "c"]
