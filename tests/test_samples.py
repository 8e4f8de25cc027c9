"""Tests for sample payload synthesis."""

from specscout.openapi import generate_sample


class TestGenerateSample:
    def test_top_level_example_returned_verbatim(self):
        schema = {"example": {"q": "hello"}, "properties": {"q": {"type": "string"}}}
        assert generate_sample(schema) == {"q": "hello"}

    def test_scalar_top_level_example_ignored(self):
        schema = {"example": "x", "properties": {"q": {"type": "string"}}}
        assert generate_sample(schema) == {"q": "example_q"}

    def test_property_example_wins(self):
        schema = {"properties": {"n": {"type": "integer", "example": 7}}}
        assert generate_sample(schema) == {"n": 7}

    def test_enum_first_value(self):
        schema = {"properties": {"mode": {"type": "string", "enum": ["a", "b"]}}}
        assert generate_sample(schema) == {"mode": "a"}

    def test_types(self):
        schema = {
            "properties": {
                "name": {"type": "string"},
                "price": {"type": "number"},
                "qty": {"type": "integer"},
                "active": {"type": "boolean"},
                "items": {"type": "array"},
                "meta": {"type": "object"},
                "blob": {"type": "binary"},
                "untyped": {},
            }
        }

        assert generate_sample(schema) == {
            "name": "example_name",
            "price": 0,
            "qty": 0,
            "active": True,
            "items": [],
            "meta": {},
            "blob": "example_blob",
            "untyped": "example_untyped",
        }

    def test_nullable_type_list(self):
        schema = {"properties": {"age": {"type": ["null", "integer"]}}}
        assert generate_sample(schema) == {"age": 0}

    def test_no_properties(self):
        assert generate_sample({"type": "object"}) is None
        assert generate_sample({"properties": {}}) is None
        assert generate_sample(None) is None
