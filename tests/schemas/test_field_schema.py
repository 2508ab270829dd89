"""Tests for building a ConfigSchema from a declarative field table."""

import pytest
from pydantic import ValidationError

from layerconf.coercion import FieldKind
from layerconf.contracts import SchemaError, UnsupportedFieldType
from layerconf.schemas.field import (
    ConfigSchema,
    FieldDescriptor,
    extract_schema,
    normalize_kind,
    parse_required,
)

pytestmark = pytest.mark.unit


class TestExtractSchema:

    def test_declaration_order_is_preserved(self, field_table):
        schema = extract_schema(field_table)

        assert schema.names == ["StringVal", "IntVal", "BoolVal", "API_SECRET", "FloatVal"]
        assert len(schema) == 5

    def test_descriptor_attributes(self, field_table):
        schema = extract_schema(field_table)
        descriptor = schema.get("StringVal")

        assert descriptor.kind is FieldKind.TEXT
        assert descriptor.source_key == "TEST_STRING"
        assert descriptor.default_text == "defaultStr"
        assert descriptor.required is True

    def test_source_key_falls_back_to_name(self):
        schema = extract_schema([{"name": "Count", "kind": "integer"}])

        assert schema.get("Count").source_key == "Count"

    def test_source_key_alias(self):
        schema = extract_schema([{"name": "Count", "kind": "integer", "source_key": "APP_COUNT"}])

        assert schema.get("Count").source_key == "APP_COUNT"

    def test_missing_default_is_empty_text(self):
        schema = extract_schema([{"name": "Name", "kind": "text"}])

        assert schema.get("Name").default_text == ""

    def test_scalar_defaults_are_rendered_as_text(self):
        schema = extract_schema([
            {"name": "Count", "kind": int, "default": 42},
            {"name": "Debug", "kind": bool, "default": True},
            {"name": "Ratio", "kind": float, "default": 0.5},
        ])

        assert schema.default_texts() == {"Count": "42", "Debug": "true", "Ratio": "0.5"}

    def test_non_scalar_default_is_rejected(self):
        with pytest.raises(SchemaError):
            extract_schema([{"name": "Hosts", "kind": "text", "default": ["a", "b"]}])

    def test_positional_rows(self):
        schema = extract_schema([
            ("Debug", "boolean", "false"),
            ("Port", "integer", "8080", "APP_PORT", "true"),
        ])

        assert schema.get("Debug").default_text == "false"
        assert schema.get("Port").source_key == "APP_PORT"
        assert schema.get("Port").required is True

    def test_descriptor_rows_are_kept(self):
        descriptor = FieldDescriptor(name="Name", kind=FieldKind.TEXT, source_key="APP_NAME")
        schema = extract_schema([descriptor])

        assert schema.get("Name") is descriptor

    def test_existing_schema_is_returned_unchanged(self, field_table):
        schema = extract_schema(field_table)

        assert extract_schema(schema) is schema

    def test_membership(self, field_table):
        schema = extract_schema(field_table)

        assert "IntVal" in schema
        assert "Missing" not in schema
        assert schema.get("Missing") is None


class TestKinds:

    @pytest.mark.parametrize("declared,expected", [
        (str, FieldKind.TEXT),
        (int, FieldKind.INTEGER),
        (float, FieldKind.FLOAT),
        (bool, FieldKind.BOOLEAN),
        ("string", FieldKind.TEXT),
        ("int64", FieldKind.INTEGER),
        ("float64", FieldKind.FLOAT),
        ("BOOL", FieldKind.BOOLEAN),
        (FieldKind.FLOAT, FieldKind.FLOAT),
    ])
    def test_supported_kinds(self, declared, expected):
        assert normalize_kind("Field", declared) is expected

    @pytest.mark.parametrize("declared", ["list", list, dict, bytes, None, 3])
    def test_unsupported_kind_names_the_field(self, declared):
        with pytest.raises(UnsupportedFieldType) as exc_info:
            extract_schema([
                {"name": "StringVal", "kind": "text"},
                {"name": "NonValidType", "kind": declared, "default": "0"},
            ])

        assert exc_info.value.field == "NonValidType"
        assert "NonValidType" in str(exc_info.value)

    def test_unsupported_kind_is_a_schema_error(self):
        with pytest.raises(SchemaError):
            extract_schema([{"name": "Items", "kind": "array"}])


class TestRequiredFlag:

    @pytest.mark.parametrize("flag,expected", [
        (True, True),
        ("true", True),
        ("TRUE", True),
        ("1", True),
        (" t ", True),
        (False, False),
        ("false", False),
        (None, False),
        ("yes", False),
        ("required", False),
    ])
    def test_only_true_booleans_mark_required(self, flag, expected):
        assert parse_required(flag) is expected

    def test_unparsable_flag_does_not_raise(self):
        schema = extract_schema([{"name": "Name", "kind": "text", "required": "maybe"}])

        assert schema.get("Name").required is False


class TestMalformedTables:

    def test_none_table(self):
        with pytest.raises(SchemaError):
            extract_schema(None)

    def test_mapping_table(self):
        with pytest.raises(SchemaError):
            extract_schema({"name": "Name", "kind": "text"})

    def test_duplicate_names(self):
        with pytest.raises(SchemaError) as exc_info:
            extract_schema([
                {"name": "Name", "kind": "text"},
                {"name": "Name", "kind": "integer"},
            ])

        assert "Name" in str(exc_info.value)

    @pytest.mark.parametrize("name", ["my-field", "", "1st", None])
    def test_names_must_be_identifiers(self, name):
        with pytest.raises(SchemaError):
            extract_schema([{"name": name, "kind": "text"}])

    def test_unknown_row_attribute(self):
        with pytest.raises(SchemaError):
            extract_schema([{"name": "Name", "kind": "text", "mask": True}])

    def test_missing_kind(self):
        with pytest.raises(SchemaError):
            extract_schema([{"name": "Name"}])

    def test_short_positional_row(self):
        with pytest.raises(SchemaError):
            extract_schema([("Name",)])

    def test_row_of_wrong_type(self):
        with pytest.raises(SchemaError):
            extract_schema(["Name"])


class TestImmutability:

    def test_descriptor_is_frozen(self, field_table):
        descriptor = extract_schema(field_table).get("IntVal")

        with pytest.raises(ValidationError):
            descriptor.default_text = "7"

    def test_schema_is_frozen(self, field_table):
        schema = extract_schema(field_table)

        with pytest.raises(ValidationError):
            schema.descriptors = ()

    def test_empty_schema(self):
        assert len(ConfigSchema()) == 0
