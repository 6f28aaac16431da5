"""Tests for nested object, object array and free-form JSON factories."""

from __future__ import annotations

import pytest

from vms_schema_utils import (
    SchemaDefinitionError,
    VmsValidationError,
    define_schema,
    dynamic_json_schema,
    nested_array_of_object_mandatory,
    nested_array_of_objects_optional,
    nested_object_mandatory,
    nested_object_optional,
    number_optional,
    string_mandatory,
)

FileSchema = define_schema(
    "FileSchema",
    {
        "file_name": string_mandatory("File Name", 1, 255),
        "file_size": number_optional("File Size", 0),
    },
)


def _error(spec, value) -> VmsValidationError:
    with pytest.raises(VmsValidationError) as exc_info:
        spec.validate(value)
    return exc_info.value


class TestNestedObject:
    def test_mandatory_validates_against_schema(self) -> None:
        record = nested_object_mandatory("File", FileSchema).validate({"file_name": " a.png "})
        assert isinstance(record, FileSchema)
        assert record.file_name == "a.png"
        assert record.file_size == 0

    def test_mandatory_absent_is_required(self) -> None:
        assert _error(nested_object_mandatory("File", FileSchema), None).error_types == ["required"]

    @pytest.mark.parametrize("value", ["a.png", 3, ["a"]])
    def test_mandatory_non_object(self, value: object) -> None:
        err = _error(nested_object_mandatory("File", FileSchema), value)
        assert str(err) == "File must be an object."

    def test_mandatory_inner_error_keeps_location(self) -> None:
        err = _error(nested_object_mandatory("File", FileSchema), {"file_name": ""})
        assert err.field_errors == {"file_name": ["File Name is required."]}

    def test_mandatory_default_is_blank_payload(self) -> None:
        assert nested_object_mandatory("File", FileSchema).default == {"file_name": "", "file_size": 0}

    def test_optional_yields_copy_of_default(self) -> None:
        spec = nested_object_optional("File", FileSchema, {"file_name": "default.png"})
        first = spec.validate(None)
        second = spec.validate("nope")
        assert first.file_name == "default.png"
        assert first == second
        assert first is not second

    def test_optional_invalid_default_is_rejected_at_build(self) -> None:
        with pytest.raises(SchemaDefinitionError):
            nested_object_optional("File", FileSchema, {"file_name": ""})


class TestNestedArray:
    """Tests for arrays of nested objects."""

    def test_valid_items(self) -> None:
        spec = nested_array_of_object_mandatory("Files", FileSchema, max_items=3)
        items = spec.validate([{"file_name": "a"}, FileSchema(file_name="b")])
        assert [item.file_name for item in items] == ["a", "b"]

    def test_maximum_counts_valid_items(self) -> None:
        spec = nested_array_of_object_mandatory("Files", FileSchema, max_items=3)
        err = _error(spec, [{"file_name": str(i)} for i in range(4)])
        assert err.error_types == ["array_too_long"]
        assert str(err) == "Files must contain at most 3 items."

    def test_minimum(self) -> None:
        err = _error(nested_array_of_object_mandatory("Files", FileSchema), [])
        assert err.error_types == ["array_too_short"]

    def test_absent_is_required(self) -> None:
        assert _error(nested_array_of_object_mandatory("Files", FileSchema), None).error_types == ["required"]

    @pytest.mark.parametrize("value", ["a", [1], [{"file_name": "a"}, "b"]])
    def test_non_object_items(self, value: object) -> None:
        err = _error(nested_array_of_object_mandatory("Files", FileSchema), value)
        assert str(err) == "Files must be an array of objects."

    def test_item_error_fails_the_whole_array(self) -> None:
        ParentSchema = define_schema(
            "ParentSchema",
            {"files": nested_array_of_object_mandatory("Files", FileSchema)},
        )
        with pytest.raises(VmsValidationError) as exc_info:
            ParentSchema.validate_payload({"files": [{"file_name": "ok"}, {"file_name": "  "}]})
        assert exc_info.value.field_errors == {"files.1.file_name": ["File Name is required."]}

    def test_optional_non_array_yields_default(self) -> None:
        spec = nested_array_of_objects_optional("Files", FileSchema, [{"file_name": "a"}])
        items = spec.validate(None)
        assert [item.file_name for item in items] == ["a"]

    def test_optional_maximum(self) -> None:
        spec = nested_array_of_objects_optional("Files", FileSchema, max_items=1)
        assert _error(spec, [{"file_name": "a"}, {"file_name": "b"}]).error_types == ["array_too_long"]

    def test_optional_default_outside_count_is_rejected_at_build(self) -> None:
        with pytest.raises(SchemaDefinitionError):
            nested_array_of_objects_optional("Files", FileSchema, [], min_items=1)


class TestDynamicJson:
    def test_passes_objects_through(self) -> None:
        assert dynamic_json_schema("Include Details").validate({"vehicle": {"load": True}}) == {
            "vehicle": {"load": True}
        }

    @pytest.mark.parametrize("value", [None, "x", [1, 2], 3])
    def test_non_object_yields_default(self, value: object) -> None:
        assert dynamic_json_schema("Include Details").validate(value) == {}

    def test_default_is_not_shared(self) -> None:
        spec = dynamic_json_schema("Where Relations", {"a": 1})
        spec.validate(None)["b"] = 2
        assert spec.validate(None) == {"a": 1}
