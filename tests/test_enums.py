"""Tests for the enum factories."""

from __future__ import annotations

import pytest

from vms_schema_utils import (
    Paging,
    SchemaDefinitionError,
    Status,
    VmsValidationError,
    YesNo,
    enum_array_mandatory,
    enum_array_optional,
    enum_mandatory,
    enum_optional,
    get_all_enums,
)


def test_get_all_enums_from_enum_class() -> None:
    assert get_all_enums(Status) == ["Active", "Inactive"]


def test_get_all_enums_from_values() -> None:
    assert get_all_enums(("asc", "desc")) == ["asc", "desc"]


class TestEnumMandatory:
    """Tests for required enum values."""

    def test_accepts_member_value(self) -> None:
        spec = enum_mandatory("Status", Status, Status.ACTIVE)
        assert spec.validate("Active") is Status.ACTIVE
        assert spec.validate(Status.INACTIVE) is Status.INACTIVE

    def test_accepts_member_of_another_enum_with_same_value(self) -> None:
        assert enum_mandatory("Paging", Paging, Paging.YES).validate(YesNo.NO) is Paging.NO

    @pytest.mark.parametrize("value", ["", None, "  "])
    def test_blank_asks_for_a_selection(self, value: object) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            enum_mandatory("Status", Status, Status.ACTIVE).validate(value)
        assert str(exc_info.value) == "Please select Status."
        assert exc_info.value.error_types == ["enum_required"]

    @pytest.mark.parametrize("value", ["Archived", "active", 1])
    def test_non_member_lists_allowed_values(self, value: object) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            enum_mandatory("Status", Status, Status.ACTIVE).validate(value)
        assert str(exc_info.value) == "Status should be one of the following values: Active, Inactive."
        assert exc_info.value.error_types == ["enum_member"]

    def test_plain_value_list(self) -> None:
        spec = enum_mandatory("Direction", ["asc", "desc"], "asc")
        assert spec.validate("desc") == "desc"
        assert spec.annotation is str

    def test_default_must_be_a_member(self) -> None:
        with pytest.raises(SchemaDefinitionError, match="Status"):
            enum_mandatory("Status", Status, "Archived")

    def test_empty_value_set_is_rejected(self) -> None:
        with pytest.raises(SchemaDefinitionError):
            enum_mandatory("Nothing", [], "x")


class TestEnumOptional:
    @pytest.mark.parametrize("value", [None, "", 5, ["Active"]])
    def test_absent_blank_or_wrong_type_yields_default(self, value: object) -> None:
        assert enum_optional("Paging", Paging, Paging.YES).validate(value) is Paging.YES

    def test_unknown_string_still_fails(self) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            enum_optional("Paging", Paging, Paging.YES).validate("Maybe")
        assert exc_info.value.error_types == ["enum_member"]

    def test_default_given_as_value(self) -> None:
        assert enum_optional("Paging", Paging, "No").validate(None) is Paging.NO


class TestEnumArrays:
    """Tests for arrays of enum values."""

    def test_optional_absent_yields_every_value(self) -> None:
        spec = enum_array_optional("Status", Status)
        assert spec.validate(None) == [Status.ACTIVE, Status.INACTIVE]
        assert spec.default == [Status.ACTIVE, Status.INACTIVE]

    def test_explicit_default(self) -> None:
        assert enum_array_optional("Status", Status, ["Active"]).validate("") == [Status.ACTIVE]

    def test_comma_separated_string_is_split(self) -> None:
        spec = enum_array_optional("Status", Status)
        assert spec.validate("Active, Inactive") == [Status.ACTIVE, Status.INACTIVE]

    def test_unknown_item_fails(self) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            enum_array_optional("Status", Status).validate(["Active", "Archived"])
        assert exc_info.value.error_types == ["enum_member"]

    def test_unique_rejects_duplicates(self) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            enum_array_optional("Status", Status, unique=True).validate(["Active", "Active"])
        assert str(exc_info.value) == "Status must contain unique values."

    def test_max_items(self) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            enum_array_optional("Status", Status, max_items=1).validate(["Active", "Inactive"])
        assert exc_info.value.error_types == ["array_too_long"]

    def test_mandatory_absent_yields_every_value(self) -> None:
        assert enum_array_mandatory("Status", Status).validate(None) == [Status.ACTIVE, Status.INACTIVE]

    def test_mandatory_absent_yields_explicit_default(self) -> None:
        spec = enum_array_mandatory("Status", Status, ["Inactive"])
        assert spec.validate(None) == [Status.INACTIVE]
        spec.validate(None).append(Status.ACTIVE)
        assert spec.validate(None) == [Status.INACTIVE]

    @pytest.mark.parametrize(("value", "error_type"), [("", "required"), ("  ", "required"), (5, "array_type")])
    def test_mandatory_present_blank_or_wrong_type_fails(self, value: object, error_type: str) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            enum_array_mandatory("Status", Status).validate(value)
        assert exc_info.value.error_types == [error_type]

    def test_mandatory_empty_is_too_short(self) -> None:
        with pytest.raises(VmsValidationError) as exc_info:
            enum_array_mandatory("Status", Status).validate([])
        assert exc_info.value.error_types == ["array_too_short"]

    def test_mandatory_default_prefills_every_value(self) -> None:
        assert enum_array_mandatory("Status", Status).default == [Status.ACTIVE, Status.INACTIVE]

    def test_invalid_default_is_rejected_at_build(self) -> None:
        with pytest.raises(SchemaDefinitionError):
            enum_array_optional("Status", Status, ["Archived"])
