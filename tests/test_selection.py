"""Tests for reference-selection factories."""

from __future__ import annotations

import pytest

from vms_schema_utils import (
    VmsValidationError,
    multi_select_mandatory,
    multi_select_optional,
    single_select_mandatory,
    single_select_optional,
)


def _message(spec, value) -> str:
    with pytest.raises(VmsValidationError) as exc_info:
        spec.validate(value)
    return str(exc_info.value)


def test_single_select_trims_identifier() -> None:
    assert single_select_mandatory("Vehicle").validate(" veh-1 ") == "veh-1"


@pytest.mark.parametrize("value", [None, "", "   ", 7])
def test_single_select_mandatory_blank(value: object) -> None:
    assert _message(single_select_mandatory("Vehicle"), value) == "Please select Vehicle."


@pytest.mark.parametrize("value", [None, "", 7])
def test_single_select_optional_defaults_to_empty(value: object) -> None:
    assert single_select_optional("MasterMainTimeZone").validate(value) == ""


class TestMultiSelect:
    """Tests for multi-selections."""

    def test_mandatory_accepts_identifiers(self) -> None:
        assert multi_select_mandatory("Vehicle").validate(["a", " b "]) == ["a", "b"]

    @pytest.mark.parametrize("value", [None, []])
    def test_mandatory_missing_fails_minimum(self, value: object) -> None:
        assert _message(multi_select_mandatory("Vehicle"), value) == "Please select at least 1 Vehicle."

    def test_mandatory_absent_takes_default(self) -> None:
        spec = multi_select_mandatory("Vehicle", 1, 10, ["v1"])
        assert spec.validate(None) == ["v1"]
        spec.validate(None).append("v2")
        assert spec.validate(None) == ["v1"]

    @pytest.mark.parametrize("value", ["v1", 5, {"id": "v1"}])
    def test_mandatory_present_non_array_fails(self, value: object) -> None:
        spec = multi_select_mandatory("Vehicle", 1, 10, ["v1"])
        assert _message(spec, value) == "Vehicle must be an array of strings."

    def test_plural_noun_for_larger_minimum(self) -> None:
        spec = multi_select_mandatory("Vehicle", min_items=2)
        assert _message(spec, ["a"]) == "Please select at least 2 Vehicles."

    def test_maximum(self) -> None:
        spec = multi_select_mandatory("Vehicle", max_items=2)
        assert _message(spec, ["a", "b", "c"]) == "Please select at most 2 Vehicles."

    def test_non_string_item(self) -> None:
        assert _message(multi_select_mandatory("Vehicle"), ["a", 3]) == "Vehicle must be an array of strings."

    def test_optional_absent_yields_default(self) -> None:
        assert multi_select_optional("Vehicle").validate(None) == []
        assert multi_select_optional("Vehicle", default=["a"]).validate("a") == ["a"]

    def test_optional_empty_is_allowed(self) -> None:
        assert multi_select_optional("Vehicle").validate([]) == []

    def test_optional_maximum(self) -> None:
        spec = multi_select_optional("Vehicle", max_items=1)
        assert _message(spec, ["a", "b"]) == "Please select at most 1 Vehicle."

    def test_default_is_not_shared(self) -> None:
        spec = multi_select_optional("Vehicle", default=["a"])
        spec.validate(None).append("b")
        assert spec.validate(None) == ["a"]
