"""Validator factories and payload validators."""

from __future__ import annotations

from vms_schema_utils.validation.composite import (
    dynamic_json_schema,
    nested_array_of_object_mandatory,
    nested_array_of_objects_optional,
    nested_object_mandatory,
    nested_object_optional,
)
from vms_schema_utils.validation.enums import (
    enum_array_mandatory,
    enum_array_optional,
    enum_mandatory,
    enum_optional,
    get_all_enums,
)
from vms_schema_utils.validation.primitives import (
    boolean_mandatory,
    boolean_optional,
    date_mandatory,
    date_optional,
    date_time_mandatory,
    date_time_optional,
    double_mandatory,
    double_mandatory_amount,
    double_mandatory_lat_lng,
    double_optional,
    double_optional_amount,
    double_optional_lat_lng,
    number_array_mandatory,
    number_array_optional,
    number_mandatory,
    number_optional,
    string_array_mandatory,
    string_array_optional,
    string_mandatory,
    string_optional,
    string_uuid_mandatory,
)
from vms_schema_utils.validation.selection import (
    multi_select_mandatory,
    multi_select_optional,
    single_select_mandatory,
    single_select_optional,
)

__all__ = [
    # Strings
    "string_mandatory",
    "string_optional",
    "string_uuid_mandatory",
    "string_array_mandatory",
    "string_array_optional",
    # Numbers
    "number_mandatory",
    "number_optional",
    "number_array_mandatory",
    "number_array_optional",
    "double_mandatory",
    "double_optional",
    "double_mandatory_lat_lng",
    "double_optional_lat_lng",
    "double_mandatory_amount",
    "double_optional_amount",
    # Booleans and dates
    "boolean_mandatory",
    "boolean_optional",
    "date_mandatory",
    "date_optional",
    "date_time_mandatory",
    "date_time_optional",
    # Enums
    "enum_mandatory",
    "enum_optional",
    "enum_array_mandatory",
    "enum_array_optional",
    "get_all_enums",
    # Selections
    "single_select_mandatory",
    "single_select_optional",
    "multi_select_mandatory",
    "multi_select_optional",
    # Composites
    "nested_object_mandatory",
    "nested_object_optional",
    "nested_array_of_object_mandatory",
    "nested_array_of_objects_optional",
    "dynamic_json_schema",
]
