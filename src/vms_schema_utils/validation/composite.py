"""Composite validator factories: nested objects, arrays of objects and free-form JSON.

Nested specs let pydantic validate the item schema itself, so an item
error is reported at its full location (``files.2.file_name``) and fails
the whole field.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from vms_schema_utils.core.coercion import fresh
from vms_schema_utils.core.errors import SchemaDefinitionError, VmsError
from vms_schema_utils.core.field_spec import FieldSpec
from vms_schema_utils.validation.common import (
    array_type_error,
    check_default,
    check_definition_range,
    check_item_count,
    is_array,
    required_error,
)


def _is_object(value: Any, schema: type[BaseModel]) -> bool:
    return isinstance(value, (Mapping, schema))


def _object_type_error(name: str) -> VmsError:
    return VmsError.violation("object_type", "{field_name} must be an object.", field_name=name)


def blank_payload(schema: type[BaseModel]) -> dict[str, Any]:
    """Default payload of a schema, or ``{}`` for plain pydantic models."""
    new_payload = getattr(schema, "new_payload", None)
    return new_payload() if callable(new_payload) else {}


def _validated_default(name: str, annotation: Any, default: Any) -> Any:
    try:
        return TypeAdapter(annotation).validate_python(default)
    except ValidationError as exc:
        raise SchemaDefinitionError(name, f"default is invalid: {exc}") from exc


def nested_object_mandatory(
    name: str,
    schema: type[BaseModel],
    default: Mapping[str, Any] | BaseModel | None = None,
) -> FieldSpec[BaseModel]:
    """Required object validated against ``schema``.

    ``default`` (or the schema's blank payload) only pre-fills new payloads.
    """

    def normalize(value: Any) -> Any:
        if value is None:
            raise required_error(name)
        if not _is_object(value, schema):
            raise _object_type_error(name)
        return value

    def default_factory() -> Any:
        if default is None:
            return blank_payload(schema)
        return to_jsonable_python(fresh(default))

    return FieldSpec(
        name=name,
        annotation=schema,
        normalize=normalize,
        default_factory=default_factory,
        mandatory=True,
        native=True,
    )


def nested_object_optional(
    name: str,
    schema: type[BaseModel],
    default: Mapping[str, Any] | BaseModel,
) -> FieldSpec[BaseModel]:
    """Optional object; absent or non-object input yields a copy of ``default``."""
    fallback = _validated_default(name, schema, default)

    def normalize(value: Any) -> Any:
        if not _is_object(value, schema):
            return fallback.model_copy(deep=True)
        return value

    return FieldSpec(
        name=name,
        annotation=schema,
        normalize=normalize,
        default_factory=lambda: fallback.model_copy(deep=True),
        native=True,
    )


def _check_objects(name: str, items: Sequence[Any], schema: type[BaseModel]) -> list[Any]:
    if not all(_is_object(item, schema) for item in items):
        raise array_type_error(name, "objects")
    return list(items)


def nested_array_of_object_mandatory(
    name: str,
    schema: type[BaseModel],
    default: Sequence[Any] = (),
    min_items: int = 1,
    max_items: int | None = None,
) -> FieldSpec[list[BaseModel]]:
    """Required array of objects with an item-count range.

    The count is checked before the items, so an oversized array fails
    even when every item is valid.
    """
    check_definition_range(name, min_items, max_items)

    def normalize(value: Any) -> list[Any]:
        if value is None:
            raise required_error(name)
        if not is_array(value):
            raise array_type_error(name, "objects")
        check_item_count(name, value, min_items, max_items)
        return _check_objects(name, value, schema)

    return FieldSpec(
        name=name,
        annotation=list[schema],  # type: ignore[valid-type]
        normalize=normalize,
        default_factory=lambda: to_jsonable_python(fresh(list(default))),
        mandatory=True,
        native=True,
    )


def nested_array_of_objects_optional(
    name: str,
    schema: type[BaseModel],
    default: Sequence[Any] = (),
    min_items: int = 0,
    max_items: int | None = None,
) -> FieldSpec[list[BaseModel]]:
    """Optional array of objects; anything but an array yields ``default``."""
    check_definition_range(name, min_items, max_items)

    def count_rule(items: list[Any]) -> list[Any]:
        check_item_count(name, items, min_items, max_items)
        return items

    fallback = _validated_default(name, list[schema], list(default))  # type: ignore[valid-type]
    fallback = check_default(name, count_rule, fallback)

    def normalize(value: Any) -> list[Any]:
        if not is_array(value):
            return fresh(fallback)
        check_item_count(name, value, min_items, max_items)
        return _check_objects(name, value, schema)

    return FieldSpec(
        name=name,
        annotation=list[schema],  # type: ignore[valid-type]
        normalize=normalize,
        default_factory=lambda: fresh(fallback),
        native=True,
    )


def dynamic_json_schema(name: str, default: Mapping[str, Any] | None = None) -> FieldSpec[dict[str, Any]]:
    """Free-form JSON object; the contents are not validated.

    Anything that is not a mapping yields a copy of ``default`` (``{}``).
    """
    fallback = dict(default or {})

    def normalize(value: Any) -> dict[str, Any]:
        if isinstance(value, Mapping):
            return dict(value)
        return fresh(fallback)

    return FieldSpec(
        name=name,
        annotation=dict[str, Any],
        normalize=normalize,
        default_factory=lambda: fresh(fallback),
    )
