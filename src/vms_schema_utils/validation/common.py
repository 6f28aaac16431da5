"""Constraint checks and error builders shared by the factories."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any

from pydantic_core import PydanticCustomError

from vms_schema_utils.core.coercion import format_bound, fresh
from vms_schema_utils.core.errors import SchemaDefinitionError, VmsError
from vms_schema_utils.core.field_spec import FieldSpec


def required_error(name: str) -> VmsError:
    return VmsError.violation("required", "{field_name} is required.", field_name=name)


def check_range(
    name: str,
    value: int | float,
    minimum: int | float | None,
    maximum: int | float | None,
) -> None:
    """Reject numbers outside ``[minimum, maximum]``."""
    if minimum is not None and value < minimum:
        raise VmsError.violation(
            "number_too_small",
            "{field_name} must be at least {min}.",
            field_name=name,
            min=format_bound(minimum),
        )
    if maximum is not None and value > maximum:
        raise VmsError.violation(
            "number_too_large",
            "{field_name} must be at most {max}.",
            field_name=name,
            max=format_bound(maximum),
        )


def check_item_count(
    name: str,
    items: Sequence[Any],
    min_items: int | None,
    max_items: int | None,
) -> None:
    """Reject arrays whose length is outside ``[min_items, max_items]``."""
    if min_items is not None and len(items) < min_items:
        raise VmsError.violation(
            "array_too_short",
            "{field_name} must contain at least {min} items.",
            field_name=name,
            min=min_items,
        )
    if max_items is not None and len(items) > max_items:
        raise VmsError.violation(
            "array_too_long",
            "{field_name} must contain at most {max} items.",
            field_name=name,
            max=max_items,
        )


def check_unique(name: str, items: Sequence[Hashable]) -> None:
    """Reject arrays with repeated values."""
    if len(set(items)) != len(items):
        raise VmsError.violation(
            "array_not_unique",
            "{field_name} must contain unique values.",
            field_name=name,
        )


def array_type_error(name: str, item_kind: str) -> VmsError:
    return VmsError.violation(
        "array_type",
        "{field_name} must be an array of {item_kind}.",
        field_name=name,
        item_kind=item_kind,
    )


def is_array(value: Any) -> bool:
    """Lists and tuples count as arrays; strings and mappings do not."""
    return isinstance(value, (list, tuple))


def check_definition_range(name: str, minimum: Any, maximum: Any) -> None:
    """Fail at build time when ``minimum > maximum``."""
    if minimum is not None and maximum is not None and minimum > maximum:
        raise SchemaDefinitionError(name, f"min ({minimum}) is greater than max ({maximum})")


def check_default(name: str, rules: Callable[[Any], Any], default: Any) -> Any:
    """Run a default through the constraint checks when the field is built.

    Returns the normalized default so optional fields hand out values in the
    same shape as validated input.
    """
    try:
        return rules(default)
    except PydanticCustomError as exc:
        raise SchemaDefinitionError(name, f"default {default!r} is invalid: {exc.message()}") from exc


def array_spec(
    name: str,
    *,
    item_kind: str,
    annotation: Any,
    coerce_item: Callable[[Any], Any],
    min_items: int | None,
    max_items: int | None,
    unique: bool,
    mandatory: bool,
    default: Sequence[Any] = (),
    check_count: Callable[[list[Any]], None] | None = None,
    prepare: Callable[[Any], Any] | None = None,
    default_when_absent: bool = False,
) -> FieldSpec[list[Any]]:
    """Build an array FieldSpec from a per-item coercion.

    ``coerce_item`` returns the normalized item, or ``None`` to reject it.
    ``prepare`` may turn a raw input into a list before the array check
    (enum arrays use it to split comma-separated strings). With
    ``default_when_absent`` a ``None`` value is replaced by ``default`` and
    checked like any other input; blank strings still fail. Otherwise
    absence fails a mandatory array through ``check_count`` when given, or
    with a "required" error.
    """
    check_definition_range(name, min_items, max_items)

    def count_items(items: list[Any]) -> None:
        if check_count is not None:
            check_count(items)
        else:
            check_item_count(name, items, min_items, max_items)

    def rules(raw: Any) -> list[Any]:
        if not is_array(raw):
            raise array_type_error(name, item_kind)
        items = []
        for item in raw:
            coerced = coerce_item(item)
            if coerced is None:
                raise array_type_error(name, item_kind)
            items.append(coerced)
        count_items(items)
        if unique:
            check_unique(name, items)
        return items

    def convert(value: Any) -> Any:
        return prepare(value) if prepare is not None else value

    if mandatory:
        fallback = list(default)

        def normalize(value: Any) -> list[Any]:
            if value is None and default_when_absent:
                return rules(fresh(fallback))
            value = convert(value)
            if value is None:
                if check_count is not None:
                    check_count([])
                raise required_error(name)
            return rules(value)

        return FieldSpec(
            name=name,
            annotation=annotation,
            normalize=normalize,
            default_factory=lambda: fresh(fallback),
            mandatory=True,
        )

    normalized_default = check_default(name, rules, list(default))

    def normalize_optional(value: Any) -> list[Any]:
        value = convert(value)
        if not is_array(value):
            return fresh(normalized_default)
        return rules(value)

    return FieldSpec(
        name=name,
        annotation=annotation,
        normalize=normalize_optional,
        default_factory=lambda: fresh(normalized_default),
    )
