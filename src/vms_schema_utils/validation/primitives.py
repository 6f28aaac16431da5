"""Primitive validator factories: strings, numbers, doubles, booleans and dates.

Every factory returns a :class:`FieldSpec`. Mandatory variants reject
absent, blank and wrongly typed input; optional variants substitute their
default for those. Present, well-typed values are checked against the
declared bounds in both variants.

Example:
    >>> spec = number_mandatory("Odometer", 0, 100)
    >>> spec.validate("42")
    42
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from datetime import date, datetime
from typing import Any

from vms_schema_utils.core.coercion import (
    as_utc,
    clean_string,
    is_blank,
    iso_string,
    now_iso,
    parse_iso,
    round_fixed,
    to_bool,
    to_number,
)
from vms_schema_utils.core.errors import SchemaDefinitionError, VmsError
from vms_schema_utils.core.field_spec import FieldSpec
from vms_schema_utils.validation.common import (
    array_spec,
    check_default,
    check_definition_range,
    check_range,
    required_error,
)

_UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

LAT_LNG_DECIMAL_PLACES = 6
LAT_LNG_BOUND = 180.0
AMOUNT_DECIMAL_PLACES = 6

Number = int | float


# =============================================================================
# Strings
# =============================================================================


def _string_rules(name: str, min_length: int, max_length: int | None) -> Callable[[str], str]:
    def rules(text: str) -> str:
        if len(text) < min_length:
            raise VmsError.violation(
                "string_too_short",
                "{field_name} must be at least {min} characters.",
                field_name=name,
                min=min_length,
            )
        if max_length is not None and len(text) > max_length:
            raise VmsError.violation(
                "string_too_long",
                "{field_name} must be at most {max} characters.",
                field_name=name,
                max=max_length,
            )
        return text

    return rules


def string_mandatory(name: str, min_length: int = 1, max_length: int = 100) -> FieldSpec[str]:
    """Required trimmed string with a length range.

    Non-string input is treated as an empty string, so it fails with
    "<name> is required.".
    """
    check_definition_range(name, min_length, max_length)
    rules = _string_rules(name, min_length, max_length)

    def normalize(value: Any) -> str:
        text = clean_string(value)
        if not text:
            raise required_error(name)
        return rules(text)

    return FieldSpec(name=name, annotation=str, normalize=normalize, default_factory=str, mandatory=True)


def string_optional(
    name: str,
    min_length: int = 0,
    max_length: int = 255,
    default: str = "",
) -> FieldSpec[str]:
    """Optional trimmed string; absent, blank or non-string input yields ``default``."""
    check_definition_range(name, min_length, max_length)
    rules = _string_rules(name, min_length, max_length)
    fallback = default.strip()
    if fallback:
        fallback = check_default(name, rules, fallback)

    def normalize(value: Any) -> str:
        text = clean_string(value)
        if not text:
            return fallback
        return rules(text)

    return FieldSpec(name=name, annotation=str, normalize=normalize, default_factory=lambda: fallback)


def string_uuid_mandatory(name: str) -> FieldSpec[str]:
    """Required string in canonical 8-4-4-4-12 UUID form."""

    def normalize(value: Any) -> str:
        text = clean_string(value)
        if not text:
            raise required_error(name)
        if not _UUID_PATTERN.match(text):
            raise VmsError.violation(
                "uuid_parsing",
                "{field_name} must be a valid UUID.",
                field_name=name,
            )
        return text

    return FieldSpec(name=name, annotation=str, normalize=normalize, default_factory=str, mandatory=True)


def _string_item(item: Any) -> str | None:
    return item.strip() if isinstance(item, str) else None


def string_array_mandatory(
    name: str,
    min_items: int = 1,
    max_items: int = 100,
    unique: bool = False,
) -> FieldSpec[list[str]]:
    """Required array of trimmed strings."""
    return array_spec(
        name,
        item_kind="strings",
        annotation=list[str],
        coerce_item=_string_item,
        min_items=min_items,
        max_items=max_items,
        unique=unique,
        mandatory=True,
    )


def string_array_optional(
    name: str,
    min_items: int = 0,
    max_items: int = 100,
    default: Sequence[str] = (),
    unique: bool = False,
) -> FieldSpec[list[str]]:
    """Optional array of trimmed strings; anything but an array yields ``default``."""
    return array_spec(
        name,
        item_kind="strings",
        annotation=list[str],
        coerce_item=_string_item,
        min_items=min_items,
        max_items=max_items,
        unique=unique,
        mandatory=False,
        default=default,
    )


# =============================================================================
# Numbers and doubles
# =============================================================================


def _number_type_error(name: str) -> VmsError:
    return VmsError.violation("number_type", "{field_name} must be a number.", field_name=name)


def _number_rules(
    name: str,
    min_value: Number | None,
    max_value: Number | None,
    decimal_places: int | None = None,
) -> Callable[[Number], Number]:
    def rules(number: Number) -> Number:
        if decimal_places is not None:
            try:
                number = round_fixed(float(number), decimal_places)
            except OverflowError:
                check_range(name, number, min_value, max_value)
                raise _number_type_error(name) from None
        check_range(name, number, min_value, max_value)
        return number

    return rules


def _numeric_spec(
    name: str,
    rules: Callable[[Number], Number],
    *,
    annotation: Any,
    mandatory: bool,
    default: Number,
) -> FieldSpec[Any]:
    if mandatory:

        def normalize(value: Any) -> Number:
            if is_blank(value):
                raise required_error(name)
            number = to_number(value)
            if number is None:
                raise _number_type_error(name)
            return rules(number)

        return FieldSpec(
            name=name,
            annotation=annotation,
            normalize=normalize,
            default_factory=lambda: default,
            mandatory=True,
        )

    fallback = check_default(name, rules, default)

    def normalize_optional(value: Any) -> Number:
        number = to_number(value)
        if number is None:
            return fallback
        return rules(number)

    return FieldSpec(
        name=name,
        annotation=annotation,
        normalize=normalize_optional,
        default_factory=lambda: fallback,
    )


def number_mandatory(
    name: str,
    min_value: Number = 1,
    max_value: Number = 1_000_000_000,
    default: Number = 0,
) -> FieldSpec[Number]:
    """Required number; numeric strings such as ``"42"`` are coerced.

    ``default`` is only used to pre-fill blank payloads.
    """
    check_definition_range(name, min_value, max_value)
    return _numeric_spec(
        name,
        _number_rules(name, min_value, max_value),
        annotation=Number,
        mandatory=True,
        default=default,
    )


def number_optional(
    name: str,
    min_value: Number = 0,
    max_value: Number = 1_000_000_000_000,
    default: Number = 0,
) -> FieldSpec[Number]:
    """Optional number; absent or non-numeric input yields ``default``.

    Out-of-range values still fail.
    """
    check_definition_range(name, min_value, max_value)
    return _numeric_spec(
        name,
        _number_rules(name, min_value, max_value),
        annotation=Number,
        mandatory=False,
        default=default,
    )


def number_array_mandatory(
    name: str,
    min_items: int = 1,
    max_items: int = 100,
    unique: bool = False,
) -> FieldSpec[list[Number]]:
    return array_spec(
        name,
        item_kind="numbers",
        annotation=list[Number],
        coerce_item=to_number,
        min_items=min_items,
        max_items=max_items,
        unique=unique,
        mandatory=True,
    )


def number_array_optional(
    name: str,
    min_items: int = 0,
    max_items: int = 100,
    default: Sequence[Number] = (),
    unique: bool = False,
) -> FieldSpec[list[Number]]:
    return array_spec(
        name,
        item_kind="numbers",
        annotation=list[Number],
        coerce_item=to_number,
        min_items=min_items,
        max_items=max_items,
        unique=unique,
        mandatory=False,
        default=default,
    )


def double_mandatory(
    name: str,
    min_value: float | None = 0.1,
    max_value: float | None = 1_000_000.0,
    decimal_places: int = 2,
    default: float = 0.0,
) -> FieldSpec[float]:
    """Required decimal rounded half away from zero to ``decimal_places``.

    Rounding happens before the range check, so ``0.096`` passes a
    ``0.1`` minimum at two places.
    """
    check_definition_range(name, min_value, max_value)
    return _numeric_spec(
        name,
        _number_rules(name, min_value, max_value, decimal_places),
        annotation=float,
        mandatory=True,
        default=default,
    )


def double_optional(
    name: str,
    min_value: float | None = 0.0,
    max_value: float | None = 1_000_000.0,
    decimal_places: int = 2,
    default: float = 0.0,
) -> FieldSpec[float]:
    """Optional rounded decimal; absent or non-numeric input yields ``default``."""
    check_definition_range(name, min_value, max_value)
    return _numeric_spec(
        name,
        _number_rules(name, min_value, max_value, decimal_places),
        annotation=float,
        mandatory=False,
        default=default,
    )


def double_mandatory_lat_lng(name: str, default: float = 0.0) -> FieldSpec[float]:
    """Required coordinate: 6 decimal places within [-180, 180].

    Latitude and longitude share the same bound.
    """
    return double_mandatory(name, -LAT_LNG_BOUND, LAT_LNG_BOUND, LAT_LNG_DECIMAL_PLACES, default)


def double_optional_lat_lng(name: str, default: float = 0.0) -> FieldSpec[float]:
    return double_optional(name, -LAT_LNG_BOUND, LAT_LNG_BOUND, LAT_LNG_DECIMAL_PLACES, default)


def double_mandatory_amount(name: str, default: float = 0.0) -> FieldSpec[float]:
    """Required monetary amount: 6 decimal places, unbounded."""
    return double_mandatory(name, None, None, AMOUNT_DECIMAL_PLACES, default)


def double_optional_amount(name: str, default: float = 0.0) -> FieldSpec[float]:
    return double_optional(name, None, None, AMOUNT_DECIMAL_PLACES, default)


# =============================================================================
# Booleans
# =============================================================================


def boolean_mandatory(name: str, default: bool = False) -> FieldSpec[bool]:
    """Required boolean; the strings ``"true"``/``"false"`` are accepted."""

    def normalize(value: Any) -> bool:
        if value is None:
            raise required_error(name)
        flag = to_bool(value)
        if flag is None:
            raise VmsError.violation(
                "boolean_type",
                "{field_name} must be true or false.",
                field_name=name,
            )
        return flag

    return FieldSpec(
        name=name,
        annotation=bool,
        normalize=normalize,
        default_factory=lambda: default,
        mandatory=True,
    )


def boolean_optional(name: str, default: bool = False) -> FieldSpec[bool]:
    def normalize(value: Any) -> bool:
        flag = to_bool(value)
        return default if flag is None else flag

    return FieldSpec(name=name, annotation=bool, normalize=normalize, default_factory=lambda: default)


# =============================================================================
# Dates
# =============================================================================

DateBound = str | date | datetime | None
DateDefault = str | Callable[[], str] | None


def _date_bound(name: str, bound: DateBound, label: str) -> datetime | None:
    if bound is None:
        return None
    moment = parse_iso(bound)
    if moment is None:
        raise SchemaDefinitionError(name, f"{label} {bound!r} is not a valid ISO date")
    return as_utc(moment)


def _date_rules(name: str, min_date: DateBound, max_date: DateBound) -> Callable[[Any], str]:
    lower = _date_bound(name, min_date, "min_date")
    upper = _date_bound(name, max_date, "max_date")
    check_definition_range(name, lower, upper)

    def rules(value: Any) -> str:
        moment = parse_iso(value)
        if moment is None:
            raise VmsError.violation(
                "date_parsing",
                "{field_name} must be a valid ISO date.",
                field_name=name,
            )
        moment = as_utc(moment)
        if lower is not None and moment < lower:
            raise VmsError.violation(
                "date_too_early",
                "{field_name} must be after {min}.",
                field_name=name,
                min=iso_string(min_date),
            )
        if upper is not None and moment > upper:
            raise VmsError.violation(
                "date_too_late",
                "{field_name} must be before {max}.",
                field_name=name,
                max=iso_string(max_date),
            )
        return iso_string(value)

    return rules


def _date_spec(
    name: str,
    min_date: DateBound,
    max_date: DateBound,
    default: DateDefault,
    *,
    mandatory: bool,
) -> FieldSpec[str]:
    rules = _date_rules(name, min_date, max_date)

    # "now" is resolved per call, never when the field is built
    if default is None:
        default_factory: Callable[[], str] = now_iso
    elif callable(default):
        default_factory = default
    else:
        fixed = check_default(name, rules, default)
        default_factory = lambda: fixed  # noqa: E731

    if mandatory:

        def normalize(value: Any) -> str:
            if is_blank(value):
                raise required_error(name)
            return rules(value)

        return FieldSpec(
            name=name,
            annotation=str,
            normalize=normalize,
            default_factory=default_factory,
            mandatory=True,
        )

    def normalize_optional(value: Any) -> str:
        if is_blank(value) or not isinstance(value, (str, date)):
            return default_factory()
        return rules(value)

    return FieldSpec(name=name, annotation=str, normalize=normalize_optional, default_factory=default_factory)


def date_mandatory(
    name: str,
    min_date: DateBound = None,
    max_date: DateBound = None,
    default: DateDefault = None,
) -> FieldSpec[str]:
    """Required ISO-8601 date string, optionally bounded by ``min_date``/``max_date``.

    Naive values are compared as UTC. The validated value is returned as
    the trimmed ISO string.
    """
    return _date_spec(name, min_date, max_date, default, mandatory=True)


def date_optional(
    name: str,
    min_date: DateBound = None,
    max_date: DateBound = None,
    default: DateDefault = None,
) -> FieldSpec[str]:
    """Optional ISO-8601 date string.

    Without an explicit ``default`` the current UTC time is used, computed
    each time a value is validated.
    """
    return _date_spec(name, min_date, max_date, default, mandatory=False)


def date_time_mandatory(
    name: str,
    min_date: DateBound = None,
    max_date: DateBound = None,
    default: DateDefault = None,
) -> FieldSpec[str]:
    return _date_spec(name, min_date, max_date, default, mandatory=True)


def date_time_optional(
    name: str,
    min_date: DateBound = None,
    max_date: DateBound = None,
    default: DateDefault = None,
) -> FieldSpec[str]:
    return _date_spec(name, min_date, max_date, default, mandatory=False)
