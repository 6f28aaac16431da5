"""Enum validator factories.

An enum value set is either a ``str`` ``Enum`` class or a plain sequence of
strings. Input is accepted when it is a member, an enum member of another
class with the same value, or a raw string equal to one of the values.
Enum classes produce members; plain sequences produce the matching string.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from vms_schema_utils.core.coercion import is_blank
from vms_schema_utils.core.errors import SchemaDefinitionError, VmsError
from vms_schema_utils.core.field_spec import FieldSpec
from vms_schema_utils.validation.common import array_spec

EnumValues = type[Enum] | Sequence[str]


def _is_enum_class(enum_type: Any) -> bool:
    return isinstance(enum_type, type) and issubclass(enum_type, Enum)


def get_all_enums(enum_type: EnumValues) -> list[str]:
    """Every literal value of an enum, in declaration order.

    >>> get_all_enums(["Yes", "No"])
    ['Yes', 'No']
    """
    if _is_enum_class(enum_type):
        return [member.value for member in enum_type]  # type: ignore[union-attr]
    return list(enum_type)


class _EnumLookup:
    """Resolves raw input to a member of one value set."""

    def __init__(self, name: str, enum_type: EnumValues) -> None:
        self.name = name
        self.enum_cls = enum_type if _is_enum_class(enum_type) else None
        self.values = get_all_enums(enum_type)
        if not self.values:
            raise SchemaDefinitionError(name, "enum has no values")
        if self.enum_cls is not None:
            self._by_value: dict[Any, Any] = {m.value: m for m in self.enum_cls}
        else:
            self._by_value = {value: value for value in self.values}

    @property
    def annotation(self) -> Any:
        return self.enum_cls if self.enum_cls is not None else str

    def lookup(self, value: Any) -> Any:
        """Return the matching member, or ``None``."""
        if self.enum_cls is not None and isinstance(value, self.enum_cls):
            return value
        raw = value.value if isinstance(value, Enum) else value
        if isinstance(raw, str):
            return self._by_value.get(raw)
        return None

    def member_error(self) -> VmsError:
        return VmsError.violation(
            "enum_member",
            "{field_name} should be one of the following values: {expected}.",
            field_name=self.name,
            expected=", ".join(self.values),
        )

    def require(self, value: Any) -> Any:
        member = self.lookup(value)
        if member is None:
            raise self.member_error()
        return member

    def resolve_default(self, default: Any) -> Any:
        member = self.lookup(default)
        if member is None:
            raise SchemaDefinitionError(
                self.name, f"default {default!r} is not one of {', '.join(self.values)}"
            )
        return member


def _select_error(name: str) -> VmsError:
    return VmsError.violation("enum_required", "Please select {field_name}.", field_name=name)


def enum_mandatory(name: str, enum_type: EnumValues, default: Any) -> FieldSpec[Any]:
    """Required enum value.

    The empty string fails with "Please select <name>."; anything that is
    not a member fails listing the allowed values. ``default`` pre-fills
    blank payloads and must itself be a member.
    """
    lookup = _EnumLookup(name, enum_type)
    fallback = lookup.resolve_default(default)

    def normalize(value: Any) -> Any:
        if is_blank(value):
            raise _select_error(name)
        return lookup.require(value)

    return FieldSpec(
        name=name,
        annotation=lookup.annotation,
        normalize=normalize,
        default_factory=lambda: fallback,
        mandatory=True,
    )


def enum_optional(name: str, enum_type: EnumValues, default: Any) -> FieldSpec[Any]:
    """Optional enum value; absent, blank or non-string input yields ``default``.

    A string that is not a member still fails.
    """
    lookup = _EnumLookup(name, enum_type)
    fallback = lookup.resolve_default(default)

    def normalize(value: Any) -> Any:
        if is_blank(value) or not isinstance(value, (str, Enum)):
            return fallback
        return lookup.require(value)

    return FieldSpec(
        name=name,
        annotation=lookup.annotation,
        normalize=normalize,
        default_factory=lambda: fallback,
    )


def _split_csv(value: Any) -> Any:
    """Accept ``"Active,Inactive"`` as a two-item array."""
    if isinstance(value, str) and not isinstance(value, Enum):
        if not value.strip():
            return None
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


def enum_array_mandatory(
    name: str,
    enum_type: EnumValues,
    default: Sequence[Any] | None = None,
    min_items: int = 1,
    max_items: int = 100,
    unique: bool = False,
) -> FieldSpec[list[Any]]:
    """Required array of enum members; absent input takes ``default`` (all values when omitted)."""
    lookup = _EnumLookup(name, enum_type)
    fallback = [lookup.resolve_default(item) for item in (default if default is not None else lookup.values)]
    return array_spec(
        name,
        item_kind="values",
        annotation=list[lookup.annotation],  # type: ignore[name-defined]
        coerce_item=lookup.require,
        min_items=min_items,
        max_items=max_items,
        unique=unique,
        mandatory=True,
        default=fallback,
        prepare=_split_csv,
        default_when_absent=True,
    )


def enum_array_optional(
    name: str,
    enum_type: EnumValues,
    default: Sequence[Any] | None = None,
    min_items: int = 0,
    max_items: int = 100,
    unique: bool = False,
) -> FieldSpec[list[Any]]:
    """Optional array of enum members.

    Absent input yields ``default``, or every value of the enum when no
    default is given. Comma-separated strings are split into items.
    """
    lookup = _EnumLookup(name, enum_type)
    fallback = default if default is not None else lookup.values
    return array_spec(
        name,
        item_kind="values",
        annotation=list[lookup.annotation],  # type: ignore[name-defined]
        coerce_item=lookup.require,
        min_items=min_items,
        max_items=max_items,
        unique=unique,
        mandatory=False,
        default=fallback,
        prepare=_split_csv,
    )
