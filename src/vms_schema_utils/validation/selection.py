"""Reference-selection helpers.

Selections hold identifiers of other records picked from a dropdown. Only
the shape is checked, never whether the referenced record exists.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from vms_schema_utils.core.coercion import clean_string
from vms_schema_utils.core.errors import VmsError
from vms_schema_utils.core.field_spec import FieldSpec
from vms_schema_utils.validation.common import array_spec


def single_select_mandatory(name: str) -> FieldSpec[str]:
    """Required identifier; blank input fails with "Please select <name>."."""

    def normalize(value: Any) -> str:
        text = clean_string(value)
        if not text:
            raise VmsError.violation("selection_required", "Please select {field_name}.", field_name=name)
        return text

    return FieldSpec(name=name, annotation=str, normalize=normalize, default_factory=str, mandatory=True)


def single_select_optional(name: str) -> FieldSpec[str]:
    """Optional identifier, ``""`` when absent."""
    return FieldSpec(name=name, annotation=str, normalize=clean_string, default_factory=str)


def _noun(name: str, count: int) -> str:
    return f"{name}s" if count > 1 else name


def _selection_count(name: str, min_items: int | None, max_items: int | None) -> Callable[[list[str]], None]:
    def check(items: list[str]) -> None:
        if min_items is not None and len(items) < min_items:
            raise VmsError.violation(
                "selection_too_short",
                "Please select at least {min} {noun}.",
                field_name=name,
                min=min_items,
                noun=_noun(name, min_items),
            )
        if max_items is not None and len(items) > max_items:
            raise VmsError.violation(
                "selection_too_long",
                "Please select at most {max} {noun}.",
                field_name=name,
                max=max_items,
                noun=_noun(name, max_items),
            )

    return check


def _identifier(item: Any) -> str | None:
    return item.strip() if isinstance(item, str) else None


def multi_select_mandatory(
    name: str,
    min_items: int = 1,
    max_items: int = 100,
    default: Sequence[str] = (),
) -> FieldSpec[list[str]]:
    """Required list of identifiers.

    Absent input takes ``default``, which must still meet the minimum, so an
    empty default fails with "Please select at least 1 <name>.".
    """
    return array_spec(
        name,
        item_kind="strings",
        annotation=list[str],
        coerce_item=_identifier,
        min_items=min_items,
        max_items=max_items,
        unique=False,
        mandatory=True,
        default=default,
        check_count=_selection_count(name, min_items, max_items),
        default_when_absent=True,
    )


def multi_select_optional(
    name: str,
    max_items: int = 1000,
    default: Sequence[str] = (),
) -> FieldSpec[list[str]]:
    """Optional list of identifiers; anything but an array yields ``default``."""
    return array_spec(
        name,
        item_kind="strings",
        annotation=list[str],
        coerce_item=_identifier,
        min_items=None,
        max_items=max_items,
        unique=False,
        mandatory=False,
        default=default,
        check_count=_selection_count(name, None, max_items),
    )
