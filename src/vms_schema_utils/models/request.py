"""Default parameters for GET-style find requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vms_schema_utils.models.enums import LoadChild, LoadParents, Paging, Status

# Query-string form: the status filter is comma-separated
DEFAULT_FIND_PARAMS: dict[str, Any] = {
    "search": "",
    "status": ",".join(status.value for status in Status),
    "load_child": LoadChild.NO.value,
    "load_parents": LoadParents.NO.value,
    "paging": Paging.YES.value,
    "page_index": 0,
    "page_count": 100,
}


def with_defaults(
    defaults: Mapping[str, Any],
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge ``overrides`` over ``defaults`` without touching either.

    >>> with_defaults(DEFAULT_FIND_PARAMS, {"page_count": 10})["page_count"]
    10
    """
    return {**defaults, **(overrides or {})}
