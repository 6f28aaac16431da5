from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from vms_schema_utils.core.errors import VmsValidationError

if TYPE_CHECKING:
    import pandas as pd

    from vms_schema_utils.models.base import SchemaBase

logger = logging.getLogger(__name__)

_ERROR_MODES = ("raise", "coerce", "ignore")


def _is_missing(value: Any) -> bool:
    """True for None, NaN, NaT and pd.NA, but never for containers or arrays."""
    import pandas as pd

    if value is None:
        return True
    if pd.api.types.is_list_like(value):
        return False
    return bool(pd.isna(value))


def _record_payload(record: dict[Any, Any]) -> dict[str, Any]:
    return {str(key): None if _is_missing(value) else value for key, value in record.items()}


def validate_records(
    df: pd.DataFrame,
    schema: type[SchemaBase],
    *,
    errors: str = "coerce",
    prefix: str = "",
    error_column: str | None = None,
) -> pd.DataFrame:
    """Validate every row of a DataFrame against a schema.

    Missing cells (NaN, None) count as absent, so optional fields receive
    their defaults.

    Args:
        df: Rows to validate; columns are payload keys.
        schema: Schema each row must satisfy.
        errors: How to handle invalid rows ("raise", "coerce", "ignore").
            "coerce" fills the row with None, "ignore" keeps the raw values.
        prefix: Prefix for the output column names.
        error_column: When set, add a column with the joined error messages
            of each invalid row (None for valid rows).

    Returns:
        DataFrame with one column per schema field, aligned on ``df.index``.

    Raises:
        VmsValidationError: For the first invalid row when errors="raise".
    """
    import pandas as pd

    if errors not in _ERROR_MODES:
        raise ValueError(f"errors must be one of {_ERROR_MODES}, got {errors!r}")

    fields = list(schema.model_fields)
    rows: list[dict[str, Any]] = []
    messages: list[str | None] = []
    invalid = 0

    for record in df.to_dict(orient="records"):
        payload = _record_payload(record)
        try:
            rows.append(schema.validate_payload(payload).to_payload())
            messages.append(None)
        except VmsValidationError as exc:
            if errors == "raise":
                raise
            invalid += 1
            if errors == "coerce":
                rows.append({field: None for field in fields})
            else:
                rows.append({field: payload.get(field) for field in fields})
            messages.append(str(exc))

    if invalid:
        logger.warning("%s: %d of %d row(s) invalid", schema.__name__, invalid, len(rows))

    result = pd.DataFrame(rows, columns=fields, index=df.index)
    if prefix:
        result = result.add_prefix(prefix)
    if error_column:
        result[error_column] = messages
    return result


class SchemaAccessor:
    """Pandas accessor for schema validation.

    Usage:
        >>> from vms_schema_utils.pandas_ext import register_accessor
        >>> register_accessor()
        >>> df = pd.DataFrame({"search": ["  truck  "], "page_count": ["25"]})
        >>> df.vms.validate(BaseQuerySchema)
    """

    def __init__(self, pandas_obj: pd.DataFrame) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas DataFrame this accessor is attached to.
        """
        self._obj = pandas_obj

    def validate(
        self,
        schema: type[SchemaBase],
        *,
        errors: str = "coerce",
        prefix: str = "",
        error_column: str | None = None,
    ) -> pd.DataFrame:
        """Validate each row; see :func:`validate_records`."""
        return validate_records(
            self._obj, schema, errors=errors, prefix=prefix, error_column=error_column
        )

    def is_valid(self, schema: type[SchemaBase]) -> pd.Series:
        """Boolean Series marking rows that satisfy ``schema``."""
        checked = validate_records(self._obj, schema, errors="coerce", error_column="_errors")
        return checked["_errors"].isna()


def register_accessor(name: str = "vms") -> None:
    """Register the schema accessor on pandas DataFrames.

    After calling this, you can use:
        >>> df.vms.validate(BaseQuerySchema)

    Args:
        name: Name for the accessor (default: "vms").
    """
    import pandas as pd

    if not hasattr(pd.DataFrame, name):
        pd.api.extensions.register_dataframe_accessor(name)(SchemaAccessor)
