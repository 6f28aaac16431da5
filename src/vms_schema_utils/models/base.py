"""Composable schema base built from FieldSpecs."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, ValidationError, create_model
from pydantic_core import to_jsonable_python

from vms_schema_utils.core.errors import VmsValidationError
from vms_schema_utils.core.field_spec import FieldSpec

logger = logging.getLogger(__name__)


def _field_definitions(fields: Mapping[str, Any]) -> dict[str, Any]:
    definitions: dict[str, Any] = {}
    for key, value in fields.items():
        if isinstance(value, FieldSpec):
            definitions[key] = value.as_field()
        elif isinstance(value, tuple):
            # raw pydantic (annotation, default) definition
            definitions[key] = value
        else:
            raise TypeError(
                f"Field {key!r} must be a FieldSpec or an (annotation, default) tuple, "
                f"got {type(value).__name__}"
            )
    return definitions


class SchemaBase(BaseModel):
    """Base class for payload schemas.

    Unknown keys are dropped. Schemas are composed rather than subclassed by
    hand: :meth:`extend` adds fields to an existing schema and
    :func:`define_schema` starts a new one.

    Example:
        >>> VehicleQuery = BaseQuerySchema.extend(
        ...     {"vehicle_ids": multi_select_optional("Vehicle")},
        ...     model_name="VehicleQuery",
        ... )
        >>> VehicleQuery.validate_payload({}).page_count
        100
    """

    model_config = ConfigDict(extra="ignore")

    field_specs: ClassVar[dict[str, FieldSpec]] = {}

    @classmethod
    def extend(cls, fields: Mapping[str, Any], *, model_name: str | None = None) -> type[Self]:
        """Return a new schema with ``fields`` added (or replaced).

        Args:
            fields: Field name to FieldSpec (or raw pydantic definition).
            model_name: Name of the generated class.
        """
        model = create_model(
            model_name or f"{cls.__name__}Extended",
            __base__=cls,
            **_field_definitions(fields),
        )
        inherited = {key: spec for key, spec in cls.field_specs.items() if key not in fields}
        specs = {key: value for key, value in fields.items() if isinstance(value, FieldSpec)}
        model.field_specs = {**inherited, **specs}
        return model

    @classmethod
    def new_payload(cls) -> dict[str, Any]:
        """Blank payload holding every field's default, in wire form.

        Mandatory fields contribute their declared default too, which makes
        the result a starting point for a form rather than a valid payload.
        """
        payload: dict[str, Any] = {}
        for key, field in cls.model_fields.items():
            spec = cls.field_specs.get(key)
            if spec is not None:
                payload[key] = to_jsonable_python(spec.default)
            elif not field.is_required():
                payload[key] = to_jsonable_python(field.get_default(call_default_factory=True))
        return payload

    @classmethod
    def validate_payload(cls, payload: Mapping[str, Any] | BaseModel | None = None) -> Self:
        """Validate a raw payload.

        Raises:
            VmsValidationError: Listing every field that failed.
        """
        try:
            return cls.model_validate(payload if payload is not None else {})
        except ValidationError as exc:
            logger.warning("%s rejected payload with %d error(s)", cls.__name__, exc.error_count())
            raise VmsValidationError(exc, {"schema": cls.__name__}) from exc

    def to_payload(self) -> dict[str, Any]:
        """Dump the validated model in wire (JSON) form."""
        return self.model_dump(mode="json")


def define_schema(
    model_name: str,
    fields: Mapping[str, Any],
    *,
    base: type[SchemaBase] = SchemaBase,
) -> type[SchemaBase]:
    """Build a schema class from field specs.

    >>> OrderBySchema = define_schema("OrderBy", {
    ...     "name": string_mandatory("Order Field Name", 0, 255),
    ... })
    """
    return base.extend(fields, model_name=model_name)
