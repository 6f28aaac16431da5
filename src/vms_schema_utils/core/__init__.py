"""Core building blocks: errors, coercion helpers and the FieldSpec type."""

from __future__ import annotations

from abstract_validation_base import ValidationResult

from vms_schema_utils.core.errors import (
    PACKAGE_NAME,
    SchemaDefinitionError,
    VmsError,
    VmsValidationError,
)
from vms_schema_utils.core.field_spec import FieldSpec
from vms_schema_utils.core.instrumentation import r_log

__all__ = [
    "PACKAGE_NAME",
    "FieldSpec",
    "SchemaDefinitionError",
    "ValidationResult",
    "VmsError",
    "VmsValidationError",
    "r_log",
]
