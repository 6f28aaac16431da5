"""Payload validators built on abstract_validation_base.

These report problems as a :class:`ValidationResult` instead of raising,
which suits batch jobs that need every bad record, not just the first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)
from pydantic import ValidationError

from vms_schema_utils.models.base import SchemaBase

logger = logging.getLogger(__name__)

Payload = Mapping[str, Any]


def _location(loc: Sequence[Any]) -> str:
    return ".".join(str(part) for part in loc)


def _lookup(payload: Payload, loc: Sequence[Any]) -> Any:
    """Raw input at ``loc``, or ``None`` when the path does not exist."""
    current: Any = payload
    for part in loc:
        try:
            current = current[part]
        except (KeyError, IndexError, TypeError):
            return None
    return current


class SchemaPayloadValidator(BaseValidator[Payload]):
    """Validates a raw payload against a schema.

    Every pydantic error becomes one entry in the result, keyed by its
    dotted location (``order_by.0.direction``).
    """

    def __init__(self, schema: type[SchemaBase]) -> None:
        """Initialize the validator.

        Args:
            schema: Schema class the payload must satisfy.
        """
        self._schema = schema

    @property
    def name(self) -> str:
        """Name of this validator."""
        return f"schema:{self._schema.__name__}"

    def validate(self, payload: Payload) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        try:
            self._schema.model_validate(payload)
        except ValidationError as exc:
            for err in exc.errors():
                loc = err.get("loc", ())
                result.add_error(_location(loc), err["msg"], _lookup(payload, loc))
        return result


class RuleValidator(BaseValidator[Payload]):
    """Cross-field rule expressed as a predicate over the raw payload.

    Example:
        >>> RuleValidator(
        ...     "page_window",
        ...     lambda p: p.get("page_count", 100) >= 1,
        ...     field="page_count",
        ...     message="Page Count must be at least 1 when paging.",
        ... )
    """

    def __init__(
        self,
        rule_name: str,
        predicate: Callable[[Payload], bool],
        *,
        field: str,
        message: str,
    ) -> None:
        self._rule_name = rule_name
        self._predicate = predicate
        self._field = field
        self._message = message

    @property
    def name(self) -> str:
        return self._rule_name

    def validate(self, payload: Payload) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        if not self._predicate(payload):
            result.add_error(self._field, self._message, payload.get(self._field))
        return result


def create_payload_validators(
    schema: type[SchemaBase],
    *extra: BaseValidator[Payload],
) -> CompositeValidator[Payload]:
    """Build the validator pipeline for a schema.

    Args:
        schema: Schema every payload must satisfy.
        *extra: Additional validators run after the schema check.

    Returns:
        CompositeValidator running all validators and merging their results.
    """
    builder: ValidatorPipelineBuilder[Payload] = ValidatorPipelineBuilder(
        f"{schema.__name__}_validation"
    )
    builder.add(SchemaPayloadValidator(schema))
    for validator in extra:
        builder.add(validator)
    return builder.build()


def validate_batch(
    payloads: Iterable[Payload],
    validator: BaseValidator[Payload],
) -> list[ValidationResult]:
    """Validate many payloads, one result per payload in input order."""
    results = [validator.validate(payload) for payload in payloads]
    failed = sum(1 for result in results if not result.is_valid)
    if failed:
        logger.warning("%s: %d of %d payload(s) invalid", validator.name, failed, len(results))
    else:
        logger.debug("%s: %d payload(s) valid", validator.name, len(results))
    return results
