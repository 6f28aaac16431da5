from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from abstract_validation_base import ValidationResult
    from pydantic import BaseModel


@runtime_checkable
class FieldValidatorProtocol(Protocol):
    """Protocol for single-field validators.

    Implementations normalize one raw value, raising on invalid input
    from ``validate`` and reporting problems from ``check``.
    """

    name: str

    def validate(self, value: Any = None) -> Any:
        """Return the normalized value.

        Raises:
            VmsValidationError: If the value is invalid.
        """
        ...

    def check(self, value: Any = None) -> ValidationResult:
        """Validate without raising."""
        ...


@runtime_checkable
class ApiTransportProtocol(Protocol):
    """Protocol for the JSON transport used by resource services.

    Every method returns the decoded JSON object, or an instance of
    ``response_model`` when one is given.
    """

    def get(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
        *,
        response_model: Optional[type[BaseModel]] = None,
    ) -> Any: ...

    def post(
        self, path: str, data: Any = None, *, response_model: Optional[type[BaseModel]] = None
    ) -> Any: ...

    def patch(
        self, path: str, data: Any = None, *, response_model: Optional[type[BaseModel]] = None
    ) -> Any: ...

    def delete(self, path: str, *, response_model: Optional[type[BaseModel]] = None) -> Any: ...
