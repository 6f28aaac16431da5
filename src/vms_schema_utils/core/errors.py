"""Error classes with package identification.

Field validators raise :class:`VmsError` (a ``PydanticCustomError``) so pydantic
collects them alongside its own errors. Callers receive
:class:`VmsValidationError`, which wraps the resulting ``ValidationError``.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "vms_schema_utils"


class VmsError(PydanticCustomError):
    """Pydantic custom error carrying the package name in its context.

    The message template may reference any key of the context, e.g.
    ``"{field_name} must be at least {min} characters."``.
    """

    @classmethod
    def violation(cls, error_type: str, message_template: str, **context: Any) -> VmsError:
        """Build an error for a violated field constraint."""
        return cls(error_type, message_template, {"package": PACKAGE_NAME, **context})

    @classmethod
    def from_pydantic_error(cls, error: PydanticCustomError) -> VmsError:
        """Wrap a PydanticCustomError as VmsError."""
        return cls(
            error.type,
            error.message_template,
            {"package": PACKAGE_NAME, **(error.context or {})},
        )

    @classmethod
    def from_validation_error(cls, error: Exception, context: dict | None = None) -> VmsError:
        """Collapse a pydantic.ValidationError into a single VmsError.

        The first reported error keeps its type and context; any other
        exception becomes a generic ``validation_error``.
        """
        from pydantic import ValidationError

        if isinstance(error, ValidationError):
            for err_dict in error.errors():
                ctx = {"package": PACKAGE_NAME, **(context or {}), **(err_dict.get("ctx") or {})}
                return cls(
                    err_dict.get("type", "validation_error"),
                    err_dict.get("msg", str(error)),
                    ctx,
                )
        return cls(
            "validation_error",
            str(error),
            {"package": PACKAGE_NAME, **(context or {})},
        )


class VmsValidationError(Exception):
    """Exception wrapper for pydantic.ValidationError with package identification.

    Provides access to the original error while adding package context.
    """

    def __init__(self, validation_error: Exception, context: dict | None = None):
        from pydantic import ValidationError as PydanticValidationError

        self.package_name = PACKAGE_NAME
        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    def errors(self) -> list:
        """Get the list of validation errors."""
        return self.errors_list

    @property
    def field_errors(self) -> dict[str, list[str]]:
        """Messages grouped by dotted field path.

        Errors raised outside a model (a standalone field validation) are
        keyed by the ``field`` entry of the context, when present.
        """
        grouped: dict[str, list[str]] = {}
        for err in self.errors_list:
            loc = ".".join(str(part) for part in err.get("loc", ()))
            key = loc or str(self.context.get("field", ""))
            grouped.setdefault(key, []).append(err.get("msg", ""))
        return grouped

    @property
    def error_types(self) -> list[str]:
        """Error type of every collected error, in order."""
        return [err.get("type", "validation_error") for err in self.errors_list]

    def __repr__(self) -> str:
        return f"VmsValidationError({self.original_error!r}, context={self.context})"


class SchemaDefinitionError(ValueError):
    """Raised when a field spec is built with inconsistent arguments.

    Examples are ``min > max`` or an optional default that its own
    constraints would reject.
    """

    def __init__(self, field_name: str, reason: str) -> None:
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"{field_name}: {reason}")
