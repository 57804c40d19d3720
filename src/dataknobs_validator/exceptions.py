"""Exception hierarchy for the validator package.

All errors raised by this package extend ``ValidatorError`` so callers can
catch them in one place. ``ValidationError`` is the only error produced while
validating data; ``ConfigurationError`` is raised while building validators
and schemas.

Example:
    ```python
    from dataknobs_validator import ValidationError, string

    try:
        string().email().validate("not-an-email", "email")
    except ValidationError as e:
        e.field
        # 'email'
        e.message
        # 'Invalid email format'
    ```
"""

from __future__ import annotations

from typing import Any, Dict


class ValidatorError(Exception):
    """Base exception for the validator package.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (takes precedence if both are given)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ValidationError(ValidatorError):
    """Raised on the first check a value fails.

    Carries the offending field name (with an ``[index]`` suffix for array
    elements) and a fixed human-readable message.

    Example:
        ```python
        error = ValidationError("tags[2]", "Value is required")
        error.to_dict()
        # {'field': 'tags[2]', 'message': 'Value is required'}
        ```
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message, context={"field": field})

    def to_dict(self) -> dict[str, str]:
        """Return the ``{field, message}`` form of this error."""
        return {"field": self.field, "message": self.message}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (self.field, self.message) == (other.field, other.message)

    def __hash__(self) -> int:
        return hash((self.field, self.message))

    def __repr__(self) -> str:
        return f"ValidationError(field={self.field!r}, message={self.message!r})"


class ConfigurationError(ValidatorError):
    """Raised when a validator or schema cannot be built.

    Common scenarios include:
    - Invalid regular expression passed to ``reg()``
    - Negative length bounds
    - Unknown field types or constraint names in schema configuration
    - Schema definitions that are not mappings of FieldValidators

    Example:
        ```python
        raise ConfigurationError(
            "Unknown field type: 'date'",
            context={"field": "created", "type": "date"}
        )
        ```
    """

    pass


__all__ = [
    "ValidatorError",
    "ValidationError",
    "ConfigurationError",
]
