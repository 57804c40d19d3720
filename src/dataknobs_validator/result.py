"""Validation result type for callers that prefer a value over an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .exceptions import ValidationError


@dataclass
class ValidationResult:
    """Outcome of a ``check()`` call.

    Validation is fail-fast, so a failed result holds exactly one error.
    """

    valid: bool
    value: Any
    error: ValidationError | None = None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    @property
    def field(self) -> str | None:
        return self.error.field if self.error else None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    @property
    def errors(self) -> list[dict[str, str]]:
        """Errors in ``{field, message}`` form; empty when valid."""
        return [self.error.to_dict()] if self.error else []

    def raise_for_error(self) -> None:
        """Re-raise the captured error, if any."""
        if self.error is not None:
            raise self.error

    @classmethod
    def success(cls, value: Any) -> ValidationResult:
        """Create a successful validation result.

        Args:
            value: The validated value

        Returns:
            Successful ValidationResult
        """
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls, value: Any, error: ValidationError) -> ValidationResult:
        """Create a failed validation result.

        Args:
            value: The value that failed validation
            error: The first error encountered

        Returns:
            Failed ValidationResult
        """
        return cls(valid=False, value=value, error=error)
