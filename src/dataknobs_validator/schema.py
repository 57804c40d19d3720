"""Schema: a named collection of field validators for whole records.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .exceptions import ConfigurationError, ValidationError
from .result import ValidationResult
from .validators import FieldValidator

logger = logging.getLogger(__name__)

SUCCESS = "Validation successful"


class Schema:
    """Validates records against a mapping of field name to FieldValidator.

    Validation is fail-fast: the first failure, in the order below, is raised
    and nothing after it is checked.

    1. In strict mode (``only=True``), the first record key not declared in
       the schema fails with ``Unexpected field '<key>' not defined in schema``.
    2. A required field whose key is absent from the record fails with
       ``Field is required``.
    3. Each declared field present in the record is validated by its
       FieldValidator, in declaration order.
    """

    def __init__(
        self,
        fields: Mapping[str, FieldValidator],
        only: bool = False,
        name: str | None = None,
    ):
        """Initialize schema.

        Args:
            fields: Mapping of field name to FieldValidator
            only: If True, reject records with undeclared fields
            name: Optional schema name for identification
        """
        if not isinstance(fields, Mapping):
            raise ConfigurationError(
                f"Schema definition must be a mapping, got {type(fields).__name__}",
                context={"schema": name},
            )
        for field_name, validator in fields.items():
            if not isinstance(validator, FieldValidator):
                raise ConfigurationError(
                    f"Field '{field_name}' must be a FieldValidator, "
                    f"got {type(validator).__name__}",
                    context={"schema": name, "field": field_name},
                )
        self.fields: dict[str, FieldValidator] = dict(fields)
        self.only = only
        self.name = name or "unnamed_schema"

    @property
    def strict(self) -> bool:
        """Alias for ``only``."""
        return self.only

    def validate(self, record: Mapping[str, Any]) -> str:
        """Validate a record against this schema.

        Args:
            record: Mapping of field name to value

        Returns:
            The success marker ``"Validation successful"``

        Raises:
            ValidationError: For the first failing check
            TypeError: If the record is not a mapping
        """
        if not isinstance(record, Mapping):
            raise TypeError(f"Record must be a mapping, got {type(record).__name__}")

        try:
            if self.only:
                extra = [key for key in record if key not in self.fields]
                if extra:
                    key = extra[0]
                    raise ValidationError(key, f"Unexpected field '{key}' not defined in schema")

            for field_name, validator in self.fields.items():
                if field_name not in record and validator.is_required:
                    raise ValidationError(field_name, "Field is required")

            for field_name, validator in self.fields.items():
                if field_name in record:
                    validator.validate(record[field_name], field_name)
        except ValidationError as e:
            logger.debug(f"Schema '{self.name}' rejected field '{e.field}': {e.message}")
            raise

        return SUCCESS

    def check(self, record: Mapping[str, Any]) -> ValidationResult:
        """Validate without raising, returning a ValidationResult."""
        try:
            self.validate(record)
        except ValidationError as e:
            return ValidationResult.failure(record, e)
        return ValidationResult.success(record)

    def validate_many(
        self,
        records: list[Mapping[str, Any]],
        stop_on_error: bool = False,
    ) -> list[ValidationResult]:
        """Validate multiple records.

        Args:
            records: Records to validate
            stop_on_error: If True, stop at the first invalid record

        Returns:
            One ValidationResult per record checked
        """
        results = []
        for record in records:
            result = self.check(record)
            results.append(result)
            if not result.valid and stop_on_error:
                break
        return results

    def __repr__(self) -> str:
        return f"Schema(name={self.name!r}, fields={list(self.fields)!r}, only={self.only!r})"
