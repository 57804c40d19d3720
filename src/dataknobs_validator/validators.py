"""Field validators with a fluent, chainable constraint API.

Each constraint method appends one Rule and returns the same validator, so
validators are built by chaining:

    ```python
    name = StringValidator().required().min(2).max(50)
    age = NumberValidator().min(0).max(150)
    ```

``validate()`` runs the rules in the order the methods were called and raises
``ValidationError`` for the first one that fails. Variants that need a type
check before the rules (booleans, JSON text) override ``_precheck``.
"""

from __future__ import annotations

import json
from numbers import Real
from typing import TYPE_CHECKING, Any, Callable

from .exceptions import ConfigurationError, ValidationError
from .result import ValidationResult
from .rules import (
    MISSING,
    Rule,
    custom_rule,
    email_rule,
    format_value,
    items_rule,
    max_chars_rule,
    max_items_rule,
    max_value_rule,
    min_chars_rule,
    min_items_rule,
    min_value_rule,
    one_of_rule,
    pattern_rule,
    phone_rule,
    required_rule,
)

if TYPE_CHECKING:
    import re
    from collections.abc import Iterable


class FieldValidator:
    """Base validator holding an ordered list of rules and a required flag.

    Attributes:
        rules: Rules in evaluation order
        is_required: True once ``required()`` has been called
    """

    kind = "any"

    def __init__(self) -> None:
        self.rules: list[Rule] = []
        self.is_required = False

    def add_rule(self, rule: Rule) -> FieldValidator:
        """Append a rule (fluent API).

        Args:
            rule: Rule to evaluate after the ones already added

        Returns:
            Self for chaining
        """
        if not isinstance(rule, Rule):
            raise ConfigurationError(
                f"add_rule() expects a Rule, got {type(rule).__name__}",
                context={"validator": self.kind},
            )
        self.rules.append(rule)
        return self

    def required(self) -> FieldValidator:
        """Reject missing values: unset, ``None`` and ``""``."""
        self.is_required = True
        return self.add_rule(required_rule())

    def one_of(self, values: Iterable[Any]) -> FieldValidator:
        """Only accept values from the given collection."""
        return self.add_rule(one_of_rule(values))

    def custom(
        self,
        predicate: Callable[[Any], bool],
        message: str = "Custom validation failed",
    ) -> FieldValidator:
        """Append a rule that fails with ``message`` when ``predicate`` is false."""
        return self.add_rule(custom_rule(predicate, message))

    def validate(self, value: Any = MISSING, field: str = "value") -> bool:
        """Validate a single value.

        Args:
            value: Value to validate; leave unset for an absent value
            field: Field name reported in errors

        Returns:
            True when every rule passes

        Raises:
            ValidationError: For the first failing check
        """
        if value is MISSING and not self.is_required:
            return True
        self._precheck(value, field)
        for rule in self.rules:
            rule.check(value, field)
        return True

    def check(self, value: Any = MISSING, field: str = "value") -> ValidationResult:
        """Validate without raising, returning a ValidationResult."""
        try:
            self.validate(value, field)
        except ValidationError as e:
            return ValidationResult.failure(value, e)
        return ValidationResult.success(value)

    def _precheck(self, value: Any, field: str) -> None:
        """Type check run before the rules; no-op by default."""

    def __repr__(self) -> str:
        names = [rule.name for rule in self.rules]
        return f"{type(self).__name__}(rules={names!r})"


class StringValidator(FieldValidator):
    """Validator for text values."""

    kind = "string"

    def email(self) -> StringValidator:
        return self.add_rule(email_rule())

    def min(self, length: int) -> StringValidator:
        return self.add_rule(min_chars_rule(length))

    def max(self, length: int) -> StringValidator:
        return self.add_rule(max_chars_rule(length))

    def reg(self, pattern: str | re.Pattern[str]) -> StringValidator:
        """Require a match of ``pattern`` anywhere in the value."""
        return self.add_rule(pattern_rule(pattern))


class NumberValidator(FieldValidator):
    """Validator for numeric values.

    No coercion is applied: ``min``/``max`` reject anything that is not a real
    number. ``phone`` checks the value's string form, so it also accepts
    phone numbers supplied as text.
    """

    kind = "number"

    def min(self, bound: Real) -> NumberValidator:
        return self.add_rule(min_value_rule(bound))

    def max(self, bound: Real) -> NumberValidator:
        return self.add_rule(max_value_rule(bound))

    def phone(self) -> NumberValidator:
        return self.add_rule(phone_rule())


class BooleanValidator(FieldValidator):
    """Validator that only accepts ``True`` or ``False``."""

    kind = "boolean"

    def _precheck(self, value: Any, field: str) -> None:
        if not isinstance(value, bool):
            raise ValidationError(field, "Value must be a boolean")


class ArrayValidator(FieldValidator):
    """Validator for lists and tuples."""

    kind = "array"

    def __init__(self) -> None:
        super().__init__()
        self.item_validator: FieldValidator | None = None

    def min_length(self, length: int) -> ArrayValidator:
        return self.add_rule(min_items_rule(length))

    def max_length(self, length: int) -> ArrayValidator:
        return self.add_rule(max_items_rule(length))

    def items(self, validator: FieldValidator) -> ArrayValidator:
        """Validate every element with ``validator``.

        Elements are reported as ``"<field>[<index>]"``.
        """
        if not isinstance(validator, FieldValidator):
            raise ConfigurationError(
                f"items() expects a FieldValidator, got {type(validator).__name__}",
                context={"validator": self.kind},
            )
        self.item_validator = validator
        return self.add_rule(items_rule(validator))


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _json_text(value: Any) -> str | bytes | bytearray | None:
    """Text to parse for a value, or None when it has no JSON text form.

    Scalars parse as their literal: None is ``null``, booleans are
    ``true``/``false`` and numbers use their canonical string. Containers and
    other objects have no text form.
    """
    if isinstance(value, (str, bytes, bytearray)):
        return value
    if value is None:
        return "null"
    if isinstance(value, (bool, Real)):
        return format_value(value)
    return None


class JSONValidator(FieldValidator):
    """Validator for JSON text.

    The value must parse as standard JSON before any rule runs; rules then
    see the original value, not the parsed document. A present ``None``
    parses as ``null``, so ``required()`` decides whether it is accepted.
    """

    kind = "json"

    def _precheck(self, value: Any, field: str) -> None:
        text = _json_text(value)
        if text is None:
            raise ValidationError(field, "Invalid JSON format")
        try:
            json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            raise ValidationError(field, "Invalid JSON format") from e
