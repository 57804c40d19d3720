"""Rule definitions: the single predicate and message units validators run.

A ``Rule`` is appended to a FieldValidator by each chained constraint method
and evaluated in insertion order. The first failing rule raises a
``ValidationError`` and stops evaluation.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Any, Callable

from .exceptions import ConfigurationError, ValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .validators import FieldValidator


class _Missing:
    """Marker for a value that was never supplied."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?[0-9]{10,12}")

STRING_TYPE_MESSAGE = "Value must be a string"
NUMBER_TYPE_MESSAGE = "Value must be a number"
ARRAY_TYPE_MESSAGE = "Value must be an array"


def format_value(value: Any) -> str:
    """Render a value for use in messages and string checks."""
    if value is None or value is MISSING:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def is_missing(value: Any) -> bool:
    """True for values the required rule treats as absent."""
    return value is MISSING or value is None or (isinstance(value, str) and value == "")


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _same_value(left: Any, right: Any) -> bool:
    if _is_nan(left) and _is_nan(right):
        return True
    # True and 1 compare equal in Python; membership keeps them apart
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    return bool(left == right)


@dataclass(frozen=True)
class Rule:
    """A single check bound to a field value.

    Attributes:
        name: Short name of the constraint, e.g. ``"min"`` or ``"email"``
        predicate: Returns True when the value satisfies the rule
        message: Message reported when the predicate fails
        accepts: Optional type guard evaluated before the predicate
        type_message: Message reported when the type guard fails
    """

    name: str
    predicate: Callable[[Any], bool]
    message: str
    accepts: Callable[[Any], bool] | None = None
    type_message: str | None = None

    def check(self, value: Any, field: str) -> None:
        """Raise ValidationError if the value does not satisfy this rule."""
        if self.accepts is not None and not self.accepts(value):
            raise ValidationError(field, self.type_message or self.message)
        if not self.predicate(value):
            raise ValidationError(field, self.message)

    def __call__(self, value: Any, field: str) -> None:
        self.check(value, field)


@dataclass(frozen=True)
class ItemsRule(Rule):
    """Validates every element of an array with a nested FieldValidator.

    The nested validator receives ``"<field>[<index>]"`` as its field name and
    its error is propagated unchanged; the first failing element wins.
    """

    item_validator: FieldValidator | None = None

    def check(self, value: Any, field: str) -> None:
        if self.accepts is not None and not self.accepts(value):
            raise ValidationError(field, self.type_message or self.message)
        for index, item in enumerate(value):
            self.item_validator.validate(item, f"{field}[{index}]")


def _check_length_bound(name: str, length: Any) -> None:
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise ConfigurationError(
            f"{name}() expects a non-negative integer, got {length!r}",
            context={"constraint": name, "bound": length},
        )


def _check_number_bound(name: str, bound: Any) -> None:
    if not is_number(bound):
        raise ConfigurationError(
            f"{name}() expects a number, got {bound!r}",
            context={"constraint": name, "bound": bound},
        )


def required_rule() -> Rule:
    return Rule("required", lambda value: not is_missing(value), "Value is required")


def one_of_rule(values: Iterable[Any]) -> Rule:
    allowed = list(values)
    return Rule(
        "one_of",
        lambda value: any(_same_value(value, option) for option in allowed),
        f"Value must be one of: {', '.join(format_value(v) for v in allowed)}",
    )


def min_chars_rule(length: int) -> Rule:
    _check_length_bound("min", length)
    return Rule(
        "min",
        lambda value: len(value) >= length,
        f"Value must be at least {length} characters long",
        accepts=is_string,
        type_message=STRING_TYPE_MESSAGE,
    )


def max_chars_rule(length: int) -> Rule:
    _check_length_bound("max", length)
    return Rule(
        "max",
        lambda value: len(value) <= length,
        f"Value must be no more than {length} characters long",
        accepts=is_string,
        type_message=STRING_TYPE_MESSAGE,
    )


def email_rule() -> Rule:
    return Rule(
        "email",
        lambda value: EMAIL_PATTERN.fullmatch(value) is not None,
        "Invalid email format",
        accepts=is_string,
        type_message=STRING_TYPE_MESSAGE,
    )


def pattern_rule(pattern: str | re.Pattern[str]) -> Rule:
    """Build a rule matching the pattern anywhere in the value.

    The pattern is compiled once here so a malformed expression is reported
    while the validator is being built rather than on first use.
    """
    if isinstance(pattern, re.Pattern):
        regex = pattern
    else:
        try:
            regex = re.compile(pattern)
        except (re.error, TypeError) as e:
            raise ConfigurationError(
                f"Invalid pattern {pattern!r}: {e}",
                context={"constraint": "reg", "pattern": pattern},
            ) from e
    return Rule(
        "reg",
        lambda value: regex.search(value) is not None,
        "String does not match the required pattern",
        accepts=is_string,
        type_message=STRING_TYPE_MESSAGE,
    )


def min_value_rule(bound: Real) -> Rule:
    _check_number_bound("min", bound)
    return Rule(
        "min",
        lambda value: value >= bound,
        f"Value must be greater than or equal to {format_value(bound)}",
        accepts=is_number,
        type_message=NUMBER_TYPE_MESSAGE,
    )


def max_value_rule(bound: Real) -> Rule:
    _check_number_bound("max", bound)
    return Rule(
        "max",
        lambda value: value <= bound,
        f"Value must be less than or equal to {format_value(bound)}",
        accepts=is_number,
        type_message=NUMBER_TYPE_MESSAGE,
    )


def phone_rule() -> Rule:
    return Rule(
        "phone",
        lambda value: PHONE_PATTERN.fullmatch(format_value(value)) is not None,
        "Invalid phone number format",
    )


def min_items_rule(length: int) -> Rule:
    _check_length_bound("min_length", length)
    return Rule(
        "min_length",
        lambda value: len(value) >= length,
        f"Array must contain at least {length} items",
        accepts=is_array,
        type_message=ARRAY_TYPE_MESSAGE,
    )


def max_items_rule(length: int) -> Rule:
    _check_length_bound("max_length", length)
    return Rule(
        "max_length",
        lambda value: len(value) <= length,
        f"Array must contain no more than {length} items",
        accepts=is_array,
        type_message=ARRAY_TYPE_MESSAGE,
    )


def items_rule(item_validator: FieldValidator) -> ItemsRule:
    return ItemsRule(
        "items",
        lambda value: True,
        ARRAY_TYPE_MESSAGE,
        accepts=is_array,
        type_message=ARRAY_TYPE_MESSAGE,
        item_validator=item_validator,
    )


def custom_rule(
    predicate: Callable[[Any], bool],
    message: str = "Custom validation failed",
    name: str = "custom",
) -> Rule:
    if not callable(predicate):
        raise ConfigurationError(
            f"custom() expects a callable, got {type(predicate).__name__}",
            context={"constraint": name},
        )
    return Rule(name, predicate, message)


__all__ = [
    "MISSING",
    "Rule",
    "ItemsRule",
    "format_value",
    "is_missing",
    "required_rule",
    "one_of_rule",
    "min_chars_rule",
    "max_chars_rule",
    "email_rule",
    "pattern_rule",
    "min_value_rule",
    "max_value_rule",
    "phone_rule",
    "min_items_rule",
    "max_items_rule",
    "items_rule",
    "custom_rule",
]
