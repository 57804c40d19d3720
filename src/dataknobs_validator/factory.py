"""Construction entry points for validators and schemas.

The module-level functions and the ``Validator`` static methods are the public
way to build validators:

    ```python
    from dataknobs_validator import Validator

    schema = Validator.create_schema({
        "name": Validator.string().required().min(2),
        "age": Validator.number().min(0),
    })
    schema.validate({"name": "Al", "age": 30})
    # 'Validation successful'
    ```

Schemas can also be declared in configuration and built with
``SchemaFactory`` or loaded from YAML with ``load_schema``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError
from .schema import Schema
from .validators import (
    ArrayValidator,
    BooleanValidator,
    FieldValidator,
    JSONValidator,
    NumberValidator,
    StringValidator,
)

logger = logging.getLogger(__name__)


def string() -> StringValidator:
    return StringValidator()


def number() -> NumberValidator:
    return NumberValidator()


def boolean() -> BooleanValidator:
    return BooleanValidator()


def array() -> ArrayValidator:
    return ArrayValidator()


def json() -> JSONValidator:
    return JSONValidator()


def create_schema(
    definition: Mapping[str, FieldValidator],
    only: bool = False,
    name: str | None = None,
) -> Schema:
    """Wrap a mapping of field name to FieldValidator into a Schema.

    Args:
        definition: Mapping of field name to pre-built FieldValidator
        only: If True, reject records with undeclared fields
        name: Optional schema name

    Returns:
        Schema instance
    """
    return Schema(definition, only=only, name=name)


class Validator:
    """Namespace of static constructors mirroring the module functions."""

    string = staticmethod(string)
    number = staticmethod(number)
    boolean = staticmethod(boolean)
    array = staticmethod(array)
    json = staticmethod(json)
    create_schema = staticmethod(create_schema)


_FIELD_TYPES = {
    "string": StringValidator,
    "number": NumberValidator,
    "boolean": BooleanValidator,
    "array": ArrayValidator,
    "json": JSONValidator,
}

# constraint name -> (validator method, config key holding its argument)
_CONSTRAINTS: dict[str, tuple[str, str | None]] = {
    "required": ("required", None),
    "one_of": ("one_of", "values"),
    "email": ("email", None),
    "min": ("min", "value"),
    "max": ("max", "value"),
    "reg": ("reg", "pattern"),
    "phone": ("phone", None),
    "min_length": ("min_length", "value"),
    "max_length": ("max_length", "value"),
    "items": ("items", "field"),
}
_CONSTRAINT_ALIASES = {
    "oneOf": "one_of",
    "minLength": "min_length",
    "maxLength": "max_length",
    "pattern": "reg",
}


class SchemaFactory:
    """Factory for creating schemas from configuration.

    Configuration Options:
        name (str): Schema name
        only (bool): Whether to reject unknown fields (default: False);
            ``strict`` is accepted as an alias
        fields (list): List of field definitions

    Field Definition Options:
        name (str): Field name
        type (str): One of string, number, boolean, array, json
        required (bool): Prepend a required rule (default: False)
        constraints (list): Constraint definitions, applied in order

    Example Configuration:
        name: user_schema
        only: true
        fields:
          - name: username
            type: string
            required: true
            constraints:
              - type: min
                value: 3
              - type: reg
                pattern: "^[a-zA-Z0-9_]+$"
          - name: tags
            type: array
            constraints:
              - type: max_length
                value: 5
              - type: items
                field:
                  type: string
                  constraints:
                    - type: one_of
                      values: [red, green, blue]
    """

    def create(self, **config: Any) -> Schema:
        """Create a Schema instance from configuration.

        Args:
            **config: Schema configuration

        Returns:
            Schema instance
        """
        name = config.get("name", "unnamed_schema")
        only = bool(config.get("only", config.get("strict", False)))

        logger.info(f"Creating schema: {name}")

        fields = config.get("fields") or []
        if not isinstance(fields, list):
            raise ConfigurationError(
                "Schema 'fields' must be a list of field definitions",
                context={"schema": name},
            )

        definition: dict[str, FieldValidator] = {}
        for field_config in fields:
            if not isinstance(field_config, Mapping):
                raise ConfigurationError(
                    f"Field definition must be a mapping, got {type(field_config).__name__}",
                    context={"schema": name},
                )
            field_name = field_config.get("name")
            if not field_name:
                raise ConfigurationError(
                    "Field definition is missing 'name'",
                    context={"schema": name},
                )
            if field_name in definition:
                raise ConfigurationError(
                    f"Duplicate field '{field_name}'",
                    context={"schema": name, "field": field_name},
                )
            definition[field_name] = self.build_field(field_config, field_name)

        return Schema(definition, only=only, name=name)

    def build_field(self, field_config: Mapping[str, Any], field_name: str = "") -> FieldValidator:
        """Build a single FieldValidator from a field definition.

        Args:
            field_config: Field definition
            field_name: Name used in error context

        Returns:
            Configured FieldValidator
        """
        if not isinstance(field_config, Mapping):
            raise ConfigurationError(
                f"Field definition must be a mapping, got {type(field_config).__name__}",
                context={"field": field_name},
            )
        field_type = str(field_config.get("type", "string")).lower()
        validator_class = _FIELD_TYPES.get(field_type)
        if validator_class is None:
            raise ConfigurationError(
                f"Unknown field type: '{field_type}'",
                context={"field": field_name, "type": field_type},
            )

        validator = validator_class()
        if field_config.get("required", False):
            validator.required()

        constraints = field_config.get("constraints") or []
        if not isinstance(constraints, list):
            raise ConfigurationError(
                f"Field '{field_name}' constraints must be a list of constraint definitions",
                context={"field": field_name},
            )
        for constraint in constraints:
            self._apply_constraint(validator, constraint, field_name)
        return validator

    def _apply_constraint(
        self,
        validator: FieldValidator,
        constraint: Mapping[str, Any] | str,
        field_name: str,
    ) -> None:
        if isinstance(constraint, str):
            constraint = {"type": constraint}
        if not isinstance(constraint, Mapping):
            raise ConfigurationError(
                f"Constraint definition must be a mapping or a name, got {type(constraint).__name__}",
                context={"field": field_name},
            )
        constraint_type = constraint.get("type", "")
        constraint_type = _CONSTRAINT_ALIASES.get(constraint_type, constraint_type)

        if constraint_type not in _CONSTRAINTS:
            raise ConfigurationError(
                f"Unknown constraint type: '{constraint_type}'",
                context={"field": field_name, "constraint": constraint_type},
            )

        method_name, arg_key = _CONSTRAINTS[constraint_type]
        method = getattr(validator, method_name, None)
        if method is None:
            raise ConfigurationError(
                f"Constraint '{constraint_type}' is not supported by {validator.kind} fields",
                context={"field": field_name, "constraint": constraint_type},
            )

        if arg_key is None:
            method()
            return

        if arg_key not in constraint:
            raise ConfigurationError(
                f"Constraint '{constraint_type}' requires '{arg_key}'",
                context={"field": field_name, "constraint": constraint_type},
            )
        argument = constraint[arg_key]
        if constraint_type == "items":
            argument = self.build_field(argument, f"{field_name}[]")
        method(argument)


def load_schema(path: str | Path, factory: SchemaFactory | None = None) -> Schema:
    """Load a schema definition from a YAML file.

    Args:
        path: Path to the YAML document
        factory: Factory to build with (defaults to ``schema_factory``)

    Returns:
        Schema instance
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        config = yaml.safe_load(f)
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Schema file must contain a mapping: {path}",
            context={"path": str(path)},
        )
    logger.debug(f"Loaded schema configuration from {path}")
    return (factory or schema_factory).create(**config)


# Singleton instance for callers that do not need their own factory
schema_factory = SchemaFactory()
