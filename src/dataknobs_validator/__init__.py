"""Fluent schema validation for dictionaries of field values.

Build per-field validators by chaining constraints, group them into a schema
and validate records. Validation is fail-fast: the first failing check raises
a ``ValidationError`` carrying the field name and a fixed message.

Example:
    ```python
    from dataknobs_validator import Validator, ValidationError

    schema = Validator.create_schema(
        {
            "email": Validator.string().required().email(),
            "age": Validator.number().min(0).max(150),
            "tags": Validator.array().max_length(3).items(Validator.string().min(1)),
        },
        only=True,
    )

    try:
        schema.validate({"email": "a@b.co", "age": 200})
    except ValidationError as e:
        e.to_dict()
        # {'field': 'age', 'message': 'Value must be less than or equal to 150'}
    ```
"""

from .exceptions import ConfigurationError, ValidationError, ValidatorError
from .factory import (
    SchemaFactory,
    Validator,
    array,
    boolean,
    create_schema,
    json,
    load_schema,
    number,
    schema_factory,
    string,
)
from .result import ValidationResult
from .rules import MISSING, ItemsRule, Rule, format_value
from .schema import SUCCESS, Schema
from .validators import (
    ArrayValidator,
    BooleanValidator,
    FieldValidator,
    JSONValidator,
    NumberValidator,
    StringValidator,
)

__version__ = "0.1.0"

__all__ = [
    # Construction
    "Validator",
    "string",
    "number",
    "boolean",
    "array",
    "json",
    "create_schema",
    # Validators
    "FieldValidator",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "ArrayValidator",
    "JSONValidator",
    # Rules
    "Rule",
    "ItemsRule",
    "MISSING",
    "format_value",
    # Schema
    "Schema",
    "SUCCESS",
    # Results
    "ValidationResult",
    # Configuration
    "SchemaFactory",
    "schema_factory",
    "load_schema",
    # Errors
    "ValidatorError",
    "ValidationError",
    "ConfigurationError",
    "__version__",
]
