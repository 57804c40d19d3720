"""Pytest configuration for dataknobs_validator tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_validator import Validator  # noqa: E402


@pytest.fixture
def user_schema():
    """Schema with required, bounded and nested fields."""
    return Validator.create_schema(
        {
            "name": Validator.string().required().min(2).max(20),
            "email": Validator.string().required().email(),
            "age": Validator.number().min(0).max(150),
            "active": Validator.boolean(),
            "tags": Validator.array().max_length(3).items(Validator.string().min(1)),
            "settings": Validator.json(),
        },
        name="user",
    )


@pytest.fixture
def valid_user():
    """A record that satisfies user_schema."""
    return {
        "name": "Alice",
        "email": "alice@example.com",
        "age": 30,
        "active": True,
        "tags": ["admin", "ops"],
        "settings": '{"theme": "dark"}',
    }


@pytest.fixture
def schema_config():
    """Factory configuration equivalent to a small user schema."""
    return {
        "name": "config_user",
        "only": True,
        "fields": [
            {
                "name": "username",
                "type": "string",
                "required": True,
                "constraints": [
                    {"type": "min", "value": 3},
                    {"type": "reg", "pattern": "^[a-z0-9_]+$"},
                ],
            },
            {
                "name": "phone",
                "type": "number",
                "constraints": ["phone"],
            },
            {
                "name": "colors",
                "type": "array",
                "constraints": [
                    {"type": "max_length", "value": 2},
                    {
                        "type": "items",
                        "field": {
                            "type": "string",
                            "constraints": [{"type": "one_of", "values": ["red", "green"]}],
                        },
                    },
                ],
            },
        ],
    }
