"""
Document generators for parsing benchmarks.

Produces documents that stay inside the grammar every compared library
accepts: no \\u escapes and no non-finite numbers.
"""

import json
import random
import string
from typing import Any

_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5
_ESCAPE_PROBABILITY = 0.3

# Escapes decoded identically by tagjson and standard JSON
_SHARED_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]


def generate_test_data(data_type: str, seed: int = 0) -> str:
    """Generates a JSON document of the given kind, deterministic per seed."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(seed))


def _generate_small_object(rng: random.Random) -> str:
    """Generates a small object (< 1KB) with basic key-value pairs."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _generate_large_object(rng: random.Random) -> str:
    """Generates a large object (> 10KB) of records."""
    data = {
        "user_id": rng.randint(1000000, 9999999),
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "description": f"Payment for {_random_string(rng, 20)}",
                "status": rng.choice(["completed", "pending", "failed"]),
                "flags": [rng.random() < 0.5 for _ in range(3)],
            }
            for i in range(80)
        ],
    }
    return json.dumps(data)


def _generate_mixed_array(rng: random.Random) -> str:
    """Generates a large array with mixed value types."""
    array: list[Any] = []

    for i in range(200):
        choice = rng.randint(1, 6)
        if choice == _INT_TYPE:
            array.append(rng.randint(-1000, 1000))
        elif choice == _FLOAT_TYPE:
            array.append(round(rng.uniform(-100.0, 100.0), 3))
        elif choice == _STRING_TYPE:
            array.append(_random_string(rng, rng.randint(5, 30)))
        elif choice == _BOOL_TYPE:
            array.append(rng.choice([True, False]))
        elif choice == _NULL_TYPE:
            array.append(None)
        else:
            array.append({"index": i, "value": _random_string(rng, 10)})

    return json.dumps(array)


def _generate_nested_structure(rng: random.Random) -> str:
    """Generates a nested object tree, 8 levels deep."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}

        return {
            "level": depth,
            "items": [create_nested_dict(depth - 1) for _ in range(2)],
            "nested": create_nested_dict(depth - 1),
        }

    return json.dumps(create_nested_dict(8))


def _generate_string_heavy(rng: random.Random) -> str:
    """Generates an object whose strings are dense with escape sequences."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(_SHARED_ESCAPES))
            else:
                chars.append(
                    rng.choice(string.ascii_letters + string.digits + " ")
                )
        return '"' + "".join(chars) + '"'

    strings = ", ".join(create_escaped_string() for _ in range(100))
    return '{"strings": [' + strings + "]}"


def _random_string(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))
