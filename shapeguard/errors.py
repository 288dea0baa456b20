"""
Errors raised for malformed schemas, and the failure messages carried by Err.

Data-shape failures are never raised: validators return Err(message) built
with the helpers below. Only schema-authoring mistakes raise.
"""

from typing import Any


class SchemaError(TypeError):
    """A validator tree was constructed incorrectly."""


class UnresolvedRecursionError(SchemaError):
    """A recursive validator's supplier could not produce a validator."""


def shape_mismatch(name: str, value: Any) -> str:
    """Wrong runtime kind or length."""
    return f"expected {name}, got {value!r}"


def field_failure(name: str, where: str, child: str, message: str) -> str:
    """A named field, key or index failed; nests the child's own message."""
    return f"while validating {name}: at {where}, failed to validate {child}: {message}"


def extra_key(name: str, key: Any) -> str:
    """An exact-mode object saw an undeclared key."""
    return f"while validating {name}: input had invalid extra key {key!r}"


def union_exhausted(name: str, value: Any) -> str:
    """No union member matched."""
    return f"expected {name}; got {value!r}"


def intersection_unmergeable(name: str) -> str:
    return f"cannot intersect {name}: tuples only merge with other tuples"


def member_failure(name: str, child: str, message: str) -> str:
    """One operand of an intersection rejected the input."""
    return f"while validating {name}: failed to validate {child}: {message}"
