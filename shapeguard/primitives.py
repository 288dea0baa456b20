"""
Leaf validators: wrapped check functions, numbers, strings and literals.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable

from .core import Validator
from .errors import shape_mismatch, union_exhausted
from .types import UNDEFINED, Err, Ok, Primitive, Result


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class WrapValidator(Validator):
    """Caller-supplied check/convert function returning a Result."""

    name: str
    fn: Callable[[Any], Result[Any, str]]

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        return self.fn(value)


def wrap(name: str, fn: Callable[[Any], Result[Any, str]]) -> Validator:
    """
    Escape hatch: ``fn`` performs the whole check and conversion.

    Usage:
        even = wrap("even", lambda x: Ok(x) if x % 2 == 0 else Err("odd"))
    """
    return WrapValidator(name, fn)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class EnumValidator(Validator):
    """Closed label set: ``fn`` returns a member, or None when not found."""

    name: str
    fn: Callable[[Any], Any]

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        member = self.fn(value)
        if member is None:
            return Err(shape_mismatch(self.name, value))
        return Ok(member)


def wrap_enum(name: str, fn: Callable[[Any], Any]) -> Validator:
    """
    Usage:
        color = wrap_enum("Color", lambda x: Color.__members__.get(x))
    """
    return EnumValidator(name, fn)


def _same_value(expected: Primitive, value: Any) -> bool:
    if expected is None or expected is UNDEFINED:
        return value is expected
    return type(value) is type(expected) and value == expected


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ValuesValidator(Validator):
    """Exact match against a small fixed set of primitive values."""

    values: tuple[Primitive, ...]
    name: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", " | ".join(_literal_name(v) for v in self.values))

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        for expected in self.values:
            if _same_value(expected, value):
                return Ok(expected)
        return Err(union_exhausted(self.name, value))


def _literal_name(value: Primitive) -> str:
    if value is None:
        return "null"
    if isinstance(value, str):
        return repr(value)
    return str(value)


def literal(value: Primitive) -> Validator:
    return ValuesValidator((value,))


def literals(*values: Primitive) -> Validator:
    """
    Usage:
        literals("draft", "published", None)
    """
    return ValuesValidator(values)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite(value: Any) -> bool:
    # ints are unbounded and may overflow a float conversion
    return isinstance(value, int) or math.isfinite(value)


def _check_unknown(value: Any) -> Result[Any, str]:
    return Ok(value)


def _check_never(value: Any) -> Result[Any, str]:
    return Err("never")


def _check_string(value: Any) -> Result[str, str]:
    if isinstance(value, str):
        return Ok(value)
    return Err(shape_mismatch("string", value))


def _check_boolean(value: Any) -> Result[bool, str]:
    if isinstance(value, bool):
        return Ok(value)
    return Err(shape_mismatch("boolean", value))


def _check_number(value: Any) -> Result[Any, str]:
    if _is_number(value) and _is_finite(value):
        return Ok(value)
    return Err(shape_mismatch("number", value))


def _check_loose_number(value: Any) -> Result[Any, str]:
    if _is_number(value):
        return Ok(value)
    return Err(shape_mismatch("number", value))


def _is_integral(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and _is_finite(value) and value.is_integer()


def _check_int(value: Any) -> Result[Any, str]:
    if _is_integral(value):
        return Ok(value)
    return Err(shape_mismatch("int", value))


def _check_uint(value: Any) -> Result[Any, str]:
    if _is_integral(value) and value >= 0:
        return Ok(value)
    return Err(shape_mismatch("uint", value))


unknown = WrapValidator("unknown", _check_unknown)
never = WrapValidator("never", _check_never)
string = WrapValidator("string", _check_string)
boolean = WrapValidator("boolean", _check_boolean)
number = WrapValidator("number", _check_number)
loose_number = WrapValidator("loose_number", _check_loose_number)
int_ = WrapValidator("int", _check_int)
uint = WrapValidator("uint", _check_uint)

# Singletons; transforms compare against these by identity.
undefined_literal = literal(UNDEFINED)
null_literal = literal(None)
void_literal = literal(UNDEFINED)
true_literal = literal(True)
false_literal = literal(False)
