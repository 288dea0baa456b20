"""
Schema operations for shapeguard.

Provides validate(), type_hint() and to_pydantic().
"""

from __future__ import annotations

from typing import Any, Literal, Union
from typing import Optional as TypingOptional

from pydantic import create_model, model_validator

from .combinators import (
    ArrayValidator,
    DictionaryValidator,
    MaybeValidator,
    ObjectValidator,
    OptionalValidator,
    RecursiveValidator,
    TupleValidator,
    UnionValidator,
)
from .context import is_exact
from .core import Validator, call_is_exact
from .primitives import ValuesValidator, boolean, int_, loose_number, number, string, uint
from .types import UNDEFINED, Result

_LEAF_HINTS: dict[int, Any] = {
    id(string): str,
    id(boolean): bool,
    id(number): float,
    id(loose_number): float,
    id(int_): int,
    id(uint): int,
}


def validate(data: Any, validator: Validator, exact: bool | None = None) -> Result[Any, str]:
    """
    Validate data against a validator tree.

    Args:
        data: The value to validate
        validator: Root of the validator tree
        exact: Force loose (False) or exact (True) mode. Defaults to the
            mode set by validation_context().

    Returns:
        Ok(value) if validation passes
        Err(message) if validation fails

    Usage:
        User = object_({"name": string, "age": optional(uint)})
        result = validate({"name": "Alice"}, User)
    """
    return call_is_exact(validator, is_exact() if exact is None else exact, data)


def type_hint(validator: Validator) -> Any:
    """Best-effort Python annotation for a validator."""
    match validator:
        case ValuesValidator(values=values):
            present = tuple(v for v in values if v is not UNDEFINED)
            if present and all(v is None or isinstance(v, (str, int, bool)) for v in present):
                return Literal[present]
            return Any
        case OptionalValidator(item=item) | MaybeValidator(item=item):
            return TypingOptional[type_hint(item)]
        case ArrayValidator(item=item):
            return list[type_hint(item)]  # type: ignore[misc]
        case DictionaryValidator(item=item):
            return dict[str, type_hint(item)]  # type: ignore[misc]
        case TupleValidator(items=items, rest=None) if items:
            return tuple[tuple(type_hint(v) for v in items)]  # type: ignore[misc]
        case TupleValidator():
            return tuple[Any, ...]
        case UnionValidator(members=members) if members:
            return Union[tuple(type_hint(v) for v in members)]
        case ObjectValidator():
            return dict[str, Any]
        case RecursiveValidator():
            return Any

    return _LEAF_HINTS.get(id(validator), Any)


def to_pydantic(name: str, validator: Validator) -> type:
    """
    Compile an object validator to a Pydantic model.

    Field annotations come from type_hint(); a before-validator runs the
    validator tree itself, so the model accepts exactly what it accepts.

    Usage:
        User = to_pydantic("User", object_({
            "name": string,
            "email": optional(string),
        }))
        user = User(name="Alice")
    """
    if not isinstance(validator, ObjectValidator):
        raise TypeError(f"to_pydantic() needs an object validator, got {validator.name}")

    fields: dict[str, Any] = {}
    for key, v in validator.fields.items():
        if isinstance(v, OptionalValidator):
            fields[key] = (TypingOptional[type_hint(v.item)], None)
        else:
            fields[key] = (type_hint(v), ...)

    def check_shape(cls: type, data: Any) -> Any:
        result = validate(data, validator)
        if result.is_err():
            raise ValueError(result.error)
        return data

    validators = {"check_shape": model_validator(mode="before")(check_shape)}
    return create_model(name, __validators__=validators, **fields)  # type: ignore[call-overload]
