"""
Derived validators: partial, required, nonnullable, pick and omit.

Each rewrites the structure of an existing tree the way the matching type
operator rewrites a type. Node kinds the operator has no meaning for are
returned unchanged.
"""

from __future__ import annotations

from .combinators import (
    ArrayValidator,
    DictionaryValidator,
    ObjectValidator,
    OptionalValidator,
    TupleValidator,
    UnionValidator,
    optional,
    strip_literals,
)
from .core import Validator
from .errors import SchemaError
from .intersection import IntersectionValidator
from .primitives import ValuesValidator, null_literal, undefined_literal
from .types import UNDEFINED


def _reshape(validator: ObjectValidator, fields: dict[str, Validator]) -> ObjectValidator:
    """Same object kind with new fields; the name is regenerated."""
    return ObjectValidator(fields, always_loose=validator.always_loose, by_index=validator.by_index)


def partial(validator: Validator) -> Validator:
    """Make every field, item or position optional."""
    match validator:
        case ObjectValidator(fields=fields):
            return _reshape(validator, {key: optional(v) for key, v in fields.items()})
        case ArrayValidator(item=OptionalValidator()):
            return validator
        case ArrayValidator(item=item, extra=extra):
            return ArrayValidator(OptionalValidator(item), extra)
        case TupleValidator(items=items, rest=rest):
            return TupleValidator(
                tuple(optional(v) for v in items),
                partial(rest) if rest is not None else None,
            )
        case DictionaryValidator(item=OptionalValidator()):
            return validator
        case DictionaryValidator(item=item):
            return DictionaryValidator(OptionalValidator(item))
        case UnionValidator(members=members):
            return UnionValidator(tuple(partial(v) for v in members))
        case IntersectionValidator(children=children):
            return IntersectionValidator(tuple(partial(v) for v in children))
        case _:
            return validator


def _drop_values(validator: ValuesValidator, *dropped: object) -> Validator:
    kept = tuple(v for v in validator.values if not any(v is d for d in dropped))
    if len(kept) == len(validator.values):
        return validator
    return ValuesValidator(kept)


def _unwrap_optional(validator: Validator) -> Validator:
    if isinstance(validator, OptionalValidator):
        validator = validator.item
    if isinstance(validator, UnionValidator):
        return strip_literals(validator, undefined_literal)
    if isinstance(validator, ValuesValidator):
        return _drop_values(validator, UNDEFINED)
    return validator


def required(validator: Validator) -> Validator:
    """Inverse of partial: unwrap optional fields, items and positions."""
    match validator:
        case ObjectValidator(fields=fields):
            return _reshape(validator, {key: _unwrap_optional(v) for key, v in fields.items()})
        case ArrayValidator(item=item, extra=extra):
            return ArrayValidator(_unwrap_optional(item), extra)
        case TupleValidator(items=items, rest=rest):
            return TupleValidator(
                tuple(_unwrap_optional(v) for v in items),
                required(rest) if rest is not None else None,
            )
        case UnionValidator(members=members):
            return UnionValidator(tuple(required(v) for v in members))
        case IntersectionValidator(children=children):
            return IntersectionValidator(tuple(required(v) for v in children))
        case _:
            return validator


def nonnullable(validator: Validator) -> Validator:
    """Remove None and UNDEFINED from the accepted values."""
    match validator:
        case OptionalValidator(item=item):
            return nonnullable(item)
        case ValuesValidator():
            return _drop_values(validator, None, UNDEFINED)
        case UnionValidator():
            return strip_literals(validator, undefined_literal, null_literal)
        case _:
            return validator


def pick(validator: Validator, *keys: str | int) -> Validator:
    """
    Keep only ``keys``. Tuples become objects keyed by stringified index.

    Usage:
        pick(User, "name", "email")
        pick(tuple_(string, number), 1)    # object_({"1": number})
    """
    match validator:
        case ObjectValidator(fields=fields):
            picked = {}
            for key in keys:
                if key not in fields:
                    raise SchemaError(f"cannot pick missing key {key!r} from {validator.name}")
                picked[key] = fields[key]
            return _reshape(validator, picked)
        case TupleValidator(items=items):
            picked = {}
            for key in keys:
                try:
                    index = int(key)
                except (TypeError, ValueError) as e:
                    raise SchemaError(f"cannot pick non-index key {key!r} from {validator.name}") from e
                if not 0 <= index < len(items):
                    raise SchemaError(f"cannot pick missing index {key!r} from {validator.name}")
                picked[str(index)] = items[index]
            return ObjectValidator(picked, by_index=True)
        case _:
            return validator


def omit(validator: Validator, *keys: str) -> Validator:
    """Drop ``keys`` from an object validator."""
    match validator:
        case ObjectValidator(fields=fields):
            return _reshape(validator, {k: v for k, v in fields.items() if k not in keys})
        case _:
            return validator
