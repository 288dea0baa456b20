"""
Intersection of validators.

intersection() does its work at construction time: operands are sorted into
shape families (object, array, tuple, union, other) and merged the way the
corresponding types intersect, instead of simply validating every operand
against the same input.

    (A | B) & C            -> (A & C) | (B & C)
    {a: X} & {a: Y}        -> {a: X & Y}       (loose)
    X[] & Y[] & {k: Z}     -> (X & Y)[] with side fields {k: Z}
    [A, B] & [C]           -> [A & C, B]
    [A, ...X[]] & [B, C, ...Y[]] -> [A & B, C & X, ...(X & Y)[]]
    [A] & X[]              -> always fails

Operands that cannot be merged structurally are kept in a catch-all
IntersectionValidator which passes the input through unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from .combinators import (
    ArrayValidator,
    ObjectValidator,
    OptionalValidator,
    TupleValidator,
    UnionValidator,
    optional,
)
from .core import Validator, call_is_exact
from .errors import intersection_unmergeable, member_failure
from .primitives import WrapValidator
from .types import Err, Ok, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class IntersectionValidator(Validator):
    """Every child must accept the same input, which is returned unchanged."""

    children: tuple[Validator, ...]
    name: str = ""

    def __post_init__(self) -> None:
        children = tuple(_flatten(self.children))
        object.__setattr__(self, "children", children)
        if not self.name:
            name = " & ".join(c.name for c in children) if children else "unknown"
            object.__setattr__(self, "name", name)

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        for child in self.children:
            result = call_is_exact(child, is_exact, value)
            if result.is_err():
                return Err(member_failure(self.name, child.name, result.error))
        return Ok(value)


def _flatten(validators: Iterable[Validator]) -> Iterator[Validator]:
    for validator in validators:
        if isinstance(validator, IntersectionValidator):
            yield from _flatten(validator.children)
        else:
            yield validator


def intersection(*validators: Validator) -> Validator:
    """
    Build a validator requiring the input to satisfy every operand.

    Usage:
        intersection(object_({"a": number}), object_({"b": string}))
        intersection(array(string), object_({"total": uint}))
    """
    operands = list(_flatten(validators))
    if len(operands) == 1:
        return operands[0]
    name = " & ".join(v.name for v in operands) if operands else "unknown"

    if operands and all(isinstance(v, OptionalValidator) for v in operands):
        return optional(intersection(*(v.item for v in operands)))

    objects: list[ObjectValidator] = []
    arrays: list[ArrayValidator] = []
    tuples: list[TupleValidator] = []
    unions: list[UnionValidator] = []
    others: list[Validator] = []

    for validator in operands:
        match validator:
            case ObjectValidator():
                objects.append(validator)
            case ArrayValidator():
                arrays.append(validator)
            case TupleValidator():
                tuples.append(validator)
            case UnionValidator():
                unions.append(validator)
            case _:
                others.append(validator)

    if unions:
        distributed = unions[0]
        rest = [v for v in operands if v is not distributed]
        logger.debug("Distributing %s over %d union members", name, len(distributed.members))
        return UnionValidator(tuple(intersection(member, *rest) for member in distributed.members))

    if tuples and (arrays or objects):
        logger.warning("Intersection %s mixes tuples with arrays or objects and will reject every input", name)
        message = intersection_unmergeable(name)
        return WrapValidator(name, lambda _value: Err(message))

    merged: list[Validator] = []
    if tuples:
        logger.debug("Merging %d tuples positionally in %s", len(tuples), name)
        merged.append(_merge_tuples(tuples))
    elif arrays:
        logger.debug("Merging %d arrays with %d side objects in %s", len(arrays), len(objects), name)
        merged.append(_merge_arrays(arrays, objects))
    elif objects:
        logger.debug("Merging %d objects by key in %s", len(objects), name)
        merged.append(_merge_objects(objects))

    final = merged + others
    if len(final) == 1:
        return final[0]
    return IntersectionValidator(tuple(final), name)


def _merge(validators: list[Validator]) -> Validator:
    return validators[0] if len(validators) == 1 else intersection(*validators)


def _merge_objects(objects: list[ObjectValidator]) -> ObjectValidator:
    if len(objects) == 1:
        return objects[0]

    by_key: dict[str, list[Validator]] = {}
    for obj in objects:
        for key, validator in obj.fields.items():
            by_key.setdefault(key, []).append(validator)

    fields = {key: _merge(validators) for key, validators in by_key.items()}
    return ObjectValidator(
        fields,
        " & ".join(o.name for o in objects),
        always_loose=True,
        by_index=all(o.by_index for o in objects),
    )


def _merge_arrays(arrays: list[ArrayValidator], objects: list[ObjectValidator]) -> ArrayValidator:
    if len(arrays) == 1 and not objects:
        return arrays[0]

    item = _merge([a.item for a in arrays])
    side = [a.extra for a in arrays if a.extra is not None] + objects
    extra = _merge_objects(side) if side else None
    return ArrayValidator(item, extra)


def _merge_tuples(tuples: list[TupleValidator]) -> Validator:
    if len(tuples) == 1:
        return tuples[0]

    rests = [t.rest for t in tuples if t.rest is not None]
    length = max(len(t.items) for t in tuples)
    items = []
    for index in range(length):
        fixed = [t.items[index] for t in tuples if index < len(t.items)]
        spread_over = [t.rest for t in tuples if index >= len(t.items) and t.rest is not None]
        if spread_over and not _foldable(fixed, spread_over):
            logger.debug("Keeping tuples as separate checks; a spread covers position %d", index)
            return IntersectionValidator(tuple(tuples))
        items.append(_merge(fixed + [rest.item for rest in spread_over]))

    # a fixed-length operand caps the whole intersection
    rest = _merge(rests) if rests and len(rests) == len(tuples) else None
    return TupleValidator(tuple(items), rest)


def _foldable(fixed: list[Validator], rests: list[Validator]) -> bool:
    # an array spread checks present elements only, so it folds into required positions
    return all(isinstance(r, ArrayValidator) and r.extra is None for r in rests) and not any(
        isinstance(v, OptionalValidator) for v in fixed
    )
