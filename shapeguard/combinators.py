"""
Structural validators: arrays, dictionaries, records, tuples, objects,
unions, optionals, maybes and recursive references.

Structural nodes return their input unchanged on success; only leaf
conversions (wrap, adapt, maybe, cls) produce new values.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from .core import Validator, call_is_exact, is_sequence, keyed_view
from .errors import (
    UnresolvedRecursionError,
    extra_key,
    field_failure,
    shape_mismatch,
    union_exhausted,
)
from .primitives import null_literal, undefined_literal
from .types import NOTHING, UNDEFINED, Err, Ok, Result, Some

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class UnionValidator(Validator):
    """First member to succeed wins; declaration order is significant."""

    members: tuple[Validator, ...]
    name: str = field(init=False)

    def __post_init__(self) -> None:
        flattened: list[Validator] = []
        for member in self.members:
            if isinstance(member, UnionValidator):
                flattened.extend(member.members)
            else:
                flattened.append(member)
        object.__setattr__(self, "members", tuple(flattened))
        name = " | ".join(m.name for m in flattened) if flattened else "never"
        object.__setattr__(self, "name", name)

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        for member in self.members:
            result = call_is_exact(member, is_exact, value)
            if result.is_ok():
                return result
        return Err(union_exhausted(self.name, value))


def union(*members: Validator) -> Validator:
    """
    Usage:
        union(string, number)
        union(union(a, b), c)   # same as union(a, b, c)
    """
    return UnionValidator(members)


def undefinable(validator: Validator) -> Validator:
    return UnionValidator((validator, undefined_literal))


def nullable(validator: Validator) -> Validator:
    return UnionValidator((validator, null_literal))


def nillable(validator: Validator) -> Validator:
    return UnionValidator((validator, null_literal, undefined_literal))


def readonly(validator: Validator) -> Validator:
    return validator


def strip_literals(validator: Validator, *singletons: Validator) -> Validator:
    """Drop the given literal singletons (compared by identity) from a union."""
    if not isinstance(validator, UnionValidator):
        return validator
    kept = tuple(m for m in validator.members if not any(m is s for s in singletons))
    if len(kept) == len(validator.members):
        return validator
    if len(kept) == 1:
        return kept[0]
    return UnionValidator(kept)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class OptionalValidator(Validator):
    """UNDEFINED passes without consulting ``item``."""

    item: Validator
    name: str = field(init=False)

    def __post_init__(self) -> None:
        item = self.item
        while isinstance(item, OptionalValidator):
            item = item.item
        item = strip_literals(item, undefined_literal)
        object.__setattr__(self, "item", item)
        object.__setattr__(self, "name", f"({item.name})?")

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        if value is UNDEFINED:
            return Ok(value)
        return call_is_exact(self.item, is_exact, value)


def optional(validator: Validator) -> Validator:
    if isinstance(validator, OptionalValidator):
        return validator
    return OptionalValidator(validator)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class MaybeValidator(Validator):
    """None or UNDEFINED become NOTHING; anything else must pass as Some."""

    item: Validator
    name: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", f"Maybe<{self.item.name}>")

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        if value is None or value is UNDEFINED:
            return Ok(NOTHING)
        return (
            call_is_exact(self.item, is_exact, value)
            .map(Some)
            .map_err(lambda e: f"expected {self.name}, encountered this error: {e}")
        )


def maybe(validator: Validator) -> Validator:
    return MaybeValidator(validator)


def _object_name(fields: Mapping[str, Validator]) -> str:
    pairs = [f"{key}: {validator.name}" for key, validator in fields.items()]
    if len(pairs) < 5:
        return "{ " + ", ".join(pairs) + " }"
    return "{\n\t" + ",\n\t".join(pairs) + "\n}"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ObjectValidator(Validator):
    """
    Validator for keyed containers with a fixed set of fields.

    Loose mode ignores undeclared keys, exact mode rejects them. A merged
    intersection object sets ``always_loose`` since its operands may carry
    fields of their own. An object picked from a tuple sets ``by_index`` and
    also reads sequences, keyed by stringified position.
    """

    fields: dict[str, Validator]
    name: str = ""
    always_loose: bool = False
    by_index: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", dict(self.fields))
        if not self.name:
            object.__setattr__(self, "name", _object_name(self.fields))

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        if self.by_index and is_sequence(value):
            view = {str(index): element for index, element in enumerate(value)}
        else:
            view = keyed_view(value)
        if view is None:
            return Err(shape_mismatch(self.name, value))

        for key, validator in self.fields.items():
            field_value = view.get(key, UNDEFINED)
            result = call_is_exact(validator, is_exact, field_value)
            if result.is_err():
                return Err(field_failure(self.name, f"key {key!r}", validator.name, result.error))

        if not is_exact or self.always_loose:
            return Ok(value)

        for key in view:
            if key not in self.fields:
                return Err(extra_key(self.name, key))
        return Ok(value)


def object_(
    name_or_fields: str | Mapping[str, Validator],
    fields: Mapping[str, Validator] | None = None,
) -> ObjectValidator:
    """
    Usage:
        object_({"name": string, "age": optional(uint)})
        object_("User", {"name": string})
    """
    if isinstance(name_or_fields, str):
        if fields is None:
            raise TypeError("object_() with a name also needs a fields mapping")
        return ObjectValidator(dict(fields), name_or_fields)
    return ObjectValidator(dict(name_or_fields))


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ArrayValidator(Validator):
    """
    Every element must pass ``item``.

    ``extra`` holds side fields checked against the whole value, which is how
    an intersection of an array and an object is represented.
    """

    item: Validator
    extra: ObjectValidator | None = None
    name: str = field(init=False)

    def __post_init__(self) -> None:
        name = f"{self.item.name}[]"
        if self.extra is not None:
            name = f"{name} & {self.extra.name}"
        object.__setattr__(self, "name", name)

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        if not is_sequence(value):
            return Err(shape_mismatch(self.name, value))

        for index, element in enumerate(value):
            result = call_is_exact(self.item, is_exact, element)
            if result.is_err():
                return Err(field_failure(self.name, f"index {index}", self.item.name, result.error))

        if self.extra is not None:
            result = call_is_exact(self.extra, is_exact, value)
            if result.is_err():
                return Err(field_failure(self.name, "side fields", self.extra.name, result.error))

        return Ok(value)


def array(validator: Validator, extra: ObjectValidator | None = None) -> ArrayValidator:
    return ArrayValidator(validator, extra)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class DictionaryValidator(Validator):
    """Every value of a keyed, non-sequence container must pass ``item``."""

    item: Validator
    name: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", f"Dict<{self.item.name}>")

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        view = None if is_sequence(value) else keyed_view(value)
        if view is None:
            return Err(shape_mismatch(self.name, value))

        for key, element in view.items():
            result = call_is_exact(self.item, is_exact, element)
            if result.is_err():
                return Err(field_failure(self.name, f"key {key!r}", self.item.name, result.error))

        return Ok(value)


def dictionary(validator: Validator) -> DictionaryValidator:
    return DictionaryValidator(validator)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class RecordValidator(Validator):
    """Only the fixed ``keys`` are checked; other keys are ignored."""

    keys: tuple[Any, ...]
    item: Validator
    name: str = field(init=False)

    def __post_init__(self) -> None:
        keys = " | ".join(repr(k) if isinstance(k, str) else str(k) for k in self.keys)
        object.__setattr__(self, "name", f"Record<{keys}, {self.item.name}>")

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        view = keyed_view(value)
        if view is None:
            return Err(shape_mismatch(self.name, value))

        for key in self.keys:
            result = call_is_exact(self.item, is_exact, view.get(key, UNDEFINED))
            if result.is_err():
                return Err(field_failure(self.name, f"key {key!r}", self.item.name, result.error))

        return Ok(value)


def record(keys: Sequence[Any], validator: Validator) -> RecordValidator:
    return RecordValidator(tuple(keys), validator)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class TupleValidator(Validator):
    """
    Positional validator with an optional ``rest`` for trailing elements.

    ``min_length`` is one past the last non-optional position: a required
    position makes every position before it required too.
    """

    items: tuple[Validator, ...]
    rest: Validator | None = None
    name: str = field(init=False)
    min_length: int = field(init=False)

    def __post_init__(self) -> None:
        names = [v.name for v in self.items]
        if self.rest is not None:
            names.append(f"...{self.rest.name}")
        object.__setattr__(self, "name", f"[{', '.join(names)}]")

        min_length = 0
        for index, item in enumerate(self.items):
            if not isinstance(item, OptionalValidator):
                min_length = index + 1
        object.__setattr__(self, "min_length", min_length)

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        if (
            not is_sequence(value)
            or len(value) < self.min_length
            or (self.rest is None and len(value) > len(self.items))
        ):
            return Err(shape_mismatch(self.name, value))

        for index, item in enumerate(self.items):
            element = value[index] if index < len(value) else UNDEFINED
            result = call_is_exact(item, is_exact, element)
            if result.is_err():
                return Err(field_failure(self.name, f"index {index}", item.name, result.error))

        if self.rest is not None:
            result = call_is_exact(self.rest, is_exact, value[len(self.items):])
            if result.is_err():
                return Err(field_failure(self.name, "the spread", self.rest.name, result.error))

        return Ok(value)


def tuple_(*validators: Validator) -> TupleValidator:
    return TupleValidator(validators)


def spread(*args: Validator) -> TupleValidator:
    """
    Tuple whose trailing elements are validated, as one sequence, by the
    last argument.

    Usage:
        spread(number, optional(boolean), array(string))   # [1, True, "a", "b"]
    """
    if not args:
        raise TypeError("spread() needs at least the rest validator")
    *items, rest = args
    return TupleValidator(tuple(items), rest)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class RecursiveValidator(Validator):
    """
    Deferred reference to a validator that contains itself.

    ``supplier`` is called once, on first use; the resolved validator and its
    name are memoized. Resolution happens under a lock so concurrent first
    use from several threads resolves a single time.
    """

    supplier: Callable[[], Validator]
    name: str = "recursive"
    _resolved: Validator | None = field(default=None, init=False)
    _lock: Any = field(default_factory=threading.Lock, init=False)

    def resolve(self) -> Validator:
        resolved = self._resolved
        if resolved is not None:
            return resolved

        with self._lock:
            if self._resolved is None:
                try:
                    target = self.supplier()
                except NameError as e:
                    raise UnresolvedRecursionError(
                        f"recursive validator used before its target was defined: {e}"
                    ) from e
                if not isinstance(target, Validator) or target is self:
                    raise UnresolvedRecursionError(
                        f"recursive supplier must return another validator, got {target!r}"
                    )
                object.__setattr__(self, "_resolved", target)
                object.__setattr__(self, "name", target.name)
                logger.debug("Resolved recursive validator to %s", target.name)
            return self._resolved

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        return call_is_exact(self.resolve(), is_exact, value)


def recursive(supplier: Callable[[], Validator]) -> RecursiveValidator:
    """
    Usage:
        Category = object_("Category", {
            "name": string,
            "categories": array(recursive(lambda: Category)),
        })
    """
    return RecursiveValidator(supplier)
