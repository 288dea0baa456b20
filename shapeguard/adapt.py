"""
Adaptation: accept alternate input shapes and convert them to the target.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from .core import Validator, call_is_exact
from .types import Err, Ok, Result


@dataclass(frozen=True, slots=True)
class Adaptor:
    """
    A guard validator for some other shape plus a conversion.

    When ``fallible`` is set, ``fn`` returns a Result; otherwise it returns
    the converted value directly.
    """

    validator: Validator
    fn: Callable[[Any], Any]
    fallible: bool = False

    def convert(self, value: Any) -> Result[Any, Any]:
        if self.fallible:
            return self.fn(value)
        return Ok(self.fn(value))


def adaptor(validator: Validator, fn: Callable[[Any], Any]) -> Adaptor:
    """Total conversion: ``fn`` always succeeds for guarded input."""
    return Adaptor(validator, fn)


def try_adaptor(validator: Validator, fn: Callable[[Any], Result[Any, Any]]) -> Adaptor:
    """Fallible conversion: ``fn`` returns Ok or Err."""
    return Adaptor(validator, fn, fallible=True)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AdaptValidator(Validator):
    """
    Try ``primary``, then each adaptor in order.

    An adaptor wins when its guard passes and its conversion succeeds. A
    fallible conversion that returns Err does not end validation; the next
    adaptor is tried.
    """

    primary: Validator
    adaptors: tuple[Adaptor, ...]
    name: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", f"adaptable {self.primary.name}")

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        attempt = call_is_exact(self.primary, is_exact, value)
        if attempt.is_ok():
            return attempt

        for candidate in self.adaptors:
            guarded = call_is_exact(candidate.validator, is_exact, value)
            if guarded.is_err():
                continue
            converted = candidate.convert(guarded.value)
            if converted.is_ok():
                return converted

        names = ", ".join(a.validator.name for a in self.adaptors)
        return Err(f"in {self.name}, couldn't validate from any of [{names}]; got {value!r}")


def adapt(validator: Validator, *adaptors: Adaptor) -> Validator:
    """
    Usage:
        flag = adapt(
            boolean,
            adaptor(number, bool),
            try_adaptor(string, parse_flag),
        )
    """
    return AdaptValidator(validator, adaptors)
