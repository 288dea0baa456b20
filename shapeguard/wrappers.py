"""
Class-construction and function-call validators.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable

from .core import Validator, call_is_exact
from .types import Err, Ok, Result


def _apply(fn: Callable[..., Any], args: Any) -> Any:
    if isinstance(args, Mapping):
        return fn(**args)
    return fn(*args)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ClassValidator(Validator):
    """Accept an instance of ``ctor``, or arguments to construct one."""

    ctor: type
    args_validator: Validator
    name: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.ctor.__name__)

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        if isinstance(value, self.ctor):
            return Ok(value)

        args = call_is_exact(self.args_validator, is_exact, value)
        if args.is_err():
            return Err(f"expected instance of or args to construct {self.name}, got {value!r}")
        return Ok(_apply(self.ctor, args.value))


def cls(ctor: type, args_validator: Validator) -> Validator:
    """
    Usage:
        cls(Point, tuple_(number, number))              # Point(*args)
        cls(User, object_({"name": string}))            # User(**kwargs)
    """
    return ClassValidator(ctor, args_validator)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class FunctionValidator(Validator):
    """Validate the input as ``fn``'s arguments, then call ``fn``."""

    fn: Callable[..., Any]
    args_validator: Validator
    name: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", getattr(self.fn, "__name__", repr(self.fn)))

    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        args = call_is_exact(self.args_validator, is_exact, value)
        if args.is_err():
            return Err(f"expected args to call {self.name}, got {value!r}")
        return Ok(_apply(self.fn, args.value))

    def validate_call(self, value: Any) -> Result[Any, str]:
        return self.validate(value)


def func(fn: Callable[..., Any], args_validator: Validator) -> FunctionValidator:
    return FunctionValidator(fn, args_validator)
