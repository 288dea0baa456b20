"""
Type definitions for shapeguard.

Provides a minimal Result type (Ok/Err), the Maybe pair (Some/Nothing)
and the UNDEFINED sentinel used to mark absent values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class _Undefined:
    """
    Marker for an absent value.

    Python has a single null (None), so a missing key or tuple position is
    handed to validators as UNDEFINED instead.
    """

    __slots__ = ()

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_then(self, fn: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, fn: Callable[[E], U]) -> Err[U]:
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def unwrap(self) -> Any:
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_or(self, default: U) -> U:
        return default


Result = Union[Ok[T], Err[E]]


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """A present value, produced by maybe()."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Nothing:
    """An absent value, produced by maybe() for None or UNDEFINED."""

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True


NOTHING = Nothing()

Maybe = Union[Some[T], Nothing]

# Type aliases
ValidateFn = Callable[[Any], "Result[Any, str]"]
Primitive = Union[str, bool, int, float, None, _Undefined]
