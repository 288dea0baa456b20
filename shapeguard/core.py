"""
Core validator base class for shapeguard.

Every node in a validator tree derives from Validator. Loose vs exact mode is
passed down through ``_validate`` on each call rather than stored on nodes,
so one tree serves both.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import ModuleType
from typing import Any

from .context import is_exact
from .types import Result


class Validator(ABC):
    """
    Immutable validator node.

    Subclasses are frozen dataclasses carrying a ``name`` used in failure
    messages and implementing ``_validate(value, is_exact)``.
    """

    __slots__ = ()

    name: str

    @abstractmethod
    def _validate(self, value: Any, is_exact: bool) -> Result[Any, str]:
        """Check ``value``; ``is_exact`` must be forwarded to child nodes."""

    def validate(self, value: Any) -> Result[Any, str]:
        """
        Validate in loose mode: unknown object keys are ignored.

        Returns:
            Ok(value) if validation passes (possibly converted)
            Err(message) if validation fails
        """
        return self._validate(value, False)

    def validate_exact(self, value: Any) -> Result[Any, str]:
        """Validate in exact mode: object shapes reject undeclared keys."""
        return self._validate(value, True)

    def __call__(self, value: Any) -> Result[Any, str]:
        """Validate using the mode set by validation_context()."""
        return self._validate(value, is_exact())

    def is_valid(self, value: Any, exact: bool = False) -> bool:
        return self._validate(value, exact).is_ok()

    def __and__(self, other: Validator) -> Validator:
        """
        Shorthand for intersection().

        Usage:
            object_({"a": number}) & object_({"b": string})
        """
        from .intersection import intersection

        return intersection(self, other)

    def __or__(self, other: Validator) -> Validator:
        """
        Shorthand for union().

        Usage:
            string | number | null_literal
        """
        from .combinators import union

        return union(self, other)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


def call_is_exact(validator: Validator, is_exact: bool, value: Any) -> Result[Any, str]:
    return validator._validate(value, is_exact)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def keyed_view(value: Any) -> Mapping[Any, Any] | None:
    """
    Return the key/value view of a keyed container, or None.

    Mappings are used as-is. Other instances expose their instance
    attributes, which lets dataclasses, pydantic models and list subclasses
    carrying side fields be checked by object shapes.
    """
    if isinstance(value, Mapping):
        return value
    if isinstance(value, (type, ModuleType)) or inspect.isroutine(value):
        return None
    try:
        return vars(value)
    except TypeError:
        return None
