"""Helper functions for tests."""

from typing import Any, Iterable

from shapeguard import Err, Ok, Validator

# Values most shapes reject
JUNK = [None, [], ["a"], {}, {"a": "a"}, True, False, "a", -2, 5.5, float("inf")]


def assert_accepts(validator: Validator, ok_values: Iterable[Any], err_values: Iterable[Any]) -> None:
    """Loose mode: ok values come back unchanged, err values fail."""
    for value in ok_values:
        assert validator.validate(value) == Ok(value), value
    for value in err_values:
        assert isinstance(validator.validate(value), Err), value


def assert_accepts_exact(validator: Validator, ok_values: Iterable[Any], err_values: Iterable[Any]) -> None:
    for value in ok_values:
        assert validator.validate_exact(value) == Ok(value), value
    for value in err_values:
        assert isinstance(validator.validate_exact(value), Err), value


class Tagged(list):
    """A list carrying side fields as attributes."""


def tagged(items: list, **fields: Any) -> Tagged:
    result = Tagged(items)
    for key, value in fields.items():
        setattr(result, key, value)
    return result
