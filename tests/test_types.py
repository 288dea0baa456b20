"""
Tests for Ok/Err, Some/Nothing and UNDEFINED.
"""

import copy
import pickle

import pytest

from shapeguard import NOTHING, UNDEFINED, Err, Nothing, Ok, Some
from shapeguard.types import _Undefined


class TestResult:
    def test_ok(self):
        result = Ok(2)
        assert result.is_ok() and not result.is_err()
        assert result.map(lambda x: x + 1) == Ok(3)
        assert result.map_err(str.upper) == Ok(2)
        assert result.and_then(lambda x: Err(f"bad {x}")) == Err("bad 2")
        assert result.unwrap() == 2
        assert result.unwrap_or(0) == 2

    def test_err(self):
        result = Err("boom")
        assert result.is_err() and not result.is_ok()
        assert result.map(lambda x: x + 1) == Err("boom")
        assert result.map_err(str.upper) == Err("BOOM")
        assert result.and_then(lambda x: Ok(x)) == Err("boom")
        assert result.unwrap_or(0) == 0
        with pytest.raises(ValueError, match="boom"):
            result.unwrap()

    def test_equality(self):
        assert Ok(1) != Err(1)
        assert Ok([1]) == Ok([1])


class TestMaybe:
    def test_some_and_nothing(self):
        assert Some(1).is_some()
        assert not Some(1).is_nothing()
        assert NOTHING.is_nothing()
        assert NOTHING == Nothing()
        assert Some(None) != NOTHING


class TestUndefined:
    def test_singleton(self):
        assert _Undefined() is UNDEFINED
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED

    def test_distinct_from_none(self):
        assert UNDEFINED is not None
        assert UNDEFINED != None  # noqa: E711
        assert not UNDEFINED
        assert repr(UNDEFINED) == "undefined"
