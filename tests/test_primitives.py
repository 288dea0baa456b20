"""
Tests for leaf validators.
"""

import math
from enum import Enum

from helpers import assert_accepts

from shapeguard import (
    UNDEFINED,
    Err,
    Ok,
    boolean,
    false_literal,
    int_,
    literal,
    literals,
    loose_number,
    never,
    null_literal,
    number,
    string,
    true_literal,
    uint,
    undefined_literal,
    unknown,
    void_literal,
    wrap,
    wrap_enum,
)


class TestWrap:
    def test_wrap(self):
        v = wrap("'b' | 7", lambda x: Ok(x) if x == "b" or x == 7 else Err("blah"))
        assert v.name == "'b' | 7"
        assert_accepts(v, ["b", 7], [None, UNDEFINED, [], {}, "a", 8])

    def test_wrap_can_convert(self):
        v = wrap("stripped", lambda x: Ok(x.strip()) if isinstance(x, str) else Err("no"))
        assert v.validate("  a ") == Ok("a")

    def test_wrap_enum(self):
        class Color(Enum):
            RED = "red"
            BLUE = "blue"

        v = wrap_enum("Color", lambda x: Color.__members__.get(x) if isinstance(x, str) else None)
        assert v.validate("RED") == Ok(Color.RED)
        result = v.validate("GREEN")
        assert isinstance(result, Err)
        assert "expected Color" in result.error
        assert isinstance(v.validate(3), Err)

    def test_unknown_and_never(self):
        for value in [None, UNDEFINED, 1, "a", [], {}]:
            assert unknown.validate(value) == Ok(value)
            assert isinstance(never.validate(value), Err)


class TestScalars:
    def test_string(self):
        assert_accepts(string, ["", "a", "long thing"], [None, UNDEFINED, [], ["a"], {}, 5, True, b"a"])

    def test_boolean(self):
        assert_accepts(boolean, [True, False], [None, UNDEFINED, [], {}, 0, 1, "a"])

    def test_number(self):
        assert_accepts(
            number,
            [0, 1, -1, 5.5, -5.5, 10**30],
            [None, UNDEFINED, [], "1", True, False, math.inf, -math.inf, math.nan],
        )

    def test_loose_number(self):
        assert_accepts(loose_number, [0, 5.5, math.inf, -math.inf], [None, "1", True])
        assert isinstance(loose_number.validate(math.nan), Ok)

    def test_int(self):
        assert_accepts(int_, [0, 1, -2, 3.0], [None, "a", True, 5.5, -5.5, math.inf, math.nan])

    def test_uint(self):
        assert_accepts(uint, [0, 1, 2, 4.0], [None, "a", True, -1, -2, 5.5, math.inf, math.nan])

    def test_error_message(self):
        result = string.validate(5)
        assert result == Err("expected string, got 5")


class TestLiterals:
    def test_literal(self):
        assert_accepts(literal("a"), ["a"], [None, UNDEFINED, "b", "A", 1])

    def test_no_coercion(self):
        assert isinstance(literal(1).validate(True), Err)
        assert isinstance(literal(1).validate(1.0), Err)
        assert isinstance(literal(True).validate(1), Err)
        assert isinstance(literal(0).validate(False), Err)
        assert literal(1).validate(1) == Ok(1)

    def test_literals(self):
        v = literals("a", 1, None)
        assert v.name == "'a' | 1 | null"
        assert_accepts(v, ["a", 1, None], [UNDEFINED, "b", 2, True, []])

    def test_null_and_undefined_are_distinct(self):
        assert null_literal.validate(None) == Ok(None)
        assert isinstance(null_literal.validate(UNDEFINED), Err)
        assert undefined_literal.validate(UNDEFINED) == Ok(UNDEFINED)
        assert isinstance(undefined_literal.validate(None), Err)
        assert void_literal.validate(UNDEFINED) == Ok(UNDEFINED)

    def test_singletons_are_distinct_nodes(self):
        assert void_literal is not undefined_literal
        assert literal(UNDEFINED) is not undefined_literal

    def test_boolean_literals(self):
        assert true_literal.validate(True) == Ok(True)
        assert isinstance(true_literal.validate(False), Err)
        assert false_literal.validate(False) == Ok(False)
        assert isinstance(false_literal.validate(0), Err)
