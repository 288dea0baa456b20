"""Property-based tests for the combinator algebra."""

from hypothesis import given
from hypothesis import strategies as st

from shapeguard import (
    UNDEFINED,
    ArrayValidator,
    IntersectionValidator,
    MaybeValidator,
    ObjectValidator,
    OptionalValidator,
    TupleValidator,
    UnionValidator,
    array,
    boolean,
    int_,
    intersection,
    null_literal,
    number,
    object_,
    optional,
    spread,
    string,
    tuple_,
    union,
    unknown,
)

KEYS = ["a", "b", "c", "d"]

leaf_values = st.one_of(
    st.none(),
    st.just(UNDEFINED),
    st.booleans(),
    st.integers(min_value=-5, max_value=5),
    st.floats(allow_nan=False, allow_infinity=False, width=32),
    st.text(max_size=3),
)

values = st.recursive(
    leaf_values,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.sampled_from(KEYS), children, max_size=4),
    ),
    max_leaves=12,
)

records = st.dictionaries(st.sampled_from(KEYS), values, max_size=4)

leaf_validators = st.sampled_from([string, number, boolean, int_, null_literal, unknown])

validators = st.recursive(
    leaf_validators,
    lambda children: st.one_of(
        st.builds(array, children),
        st.builds(optional, children),
        st.lists(children, min_size=1, max_size=3).map(lambda vs: union(*vs)),
        st.lists(children, max_size=3).map(lambda vs: tuple_(*vs)),
        st.dictionaries(st.sampled_from(KEYS), children, max_size=3).map(object_),
    ),
    max_leaves=8,
)


@st.composite
def flat_objects(draw, keys=KEYS):
    """Object shape whose fields are leaves, so loose and exact differ only in extra keys."""
    fields = draw(st.dictionaries(st.sampled_from(keys), leaf_validators | leaf_validators.map(optional), max_size=3))
    return object_(fields)


@st.composite
def disjoint_objects(draw):
    """Two leaf-field object shapes over disjoint key sets."""
    split = draw(st.integers(min_value=1, max_value=len(KEYS)))
    return draw(flat_objects(KEYS[:split])), draw(flat_objects(KEYS[split:] or ["z"]))


@st.composite
def array_spreads(draw):
    """Spread tuple whose rest is an array of leaves."""
    items = draw(st.lists(leaf_validators | leaf_validators.map(optional), max_size=3))
    return spread(*items, array(draw(leaf_validators)))


def walk(validator, seen=None):
    """Yield every node of a validator tree."""
    seen = set() if seen is None else seen
    if id(validator) in seen:
        return
    seen.add(id(validator))
    yield validator
    if isinstance(validator, UnionValidator):
        children = validator.members
    elif isinstance(validator, IntersectionValidator):
        children = validator.children
    elif isinstance(validator, ObjectValidator):
        children = tuple(validator.fields.values())
    elif isinstance(validator, ArrayValidator):
        children = (validator.item,) + ((validator.extra,) if validator.extra is not None else ())
    elif isinstance(validator, TupleValidator):
        children = validator.items + ((validator.rest,) if validator.rest is not None else ())
    elif isinstance(validator, (OptionalValidator, MaybeValidator)):
        children = (validator.item,)
    else:
        children = ()
    for child in children:
        yield from walk(child, seen)


def accepts(validator, value, exact=False):
    return validator.is_valid(value, exact=exact)


class TestUnionFlattening:
    @given(st.lists(validators, min_size=1, max_size=4))
    def test_no_union_holds_a_union(self, members):
        for node in walk(union(*members)):
            if isinstance(node, UnionValidator):
                assert not any(isinstance(m, UnionValidator) for m in node.members)

    @given(st.lists(validators, min_size=1, max_size=4))
    def test_no_intersection_holds_an_intersection(self, operands):
        for node in walk(intersection(*operands)):
            if isinstance(node, IntersectionValidator):
                assert not any(isinstance(c, IntersectionValidator) for c in node.children)

    @given(validators, validators, validators, values)
    def test_nesting_does_not_change_results(self, a, b, c, value):
        assert union(union(a, b), c).validate(value) == union(a, b, c).validate(value)


class TestOptionalIdempotence:
    @given(validators, values)
    def test_double_optional_behaves_like_single(self, validator, value):
        once = optional(validator)
        assert optional(once) is once
        twice = OptionalValidator(OptionalValidator(validator))
        assert twice.validate(value) == once.validate(value)
        assert twice.validate_exact(value) == once.validate_exact(value)

    @given(validators)
    def test_undefined_always_passes(self, validator):
        assert accepts(optional(validator), UNDEFINED)
        assert accepts(optional(validator), UNDEFINED, exact=True)


class TestObjectModes:
    @given(flat_objects(), records)
    def test_exact_is_loose_without_extra_keys(self, shape, record):
        loose = accepts(shape, record)
        exact = accepts(shape, record, exact=True)
        extra = set(record) - set(shape.fields)
        assert exact == (loose and not extra)

    @given(flat_objects(), records)
    def test_declared_fields_only_decide_loose_mode(self, shape, record):
        declared = {k: v for k, v in record.items() if k in shape.fields}
        assert accepts(shape, record) == accepts(shape, declared)


class TestIntersectionProperties:
    @given(disjoint_objects(), values)
    def test_disjoint_objects(self, pair, value):
        a, b = pair
        merged = intersection(a, b)
        assert isinstance(merged, ObjectValidator)
        assert accepts(merged, value) == (accepts(a, value) and accepts(b, value))

    @given(flat_objects(), flat_objects(), flat_objects(), records)
    def test_distributes_over_union(self, a, b, c, record):
        distributed = intersection(union(a, b), c)
        expanded = union(intersection(a, c), intersection(b, c))
        assert accepts(distributed, record) == accepts(expanded, record)
        assert accepts(distributed, record) == (accepts(union(a, b), record) and accepts(c, record))

    @given(array_spreads(), array_spreads(), st.lists(values, max_size=5))
    def test_spreads_accept_only_common_values(self, a, b, value):
        if accepts(intersection(a, b), value):
            assert accepts(a, value) and accepts(b, value)
