"""
shapeguard - composable runtime validation of untyped values.

Usage:
    from shapeguard import array, object_, optional, string, uint

    User = object_("User", {
        "name": string,
        "age": optional(uint),
        "tags": array(string),
    })

    User.validate({"name": "Alice", "tags": []})        # Ok
    User.validate_exact({"name": "Alice", "tags": [], "x": 1})  # Err
"""

from .adapt import Adaptor, AdaptValidator, adapt, adaptor, try_adaptor
from .combinators import (
    ArrayValidator,
    DictionaryValidator,
    MaybeValidator,
    ObjectValidator,
    OptionalValidator,
    RecordValidator,
    RecursiveValidator,
    TupleValidator,
    UnionValidator,
    array,
    dictionary,
    maybe,
    nillable,
    nullable,
    object_,
    optional,
    readonly,
    record,
    recursive,
    spread,
    tuple_,
    undefinable,
    union,
)
from .context import is_exact, validation_context
from .core import Validator
from .errors import SchemaError, UnresolvedRecursionError
from .intersection import IntersectionValidator, intersection
from .primitives import (
    EnumValidator,
    ValuesValidator,
    WrapValidator,
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
from .schema import to_pydantic, type_hint, validate
from .transforms import nonnullable, omit, partial, pick, required
from .types import NOTHING, UNDEFINED, Err, Nothing, Ok, Some
from .wrappers import ClassValidator, FunctionValidator, cls, func

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Some",
    "Nothing",
    "NOTHING",
    "UNDEFINED",
    # Core
    "Validator",
    "validation_context",
    "is_exact",
    "SchemaError",
    "UnresolvedRecursionError",
    # Primitives
    "wrap",
    "wrap_enum",
    "unknown",
    "never",
    "string",
    "boolean",
    "number",
    "loose_number",
    "int_",
    "uint",
    "literal",
    "literals",
    "undefined_literal",
    "null_literal",
    "void_literal",
    "true_literal",
    "false_literal",
    # Combinators
    "array",
    "dictionary",
    "record",
    "tuple_",
    "spread",
    "object_",
    "union",
    "optional",
    "maybe",
    "recursive",
    "undefinable",
    "nullable",
    "nillable",
    "readonly",
    "intersection",
    # Transforms
    "partial",
    "required",
    "nonnullable",
    "pick",
    "omit",
    # Adaptation and wrappers
    "adapt",
    "adaptor",
    "try_adaptor",
    "Adaptor",
    "cls",
    "func",
    # Schema
    "validate",
    "type_hint",
    "to_pydantic",
    # Node types
    "WrapValidator",
    "EnumValidator",
    "ValuesValidator",
    "ObjectValidator",
    "ArrayValidator",
    "DictionaryValidator",
    "RecordValidator",
    "TupleValidator",
    "UnionValidator",
    "IntersectionValidator",
    "OptionalValidator",
    "MaybeValidator",
    "RecursiveValidator",
    "AdaptValidator",
    "ClassValidator",
    "FunctionValidator",
]
