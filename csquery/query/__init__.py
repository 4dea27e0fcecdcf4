from .combinators import (
    MATCHALL,
    Expression,
    and_,
    assemble,
    matchall,
    near,
    not_,
    or_,
    phrase,
    prefix,
    range_,
    term,
)
from .literals import Options, Value, quote, serialize_options

__all__ = [
    "Expression",
    "MATCHALL",
    "Options",
    "Value",
    "and_",
    "assemble",
    "matchall",
    "near",
    "not_",
    "or_",
    "phrase",
    "prefix",
    "quote",
    "range_",
    "serialize_options",
    "term",
]
