# csquery/__init__.py
"""csquery - A builder for structured search query expressions."""

from csquery.errors import ValidationError
from csquery.query import (
    Expression,
    and_,
    matchall,
    near,
    not_,
    or_,
    phrase,
    prefix,
    range_,
    term,
)

__all__ = [
    # Expressions
    "Expression",
    "and_",
    "or_",
    "not_",
    "range_",
    "term",
    "phrase",
    "prefix",
    "near",
    "matchall",
    # Errors
    "ValidationError",
]
