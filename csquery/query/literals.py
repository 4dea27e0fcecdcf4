# csquery/query/literals.py
"""Rendering of literal values and option sets."""

from collections.abc import Mapping

type Value = str | int | float
type Options = Mapping[str, Value]


def quote(value: Value) -> str:
    """Render a value as a grammar literal.

    Strings are wrapped in single quotes as-is. No escaping is done, so values
    containing a single quote must be sanitized by the caller.

    Examples:
        quote("apple")  ->  'apple'
        quote(10)       ->  10
    """
    if isinstance(value, str):
        return f"'{value}'"
    return str(value)


def serialize_options(options: Options | None) -> str:
    """Render options as space separated ``name=value`` pairs.

    String values are double-quoted, everything else is rendered unquoted.
    Pairs keep the mapping's insertion order.
    """
    if not options:
        return ""

    pairs = []
    for name, value in options.items():
        if isinstance(value, str):
            pairs.append(f'{name}="{value}"')
        else:
            pairs.append(f"{name}={value}")
    return " ".join(pairs)
