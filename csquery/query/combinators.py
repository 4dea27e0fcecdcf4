# csquery/query/combinators.py
import logging
from collections.abc import Sequence

from csquery.errors import ValidationError
from csquery.query.literals import Options, Value, quote, serialize_options

logger = logging.getLogger(__name__)

MATCHALL = "matchall"


class Expression(str):
    """A rendered structured query expression.

    Behaves exactly like the underlying string, and adds ``&``, ``|`` and
    ``~`` as shorthands for ``and_``, ``or_`` and ``not_``.
    """

    __slots__ = ()

    def __and__(self, other: str) -> "Expression":
        return and_([self, other])

    def __or__(self, other: str) -> "Expression":
        return or_([self, other])

    def __invert__(self) -> "Expression":
        return not_(self)


def assemble(
    operator: str,
    body: str,
    field: str | None = None,
    options: Options | None = None,
) -> Expression:
    """Build ``(<operator> [field=<field>] [<options>] <body>)``.

    Exactly one space separates each part, whether or not a field or options
    are present.
    """
    head = f"({operator}"
    if field is not None:
        head += f" field={field}"
    head = f"{head} {serialize_options(options)}".strip()

    expression = Expression(f"{head} {body})")
    logger.debug("Assembled expression: %s", expression)
    return expression


def _join(operator: str, expressions: Sequence[str] | str) -> str:
    if isinstance(expressions, str):
        expressions = [expressions]
    if not expressions:
        raise ValidationError(f"{operator} requires at least one expression")
    return " ".join(expressions)


def and_(expressions: Sequence[str] | str, options: Options | None = None) -> Expression:
    """AND together one or more expressions.

    Example:
        and_([near("kast kaalikas", "model", 3), prefix("gam", "model")], {"boost": 2})
        ->  (and boost=2 (near field=model distance=3 'kast kaalikas') (prefix field=model 'gam'))
    """
    return assemble("and", _join("and", expressions), options=options)


def or_(expressions: Sequence[str] | str, options: Options | None = None) -> Expression:
    """OR together one or more expressions.

    Example:
        or_([phrase("kast vaal", "model"), matchall()])
        ->  (or (phrase field=model 'kast vaal') matchall)
    """
    return assemble("or", _join("or", expressions), options=options)


def not_(expression: str, options: Options | None = None) -> Expression:
    """Invert a single expression; to negate several, wrap them in ``and_``/``or_`` first."""
    if not isinstance(expression, str):
        raise ValidationError("not accepts a single expression, not a sequence")
    return assemble("not", expression, options=options)


def range_(
    field: str | None,
    lower: Value | None = None,
    upper: Value | None = None,
    options: Options | None = None,
) -> Expression:
    """Match values of a single field between two bounds.

    At least one bound is required; a missing bound leaves that end open.
    Works on numeric, date and text fields, but both bounds must be of the
    same kind (both strings or both numbers).

    Args:
        field: Name of the field to search on.
        lower: Inclusive lower bound.
        upper: Inclusive upper bound.
        options: Extra modifiers, e.g. ``{"boost": 3}``.

    Returns:
        The range expression, e.g. ``(range field=year [1990,2000])``.

    Raises:
        ValidationError: If the field or both bounds are missing, or the
            bounds are of different kinds.
    """
    if field is None:
        raise ValidationError("range requires a field")
    if lower is None and upper is None:
        raise ValidationError("range requires at least one bound")

    if lower is None:
        interval = f"{{,{quote(upper)}]"
    elif upper is None:
        interval = f"[{quote(lower)},}}"
    else:
        if isinstance(lower, str) != isinstance(upper, str):
            raise ValidationError(
                f"range bounds must be of the same type, got {type(lower).__name__} "
                f"and {type(upper).__name__}"
            )
        interval = f"[{quote(lower)},{quote(upper)}]"

    return assemble("range", interval, field=field, options=options)


def _leaf(operator: str, value: Value | None, field: str | None, options: Options | None) -> Expression:
    if value is None:
        raise ValidationError(f"{operator} requires a value")
    return assemble(operator, quote(value), field=field, options=options)


def term(value: Value, field: str | None = None, options: Options | None = None) -> Expression:
    """Match a sequence of words, on one field or on all text fields.

    Example:
        term("apple", "identifier", {"boost": 4})  ->  (term field=identifier boost=4 'apple')
    """
    return _leaf("term", value, field, options)


def phrase(value: Value, field: str | None = None, options: Options | None = None) -> Expression:
    """Match an exact phrase."""
    return _leaf("phrase", value, field, options)


def prefix(value: Value, field: str | None = None, options: Options | None = None) -> Expression:
    """Match values starting with ``value``. Only valid on text and literal fields."""
    return _leaf("prefix", value, field, options)


def near(
    value: Value,
    field: str | None = None,
    distance: int | None = None,
    options: Options | None = None,
) -> Expression:
    """Match words that appear within ``distance`` words of each other.

    ``distance`` is rendered before any other option. A ``distance`` key in
    ``options`` takes precedence over the argument.

    Example:
        near("let be", "model", 1)  ->  (near field=model distance=1 'let be')
    """
    merged: dict[str, Value] = {}
    if distance is not None:
        merged["distance"] = distance
    merged.update(options or {})
    return _leaf("near", value, field, merged)


def matchall() -> Expression:
    """Return the ``matchall`` literal, which matches every document."""
    return Expression(MATCHALL)
