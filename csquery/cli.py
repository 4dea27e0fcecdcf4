# csquery/cli.py
import logging
import os
import sys
from collections.abc import Callable
from typing import Annotated

import cyclopts

from csquery.errors import ValidationError
from csquery.query import (
    Expression,
    and_,
    matchall as build_matchall,
    near as build_near,
    not_,
    or_,
    phrase as build_phrase,
    prefix as build_prefix,
    range_,
    term as build_term,
)
from csquery.query.literals import Value

logger = logging.getLogger(__name__)

app = cyclopts.App(
    name="csquery",
    help="Build structured search query expressions.",
)

FieldOpt = Annotated[
    str | None,
    cyclopts.Parameter(name=["--field", "-F"], help="Field to search on (default: all text fields)"),
]
OptionsOpt = Annotated[
    list[str],
    cyclopts.Parameter(name=["--option", "-O"], help="Extra option as key=value, e.g. boost=2"),
]


def _coerce(raw: str) -> Value:
    """Turn a command line token into an int, a float or, failing both, a string."""
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            continue
    return raw


def _parse_options(pairs: list[str]) -> dict[str, Value]:
    options: dict[str, Value] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        if not sep or not name:
            raise ValidationError(f"Invalid option {pair!r}, expected key=value")
        options[name] = _coerce(raw)
    return options


def _emit(build: Callable[[], Expression]) -> None:
    try:
        expression = build()
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(expression)


@app.command(name="term")
def term(
    value: Annotated[str, cyclopts.Parameter(help="Words to search for")],
    field: FieldOpt = None,
    option: OptionsOpt = [],
) -> None:
    """Build a term expression."""
    _emit(lambda: build_term(value, field, _parse_options(option)))


@app.command(name="phrase")
def phrase(
    value: Annotated[str, cyclopts.Parameter(help="Phrase to search for")],
    field: FieldOpt = None,
    option: OptionsOpt = [],
) -> None:
    """Build a phrase expression."""
    _emit(lambda: build_phrase(value, field, _parse_options(option)))


@app.command(name="prefix")
def prefix(
    value: Annotated[str, cyclopts.Parameter(help="Prefix to search for")],
    field: FieldOpt = None,
    option: OptionsOpt = [],
) -> None:
    """Build a prefix expression."""
    _emit(lambda: build_prefix(value, field, _parse_options(option)))


@app.command(name="near")
def near(
    value: Annotated[str, cyclopts.Parameter(help="Words that must appear near each other")],
    field: FieldOpt = None,
    distance: Annotated[
        int | None,
        cyclopts.Parameter(name=["--distance", "-d"], help="Maximum distance between the words"),
    ] = None,
    option: OptionsOpt = [],
) -> None:
    """Build a near expression."""
    _emit(lambda: build_near(value, field, distance, _parse_options(option)))


@app.command(name="range")
def range_cmd(
    field: Annotated[str, cyclopts.Parameter(help="Field to search on")],
    lower: Annotated[
        str | None,
        cyclopts.Parameter(name=["--lower", "-l"], help="Lower bound (inclusive)"),
    ] = None,
    upper: Annotated[
        str | None,
        cyclopts.Parameter(name=["--upper", "-u"], help="Upper bound (inclusive)"),
    ] = None,
    option: OptionsOpt = [],
) -> None:
    """Build a range expression. Numeric-looking bounds are rendered unquoted."""
    low = _coerce(lower) if lower is not None else None
    high = _coerce(upper) if upper is not None else None
    _emit(lambda: range_(field, low, high, _parse_options(option)))


@app.command(name="and")
def and_cmd(
    expressions: Annotated[list[str], cyclopts.Parameter(help="Expressions to AND together")],
    option: OptionsOpt = [],
) -> None:
    """AND together previously built expressions."""
    _emit(lambda: and_(expressions, _parse_options(option)))


@app.command(name="or")
def or_cmd(
    expressions: Annotated[list[str], cyclopts.Parameter(help="Expressions to OR together")],
    option: OptionsOpt = [],
) -> None:
    """OR together previously built expressions."""
    _emit(lambda: or_(expressions, _parse_options(option)))


@app.command(name="not")
def not_cmd(
    expression: Annotated[str, cyclopts.Parameter(help="Expression to negate")],
    option: OptionsOpt = [],
) -> None:
    """Negate a previously built expression."""
    _emit(lambda: not_(expression, _parse_options(option)))


@app.command(name="matchall")
def matchall() -> None:
    """Print the matchall expression."""
    _emit(build_matchall)


def main() -> None:
    level = os.getenv("CSQUERY_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))
    logger.debug("Log level set to %s", level)
    app()


if __name__ == "__main__":
    main()
