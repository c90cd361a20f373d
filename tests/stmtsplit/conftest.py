from __future__ import annotations

import re

import pytest

from stmtsplit import Dialect, split

_SEPARATOR_OR_SPACE = re.compile(r"[\s;]")

ALL_DIALECTS = list(Dialect)


@pytest.fixture(params=ALL_DIALECTS, ids=lambda d: d.value)
def dialect(request: pytest.FixtureRequest) -> Dialect:
    return request.param


# -- Assertion helpers ---------------------------------------------------------


def assert_reconstructs(sql: str, dialect: Dialect | str) -> None:
    """Assert that splitting loses nothing but separators and whitespace.

    Joining the statements back together must yield the same non-whitespace, non-``;`` characters, in the same
    order, as the input.
    """
    statements = split(sql, dialect)
    joined = "; ".join(statements) + ";"
    original = _SEPARATOR_OR_SPACE.sub("", sql)
    rebuilt = _SEPARATOR_OR_SPACE.sub("", joined)
    assert original == rebuilt, f"Characters lost while splitting:\n  input:  {sql!r}\n  output: {statements!r}"


def assert_well_formed(statements: list[str]) -> None:
    """Assert that every statement is non-empty and already stripped."""
    for stmt in statements:
        assert stmt, "empty statement emitted"
        assert stmt == stmt.strip(), f"statement not stripped: {stmt!r}"
