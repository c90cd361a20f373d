"""Turn a SQL script into a parameter-free query batch for transactional execution."""

from __future__ import annotations

import typing

from stmtsplit.split import iter_statements

if typing.TYPE_CHECKING:
    from stmtsplit.dialects import Dialect


class Query(typing.NamedTuple):
    """One ``(sql, params)`` pair as accepted by ``executemany``-style transaction runners."""

    sql: str
    params: tuple[typing.Any, ...] = ()


def to_queries(sql: str, dialect: Dialect | str, *, terminate: bool = False) -> list[Query]:
    """Split *sql* and pair each statement with an empty parameter tuple.

    Intended for handing a whole script (e.g. a ``CREATE TABLE`` followed by its ``COMMENT ON`` and ``CREATE INDEX``
    statements) to an executor that runs the pairs in order inside one transaction.

    Args:
        sql: A SQL script potentially containing multiple statements.
        dialect: A :class:`~stmtsplit.Dialect` member or dialect name.
        terminate: Append ``;`` to every statement. Some drivers require it for DDL.

    Returns:
        One :class:`Query` per statement, in input order.

    Example:
        >>> to_queries("CREATE TABLE t (id int); CREATE INDEX ix ON t (id)", "postgres", terminate=True)
        [Query(sql='CREATE TABLE t (id int);', params=()), Query(sql='CREATE INDEX ix ON t (id);', params=())]
    """
    suffix = ";" if terminate else ""
    return [Query(stmt + suffix) for stmt in iter_statements(sql, dialect)]
