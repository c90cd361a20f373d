"""Error types for stmtsplit.

Splitting itself never fails: unterminated strings, identifiers and comments are absorbed to the end of the text. The
exceptions here cover the two places where a caller asks for something stricter: naming a dialect that does not exist,
and requesting a balance check with :func:`~stmtsplit.check_balanced`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stmtsplit.split import RegionKind


class StatementSplitError(Exception):
    """Base class for every exception raised by stmtsplit.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownDialectError(StatementSplitError, ValueError):
    """Raised when a dialect name does not match any supported dialect.

    Subclasses :class:`ValueError` so callers validating user input can catch either.

    Attributes:
        name: The name that failed to resolve.
        choices: The canonical dialect names that would have been accepted.
    """

    def __init__(self, name: str, choices: Iterable[str]) -> None:
        self.name = name
        self.choices = tuple(choices)
        super().__init__(f"Unknown dialect {name!r}; expected one of {', '.join(repr(c) for c in self.choices)}")


class UnterminatedRegionError(StatementSplitError):
    """Raised by :func:`~stmtsplit.check_balanced` when the text ends inside a quoted or commented region.

    ``position`` is a **0-based character offset** (not a byte offset) of the opening delimiter, so
    ``sql[e.position:]`` is the unterminated tail.

    Attributes:
        kind: Which kind of region was left open.
        position: 0-based offset of the region's opening delimiter.
        delimiter: The literal opening delimiter (``'``, ``/*``, ``$tag$``, ...).

    Examples:
        >>> from stmtsplit import check_balanced, UnterminatedRegionError
        >>> sql = "SELECT 1; SELECT 'oops"
        >>> try:
        ...     check_balanced(sql, "postgres")
        ... except UnterminatedRegionError as e:
        ...     print(sql)
        ...     print(" " * e.position + "^")
        ...     print(e.message)
        SELECT 1; SELECT 'oops
                         ^
        unterminated single-quoted string starting at offset 17
    """

    def __init__(self, message: str, *, kind: RegionKind, position: int, delimiter: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.position = position
        self.delimiter = delimiter
