"""SQL statement splitting with dialect-aware quoting and comment rules."""

from __future__ import annotations

import enum
import logging
import typing
from functools import partial
from types import MappingProxyType

from stmtsplit._cursor import Cursor
from stmtsplit.dialects import DIALECT_CONFIGS, Dialect
from stmtsplit.errors import UnterminatedRegionError

if typing.TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping

    from stmtsplit.dialects import LexicalConfig

logger = logging.getLogger(__name__)

_SEPARATOR = ";"
_TAG_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_")


class RegionKind(str, enum.Enum):
    """Kinds of lexical region inside which ``;`` does not end a statement."""

    SINGLE_QUOTE = "single-quoted string"
    DOUBLE_QUOTE = "double-quoted identifier"
    BACKTICK = "backtick identifier"
    BRACKET = "bracket identifier"
    DOLLAR_QUOTE = "dollar-quoted string"
    LINE_COMMENT = "line comment"
    BLOCK_COMMENT = "block comment"


class UnterminatedRegion(typing.NamedTuple):
    """A region that was still open when the input ended."""

    kind: RegionKind
    start: int
    delimiter: str


class SplitResult(typing.NamedTuple):
    """Statements produced by :func:`split_with_diagnostics` together with advisory diagnostics."""

    statements: list[str]
    unterminated: list[UnterminatedRegion]

    @property
    def balanced(self) -> bool:
        """``True`` when every quote and comment in the input was closed."""
        return not self.unterminated


class _Region(typing.NamedTuple):
    kind: RegionKind
    start: int
    delimiter: str
    closed: bool


_Handler = typing.Callable[[Cursor], "_Region | None"]


# ---------------------------------------------------------------------------
# Region handlers
#
# Each handler is called with the cursor on a candidate opening character.
# It either returns None without moving the cursor (the character does not
# open a region here) or consumes the whole region, delimiters included.
# ---------------------------------------------------------------------------


def _scan_quoted(cursor: Cursor, *, kind: RegionKind, close: str, backslash_escape: bool = False) -> _Region:
    start = cursor.pos
    opener = cursor.peek()
    cursor.advance()
    while not cursor.at_end:
        ch = cursor.peek()
        if ch == close:
            if cursor.peek(1) == close:
                cursor.advance(2)
                continue
            cursor.advance()
            return _Region(kind, start, opener, closed=True)
        if backslash_escape and ch == "\\":
            cursor.advance(2)
            continue
        cursor.advance()
    return _Region(kind, start, opener, closed=False)


def _scan_dollar_quoted(cursor: Cursor) -> _Region | None:
    offset = 1
    while cursor.peek(offset) in _TAG_CHARS:
        offset += 1
    if cursor.peek(offset) != "$":
        return None

    start = cursor.pos
    tag = cursor.text[start : start + offset + 1]
    cursor.advance(len(tag))
    close = cursor.find(tag)
    if close == -1:
        cursor.advance_to_end()
        return _Region(RegionKind.DOLLAR_QUOTE, start, tag, closed=False)
    cursor.advance_to(close + len(tag))
    return _Region(RegionKind.DOLLAR_QUOTE, start, tag, closed=True)


def _scan_line_comment(cursor: Cursor, *, opener: str) -> _Region | None:
    if not cursor.startswith(opener):
        return None
    start = cursor.pos
    newline = cursor.find("\n")
    if newline == -1:
        cursor.advance_to_end()
    else:
        cursor.advance_to(newline)
    return _Region(RegionKind.LINE_COMMENT, start, opener, closed=True)


def _scan_block_comment(cursor: Cursor, *, nested: bool) -> _Region | None:
    if not cursor.startswith("/*"):
        return None
    start = cursor.pos
    cursor.advance(2)

    if not nested:
        close = cursor.find("*/")
        if close == -1:
            cursor.advance_to_end()
            return _Region(RegionKind.BLOCK_COMMENT, start, "/*", closed=False)
        cursor.advance_to(close + 2)
        return _Region(RegionKind.BLOCK_COMMENT, start, "/*", closed=True)

    depth = 1
    while not cursor.at_end:
        if cursor.startswith("/*"):
            depth += 1
            cursor.advance(2)
        elif cursor.startswith("*/"):
            depth -= 1
            cursor.advance(2)
            if depth == 0:
                return _Region(RegionKind.BLOCK_COMMENT, start, "/*", closed=True)
        else:
            cursor.advance()
    return _Region(RegionKind.BLOCK_COMMENT, start, "/*", closed=False)


def _build_handlers(config: LexicalConfig) -> Mapping[str, _Handler]:
    """Map each region-opening character to its handler for one dialect.

    Opening characters are disjoint, so at most one handler applies at any position.
    """
    handlers: dict[str, _Handler] = {
        "'": partial(
            _scan_quoted, kind=RegionKind.SINGLE_QUOTE, close="'", backslash_escape=config.backslash_escape
        ),
        '"': partial(_scan_quoted, kind=RegionKind.DOUBLE_QUOTE, close='"'),
        "-": partial(_scan_line_comment, opener="--"),
        "/": partial(_scan_block_comment, nested=config.nested_block_comments),
    }
    if config.backtick_identifiers:
        handlers["`"] = partial(_scan_quoted, kind=RegionKind.BACKTICK, close="`")
    if config.bracket_identifiers:
        handlers["["] = partial(_scan_quoted, kind=RegionKind.BRACKET, close="]")
    if config.dollar_quotes:
        handlers["$"] = _scan_dollar_quoted
    if config.hash_line_comment:
        handlers["#"] = partial(_scan_line_comment, opener="#")
    return MappingProxyType(handlers)


_DIALECT_HANDLERS: Mapping[Dialect, Mapping[str, _Handler]] = MappingProxyType(
    {dialect: _build_handlers(config) for dialect, config in DIALECT_CONFIGS.items()}
)


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------


def _scan(
    sql: str, handlers: Mapping[str, _Handler], unterminated: list[UnterminatedRegion] | None = None
) -> Iterator[str]:
    cursor = Cursor(sql)
    start = 0
    while not cursor.at_end:
        ch = cursor.peek()
        if ch == _SEPARATOR:
            stmt = sql[start : cursor.pos].strip()
            if stmt:
                yield stmt
            cursor.advance()
            start = cursor.pos
            continue

        handler = handlers.get(ch)
        region = handler(cursor) if handler is not None else None
        if region is None:
            cursor.advance()
        elif not region.closed:
            logger.debug(
                "Unterminated %s opened with %r at offset %d", region.kind.value, region.delimiter, region.start
            )
            if unterminated is not None:
                unterminated.append(UnterminatedRegion(region.kind, region.start, region.delimiter))

    stmt = sql[start:].strip()
    if stmt:
        yield stmt


def iter_statements(sql: str, dialect: Dialect | str) -> Iterator[str]:
    """Lazily yield the statements in *sql*; see :func:`split`.

    The dialect is resolved when the generator is created, so an unknown name raises immediately.
    """
    return _scan(sql, _DIALECT_HANDLERS[Dialect.from_name(dialect)])


def split(sql: str, dialect: Dialect | str) -> list[str]:
    """Split a multi-statement SQL string into individual statements.

    Scans *sql* once from left to right and breaks it at every ``;`` that is not inside a string literal, quoted
    identifier or comment. Which quoting and comment forms exist depends on *dialect*:

    ========  ==========================================================
    postgres  ``$$...$$`` / ``$tag$...$tag$`` strings, nested ``/* */``
    mysql     ```ident```, ``\\'`` escapes in strings, ``#`` comments
    mssql     ``[ident]``
    sqlite    ```ident``` and ``[ident]``
    ========  ==========================================================

    Every dialect understands ``'...'`` strings with ``''`` doubling, ``"..."`` identifiers with ``""`` doubling,
    ``--`` line comments and ``/* */`` block comments.

    Each statement is stripped of surrounding whitespace and has no trailing ``;``. Empty statements (from ``;;``,
    leading or trailing separators, whitespace-only input) are dropped. Comments are kept verbatim as part of the
    statement they appear in.

    Splitting never fails. A string, identifier or comment that is still open at the end of the input swallows the
    rest of the text into the current statement, which makes the function safe to call on half-typed editor
    content. Use :func:`split_with_diagnostics` or :func:`check_balanced` to find out whether that happened.

    Args:
        sql: A SQL string potentially containing multiple statements.
        dialect: A :class:`~stmtsplit.Dialect` member or a dialect name such as ``"postgres"``.

    Returns:
        The individual statements, in input order.

    Raises:
        UnknownDialectError: If *dialect* names no supported dialect.

    Example:
        >>> split("SELECT ';' AS x; SELECT 2;", "postgres")
        ["SELECT ';' AS x", 'SELECT 2']
    """
    return list(iter_statements(sql, dialect))


def split_with_diagnostics(sql: str, dialect: Dialect | str) -> SplitResult:
    """Split *sql* like :func:`split` and also report regions left open at the end of the input.

    The statement list is identical to what :func:`split` returns. Because an open region consumes everything after
    it, ``unterminated`` holds at most one entry.

    Example:
        >>> result = split_with_diagnostics("SELECT 1; SELECT 'abc", "mysql")
        >>> result.statements
        ['SELECT 1', "SELECT 'abc"]
        >>> result.unterminated[0].start
        17
    """
    unterminated: list[UnterminatedRegion] = []
    statements = list(_scan(sql, _DIALECT_HANDLERS[Dialect.from_name(dialect)], unterminated))
    return SplitResult(statements, unterminated)


def check_balanced(sql: str, dialect: Dialect | str) -> None:
    """Raise if *sql* ends inside a string, quoted identifier or block comment.

    Args:
        sql: The SQL text to check.
        dialect: A :class:`~stmtsplit.Dialect` member or dialect name.

    Raises:
        UnterminatedRegionError: If a region is still open at the end of *sql*.
        UnknownDialectError: If *dialect* names no supported dialect.
    """
    result = split_with_diagnostics(sql, dialect)
    if result.balanced:
        return
    region = result.unterminated[0]
    raise UnterminatedRegionError(
        f"unterminated {region.kind.value} starting at offset {region.start}",
        kind=region.kind,
        position=region.start,
        delimiter=region.delimiter,
    )


def bind_dialect(dialect: Dialect | str) -> Callable[[str], list[str]]:
    """Return a one-argument :func:`split` with *dialect* fixed.

    The dialect is resolved immediately, so an unknown name raises here rather than on first use.

    Example:
        >>> split_mysql = bind_dialect("mysql")
        >>> split_mysql("SELECT `a;b`; SELECT 2")
        ['SELECT `a;b`', 'SELECT 2']
    """
    resolved = Dialect.from_name(dialect)

    def split_statements(sql: str) -> list[str]:
        return split(sql, resolved)

    split_statements.__name__ = f"split_{resolved.value}"
    split_statements.__qualname__ = split_statements.__name__
    return split_statements
