"""Per-dialect lexical configuration."""

from __future__ import annotations

import enum
import typing
from types import MappingProxyType

from stmtsplit.errors import UnknownDialectError

if typing.TYPE_CHECKING:
    from collections.abc import Mapping


class Dialect(str, enum.Enum):
    """SQL dialects whose lexical conventions the splitter understands.

    Members compare equal to their string values, so ``Dialect.POSTGRES == "postgres"``.
    """

    POSTGRES = "postgres"
    MYSQL = "mysql"
    MSSQL = "mssql"
    SQLITE = "sqlite"

    @classmethod
    def from_name(cls, name: Dialect | str) -> Dialect:
        """Resolve a dialect member or a (case-insensitive) name or alias.

        Besides the canonical values, common product names are accepted: ``postgresql``, ``pg``, ``mariadb``,
        ``sqlserver``, ``tsql`` and ``sqlite3``.

        Args:
            name: A :class:`Dialect` member or a dialect name.

        Returns:
            The matching :class:`Dialect` member.

        Raises:
            UnknownDialectError: If *name* is not a known dialect or alias.
        """
        if isinstance(name, Dialect):
            return name
        if not isinstance(name, str):
            raise UnknownDialectError(repr(name), (d.value for d in cls))
        key = name.strip().lower()
        try:
            return cls(_ALIASES.get(key, key))
        except ValueError:
            raise UnknownDialectError(name, (d.value for d in cls)) from None


_ALIASES = {
    "postgresql": "postgres",
    "pg": "postgres",
    "mariadb": "mysql",
    "sqlserver": "mssql",
    "tsql": "mssql",
    "sqlite3": "sqlite",
}


class LexicalConfig(typing.NamedTuple):
    """Lexical extensions enabled for a dialect on top of standard SQL quoting and comments.

    Single-quoted strings, double-quoted identifiers, ``--`` line comments and ``/* */`` block comments are always
    recognized; each flag here switches on one extra form.
    """

    dollar_quotes: bool
    """``$$...$$`` and ``$tag$...$tag$`` string constants."""
    nested_block_comments: bool
    """``/* /* */ */`` nests instead of closing at the first ``*/``."""
    backtick_identifiers: bool
    """Backtick-quoted identifiers."""
    backslash_escape: bool
    """A backslash escapes the next character inside single-quoted strings."""
    hash_line_comment: bool
    """``#`` starts a comment running to the end of the line."""
    bracket_identifiers: bool
    """``[name]`` quoted identifiers."""


DIALECT_CONFIGS: Mapping[Dialect, LexicalConfig] = MappingProxyType(
    {
        Dialect.POSTGRES: LexicalConfig(
            dollar_quotes=True,
            nested_block_comments=True,
            backtick_identifiers=False,
            backslash_escape=False,
            hash_line_comment=False,
            bracket_identifiers=False,
        ),
        Dialect.MYSQL: LexicalConfig(
            dollar_quotes=False,
            nested_block_comments=False,
            backtick_identifiers=True,
            backslash_escape=True,
            hash_line_comment=True,
            bracket_identifiers=False,
        ),
        Dialect.MSSQL: LexicalConfig(
            dollar_quotes=False,
            nested_block_comments=False,
            backtick_identifiers=False,
            backslash_escape=False,
            hash_line_comment=False,
            bracket_identifiers=True,
        ),
        Dialect.SQLITE: LexicalConfig(
            dollar_quotes=False,
            nested_block_comments=False,
            backtick_identifiers=True,
            backslash_escape=False,
            hash_line_comment=False,
            bracket_identifiers=True,
        ),
    }
)


def resolve_config(dialect: Dialect | str) -> LexicalConfig:
    """Return the lexical configuration for *dialect*.

    Args:
        dialect: A :class:`Dialect` member or any name accepted by :meth:`Dialect.from_name`.

    Returns:
        The shared, immutable :class:`LexicalConfig` for that dialect.

    Raises:
        UnknownDialectError: If *dialect* names no known dialect or is not a string.

    Example:
        >>> resolve_config("mysql").backslash_escape
        True
    """
    return DIALECT_CONFIGS[Dialect.from_name(dialect)]
