"""Dialect-aware splitting of SQL scripts into individual statements."""

import logging

from stmtsplit.batch import Query, to_queries
from stmtsplit.dialects import DIALECT_CONFIGS, Dialect, LexicalConfig, resolve_config
from stmtsplit.errors import StatementSplitError, UnknownDialectError, UnterminatedRegionError
from stmtsplit.split import (
    RegionKind,
    SplitResult,
    UnterminatedRegion,
    bind_dialect,
    check_balanced,
    iter_statements,
    split,
    split_with_diagnostics,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "bind_dialect",
    "check_balanced",
    "Dialect",
    "DIALECT_CONFIGS",
    "iter_statements",
    "LexicalConfig",
    "Query",
    "RegionKind",
    "resolve_config",
    "split_with_diagnostics",
    "split",
    "SplitResult",
    "StatementSplitError",
    "to_queries",
    "UnknownDialectError",
    "UnterminatedRegion",
    "UnterminatedRegionError",
]
