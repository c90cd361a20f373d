"""Migration Splitting Recipebook: interactive examples for breaking SQL scripts into statements with stmtsplit."""

from __future__ import annotations

from typing import TYPE_CHECKING

import marimo

if TYPE_CHECKING:
    import types
    from collections.abc import Callable

    from stmtsplit import Dialect, Query, SplitResult

__generated_with = "0.19.11"
app = marimo.App()


@app.cell
def _(mo: types.ModuleType):
    mo.md("""
    # Migration Splitting Recipebook

    Interactive recipes demonstrating how to split multi-statement SQL
    scripts for PostgreSQL, MySQL, SQL Server and SQLite using **stmtsplit**.

    Each recipe is self-contained: it defines a SQL input, runs processing
    code, and displays the results.

    **How to use this notebook:**

    - `marimo run recipes/migration_splitting.py`: read-only app mode
    - `marimo edit recipes/migration_splitting.py`: interactive editing mode
    """)
    return


@app.cell
def _():
    import marimo as mo

    from stmtsplit import Dialect, bind_dialect, split, split_with_diagnostics, to_queries

    return Dialect, bind_dialect, mo, split, split_with_diagnostics, to_queries


@app.cell
def _(
    Dialect: type[Dialect],
    mo: types.ModuleType,
    split: Callable[[str, Dialect | str], list[str]],
):
    # --- Recipe: Split a PostgreSQL migration with function bodies ---
    _migration = """
    CREATE TABLE audit_log (id bigserial PRIMARY KEY, payload jsonb NOT NULL);

    CREATE FUNCTION audit() RETURNS trigger AS $body$
    BEGIN
        INSERT INTO audit_log (payload) VALUES (to_jsonb(NEW));
        RETURN NEW;
    END;
    $body$ LANGUAGE plpgsql;

    /* Attach the trigger; /* nested */ comments are fine in PostgreSQL */
    CREATE TRIGGER t_audit AFTER INSERT ON orders FOR EACH ROW EXECUTE FUNCTION audit();
    """

    _statements = split(_migration, Dialect.POSTGRES)

    _rows: list[str] = []
    for _i, _stmt_sql in enumerate(_statements):
        _last_line = _stmt_sql.splitlines()[-1].strip()
        _preview = _last_line[:60] + ("..." if len(_last_line) > 60 else "")
        _rows.append(f"| {_i + 1} | {_stmt_sql.count(';')} | `{_preview}` |")

    _table_rows = "\n".join(_rows)
    mo.md(
        f"""
        ## Recipe 1: Split a PostgreSQL Migration

        `split` breaks the script at top-level semicolons only.  The
        semicolons inside the `$body$` function body and inside the nested
        block comment stay part of their statement.

        **{len(_statements)} statements found:**

        | # | Inner `;` | Last line |
        |---|-----------|-----------|
        {_table_rows}
        """
    )
    return


@app.cell
def _(
    Dialect: type[Dialect],
    bind_dialect: Callable[[Dialect | str], Callable[[str], list[str]]],
    mo: types.ModuleType,
):
    # --- Recipe: Same script, four dialects ---
    _script = "SELECT `a;b`, [c;d] FROM t # note; here\n; SELECT 'it\\'s; ok'; SELECT 2"

    _rows: list[str] = []
    for _dialect in Dialect:
        _statements = bind_dialect(_dialect)(_script)
        _rendered = " / ".join(f"`{s}`" for s in _statements).replace("\n", " ")
        _rows.append(f"| `{_dialect.value}` | {len(_statements)} | {_rendered} |")

    _table_rows = "\n".join(_rows)
    mo.md(
        f"""
        ## Recipe 2: One Script, Four Dialects

        Backticks, brackets, `#` comments and backslash escapes only protect
        semicolons in the dialects that actually use them.  `bind_dialect`
        returns a splitter with the dialect fixed.

        | Dialect | Statements | Result |
        |---------|------------|--------|
        {_table_rows}
        """
    )
    return


@app.cell
def _(
    Dialect: type[Dialect],
    mo: types.ModuleType,
    split_with_diagnostics: Callable[[str, Dialect | str], SplitResult],
):
    # --- Recipe: Warn about half-typed editor content ---
    _buffers = {
        "complete": "UPDATE accounts SET note = 'paid; thanks' WHERE id = 1; SELECT 1;",
        "open string": "UPDATE accounts SET note = 'paid; thanks WHERE id = 1; SELECT 1;",
        "open comment": "SELECT 1; /* fix later; SELECT 2;",
        "open dollar quote": "DO $fn$ BEGIN PERFORM 1; END; SELECT 2;",
    }

    _rows: list[str] = []
    for _label, _buffer in _buffers.items():
        _result = split_with_diagnostics(_buffer, Dialect.POSTGRES)
        if _result.balanced:
            _status = "ok"
        else:
            _region = _result.unterminated[0]
            _status = f"{_region.kind.value} opened with `{_region.delimiter}` at offset {_region.start}"
        _rows.append(f"| {_label} | {len(_result.statements)} | {_status} |")

    _table_rows = "\n".join(_rows)
    mo.md(
        f"""
        ## Recipe 3: Warn About Half-Typed Editor Content

        `split` never fails, so an unterminated quote silently swallows the
        statements after it.  `split_with_diagnostics` returns the same
        statements plus the region that was left open, so an editor can
        warn before running the buffer.

        | Buffer | Statements | Diagnostic |
        |--------|------------|------------|
        {_table_rows}
        """
    )
    return


@app.cell
def _(
    Dialect: type[Dialect],
    mo: types.ModuleType,
    to_queries: Callable[..., list[Query]],
):
    # --- Recipe: Build a transaction batch from generated DDL ---
    _ddl = """CREATE TABLE [dbo].[customers] (
      [id] int IDENTITY PRIMARY KEY,
      [display;name] nvarchar(200) NOT NULL
    );

    CREATE INDEX [ix_customers_name] ON [dbo].[customers] ([display;name]);
    """

    _queries = to_queries(_ddl, Dialect.MSSQL, terminate=True)

    _rows = "\n".join(
        f"| {_i + 1} | `{' '.join(_q.sql.split())[:70]}` | `{_q.params}` |" for _i, _q in enumerate(_queries)
    )
    mo.md(
        f"""
        ## Recipe 4: Transaction Batch From Generated DDL

        `to_queries` pairs each statement with an empty parameter tuple,
        ready for a runner that executes `(sql, params)` pairs in one
        transaction.  Bracketed identifiers containing `;` survive intact.

        | # | SQL | Params |
        |---|-----|--------|
        {_rows}
        """
    )
    return


if __name__ == "__main__":
    app.run()
