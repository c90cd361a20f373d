from stmtsplit import Dialect, Query, split, to_queries

_DDL = """CREATE TABLE "public"."users" (
  "id" serial PRIMARY KEY,
  "name" text NOT NULL
);

COMMENT ON TABLE "public"."users" IS 'Application users; one row per login';

CREATE INDEX "idx_users_name" ON "public"."users" ("name");
"""


class TestToQueries:
    def test_pairs_with_empty_params(self):
        assert to_queries("SELECT 1; SELECT 2", Dialect.POSTGRES) == [Query("SELECT 1", ()), Query("SELECT 2", ())]

    def test_query_defaults(self):
        assert Query("SELECT 1").params == ()

    def test_ddl_script(self):
        queries = to_queries(_DDL, Dialect.POSTGRES)
        assert [q.sql for q in queries] == split(_DDL, Dialect.POSTGRES)
        assert len(queries) == 3
        assert queries[1].sql == "COMMENT ON TABLE \"public\".\"users\" IS 'Application users; one row per login'"
        assert all(q.params == () for q in queries)

    def test_terminate_appends_separator(self):
        queries = to_queries(_DDL, "postgresql", terminate=True)
        assert all(q.sql.endswith(";") for q in queries)
        assert queries[2].sql == 'CREATE INDEX "idx_users_name" ON "public"."users" ("name");'

    def test_empty_script(self, dialect: Dialect):
        assert to_queries(" ;\n; ", dialect) == []

    def test_unpacks_as_pair(self):
        ((sql, params),) = to_queries("DELETE FROM t", Dialect.SQLITE)
        assert sql == "DELETE FROM t"
        assert params == ()
