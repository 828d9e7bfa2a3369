"""
Tests for the catalog builder and patch generation.
"""

import logging

import pytest
from pg_converge_core.lib.catalog import process_ddl
from pg_converge_core.lib.compare import SchemaSource, process
from pg_converge_core.lib.diff import diff_table, generate_patch
from pg_converge_core.lib.parser import parse_ddl


def diff(source_sql, desired_sql):
    return process(SchemaSource.from_text(source_sql, "source"), SchemaSource.from_text(desired_sql, "desired"))


def catalog(sql):
    ddl, errors = parse_ddl(sql)
    assert errors == []
    return process_ddl(ddl)


@pytest.mark.parametrize("source,desired,expected", [
    pytest.param(
        "",
        'CREATE TABLE "x" ( id bigint );',
        '-- Table: "public"."x"\n'
        'CREATE TABLE "public"."x" (\n'
        '    "id" bigint\n'
        ');\n\n',
        id="create table with default schema",
    ),
    pytest.param(
        "",
        'CREATE TABLE "myschema"."x" ( id bigint );',
        '-- Table: "myschema"."x"\n'
        'CREATE TABLE "myschema"."x" (\n'
        '    "id" bigint\n'
        ');\n\n',
        id="create table with explicit schema",
    ),
    pytest.param(
        "",
        'SET search_path = "myschema", pg_catalog;\nCREATE TABLE "x" ( id bigint );',
        '-- Table: "myschema"."x"\n'
        'CREATE TABLE "myschema"."x" (\n'
        '    "id" bigint\n'
        ');\n\n',
        id="set search_path and create table",
    ),
    pytest.param(
        "",
        "CREATE TABLE users (id bigint);\n"
        "ALTER TABLE ONLY public.users ADD CONSTRAINT users_pkey PRIMARY KEY (id);",
        '-- Table: "public"."users"\n'
        'CREATE TABLE "public"."users" (\n'
        '    "id" bigint\n'
        ');\n'
        'ALTER TABLE ONLY "public"."users" ADD CONSTRAINT "users_pkey" PRIMARY KEY ("id");\n\n',
        id="create table with primary key",
    ),
    pytest.param(
        "",
        "CREATE TABLE users (id bigint);\n"
        "ALTER TABLE ONLY public.users ALTER COLUMN id SET DEFAULT nextval('public.users_id_seq'::regclass);",
        '-- Table: "public"."users"\n'
        'CREATE TABLE "public"."users" (\n'
        '    "id" bigint\n'
        ');\n'
        'ALTER TABLE ONLY "public"."users" ALTER COLUMN "id" SET DEFAULT "nextval"(\'public.users_id_seq\'::"regclass");\n\n',
        id="create table with set default",
    ),
    pytest.param(
        'CREATE TABLE "x" ( id bigint );',
        "",
        '-- Table: "public"."x"\n'
        'DROP TABLE "public"."x";\n\n',
        id="drop table",
    ),
    pytest.param(
        'CREATE TABLE "x" ( id bigint );',
        'CREATE TABLE "x" ( id bigint, n text );',
        '-- Table: "public"."x"\n'
        'ALTER TABLE "public"."x" ADD COLUMN "n" text;\n\n',
        id="add column",
    ),
    pytest.param(
        'CREATE TABLE "users" ( id bigint );',
        'CREATE TABLE "users" ( id bigint, n bigint DEFAULT 1 NOT NULL);',
        '-- Table: "public"."users"\n'
        'ALTER TABLE "public"."users" ADD COLUMN "n" bigint DEFAULT 1 NOT NULL;\n\n',
        id="add column with not null and default",
    ),
    pytest.param(
        'CREATE TABLE "x" ( id bigint, n text );',
        'CREATE TABLE "x" ( id bigint );',
        '-- Table: "public"."x"\n'
        'ALTER TABLE "public"."x" DROP COLUMN "n";\n\n',
        id="drop column",
    ),
    pytest.param(
        'CREATE TABLE "x" ( id bigint, n bigint );',
        'CREATE TABLE "x" ( id bigint, n text );',
        '-- Table: "public"."x"\n'
        'ALTER TABLE "public"."x" ALTER COLUMN "n" TYPE text;\n\n',
        id="alter column type",
    ),
    pytest.param(
        'CREATE TABLE "x" ( id bigint, n character varying(40) );',
        'CREATE TABLE "x" ( id bigint, n bytea );',
        '-- Table: "public"."x"\n'
        'ALTER TABLE "public"."x" ALTER COLUMN "n" TYPE bytea USING "n"::bytea;\n\n',
        id="alter column from varchar to bytea",
    ),
    pytest.param(
        'CREATE TABLE "x" ( id bigint, n bigint );',
        'CREATE TABLE "x" ( id bigint, n bigint NOT NULL);',
        '-- Table: "public"."x"\n'
        'ALTER TABLE "public"."x" ALTER COLUMN "n" SET NOT NULL;\n\n',
        id="alter column set not null",
    ),
    pytest.param(
        'CREATE TABLE "x" ( id bigint, n bigint NOT NULL);',
        'CREATE TABLE "x" ( id bigint, n bigint);',
        '-- Table: "public"."x"\n'
        'ALTER TABLE "public"."x" ALTER COLUMN "n" DROP NOT NULL;\n\n',
        id="alter column drop not null",
    ),
    pytest.param(
        'CREATE TABLE "x" ( id bigint, n bigint);',
        'CREATE TABLE "x" ( id bigint, n bigint DEFAULT 42);',
        '-- Table: "public"."x"\n'
        'ALTER TABLE "public"."x" ALTER COLUMN "n" SET DEFAULT 42;\n\n',
        id="alter column set default",
    ),
    pytest.param(
        'CREATE TABLE "x" ( id bigint, n bigint DEFAULT 42);',
        'CREATE TABLE "x" ( id bigint, n bigint);',
        '-- Table: "public"."x"\n'
        'ALTER TABLE "public"."x" ALTER COLUMN "n" DROP DEFAULT;\n\n',
        id="alter column drop default",
    ),
    pytest.param(
        'CREATE TABLE "x" ( id bigint, n integer);',
        'CREATE TABLE "x" ( id bigint, n bigint DEFAULT 42);',
        '-- Table: "public"."x"\n'
        'ALTER TABLE "public"."x" ALTER COLUMN "n" TYPE bigint;\n'
        'ALTER TABLE "public"."x" ALTER COLUMN "n" SET DEFAULT 42;\n\n',
        id="alter column type then default",
    ),
    pytest.param(
        'CREATE TABLE "x" ( id bigint, n integer default 42);',
        'CREATE TABLE "x" ( id bigint, n integer not null);',
        '-- Table: "public"."x"\n'
        'ALTER TABLE "public"."x" ALTER COLUMN "n" SET NOT NULL;\n'
        'ALTER TABLE "public"."x" ALTER COLUMN "n" DROP DEFAULT;\n\n',
        id="alter column not null then drop default",
    ),
    pytest.param(
        "CREATE TABLE users (name text);",
        "CREATE TABLE users (name text);\nCREATE INDEX idx ON users USING btree (name);",
        '-- Table: "public"."users"\n'
        'CREATE INDEX "idx" ON "public"."users" USING "btree" ("name");\n\n',
        id="create index",
    ),
    pytest.param(
        "CREATE TABLE users (name text);\nCREATE INDEX idx ON users USING btree (name);",
        "CREATE TABLE users (name text);",
        '-- Table: "public"."users"\n'
        'DROP INDEX "public"."idx";\n\n',
        id="drop index",
    ),
    pytest.param(
        "CREATE TABLE users (id bigint);",
        "CREATE TABLE users (id bigint);\nALTER TABLE users ADD CONSTRAINT users_pkey UNIQUE (id);",
        '-- Table: "public"."users"\n'
        'ALTER TABLE ONLY "public"."users" ADD CONSTRAINT "users_pkey" UNIQUE ("id");\n\n',
        id="add constraint unique",
    ),
    pytest.param(
        "CREATE TABLE u (id bigint, o bigint);",
        "CREATE TABLE u (id bigint, o bigint);\n"
        "ALTER TABLE ONLY u ADD CONSTRAINT u_key UNIQUE (id), "
        "ADD CONSTRAINT u_fk FOREIGN KEY (o) REFERENCES u(id);",
        '-- Table: "public"."u"\n'
        'ALTER TABLE ONLY "public"."u" ADD CONSTRAINT "u_key" UNIQUE ("id");\n\n',
        id="add constraint next to foreign key",
    ),
    pytest.param(
        'CREATE TABLE "x" ( n integer );',
        'CREATE TABLE "x" ( n integer default 1 - -1 );',
        '-- Table: "public"."x"\n'
        'ALTER TABLE "public"."x" ALTER COLUMN "n" SET DEFAULT 1- -1;\n\n',
        id="set default with negative operand",
    ),
    pytest.param(
        "CREATE TABLE users (id bigint);\nALTER TABLE users ADD CONSTRAINT users_pkey UNIQUE (id);",
        "CREATE TABLE users (id bigint);",
        '-- Table: "public"."users"\n'
        'ALTER TABLE ONLY "public"."users" DROP CONSTRAINT "users_pkey";\n\n',
        id="drop constraint unique",
    ),
    pytest.param(
        "CREATE TABLE users (id bigint);\nALTER TABLE users ALTER COLUMN id SET DEFAULT 1;",
        "CREATE TABLE users (id bigint);\nALTER TABLE users ALTER COLUMN id SET DEFAULT 2;",
        "",
        id="explicit defaults compared by column only",
    ),
])
def test_process(source, desired, expected):
    assert diff(source, desired) == expected


def test_create_table_with_owned_sequence():
    """Sequences owned by a new table are created after it."""
    desired = """
    CREATE TABLE users (id bigint NOT NULL, name text);
    CREATE SEQUENCE users_id_seq START WITH 1 INCREMENT BY 1 NO MINVALUE NO MAXVALUE CACHE 1;
    ALTER SEQUENCE users_id_seq OWNED BY users.id;
    ALTER TABLE ONLY users ALTER COLUMN id SET DEFAULT nextval('users_id_seq'::regclass);
    CREATE INDEX users_name_idx ON users USING btree (name);
    ALTER TABLE ONLY users ADD CONSTRAINT users_pkey PRIMARY KEY (id);
    """

    assert diff("", desired) == (
        '-- Table: "public"."users"\n'
        'CREATE TABLE "public"."users" (\n'
        '    "id" bigint NOT NULL,\n'
        '    "name" text\n'
        ');\n'
        'CREATE SEQUENCE "public"."users_id_seq" START WITH 1 INCREMENT BY 1 NO MINVALUE NO MAXVALUE CACHE 1;\n'
        'ALTER SEQUENCE "public"."users_id_seq" OWNED BY "users"."id";\n'
        'CREATE INDEX "users_name_idx" ON "public"."users" USING "btree" ("name");\n'
        'ALTER TABLE ONLY "public"."users" ADD CONSTRAINT "users_pkey" PRIMARY KEY ("id");\n'
        'ALTER TABLE ONLY "public"."users" ALTER COLUMN "id" SET DEFAULT "nextval"(\'users_id_seq\'::"regclass");\n'
        '\n'
    )


def test_identical_schemas_produce_empty_patch():
    """process(X, X) is empty."""
    sql = """
    SET search_path = app;
    CREATE TABLE users (id bigint NOT NULL, email character varying(255) DEFAULT ''::character varying);
    CREATE INDEX users_email_idx ON users USING btree (lower(email));
    ALTER TABLE ONLY users ADD CONSTRAINT users_pkey PRIMARY KEY (id);
    """

    assert diff(sql, sql) == ""


def test_patch_is_deterministic():
    """Tables come out sorted by identifier, whatever the input order."""
    source = "CREATE TABLE b (id bigint); CREATE TABLE a (id bigint);"
    desired = "CREATE TABLE d (id bigint); CREATE TABLE c (id bigint);"

    first = diff(source, desired)

    assert first == diff(source, desired)
    annotations = [line for line in first.splitlines() if line.startswith("-- Table:")]
    assert annotations == [
        '-- Table: "public"."a"',
        '-- Table: "public"."b"',
        '-- Table: "public"."c"',
        '-- Table: "public"."d"',
    ]


def test_column_drops_come_before_alters_and_adds():
    source = 'CREATE TABLE "x" (a bigint, b bigint, c bigint);'
    desired = 'CREATE TABLE "x" (b text, c bigint, d bigint);'

    assert diff(source, desired) == (
        '-- Table: "public"."x"\n'
        'ALTER TABLE "public"."x" DROP COLUMN "a";\n'
        'ALTER TABLE "public"."x" ALTER COLUMN "b" TYPE text;\n'
        'ALTER TABLE "public"."x" ADD COLUMN "d" bigint;\n'
        '\n'
    )


def test_search_path_applies_to_following_statements_only():
    tables = catalog("""
    CREATE TABLE a (id bigint);
    SET search_path = app;
    CREATE TABLE b (id bigint);
    CREATE INDEX b_idx ON b USING btree (id);
    """)

    assert list(tables) == ['"public"."a"', '"app"."b"']
    assert list(tables['"app"."b"'].indexes) == ["b_idx"]


def test_non_identifier_search_path_is_ignored():
    tables = catalog("SET search_path = '';\nCREATE TABLE a (id bigint);")

    assert list(tables) == ['"public"."a"']


def test_catalog_columns():
    tables = catalog("""
    CREATE TABLE users (id bigint NOT NULL, name text DEFAULT 'anon'::text);
    ALTER SEQUENCE users_id_seq OWNED BY public.users.id;
    """)

    columns = tables['"public"."users"'].columns
    assert columns["id"].not_null
    assert columns["id"].sequence_name == "users_id_seq"
    assert columns["name"].data_type == "text"
    assert columns["name"].default == "'anon'::text"
    assert columns["name"].sequence_name == ""


def test_unknown_references_are_logged_and_skipped(caplog):
    with caplog.at_level(logging.WARNING):
        tables = catalog("""
        CREATE TABLE users (id bigint);
        CREATE INDEX idx ON missing USING btree (id);
        ALTER SEQUENCE s OWNED BY users.missing;
        ALTER SEQUENCE s2 OWNED BY missing.id;
        ALTER TABLE missing ADD CONSTRAINT c UNIQUE (id);
        """)

    assert tables['"public"."users"'].indexes == {}
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 4


def test_diff_table_without_changes_is_empty():
    tables = catalog("CREATE TABLE users (id bigint);")
    table = tables['"public"."users"']

    assert diff_table(table, table) == ""
    assert generate_patch(tables, tables) == ""
