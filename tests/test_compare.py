"""
Tests for loading sources and the process entry point.
"""

import io

import pytest
from pg_converge_core.lib.compare import SchemaSource, compare_sources, load_source, process
from pg_converge_core.lib.errors import DiffError


def test_load_source_from_file(tmp_path):
    path = tmp_path / "schema.sql"
    path.write_text("CREATE TABLE users (id bigint);", encoding="utf-8")

    source = load_source(str(path))

    assert source.name == str(path)
    assert source.data == b"CREATE TABLE users (id bigint);"


def test_load_source_from_directory(tmp_path):
    """All .sql files are concatenated in name order."""
    (tmp_path / "02_posts.sql").write_text("CREATE TABLE posts (id bigint);", encoding="utf-8")
    (tmp_path / "01_users.sql").write_text("CREATE TABLE users (id bigint);", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not sql", encoding="utf-8")

    source = load_source(str(tmp_path))

    assert source.data == b"CREATE TABLE users (id bigint);\nCREATE TABLE posts (id bigint);"


def test_load_source_raw_sql():
    source = load_source("CREATE TABLE users (id bigint);")

    assert source.name == "<string>"
    assert source.data == b"CREATE TABLE users (id bigint);"


def test_load_source_from_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"CREATE TABLE t (id bigint);")))

    source = load_source("-")

    assert source.name == "<stdin>"
    assert source.data == b"CREATE TABLE t (id bigint);"


def test_compare_sources_files(tmp_path):
    v1 = tmp_path / "v1.sql"
    v2 = tmp_path / "v2.sql"
    v1.write_text("CREATE TABLE users (id bigint, name text);", encoding="utf-8")
    v2.write_text("CREATE TABLE users (id bigint, name text NOT NULL, email text);", encoding="utf-8")

    patch = compare_sources(str(v1), str(v2))

    assert patch == (
        '-- Table: "public"."users"\n'
        'ALTER TABLE "public"."users" ALTER COLUMN "name" SET NOT NULL;\n'
        'ALTER TABLE "public"."users" ADD COLUMN "email" text;\n'
        '\n'
    )


def test_process_raises_diff_error_with_both_sides():
    source = SchemaSource.from_text("CREATE TABLE a (id bigint", "a.sql")
    desired = SchemaSource.from_text("CREATE TABLE b (id nope);\nDROP TABLE b;", "b.sql")

    with pytest.raises(DiffError) as excinfo:
        process(source, desired)

    error = excinfo.value
    assert len(error.source_errors) == 1
    assert len(error.desired_errors) == 2
    assert str(error) == "source has 1 errors; desired has 2 errors"

    detail = error.detail().splitlines()
    assert detail[0] == "a.sql has 1 errors"
    assert detail[1].startswith("  a.sql:1: ")
    assert detail[2] == "b.sql has 2 errors"
    assert detail[3].startswith("  b.sql:1: ")
    assert detail[4] == "  b.sql:2: unknown token: DROP"


def test_diff_error_summary_names_only_failing_side():
    with pytest.raises(DiffError) as excinfo:
        process(SchemaSource.from_text(""), SchemaSource.from_text("'a", "desired.sql"))

    assert str(excinfo.value) == "desired has 1 errors"
    assert excinfo.value.source_errors == []


def test_invalid_utf8_is_a_parse_error():
    source = SchemaSource(b"CREATE TABLE a (id bigint);\n\xff\xfe", "bad.sql")

    with pytest.raises(DiffError) as excinfo:
        process(source, SchemaSource(b""))

    [error] = excinfo.value.source_errors
    assert error.input_name == "bad.sql"
    assert error.line == 2
    assert "invalid UTF-8" in error.message


def test_empty_inputs_give_empty_patch():
    assert process(SchemaSource(b""), SchemaSource(b"")) == ""
