"""
Tests for the HTTP API.
"""

from fastapi.testclient import TestClient

from pg_converge_core import __version__
from pg_converge_core.api import app

client = TestClient(app)


def test_health():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


def test_diff_sql_output():
    response = client.post("/diff", data={
        "source": "CREATE TABLE users (id bigint);",
        "desired": "CREATE TABLE users (id bigint, email text);",
    })

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == (
        '-- Table: "public"."users"\n'
        'ALTER TABLE "public"."users" ADD COLUMN "email" text;\n'
        '\n'
    )


def test_diff_json_output_with_check():
    """An empty source creates every desired table."""
    response = client.post("/diff", data={
        "desired": "CREATE TABLE users (id bigint);",
        "output_format": "json",
        "check": "true",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["statements"] == 1
    assert body["patch"].startswith('-- Table: "public"."users"\nCREATE TABLE "public"."users" (')


def test_diff_parse_errors():
    response = client.post("/diff", data={
        "source": "CREATE TABLE users (id bigint);",
        "desired": "CREATE TABLE users (id bigint);\nDROP TABLE users;",
        "desired_name": "v2.sql",
    })

    assert response.status_code == 400
    assert response.json() == {
        "status": "error",
        "summary": "desired has 1 errors",
        "errors": [
            {"file": "v2.sql", "line": 2, "message": "unknown token: DROP"},
        ],
    }


def test_diff_rejects_unknown_output_format():
    response = client.post("/diff", data={"source": "", "desired": "", "output_format": "xml"})

    assert response.status_code == 400


def test_unknown_endpoint():
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json()["path"] == "/nope"


def test_diff_check_rejects_invalid_patch(monkeypatch):
    monkeypatch.setattr("pg_converge_core.api.diff.process", lambda source, desired: "ALTER TABLE x ADD;")

    response = client.post("/diff", data={"desired": "CREATE TABLE users (id bigint);", "check": "true"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Patch validation failed"
    assert body["cursor_position"] > 0
