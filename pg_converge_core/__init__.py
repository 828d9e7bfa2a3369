"""
pg-converge-core: generate DDL patches between PostgreSQL schema dumps

This package parses two schema dumps (pg_dump --schema-only output), compares
their tables, columns, indexes, constraints, defaults and owned sequences, and
renders the statements that turn the first schema into the second.
"""

__version__ = "0.1.0"

# Import core library functionality
from pg_converge_core.lib import (
    SchemaSource,
    load_source,
    process,
    compare_sources,
    validate_patch,
    DiffError,
    ParseError,
)

# Import CLI and API interfaces
from pg_converge_core.cli import main
from pg_converge_core.api import app

__all__ = [
    # Core library exports
    "SchemaSource",
    "load_source",
    "process",
    "compare_sources",
    "validate_patch",
    "DiffError",
    "ParseError",

    # Interface exports
    "main",
    "app"
]
