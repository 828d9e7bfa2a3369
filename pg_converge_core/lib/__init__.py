"""
Core library: DDL lexer and parser, schema catalog and patch generation.
"""

from pg_converge_core.lib.ast import DataDefinition
from pg_converge_core.lib.catalog import Table, Column, process_ddl
from pg_converge_core.lib.compare import SchemaSource, load_source, process, compare_sources
from pg_converge_core.lib.diff import generate_patch, diff_table
from pg_converge_core.lib.errors import ParseError, DiffError, PatchValidationError
from pg_converge_core.lib.lexer import Lexer
from pg_converge_core.lib.parser import Parser, parse_ddl
from pg_converge_core.lib.token import Token, TokenType
from pg_converge_core.lib.validate import validate_patch

__all__ = [
    # Lexing and parsing
    "Lexer",
    "Token",
    "TokenType",
    "Parser",
    "parse_ddl",
    "DataDefinition",

    # Catalog and diff
    "Table",
    "Column",
    "process_ddl",
    "generate_patch",
    "diff_table",

    # Entry points
    "SchemaSource",
    "load_source",
    "process",
    "compare_sources",
    "validate_patch",

    # Errors
    "ParseError",
    "DiffError",
    "PatchValidationError",
]
