"""
Entry point of the library: load two schema dumps and compute the patch.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Tuple

from pg_converge_core.lib.ast import DataDefinition
from pg_converge_core.lib.catalog import process_ddl
from pg_converge_core.lib.diff import generate_patch
from pg_converge_core.lib.errors import DiffError, ParseError
from pg_converge_core.lib.parser import parse_ddl


@dataclass
class SchemaSource:
    """Raw bytes of one schema dump and the name used when reporting errors."""
    data: bytes
    name: str = "<string>"

    @classmethod
    def from_text(cls, text: str, name: str = "<string>") -> "SchemaSource":
        return cls(text.encode("utf-8"), name)


def load_source(source: str) -> SchemaSource:
    """Load a schema dump from a file, a directory of .sql files, stdin ('-') or raw SQL."""
    if source == "-":
        return SchemaSource(sys.stdin.buffer.read(), "<stdin>")

    if os.path.isfile(source):
        with open(source, "rb") as f:
            return SchemaSource(f.read(), source)

    if os.path.isdir(source):
        # Files are concatenated in name order, like a single dump
        chunks = []
        for filename in sorted(os.listdir(source)):
            if not filename.endswith(".sql"):
                continue
            with open(os.path.join(source, filename), "rb") as f:
                chunks.append(f.read())
        logging.info(f"loaded {len(chunks)} SQL files from {source}")
        return SchemaSource(b"\n".join(chunks), source)

    # Assume raw SQL string
    return SchemaSource.from_text(source)


def _parse_side(source: SchemaSource) -> Tuple[DataDefinition, List[ParseError]]:
    try:
        text = source.data.decode("utf-8")
    except UnicodeDecodeError as e:
        line = source.data[:e.start].count(b"\n") + 1
        return DataDefinition(), [ParseError(source.name, line, f"invalid UTF-8 at byte offset {e.start}")]
    return parse_ddl(text, source.name)


def process(source: SchemaSource, desired: SchemaSource) -> str:
    """
    Compute the patch that turns the source schema into the desired one.

    Both sides are parsed before anything is diffed. If either side has
    syntax errors no patch is computed.

    Args:
        source: The current schema
        desired: The target schema

    Returns:
        Patch text; empty when both schemas match

    Raises:
        DiffError: When either side failed to parse
    """
    source_ddl, source_errors = _parse_side(source)
    desired_ddl, desired_errors = _parse_side(desired)
    if source_errors or desired_errors:
        raise DiffError(source.name, source_errors, desired.name, desired_errors)

    source_tables = process_ddl(source_ddl)
    desired_tables = process_ddl(desired_ddl)
    logging.debug(f"source has {len(source_tables)} tables, desired has {len(desired_tables)} tables")
    return generate_patch(source_tables, desired_tables)


def compare_sources(source_a: str, source_b: str) -> str:
    """Load two sources with ``load_source`` and return the patch from the first to the second."""
    return process(load_source(source_a), load_source(source_b))
