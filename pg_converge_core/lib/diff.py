"""
Patch generation: compares two table catalogs and renders the DDL that turns
the source schema into the desired one.

Tables are visited in sorted identifier order and every table emits its
statements in a fixed order, so the same inputs always give the same patch.
"""

from typing import Dict, List, Tuple

from pg_converge_core.lib.ast import Identifier
from pg_converge_core.lib.catalog import (
    AlterColumnSetDefault,
    Column,
    Table,
    TableConstraint,
    Tables,
)

# Type transitions PostgreSQL refuses without an explicit USING cast,
# keyed by target type. Source types match by prefix to cover lengths.
USING_CASTS: Dict[str, Tuple[str, ...]] = {
    "bytea": ("character varying", "character", "text"),
}


def _quote(name: str) -> str:
    return Identifier(name).to_sql()


def _needs_using(source_type: str, desired_type: str) -> bool:
    prefixes = USING_CASTS.get(desired_type)
    if not prefixes:
        return False
    return source_type.startswith(prefixes)


def _annotation(table: Table) -> str:
    return f"-- Table: {table.identifier}\n"


# Columns

def _add_column(table: Table, column: Column) -> str:
    parts = [f"ALTER TABLE {table.identifier} ADD COLUMN {_quote(column.name)} {column.data_type}"]
    if column.default:
        parts.append(f"DEFAULT {column.default}")
    if column.not_null:
        parts.append("NOT NULL")
    return " ".join(parts) + ";\n"


def _drop_column(table: Table, column: Column) -> str:
    return f"ALTER TABLE {table.identifier} DROP COLUMN {_quote(column.name)};\n"


def _alter_column(table: Table, source: Column, desired: Column) -> str:
    prefix = f"ALTER TABLE {table.identifier} ALTER COLUMN {_quote(desired.name)}"
    commands = []

    if source.data_type != desired.data_type:
        if _needs_using(source.data_type, desired.data_type):
            commands.append(f"{prefix} TYPE {desired.data_type} "
                            f"USING {_quote(desired.name)}::{desired.data_type};\n")
        else:
            commands.append(f"{prefix} TYPE {desired.data_type};\n")

    if source.not_null != desired.not_null:
        if desired.not_null:
            commands.append(f"{prefix} SET NOT NULL;\n")
        else:
            commands.append(f"{prefix} DROP NOT NULL;\n")

    if source.default != desired.default:
        if desired.default:
            commands.append(f"{prefix} SET DEFAULT {desired.default};\n")
        else:
            commands.append(f"{prefix} DROP DEFAULT;\n")

    return "".join(commands)


# Sequences, indexes, constraints and defaults

def _add_sequence(table: Table, column: Column) -> str:
    sequence = f"{_quote(table.schema)}.{_quote(column.sequence_name)}"
    return (f"CREATE SEQUENCE {sequence} START WITH 1 INCREMENT BY 1 NO MINVALUE NO MAXVALUE CACHE 1;\n"
            f"ALTER SEQUENCE {sequence} OWNED BY {_quote(table.name)}.{_quote(column.name)};\n")


def _drop_index(table: Table, name: str) -> str:
    return f"DROP INDEX {_quote(table.schema)}.{_quote(name)};\n"


def _add_table_constraint(table: Table, constraint: TableConstraint) -> str:
    columns = ", ".join(_quote(column) for column in constraint.columns)
    return (f"ALTER TABLE ONLY {table.identifier} ADD CONSTRAINT {_quote(constraint.name)} "
            f"{constraint.kind.value} ({columns});\n")


def _drop_table_constraint(table: Table, constraint: TableConstraint) -> str:
    return f"ALTER TABLE ONLY {table.identifier} DROP CONSTRAINT {_quote(constraint.name)};\n"


def _add_column_default(table: Table, default: AlterColumnSetDefault) -> str:
    return (f"ALTER TABLE ONLY {table.identifier} ALTER COLUMN {_quote(default.column)} "
            f"SET DEFAULT {default.default};\n")


def _drop_column_default(table: Table, default: AlterColumnSetDefault) -> str:
    return f"ALTER TABLE ONLY {table.identifier} ALTER COLUMN {_quote(default.column)} DROP DEFAULT;\n"


# Tables

def create_table(table: Table) -> str:
    """Render a table that exists only on the desired side, with its dependents."""
    commands = [table.statement.to_sql() + "\n"]
    for column in table.columns.values():
        if column.sequence_name:
            commands.append(_add_sequence(table, column))
    for index in table.indexes.values():
        commands.append(index.statement.to_sql() + "\n")
    for constraint in table.table_constraints.values():
        commands.append(_add_table_constraint(table, constraint))
    for default in table.alter_column_set_defaults.values():
        commands.append(_add_column_default(table, default))
    return "".join(commands)


def drop_table(table: Table) -> str:
    return f"DROP TABLE {table.identifier};\n"


def diff_table(source: Table, desired: Table) -> str:
    """
    Generate the statements that turn one table into the other.

    Order is fixed: column drops, column alterations, column adds, then
    indexes, table constraints and explicit column defaults, each dropping
    before adding. Indexes, constraints and defaults are compared by name
    only.

    Args:
        source: Table from the source catalog
        desired: Table with the same identifier from the desired catalog

    Returns:
        The statements, or an empty string when the tables match
    """
    commands: List[str] = []

    for name, column in source.columns.items():
        if name not in desired.columns:
            commands.append(_drop_column(source, column))
    for name, column in source.columns.items():
        if name in desired.columns:
            commands.append(_alter_column(source, column, desired.columns[name]))
    for name, column in desired.columns.items():
        if name not in source.columns:
            commands.append(_add_column(source, column))

    for name in source.indexes:
        if name not in desired.indexes:
            commands.append(_drop_index(source, name))
    for name, index in desired.indexes.items():
        if name not in source.indexes:
            commands.append(index.statement.to_sql() + "\n")

    for name, constraint in source.table_constraints.items():
        if name not in desired.table_constraints:
            commands.append(_drop_table_constraint(source, constraint))
    for name, constraint in desired.table_constraints.items():
        if name not in source.table_constraints:
            commands.append(_add_table_constraint(source, constraint))

    for column, default in source.alter_column_set_defaults.items():
        if column not in desired.alter_column_set_defaults:
            commands.append(_drop_column_default(source, default))
    for column, default in desired.alter_column_set_defaults.items():
        if column not in source.alter_column_set_defaults:
            commands.append(_add_column_default(source, default))

    return "".join(commands)


def generate_patch(source: Tables, desired: Tables) -> str:
    """
    Render the patch between two catalogs.

    Source tables are visited first: shared tables are diffed and dropped
    tables removed. Desired-only tables are created afterwards. Every block
    starts with a ``-- Table:`` line and ends with a blank line; shared
    tables without differences produce nothing.

    Args:
        source: Catalog of the current schema
        desired: Catalog of the target schema

    Returns:
        Patch text, empty when both schemas match
    """
    blocks: List[str] = []

    for identifier in sorted(source):
        table = source[identifier]
        if identifier in desired:
            commands = diff_table(table, desired[identifier])
            if commands:
                blocks.append(_annotation(table) + commands + "\n")
        else:
            blocks.append(_annotation(table) + drop_table(table) + "\n")

    for identifier in sorted(desired):
        if identifier in source:
            continue
        table = desired[identifier]
        blocks.append(_annotation(table) + create_table(table) + "\n")

    return "".join(blocks)
