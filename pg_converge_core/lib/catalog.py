"""
Per-side schema catalog built from a parsed DataDefinition.

The catalog maps fully-qualified table identifiers (`"schema"."table"`) to
``Table`` entries that carry everything the diff engine compares: columns,
indexes, UNIQUE / PRIMARY KEY constraints and explicit column defaults.
All mappings keep document order.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pg_converge_core.lib.ast import (
    AlterColumnSetDefault as AlterColumnSetDefaultAction,
    AlterSequenceStatement,
    AlterTableStatement,
    ColumnDefinition,
    ConstraintKind,
    CreateIndexStatement,
    CreateSchemaStatement,
    CreateSequenceStatement,
    CreateTableStatement,
    DataDefinition,
    DefaultConstraint,
    Identifier,
    NotNullConstraint,
    SetStatement,
    TableConstraint as TableConstraintAction,
    TableName,
)

DEFAULT_SCHEMA = "public"


@dataclass
class Column:
    """A column as compared by the diff engine. Empty strings mean "none"."""
    name: str
    data_type: str
    not_null: bool = False
    default: str = ""
    sequence_name: str = ""

    @classmethod
    def from_definition(cls, definition: ColumnDefinition) -> "Column":
        column = cls(name=definition.name.value, data_type=definition.data_type.to_sql())
        for constraint in definition.constraints:
            if isinstance(constraint, NotNullConstraint):
                column.not_null = True
            elif isinstance(constraint, DefaultConstraint):
                column.default = constraint.expression.to_sql()
        return column


@dataclass
class Index:
    """An index; compared by name only."""
    name: str
    statement: CreateIndexStatement


@dataclass
class TableConstraint:
    name: str
    kind: ConstraintKind
    columns: List[str] = field(default_factory=list)


@dataclass
class AlterColumnSetDefault:
    column: str
    default: str


@dataclass
class Table:
    identifier: str
    statement: CreateTableStatement
    columns: Dict[str, Column] = field(default_factory=dict)
    indexes: Dict[str, Index] = field(default_factory=dict)
    table_constraints: Dict[str, TableConstraint] = field(default_factory=dict)
    alter_column_set_defaults: Dict[str, AlterColumnSetDefault] = field(default_factory=dict)

    @property
    def schema(self) -> str:
        return self.statement.table_name.schema.value

    @property
    def name(self) -> str:
        return self.statement.table_name.table.value


Tables = Dict[str, Table]


def _qualified(table_name: TableName, search_path: str) -> str:
    table_name.set_schema(search_path)
    return table_name.to_sql()


def _add_table(tables: Tables, search_path: str, statement: CreateTableStatement) -> None:
    identifier = _qualified(statement.table_name, search_path)
    columns = {}
    for definition in statement.columns:
        column = Column.from_definition(definition)
        columns[column.name] = column
    tables[identifier] = Table(identifier=identifier, statement=statement, columns=columns)


def _add_index(tables: Tables, search_path: str, statement: CreateIndexStatement) -> None:
    identifier = _qualified(statement.table_name, search_path)
    table = tables.get(identifier)
    if table is None:
        logging.warning(f"create index {statement.name.to_sql()} on unknown table {identifier}")
        return
    name = statement.name.value
    table.indexes[name] = Index(name=name, statement=statement)


def _add_sequence(tables: Tables, search_path: str, statement: AlterSequenceStatement) -> None:
    owned_by = statement.owned_by_table
    schema = owned_by.schema.value if owned_by.schema is not None else search_path
    identifier = TableName(owned_by.table, schema=Identifier(schema)).to_sql()
    table = tables.get(identifier)
    if table is None:
        logging.warning(f"alter sequence {statement.name.to_sql()} owned by unknown table {identifier}")
        return
    column = table.columns.get(statement.owned_by_column.value)
    if column is None:
        logging.warning(
            f"alter sequence {statement.name.to_sql()} owned by unknown column "
            f"{identifier}.{statement.owned_by_column.to_sql()}"
        )
        return
    column.sequence_name = statement.name.name.value


def _alter_table(tables: Tables, search_path: str, statement: AlterTableStatement) -> None:
    identifier = _qualified(statement.table_name, search_path)
    table = tables.get(identifier)
    if table is None:
        logging.warning(f"alter table on unknown table {identifier}")
        return

    for action in statement.actions:
        if isinstance(action, TableConstraintAction):
            if action.name is None:
                logging.debug(f"skip unnamed {action.kind.value} constraint on {identifier}")
                continue
            name = action.name.value
            table.table_constraints[name] = TableConstraint(
                name=name,
                kind=action.kind,
                columns=[column.value for column in action.columns],
            )
        elif isinstance(action, AlterColumnSetDefaultAction):
            column = action.column.value
            table.alter_column_set_defaults[column] = AlterColumnSetDefault(
                column=column,
                default=action.expression.to_sql(),
            )


def _search_path(statement: SetStatement) -> Optional[str]:
    if statement.name.value.lower() != "search_path" or not statement.values:
        return None
    first = statement.values[0]
    if isinstance(first, Identifier):
        return first.value
    return None


def process_ddl(ddl: DataDefinition) -> Tables:
    """
    Build the table catalog of one side.

    Statements are walked in document order, so ``SET search_path`` only
    affects the statements after it. Unqualified table names are filled in
    place with the current schema. References to unknown tables or columns
    are logged and skipped.

    Args:
        ddl: Parsed statements of one side

    Returns:
        Dict of fully-qualified table identifier to Table
    """
    tables: Tables = {}
    search_path = DEFAULT_SCHEMA

    for statement in ddl:
        if isinstance(statement, SetStatement):
            search_path = _search_path(statement) or search_path
        elif isinstance(statement, (CreateSchemaStatement, CreateSequenceStatement)):
            continue
        elif isinstance(statement, CreateTableStatement):
            _add_table(tables, search_path, statement)
        elif isinstance(statement, CreateIndexStatement):
            _add_index(tables, search_path, statement)
        elif isinstance(statement, AlterSequenceStatement):
            _add_sequence(tables, search_path, statement)
        elif isinstance(statement, AlterTableStatement):
            _alter_table(tables, search_path, statement)
        else:
            logging.debug(f"skip statement: {statement.to_sql()}")

    return tables
