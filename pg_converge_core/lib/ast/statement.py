"""
Statement nodes and the pieces they are built from.

Every node renders canonical SQL through ``to_sql()``; the diff engine never
produces SQL for these objects any other way.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pg_converge_core.lib.ast.datatype import DataType
from pg_converge_core.lib.ast.expression import Expression, Identifier, NumberLiteral


@dataclass
class TableName:
    """`"table"` or `"schema"."table"`."""
    table: Identifier
    schema: Optional[Identifier] = None

    def set_schema(self, schema: str) -> None:
        """Fill in the schema when the source left the name unqualified."""
        if self.schema is None:
            self.schema = Identifier(schema)

    def to_sql(self) -> str:
        if self.schema is None:
            return self.table.to_sql()
        return f"{self.schema.to_sql()}.{self.table.to_sql()}"

    def __str__(self) -> str:
        return self.to_sql()


@dataclass
class SequenceName:
    """`"sequence"` or `"schema"."sequence"`."""
    name: Identifier
    schema: Optional[Identifier] = None

    def set_schema(self, schema: str) -> None:
        if self.schema is None:
            self.schema = Identifier(schema)

    def to_sql(self) -> str:
        if self.schema is None:
            return self.name.to_sql()
        return f"{self.schema.to_sql()}.{self.name.to_sql()}"

    def __str__(self) -> str:
        return self.to_sql()


# Column constraints

class ColumnConstraint:
    def to_sql(self) -> str:
        raise NotImplementedError


@dataclass
class NotNullConstraint(ColumnConstraint):
    def to_sql(self) -> str:
        return "NOT NULL"


@dataclass
class NullConstraint(ColumnConstraint):
    # Explicit NULL is the default in PostgreSQL and renders as nothing
    def to_sql(self) -> str:
        return ""


@dataclass
class DefaultConstraint(ColumnConstraint):
    expression: Expression

    def to_sql(self) -> str:
        return f"DEFAULT {self.expression.to_sql()}"


@dataclass
class ColumnDefinition:
    name: Identifier
    data_type: DataType
    constraints: List[ColumnConstraint] = field(default_factory=list)

    def to_sql(self) -> str:
        parts = [self.name.to_sql(), self.data_type.to_sql()]
        parts.extend(c.to_sql() for c in self.constraints)
        return " ".join(part for part in parts if part)


# Statements

class Statement:
    """Base class for top-level statements."""

    def to_sql(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_sql()


@dataclass
class CreateSchemaStatement(Statement):
    name: Identifier

    def to_sql(self) -> str:
        return f"CREATE SCHEMA {self.name.to_sql()};"


@dataclass
class CreateTableStatement(Statement):
    table_name: TableName
    columns: List[ColumnDefinition] = field(default_factory=list)

    def to_sql(self) -> str:
        if not self.columns:
            return f"CREATE TABLE {self.table_name.to_sql()} (\n);"
        body = ",\n".join(f"    {column.to_sql()}" for column in self.columns)
        return f"CREATE TABLE {self.table_name.to_sql()} (\n{body}\n);"


@dataclass
class IndexTarget:
    """A key of an index: an identifier or an expression, optionally descending."""
    node: Expression
    desc: bool = False

    def to_sql(self) -> str:
        if self.desc:
            return f"{self.node.to_sql()} DESC"
        return self.node.to_sql()


@dataclass
class CreateIndexStatement(Statement):
    name: Identifier
    table_name: TableName
    targets: List[IndexTarget] = field(default_factory=list)
    unique: bool = False
    concurrently: bool = False
    if_not_exists: bool = False
    using_method: Optional[Identifier] = None

    def to_sql(self) -> str:
        parts = ["CREATE"]
        if self.unique:
            parts.append("UNIQUE")
        parts.append("INDEX")
        if self.concurrently:
            parts.append("CONCURRENTLY")
        if self.if_not_exists:
            parts.append("IF NOT EXISTS")
        parts.extend([self.name.to_sql(), "ON", self.table_name.to_sql()])
        if self.using_method is not None:
            parts.extend(["USING", self.using_method.to_sql()])
        targets = ", ".join(target.to_sql() for target in self.targets)
        parts.append(f"({targets});")
        return " ".join(parts)


@dataclass
class CreateSequenceStatement(Statement):
    name: SequenceName
    start_with: Optional[NumberLiteral] = None
    increment_by: Optional[NumberLiteral] = None
    no_minvalue: bool = False
    no_maxvalue: bool = False
    cache: Optional[NumberLiteral] = None

    def to_sql(self) -> str:
        parts = ["CREATE SEQUENCE", self.name.to_sql()]
        if self.start_with is not None:
            parts.append(f"START WITH {self.start_with.to_sql()}")
        if self.increment_by is not None:
            parts.append(f"INCREMENT BY {self.increment_by.to_sql()}")
        if self.no_minvalue:
            parts.append("NO MINVALUE")
        if self.no_maxvalue:
            parts.append("NO MAXVALUE")
        if self.cache is not None:
            parts.append(f"CACHE {self.cache.to_sql()}")
        return " ".join(parts) + ";"


@dataclass
class AlterSequenceStatement(Statement):
    """ALTER SEQUENCE name OWNED BY [schema.]table.column"""
    name: SequenceName
    owned_by_table: TableName
    owned_by_column: Identifier

    def to_sql(self) -> str:
        return (f"ALTER SEQUENCE {self.name.to_sql()} OWNED BY "
                f"{self.owned_by_table.to_sql()}.{self.owned_by_column.to_sql()};")


class ConstraintKind(Enum):
    UNIQUE = "UNIQUE"
    PRIMARY_KEY = "PRIMARY KEY"


class AlterTableAction:
    def to_sql(self) -> str:
        raise NotImplementedError


@dataclass
class TableConstraint(AlterTableAction):
    kind: ConstraintKind
    columns: List[Identifier] = field(default_factory=list)
    name: Optional[Identifier] = None

    def to_sql(self) -> str:
        columns = ", ".join(column.to_sql() for column in self.columns)
        if self.name is None:
            return f"ADD {self.kind.value} ({columns})"
        return f"ADD CONSTRAINT {self.name.to_sql()} {self.kind.value} ({columns})"


@dataclass
class AlterColumnSetDefault(AlterTableAction):
    column: Identifier
    expression: Expression

    def to_sql(self) -> str:
        return f"ALTER COLUMN {self.column.to_sql()} SET DEFAULT {self.expression.to_sql()}"


@dataclass
class AlterTableStatement(Statement):
    table_name: TableName
    actions: List[AlterTableAction] = field(default_factory=list)
    only: bool = False

    def to_sql(self) -> str:
        only = "ONLY " if self.only else ""
        actions = ", ".join(action.to_sql() for action in self.actions)
        return f"ALTER TABLE {only}{self.table_name.to_sql()} {actions};"


@dataclass
class SetStatement(Statement):
    name: Identifier
    values: List[Expression] = field(default_factory=list)

    def to_sql(self) -> str:
        values = ", ".join(value.to_sql() for value in self.values)
        return f"SET {self.name.value} = {values};"


@dataclass
class DataDefinition:
    """The parse result: statements in document order."""
    statements: List[Statement] = field(default_factory=list)

    def to_sql(self) -> str:
        return "".join(statement.to_sql() + "\n" for statement in self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self):
        return iter(self.statements)


__all__ = [
    "TableName",
    "SequenceName",
    "ColumnConstraint",
    "NotNullConstraint",
    "NullConstraint",
    "DefaultConstraint",
    "ColumnDefinition",
    "Statement",
    "CreateSchemaStatement",
    "CreateTableStatement",
    "IndexTarget",
    "CreateIndexStatement",
    "CreateSequenceStatement",
    "AlterSequenceStatement",
    "ConstraintKind",
    "AlterTableAction",
    "TableConstraint",
    "AlterColumnSetDefault",
    "AlterTableStatement",
    "SetStatement",
    "DataDefinition",
]
