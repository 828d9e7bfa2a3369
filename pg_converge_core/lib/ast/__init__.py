"""
AST nodes for the supported DDL subset.
"""

from pg_converge_core.lib.ast.datatype import (
    DataType,
    Integer,
    Bigint,
    Smallint,
    Bigserial,
    Serial,
    Boolean,
    Numeric,
    Character,
    Text,
    Jsonb,
    Bytea,
    Tsvector,
    Uuid,
    Date,
    Timestamp,
)
from pg_converge_core.lib.ast.expression import (
    Expression,
    Identifier,
    StringLiteral,
    NumberLiteral,
    BooleanLiteral,
    NullLiteral,
    GroupedExpression,
    PrefixExpression,
    InfixExpression,
    CallExpression,
)
from pg_converge_core.lib.ast.statement import (
    TableName,
    SequenceName,
    ColumnConstraint,
    NotNullConstraint,
    NullConstraint,
    DefaultConstraint,
    ColumnDefinition,
    Statement,
    CreateSchemaStatement,
    CreateTableStatement,
    IndexTarget,
    CreateIndexStatement,
    CreateSequenceStatement,
    AlterSequenceStatement,
    ConstraintKind,
    AlterTableAction,
    TableConstraint,
    AlterColumnSetDefault,
    AlterTableStatement,
    SetStatement,
    DataDefinition,
)

__all__ = [
    # Data types
    "DataType",
    "Integer",
    "Bigint",
    "Smallint",
    "Bigserial",
    "Serial",
    "Boolean",
    "Numeric",
    "Character",
    "Text",
    "Jsonb",
    "Bytea",
    "Tsvector",
    "Uuid",
    "Date",
    "Timestamp",

    # Expressions
    "Expression",
    "Identifier",
    "StringLiteral",
    "NumberLiteral",
    "BooleanLiteral",
    "NullLiteral",
    "GroupedExpression",
    "PrefixExpression",
    "InfixExpression",
    "CallExpression",

    # Statements
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
