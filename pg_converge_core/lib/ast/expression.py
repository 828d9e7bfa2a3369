"""
Expression nodes used by column defaults, index targets and SET values.
"""

from dataclasses import dataclass, field
from typing import List, Union

from pg_converge_core.lib.ast.datatype import DataType


class Expression:
    """Base class for expression nodes."""

    def to_sql(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_sql()


@dataclass
class Identifier(Expression):
    """An identifier; always rendered double-quoted."""
    value: str

    def to_sql(self) -> str:
        escaped = self.value.replace('"', '""')
        return f'"{escaped}"'


@dataclass
class StringLiteral(Expression):
    literal: str

    def to_sql(self) -> str:
        return self.literal


@dataclass
class NumberLiteral(Expression):
    literal: str

    def to_sql(self) -> str:
        return self.literal


@dataclass
class BooleanLiteral(Expression):
    value: bool

    def to_sql(self) -> str:
        return "true" if self.value else "false"


@dataclass
class NullLiteral(Expression):

    def to_sql(self) -> str:
        return "NULL"


@dataclass
class GroupedExpression(Expression):
    expression: Expression

    def to_sql(self) -> str:
        return f"({self.expression.to_sql()})"


def _operand(expression: Expression) -> str:
    sql = expression.to_sql()
    if sql.startswith("-"):
        return f" {sql}"
    return sql


@dataclass
class PrefixExpression(Expression):
    operator: str
    right: Expression

    def to_sql(self) -> str:
        return f"{self.operator}{_operand(self.right)}"


@dataclass
class InfixExpression(Expression):
    """
    Binary operator application. The right side of a typecast may be a data type.

    Operators render verbatim without padding, except IS / IS NOT. A right
    operand starting with a minus sign is set off by a space so that the
    output never contains "--".
    """
    left: Expression
    operator: str
    right: Union[Expression, DataType]

    def to_sql(self) -> str:
        if self.operator in ("IS", "IS NOT"):
            return f"{self.left.to_sql()} {self.operator} {self.right.to_sql()}"
        return f"{self.left.to_sql()}{self.operator}{_operand(self.right)}"


@dataclass
class CallExpression(Expression):
    function: Expression
    arguments: List[Expression] = field(default_factory=list)

    def to_sql(self) -> str:
        args = ", ".join(arg.to_sql() for arg in self.arguments)
        return f"{self.function.to_sql()}({args})"


__all__ = [
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
]
