"""
Column data types. Each variant renders its own canonical SQL spelling.
"""

from dataclasses import dataclass
from typing import Optional


class DataType:
    """Base class for column data types."""
    name: str = ""

    def to_sql(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.to_sql()


@dataclass
class Integer(DataType):
    name = "integer"


@dataclass
class Bigint(DataType):
    name = "bigint"


@dataclass
class Smallint(DataType):
    name = "smallint"


@dataclass
class Bigserial(DataType):
    name = "bigserial"


@dataclass
class Serial(DataType):
    name = "serial"


@dataclass
class Boolean(DataType):
    name = "boolean"


@dataclass
class Numeric(DataType):
    name = "numeric"
    precision: Optional[str] = None
    scale: Optional[str] = None

    def to_sql(self) -> str:
        if self.precision is None:
            return self.name
        if self.scale is None:
            return f"{self.name}({self.precision})"
        return f"{self.name}({self.precision},{self.scale})"


@dataclass
class Character(DataType):
    name = "character"
    varying: bool = False
    length: Optional[str] = None

    def to_sql(self) -> str:
        sql = self.name
        if self.varying:
            sql += " varying"
        if self.length is not None:
            sql += f"({self.length})"
        return sql


@dataclass
class Text(DataType):
    name = "text"


@dataclass
class Jsonb(DataType):
    name = "jsonb"


@dataclass
class Bytea(DataType):
    name = "bytea"


@dataclass
class Tsvector(DataType):
    name = "tsvector"


@dataclass
class Uuid(DataType):
    name = "uuid"


@dataclass
class Date(DataType):
    name = "date"


@dataclass
class Timestamp(DataType):
    name = "timestamp"
    with_time_zone: bool = False

    def to_sql(self) -> str:
        if self.with_time_zone:
            return "timestamp with time zone"
        return "timestamp without time zone"


__all__ = [
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
]
