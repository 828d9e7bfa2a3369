"""
Token kinds and the keyword table for the DDL lexer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class TokenType(Enum):
    """Enumeration of token kinds produced by the lexer."""
    ILLEGAL = "illegal"
    EOF = "eof"
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"
    BACKSLASH_COMMAND = "backslash_command"

    DOT = "."
    SEMICOLON = ";"
    COMMA = ","
    LPAREN = "("
    RPAREN = ")"
    EQUAL = "="
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    TYPECAST = "::"

    # Keywords
    ADD = "ADD"
    ALTER = "ALTER"
    ASC = "ASC"
    BY = "BY"
    CACHE = "CACHE"
    CHECK = "CHECK"
    COLUMN = "COLUMN"
    COMMENT = "COMMENT"
    CONCURRENTLY = "CONCURRENTLY"
    CONSTRAINT = "CONSTRAINT"
    CREATE = "CREATE"
    DATABASE = "DATABASE"
    DEFAULT = "DEFAULT"
    DESC = "DESC"
    EXCLUDE = "EXCLUDE"
    EXISTS = "EXISTS"
    EXTENSION = "EXTENSION"
    FALSE = "FALSE"
    FOREIGN = "FOREIGN"
    FUNCTION = "FUNCTION"
    GRANT = "GRANT"
    IF = "IF"
    INCREMENT = "INCREMENT"
    INDEX = "INDEX"
    IS = "IS"
    KEY = "KEY"
    MAXVALUE = "MAXVALUE"
    MINVALUE = "MINVALUE"
    NO = "NO"
    NOT = "NOT"
    NULL = "NULL"
    ON = "ON"
    ONLY = "ONLY"
    OPERATOR = "OPERATOR"
    OWNED = "OWNED"
    OWNER = "OWNER"
    PRIMARY = "PRIMARY"
    REVOKE = "REVOKE"
    ROLE = "ROLE"
    SCHEMA = "SCHEMA"
    SELECT = "SELECT"
    SEQUENCE = "SEQUENCE"
    SET = "SET"
    START = "START"
    TABLE = "TABLE"
    TIME = "TIME"
    TO = "TO"
    TRIGGER = "TRIGGER"
    TRUE = "TRUE"
    UNIQUE = "UNIQUE"
    USING = "USING"
    VARYING = "VARYING"
    VIEW = "VIEW"
    WITH = "WITH"
    WITHOUT = "WITHOUT"
    ZONE = "ZONE"

    # Type keywords
    BIGINT = "BIGINT"
    BIGSERIAL = "BIGSERIAL"
    BOOLEAN = "BOOLEAN"
    BYTEA = "BYTEA"
    CHARACTER = "CHARACTER"
    DATE = "DATE"
    INTEGER = "INTEGER"
    JSONB = "JSONB"
    NUMERIC = "NUMERIC"
    SERIAL = "SERIAL"
    SMALLINT = "SMALLINT"
    TEXT = "TEXT"
    TIMESTAMP = "TIMESTAMP"
    TSVECTOR = "TSVECTOR"
    UUID = "UUID"


# keyword -> (token type, reserved)
# https://www.postgresql.org/docs/current/sql-keywords-appendix.html
KEYWORDS: Dict[str, Tuple[TokenType, bool]] = {
    "ADD": (TokenType.ADD, False),
    "ALTER": (TokenType.ALTER, False),
    "ASC": (TokenType.ASC, True),
    "BIGINT": (TokenType.BIGINT, False),
    "BIGSERIAL": (TokenType.BIGSERIAL, False),
    "BOOLEAN": (TokenType.BOOLEAN, False),
    "BY": (TokenType.BY, False),
    "BYTEA": (TokenType.BYTEA, False),
    "CACHE": (TokenType.CACHE, False),
    "CHARACTER": (TokenType.CHARACTER, False),
    "CHECK": (TokenType.CHECK, True),
    "COLUMN": (TokenType.COLUMN, True),
    "COMMENT": (TokenType.COMMENT, False),
    "CONCURRENTLY": (TokenType.CONCURRENTLY, True),
    "CONSTRAINT": (TokenType.CONSTRAINT, True),
    "CREATE": (TokenType.CREATE, True),
    "DATABASE": (TokenType.DATABASE, False),
    "DATE": (TokenType.DATE, False),
    "DEFAULT": (TokenType.DEFAULT, True),
    "DESC": (TokenType.DESC, True),
    "EXCLUDE": (TokenType.EXCLUDE, False),
    "EXISTS": (TokenType.EXISTS, False),
    "EXTENSION": (TokenType.EXTENSION, False),
    "FALSE": (TokenType.FALSE, True),
    "FOREIGN": (TokenType.FOREIGN, True),
    "FUNCTION": (TokenType.FUNCTION, False),
    "GRANT": (TokenType.GRANT, True),
    "IF": (TokenType.IF, False),
    "INCREMENT": (TokenType.INCREMENT, False),
    "INDEX": (TokenType.INDEX, False),
    "INTEGER": (TokenType.INTEGER, False),
    "IS": (TokenType.IS, True),
    "JSONB": (TokenType.JSONB, False),
    "KEY": (TokenType.KEY, False),
    "MAXVALUE": (TokenType.MAXVALUE, False),
    "MINVALUE": (TokenType.MINVALUE, False),
    "NO": (TokenType.NO, False),
    "NOT": (TokenType.NOT, True),
    "NULL": (TokenType.NULL, True),
    "NUMERIC": (TokenType.NUMERIC, False),
    "ON": (TokenType.ON, True),
    "ONLY": (TokenType.ONLY, True),
    "OPERATOR": (TokenType.OPERATOR, False),
    "OWNED": (TokenType.OWNED, False),
    "OWNER": (TokenType.OWNER, False),
    "PRIMARY": (TokenType.PRIMARY, True),
    "REVOKE": (TokenType.REVOKE, False),
    "ROLE": (TokenType.ROLE, False),
    "SCHEMA": (TokenType.SCHEMA, False),
    "SELECT": (TokenType.SELECT, True),
    "SEQUENCE": (TokenType.SEQUENCE, False),
    "SERIAL": (TokenType.SERIAL, False),
    "SET": (TokenType.SET, False),
    "SMALLINT": (TokenType.SMALLINT, False),
    "START": (TokenType.START, False),
    "TABLE": (TokenType.TABLE, True),
    "TEXT": (TokenType.TEXT, False),
    "TIME": (TokenType.TIME, False),
    "TIMESTAMP": (TokenType.TIMESTAMP, False),
    "TO": (TokenType.TO, True),
    "TRIGGER": (TokenType.TRIGGER, False),
    "TRUE": (TokenType.TRUE, True),
    "TSVECTOR": (TokenType.TSVECTOR, False),
    "UNIQUE": (TokenType.UNIQUE, True),
    "USING": (TokenType.USING, True),
    "UUID": (TokenType.UUID, False),
    "VARYING": (TokenType.VARYING, False),
    "VIEW": (TokenType.VIEW, False),
    "WITH": (TokenType.WITH, True),
    "WITHOUT": (TokenType.WITHOUT, False),
    "ZONE": (TokenType.ZONE, False),
}

_KEYWORD_TYPES = {token_type: reserved for token_type, reserved in KEYWORDS.values()}


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    Attributes:
        type: Kind of the token
        literal: Source text of the token exactly as written
        line: 1-based line the token starts on
    """
    type: TokenType
    literal: str
    line: int

    def is_keyword(self) -> bool:
        return self.type in _KEYWORD_TYPES

    def is_reserved(self) -> bool:
        return _KEYWORD_TYPES.get(self.type, False)

    def __str__(self) -> str:
        return f"{self.type.name}({self.literal!r})@{self.line}"


def lookup_ident(ident: str) -> TokenType:
    """Return the keyword type for an unquoted word, or IDENTIFIER."""
    keyword = KEYWORDS.get(ident.upper())
    if keyword is not None:
        return keyword[0]
    return TokenType.IDENTIFIER


__all__ = [
    "TokenType",
    "Token",
    "KEYWORDS",
    "lookup_ident",
]
