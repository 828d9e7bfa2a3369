"""
Recursive-descent parser for the supported DDL subset.

Statements are dispatched on their leading keyword. Expressions are parsed by
precedence climbing. A statement resolves to one of three outcomes:

- a ``Statement`` node,
- ``None`` when the statement is recognized but not implemented (skipped),
- a ``ParseError`` raised internally, recorded in ``Parser.errors``.

After a skip or an error the parser resynchronizes on the next ``;`` so one
bad statement never hides the valid ones that follow it.
"""

import logging
from enum import IntEnum
from typing import Callable, Dict, List, Optional, Tuple

from pg_converge_core.lib.ast import (
    AlterColumnSetDefault,
    AlterSequenceStatement,
    AlterTableAction,
    AlterTableStatement,
    Bigint,
    Bigserial,
    Boolean,
    BooleanLiteral,
    Bytea,
    CallExpression,
    Character,
    ColumnConstraint,
    ColumnDefinition,
    ConstraintKind,
    CreateIndexStatement,
    CreateSchemaStatement,
    CreateSequenceStatement,
    CreateTableStatement,
    DataDefinition,
    DataType,
    Date,
    DefaultConstraint,
    Expression,
    GroupedExpression,
    Identifier,
    IndexTarget,
    InfixExpression,
    Integer,
    Jsonb,
    NotNullConstraint,
    NullConstraint,
    NullLiteral,
    NumberLiteral,
    Numeric,
    PrefixExpression,
    SequenceName,
    Serial,
    SetStatement,
    Smallint,
    Statement,
    StringLiteral,
    TableConstraint,
    TableName,
    Text,
    Timestamp,
    Tsvector,
    Uuid,
)
from pg_converge_core.lib.errors import ParseError
from pg_converge_core.lib.lexer import Lexer
from pg_converge_core.lib.token import Token, TokenType


class Precedence(IntEnum):
    """Binding power of operators, lowest first."""
    LOWEST = 1
    IS = 2
    SUM = 3
    PRODUCT = 4
    TYPECAST = 5
    PREFIX = 6
    CALL = 7


# https://www.postgresql.org/docs/current/sql-syntax-lexical.html#SQL-PRECEDENCE
PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.IS: Precedence.IS,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.TYPECAST: Precedence.TYPECAST,
    TokenType.LPAREN: Precedence.CALL,
}

_SIMPLE_TYPES: Dict[TokenType, Callable[[], DataType]] = {
    TokenType.INTEGER: Integer,
    TokenType.BIGINT: Bigint,
    TokenType.SMALLINT: Smallint,
    TokenType.BIGSERIAL: Bigserial,
    TokenType.SERIAL: Serial,
    TokenType.BOOLEAN: Boolean,
    TokenType.TEXT: Text,
    TokenType.JSONB: Jsonb,
    TokenType.BYTEA: Bytea,
    TokenType.TSVECTOR: Tsvector,
    TokenType.UUID: Uuid,
    TokenType.DATE: Date,
}

_DATA_TYPE_TOKENS = set(_SIMPLE_TYPES) | {
    TokenType.CHARACTER,
    TokenType.NUMERIC,
    TokenType.TIMESTAMP,
}

# Type names written as quoted identifiers, e.g. name2 "text"
_QUOTED_TYPE_NAMES: Dict[str, Callable[[], DataType]] = {
    '"date"': Date,
    '"text"': Text,
    '"jsonb"': Jsonb,
    '"bytea"': Bytea,
    '"tsvector"': Tsvector,
    '"uuid"': Uuid,
}

# Common spellings that are not keywords in our table
_TYPE_ALIASES: Dict[str, Callable[[], DataType]] = {
    "int": Integer,
    "int4": Integer,
    "int8": Bigint,
    "int2": Smallint,
    "bool": Boolean,
    "timestamptz": lambda: Timestamp(with_time_zone=True),
}

_UNIMPLEMENTED_CREATE = {
    TokenType.DATABASE,
    TokenType.EXTENSION,
    TokenType.FUNCTION,
    TokenType.VIEW,
    TokenType.OPERATOR,
    TokenType.TRIGGER,
    TokenType.ROLE,
}

_UNIMPLEMENTED_STATEMENTS = {
    TokenType.GRANT,
    TokenType.REVOKE,
    TokenType.SELECT,
    TokenType.COMMENT,
}

_SKIPPED_META_COMMANDS = {"\\connect", "\\c"}


def _describe(token: Token) -> str:
    if token.type == TokenType.EOF:
        return "end of input"
    if token.type == TokenType.ILLEGAL:
        return f"illegal token {token.literal}"
    return token.literal


class Parser:
    """
    Builds a ``DataDefinition`` from the tokens of one lexer.

    Args:
        lexer: Token source; its ``input_name`` is used in error messages
    """

    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.errors: List[ParseError] = []

        self._prefix_fns: Dict[TokenType, Callable[[], Expression]] = {
            TokenType.STRING: self._parse_string_literal,
            TokenType.NUMBER: self._parse_number_literal,
            TokenType.TRUE: self._parse_boolean,
            TokenType.FALSE: self._parse_boolean,
            TokenType.NULL: self._parse_null,
            TokenType.IDENTIFIER: self._parse_identifier,
            TokenType.LPAREN: self._parse_grouped_expression,
            TokenType.MINUS: self._parse_prefix_expression,
            TokenType.PLUS: self._parse_prefix_expression,
        }
        self._infix_fns: Dict[TokenType, Callable[[Expression], Expression]] = {
            TokenType.PLUS: self._parse_infix_expression,
            TokenType.MINUS: self._parse_infix_expression,
            TokenType.ASTERISK: self._parse_infix_expression,
            TokenType.SLASH: self._parse_infix_expression,
            TokenType.TYPECAST: self._parse_typecast_expression,
            TokenType.IS: self._parse_is_expression,
            TokenType.LPAREN: self._parse_call_expression,
        }

        self.token = self.lexer.next_token()
        self.peek_token = self.lexer.next_token()

    @property
    def input_name(self) -> str:
        return self.lexer.input_name

    # Token handling

    def _advance(self) -> None:
        self.token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def _error(self, token: Token, message: str) -> ParseError:
        return ParseError(self.input_name, token.line, message)

    def _unexpected(self, expected: str) -> ParseError:
        return self._error(self.token, f"expected {expected}, found {_describe(self.token)}")

    def _expect(self, token_type: TokenType) -> Token:
        if self.token.type != token_type:
            raise self._unexpected(token_type.value)
        token = self.token
        self._advance()
        return token

    def _accept(self, token_type: TokenType) -> bool:
        if self.token.type == token_type:
            self._advance()
            return True
        return False

    def _is_identifier(self, token: Optional[Token] = None) -> bool:
        token = token or self.token
        if token.type == TokenType.IDENTIFIER:
            return True
        return token.is_keyword() and not token.is_reserved()

    def _end_statement(self) -> None:
        if self.token.type == TokenType.EOF:
            return
        self._expect(TokenType.SEMICOLON)

    def _skip_statement(self) -> None:
        while self.token.type not in (TokenType.SEMICOLON, TokenType.EOF, TokenType.BACKSLASH_COMMAND):
            self._advance()
        self._accept(TokenType.SEMICOLON)

    # Statements

    def parse_data_definition(self) -> DataDefinition:
        """Parse every statement of the input; errors accumulate in ``errors``."""
        statements: List[Statement] = []
        while self.token.type != TokenType.EOF:
            if self.token.type == TokenType.SEMICOLON:
                self._advance()
                continue
            if self.token.type == TokenType.BACKSLASH_COMMAND:
                self._parse_meta_command()
                continue

            line = self.token.line
            try:
                statement = self._parse_statement()
            except ParseError as e:
                logging.debug(f"syntax error: {e}")
                self.errors.append(e)
                self._skip_statement()
                continue

            if statement is None:
                logging.debug(f"{self.input_name}:{line}: skip unimplemented statement")
                self._skip_statement()
            else:
                statements.append(statement)

        return DataDefinition(statements)

    def _parse_meta_command(self) -> None:
        command = self.token.literal.split()[0]
        if command not in _SKIPPED_META_COMMANDS:
            self.errors.append(self._error(self.token, f"unknown meta-command: {command}"))
        self._advance()

    def _parse_statement(self) -> Optional[Statement]:
        token_type = self.token.type
        if token_type == TokenType.CREATE:
            return self._parse_create()
        if token_type == TokenType.ALTER:
            return self._parse_alter()
        if token_type == TokenType.SET:
            return self._parse_set_statement()
        if token_type in _UNIMPLEMENTED_STATEMENTS:
            return None
        if token_type == TokenType.ILLEGAL:
            raise self._error(self.token, f"illegal token: {self.token.literal}")
        raise self._error(self.token, f"unknown token: {self.token.literal}")

    def _parse_create(self) -> Optional[Statement]:
        target = self.peek_token.type
        if target == TokenType.SCHEMA:
            return self._parse_create_schema_statement()
        if target == TokenType.TABLE:
            return self._parse_create_table_statement()
        if target in (TokenType.UNIQUE, TokenType.INDEX):
            return self._parse_create_index_statement()
        if target == TokenType.SEQUENCE:
            return self._parse_create_sequence_statement()
        if target in _UNIMPLEMENTED_CREATE:
            return None
        if target == TokenType.IDENTIFIER and self.peek_token.literal.upper() == "OR":
            # CREATE OR REPLACE only applies to objects that are not diffed
            return None
        raise self._error(self.peek_token, f"unknown token: CREATE {_describe(self.peek_token)}")

    def _parse_alter(self) -> Optional[Statement]:
        target = self.peek_token.type
        if target == TokenType.TABLE:
            return self._parse_alter_table_statement()
        if target == TokenType.SEQUENCE:
            return self._parse_alter_sequence_statement()
        return None

    def _parse_create_schema_statement(self) -> Statement:
        self._expect(TokenType.CREATE)
        self._expect(TokenType.SCHEMA)
        name = self._parse_identifier()
        self._end_statement()
        return CreateSchemaStatement(name)

    # CREATE TABLE table_name ( column_name data_type [ column_constraint ... ] [, ...] )
    def _parse_create_table_statement(self) -> Statement:
        self._expect(TokenType.CREATE)
        self._expect(TokenType.TABLE)
        table_name = self._parse_table_name()

        self._expect(TokenType.LPAREN)
        columns = []
        if self.token.type != TokenType.RPAREN:
            while True:
                columns.append(self._parse_column_definition())
                if not self._accept(TokenType.COMMA):
                    break
        self._expect(TokenType.RPAREN)
        self._end_statement()
        return CreateTableStatement(table_name, columns)

    def _parse_column_definition(self) -> ColumnDefinition:
        name = self._parse_identifier()
        data_type = self._parse_data_type()
        constraints = []
        while self.token.type in (TokenType.NOT, TokenType.NULL, TokenType.DEFAULT):
            constraints.append(self._parse_column_constraint())
        return ColumnDefinition(name, data_type, constraints)

    def _parse_column_constraint(self) -> ColumnConstraint:
        if self._accept(TokenType.NOT):
            self._expect(TokenType.NULL)
            return NotNullConstraint()
        if self._accept(TokenType.NULL):
            return NullConstraint()
        self._expect(TokenType.DEFAULT)
        return DefaultConstraint(self._parse_expression(Precedence.LOWEST))

    def _parse_data_type(self) -> DataType:
        token = self.token
        if token.type in _SIMPLE_TYPES:
            self._advance()
            return _SIMPLE_TYPES[token.type]()
        if token.type == TokenType.CHARACTER:
            self._advance()
            varying = self._accept(TokenType.VARYING)
            return Character(varying=varying, length=self._parse_type_length())
        if token.type == TokenType.NUMERIC:
            self._advance()
            return self._parse_numeric_modifiers()
        if token.type == TokenType.TIMESTAMP:
            self._advance()
            return self._parse_timestamp_time_zone()

        if token.type == TokenType.IDENTIFIER:
            if token.literal in _QUOTED_TYPE_NAMES:
                self._advance()
                return _QUOTED_TYPE_NAMES[token.literal]()
            alias = token.literal.lower()
            if alias in _TYPE_ALIASES:
                self._advance()
                return _TYPE_ALIASES[alias]()
            if alias == "varchar":
                self._advance()
                return Character(varying=True, length=self._parse_type_length())
            if alias == "decimal":
                self._advance()
                return self._parse_numeric_modifiers()

        raise self._unexpected("data type")

    def _parse_type_length(self) -> Optional[str]:
        # ( n )
        if not self._accept(TokenType.LPAREN):
            return None
        length = self._expect(TokenType.NUMBER).literal
        self._expect(TokenType.RPAREN)
        return length

    def _parse_numeric_modifiers(self) -> Numeric:
        # ( precision [, scale] )
        if not self._accept(TokenType.LPAREN):
            return Numeric()
        precision = self._expect(TokenType.NUMBER).literal
        scale = None
        if self._accept(TokenType.COMMA):
            scale = self._expect(TokenType.NUMBER).literal
        self._expect(TokenType.RPAREN)
        return Numeric(precision=precision, scale=scale)

    def _parse_timestamp_time_zone(self) -> Timestamp:
        if self._accept(TokenType.WITH):
            self._expect(TokenType.TIME)
            self._expect(TokenType.ZONE)
            return Timestamp(with_time_zone=True)
        if self._accept(TokenType.WITHOUT):
            self._expect(TokenType.TIME)
            self._expect(TokenType.ZONE)
        return Timestamp(with_time_zone=False)

    # CREATE [UNIQUE] INDEX [CONCURRENTLY] [IF NOT EXISTS] name ON table_name
    #     [USING method] ( target [ASC | DESC] [, ...] )
    def _parse_create_index_statement(self) -> Statement:
        self._expect(TokenType.CREATE)
        unique = self._accept(TokenType.UNIQUE)
        self._expect(TokenType.INDEX)
        concurrently = self._accept(TokenType.CONCURRENTLY)

        if_not_exists = False
        if self.token.type == TokenType.IF and self.peek_token.type == TokenType.NOT:
            self._advance()
            self._advance()
            self._expect(TokenType.EXISTS)
            if_not_exists = True

        name = self._parse_identifier()
        self._expect(TokenType.ON)
        table_name = self._parse_table_name()

        using_method = None
        if self._accept(TokenType.USING):
            using_method = self._parse_identifier()

        targets = self._parse_index_targets()
        self._end_statement()
        return CreateIndexStatement(
            name=name,
            table_name=table_name,
            targets=targets,
            unique=unique,
            concurrently=concurrently,
            if_not_exists=if_not_exists,
            using_method=using_method,
        )

    def _parse_index_targets(self) -> List[IndexTarget]:
        self._expect(TokenType.LPAREN)
        targets: List[IndexTarget] = []
        if self._accept(TokenType.RPAREN):
            return targets
        while True:
            if self._is_identifier() and self.peek_token.type != TokenType.LPAREN:
                node: Expression = self._parse_identifier()
            else:
                node = self._parse_expression(Precedence.LOWEST)
            desc = self._accept(TokenType.DESC)
            if not desc:
                self._accept(TokenType.ASC)
            targets.append(IndexTarget(node, desc))
            if not self._accept(TokenType.COMMA):
                break
        self._expect(TokenType.RPAREN)
        return targets

    # CREATE SEQUENCE name [START [WITH] n] [INCREMENT [BY] n]
    #     [NO MINVALUE] [NO MAXVALUE] [CACHE n]
    def _parse_create_sequence_statement(self) -> Statement:
        self._expect(TokenType.CREATE)
        self._expect(TokenType.SEQUENCE)
        statement = CreateSequenceStatement(self._parse_sequence_name())

        while self.token.type not in (TokenType.SEMICOLON, TokenType.EOF):
            if self._accept(TokenType.START):
                self._accept(TokenType.WITH)
                statement.start_with = self._parse_signed_number()
            elif self._accept(TokenType.INCREMENT):
                self._accept(TokenType.BY)
                statement.increment_by = self._parse_signed_number()
            elif self._accept(TokenType.NO):
                if self._accept(TokenType.MINVALUE):
                    statement.no_minvalue = True
                elif self._accept(TokenType.MAXVALUE):
                    statement.no_maxvalue = True
                else:
                    raise self._unexpected("MINVALUE or MAXVALUE")
            elif self._accept(TokenType.CACHE):
                statement.cache = self._parse_signed_number()
            else:
                # Other options (AS type, MINVALUE n, ...) are not tracked
                self._advance()

        self._end_statement()
        return statement

    def _parse_signed_number(self) -> NumberLiteral:
        sign = ""
        if self.token.type == TokenType.MINUS:
            sign = "-"
            self._advance()
        return NumberLiteral(sign + self._expect(TokenType.NUMBER).literal)

    # ALTER SEQUENCE name OWNED BY [schema.]table.column
    def _parse_alter_sequence_statement(self) -> Optional[Statement]:
        self._expect(TokenType.ALTER)
        self._expect(TokenType.SEQUENCE)
        name = self._parse_sequence_name()
        if self.token.type == TokenType.OWNER:
            return None

        self._expect(TokenType.OWNED)
        self._expect(TokenType.BY)
        first = self._parse_identifier()
        self._expect(TokenType.DOT)
        second = self._parse_identifier()
        if self._accept(TokenType.DOT):
            column = self._parse_identifier()
            table_name = TableName(second, schema=first)
        else:
            column = second
            table_name = TableName(first)

        self._end_statement()
        return AlterSequenceStatement(name, table_name, column)

    # ALTER TABLE [ONLY] name ADD CONSTRAINT name {UNIQUE | PRIMARY KEY} (column, ...)
    # ALTER TABLE [ONLY] name ALTER [COLUMN] column SET DEFAULT expr
    def _parse_alter_table_statement(self) -> Optional[Statement]:
        self._expect(TokenType.ALTER)
        self._expect(TokenType.TABLE)
        only = self._accept(TokenType.ONLY)
        table_name = self._parse_table_name()
        if self.token.type == TokenType.OWNER:
            return None

        actions: List[AlterTableAction] = []
        while True:
            action = self._parse_alter_table_action()
            if action is not None:
                actions.append(action)
            if not self._accept(TokenType.COMMA):
                break
        if not actions:
            return None

        self._end_statement()
        return AlterTableStatement(table_name, actions, only=only)

    def _parse_alter_table_action(self) -> Optional[AlterTableAction]:
        if self._accept(TokenType.ADD):
            self._expect(TokenType.CONSTRAINT)
            name = self._parse_identifier()
            if self._accept(TokenType.UNIQUE):
                kind = ConstraintKind.UNIQUE
            elif self._accept(TokenType.PRIMARY):
                self._expect(TokenType.KEY)
                kind = ConstraintKind.PRIMARY_KEY
            elif self.token.type in (TokenType.FOREIGN, TokenType.CHECK, TokenType.EXCLUDE):
                self._skip_alter_table_action()
                return None
            else:
                raise self._unexpected("UNIQUE or PRIMARY KEY")
            return TableConstraint(kind, self._parse_column_list(), name=name)

        if self._accept(TokenType.ALTER):
            self._accept(TokenType.COLUMN)
            column = self._parse_identifier()
            self._expect(TokenType.SET)
            self._expect(TokenType.DEFAULT)
            return AlterColumnSetDefault(column, self._parse_expression(Precedence.LOWEST))

        raise self._unexpected("ADD or ALTER")

    def _skip_alter_table_action(self) -> None:
        depth = 0
        while self.token.type not in (TokenType.SEMICOLON, TokenType.EOF, TokenType.BACKSLASH_COMMAND):
            if self.token.type == TokenType.LPAREN:
                depth += 1
            elif self.token.type == TokenType.RPAREN:
                depth -= 1
            elif self.token.type == TokenType.COMMA and depth == 0:
                break
            self._advance()

    def _parse_column_list(self) -> List[Identifier]:
        self._expect(TokenType.LPAREN)
        columns = [self._parse_identifier()]
        while self._accept(TokenType.COMMA):
            columns.append(self._parse_identifier())
        self._expect(TokenType.RPAREN)
        return columns

    # SET search_path { = | TO } value [, ...]
    def _parse_set_statement(self) -> Optional[Statement]:
        self._expect(TokenType.SET)
        name = self._parse_identifier()
        if name.value.lower() != "search_path":
            return None
        if not (self._accept(TokenType.EQUAL) or self._accept(TokenType.TO)):
            raise self._unexpected("= or TO")

        values = [self._parse_expression(Precedence.LOWEST)]
        while self._accept(TokenType.COMMA):
            values.append(self._parse_expression(Precedence.LOWEST))
        self._end_statement()
        return SetStatement(name, values)

    # Names

    def _parse_identifier(self) -> Identifier:
        token = self.token
        if token.type == TokenType.IDENTIFIER:
            value = token.literal
            if value.startswith('"'):
                value = value[1:-1].replace('""', '"')
            self._advance()
            return Identifier(value)
        if self._is_identifier(token):
            self._advance()
            return Identifier(token.literal)
        raise self._unexpected("identifier")

    def _parse_table_name(self) -> TableName:
        first = self._parse_identifier()
        if self._accept(TokenType.DOT):
            return TableName(self._parse_identifier(), schema=first)
        return TableName(first)

    def _parse_sequence_name(self) -> SequenceName:
        first = self._parse_identifier()
        if self._accept(TokenType.DOT):
            return SequenceName(self._parse_identifier(), schema=first)
        return SequenceName(first)

    # Expressions

    def _current_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.token.type, Precedence.LOWEST)

    def _parse_expression(self, precedence: Precedence) -> Expression:
        prefix = self._prefix_fns.get(self.token.type)
        if prefix is None:
            if not self._is_identifier():
                raise self._error(self.token, f"no prefix parse function for {_describe(self.token)}")
            prefix = self._parse_identifier

        left = prefix()
        while precedence < self._current_precedence():
            left = self._infix_fns[self.token.type](left)
        return left

    def _parse_string_literal(self) -> Expression:
        token = self._expect(TokenType.STRING)
        return StringLiteral(token.literal)

    def _parse_number_literal(self) -> Expression:
        token = self._expect(TokenType.NUMBER)
        return NumberLiteral(token.literal)

    def _parse_boolean(self) -> Expression:
        value = self.token.type == TokenType.TRUE
        self._advance()
        return BooleanLiteral(value)

    def _parse_null(self) -> Expression:
        self._expect(TokenType.NULL)
        return NullLiteral()

    def _parse_grouped_expression(self) -> Expression:
        self._expect(TokenType.LPAREN)
        expression = self._parse_expression(Precedence.LOWEST)
        self._expect(TokenType.RPAREN)
        return GroupedExpression(expression)

    def _parse_prefix_expression(self) -> Expression:
        operator = self.token.literal
        self._advance()
        return PrefixExpression(operator, self._parse_expression(Precedence.PREFIX))

    def _parse_infix_expression(self, left: Expression) -> Expression:
        operator = self.token.literal
        precedence = self._current_precedence()
        self._advance()
        return InfixExpression(left, operator, self._parse_expression(precedence))

    def _parse_typecast_expression(self, left: Expression) -> Expression:
        self._expect(TokenType.TYPECAST)
        if self.token.type in _DATA_TYPE_TOKENS:
            return InfixExpression(left, "::", self._parse_data_type())
        return InfixExpression(left, "::", self._parse_expression(Precedence.TYPECAST))

    def _parse_is_expression(self, left: Expression) -> Expression:
        self._expect(TokenType.IS)
        operator = "IS"
        if self._accept(TokenType.NOT):
            operator = "IS NOT"
        return InfixExpression(left, operator, self._parse_expression(Precedence.IS))

    def _parse_call_expression(self, function: Expression) -> Expression:
        if not isinstance(function, Identifier):
            raise self._error(self.token, f"cannot call {function.to_sql()}")
        self._expect(TokenType.LPAREN)
        arguments: List[Expression] = []
        if not self._accept(TokenType.RPAREN):
            arguments.append(self._parse_expression(Precedence.LOWEST))
            while self._accept(TokenType.COMMA):
                arguments.append(self._parse_expression(Precedence.LOWEST))
            self._expect(TokenType.RPAREN)
        return CallExpression(function, arguments)


def parse_ddl(sql: str, input_name: str = "<string>") -> Tuple[DataDefinition, List[ParseError]]:
    """
    Parse DDL text.

    Returns:
        The parsed statements and the list of syntax errors (empty on success)
    """
    parser = Parser(Lexer(sql, input_name))
    data_definition = parser.parse_data_definition()
    return data_definition, parser.errors


__all__ = [
    "Parser",
    "Precedence",
    "parse_ddl",
]
