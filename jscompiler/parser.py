"""Recursive-descent parser producing the syntax tree from tokens.

Malformed statements are dropped and parsing resumes at the next token,
so the parser never fails on bad input.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .ast import (
    ArrayLiteral,
    ArrayType,
    Assignment,
    AssignmentExpression,
    BinaryOp,
    BinaryOperator,
    ConsoleLog,
    Expression,
    Identifier,
    IfStatement,
    NumberLiteral,
    Primitive,
    Statement,
    StringLiteral,
    Type,
    VariableDeclaration,
    WhileStatement,
)
from .lexer import Token, TokenKind

logger = logging.getLogger(__name__)

_BINARY_OPERATORS = {
    TokenKind.PLUS: (1, BinaryOperator.ADD),
    TokenKind.MINUS: (1, BinaryOperator.SUBTRACT),
    TokenKind.STAR: (2, BinaryOperator.MULTIPLY),
    TokenKind.SLASH: (2, BinaryOperator.DIVIDE),
    TokenKind.LESS_THAN: (0, BinaryOperator.LESS_THAN),
    TokenKind.GREATER_THAN: (0, BinaryOperator.GREATER_THAN),
}

# Stands in for any token read past either end of the stream.
_MISSING = Token(TokenKind.SEMICOLON, (0, 0))


class _ParseFailure(Exception):
    """The construct being parsed is malformed."""


class Parser:
    """Parses a token stream into statements."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens = list(tokens)
        self._current = 0

    def parse(self) -> List[Statement]:
        """Parse all remaining tokens, skipping statements that fail to parse."""
        statements = []
        while not self._at_end():
            statement = self._statement()
            if statement is not None:
                statements.append(statement)
        return statements

    # statements

    def _statement(self) -> Optional[Statement]:
        kind = self._peek_kind()
        try:
            if kind is TokenKind.CONSOLE_LOG:
                return self._console_log()
            if kind in (TokenKind.LET, TokenKind.CONST):
                return self._variable_declaration()
            if kind is TokenKind.IF:
                return self._if_statement()
            if kind is TokenKind.WHILE:
                return self._while_statement()
            if kind is TokenKind.IDENTIFIER and self._lookahead_is(TokenKind.EQUAL):
                return self._assignment()
        except _ParseFailure:
            return None
        self._advance()
        return None

    def _console_log(self) -> ConsoleLog:
        self._advance()
        self._expect(TokenKind.OPEN_PAREN)
        args = []
        while self._peek_kind() is not TokenKind.CLOSE_PAREN:
            args.append(self._expression())
            if self._peek_kind() is TokenKind.COMMA:
                self._advance()
            else:
                break
        self._expect(TokenKind.CLOSE_PAREN)
        self._expect(TokenKind.SEMICOLON)
        return ConsoleLog(tuple(args))

    def _variable_declaration(self) -> VariableDeclaration:
        self._advance()
        name = self._identifier_name(self._advance())
        self._expect(TokenKind.COLON)
        type_annotation = self._type()
        value = None
        if self._match(TokenKind.EQUAL):
            value = self._expression()
        self._expect(TokenKind.SEMICOLON)
        return VariableDeclaration(name, type_annotation, value)

    def _if_statement(self) -> IfStatement:
        self._advance()
        condition = self._parenthesised_condition()
        then_branch = self._block()
        else_branch = None
        if self._match(TokenKind.ELSE):
            else_branch = self._block()
        return IfStatement(condition, then_branch, else_branch)

    def _while_statement(self) -> WhileStatement:
        self._advance()
        condition = self._parenthesised_condition()
        return WhileStatement(condition, self._block())

    def _assignment(self) -> Assignment:
        name = self._identifier_name(self._advance())
        self._expect(TokenKind.EQUAL)
        value = self._expression()
        self._expect(TokenKind.SEMICOLON)
        return Assignment(name, value)

    def _parenthesised_condition(self) -> Expression:
        self._expect(TokenKind.OPEN_PAREN)
        condition = self._expression()
        self._expect(TokenKind.CLOSE_PAREN)
        return condition

    def _block(self) -> Tuple[Statement, ...]:
        self._expect(TokenKind.OPEN_BRACE)
        statements = []
        while not self._check(TokenKind.CLOSE_BRACE) and not self._at_end():
            statement = self._statement()
            if statement is not None:
                statements.append(statement)
        self._expect(TokenKind.CLOSE_BRACE)
        return tuple(statements)

    # expressions

    def _expression(self) -> Expression:
        expr = self._binary(0)
        if self._lookahead_is(TokenKind.EQUAL):
            if not isinstance(expr, Identifier):
                logger.error("left-hand side of assignment is not an identifier")
                raise _ParseFailure
            self._advance()
            return AssignmentExpression(expr.name, self._expression())
        return expr

    def _binary(self, min_precedence: int) -> Expression:
        left = self._primary()
        while True:
            entry = _BINARY_OPERATORS.get(self._peek_kind())
            if entry is None:
                break
            precedence, op = entry
            if precedence < min_precedence:
                break
            self._advance()
            right = self._binary(precedence + 1)
            left = BinaryOp(left, op, right)
        return left

    def _primary(self) -> Expression:
        token = self._advance()
        match token.kind:
            case TokenKind.STRING:
                return StringLiteral(token.value)
            case TokenKind.NUMBER:
                return NumberLiteral(token.value)
            case TokenKind.IDENTIFIER:
                return Identifier(token.value)
            case TokenKind.OPEN_BRACKET:
                return self._array_literal()
            case TokenKind.OPEN_PAREN:
                expr = self._expression()
                self._expect(TokenKind.CLOSE_PAREN)
                return expr
        raise _ParseFailure

    def _array_literal(self) -> ArrayLiteral:
        elements = []
        while not self._check(TokenKind.CLOSE_BRACKET) and not self._at_end():
            try:
                elements.append(self._expression())
            except _ParseFailure:
                break
            if not self._match(TokenKind.COMMA):
                break
        self._expect(TokenKind.CLOSE_BRACKET)
        return ArrayLiteral(tuple(elements))

    def _type(self) -> Type:
        token = self._advance()
        if token.kind is not TokenKind.IDENTIFIER:
            raise _ParseFailure
        try:
            base: Type = Primitive(token.value)
        except ValueError:
            raise _ParseFailure from None
        if self._check(TokenKind.OPEN_BRACKET):
            self._advance()
            self._expect(TokenKind.CLOSE_BRACKET)
            return ArrayType(base)
        return base

    # token cursor

    @staticmethod
    def _identifier_name(token: Token) -> str:
        if token.kind is not TokenKind.IDENTIFIER:
            raise _ParseFailure
        return token.value

    def _at_end(self) -> bool:
        return self._current >= len(self._tokens)

    def _peek_kind(self) -> TokenKind:
        if self._at_end():
            return _MISSING.kind
        return self._tokens[self._current].kind

    def _advance(self) -> Token:
        if not self._at_end():
            self._current += 1
        index = max(self._current - 1, 0)
        return self._tokens[index] if index < len(self._tokens) else _MISSING

    def _check(self, kind: TokenKind) -> bool:
        return not self._at_end() and self._peek_kind() is kind

    def _match(self, kind: TokenKind) -> bool:
        if self._check(kind):
            self._advance()
            return True
        return False

    def _expect(self, kind: TokenKind) -> None:
        if not self._match(kind):
            raise _ParseFailure

    def _lookahead_is(self, kind: TokenKind) -> bool:
        following = self._current + 1
        return following < len(self._tokens) and self._tokens[following].kind is kind


def parse(tokens: Iterable[Token]) -> List[Statement]:
    """Parse ``tokens`` into a list of statements."""
    return Parser(tokens).parse()