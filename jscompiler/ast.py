"""Syntax tree for the typed script subset: types, expressions and statements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class Primitive(Enum):
    """Built-in scalar types, keyed by their annotation name."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class ArrayType:
    """An array annotation such as ``string[]``."""

    element: Type


class BinaryOperator(Enum):
    """Infix operators, keyed by their symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    LESS_THAN = "<"
    GREATER_THAN = ">"


@dataclass(frozen=True)
class StringLiteral:
    """A string literal; ``value`` is the raw text, surrounding quotes included."""

    value: str


@dataclass(frozen=True)
class NumberLiteral:
    """An integer literal."""

    value: int


@dataclass(frozen=True)
class Identifier:
    """A reference to a name."""

    name: str


@dataclass(frozen=True)
class BinaryOp:
    """An infix operation ``left op right``."""

    left: Expression
    op: BinaryOperator
    right: Expression


@dataclass(frozen=True)
class AssignmentExpression:
    """An assignment used as an expression, ``name = value``."""

    name: str
    value: Expression


@dataclass(frozen=True)
class ArrayLiteral:
    """An array literal ``[a, b, ...]``."""

    elements: Tuple[Expression, ...] = ()


@dataclass(frozen=True)
class ConsoleLog:
    """A ``console.log(...)`` call statement."""

    args: Tuple[Expression, ...] = ()


@dataclass(frozen=True)
class VariableDeclaration:
    """A ``let``/``const`` declaration with a type annotation."""

    name: str
    type_annotation: Type
    value: Optional[Expression] = None


@dataclass(frozen=True)
class IfStatement:
    """An ``if`` statement with an optional ``else`` branch."""

    condition: Expression
    then_branch: Tuple[Statement, ...] = ()
    else_branch: Optional[Tuple[Statement, ...]] = None


@dataclass(frozen=True)
class WhileStatement:
    """A ``while`` loop."""

    condition: Expression
    body: Tuple[Statement, ...] = ()


@dataclass(frozen=True)
class Assignment:
    """An assignment statement ``name = value;``."""

    name: str
    value: Expression


Type = Union[Primitive, ArrayType]

Expression = Union[
    StringLiteral,
    NumberLiteral,
    Identifier,
    BinaryOp,
    AssignmentExpression,
    ArrayLiteral,
]

Statement = Union[
    ConsoleLog,
    VariableDeclaration,
    IfStatement,
    WhileStatement,
    Assignment,
]