import dataclasses

import pytest

from jscompiler.ast import (
    ArrayLiteral,
    ArrayType,
    Assignment,
    AssignmentExpression,
    BinaryOp,
    BinaryOperator,
    ConsoleLog,
    Identifier,
    IfStatement,
    NumberLiteral,
    Primitive,
    StringLiteral,
    VariableDeclaration,
    WhileStatement,
)


@pytest.mark.parametrize(
    "symbol, operator",
    [
        ("+", BinaryOperator.ADD),
        ("-", BinaryOperator.SUBTRACT),
        ("*", BinaryOperator.MULTIPLY),
        ("/", BinaryOperator.DIVIDE),
        ("<", BinaryOperator.LESS_THAN),
        (">", BinaryOperator.GREATER_THAN),
    ],
)
def test_operator_from_symbol(symbol, operator):
    assert BinaryOperator(symbol) is operator
    assert operator.value == symbol


@pytest.mark.parametrize(
    "name, primitive",
    [
        ("string", Primitive.STRING),
        ("number", Primitive.NUMBER),
        ("boolean", Primitive.BOOLEAN),
    ],
)
def test_primitive_from_annotation_name(name, primitive):
    assert Primitive(name) is primitive


def test_unknown_primitive_rejected():
    with pytest.raises(ValueError):
        Primitive("integer")


def test_structural_equality_of_expressions():
    a = BinaryOp(NumberLiteral(1), BinaryOperator.ADD, NumberLiteral(2))
    b = BinaryOp(NumberLiteral(1), BinaryOperator.ADD, NumberLiteral(2))
    c = BinaryOp(NumberLiteral(1), BinaryOperator.MULTIPLY, NumberLiteral(2))
    assert a == b
    assert not a == c


def test_array_type_equality():
    assert ArrayType(Primitive.NUMBER) == ArrayType(Primitive.NUMBER)
    assert not ArrayType(Primitive.NUMBER) == ArrayType(Primitive.STRING)
    assert not ArrayType(Primitive.NUMBER) == Primitive.NUMBER


def test_nodes_are_immutable():
    node = Identifier("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.name = "y"
    assert node.name == "x"
    assert node == Identifier("x")


def test_nodes_are_hashable():
    nodes = {
        ConsoleLog((StringLiteral('"a"'), Identifier("x"))),
        ConsoleLog((StringLiteral('"a"'), Identifier("x"))),
    }
    assert len(nodes) == 1


def test_optional_fields_default_to_none():
    decl = VariableDeclaration("x", Primitive.NUMBER)
    assert decl.value is None
    assert decl == VariableDeclaration("x", Primitive.NUMBER, None)
    stmt = IfStatement(Identifier("ok"), (Assignment("x", NumberLiteral(1)),))
    assert stmt.else_branch is None


def test_containers_default_empty():
    assert ArrayLiteral().elements == ()
    assert ConsoleLog().args == ()
    assert WhileStatement(Identifier("x")).body == ()


def test_assignment_expression_nesting():
    inner = AssignmentExpression("b", NumberLiteral(3))
    outer = AssignmentExpression("a", inner)
    assert outer.value.value == NumberLiteral(3)
    assert outer == AssignmentExpression("a", AssignmentExpression("b", NumberLiteral(3)))