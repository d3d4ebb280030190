"""Emits a Rust crate from the syntax tree."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

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

CARGO_TOML = """[package]
name = "generated-code"
version = "0.1.0"
edition = "2021"

[dependencies]
"""

_PRIMITIVE_TYPES = {
    Primitive.STRING: "String",
    Primitive.NUMBER: "i32",
    Primitive.BOOLEAN: "bool",
}

# Variables that the generated code reassigns and so must declare mutable.
_MUTABLE_NAMES = frozenset({"contador"})

_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def _escape_char(char: str) -> str:
    if char in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[char]
    if not char.isprintable() and char != " ":
        return f"\\u{{{ord(char):x}}}"
    return char


def _rust_string_literal(text: str) -> str:
    """Quote ``text`` as a Rust string literal."""
    return '"' + "".join(_escape_char(char) for char in text) + '"'


def _unquote(raw: str) -> str:
    return raw.strip('"')


def _rust_type(type_annotation: Type) -> str:
    if isinstance(type_annotation, ArrayType):
        inner = _PRIMITIVE_TYPES.get(type_annotation.element, "Unknown")
        return f"Vec<{inner}>"
    return _PRIMITIVE_TYPES[type_annotation]


class CodeGenerator:
    """Writes statements out as a Cargo project in ``output_dir``."""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)

    def render(self, statements: Iterable[Statement]) -> str:
        """Return the text of ``main.rs`` for ``statements``."""
        body = "".join(self.generate_statement(stmt) for stmt in statements)
        return f"fn main() {{\n{body}}}\n"

    def generate(self, statements: Iterable[Statement]) -> Path:
        """Write ``Cargo.toml`` and ``src/main.rs``; return the path of ``main.rs``."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        (self.output_dir / "Cargo.toml").write_text(CARGO_TOML, encoding="utf-8")
        code = self.render(statements)
        src_dir = self.output_dir / "src"
        src_dir.mkdir(parents=True, exist_ok=True)
        main_path = src_dir / "main.rs"
        main_path.write_text(code, encoding="utf-8")
        return main_path

    def generate_statement(self, stmt: Statement) -> str:
        """Return the Rust code for one statement, newline-terminated."""
        if isinstance(stmt, ConsoleLog):
            return self._console_log(stmt)
        if isinstance(stmt, VariableDeclaration):
            value = (
                f" = {self.generate_expression(stmt.value)}"
                if stmt.value is not None
                else ""
            )
            mutable = "mut " if stmt.name in _MUTABLE_NAMES else ""
            return (
                f"    let {mutable}{stmt.name}: "
                f"{_rust_type(stmt.type_annotation)}{value};\n"
            )
        if isinstance(stmt, IfStatement):
            code = f"    if {self.generate_expression(stmt.condition)} {{\n"
            code += self._block(stmt.then_branch)
            code += "    }"
            if stmt.else_branch is not None:
                code += " else {\n"
                code += self._block(stmt.else_branch)
                code += "    }"
            return code + "\n"
        if isinstance(stmt, WhileStatement):
            return (
                f"    while {self.generate_expression(stmt.condition)} {{\n"
                f"{self._block(stmt.body)}    }}\n"
            )
        if isinstance(stmt, Assignment):
            return f"    {stmt.name} = {self.generate_expression(stmt.value)};\n"
        raise TypeError(f"not a statement: {stmt!r}")

    def generate_expression(self, expr: Expression) -> str:
        """Return the Rust code for one expression."""
        if isinstance(expr, StringLiteral):
            return f"String::from({_rust_string_literal(_unquote(expr.value))})"
        if isinstance(expr, NumberLiteral):
            return str(expr.value)
        if isinstance(expr, Identifier):
            return expr.name
        if isinstance(expr, BinaryOp):
            return self._binary_op(expr)
        if isinstance(expr, AssignmentExpression):
            return f"{expr.name} = {self.generate_expression(expr.value)}"
        if isinstance(expr, ArrayLiteral):
            inner = ",".join(self.generate_expression(e) for e in expr.elements)
            return f"vec![{inner}]"
        raise TypeError(f"not an expression: {expr!r}")

    def _block(self, statements: Iterable[Statement]) -> str:
        return "".join(self.generate_statement(stmt) for stmt in statements)

    def _console_log(self, stmt: ConsoleLog) -> str:
        if len(stmt.args) == 1:
            return f'    println!("{{:?}}", {self.generate_expression(stmt.args[0])});\n'
        format_string = ""
        arguments = []
        for arg in stmt.args:
            if isinstance(arg, StringLiteral):
                format_string += _unquote(arg.value)
            else:
                format_string += "{:?} "
                arguments.append(self.generate_expression(arg))
        format_string = format_string.rstrip()
        return f'    println!("{format_string}", {", ".join(arguments)});\n'

    def _binary_op(self, expr: BinaryOp) -> str:
        if (
            expr.op is BinaryOperator.ADD
            and isinstance(expr.left, StringLiteral)
            and isinstance(expr.right, (Identifier, NumberLiteral))
        ):
            prefix = _unquote(expr.left.value).replace('"', '\\"')
            right = self.generate_expression(expr.right)
            return f'format!("{prefix}{{}}", {right})'
        left = self.generate_expression(expr.left)
        right = self.generate_expression(expr.right)
        return f"{left} {expr.op.value} {right}"