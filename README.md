# jscompiler

jscompiler compiles a small, typed subset of JavaScript into a Rust program.
The output is a Cargo project: a `Cargo.toml` and a `src/main.rs`.

## Supported language

- Variable declarations with `let` or `const`, each with a type
  annotation: `string`, `number`, `boolean`, or an array of one of them
  (`string[]`).
- `console.log(...)` with any number of arguments, separated by commas.
- `if` / `else` and `while` blocks.
- Assignment to a name: `x = x + 1;`.
- Integer and string literals, array literals, and names.
- Parentheses and the binary operators `+ - * / < >`, where `*` and `/`
  bind tighter than `+` and `-`, which bind tighter than `<` and `>`.

## Installation

```
pip install .
```

## Command line

```
jscompiler [INPUT] [-o OUTPUT]
```

- `INPUT` is the script to compile. Without it, a built-in sample program
  is compiled.
- `-o`, `--output` is the directory of the generated project
  (default: `dist/rust`).

The command prints the source it compiles, then the path of the generated
`main.rs` and a note on running the project with `cargo run`. It exits with
status 1 if the input cannot be read or the output cannot be written.

## Library use

```python
from jscompiler.cli import compile_source

main_rs = compile_source('let nome: string = "Ana"; console.log(nome);', "out/rust")
```

`compile_source` returns the path of the written `main.rs`.

The stages can also be run one at a time:

```python
from jscompiler.lexer import tokenize
from jscompiler.parser import parse
from jscompiler.generator import CodeGenerator

statements = parse(tokenize("let x: number = (1 + 2) * 3;"))
print(CodeGenerator("out/rust").render(statements))
```

- `jscompiler.lexer.tokenize` returns a list of `Token` objects, each with a
  `kind` (a `TokenKind`), a `span` and a `value`.
- `jscompiler.parser.parse` (or `Parser(tokens).parse()`) returns a list of
  statements built from the dataclasses in `jscompiler.ast`.
- `CodeGenerator.render` returns the Rust source as a string;
  `CodeGenerator.generate` writes `Cargo.toml` and `src/main.rs` to the
  output directory and returns the path of `main.rs`.
  `CodeGenerator.generate_statement` and `CodeGenerator.generate_expression`
  render a single node.

## What it does not do

- It reports no syntax errors. Characters the tokenizer does not recognise
  are skipped, and a statement that fails to parse is dropped; compilation
  goes on with what remains.
- It does no type checking. Annotations are carried over to Rust types as
  written.
- Only a variable named `contador` is declared `mut` in the generated code;
  assigning to any other variable gives Rust code that will not compile.
- `true` and `false` are read as names, not as boolean literals.
- It does not build or run the generated project; that is left to Cargo.

## Development

```
pip install -e ".[test]"
pytest
```