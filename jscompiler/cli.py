"""Command line entry point: compile a script into a Rust crate."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Union

from .generator import CodeGenerator
from .lexer import tokenize
from .parser import parse

DEFAULT_OUTPUT_DIR = "dist/rust"

SAMPLE_SOURCE = """
let city: string = "Lisbon";
console.log(city);

if (ready) {
    let year: number = 1999;
    console.log(year);
} else {
    console.log("not ready");
}

let contador: number = 3;
while (contador > 0) {
    console.log("Remaining " + contador);
    contador = contador - 1;
}

const colours: string[] = ["red", "green", "blue"];
console.log("Colours:", colours);

let area: number = (4 + 6) * 2;
console.log("Area:", area);

let share: number = 100 / (3 + 2);
console.log("Share:", share);
"""


def compile_source(source: str, output_dir: Union[str, Path]) -> Path:
    """Compile ``source`` into a crate in ``output_dir``; return the ``main.rs`` path."""
    statements = parse(tokenize(source))
    return CodeGenerator(output_dir).generate(statements)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jscompiler",
        description="Compile a typed script into a Rust crate.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="script to compile (defaults to a built-in sample)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT_DIR,
        help=f"directory of the generated crate (default: {DEFAULT_OUTPUT_DIR})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the compiler; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.input is None:
            source = SAMPLE_SOURCE
        else:
            source = Path(args.input).read_text(encoding="utf-8")
        print(source)
        main_path = compile_source(source, args.output)
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    print(f"Generated Rust code written to {main_path}")
    print("\nTo run it:")
    print(f"  cd {args.output}")
    print("  cargo run")
    return 0


if __name__ == "__main__":
    sys.exit(main())