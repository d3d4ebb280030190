"""Compile a small typed JavaScript subset into a Rust Cargo project.

Modules: ``lexer`` (tokens), ``parser`` (syntax tree from tokens), ``ast``
(syntax tree types), ``generator`` (Rust code output) and ``cli`` (command
line).
"""

__version__ = "0.1.0"
__all__ = ["ast", "lexer", "parser", "generator", "cli"]