"""Tokenizer for the typed script subset."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union

_I32_MAX = 2**31 - 1


class TokenKind(Enum):
    """Kinds of token; fixed tokens carry their literal text as value."""

    CONSOLE_LOG = "console.log"
    IF = "if"
    ELSE = "else"
    LET = "let"
    CONST = "const"
    WHILE = "while"
    EQUAL = "="
    COLON = ":"
    SEMICOLON = ";"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    OPEN_BRACE = "{"
    CLOSE_BRACE = "}"
    OPEN_BRACKET = "["
    CLOSE_BRACKET = "]"
    LESS_THAN = "<"
    GREATER_THAN = ">"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    COMMA = ","
    STRING = "<string>"
    IDENTIFIER = "<identifier>"
    NUMBER = "<number>"


@dataclass(frozen=True)
class Token:
    """A token with its half-open character span in the source.

    ``value`` is the raw text for strings (quotes included) and identifiers,
    the integer for numbers, and ``None`` for fixed tokens.
    """

    kind: TokenKind
    span: Tuple[int, int]
    value: Union[str, int, None] = None


_PATTERN_KINDS = (TokenKind.STRING, TokenKind.IDENTIFIER, TokenKind.NUMBER)

_FIXED_TOKENS = tuple(
    (kind.value, kind) for kind in TokenKind if kind not in _PATTERN_KINDS
)

_PATTERNS = (
    (TokenKind.STRING, re.compile(r'"(?:[^"\\]|\\.)*"')),
    (TokenKind.IDENTIFIER, re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")),
    (TokenKind.NUMBER, re.compile(r"[0-9]+")),
)

_WHITESPACE = re.compile(r"[ \t\n\f]+")


def _longest_match(source: str, pos: int) -> Tuple[Optional[TokenKind], int]:
    """Return the kind and end of the longest token at ``pos``.

    Fixed tokens win ties against patterns, so ``if`` is a keyword while
    ``iffy`` is an identifier.
    """
    best_kind: Optional[TokenKind] = None
    best_len = 0
    for literal, kind in _FIXED_TOKENS:
        if len(literal) > best_len and source.startswith(literal, pos):
            best_kind, best_len = kind, len(literal)
    for kind, pattern in _PATTERNS:
        match = pattern.match(source, pos)
        if match and match.end() - pos > best_len:
            best_kind, best_len = kind, match.end() - pos
    return best_kind, pos + best_len


def _scan(source: str) -> Iterator[Token]:
    pos = 0
    while pos < len(source):
        blank = _WHITESPACE.match(source, pos)
        if blank:
            pos = blank.end()
            continue

        kind, stop = _longest_match(source, pos)
        if kind is None:
            # Unrecognised input is dropped one character at a time.
            pos += 1
            continue

        text = source[pos:stop]
        span = (pos, stop)
        pos = stop

        if kind is TokenKind.NUMBER:
            number = int(text)
            if number > _I32_MAX:
                continue
            yield Token(kind, span, number)
        elif kind in (TokenKind.STRING, TokenKind.IDENTIFIER):
            yield Token(kind, span, text)
        else:
            yield Token(kind, span)


def tokenize(source: str) -> List[Token]:
    """Split ``source`` into tokens, silently skipping anything unrecognised."""
    return list(_scan(source))