"""Tokenizer: one balanced form of source text to a list of typed tokens."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    OPEN_PAREN = "open-paren"
    CLOSE_PAREN = "close-paren"
    SYMBOL = "symbol"
    STRING = "string"
    INTEGER = "integer"
    DOUBLE = "double"
    # Reserved for reader macros; lex() never produces it.
    QUOTE = "quote"


STRUCTURAL = (TokenKind.OPEN_PAREN, TokenKind.CLOSE_PAREN, TokenKind.QUOTE)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""

    @property
    def is_atomic(self) -> bool:
        return self.kind not in STRUCTURAL

    def source(self) -> str:
        """Text that lexes back to this token (strings lose escapes)."""
        if self.kind is TokenKind.OPEN_PAREN:
            return "("
        if self.kind is TokenKind.CLOSE_PAREN:
            return ")"
        if self.kind is TokenKind.QUOTE:
            return "'"
        if self.kind is TokenKind.STRING:
            return f'"{self.text}"'
        return self.text

    def __str__(self):
        if self.is_atomic:
            return f"{self.kind.value}({self.text})"
        return self.kind.value


OPEN_PAREN = Token(TokenKind.OPEN_PAREN)
CLOSE_PAREN = Token(TokenKind.CLOSE_PAREN)

WHITESPACE = ' \t\r\n'


def classify(word: str) -> Token:
    """Integer if it parses as one, else double, else symbol."""
    # Swift literals never hold digit separators or non-ASCII digits
    if not word.isascii() or '_' in word:
        return Token(TokenKind.SYMBOL, word)
    try:
        int(word)
        return Token(TokenKind.INTEGER, word)
    except ValueError:
        pass
    try:
        if math.isfinite(float(word)):
            return Token(TokenKind.DOUBLE, word)
    except ValueError:
        pass
    return Token(TokenKind.SYMBOL, word)


def lex(form: str) -> list[Token]:
    tokens = []
    word = []
    in_string = False

    def flush():
        text = "".join(word).strip()
        word.clear()
        if text:
            tokens.append(classify(text))

    for ch in form.strip():
        if in_string and ch != '"':
            word.append(ch)
            continue

        if ch in WHITESPACE:
            flush()
        elif ch == ',':
            continue
        elif ch == '(':
            flush()
            tokens.append(OPEN_PAREN)
        elif ch == ')':
            flush()
            tokens.append(CLOSE_PAREN)
        elif ch == '"':
            if in_string:
                tokens.append(Token(TokenKind.STRING, "".join(word)))
                word.clear()
            else:
                flush()
            in_string = not in_string
        else:
            word.append(ch)

    if in_string:
        # unterminated literal keeps whatever was collected
        tokens.append(Token(TokenKind.STRING, "".join(word)))
    else:
        flush()

    logger.debug("lexed %d tokens from %r", len(tokens), form[:30])
    return tokens


def unlex(tokens: list[Token]) -> str:
    """Join tokens back into source text, space separated."""
    return " ".join(t.source() for t in tokens)
